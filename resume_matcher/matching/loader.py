"""Loading job postings and work history from YAML or JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from resume_matcher.matching.config import MatchingConfig, get_matching_config
from resume_matcher.matching.history import build_entry
from resume_matcher.matching.models import JobRequirement, WorkHistoryEntry
from resume_matcher.utils.logging import get_logger

logger = get_logger(__name__)


class MatchingLoader:
    """Load and validate matching inputs from disk."""

    def __init__(self, config: MatchingConfig | None = None) -> None:
        self.config = config or get_matching_config()

    def load_job(self, path: Path | str) -> JobRequirement:
        """Load a job posting from YAML or JSON.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file cannot be parsed or is not a mapping.
            pydantic.ValidationError: If the posting is missing fields.
        """
        job_path = Path(path)
        data = self._load(job_path)
        if not isinstance(data, dict):
            raise ValueError(f"Job posting must be a mapping/dict: {job_path}")
        return JobRequirement.model_validate(data)

    def load_work_history(self, path: Path | str | None = None) -> list[WorkHistoryEntry]:
        """Load work history entries from YAML or JSON.

        The file holds either a list of entries or a mapping with a
        ``work_history`` list.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file cannot be parsed or has the wrong shape.
            ValidationError: If an entry is malformed or lists no skills
                while ``require_entry_skills`` is enabled.
        """
        history_path = Path(path) if path is not None else self.config.history_path
        data = self._load(history_path)

        if isinstance(data, dict):
            if "work_history" not in data:
                raise ValueError(
                    "Work history mapping must contain a 'work_history' list: "
                    f"{history_path}"
                )
            data = data["work_history"]
        if data is None:
            data = []
        if not isinstance(data, list):
            raise ValueError(f"Work history must be a list of entries: {history_path}")

        entries = [
            build_entry(item, require_skills=self.config.require_entry_skills)
            for item in data
        ]
        logger.debug("Loaded %d work history entries from %s", len(entries), history_path)
        return entries

    def _load(self, path: Path) -> Any:
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        suffix = path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            return self._load_yaml(path)
        if suffix == ".json":
            return self._load_json(path)
        return self._load_unknown(path)

    def _load_yaml(self, path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML file: {path}") from e

    def _load_json(self, path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON file: {path}") from e

    def _load_unknown(self, path: Path) -> Any:
        """Auto-detect JSON or YAML when the file extension is unknown."""
        raw = path.read_text(encoding="utf-8")
        raw_stripped = raw.lstrip()

        # Try JSON first if it looks like JSON, otherwise fall back to YAML.
        if raw_stripped.startswith("{") or raw_stripped.startswith("["):
            try:
                return json.loads(raw)
            except json.JSONDecodeError:
                pass

        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid file format: {path}") from e
