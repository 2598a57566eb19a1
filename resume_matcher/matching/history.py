"""Work history grouping and resume text rendering."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from resume_matcher.matching.models import (
    JobRequirement,
    Profile,
    ProfileGroup,
    SubEntry,
    WorkHistoryEntry,
)
from resume_matcher.matching.skills import ValidationError

RawEntry = WorkHistoryEntry | Mapping[str, Any]


def build_entry(raw: RawEntry, *, require_skills: bool = False) -> WorkHistoryEntry:
    """Validate one raw entry into a WorkHistoryEntry.

    Raises:
        ValidationError: If the entry is malformed, or lists no skills while
            ``require_skills`` is set.
    """
    if isinstance(raw, WorkHistoryEntry):
        entry = raw
    elif isinstance(raw, Mapping):
        try:
            entry = WorkHistoryEntry.model_validate(dict(raw))
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid work history entry: {e}") from e
    else:
        raise ValidationError(
            f"Work history entries must be mappings (got {type(raw).__name__})"
        )

    if require_skills and not entry.skills:
        raise ValidationError(
            f"Work history entry for {entry.title} at {entry.employer} "
            "must list at least one skill"
        )
    return entry


def aggregate_work_history(entries: Iterable[RawEntry]) -> Profile:
    """Group entries by (employer, title) into a profile.

    Groups appear in first-seen order and keep the dates of their first
    entry. Every entry contributes one sub-entry, in input order.
    """
    groups: dict[tuple[str, str], ProfileGroup] = {}

    for raw in entries:
        entry = build_entry(raw)
        key = (entry.employer, entry.title)
        group = groups.get(key)
        if group is None:
            group = ProfileGroup(
                employer=entry.employer,
                title=entry.title,
                start_date=entry.start_date,
                end_date=entry.end_date,
            )
            groups[key] = group
        group.entries.append(
            SubEntry(description=entry.description, skills=entry.skills)
        )

    return Profile(groups=list(groups.values()))


def render_resume(job: JobRequirement, profile: Profile) -> str:
    """Render a plain-text resume of the profile targeted at a job."""
    lines = [f"Resume for {job.title} at {job.employer}", "", "Work Experience:"]

    for group in profile.groups:
        end = group.end_date.isoformat() if group.end_date else "Present"
        lines.append(f"{group.title} at {group.employer}")
        lines.append(f"{group.start_date.isoformat()} - {end}")
        for sub_entry in group.entries:
            lines.append(f"- {sub_entry.description}")
            lines.append(f"  Skills: {', '.join(sorted(sub_entry.skills))}")
        lines.append("")

    return "\n".join(lines) + "\n"
