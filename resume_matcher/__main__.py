"""Main entry point for Resume Matcher."""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from resume_matcher import __version__
from resume_matcher.config.settings import Settings
from resume_matcher.matching.config import MatchingConfig
from resume_matcher.matching.llm import MatchAnalysisLLMError
from resume_matcher.matching.loader import MatchingLoader
from resume_matcher.matching.service import MatchingService
from resume_matcher.matching.skills import count_skills
from resume_matcher.utils.logging import configure_logging


def _percentage(value: str) -> float:
    percentage = float(value)
    if not (0.0 <= percentage <= 100.0):
        raise argparse.ArgumentTypeError("--min-percentage must be between 0 and 100")
    return percentage


def _dump_json(payload: object) -> str:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        if isinstance(value, (set, frozenset)):
            return sorted(value)
        return str(value)

    return json.dumps(payload, indent=2, default=_default)


def _resolve_out(settings: Settings, out: Path | None) -> Path | None:
    if out is None or out.is_absolute():
        return out
    return settings.output_dir / out


def _emit(text: str, out: Path | None) -> None:
    if out is None:
        print(text)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")


def _add_history_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--history",
        type=Path,
        default=None,
        help="Path to work history (YAML or JSON); defaults to MATCHING_HISTORY_PATH",
    )


def _add_job_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--job",
        type=Path,
        required=True,
        help="Path to job posting (YAML or JSON)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="resume-matcher",
        description="Resume Matcher: score work history against job postings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m resume_matcher match --job job.yaml --history history.yaml
  python -m resume_matcher resume --job job.yaml --history history.yaml
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available operating modes",
    )

    match_parser = subparsers.add_parser(
        "match",
        help="Score every work history entry against a job posting",
    )
    _add_job_argument(match_parser)
    _add_history_argument(match_parser)
    match_parser.add_argument(
        "--min-percentage",
        type=_percentage,
        default=None,
        help="Drop entries below this match percentage (0-100)",
    )
    match_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the JSON report to this file (relative paths go under OUTPUT_DIR)",
    )

    profile_parser = subparsers.add_parser(
        "profile",
        help="Show work history grouped by employer and title",
    )
    _add_history_argument(profile_parser)

    resume_parser = subparsers.add_parser(
        "resume",
        help="Render a plain-text resume for a job posting",
    )
    _add_job_argument(resume_parser)
    _add_history_argument(resume_parser)
    resume_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the resume to this file (relative paths go under OUTPUT_DIR)",
    )

    skills_parser = subparsers.add_parser(
        "skills",
        help="Count how many work history entries mention each skill",
    )
    _add_history_argument(skills_parser)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Ask the configured LLM for a match analysis",
    )
    _add_job_argument(analyze_parser)
    _add_history_argument(analyze_parser)

    return parser


def _run(
    parsed: argparse.Namespace, settings: Settings, config: MatchingConfig
) -> None:
    loader = MatchingLoader(config=config)
    service = MatchingService(config=config)
    entries = loader.load_work_history(parsed.history)

    if parsed.mode == "profile":
        _emit(_dump_json(service.profile(entries)), None)
        return

    if parsed.mode == "skills":
        _emit(_dump_json(count_skills(entry.skills for entry in entries)), None)
        return

    job = loader.load_job(parsed.job)

    if parsed.mode == "match":
        report = service.match(job, entries)
        if parsed.min_percentage is not None:
            report = [
                row
                for row in report
                if row.result.match_percentage >= parsed.min_percentage
            ]
        _emit(
            _dump_json({"job": job, "matches": report}),
            _resolve_out(settings, parsed.out),
        )
    elif parsed.mode == "resume":
        _emit(service.resume(job, entries), _resolve_out(settings, parsed.out))
    elif parsed.mode == "analyze":
        _emit(service.analyze(job, entries), None)


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
        config = MatchingConfig()
    except PydanticValidationError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    logger = configure_logging(level=parsed.log_level or settings.log_level)

    if parsed.mode is None:
        parser.print_help()
        return 1

    logger.debug("Resume Matcher v%s running %s", __version__, parsed.mode)

    try:
        _run(parsed, settings, config)
    except (FileNotFoundError, ValueError) as e:
        # Skill and pydantic validation errors are both ValueErrors.
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except MatchAnalysisLLMError as e:
        print(f"LLM analysis failed: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
