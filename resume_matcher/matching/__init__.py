"""Skill matching between work history and job postings.

Public API:
    - normalize_skills: Canonical skill sets from free text
    - score_match: Skill overlap between a job and a candidate
    - aggregate_work_history: Group entries by employer and title
    - build_match_report: Score every entry against a job
    - MatchingService: Report, resume, and LLM analysis facade
    - MatchingConfig: Configuration settings
"""

from resume_matcher.matching.config import (
    MatchingConfig,
    get_matching_config,
    reset_matching_config,
)
from resume_matcher.matching.history import (
    aggregate_work_history,
    build_entry,
    render_resume,
)
from resume_matcher.matching.models import (
    EntryMatch,
    JobRequirement,
    MatchResult,
    Profile,
    ProfileGroup,
    SubEntry,
    WorkHistoryEntry,
)
from resume_matcher.matching.report import (
    best_match,
    build_match_report,
    candidates_to_notify,
    rank_report,
)
from resume_matcher.matching.scorer import score_match
from resume_matcher.matching.service import MatchingService
from resume_matcher.matching.skills import (
    SkillSet,
    ValidationError,
    count_skills,
    normalize_skill,
    normalize_skills,
)

__all__ = [
    "MatchingService",
    "MatchingConfig",
    "get_matching_config",
    "reset_matching_config",
    "normalize_skill",
    "normalize_skills",
    "count_skills",
    "SkillSet",
    "ValidationError",
    "score_match",
    "aggregate_work_history",
    "build_entry",
    "render_resume",
    "build_match_report",
    "rank_report",
    "best_match",
    "candidates_to_notify",
    "WorkHistoryEntry",
    "JobRequirement",
    "MatchResult",
    "EntryMatch",
    "SubEntry",
    "ProfileGroup",
    "Profile",
]
