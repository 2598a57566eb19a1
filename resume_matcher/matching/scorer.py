"""Skill overlap scoring."""

from __future__ import annotations

from resume_matcher.matching.models import MatchResult
from resume_matcher.matching.skills import RawSkills, normalize_skills


def score_match(required: RawSkills, candidate: RawSkills) -> MatchResult:
    """Score a candidate's skills against a job's required skills.

    The percentage is the share of required skills the candidate has. A job
    with no required skills scores 0.
    """
    required_set = normalize_skills(required)
    candidate_set = normalize_skills(candidate)

    matched = required_set & candidate_set
    if not required_set:
        return MatchResult(matched_skills=matched, match_percentage=0.0)

    return MatchResult(
        matched_skills=matched,
        match_percentage=100.0 * len(matched) / len(required_set),
    )
