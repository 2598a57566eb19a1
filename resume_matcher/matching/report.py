"""Match reports across work history entries."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import TypeVar

from resume_matcher.matching.models import EntryMatch, JobRequirement, WorkHistoryEntry
from resume_matcher.matching.scorer import score_match
from resume_matcher.matching.skills import RawSkills, normalize_skills

K = TypeVar("K", bound=Hashable)


def build_match_report(
    job: JobRequirement, entries: Sequence[WorkHistoryEntry]
) -> list[EntryMatch]:
    """Score every entry against the job, preserving input order."""
    return [
        EntryMatch(entry=entry, result=score_match(job.required_skills, entry.skills))
        for entry in entries
    ]


def rank_report(report: Iterable[EntryMatch]) -> list[EntryMatch]:
    """Return the report sorted by match percentage, highest first.

    Ties keep their original order.
    """
    return sorted(report, key=lambda row: row.result.match_percentage, reverse=True)


def best_match(report: Iterable[EntryMatch]) -> EntryMatch | None:
    """Return the highest-scoring row (first one on ties), or None."""
    ranked = rank_report(report)
    return ranked[0] if ranked else None


def candidates_to_notify(
    job: JobRequirement, candidate_skills: Mapping[K, RawSkills]
) -> list[K]:
    """Return the candidates sharing at least one required skill with a job."""
    required = job.required_skills
    return [
        key
        for key, skills in candidate_skills.items()
        if required & normalize_skills(skills)
    ]
