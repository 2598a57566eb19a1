"""Skill set normalization.

Every place that parses user-supplied skills goes through
:func:`normalize_skills`, so case and whitespace are handled the same way
for job postings, work history entries, and loaded files.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable

SkillSet = frozenset[str]

RawSkills = str | Iterable[str] | None

_WHITESPACE_RE = re.compile(r"\s+")


class ValidationError(ValueError):
    """Raised when skill input is malformed or unexpectedly empty."""


def normalize_skill(skill: str) -> str:
    """Normalize a single skill token.

    Lowercases, trims, and collapses inner whitespace. May return an empty
    string; callers drop those.
    """
    return _WHITESPACE_RE.sub(" ", skill.strip().lower())


def _iter_tokens(raw: RawSkills) -> Iterable[str]:
    if raw is None:
        return
    if isinstance(raw, str):
        yield from raw.split(",")
        return
    if isinstance(raw, (bytes, bytearray)) or not isinstance(raw, Iterable):
        raise ValidationError(
            f"Skills must be a comma-separated string or a list of strings "
            f"(got {type(raw).__name__})"
        )
    for item in raw:
        if not isinstance(item, str):
            raise ValidationError(
                f"Skill values must be strings (got {type(item).__name__})"
            )
        yield from item.split(",")


def normalize_skills(raw: RawSkills, *, require_non_empty: bool = False) -> SkillSet:
    """Turn free-text skills into a canonical skill set.

    Accepts a comma-separated string, an iterable of strings (each of which
    may itself contain commas), or None. Tokens are trimmed, lowercased,
    deduplicated, and empty tokens are dropped. Because a skill set is itself
    an iterable of strings, normalizing an already-normalized set is a no-op.

    Raises:
        ValidationError: If ``raw`` is not a supported type, or if the result
            is empty and ``require_non_empty`` is set.
    """
    skills = frozenset(
        token for token in map(normalize_skill, _iter_tokens(raw)) if token
    )
    if require_non_empty and not skills:
        raise ValidationError(
            "Skills must be a comma-separated list of non-empty values"
        )
    return skills


def count_skills(skill_lists: Iterable[RawSkills]) -> dict[str, int]:
    """Count how many entries mention each skill.

    Each element of ``skill_lists`` is one entry's skills. A skill repeated
    within a single entry counts once. The result is ordered by descending
    count, then by skill name.
    """
    counts: Counter[str] = Counter()
    for raw in skill_lists:
        counts.update(normalize_skills(raw))
    return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))
