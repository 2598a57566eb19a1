"""Data models for skill matching."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_serializer, field_validator

from resume_matcher.matching.skills import SkillSet, normalize_skills


class WorkHistoryEntry(BaseModel):
    """One work history entry: a role plus one description and its skills.

    ``company``/``position`` are accepted as aliases for ``employer``/``title``.
    Skills may be given as a comma-separated string or a list and are
    normalized on validation.
    """

    employer: str = Field(
        ...,
        validation_alias=AliasChoices("employer", "company"),
        description="Employer name",
    )
    title: str = Field(
        ...,
        validation_alias=AliasChoices("title", "position"),
        description="Job title",
    )
    start_date: date = Field(..., description="Start date")
    end_date: date | None = Field(default=None, description="End date (None = current)")
    description: str = Field(default="", description="What was done in this role")
    skills: SkillSet = Field(
        default_factory=frozenset, description="Normalized skills used"
    )

    @field_validator("skills", mode="before")
    @classmethod
    def normalize_skill_input(cls, v: Any) -> SkillSet:
        """Normalize raw skill text into a skill set."""
        return normalize_skills(v)

    @field_serializer("skills")
    def serialize_skills(self, skills: SkillSet) -> list[str]:
        return sorted(skills)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> WorkHistoryEntry:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class JobRequirement(BaseModel):
    """A job posting reduced to what matching needs."""

    title: str = Field(..., description="Job title")
    employer: str = Field(
        ...,
        validation_alias=AliasChoices("employer", "company"),
        description="Hiring company",
    )
    required_skills: SkillSet = Field(
        default_factory=frozenset, description="Normalized required skills"
    )
    description: str = Field(default="", description="Job description text")

    @field_validator("required_skills", mode="before")
    @classmethod
    def normalize_required_skills(cls, v: Any) -> SkillSet:
        """Normalize raw skill text into a skill set."""
        return normalize_skills(v)

    @field_serializer("required_skills")
    def serialize_required_skills(self, skills: SkillSet) -> list[str]:
        return sorted(skills)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> JobRequirement:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


@dataclass(frozen=True)
class MatchResult:
    """Skill overlap between one job and one work history entry."""

    matched_skills: SkillSet
    match_percentage: float

    def __post_init__(self) -> None:
        if not (0.0 <= self.match_percentage <= 100.0):
            raise ValueError(
                "match_percentage must be between 0 and 100 "
                f"(got {self.match_percentage})"
            )

    def missing_skills(self, required: SkillSet) -> SkillSet:
        """Return the required skills this result did not match."""
        return frozenset(required - self.matched_skills)

    def to_dict(self) -> dict:
        return {
            "matched_skills": sorted(self.matched_skills),
            "match_percentage": self.match_percentage,
        }


@dataclass(frozen=True)
class EntryMatch:
    """A work history entry with its match result attached."""

    entry: WorkHistoryEntry
    result: MatchResult

    def to_dict(self) -> dict:
        return {**self.entry.to_dict(), **self.result.to_dict()}


@dataclass
class SubEntry:
    """One description/skills pair inside a grouped role."""

    description: str
    skills: SkillSet = field(default_factory=frozenset)

    def to_dict(self) -> dict:
        return {"description": self.description, "skills": sorted(self.skills)}


@dataclass
class ProfileGroup:
    """All entries sharing the same employer and title."""

    employer: str
    title: str
    start_date: date
    end_date: date | None = None
    entries: list[SubEntry] = field(default_factory=list)

    @property
    def key(self) -> tuple[str, str]:
        return (self.employer, self.title)

    def to_dict(self) -> dict:
        return {
            "employer": self.employer,
            "title": self.title,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "entries": [entry.to_dict() for entry in self.entries],
        }


@dataclass
class Profile:
    """A candidate's work history grouped by (employer, title)."""

    groups: list[ProfileGroup] = field(default_factory=list)

    def all_skills(self) -> SkillSet:
        """Union of skills across every grouped entry."""
        skills: set[str] = set()
        for group in self.groups:
            for entry in group.entries:
                skills.update(entry.skills)
        return frozenset(skills)

    def to_dict(self) -> dict:
        return {"groups": [group.to_dict() for group in self.groups]}
