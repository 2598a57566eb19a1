"""Matching service tying the skill-matching core to its collaborators."""

from __future__ import annotations

from collections.abc import Sequence

from resume_matcher.matching.config import MatchingConfig, get_matching_config
from resume_matcher.matching.history import aggregate_work_history, render_resume
from resume_matcher.matching.llm import MatchAnalysisLLM
from resume_matcher.matching.models import (
    EntryMatch,
    JobRequirement,
    Profile,
    WorkHistoryEntry,
)
from resume_matcher.matching.prompts import (
    MATCH_ANALYSIS_SYSTEM_PROMPT,
    build_analysis_prompt,
)
from resume_matcher.matching.report import best_match, build_match_report, rank_report
from resume_matcher.utils.logging import get_logger

logger = get_logger(__name__)


class MatchingService:
    """Service for match reports, grouped profiles, resumes, and LLM analysis."""

    def __init__(
        self,
        config: MatchingConfig | None = None,
        llm: MatchAnalysisLLM | None = None,
    ) -> None:
        self.config = config or get_matching_config()
        self._llm = llm

    @property
    def llm(self) -> MatchAnalysisLLM:
        if self._llm is None:
            self._llm = MatchAnalysisLLM(config=self.config)
        return self._llm

    def match(
        self, job: JobRequirement, entries: Sequence[WorkHistoryEntry]
    ) -> list[EntryMatch]:
        """Build the match report for a job, ranked if configured."""
        report = build_match_report(job, entries)
        if self.config.rank_results:
            report = rank_report(report)

        top = best_match(report)
        if top is None:
            logger.info("No work history entries to match against %s", job.title)
        else:
            logger.info(
                "Matched %d entries against %s at %s (best %.1f%%: %s at %s)",
                len(report),
                job.title,
                job.employer,
                top.result.match_percentage,
                top.entry.title,
                top.entry.employer,
            )
        return report

    def profile(self, entries: Sequence[WorkHistoryEntry]) -> Profile:
        """Group entries into a profile."""
        return aggregate_work_history(entries)

    def resume(
        self, job: JobRequirement, entries: Sequence[WorkHistoryEntry]
    ) -> str:
        """Render a plain-text resume for a job."""
        return render_resume(job, self.profile(entries))

    def analyze(
        self, job: JobRequirement, entries: Sequence[WorkHistoryEntry]
    ) -> str:
        """Ask the LLM for a free-text match analysis.

        Raises:
            MatchAnalysisLLMError: If the LLM call fails.
        """
        prompt = build_analysis_prompt(job=job, profile=self.profile(entries))
        logger.info("Requesting LLM match analysis for %s at %s", job.title, job.employer)
        return self.llm.complete(prompt=prompt, system_prompt=MATCH_ANALYSIS_SYSTEM_PROMPT)
