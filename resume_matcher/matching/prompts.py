"""Prompt builders for LLM-based match analysis."""

from __future__ import annotations

import json

from resume_matcher.matching.models import JobRequirement, Profile

MATCH_ANALYSIS_SYSTEM_PROMPT = (
    "You are an AI assistant that analyzes work history and job descriptions "
    "to determine how well they match."
)


def build_analysis_prompt(*, job: JobRequirement, profile: Profile) -> str:
    """Build the user prompt asking for a percentage match and explanation."""
    return "\n".join(
        [
            "Analyze this work history and job description.",
            "Provide a percentage match and a brief explanation of the strengths "
            "and weaknesses of the match.",
            "Only credit skills and experience present in the work history.",
            "",
            "Work History (JSON):",
            json.dumps(profile.to_dict(), ensure_ascii=True),
            "",
            "Job Description (JSON):",
            json.dumps(job.to_dict(), ensure_ascii=True),
        ]
    )
