"""Pytest configuration and shared fixtures."""

import os
from datetime import date

import pytest


@pytest.fixture(autouse=True)
def _isolate_singletons(monkeypatch):
    """Reset config/logging singletons and ignore the developer's MATCHING_* env."""
    from resume_matcher.config.settings import reset_settings
    from resume_matcher.matching.config import reset_matching_config
    from resume_matcher.utils.logging import reset_logging

    for var in list(os.environ):
        if var.upper().startswith("MATCHING_") or var.upper() == "LOG_LEVEL":
            monkeypatch.delenv(var, raising=False)

    reset_settings()
    reset_matching_config()
    reset_logging()
    yield
    reset_settings()
    reset_matching_config()
    reset_logging()


@pytest.fixture
def sample_entries():
    """Work history entries spanning two roles at one employer."""
    from resume_matcher.matching.models import WorkHistoryEntry

    return [
        WorkHistoryEntry(
            employer="Acme",
            title="Backend Engineer",
            start_date=date(2020, 1, 1),
            end_date=date(2022, 6, 30),
            description="Built billing APIs.",
            skills="Python, SQL, Docker",
        ),
        WorkHistoryEntry(
            employer="Globex",
            title="Data Analyst",
            start_date=date(2018, 3, 1),
            end_date=date(2019, 12, 31),
            description="Reporting dashboards.",
            skills="SQL, Excel",
        ),
        WorkHistoryEntry(
            employer="Acme",
            title="Backend Engineer",
            start_date=date(2020, 1, 1),
            end_date=date(2022, 6, 30),
            description="Migrated services to Kubernetes.",
            skills="kubernetes, docker",
        ),
    ]


@pytest.fixture
def sample_job():
    """Job posting requiring Python, SQL, AWS and Docker."""
    from resume_matcher.matching.models import JobRequirement

    return JobRequirement(
        title="Platform Engineer",
        employer="Initech",
        required_skills="Python, SQL, AWS, Docker",
        description="Own the deployment platform.",
    )
