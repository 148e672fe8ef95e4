"""Shared test configuration and fixtures."""

import os

# Rate limiting would trip after a handful of TestClient calls
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest

from config import settings
from models.profile import CandidateProfile, ExperienceSummary
from models.requests import JobPosting
from services.profile import load_profile


@pytest.fixture
def profile() -> CandidateProfile:
    return load_profile(settings.profile_path)


@pytest.fixture
def small_profile() -> CandidateProfile:
    return CandidateProfile(
        name="Alex Rivera",
        certifications=("Teaching License",),
        experience=ExperienceSummary(
            total_admin_years=3,
            total_teaching_years=8,
            current_role="Assistant Principal",
            highlights=("Led literacy program",),
        ),
        geographic_preferences=("Oregon",),
        strengths=("Curriculum design",),
    )


@pytest.fixture
def jobs() -> list[JobPosting]:
    return [
        JobPosting(
            job_id="a1", title="Principal", organization="X", location="CA",
            source="EdJoin", salary_min=125000, salary_max=155000, deadline="2025-02-15",
        ),
        JobPosting(job_id="b2", title="Superintendent", organization="Y", location="WA"),
    ]
