"""
Shared fixtures for the matching engine tests.
"""

import pytest

from matching.logic import ApplicantProfile, ProgramRecord, FacultyMember, default_catalog
from matching.config import Settings


def make_program(**overrides) -> ProgramRecord:
    """Build a program record with sensible defaults for tests."""
    data = dict(
        name="Test University",
        program_name="Computer Science PhD",
        location="Testville, CA",
        ranking="#10 in Computer Science",
        acceptance_rate=0.20,
        min_gpa=3.5,
        avg_gpa=3.7,
        research_areas=[],
        faculty=[],
        tuition="$40,000/year",
        deadline="December 15, 2025",
        website_url="https://www.test.edu",
        concerns=[],
    )
    data.update(overrides)
    return ProgramRecord(**data)


@pytest.fixture
def ml_profile() -> ApplicantProfile:
    return ApplicantProfile(
        applicant_id="test_applicant_001",
        gpa=3.9,
        research_interests=["Machine Learning"],
        degree_level="phd",
        field_of_study="Computer Science",
    )


@pytest.fixture
def stanford_like() -> ProgramRecord:
    return make_program(
        name="Stanford University",
        acceptance_rate=0.038,
        min_gpa=3.8,
        avg_gpa=3.95,
        research_areas=["Machine Learning", "Computer Vision"],
        faculty=[
            FacultyMember(
                name="Prof. Andrew Ng",
                specialty="Machine Learning",
                match_keywords=["machine learning", "neural networks", "AI"],
            ),
        ],
    )


@pytest.fixture
def seed_catalog():
    return default_catalog()


@pytest.fixture
def settings() -> Settings:
    return Settings(default_limit=10)
