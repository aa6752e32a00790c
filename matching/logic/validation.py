"""
Engine Validation

Developer sanity check that runs the full pipeline against the seed catalog.
Run with ``python -m matching.logic.validation``.
"""

from .contracts import ApplicantProfile
from .engine import MatchingEngine
from ..config import configure_logging


def validate_engine():
    """
    Developer sanity check - runs the full pipeline against the seed catalog.
    """
    configure_logging()

    profile = ApplicantProfile(
        applicant_id="test_engine_001",
        gpa=3.7,
        research_interests=["Machine Learning", "Computer Vision"],
        degree_level="phd",
        field_of_study="Computer Science",
    )

    engine = MatchingEngine()
    output = engine.recommend(profile, limit=5)

    print("=" * 60)
    print("ENGINE VALIDATION")
    print("=" * 60)
    print(f"\nTotal Evaluated: {output.total_programs_evaluated}")
    print(f"Total Returned: {output.total_returned}")
    print(f"Categories: {output.category_counts}")
    print(f"Processing Time: {output.processing_time_ms:.2f}ms")

    for result in output.results:
        print(f"\n{result.rank}. {result.program.name} - {result.program.program_name}")
        print(f"   Score: {result.match_score} | {result.category} ({result.admission_probability:.1f}%)")
        for reason in result.why_recommended:
            print(f"   + {reason}")
        for concern in result.concerns:
            print(f"   - {concern}")
        for highlight in result.faculty_highlights:
            print(f"   * {highlight}")

    if output.warnings:
        print("\n--- WARNINGS ---")
        for w in output.warnings:
            print(f"  ⚠️  {w}")

    return output


if __name__ == "__main__":
    validate_engine()
