"""
Dimension Scorers

Individual scoring functions for each match dimension.
Each scorer returns a SubScore whose contribution is already clamped to its cap.
All logic is deterministic - no AI/ML components.

Keyword comparison is a case-insensitive substring test in either direction, so
"ML" matches "ML research" and "Machine Learning" matches "machine learning theory".
Short interests can also match inside unrelated words ("AI" inside "Chain").
"""

import math
from typing import List, Optional, Tuple

from .contracts import ApplicantProfile, ProgramRecord, SubScore, FacultyMatch
from .constants import (
    GPA_FIT_WEIGHT,
    GPA_FIT_RATIO_CAP,
    RESEARCH_MATCH_INCREMENT,
    RESEARCH_ALIGNMENT_CAP,
    FACULTY_MATCH_INCREMENT,
    FACULTY_ALIGNMENT_CAP,
    FACULTY_DISPLAY_SCALE,
    FACULTY_DISPLAY_OFFSET,
    FACULTY_DISPLAY_MAX,
    SUB_SCORE_CAPS,
)


def score_gpa_fit(
    profile: ApplicantProfile,
    program: ProgramRecord
) -> SubScore:
    """
    Score GPA alignment against the program's average admitted GPA.

    The ratio is capped so an outlier GPA earns at most a 20% bonus over parity.
    A missing or zero average is neutral (contributes 0).
    """
    avg_gpa = gpa_baseline(program.avg_gpa)

    if avg_gpa is None or profile.gpa <= 0:
        return SubScore(
            dimension="gpa_fit",
            raw=0.0,
            weight_cap=SUB_SCORE_CAPS["gpa_fit"],
            contribution=0.0,
            explanation="No GPA baseline available",
        )

    fit = min(profile.gpa / avg_gpa, GPA_FIT_RATIO_CAP)
    contribution = fit * GPA_FIT_WEIGHT

    return SubScore(
        dimension="gpa_fit",
        raw=fit,
        weight_cap=SUB_SCORE_CAPS["gpa_fit"],
        contribution=contribution,
        explanation=f"GPA {profile.gpa:.2f} vs average {avg_gpa:.2f}, fit: {fit:.2f}",
    )


def score_research_alignment(
    profile: ApplicantProfile,
    program: ProgramRecord
) -> Tuple[SubScore, List[str]]:
    """
    Score overlap between applicant interests and program research areas.

    Every (interest, area) pair that matches adds a fixed increment to the raw
    total; the contribution is the raw total clamped to its cap. The raw total
    is kept unclamped because the admission probability model reads it.

    Returns:
        SubScore and the distinct matched program areas in first-match order
    """
    raw_score = 0
    matched_areas: List[str] = []

    for interest in profile.research_interests:
        for area in program.research_areas:
            if _fuzzy_match(interest, area):
                raw_score += RESEARCH_MATCH_INCREMENT
                if area not in matched_areas:
                    matched_areas.append(area)

    contribution = min(raw_score, RESEARCH_ALIGNMENT_CAP)

    return SubScore(
        dimension="research_alignment",
        raw=float(raw_score),
        weight_cap=SUB_SCORE_CAPS["research_alignment"],
        contribution=float(contribution),
        explanation=f"Research matches: {raw_score // RESEARCH_MATCH_INCREMENT}, areas: {len(matched_areas)}",
    ), matched_areas


def score_faculty_alignment(
    profile: ApplicantProfile,
    program: ProgramRecord
) -> Tuple[SubScore, List[FacultyMatch]]:
    """
    Score overlap between applicant interests and faculty match keywords.

    Each faculty member accumulates an increment per (interest, keyword) match.
    Members with a positive accumulator become FacultyMatch entries, in catalog order.
    """
    total = 0
    matches: List[FacultyMatch] = []

    for member in program.faculty:
        accumulator = 0
        for interest in profile.research_interests:
            for keyword in member.match_keywords:
                if _fuzzy_match(interest, keyword):
                    accumulator += FACULTY_MATCH_INCREMENT

        if accumulator > 0:
            total += accumulator
            matches.append(FacultyMatch(
                name=member.name,
                specialty=member.specialty,
                keyword_hits=accumulator // FACULTY_MATCH_INCREMENT,
                display_match_percent=faculty_display_percent(accumulator),
            ))

    contribution = min(total, FACULTY_ALIGNMENT_CAP)

    return SubScore(
        dimension="faculty_alignment",
        raw=float(total),
        weight_cap=SUB_SCORE_CAPS["faculty_alignment"],
        contribution=float(contribution),
        explanation=f"Faculty matched: {len(matches)}",
    ), matches


def faculty_display_percent(accumulator: int) -> int:
    """Map raw faculty keyword points onto the displayed 'percent match' figure."""
    return min(
        round_half_up(accumulator * FACULTY_DISPLAY_SCALE + FACULTY_DISPLAY_OFFSET),
        FACULTY_DISPLAY_MAX,
    )


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def gpa_baseline(value: Optional[float]) -> Optional[float]:
    """Return a usable GPA baseline, or None when missing or non-positive."""
    if value is None or value <= 0:
        return None
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


def _fuzzy_match(term1: str, term2: str) -> bool:
    """Simple fuzzy matching - checks if either term contains the other."""
    if not term1.strip() or not term2.strip():
        return False
    t1 = term1.lower()
    t2 = term2.lower()
    return t1 in t2 or t2 in t1
