"""
Classifier

Estimates a coarse admission probability and classifies it into a risk tier:
- Reach (unlikely admission)
- Target (realistic match)
- Safety (likely admission)
"""

from typing import Dict, List, Tuple

from .contracts import ApplicantProfile, ScoredProgram
from .dimension_scorers import gpa_baseline
from .constants import (
    MatchCategory,
    MAX_ADMISSION_PROBABILITY,
    STRONG_RESEARCH_THRESHOLD,
    STRONG_RESEARCH_MULTIPLIER,
    DEFAULT_RESEARCH_MULTIPLIER,
    REACH_UPPER_BOUND,
    TARGET_UPPER_BOUND,
)


def estimate_admission_probability(
    profile: ApplicantProfile,
    scored: ScoredProgram
) -> float:
    """
    Estimate admission probability on a 0-85 scale.

    probability = (gpa / min_gpa) * acceptance_rate * 100 * research multiplier,
    capped at 85. A missing minimum GPA makes the GPA factor 1.0; a missing
    acceptance rate makes the probability 0.
    """
    program = scored.program

    if not program.acceptance_rate:
        return 0.0

    min_gpa = gpa_baseline(program.min_gpa)
    gpa_factor = profile.gpa / min_gpa if min_gpa is not None else 1.0

    multiplier = (
        STRONG_RESEARCH_MULTIPLIER
        if scored.research_raw_score > STRONG_RESEARCH_THRESHOLD
        else DEFAULT_RESEARCH_MULTIPLIER
    )

    probability = gpa_factor * program.acceptance_rate * 100 * multiplier
    return max(0.0, min(probability, MAX_ADMISSION_PROBABILITY))


def classify_probability(probability: float) -> MatchCategory:
    """
    Map an admission probability to a tier.

    Args:
        probability: Admission probability (0-85)

    Returns:
        MatchCategory enum value
    """
    if probability < REACH_UPPER_BOUND:
        return MatchCategory.REACH
    if probability < TARGET_UPPER_BOUND:
        return MatchCategory.TARGET
    return MatchCategory.SAFETY


def classify_candidate(
    profile: ApplicantProfile,
    scored: ScoredProgram
) -> Tuple[float, MatchCategory]:
    """Estimate probability and tier for a single scored program."""
    probability = estimate_admission_probability(profile, scored)
    return probability, classify_probability(probability)


def get_category_counts(categories: List[str]) -> Dict[str, int]:
    """
    Count results in each category.
    """
    counts = {cat.value: 0 for cat in MatchCategory}
    for category in categories:
        counts[MatchCategory(category).value] += 1
    return counts
