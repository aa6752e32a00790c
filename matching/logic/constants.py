"""
Matching Engine Constants

Defines all weights, caps, increments, thresholds, and enums used by the matching engine.
All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict

# =============================================================================
# SUB-SCORE WEIGHTS & CAPS
# =============================================================================

# GPA fit: min(gpa / avg_gpa, GPA_FIT_RATIO_CAP) * GPA_FIT_WEIGHT
GPA_FIT_WEIGHT = 25.0
GPA_FIT_RATIO_CAP = 1.2  # at most a 20% bonus over parity

# Research alignment: +10 per (interest, area) substring match, capped at 40
RESEARCH_MATCH_INCREMENT = 10
RESEARCH_ALIGNMENT_CAP = 40

# Faculty alignment: +8 per (faculty, interest, keyword) substring match, capped at 25
FACULTY_MATCH_INCREMENT = 8
FACULTY_ALIGNMENT_CAP = 25

# The engine never reports a perfect match
MAX_MATCH_SCORE = 98

# Faculty "percent match" display heuristic (presentation only, not a probability)
FACULTY_DISPLAY_SCALE = 1.2
FACULTY_DISPLAY_OFFSET = 75
FACULTY_DISPLAY_MAX = 98

SUB_SCORE_CAPS: Dict[str, float] = {
    "gpa_fit": GPA_FIT_WEIGHT * GPA_FIT_RATIO_CAP,
    "research_alignment": float(RESEARCH_ALIGNMENT_CAP),
    "faculty_alignment": float(FACULTY_ALIGNMENT_CAP),
}

# =============================================================================
# ADMISSION PROBABILITY
# =============================================================================

MAX_ADMISSION_PROBABILITY = 85.0

# Research raw score above this boosts the probability multiplier
STRONG_RESEARCH_THRESHOLD = 20
STRONG_RESEARCH_MULTIPLIER = 2.5
DEFAULT_RESEARCH_MULTIPLIER = 1.5

# =============================================================================
# CLASSIFICATION THRESHOLDS
# =============================================================================

class MatchCategory(str, Enum):
    """Applicant-relative risk tiers, least to most likely admission."""
    REACH = "reach"
    TARGET = "target"
    SAFETY = "safety"


# Exclusive upper bounds: exactly 25 is target, exactly 60 is safety.
REACH_UPPER_BOUND = 25.0   # probability < 25  -> reach
TARGET_UPPER_BOUND = 60.0  # probability < 60  -> target, else safety

# =============================================================================
# EXPLANATIONS
# =============================================================================

MAX_WHY_RECOMMENDED = 3
MAX_CONCERNS = 2
MAX_FACULTY_HIGHLIGHTS = 3

# Acceptance rate below which a program is flagged as extremely competitive
EXTREMELY_COMPETITIVE_RATE = 0.05

DEGREE_LEVEL_LABELS: Dict[str, str] = {
    "phd": "PhD",
    "masters": "Master's",
    "other": "graduate",
}

# Indicative test-score requirements shown per tier
GRE_REQUIREMENT_BY_CATEGORY: Dict[str, str] = {
    MatchCategory.REACH.value: "V: 160+, Q: 165+",
    MatchCategory.TARGET.value: "V: 155+, Q: 160+",
    MatchCategory.SAFETY.value: "V: 150+, Q: 155+",
}
TOEFL_REACH_REQUIREMENT = "100+"
TOEFL_DEFAULT_REQUIREMENT = "90+"
IELTS_REACH_REQUIREMENT = "7.5+"
IELTS_DEFAULT_REQUIREMENT = "7.0+"

# =============================================================================
# RANKING CONFIGURATION
# =============================================================================

# Warn when fewer results than this come back from a non-empty catalog
LOW_RESULT_COUNT_WARNING = 3

ENGINE_VERSION = "1.0.0"
