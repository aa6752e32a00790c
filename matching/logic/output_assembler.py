"""
Output Assembler

Transforms internal scoring data into the final MatchResult contract.
Generates the recommendation reasons, concerns, and faculty highlights.
"""

from typing import Any, Dict, List, Optional, Tuple

from .contracts import (
    ApplicantProfile,
    DegreeLevel,
    ScoredProgram,
    MatchResult,
    AdmissionRequirements,
)
from .dimension_scorers import gpa_baseline
from .constants import (
    MatchCategory,
    MAX_WHY_RECOMMENDED,
    MAX_CONCERNS,
    MAX_FACULTY_HIGHLIGHTS,
    EXTREMELY_COMPETITIVE_RATE,
    DEGREE_LEVEL_LABELS,
    GRE_REQUIREMENT_BY_CATEGORY,
    TOEFL_REACH_REQUIREMENT,
    TOEFL_DEFAULT_REQUIREMENT,
    IELTS_REACH_REQUIREMENT,
    IELTS_DEFAULT_REQUIREMENT,
)


def assemble_result(
    profile: ApplicantProfile,
    scored: ScoredProgram,
    probability: float,
    category: MatchCategory,
    rank: int = 0
) -> MatchResult:
    """
    Convert a ScoredProgram into a MatchResult.

    Args:
        profile: Applicant profile the program was scored against
        scored: The scored program
        probability: Estimated admission probability
        category: Risk tier for the probability
        rank: Position in the ranked output (1-based)

    Returns:
        MatchResult object
    """
    reasons, concerns = generate_explanations(profile, scored)

    return MatchResult(
        program=scored.program,
        match_score=scored.match_score,
        admission_probability=probability,
        category=category,
        why_recommended=reasons[:MAX_WHY_RECOMMENDED],
        concerns=concerns[:MAX_CONCERNS],
        faculty_highlights=_faculty_highlights(scored)[:MAX_FACULTY_HIGHLIGHTS],
        admission_requirements=_admission_requirements(scored, category),
        rank=rank,
    )


def generate_explanations(
    profile: ApplicantProfile,
    scored: ScoredProgram
) -> Tuple[List[str], List[str]]:
    """
    Build untruncated recommendation reasons and concerns, in generation order.

    Reasons: GPA comparison, matched research areas, field/degree match.
    Concerns: GPA shortfall, extreme competitiveness, the program's static concerns.
    """
    program = scored.program
    reasons: List[str] = []
    concerns: List[str] = []

    # GPA
    avg_gpa = gpa_baseline(program.avg_gpa)
    min_gpa = gpa_baseline(program.min_gpa)
    if avg_gpa is not None and profile.gpa >= avg_gpa:
        reasons.append("GPA exceeds program average")
    elif min_gpa is not None and profile.gpa >= min_gpa:
        reasons.append("GPA meets minimum requirement")
    elif min_gpa is not None or avg_gpa is not None:
        concerns.append("GPA below typical range")

    # Research areas
    for area in scored.matched_research_areas:
        reasons.append(f"Strong research alignment in {area}")

    # Field / degree
    field_reason = _field_reason(profile, scored)
    if field_reason:
        reasons.append(field_reason)

    # Competitiveness
    rate = program.acceptance_rate
    if rate is not None and rate < EXTREMELY_COMPETITIVE_RATE:
        concerns.append(f"Extremely competitive ({rate * 100:.1f}% acceptance rate)")

    concerns.extend(program.concerns)

    return reasons, concerns


def serialize_result(result: MatchResult) -> Dict[str, Any]:
    """Convert MatchResult to a JSON-serializable dict."""
    program = result.program
    requirements = result.admission_requirements
    return {
        "rank": result.rank,
        "name": program.name,
        "program": program.program_name,
        "location": program.location,
        "ranking": program.ranking,
        "match_score": result.match_score,
        "category": result.category,
        "admission_probability": round(result.admission_probability, 1),
        "why_recommended": list(result.why_recommended),
        "concerns": list(result.concerns),
        "faculty_highlights": list(result.faculty_highlights),
        "research_areas": list(program.research_areas),
        "tuition_fee": program.tuition,
        "application_deadline": program.deadline,
        "website_url": program.website_url,
        "admission_requirements": {
            "gpa_requirement": requirements.gpa_requirement,
            "gre_requirement": requirements.gre_requirement,
            "toefl_requirement": requirements.toefl_requirement,
            "ielts_requirement": requirements.ielts_requirement,
        },
    }


def _field_reason(
    profile: ApplicantProfile,
    scored: ScoredProgram
) -> Optional[str]:
    field = profile.field_of_study.strip()
    if not field:
        return None

    field_lower = field.lower()
    if any(field_lower in name.lower() for name in scored.program.program_names):
        degree = DegreeLevel(profile.degree_level).value
        label = DEGREE_LEVEL_LABELS.get(degree, DEGREE_LEVEL_LABELS["other"])
        return f"Offers {label} programs in {field}"
    return None


def _faculty_highlights(scored: ScoredProgram) -> List[str]:
    """Display strings for faculty matches; the percent is cosmetic only."""
    return [
        f"{match.name} - {match.specialty}, {match.display_match_percent}% research match"
        for match in scored.faculty_matches
    ]


def _admission_requirements(
    scored: ScoredProgram,
    category: MatchCategory
) -> AdmissionRequirements:
    """Indicative requirements shown for the tier."""
    category = MatchCategory(category)
    min_gpa = gpa_baseline(scored.program.min_gpa)
    is_reach = category == MatchCategory.REACH

    return AdmissionRequirements(
        gpa_requirement=f"{min_gpa}+" if min_gpa is not None else None,
        gre_requirement=GRE_REQUIREMENT_BY_CATEGORY[category.value],
        toefl_requirement=TOEFL_REACH_REQUIREMENT if is_reach else TOEFL_DEFAULT_REQUIREMENT,
        ielts_requirement=IELTS_REACH_REQUIREMENT if is_reach else IELTS_DEFAULT_REQUIREMENT,
    )
