"""
Score Aggregator

Combines individual sub-scores into the composite match score.
Applies the overall cap and integer rounding.
"""

from typing import Dict, List, Sequence

from .contracts import ApplicantProfile, ProgramRecord, ScoredProgram, SubScore
from .dimension_scorers import (
    score_gpa_fit,
    score_research_alignment,
    score_faculty_alignment,
    round_half_up,
)
from .constants import MAX_MATCH_SCORE


def aggregate_scores(
    profile: ApplicantProfile,
    program: ProgramRecord
) -> ScoredProgram:
    """
    Compute all sub-scores and aggregate into the composite match score.

    Args:
        profile: Applicant's profile
        program: Program to score

    Returns:
        ScoredProgram with sub-scores, research raw score, and faculty matches
    """
    sub_scores: Dict[str, SubScore] = {}

    gpa_score = score_gpa_fit(profile, program)
    research_score, matched_areas = score_research_alignment(profile, program)
    faculty_score, faculty_matches = score_faculty_alignment(profile, program)

    for score in (gpa_score, research_score, faculty_score):
        sub_scores[score.dimension] = score

    composite = sum(score.contribution for score in sub_scores.values())

    # Never report certainty
    match_score = round_half_up(max(0.0, min(composite, MAX_MATCH_SCORE)))

    return ScoredProgram(
        program=program,
        sub_scores=sub_scores,
        research_raw_score=research_score.raw,
        matched_research_areas=matched_areas,
        faculty_matches=faculty_matches,
        match_score=match_score,
    )


def batch_aggregate(
    profile: ApplicantProfile,
    catalog: Sequence[ProgramRecord]
) -> List[ScoredProgram]:
    """
    Score every program in the catalog, preserving catalog order.
    """
    return [aggregate_scores(profile, program) for program in catalog]
