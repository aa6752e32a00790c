"""
Ranker

Ranks scored programs by match score and selects the top N.
Ties keep catalog order.
"""

from typing import List

from .contracts import ScoredProgram


def rank_candidates(
    scored_programs: List[ScoredProgram]
) -> List[ScoredProgram]:
    """
    Rank programs by match score (descending).

    sorted() is stable, so programs with equal scores stay in catalog order.

    Args:
        scored_programs: Scored programs in catalog order

    Returns:
        Sorted list by score
    """
    return sorted(
        scored_programs,
        key=lambda x: x.match_score,
        reverse=True
    )


def select_top(
    ranked: List[ScoredProgram],
    limit: int
) -> List[ScoredProgram]:
    """
    Take the first `limit` ranked programs.

    A limit of zero or less selects nothing.
    """
    if limit <= 0:
        return []
    return ranked[:limit]
