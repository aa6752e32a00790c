"""
Matching Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for ranking programs against an applicant.
"""

import time
import uuid
import logging
from typing import Any, Dict, List, Optional, Sequence

from .contracts import ApplicantProfile, ProgramRecord, MatchResult, MatchingOutput
from .aggregator import aggregate_scores, batch_aggregate
from .classifier import classify_candidate, get_category_counts
from .ranker import rank_candidates, select_top
from .output_assembler import assemble_result, serialize_result
from .catalog import default_catalog, load_catalog
from .constants import ENGINE_VERSION, LOW_RESULT_COUNT_WARNING
from ..config import Settings, get_settings

logger = logging.getLogger(__name__)


class MatchingEngine:
    """
    Main matching engine that orchestrates the scoring pipeline.

    Pipeline flow:
    1. Scoring - GPA fit, research alignment, faculty alignment per program
    2. Aggregation - Combine sub-scores into the capped match score
    3. Ranking - Stable sort by match score, take top N
    4. Classification - Admission probability and reach/target/safety tier
    5. Output Assembly - Reasons, concerns, faculty highlights
    """

    def __init__(
        self,
        catalog: Optional[Sequence[ProgramRecord]] = None,
        settings: Optional[Settings] = None
    ):
        """
        Initialize the matching engine.

        Args:
            catalog: Default catalog for recommend(). If None, loads from
                MATCHING_CATALOG_PATH or falls back to the seed catalog.
            settings: Optional settings. If None, reads the environment.
        """
        self.settings = settings or get_settings()
        self._catalog = list(catalog) if catalog is not None else None
        self.version = ENGINE_VERSION

    @property
    def catalog(self) -> List[ProgramRecord]:
        if self._catalog is None:
            if self.settings.catalog_path:
                self._catalog = load_catalog(self.settings.catalog_path)
            else:
                self._catalog = default_catalog()
        return self._catalog

    def rank(
        self,
        profile: ApplicantProfile,
        catalog: Sequence[ProgramRecord],
        limit: Optional[int] = None
    ) -> List[MatchResult]:
        """
        Rank catalog programs for an applicant.

        Args:
            profile: Applicant's profile
            catalog: Programs to consider
            limit: Max results; None uses the configured default

        Returns:
            Up to `limit` MatchResults sorted by match score (descending)
        """
        if limit is None:
            limit = self.settings.default_limit

        if not catalog or limit <= 0:
            logger.debug(f"Nothing to rank (catalog size: {len(catalog or [])}, limit: {limit})")
            return []

        scored_programs = batch_aggregate(profile, catalog)
        logger.debug(f"Programs scored: {len(scored_programs)}")

        ranked = rank_candidates(scored_programs)
        selected = select_top(ranked, limit)

        results: List[MatchResult] = []
        for position, scored in enumerate(selected, 1):
            probability, category = classify_candidate(profile, scored)
            results.append(assemble_result(profile, scored, probability, category, rank=position))
            logger.debug(
                f"#{position} {scored.program.name}: score={scored.match_score}, "
                f"probability={probability:.1f}, category={category.value}"
            )

        return results

    def recommend(
        self,
        profile: ApplicantProfile,
        catalog: Optional[Sequence[ProgramRecord]] = None,
        limit: Optional[int] = None
    ) -> MatchingOutput:
        """
        Generate ranked matches wrapped with summary statistics.

        Args:
            profile: Applicant's profile
            catalog: Programs to consider; None uses the engine's catalog
            limit: Max results; None uses the configured default

        Returns:
            MatchingOutput with results, counts, timing, and warnings
        """
        start_time = time.perf_counter()

        if catalog is None:
            catalog = self.catalog

        logger.info(f"🚀 Starting matching for applicant: {profile.applicant_id or 'anonymous'}")
        logger.info(f"📦 Programs received for scoring: {len(catalog)}")

        warnings: List[str] = []
        if not catalog:
            logger.warning("⚠️ No programs available for matching")
            warnings.append("No programs available for matching.")

        if not profile.research_interests:
            warnings.append(
                "No research interests provided. Research and faculty alignment "
                "will not contribute to match scores."
            )

        results = self.rank(profile, catalog, limit)

        if catalog and len(results) < min(LOW_RESULT_COUNT_WARNING, len(catalog)):
            logger.warning(f"⚠️ Low result count: {len(results)}")

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(f"✨ Matching complete: {len(results)} results ({processing_time:.2f}ms)")

        return MatchingOutput(
            request_id=str(uuid.uuid4()),
            applicant_id=profile.applicant_id,
            results=results,
            total_programs_evaluated=len(catalog),
            total_returned=len(results),
            category_counts=get_category_counts([r.category for r in results]),
            processing_time_ms=round(processing_time, 2),
            engine_version=self.version,
            warnings=warnings,
        )

    def recommend_from_dict(
        self,
        profile_data: dict,
        **kwargs
    ) -> MatchingOutput:
        """
        Generate matches from a dictionary profile.

        Convenience method for API integration.
        """
        profile = ApplicantProfile(**profile_data)
        return self.recommend(profile, **kwargs)

    def score_single_program(
        self,
        profile: ApplicantProfile,
        program: ProgramRecord
    ) -> Dict[str, Any]:
        """
        Score a single program for an applicant.

        Useful for getting detailed scoring on a specific program
        the applicant is interested in.
        """
        scored = aggregate_scores(profile, program)
        probability, category = classify_candidate(profile, scored)
        result = assemble_result(profile, scored, probability, category, rank=1)

        return {
            "match_score": scored.match_score,
            "admission_probability": probability,
            "category": category.value,
            "research_raw_score": scored.research_raw_score,
            "sub_scores": {
                dim: {
                    "raw": score.raw,
                    "weight_cap": score.weight_cap,
                    "contribution": score.contribution,
                    "explanation": score.explanation,
                }
                for dim, score in scored.sub_scores.items()
            },
            "faculty_matches": [
                {
                    "name": m.name,
                    "specialty": m.specialty,
                    "keyword_hits": m.keyword_hits,
                    "display_match_percent": m.display_match_percent,
                }
                for m in scored.faculty_matches
            ],
            "result": serialize_result(result),
        }


# Convenience functions for simple usage
def rank(
    profile: ApplicantProfile,
    catalog: Sequence[ProgramRecord],
    limit: Optional[int] = None
) -> List[MatchResult]:
    """
    Rank catalog programs for an applicant.

    Args:
        profile: Applicant profile
        catalog: Programs to consider
        limit: Max results (default from MATCHING_DEFAULT_LIMIT, normally 10)

    Returns:
        List of MatchResult
    """
    return MatchingEngine(catalog=catalog).rank(profile, catalog, limit)


def get_matches(
    profile: ApplicantProfile,
    catalog: Optional[Sequence[ProgramRecord]] = None,
    limit: Optional[int] = None
) -> MatchingOutput:
    """Convenience function to get a full MatchingOutput."""
    engine = MatchingEngine(catalog=catalog)
    return engine.recommend(profile, limit=limit)
