"""
Matching Logic Module

Provides the deterministic engine that scores, classifies, and ranks graduate programs for an applicant.
"""

from .contracts import (
    ApplicantProfile,
    DegreeLevel,
    FacultyMember,
    ProgramRecord,
    MatchResult,
    MatchingOutput,
    AdmissionRequirements,
    SubScore,
    FacultyMatch,
    ScoredProgram,
)
from .engine import MatchingEngine, rank, get_matches
from .catalog import default_catalog, load_catalog, catalog_from_records
from .output_assembler import serialize_result
from .constants import MatchCategory

__all__ = [
    # Main engine
    "MatchingEngine",
    "rank",
    "get_matches",

    # Catalog
    "default_catalog",
    "load_catalog",
    "catalog_from_records",

    # Contracts
    "ApplicantProfile",
    "DegreeLevel",
    "FacultyMember",
    "ProgramRecord",
    "MatchResult",
    "MatchingOutput",
    "AdmissionRequirements",
    "SubScore",
    "FacultyMatch",
    "ScoredProgram",
    "serialize_result",

    # Enums
    "MatchCategory",
]
