"""
Data Contracts for the Matching Engine

Defines Pydantic models for ApplicantProfile and ProgramRecord (input) and MatchResult (output).
These contracts are the API boundary for the matching engine.
"""

from typing import List, Optional, Dict
from pydantic import BaseModel, Field
from enum import Enum

from .constants import MatchCategory, ENGINE_VERSION


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class DegreeLevel(str, Enum):
    """Applicant's target degree level."""
    MASTERS = "masters"
    PHD = "phd"
    OTHER = "other"


class ApplicantProfile(BaseModel):
    """
    Input contract for the matching engine.
    Represents an applicant's academic profile and research interests.
    """
    # Identity (optional, for tracking)
    applicant_id: Optional[str] = None

    gpa: float = Field(ge=0.0, le=4.0)
    research_interests: List[str] = Field(default_factory=list)
    degree_level: DegreeLevel = DegreeLevel.PHD
    field_of_study: str = ""

    class Config:
        use_enum_values = True
        frozen = True


class FacultyMember(BaseModel):
    """Faculty member listed for a program, with research keywords."""
    name: str
    specialty: str = ""
    match_keywords: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class ProgramRecord(BaseModel):
    """
    Reference data for one graduate program.
    Missing GPA baselines or acceptance rate degrade to neutral values during scoring.
    """
    # Institution
    name: str
    location: str = ""
    ranking: Optional[str] = None
    website_url: Optional[str] = None

    # Program
    program_name: str = ""
    offered_programs: List[str] = Field(default_factory=list)
    tuition: str = ""
    deadline: str = ""

    # Admission statistics
    acceptance_rate: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    min_gpa: Optional[float] = None
    avg_gpa: Optional[float] = None

    # Research
    research_areas: List[str] = Field(default_factory=list)
    faculty: List[FacultyMember] = Field(default_factory=list)

    # Static institution notes (independent of the applicant)
    strengths: List[str] = Field(default_factory=list)
    concerns: List[str] = Field(default_factory=list)

    class Config:
        frozen = True

    @property
    def program_names(self) -> List[str]:
        """All program names offered; falls back to the headline program."""
        if self.offered_programs:
            return list(self.offered_programs)
        return [self.program_name] if self.program_name else []


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class AdmissionRequirements(BaseModel):
    """Indicative requirements shown alongside a match, derived from its tier."""
    gpa_requirement: Optional[str] = None
    gre_requirement: str = ""
    toefl_requirement: str = ""
    ielts_requirement: str = ""

    class Config:
        frozen = True


class MatchResult(BaseModel):
    """
    Single program match with score, tier, and justifications.
    """
    program: ProgramRecord

    # Scoring
    match_score: int = Field(ge=0, le=100)
    admission_probability: float = Field(ge=0.0, le=100.0)

    # Classification
    category: MatchCategory

    # Explainability
    why_recommended: List[str] = Field(default_factory=list)
    concerns: List[str] = Field(default_factory=list)
    faculty_highlights: List[str] = Field(default_factory=list)
    admission_requirements: AdmissionRequirements = Field(default_factory=AdmissionRequirements)

    # Ranking metadata
    rank: int = 0

    class Config:
        use_enum_values = True
        frozen = True


class MatchingOutput(BaseModel):
    """
    Envelope returned by MatchingEngine.recommend().
    Contains ranked matches with summary statistics.
    """
    # Request tracking
    request_id: Optional[str] = None
    applicant_id: Optional[str] = None

    results: List[MatchResult] = Field(default_factory=list)

    # Summary Statistics
    total_programs_evaluated: int = 0
    total_returned: int = 0
    category_counts: Dict[str, int] = Field(default_factory=dict)

    # Processing metadata
    processing_time_ms: Optional[float] = None
    engine_version: str = ENGINE_VERSION

    # Warnings/Notes
    warnings: List[str] = Field(default_factory=list)


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class SubScore(BaseModel):
    """One weighted component of the composite match score."""
    dimension: str
    raw: float = Field(ge=0.0)
    weight_cap: float = Field(ge=0.0)
    contribution: float = Field(ge=0.0)
    explanation: str = ""


class FacultyMatch(BaseModel):
    """
    Faculty member whose keywords overlap the applicant's interests.

    display_match_percent is a cosmetic heuristic for the highlight string;
    it is not related to match_score or admission_probability.
    """
    name: str
    specialty: str = ""
    keyword_hits: int = Field(ge=0)
    display_match_percent: int = Field(ge=0, le=100)


class ScoredProgram(BaseModel):
    """
    A program with computed sub-scores.
    Used between scoring and classification stages.
    """
    program: ProgramRecord
    sub_scores: Dict[str, SubScore] = Field(default_factory=dict)
    research_raw_score: float = 0.0
    matched_research_areas: List[str] = Field(default_factory=list)
    faculty_matches: List[FacultyMatch] = Field(default_factory=list)
    match_score: int = 0
