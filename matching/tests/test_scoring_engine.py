"""
Tests for the sub-score functions and the composite match score.
"""

import pytest

from matching.logic import ApplicantProfile, FacultyMember
from matching.logic.aggregator import aggregate_scores, batch_aggregate
from matching.logic.dimension_scorers import (
    score_gpa_fit,
    score_research_alignment,
    score_faculty_alignment,
    faculty_display_percent,
    round_half_up,
)
from matching.tests.conftest import make_program


def _profile(gpa=3.9, interests=None, **kwargs) -> ApplicantProfile:
    return ApplicantProfile(
        gpa=gpa,
        research_interests=interests if interests is not None else ["Machine Learning"],
        **kwargs
    )


# =============================================================================
# GPA FIT
# =============================================================================

def test_gpa_fit_at_parity_gives_full_weight():
    score = score_gpa_fit(_profile(gpa=3.7), make_program(avg_gpa=3.7))
    assert score.contribution == pytest.approx(25.0)


def test_gpa_fit_ratio_is_capped_at_twenty_percent_bonus():
    score = score_gpa_fit(_profile(gpa=4.0), make_program(avg_gpa=3.0))
    assert score.raw == pytest.approx(1.2)
    assert score.contribution == pytest.approx(30.0)


def test_gpa_fit_below_average_scales_down():
    score = score_gpa_fit(_profile(gpa=3.0), make_program(avg_gpa=4.0))
    assert score.contribution == pytest.approx(18.75)


@pytest.mark.parametrize("avg_gpa", [None, 0.0])
def test_gpa_fit_missing_average_is_neutral(avg_gpa):
    score = score_gpa_fit(_profile(), make_program(avg_gpa=avg_gpa))
    assert score.contribution == 0.0


# =============================================================================
# RESEARCH ALIGNMENT
# =============================================================================

def test_research_match_adds_ten_per_pair():
    score, matched = score_research_alignment(
        _profile(interests=["Machine Learning"]),
        make_program(research_areas=["Machine Learning", "Computer Vision"]),
    )
    assert score.raw == 10
    assert score.contribution == 10
    assert matched == ["Machine Learning"]


def test_research_match_is_case_insensitive_substring_either_direction():
    score, matched = score_research_alignment(
        _profile(interests=["ml research", "vision"]),
        make_program(research_areas=["ML", "Computer Vision"]),
    )
    assert score.raw == 20
    assert matched == ["ML", "Computer Vision"]


def test_research_match_does_not_expand_abbreviations():
    score, matched = score_research_alignment(
        _profile(interests=["Machine Learning"]),
        make_program(research_areas=["ML"]),
    )
    assert score.raw == 0
    assert matched == []


def test_research_substring_false_positive_is_kept():
    """Short interests match inside unrelated words; this is current behavior."""
    score, matched = score_research_alignment(
        _profile(interests=["AI"]),
        make_program(research_areas=["Supply Chain Analytics"]),
    )
    assert score.raw == 10
    assert matched == ["Supply Chain Analytics"]


def test_research_match_keeps_surrounding_whitespace():
    """Whitespace is part of the term; a trailing space can block a match."""
    score, matched = score_research_alignment(
        _profile(gpa=3.5, interests=["learning "]),
        make_program(research_areas=["Machine Learning"]),
    )
    assert score.raw == 0
    assert matched == []

    score, matched = score_research_alignment(
        _profile(gpa=3.5, interests=[" Learning"]),
        make_program(research_areas=["Machine Learning"]),
    )
    assert score.raw == 10
    assert matched == ["Machine Learning"]


def test_research_contribution_is_capped_but_raw_is_not():
    areas = [
        "Machine Learning",
        "Deep Learning",
        "Reinforcement Learning",
        "Learning Theory",
        "Representation Learning",
    ]
    score, matched = score_research_alignment(
        _profile(interests=["learning"]),
        make_program(research_areas=areas),
    )
    assert score.raw == 50
    assert score.contribution == 40
    assert matched == areas


def test_research_counts_every_pair_but_lists_each_area_once():
    score, matched = score_research_alignment(
        _profile(interests=["Machine Learning", "Learning"]),
        make_program(research_areas=["Machine Learning"]),
    )
    assert score.raw == 20
    assert matched == ["Machine Learning"]


@pytest.mark.parametrize("interests,areas", [
    ([], ["Machine Learning"]),
    (["Machine Learning"], []),
    ([""], ["Machine Learning"]),
    (["   "], ["Machine Learning"]),
])
def test_research_empty_inputs_contribute_zero(interests, areas):
    score, matched = score_research_alignment(
        _profile(interests=interests),
        make_program(research_areas=areas),
    )
    assert score.contribution == 0
    assert matched == []


# =============================================================================
# FACULTY ALIGNMENT
# =============================================================================

def test_faculty_match_adds_eight_per_keyword_hit():
    program = make_program(faculty=[
        FacultyMember(
            name="Prof. Andrew Ng",
            specialty="Machine Learning",
            match_keywords=["machine learning", "neural networks", "AI"],
        ),
    ])
    score, matches = score_faculty_alignment(_profile(interests=["Machine Learning"]), program)

    assert score.contribution == 8
    assert len(matches) == 1
    assert matches[0].name == "Prof. Andrew Ng"
    assert matches[0].keyword_hits == 1
    assert matches[0].display_match_percent == 85


def test_faculty_contribution_is_capped():
    keywords = ["deep learning", "neural networks"]
    program = make_program(faculty=[
        FacultyMember(name="Prof. A", specialty="DL", match_keywords=keywords),
        FacultyMember(name="Prof. B", specialty="DL", match_keywords=keywords),
    ])
    score, matches = score_faculty_alignment(
        _profile(interests=["deep learning", "neural networks"]),
        program,
    )

    assert score.raw == 32
    assert score.contribution == 25
    assert [m.display_match_percent for m in matches] == [94, 94]


def test_faculty_without_hits_yield_no_match():
    program = make_program(faculty=[
        FacultyMember(name="Prof. A", specialty="Systems", match_keywords=["distributed systems"]),
        FacultyMember(name="Prof. B", specialty="Theory", match_keywords=[]),
    ])
    score, matches = score_faculty_alignment(_profile(interests=["Computer Vision"]), program)

    assert score.contribution == 0
    assert matches == []


def test_faculty_matches_keep_catalog_order():
    program = make_program(faculty=[
        FacultyMember(name="Prof. Vision", specialty="CV", match_keywords=["computer vision"]),
        FacultyMember(name="Prof. Systems", specialty="Sys", match_keywords=["systems"]),
        FacultyMember(name="Prof. Learning", specialty="ML", match_keywords=["machine learning"]),
    ])
    _, matches = score_faculty_alignment(
        _profile(interests=["machine learning", "computer vision"]),
        program,
    )
    assert [m.name for m in matches] == ["Prof. Vision", "Prof. Learning"]


@pytest.mark.parametrize("points,expected", [
    (8, 85),
    (16, 94),
    (24, 98),
    (80, 98),
])
def test_faculty_display_percent(points, expected):
    assert faculty_display_percent(points) == expected


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(42.49) == 42
    assert round_half_up(0.0) == 0


# =============================================================================
# COMPOSITE
# =============================================================================

def test_composite_score(ml_profile, stanford_like):
    scored = aggregate_scores(ml_profile, stanford_like)

    # 3.9 / 3.95 * 25 = 24.68, + 10 research, + 8 faculty
    assert scored.match_score == 43
    assert scored.research_raw_score == 10
    assert set(scored.sub_scores) == {"gpa_fit", "research_alignment", "faculty_alignment"}


def test_composite_never_exceeds_98():
    keywords = ["machine learning", "deep learning", "learning"]
    program = make_program(
        avg_gpa=2.0,
        research_areas=["Machine Learning", "Deep Learning", "Learning Theory", "Learning Systems"],
        faculty=[FacultyMember(name="Prof. A", specialty="ML", match_keywords=keywords)],
    )
    scored = aggregate_scores(
        _profile(gpa=4.0, interests=["learning", "machine learning", "deep learning"]),
        program,
    )
    assert 0 <= scored.match_score <= 98
    # 30 + 40 + 25
    assert scored.match_score == 95


def test_zero_baselines_score_without_error():
    program = make_program(avg_gpa=0.0, min_gpa=0.0, research_areas=["Machine Learning"])
    scored = aggregate_scores(_profile(), program)

    assert scored.sub_scores["gpa_fit"].contribution == 0.0
    assert scored.match_score == 10


def test_match_score_is_monotonic_in_research_overlap(ml_profile):
    base = make_program(research_areas=["Chemistry"])
    better = make_program(research_areas=["Chemistry", "Machine Learning"])

    assert aggregate_scores(ml_profile, better).match_score > aggregate_scores(ml_profile, base).match_score


def test_batch_aggregate_preserves_catalog_order(ml_profile):
    catalog = [make_program(name=f"University {i}") for i in range(4)]
    scored = batch_aggregate(ml_profile, catalog)
    assert [s.program.name for s in scored] == [p.name for p in catalog]
