"""Unit tests for category and overall score calculation."""

import pytest

from atsmatch.contexts.scoring.config import ScoringConfig
from atsmatch.contexts.scoring.scoring import (
    calculate_education_score,
    calculate_experience_score,
    calculate_keywords_score,
    calculate_overall_score,
    calculate_skills_score,
    experience_score_for_years,
    score_band,
)
from atsmatch.utils.text_processing import round_half_up


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [(68.5, 69), (0.5, 1), (12.5, 13), (12.4999, 12), (0.0, 0), (100.0, 100)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.unit
class TestSkillsScore:
    def test_no_required_skills_is_neutral(self):
        assert calculate_skills_score([], []) == 85

    def test_ratio_rounded_half_up(self):
        required = ["a", "b", "c", "d", "e", "f", "g", "h"]
        assert calculate_skills_score(["a"], required) == 13

    def test_all_matched(self):
        assert calculate_skills_score(["python", "react"], ["python", "react"]) == 100

    def test_none_matched(self):
        assert calculate_skills_score([], ["python"]) == 0

    def test_custom_neutral_default(self):
        config = ScoringConfig(default_skills_score=50)
        assert calculate_skills_score([], [], config) == 50


@pytest.mark.unit
class TestKeywordsScore:
    def test_ten_points_each(self):
        assert calculate_keywords_score(["a", "b", "c"]) == 30

    def test_capped_at_100(self):
        assert calculate_keywords_score([str(i) for i in range(11)]) == 100

    def test_empty(self):
        assert calculate_keywords_score([]) == 0


@pytest.mark.unit
class TestExperienceScore:
    @pytest.mark.parametrize(
        "resume_years, required_years, expected",
        [
            (6, 5, 100),
            (5, 5, 100),
            (4, 5, 85),
            (3, 5, 70),
            (2, 5, 55),
            (1, 5, 40),
            (0, 5, 40),
            (10, 0, 85),
            (0, 0, 85),
            (10**400, 5, 100),
            (10**400, 10**400 + 1, 85),
        ],
    )
    def test_step_function(self, resume_years, required_years, expected):
        assert experience_score_for_years(resume_years, required_years) == expected

    def test_from_text(self):
        assert calculate_experience_score("7 years experience", "at least 10 years") == 70

    def test_no_requirement_in_text(self):
        assert calculate_experience_score("7 years experience", "Python developer") == 85


@pytest.mark.unit
class TestEducationScore:
    def test_no_education_requirement_is_neutral(self):
        assert calculate_education_score("bachelor", "no requirements") == 90

    def test_ratio_of_counts_not_overlap(self):
        """Two unrelated education terms against one still score 100."""
        assert calculate_education_score("bachelor and master", "degree") == 100

    def test_partial_ratio(self):
        assert calculate_education_score("bachelor", "bachelor, master or phd") == 33

    def test_half(self):
        assert calculate_education_score("college", "master degree") == 50

    def test_resume_without_education(self):
        assert calculate_education_score("", "degree") == 0


@pytest.mark.unit
class TestOverallScore:
    def test_weighted_sum_rounds_half_up(self):
        assert calculate_overall_score(85, 85, 0, 90) == 69

    def test_bounds(self):
        assert calculate_overall_score(100, 100, 100, 100) == 100
        assert calculate_overall_score(0, 0, 0, 0) == 0

    def test_custom_weights(self):
        config = ScoringConfig(
            skills_weight=1.0, experience_weight=0.0, keywords_weight=0.0, education_weight=0.0
        )
        assert calculate_overall_score(42, 100, 100, 100, config) == 42


@pytest.mark.unit
@pytest.mark.parametrize(
    "score, band",
    [(100, "strong"), (80, "strong"), (79, "moderate"), (60, "moderate"), (59, "weak"), (0, "weak")],
)
def test_score_band(score, band):
    assert score_band(score) == band
