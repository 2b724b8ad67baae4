"""
Category and overall score calculation.

Every score is an integer in [0, 100]. When a job description states no
requirement for a category, the category gets a neutral default instead of
zero (see ScoringConfig).
"""

from typing import Sequence

from atsmatch.contexts.scoring.config import DEFAULT_SCORING_CONFIG, ScoringConfig
from atsmatch.contexts.scoring.extraction import (
    extract_experience_years,
    extract_required_years,
    extract_skills,
)
from atsmatch.contexts.scoring.vocabulary import EDUCATION_KEYWORDS
from atsmatch.utils.text_processing import round_half_up

# (minimum resume/required ratio as numerator/denominator, score), checked top to bottom
EXPERIENCE_RATIO_STEPS = (
    ((1, 1), 100),
    ((4, 5), 85),
    ((3, 5), 70),
    ((2, 5), 55),
)
EXPERIENCE_FLOOR_SCORE = 40


def calculate_skills_score(
    matched_skills: Sequence[str],
    required_skills: Sequence[str],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> int:
    """Percentage of required skills found in the resume."""
    if not required_skills:
        return config.default_skills_score
    return round_half_up(len(matched_skills) / len(required_skills) * 100)


def calculate_keywords_score(
    matched_keywords: Sequence[str], config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> int:
    """Fixed points per matched keyword, capped at 100."""
    return min(100, len(matched_keywords) * config.keyword_points)


def experience_score_for_years(
    resume_years: int, required_years: int, config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> int:
    """
    Map the resume/required years ratio onto a coarse step score.

    No interpolation: 0.79 of the required years scores the same as 0.6.
    Thresholds are compared by cross-multiplying, so any integer is accepted.
    """
    if required_years == 0:
        return config.default_experience_score

    for (numerator, denominator), score in EXPERIENCE_RATIO_STEPS:
        if resume_years * denominator >= required_years * numerator:
            return score
    return EXPERIENCE_FLOOR_SCORE


def calculate_experience_score(
    resume_text: str, job_description: str, config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> int:
    """Experience score from the years stated in each text."""
    return experience_score_for_years(
        extract_experience_years(resume_text), extract_required_years(job_description), config
    )


def calculate_education_score(
    resume_lower: str, job_lower: str, config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> int:
    """
    Education score as a ratio of how many education terms each text mentions.

    Compares counts, not which terms overlap: a resume naming "bachelor" and
    "master" scores 100 against a job naming only "degree".
    """
    resume_education = extract_skills(resume_lower, EDUCATION_KEYWORDS)
    required_education = extract_skills(job_lower, EDUCATION_KEYWORDS)

    if not required_education:
        return config.default_education_score

    match_ratio = len(resume_education) / len(required_education)
    return min(100, round_half_up(match_ratio * 100))


def calculate_overall_score(
    skills_score: int,
    experience_score: int,
    keywords_score: int,
    education_score: int,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> int:
    """Weighted sum of the category scores, rounded half up."""
    return round_half_up(
        (skills_score * config.skills_weight)
        + (experience_score * config.experience_weight)
        + (keywords_score * config.keywords_weight)
        + (education_score * config.education_weight)
    )


def score_band(score: int) -> str:
    """
    Qualitative band for a 0-100 score.

    Returns:
        "strong" (>= 80), "moderate" (>= 60) or "weak"
    """
    if score >= 80:
        return "strong"
    if score >= 60:
        return "moderate"
    return "weak"
