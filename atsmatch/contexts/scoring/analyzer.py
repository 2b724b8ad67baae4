"""
Resume scorer.

analyze_resume() is a pure function of its two input strings: it never
raises, never keeps state between calls, and returns a fresh AnalysisResult
whose scores are all within [0, 100].

Steps, in order:
1. Lowercase both texts once
2. Extract technical and soft skills from each text; required = job description skills
3. Split required skills into matched and missing
4. Match important keywords present in both texts
5. Score skills, keywords, experience and education
6. Combine into the weighted overall score
7. Generate recommendations, strengths and improvements
8. Build the detailed analysis (resume skills, years, roles, industry, keyword density)
"""

from typing import Optional

from atsmatch.contexts.scoring.analysis_result import (
    AnalysisResult,
    CategoryScores,
    DetailedAnalysis,
    ExperienceAnalysis,
    SkillsAnalysis,
)
from atsmatch.contexts.scoring.config import DEFAULT_SCORING_CONFIG, ScoringConfig
from atsmatch.contexts.scoring.extraction import (
    calculate_keyword_density,
    check_industry_match,
    extract_common_terms,
    extract_experience_years,
    extract_matching_roles,
    extract_required_years,
    extract_skills,
)
from atsmatch.contexts.scoring.feedback import (
    generate_improvements,
    generate_recommendations,
    generate_strengths,
)
from atsmatch.contexts.scoring.logger import (
    log_analysis_result,
    log_analysis_start,
    log_skill_matching,
    log_years,
)
from atsmatch.contexts.scoring.scoring import (
    calculate_education_score,
    calculate_keywords_score,
    calculate_overall_score,
    calculate_skills_score,
    experience_score_for_years,
)
from atsmatch.contexts.scoring.vocabulary import (
    IMPORTANT_KEYWORDS,
    SOFT_SKILLS,
    TECHNICAL_SKILLS,
)


def analyze_resume(
    resume_text: str, job_description: str, config: Optional[ScoringConfig] = None
) -> AnalysisResult:
    """
    Score a resume against a job description.

    Args:
        resume_text: Candidate resume as plain text
        job_description: Job description as plain text
        config: Optional scoring weights and neutral defaults (defaults to the
            documented constants)

    Returns:
        AnalysisResult with category scores, skill/keyword matches and feedback

    Example:
        >>> result = analyze_resume("6 years experience in Python", "5+ years experience, Python")
        >>> result.category_scores.experience
        100
    """
    config = config or DEFAULT_SCORING_CONFIG
    log_analysis_start(len(resume_text), len(job_description))

    resume_lower = resume_text.lower()
    job_lower = job_description.lower()

    required_technical = extract_skills(job_lower, TECHNICAL_SKILLS)
    required_soft = extract_skills(job_lower, SOFT_SKILLS)
    required_skills = required_technical + required_soft

    resume_technical = extract_skills(resume_lower, TECHNICAL_SKILLS)
    resume_soft = extract_skills(resume_lower, SOFT_SKILLS)
    resume_skills = set(resume_technical + resume_soft)

    matched_skills = [skill for skill in required_skills if skill in resume_skills]
    missing_skills = [skill for skill in required_skills if skill not in resume_skills]

    matched_keywords = extract_common_terms(resume_lower, job_lower, IMPORTANT_KEYWORDS)
    log_skill_matching(len(required_skills), len(matched_skills), len(matched_keywords))

    resume_years = extract_experience_years(resume_text)
    required_years = extract_required_years(job_description)
    log_years(resume_years, required_years)

    skills_score = calculate_skills_score(matched_skills, required_skills, config)
    keywords_score = calculate_keywords_score(matched_keywords, config)
    experience_score = experience_score_for_years(resume_years, required_years, config)
    education_score = calculate_education_score(resume_lower, job_lower, config)

    overall_score = calculate_overall_score(
        skills_score, experience_score, keywords_score, education_score, config
    )

    result = AnalysisResult(
        overall_score=overall_score,
        category_scores=CategoryScores(
            skills=skills_score,
            experience=experience_score,
            education=education_score,
            keywords=keywords_score,
        ),
        matched_skills=matched_skills,
        missing_skills=missing_skills,
        matched_keywords=matched_keywords,
        recommendations=generate_recommendations(
            missing_skills, skills_score, experience_score, keywords_score
        ),
        strengths=generate_strengths(matched_skills, skills_score, experience_score),
        improvements=generate_improvements(missing_skills, skills_score, keywords_score),
        detailed_analysis=DetailedAnalysis(
            skills_analysis=SkillsAnalysis(
                technical=resume_technical,
                soft=resume_soft,
                missing=list(missing_skills),
            ),
            experience_analysis=ExperienceAnalysis(
                relevant_years=resume_years,
                matching_roles=extract_matching_roles(resume_lower, job_lower),
                industry_match=check_industry_match(resume_lower, job_lower),
            ),
            keyword_density=calculate_keyword_density(
                resume_lower,
                job_lower,
                top_n=config.density_top_n,
                min_token_length=config.density_min_token_length,
            ),
        ),
    )

    log_analysis_result(result)
    return result
