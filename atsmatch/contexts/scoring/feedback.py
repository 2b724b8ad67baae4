"""
Canned feedback sentences derived from scores and skill matches.

Each generator returns an ordered list: conditional sentences first, in a
fixed order, followed by closing sentences that are always present.
"""

from typing import List, Sequence

from atsmatch.contexts.scoring.vocabulary import LEADERSHIP_SKILLS

# How many missing skills a sentence names
MISSING_SKILLS_SHOWN = 3

CLOSING_RECOMMENDATION = "Tailor your resume summary to better match the specific role requirements"
CLOSING_STRENGTH = "Resume shows clear career progression and professional development"
CLOSING_IMPROVEMENTS = (
    "Consider adding quantifiable achievements and impact metrics",
    "Ensure your resume format is ATS-friendly for better parsing",
)


def _first_missing(missing_skills: Sequence[str]) -> str:
    return ", ".join(missing_skills[:MISSING_SKILLS_SHOWN])


def generate_recommendations(
    missing_skills: Sequence[str],
    skills_score: int,
    experience_score: int,
    keywords_score: int,
) -> List[str]:
    recommendations = []

    if missing_skills:
        recommendations.append(
            f"Consider adding these missing skills to your resume: {_first_missing(missing_skills)}"
        )

    if skills_score < 70:
        recommendations.append(
            "Highlight more technical skills that match the job requirements in your resume"
        )

    if experience_score < 60:
        recommendations.append(
            "Emphasize relevant work experience and quantify your achievements with specific metrics"
        )

    if keywords_score < 50:
        recommendations.append(
            "Include more industry-specific keywords from the job description in your resume"
        )

    recommendations.append(CLOSING_RECOMMENDATION)
    return recommendations


def generate_strengths(
    matched_skills: Sequence[str], skills_score: int, experience_score: int
) -> List[str]:
    strengths = []

    if matched_skills:
        strengths.append(
            f"Strong skill alignment with {len(matched_skills)} matching technical competencies"
        )

    if skills_score >= 80:
        strengths.append("Excellent skills match for the position requirements")

    if experience_score >= 80:
        strengths.append("Relevant professional experience aligns well with job expectations")

    if any(skill in LEADERSHIP_SKILLS for skill in matched_skills):
        strengths.append("Demonstrates leadership and management capabilities")

    strengths.append(CLOSING_STRENGTH)
    return strengths


def generate_improvements(
    missing_skills: Sequence[str], skills_score: int, keywords_score: int
) -> List[str]:
    improvements = []

    if len(missing_skills) > MISSING_SKILLS_SHOWN:
        improvements.append(f"Consider developing skills in: {_first_missing(missing_skills)}")

    if skills_score < 60:
        improvements.append("Add more specific technical skills mentioned in the job posting")

    if keywords_score < 40:
        improvements.append("Incorporate more relevant industry keywords throughout your resume")

    improvements.extend(CLOSING_IMPROVEMENTS)
    return improvements
