"""
Human-readable rendering of analysis results.

Mirrors the sections of the interactive result view: overall score, category
score bars, matched/missing skills and keywords, detailed analysis, and the
recommendation, strength and improvement lists.
"""

from typing import Optional

from atsmatch.contexts.intake.statistics import TextStatistics
from atsmatch.contexts.scoring.analysis_result import AnalysisResult
from atsmatch.contexts.scoring.scoring import score_band
from atsmatch.utils.report_formatter import Column, TableFormatter, format_score_bar
from atsmatch.utils.text_processing import truncate_display

REPORT_WIDTH = 80

CATEGORY_LABELS = (
    ("skills", "Skills Match"),
    ("experience", "Experience"),
    ("education", "Education"),
    ("keywords", "Keywords"),
)

SCORE_COLUMNS = [
    Column("Category", 16),
    Column("Score", 6, ">"),
    Column("Bar", 22),
    Column("Band", 10),
]

DENSITY_COLUMNS = [
    Column("Job Description Term", 40),
    Column("Count", 8, ">"),
    Column("In Resume", 10),
]


def _join_or_none(items) -> str:
    return ", ".join(items) if items else "(none)"


def format_analysis_report(
    result: AnalysisResult,
    resume_stats: Optional[TextStatistics] = None,
    job_stats: Optional[TextStatistics] = None,
) -> str:
    """
    Format an AnalysisResult as a text report.

    Args:
        result: AnalysisResult from analyze_resume()
        resume_stats: Optional character/word counts of the resume
        job_stats: Optional character/word counts of the job description

    Returns:
        Formatted report string
    """
    report = TableFormatter(total_width=REPORT_WIDTH)

    report.add_section_header("RESUME ANALYSIS")
    report.add_text(
        f"Overall score: {result.overall_score}% {format_score_bar(result.overall_score)} "
        f"({score_band(result.overall_score)})"
    )
    if resume_stats:
        report.add_text(f"Resume: {resume_stats.characters} characters, {resume_stats.words} words")
    if job_stats:
        report.add_text(
            f"Job description: {job_stats.characters} characters, {job_stats.words} words"
        )
    report.add_blank_line()

    # Category scores
    report.set_columns(SCORE_COLUMNS).add_table_header().add_separator()
    for attribute, label in CATEGORY_LABELS:
        score = getattr(result.category_scores, attribute)
        report.add_row([label, f"{score}%", format_score_bar(score), score_band(score)])
    report.add_blank_line()

    # Skills and keywords
    report.add_section_header("SKILLS & KEYWORDS")
    report.add_text(f"Matched skills ({len(result.matched_skills)}):")
    report.add_list(result.matched_skills, bullet="+")
    report.add_text(f"Missing skills ({len(result.missing_skills)}):")
    report.add_list(result.missing_skills, bullet="x")
    report.add_text(f"Matched keywords ({len(result.matched_keywords)}):")
    report.add_list(result.matched_keywords)
    report.add_blank_line()

    # Detailed analysis
    details = result.detailed_analysis
    experience = details.experience_analysis
    report.add_section_header("DETAILED ANALYSIS")
    report.add_text(f"Technical skills in resume: {_join_or_none(details.skills_analysis.technical)}")
    report.add_text(f"Soft skills in resume: {_join_or_none(details.skills_analysis.soft)}")
    report.add_text(f"Years of experience stated: {experience.relevant_years}")
    report.add_text(f"Matching roles: {_join_or_none(experience.matching_roles)}")
    report.add_text(f"Industry match: {'yes' if experience.industry_match else 'no'}")
    report.add_blank_line()

    if details.keyword_density:
        report.set_columns(DENSITY_COLUMNS).add_table_header().add_separator()
        for word, count in details.keyword_density.items():
            report.add_row([truncate_display(word, 38), count, "yes" if count else "no"])
        report.add_blank_line()

    # Feedback
    report.add_section_header("FEEDBACK")
    report.add_text("Recommendations:")
    report.add_list(result.recommendations)
    report.add_text("Strengths:")
    report.add_list(result.strengths)
    report.add_text("Areas for improvement:")
    report.add_list(result.improvements)

    return report.render()
