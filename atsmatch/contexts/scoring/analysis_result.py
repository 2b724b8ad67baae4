"""
Analysis result data structures for the Scoring context.

AnalysisResult is the single output record of analyze_resume(). All classes
are frozen; a fresh record is built on every call.
"""

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class CategoryScores:
    """Per-category scores, each an integer in [0, 100]."""

    skills: int
    experience: int
    education: int
    keywords: int


@dataclass(frozen=True)
class SkillsAnalysis:
    """
    Skill breakdown.

    technical and soft list the skills found in the resume (not the job
    description); missing lists required skills absent from the resume.
    """

    technical: List[str] = field(default_factory=list)
    soft: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ExperienceAnalysis:
    relevant_years: int = 0
    matching_roles: List[str] = field(default_factory=list)
    industry_match: bool = False


@dataclass(frozen=True)
class DetailedAnalysis:
    skills_analysis: SkillsAnalysis
    experience_analysis: ExperienceAnalysis
    keyword_density: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of scoring one resume against one job description.

    Attributes:
        overall_score: Weighted combination of the category scores (0-100)
        category_scores: Skills, experience, education and keyword scores
        matched_skills: Required skills found in the resume (technical first, then soft)
        missing_skills: Required skills absent from the resume, same order
        matched_keywords: Important keywords present in both texts
        recommendations: Suggested changes, most specific first
        strengths: What the resume already does well
        improvements: Longer-term improvement suggestions
        detailed_analysis: Skill, experience and keyword density breakdown
    """

    overall_score: int
    category_scores: CategoryScores
    matched_skills: List[str]
    missing_skills: List[str]
    matched_keywords: List[str]
    recommendations: List[str]
    strengths: List[str]
    improvements: List[str]
    detailed_analysis: DetailedAnalysis

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dicts and lists, suitable for JSON."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
