"""
Scoring Context

Responsibilities:
- Holds the fixed skill, keyword, education, role and industry vocabularies
- Extracts skills, years of experience, roles and keyword density from text
- Scores skills, experience, education and keywords, and combines them
- Generates recommendation, strength and improvement sentences

Owns: Matching rules, scoring thresholds, feedback text
Never: Reads files or renders output
"""

from atsmatch.contexts.scoring.analysis_result import (
    AnalysisResult,
    CategoryScores,
    DetailedAnalysis,
    ExperienceAnalysis,
    SkillsAnalysis,
)
from atsmatch.contexts.scoring.analyzer import analyze_resume
from atsmatch.contexts.scoring.config import ScoringConfig, load_scoring_config
from atsmatch.contexts.scoring.exceptions import ScoringConfigError
from atsmatch.contexts.scoring.scoring import score_band

__all__ = [
    # Entry point
    "analyze_resume",
    # Result data structures
    "AnalysisResult",
    "CategoryScores",
    "DetailedAnalysis",
    "ExperienceAnalysis",
    "SkillsAnalysis",
    # Configuration
    "ScoringConfig",
    "ScoringConfigError",
    "load_scoring_config",
    # Helpers
    "score_band",
]
