"""
ATSMATCH - Applicant Tracking System Match scoring

Scores a resume against a job description with deterministic keyword and
heuristic matching over fixed vocabularies.

Architecture:
- Intake Context: Resume and job description text acquisition
- Scoring Context: Skill, experience, education and keyword scoring
- Reporting Context: Human-readable and JSON rendering of results
"""

from loguru import logger

__version__ = "0.1.0"

# Library use stays silent until a session logger is configured
logger.disable("atsmatch")
