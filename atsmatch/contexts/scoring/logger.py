"""
Scoring context logger.

Provides logging interface for scoring context with automatic [score] prefix.
All scoring modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from atsmatch import __version__
from atsmatch.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[score]"


def setup_scoring_logger(log_dir: Path, console: bool = True, **provenance) -> Path:
    """
    Setup logger for a scoring session.

    Args:
        log_dir: Directory for this scoring session
        console: Also log INFO and above to the console
        **provenance: Extra provenance entries (e.g., input file names)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="score",
        log_dir=log_dir,
        extra_provenance={"atsmatch": __version__, **provenance},
        console=console,
    )


# Wrapper functions with automatic [score] prefix


def _log_info(message: str) -> None:
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level scoring-specific logging helpers


def log_inputs(resume_path: Path, job_path: Path, config_path: Path = None) -> None:
    """Log which files a scoring session reads."""
    _log_info(f"Resume: {resume_path}")
    _log_info(f"Job description: {job_path}")
    if config_path:
        _log_info(f"Scoring config: {config_path}")


def log_empty_input(label: str, path: Path) -> None:
    _log_warning(f"{label} is empty: {path}")


def log_analysis_start(resume_chars: int, job_chars: int) -> None:
    _log_debug(f"Analyzing resume ({resume_chars} chars) against job description ({job_chars} chars)")


def log_skill_matching(required: int, matched: int, keywords: int) -> None:
    _log_debug(f"  Required skills: {required}, matched: {matched}")
    _log_debug(f"  Matched keywords: {keywords}")


def log_years(resume_years: int, required_years: int) -> None:
    if required_years == 0:
        _log_debug("  No required years stated; using neutral experience score")
    else:
        _log_debug(f"  Years of experience: {resume_years} (required: {required_years})")


def log_analysis_result(result) -> None:
    """
    Log the final scores of an AnalysisResult.

    Args:
        result: AnalysisResult from analyze_resume()
    """
    scores = result.category_scores
    _log_debug(
        f"  Scores: skills={scores.skills} experience={scores.experience} "
        f"education={scores.education} keywords={scores.keywords}"
    )
    _log_success(f"Overall score: {result.overall_score}")
