"""
Logger setup for scoring sessions.

One session writes a DEBUG log file into its own directory, optionally mirrors
INFO and above to stderr, and opens with a short header recording how it was
run. Context-specific wrappers live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path

from loguru import logger

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"
HEADER_RULE = "=" * 80


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    console: bool = True,
) -> Path:
    """
    Configure loguru for one session and write the session header.

    Replaces any existing handlers and re-enables the "atsmatch" namespace,
    which is silenced on import. Console output goes to stderr so that JSON
    printed on stdout stays parseable.

    Args:
        context_name: Context identifier, used as the log file name (e.g., "score")
        log_dir: Directory for this logging session
        extra_provenance: Key-value pairs appended to the session header
        console: Also log INFO and above to stderr

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.enable("atsmatch")

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    if console:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_session_header(extra_provenance)

    return log_file


def log_session_header(extra_context: dict = None) -> None:
    """Log the command line and working directory, then any extra entries."""
    logger.debug(HEADER_RULE)
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    for key, value in (extra_context or {}).items():
        logger.debug(f"{key}: {value}")
    logger.debug(HEADER_RULE)
