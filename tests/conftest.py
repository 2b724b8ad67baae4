"""Shared pytest fixtures."""

from pathlib import Path

import pytest
from loguru import logger

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def senior_developer_texts():
    """(resume_text, job_description) for the senior developer fixture pair."""
    resume = (FIXTURES_PATH / "resume_senior_developer.txt").read_text(encoding="utf-8")
    job = (FIXTURES_PATH / "job_senior_developer.txt").read_text(encoding="utf-8")
    return resume, job


@pytest.fixture(autouse=True)
def silence_atsmatch_logging():
    """Undo any session logger a test configured."""
    yield
    logger.remove()
    logger.disable("atsmatch")
