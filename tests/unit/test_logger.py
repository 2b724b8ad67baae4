"""Unit tests for session logger setup."""

import pytest

from atsmatch.contexts.scoring import analyze_resume
from atsmatch.contexts.scoring.logger import setup_scoring_logger


@pytest.mark.unit
def test_setup_writes_provenance(tmp_path):
    log_file = setup_scoring_logger(tmp_path / "session", console=False, Resume="resume.txt")

    assert log_file == tmp_path / "session" / "score.log"
    text = log_file.read_text(encoding="utf-8")
    assert "Command:" in text
    assert "Working directory:" in text
    assert "Resume: resume.txt" in text
    assert "atsmatch: 0.1.0" in text


@pytest.mark.unit
def test_analysis_logged_at_debug(tmp_path):
    log_file = setup_scoring_logger(tmp_path, console=False)
    analyze_resume("6 years experience in python", "5+ years experience with python")

    text = log_file.read_text(encoding="utf-8")
    assert "[score] Analyzing resume" in text
    assert "Years of experience: 6 (required: 5)" in text
    assert "[score] Overall score: 83" in text


@pytest.mark.unit
def test_session_header_stays_out_of_console(tmp_path, capsys):
    setup_scoring_logger(tmp_path, Resume="resume.txt")
    analyze_resume("6 years experience in python", "5+ years experience with python")

    console = capsys.readouterr().err
    assert "Working directory:" not in console
    assert "[score] Overall score: 83" in console
