"""Unit tests for table formatting and the analysis text report."""

import pytest

from atsmatch.contexts.intake import text_statistics
from atsmatch.contexts.reporting import format_analysis_report
from atsmatch.contexts.scoring import analyze_resume
from atsmatch.utils.report_formatter import Column, TableFormatter, format_score_bar


@pytest.mark.unit
class TestScoreBar:
    def test_half(self):
        assert format_score_bar(50, width=10) == "[#####.....]"

    def test_full_and_empty(self):
        assert format_score_bar(100, width=4) == "[####]"
        assert format_score_bar(0, width=4) == "[....]"

    def test_clamped(self):
        assert format_score_bar(150, width=4) == "[####]"
        assert format_score_bar(-5, width=4) == "[....]"


@pytest.mark.unit
class TestTableFormatter:
    def test_rows_aligned(self):
        table = TableFormatter([Column("Name", 6), Column("Score", 5, ">")], total_width=12)
        table.add_table_header().add_separator().add_row(["skills", 67])

        assert table.render().splitlines() == [
            "Name   Score",
            "-" * 12,
            "skills    67",
        ]

    def test_row_length_mismatch(self):
        table = TableFormatter([Column("Name", 6)])
        with pytest.raises(ValueError, match="Expected 1 values, got 2"):
            table.add_row(["a", "b"])

    def test_list_placeholder(self):
        table = TableFormatter().add_list([])
        assert table.render() == "  (none)"

    def test_list_bullets(self):
        table = TableFormatter().add_list(["python", "react"], bullet="+")
        assert table.render() == "  + python\n  + react"


@pytest.mark.unit
def test_analysis_report_sections(senior_developer_texts):
    resume, job = senior_developer_texts
    result = analyze_resume(resume, job)

    report = format_analysis_report(
        result, resume_stats=text_statistics(resume), job_stats=text_statistics(job)
    )

    assert "Overall score: 81%" in report
    assert "(strong)" in report
    assert "Matched skills (6):" in report
    assert "  x kubernetes" in report
    assert "  + python" in report
    assert "Industry match: yes" in report
    assert "Matching roles: developer" in report
    assert "Years of experience stated: 6" in report
    assert "Demonstrates leadership and management capabilities" in report
    assert f"Resume: {len(resume)} characters" in report

    score_rows = [line for line in report.splitlines() if line.startswith("Skills Match")]
    assert len(score_rows) == 1
    assert "67%" in score_rows[0]
    assert "moderate" in score_rows[0]


@pytest.mark.unit
def test_analysis_report_empty_result():
    report = format_analysis_report(analyze_resume("", ""))

    assert "Overall score: 69%" in report
    assert "Matched skills (0):" in report
    assert "(none)" in report
    # No density table without job description tokens
    assert "Job Description Term" not in report
