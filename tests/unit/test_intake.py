"""Unit tests for reading input files and text statistics."""

import pytest

from atsmatch.contexts.intake import (
    TextExtractionError,
    TextStatistics,
    UnsupportedFileTypeError,
    read_text_file,
    text_statistics,
)
from atsmatch.contexts.intake import reader


class _FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class _FakePDF:
    def __init__(self, texts):
        self.pages = [_FakePage(text) for text in texts]

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


@pytest.mark.unit
class TestReadTextFile:
    def test_plain_text(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("Python developer\n", encoding="utf-8")
        assert read_text_file(path) == "Python developer\n"

    def test_accepts_string_path(self, tmp_path):
        path = tmp_path / "job.md"
        path.write_text("# Role", encoding="utf-8")
        assert read_text_file(str(path)) == "# Role"

    def test_suffix_case_insensitive(self, tmp_path):
        path = tmp_path / "RESUME.TXT"
        path.write_text("text", encoding="utf-8")
        assert read_text_file(path) == "text"

    def test_undecodable_bytes_replaced(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_bytes(b"caf\xe9")
        assert read_text_file(path) == "caf�"

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "resume.docx"
        path.write_bytes(b"")

        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            read_text_file(path)
        assert exc_info.value.path == path
        assert ".pdf" in exc_info.value.supported

    def test_missing_file(self, tmp_path):
        with pytest.raises(TextExtractionError, match="File not found"):
            read_text_file(tmp_path / "missing.txt")

    def test_pdf_pages_joined(self, tmp_path, monkeypatch):
        path = tmp_path / "resume.pdf"
        path.write_bytes(b"%PDF-1.4")
        monkeypatch.setattr(
            reader.pdfplumber, "open", lambda p: _FakePDF(["Page one", None, "Page three"])
        )

        assert read_text_file(path) == "Page one\nPage three"

    def test_pdf_failure_wrapped(self, tmp_path, monkeypatch):
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"not a pdf")

        def fail(p):
            raise ValueError("bad xref")

        monkeypatch.setattr(reader.pdfplumber, "open", fail)

        with pytest.raises(TextExtractionError) as exc_info:
            read_text_file(path)
        assert exc_info.value.path == path
        assert isinstance(exc_info.value.original_error, ValueError)


@pytest.mark.unit
class TestTextStatistics:
    def test_counts(self):
        assert text_statistics("  Senior  Python developer\n") == TextStatistics(
            characters=27, words=3
        )

    def test_empty(self):
        assert text_statistics("") == TextStatistics(characters=0, words=0)
