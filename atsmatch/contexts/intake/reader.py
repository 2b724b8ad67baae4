"""
Read resume and job description text from files.

Plain text files are decoded as UTF-8 (undecodable bytes replaced). PDF text
is extracted page by page with pdfplumber and joined with newlines.
"""

from pathlib import Path
from typing import Union

import pdfplumber

from atsmatch.contexts.intake.exceptions import TextExtractionError, UnsupportedFileTypeError

TEXT_SUFFIXES = (".txt", ".text", ".md")
PDF_SUFFIXES = (".pdf",)
SUPPORTED_SUFFIXES = TEXT_SUFFIXES + PDF_SUFFIXES


def extract_text_from_pdf(pdf_path: Path) -> str:
    """
    Extract text from every page of a PDF.

    Pages without a text layer (e.g. scanned images) contribute nothing.

    Raises:
        TextExtractionError: If the PDF cannot be opened or parsed
    """
    text_parts = []
    try:
        with pdfplumber.open(pdf_path) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text_parts.append(page_text)
    except Exception as e:
        raise TextExtractionError("Could not extract text from PDF", pdf_path, e) from e

    return "\n".join(text_parts)


def read_text_file(path: Union[str, Path]) -> str:
    """
    Read the text content of a resume or job description file.

    Args:
        path: Path to a .txt, .text, .md or .pdf file

    Returns:
        File text (may be empty)

    Raises:
        UnsupportedFileTypeError: If the suffix is not supported
        TextExtractionError: If the file is missing or cannot be read
    """
    path = Path(path) if isinstance(path, str) else path
    suffix = path.suffix.lower()

    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedFileTypeError(path, SUPPORTED_SUFFIXES)

    if not path.is_file():
        raise TextExtractionError("File not found", path)

    if suffix in PDF_SUFFIXES:
        return extract_text_from_pdf(path)

    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise TextExtractionError("Could not read text file", path, e) from e
