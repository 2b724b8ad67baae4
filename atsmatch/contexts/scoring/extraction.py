"""
Stateless extraction helpers for resume/job description matching.

All matching is plain substring containment on lowercased text: a phrase
matches anywhere, including inside longer words ("go" matches "google").
Callers pass text already lowercased unless a function says otherwise.
"""

import re
from typing import Dict, Iterable, List, Sequence

from atsmatch.contexts.scoring.patterns import (
    EXPERIENCE_YEAR_PATTERNS,
    LEADING_INTEGER,
    REQUIRED_YEAR_PATTERNS,
)
from atsmatch.contexts.scoring.vocabulary import INDUSTRY_KEYWORDS, ROLE_KEYWORDS
from atsmatch.utils.text_processing import split_words

# Stated years with more significant digits than this are clamped to YEARS_CAP
MAX_YEAR_DIGITS = 6
YEARS_CAP = 10**MAX_YEAR_DIGITS


def extract_skills(text: str, vocabulary: Sequence[str]) -> List[str]:
    """
    Filter a vocabulary down to the phrases found in text.

    Args:
        text: Lowercased text to search
        vocabulary: Ordered phrases to look for

    Returns:
        Found phrases, in vocabulary order
    """
    return [phrase for phrase in vocabulary if phrase.lower() in text]


def extract_common_terms(first: str, second: str, vocabulary: Sequence[str]) -> List[str]:
    """Vocabulary phrases present in both lowercased texts, in vocabulary order."""
    return [term for term in vocabulary if term in first and term in second]


def _parse_years(digits: str) -> int:
    """Value of a digit run, clamped to YEARS_CAP when it is implausibly long."""
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_YEAR_DIGITS:
        return YEARS_CAP
    return int(digits)


def _max_years(text: str, patterns: Iterable[re.Pattern]) -> int:
    """
    Largest integer stated by any match of any pattern, or 0 without matches.

    The integer is the first run of digits inside each matched phrase.
    """
    max_years = 0
    for pattern in patterns:
        for match in pattern.finditer(text):
            digits = LEADING_INTEGER.search(match.group(0))
            years = _parse_years(digits.group(0)) if digits else 0
            max_years = max(max_years, years)
    return max_years


def extract_experience_years(text: str) -> int:
    """
    Years of experience a resume claims.

    Case-insensitive; text need not be lowercased. Takes the maximum over every
    "N years experience", "experience of N years" and "N years in" phrase.

    Example:
        >>> extract_experience_years("3 years in fintech, 7+ years of experience")
        7
    """
    return _max_years(text, EXPERIENCE_YEAR_PATTERNS)


def extract_required_years(text: str) -> int:
    """
    Years of experience a job description requires.

    Case-insensitive; text need not be lowercased. Takes the maximum over every
    "N years experience", "minimum N years" and "at least N years" phrase.
    """
    return _max_years(text, REQUIRED_YEAR_PATTERNS)


def extract_matching_roles(resume_lower: str, job_lower: str) -> List[str]:
    """Role titles mentioned in both texts."""
    return extract_common_terms(resume_lower, job_lower, ROLE_KEYWORDS)


def check_industry_match(resume_lower: str, job_lower: str) -> bool:
    """True if any industry term is mentioned in both texts."""
    return any(
        industry in resume_lower and industry in job_lower for industry in INDUSTRY_KEYWORDS
    )


def calculate_keyword_density(
    resume_lower: str,
    job_lower: str,
    top_n: int = 10,
    min_token_length: int = 4,
) -> Dict[str, int]:
    """
    Count the most frequent job description tokens and check them against the resume.

    Tokens are whitespace-separated and keep their punctuation ("python," and
    "python" are different tokens). Tokens shorter than min_token_length are
    ignored. Ties keep first-seen order (sorted() is stable).

    Args:
        resume_lower: Lowercased resume text
        job_lower: Lowercased job description text
        top_n: Number of tokens to report
        min_token_length: Shortest token counted

    Returns:
        Dict of token -> job description count if the token appears anywhere in
        the resume, else 0. Keys are always the top job description tokens.
    """
    word_counts: Dict[str, int] = {}
    for word in split_words(job_lower):
        if len(word) >= min_token_length:
            word_counts[word] = word_counts.get(word, 0) + 1

    top_words = sorted(word_counts.items(), key=lambda x: x[1], reverse=True)[:top_n]

    return {word: (count if word in resume_lower else 0) for word, count in top_words}
