"""
Regex patterns for extracting years of experience.

Pattern classes follow the convention used for intake patterns:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Convenience lists for iteration

Digits are matched as ASCII [0-9] so that the parsed integer always comes
from the same characters the pattern matched.
"""

import re
from dataclasses import dataclass

# First integer inside a matched phrase
LEADING_INTEGER: re.Pattern = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ExperienceYearPatterns:
    """
    Phrases stating how many years of experience a candidate has.

    Supports:
    - "5 years experience", "5+ years of experience"
    - "experience of 5 years", "experience 5+ years"
    - "5 years in", "3+ years in"
    """

    YEARS_OF_EXPERIENCE: re.Pattern = re.compile(
        r"([0-9]+)\+?\s*years?\s*(?:of\s*)?experience", re.IGNORECASE
    )

    EXPERIENCE_OF_YEARS: re.Pattern = re.compile(
        r"experience\s*(?:of\s*)?([0-9]+)\+?\s*years?", re.IGNORECASE
    )

    YEARS_IN: re.Pattern = re.compile(r"([0-9]+)\+?\s*years?\s*in", re.IGNORECASE)


@dataclass(frozen=True)
class RequiredYearPatterns:
    """
    Phrases stating how many years of experience a job requires.

    Supports:
    - "5+ years of experience"
    - "minimum 3 years", "minimum of 3 years"
    - "at least 4 years"
    """

    YEARS_OF_EXPERIENCE: re.Pattern = ExperienceYearPatterns.YEARS_OF_EXPERIENCE

    MINIMUM_YEARS: re.Pattern = re.compile(
        r"minimum\s*(?:of\s*)?([0-9]+)\+?\s*years?", re.IGNORECASE
    )

    AT_LEAST_YEARS: re.Pattern = re.compile(
        r"at\s*least\s*([0-9]+)\+?\s*years?", re.IGNORECASE
    )


EXPERIENCE_YEAR_PATTERNS = [
    ExperienceYearPatterns.YEARS_OF_EXPERIENCE,
    ExperienceYearPatterns.EXPERIENCE_OF_YEARS,
    ExperienceYearPatterns.YEARS_IN,
]

REQUIRED_YEAR_PATTERNS = [
    RequiredYearPatterns.YEARS_OF_EXPERIENCE,
    RequiredYearPatterns.MINIMUM_YEARS,
    RequiredYearPatterns.AT_LEAST_YEARS,
]
