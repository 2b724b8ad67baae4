"""Input text statistics shown alongside the job description."""

from dataclasses import dataclass

from atsmatch.utils.text_processing import word_count


@dataclass(frozen=True)
class TextStatistics:
    characters: int
    words: int


def text_statistics(text: str) -> TextStatistics:
    """
    Count characters and whitespace-separated words.

    Example:
        >>> text_statistics("Senior Python developer")
        TextStatistics(characters=23, words=3)
    """
    return TextStatistics(characters=len(text), words=word_count(text))
