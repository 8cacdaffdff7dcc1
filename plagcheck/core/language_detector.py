"""
Script based language labelling of raw text.

The label is informational and does not feed into the similarity score.
"""

from enum import Enum
from typing import Optional, Tuple

from .text_normalizer import ASCII_LETTER_PATTERN, CJK_PATTERN

# Minority share of counted characters at which text counts as mixed
DEFAULT_MIXED_THRESHOLD = 0.3


class TextLanguage(Enum):
    CHINESE = "chinese"
    ENGLISH = "english"
    MIXED = "mixed"
    UNKNOWN = "unknown"


def count_scripts(text: Optional[str]) -> Tuple[int, int]:
    """
    Count CJK ideographs and ASCII letters in ``text``.

    Digits, punctuation and whitespace are not counted.

    Returns:
        Tuple of (chinese_count, english_count)
    """
    if not text:
        return 0, 0
    return len(CJK_PATTERN.findall(text)), len(ASCII_LETTER_PATTERN.findall(text))


def detect_language(text: Optional[str], mixed_threshold: float = DEFAULT_MIXED_THRESHOLD) -> TextLanguage:
    """
    Label the dominant script of ``text``.

    Args:
        text: Raw text, or None
        mixed_threshold: Share of counted characters the minority script
            needs for the text to be labelled MIXED

    Returns:
        UNKNOWN for None, blank text or text without letters and
        ideographs; MIXED when counts are equal or the minority script
        reaches ``mixed_threshold``; otherwise CHINESE or ENGLISH.
    """
    if text is None or not text.strip():
        return TextLanguage.UNKNOWN

    chinese_count, english_count = count_scripts(text)
    total = chinese_count + english_count
    if total == 0:
        return TextLanguage.UNKNOWN

    if chinese_count == english_count:
        return TextLanguage.MIXED

    if chinese_count and english_count and min(chinese_count, english_count) / total >= mixed_threshold:
        return TextLanguage.MIXED

    return TextLanguage.CHINESE if chinese_count > english_count else TextLanguage.ENGLISH
