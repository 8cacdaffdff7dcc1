"""
Text normalization shared by every similarity measure.

Only CJK ideographs, ASCII letters, ASCII digits and whitespace survive.
Everything else becomes a space, ASCII letters are lowercased and whitespace
runs collapse to one space.
"""

import re
from typing import List, Optional

# CJK Unified Ideographs block
CJK_RANGE = r"\u4e00-\u9fff"

CJK_PATTERN = re.compile(f'[{CJK_RANGE}]')
ASCII_LETTER_PATTERN = re.compile('[a-zA-Z]')
NON_TEXT_PATTERN = re.compile(f'[^{CJK_RANGE}a-zA-Z0-9\\s]')
WHITESPACE_PATTERN = re.compile(r'\s+')


def normalize_text(text: Optional[str]) -> str:
    """
    Normalize raw document text for comparison.

    Args:
        text: Raw text, or None

    Returns:
        Normalized text; an empty string for None
    """
    if text is None:
        return ""

    cleaned = NON_TEXT_PATTERN.sub(' ', text)
    # Only ASCII letters are left with a case
    cleaned = cleaned.lower()
    return WHITESPACE_PATTERN.sub(' ', cleaned).strip()


def tokenize(text: Optional[str]) -> List[str]:
    """Split text on whitespace, dropping empty tokens."""
    if not text:
        return []
    return [token for token in WHITESPACE_PATTERN.split(text) if token]
