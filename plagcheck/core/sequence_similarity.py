"""
Character sequence measures: Levenshtein edit distance and longest common
subsequence, each normalized by the longer input.

Both run in O(m*n) time. The ``python`` backend is the plain dynamic
program; the ``rapidfuzz`` backend returns the same numbers from the
rapidfuzz C++ implementation and is the one to pick for long documents.
"""

from typing import Optional

from rapidfuzz.distance import LCSseq, Levenshtein

from .validation import ParameterValidator

BACKENDS = ('python', 'rapidfuzz')


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning ``s1`` into ``s2``.

    Only the previous row of the DP table is kept.
    """
    m, n = len(s1), len(s2)
    previous = list(range(n + 1))  # dp[0][j] = j

    for i in range(1, m + 1):
        current = [i] + [0] * n  # dp[i][0] = i
        c1 = s1[i - 1]
        for j in range(1, n + 1):
            if c1 == s2[j - 1]:
                current[j] = previous[j - 1]
            else:
                current[j] = min(previous[j], current[j - 1], previous[j - 1]) + 1
        previous = current

    return previous[n]


def lcs_length(s1: str, s2: str) -> int:
    """Length of the longest common subsequence of ``s1`` and ``s2``."""
    m, n = len(s1), len(s2)
    previous = [0] * (n + 1)

    for i in range(1, m + 1):
        current = [0] * (n + 1)
        c1 = s1[i - 1]
        for j in range(1, n + 1):
            if c1 == s2[j - 1]:
                current[j] = previous[j - 1] + 1
            else:
                current[j] = max(previous[j], current[j - 1])
        previous = current

    return previous[n]


def _distance(s1: str, s2: str, backend: str) -> int:
    if backend == 'rapidfuzz':
        return Levenshtein.distance(s1, s2)
    return levenshtein_distance(s1, s2)


def _lcs(s1: str, s2: str, backend: str) -> int:
    if backend == 'rapidfuzz':
        return LCSseq.similarity(s1, s2)
    return lcs_length(s1, s2)


def edit_distance_similarity(s1: Optional[str], s2: Optional[str], backend: str = 'python') -> float:
    """
    Edit distance similarity, ``1 - distance / max(len1, len2)``.

    Args:
        s1: First normalized text, or None
        s2: Second normalized text, or None
        backend: ``python`` or ``rapidfuzz``

    Returns:
        0.0 if either text is None, 1.0 if both are empty, otherwise the
        normalized similarity in [0, 1]

    Raises:
        ParameterValidationError: If the backend is unknown
    """
    backend = ParameterValidator.validate_choice(backend, "backend", BACKENDS)
    if s1 is None or s2 is None:
        return 0.0

    max_length = max(len(s1), len(s2))
    if max_length == 0:
        return 1.0

    return 1.0 - _distance(s1, s2, backend) / max_length


def character_similarity(s1: Optional[str], s2: Optional[str], backend: str = 'python') -> float:
    """
    Character level similarity, ``lcs_length / max(len1, len2)``.

    Same None/empty contract as :func:`edit_distance_similarity`.
    """
    backend = ParameterValidator.validate_choice(backend, "backend", BACKENDS)
    if s1 is None or s2 is None:
        return 0.0

    max_length = max(len(s1), len(s2))
    if max_length == 0:
        return 1.0

    return _lcs(s1, s2, backend) / max_length
