from collections import Counter
from typing import Counter as CounterType
from typing import Tuple

import numpy as np

from .text_normalizer import tokenize


def build_frequency_vector(text: str) -> CounterType[str]:
    """
    Count whitespace-delimited tokens of a normalized text.

    Args:
        text: Normalized text

    Returns:
        Mapping token -> occurrence count
    """
    return Counter(tokenize(text))


def _align_vectors(vector1: CounterType[str], vector2: CounterType[str]) -> Tuple[np.ndarray, np.ndarray]:
    """Lay both vectors out over their union vocabulary, zero-filled."""
    vocabulary = sorted(set(vector1) | set(vector2))
    v1 = np.array([vector1.get(token, 0) for token in vocabulary], dtype=np.int64)
    v2 = np.array([vector2.get(token, 0) for token in vocabulary], dtype=np.int64)
    return v1, v2


def cosine_similarity_vectors(vector1: CounterType[str], vector2: CounterType[str]) -> float:
    """
    Cosine similarity of two token frequency vectors.

    Returns 0.0 when either vector has no tokens, including when both are
    empty.
    """
    if not vector1 or not vector2:
        return 0.0

    v1, v2 = _align_vectors(vector1, vector2)

    dot_product = int(np.dot(v1, v2))
    if dot_product == 0:
        return 0.0

    squared_norm1 = int(np.dot(v1, v1))
    squared_norm2 = int(np.dot(v2, v2))

    # sqrt of the product keeps identical vectors at exactly 1.0
    similarity = dot_product / float(np.sqrt(float(squared_norm1 * squared_norm2)))
    return min(1.0, max(0.0, similarity))


def cosine_similarity(text1: str, text2: str) -> float:
    """
    Cosine similarity of the token frequency vectors of two normalized texts.

    Args:
        text1: First normalized text
        text2: Second normalized text

    Returns:
        Similarity in [0, 1]
    """
    return cosine_similarity_vectors(build_frequency_vector(text1), build_frequency_vector(text2))
