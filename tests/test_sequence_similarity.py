import pytest

from plagcheck.core.sequence_similarity import (
    BACKENDS, character_similarity, edit_distance_similarity, lcs_length, levenshtein_distance
)
from plagcheck.core.text_normalizer import normalize_text
from plagcheck.core.validation import ParameterValidationError

from .conftest import MODIFIED_TEXT, ORIGINAL_TEXT


class TestLevenshteinDistance:
    @pytest.mark.parametrize("s1, s2, expected", [
        ("", "", 0),
        ("abc", "", 3),
        ("", "abc", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("今天天气很好", "今天天气好", 1),
        ("abc", "abc", 0),
    ])
    def test_known_distances(self, s1, s2, expected):
        assert levenshtein_distance(s1, s2) == expected


class TestLcsLength:
    @pytest.mark.parametrize("s1, s2, expected", [
        ("", "", 0),
        ("abc", "", 0),
        ("ABCBDAB", "BDCABA", 4),
        ("今天天气很好", "今天天气好", 5),
        ("abc", "abc", 3),
        ("abc", "xyz", 0),
    ])
    def test_known_lengths(self, s1, s2, expected):
        assert lcs_length(s1, s2) == expected


@pytest.mark.parametrize("backend", BACKENDS)
class TestEditDistanceSimilarity:
    def test_both_empty_is_one(self, backend):
        assert edit_distance_similarity("", "", backend=backend) == 1.0

    def test_none_is_zero(self, backend):
        assert edit_distance_similarity(None, "abc", backend=backend) == 0.0
        assert edit_distance_similarity("abc", None, backend=backend) == 0.0
        assert edit_distance_similarity(None, None, backend=backend) == 0.0

    def test_one_deletion_out_of_six(self, backend):
        similarity = edit_distance_similarity("今天天气很好", "今天天气好", backend=backend)
        assert similarity > 0.8
        assert similarity < 1.0
        assert similarity == pytest.approx(1 - 1 / 6)

    def test_empty_against_text_is_zero(self, backend):
        assert edit_distance_similarity("abc", "", backend=backend) == 0.0


@pytest.mark.parametrize("backend", BACKENDS)
class TestCharacterSimilarity:
    def test_identical(self, backend):
        assert character_similarity("今天天气很好", "今天天气很好", backend=backend) == 1.0

    def test_both_empty_is_one(self, backend):
        assert character_similarity("", "", backend=backend) == 1.0

    def test_none_is_zero(self, backend):
        assert character_similarity(None, "abc", backend=backend) == 0.0

    def test_ratio_uses_longer_text(self, backend):
        assert character_similarity("今天天气很好", "今天天气好", backend=backend) == pytest.approx(5 / 6)


@pytest.mark.parametrize("s1, s2", [
    ("kitten", "sitting"),
    ("今天天气很好", "今天天气好"),
    (normalize_text(ORIGINAL_TEXT), normalize_text(MODIFIED_TEXT)),
    ("the quick brown fox", "the quick brown dog jumps"),
    ("", "abc"),
])
def test_backends_agree(s1, s2):
    assert edit_distance_similarity(s1, s2, backend="python") == edit_distance_similarity(s1, s2, backend="rapidfuzz")
    assert character_similarity(s1, s2, backend="python") == character_similarity(s1, s2, backend="rapidfuzz")


def test_unknown_backend_is_rejected():
    with pytest.raises(ParameterValidationError):
        edit_distance_similarity("a", "b", backend="numba")
    with pytest.raises(ParameterValidationError):
        character_similarity("a", "b", backend="")
