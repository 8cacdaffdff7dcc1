import itertools

import pytest

from plagcheck.core import similarity_calculator
from plagcheck.core.config import Settings
from plagcheck.core.language_detector import TextLanguage
from plagcheck.core.similarity_calculator import (
    DEFAULT_WEIGHTS, SimilarityCalculator, SimilarityWeights, classify_language, combine_scores, score
)
from plagcheck.core.validation import ParameterValidationError

from .conftest import MODIFIED_TEXT, ORIGINAL_TEXT, SAMPLE_TEXTS


class TestComprehensiveScore:
    def test_identical_chinese_text(self):
        assert score("今天天气很好", "今天天气很好") == 1.0

    def test_identical_sentence_with_punctuation(self, calculator):
        assert calculator.calculate_comprehensive_similarity(ORIGINAL_TEXT, ORIGINAL_TEXT) == 1.0

    def test_case_and_punctuation_do_not_matter(self):
        assert score("Today is a good day", "today, is a GOOD day!") == 1.0

    def test_slightly_modified_text(self, calculator):
        similarity = calculator.calculate_comprehensive_similarity(ORIGINAL_TEXT, MODIFIED_TEXT)
        assert 0.3 < similarity < 0.9

    def test_one_sided_absence_is_zero(self):
        assert score(None, "any text") == 0.0
        assert score("any text", None) == 0.0
        assert score(None, "") == 0.0

    def test_empty_against_text_is_zero(self):
        assert score("", "今天是星期天") == 0.0

    def test_two_empty_documents_are_identical(self):
        assert score("", "") == 1.0
        assert score(None, None) == 1.0
        assert score("!!!", "???") == 1.0

    def test_single_characters(self):
        assert score("a", "a") == 1.0
        assert score("a", "b") == 0.0

    @pytest.mark.parametrize("text1, text2", list(itertools.combinations(SAMPLE_TEXTS, 2)))
    def test_symmetric_and_bounded(self, calculator, text1, text2):
        forward = calculator.calculate_comprehensive_similarity(text1, text2)
        backward = calculator.calculate_comprehensive_similarity(text2, text1)
        assert forward == backward
        assert 0.0 <= forward <= 1.0

    @pytest.mark.parametrize("text", [t for t in SAMPLE_TEXTS if t.strip("!")])
    def test_self_similarity_is_one(self, calculator, text):
        assert calculator.calculate_comprehensive_similarity(text, text) == 1.0

    def test_long_documents(self, calculator):
        base = "今天天气很好，我要去看电影。"
        text1 = base * 30
        text2 = "".join(base if i % 2 == 0 else "明天天气很好，我要去看电影。" for i in range(30))

        similarity = calculator.calculate_comprehensive_similarity(text1, text2)
        assert 0.0 < similarity < 1.0

    def test_backends_give_same_score(self):
        python_calc = SimilarityCalculator(backend="python")
        rapidfuzz_calc = SimilarityCalculator(backend="rapidfuzz")
        assert (python_calc.calculate_comprehensive_similarity(ORIGINAL_TEXT, MODIFIED_TEXT)
                == rapidfuzz_calc.calculate_comprehensive_similarity(ORIGINAL_TEXT, MODIFIED_TEXT))


class TestCombineScores:
    def test_weighted_formula(self):
        assert combine_scores(0.9, 0.8, 0.7) == pytest.approx(0.83, abs=1e-9)

    def test_all_ones(self):
        assert combine_scores(1.0, 1.0, 1.0) == 1.0

    def test_custom_weights(self):
        weights = SimilarityWeights(cosine=1.0, edit_distance=0.0, character=0.0)
        assert combine_scores(0.25, 1.0, 1.0, weights) == 0.25


class TestWeights:
    def test_defaults(self):
        assert DEFAULT_WEIGHTS == SimilarityWeights(0.5, 0.3, 0.2)

    def test_weights_must_sum_to_one(self):
        with pytest.raises(ParameterValidationError):
            SimilarityWeights(0.5, 0.5, 0.5)

    def test_weights_must_be_in_unit_interval(self):
        with pytest.raises(ParameterValidationError):
            SimilarityWeights(1.2, -0.1, -0.1)

    def test_calculator_rejects_non_weights(self):
        with pytest.raises(ParameterValidationError):
            SimilarityCalculator(weights=(0.5, 0.3, 0.2))

    def test_calculator_rejects_unknown_backend(self):
        with pytest.raises(ParameterValidationError):
            SimilarityCalculator(backend="gpu")

    def test_from_settings(self):
        settings = Settings(weight_cosine=0.6, weight_edit=0.2, weight_character=0.2, backend="rapidfuzz")
        calculator = SimilarityCalculator.from_settings(settings)
        assert calculator.weights == SimilarityWeights(0.6, 0.2, 0.2)
        assert calculator.backend == "rapidfuzz"


class TestCompareReport:
    def test_report_breakdown(self, calculator):
        report = calculator.compare("今天天气很好", "今天天气好")

        assert report.cosine == 0.0
        assert report.edit_distance == pytest.approx(1 - 1 / 6)
        assert report.character == pytest.approx(5 / 6)
        assert report.comprehensive == pytest.approx(0.3 * (1 - 1 / 6) + 0.2 * (5 / 6))
        assert report.language1 == TextLanguage.CHINESE
        assert report.normalized_length1 == 6
        assert report.normalized_length2 == 5

    def test_report_for_missing_text(self, calculator):
        report = calculator.compare(None, "Today is a good day")
        assert report.comprehensive == 0.0
        assert report.language1 == TextLanguage.UNKNOWN
        assert report.language2 == TextLanguage.ENGLISH

    def test_to_dict_uses_plain_values(self, calculator):
        data = calculator.compare("abc", "abc").to_dict()
        assert data["comprehensive"] == 1.0
        assert data["language1"] == "english"


def test_classify_language_shortcut():
    assert classify_language("Today is a good day") == TextLanguage.ENGLISH
    assert classify_language("今天天气很好") == TextLanguage.CHINESE
    assert classify_language("今天天气很好 Today is good") == TextLanguage.MIXED
    assert classify_language(None) == TextLanguage.UNKNOWN


def test_shortcuts_share_one_calculator_built_at_import(monkeypatch):
    shared = similarity_calculator._default_calculator
    assert isinstance(shared, SimilarityCalculator)
    assert shared.weights == DEFAULT_WEIGHTS

    calls = []
    monkeypatch.setattr(shared, "calculate_comprehensive_similarity", lambda a, b: calls.append((a, b)) or 0.25)
    assert score("a", "b") == 0.25
    assert calls == [("a", "b")]
    assert similarity_calculator._default_calculator is shared
