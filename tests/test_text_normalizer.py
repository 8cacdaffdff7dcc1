import pytest

from plagcheck.core.text_normalizer import normalize_text, tokenize

from .conftest import SAMPLE_TEXTS


class TestNormalizeText:
    def test_strips_punctuation(self):
        assert normalize_text("今天天气很好！！！") == "今天天气很好"

    def test_lowercases_and_collapses_whitespace(self):
        assert normalize_text("  Hello, World!  Foo\tBAR\n") == "hello world foo bar"

    def test_none_becomes_empty_string(self):
        assert normalize_text(None) == ""

    def test_punctuation_only_is_empty(self):
        assert normalize_text("!!! ??? ...") == ""

    def test_keeps_ascii_digits(self):
        assert normalize_text("第1章: Chapter 2") == "第1章 chapter 2"

    def test_non_ascii_letters_are_removed(self):
        assert normalize_text("Café naïve") == "caf na ve"

    def test_fullwidth_digits_are_removed(self):
        assert normalize_text("１２３abc") == "abc"

    @pytest.mark.parametrize("text", ["今天\u3000天气", "今天\x1c天气", "今天\u00a0\u2003 天气"])
    def test_unicode_whitespace_collapses_to_one_space(self, text):
        assert normalize_text(text) == "今天 天气"

    def test_punctuation_between_ideographs_splits_tokens(self):
        assert normalize_text("天气晴，今天晚上") == "天气晴 今天晚上"

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_idempotent(self, text):
        once = normalize_text(text)
        assert normalize_text(once) == once

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_output_has_no_outer_or_double_spaces(self, text):
        normalized = normalize_text(text)
        assert normalized == normalized.strip()
        assert "  " not in normalized


class TestTokenize:
    def test_splits_on_whitespace(self):
        assert tokenize("a b  c") == ["a", "b", "c"]

    def test_empty_and_none(self):
        assert tokenize("") == []
        assert tokenize(None) == []
