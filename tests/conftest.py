import logging
import os
from pathlib import Path

import pytest

from plagcheck.core.similarity_calculator import SimilarityCalculator

ORIGINAL_TEXT = "今天是星期天，天气晴，今天晚上我要去看电影。"
MODIFIED_TEXT = "今天是周天，天气晴朗，我晚上要去看电影。"

# Mixed corpus used for property checks
SAMPLE_TEXTS = [
    "",
    "!!!",
    "今天天气很好",
    "今天天气好",
    ORIGINAL_TEXT,
    MODIFIED_TEXT,
    "Today is a good day",
    "today, is a GOOD day!",
    "今天天气很好 Today is good",
    "The quick brown fox jumps over the lazy dog 42 times",
    "a",
    "b",
]


@pytest.fixture
def calculator():
    return SimilarityCalculator()


@pytest.fixture
def write_document(tmp_path):
    """Factory writing UTF-8 documents into the test's temporary directory."""

    def _write(name: str, content, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding=encoding)
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    """Keep PLAGCHECK_* variables from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.startswith("PLAGCHECK_"):
            monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)
