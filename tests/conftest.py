"""Shared fixtures for calibration tests."""

import pytest

from trebuchet.core.token_trie import TokenTrie


SAMPLE_LINES = ["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"]


@pytest.fixture
def trie():
    return TokenTrie.with_digits()


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path
