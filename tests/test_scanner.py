"""Tests for the overlap-aware digit scanner."""

import pytest

from trebuchet.core.token_trie import TokenTrie
from trebuchet.engine.scanner import Scanner, ScanMatch, scan_digits


class TestScanner:
    def setup_method(self):
        self.scanner = Scanner(TokenTrie.with_digits())

    def test_empty_line(self):
        assert list(self.scanner.digits("")) == []

    def test_no_digits(self):
        assert list(self.scanner.digits("hwqesaasd")) == []

    def test_digit_characters(self):
        assert list(self.scanner.digits("a1b2c3d4e5f")) == [1, 2, 3, 4, 5]

    def test_mixed_tokens_in_order(self):
        assert list(self.scanner.digits("two1nine")) == [2, 1, 9]

    def test_zero_skipped(self):
        assert list(self.scanner.digits("102zero")) == [1, 2]

    def test_non_ascii_skipped(self):
        assert list(self.scanner.digits("é1\ufffdtwo☃")) == [1, 2]

    def test_matches_report_positions(self):
        assert list(self.scanner.matches("x7eightwo")) == [
            ScanMatch(1, 7, "7"),
            ScanMatch(2, 8, "eight"),
            ScanMatch(6, 2, "two"),
        ]

    def test_digits_follow_matches(self):
        for line in ("eightwothree", "xtwone3four", "hwqesaasd", "oneightwo"):
            assert list(self.scanner.digits(line)) == [
                m.value for m in self.scanner.matches(line)]

    def test_generator_is_lazy(self):
        digits = self.scanner.digits("1two")
        assert next(digits) == 1
        assert next(digits) == 2
        with pytest.raises(StopIteration):
            next(digits)


class TestOverlap:
    @pytest.mark.parametrize("line,expected", [
        ("eightwo", [8, 2]),
        ("twone", [2, 1]),
        ("oneight", [1, 8]),
        ("nineight", [9, 8]),
        ("threeight", [3, 8]),
        ("fiveight", [5, 8]),
        ("sevenine", [7, 9]),
        ("eighthree", [8, 3]),
        ("oneightwoneight", [1, 8, 2, 1, 8]),
    ])
    def test_shared_characters(self, trie, line, expected):
        assert scan_digits(line, trie) == expected

    def test_overlap_inside_longer_line(self, trie):
        assert scan_digits("xtwone3four", trie) == [2, 1, 3, 4]
        assert scan_digits("zoneight234", trie) == [1, 8, 2, 3, 4]
