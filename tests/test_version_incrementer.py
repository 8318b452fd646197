"""Tests for version tokenization and next-version generation."""

import sys

import pytest

from versioning.incrementer import next_versions, tokenize_version
from versioning.models import TokenKind


class TestTokenizeVersion:
    """Tests for tokenize_version."""

    def test_alternates_value_and_delimiter(self):
        tokens = tokenize_version("1.2_3-4")
        assert [t.text for t in tokens] == ["1", ".", "2", "_", "3", "-", "4"]
        kinds = [t.kind for t in tokens]
        assert kinds[::2] == [TokenKind.VALUE] * 4
        assert kinds[1::2] == [TokenKind.DELIMITER] * 3

    def test_other_characters_belong_to_values(self):
        tokens = tokenize_version("2.0rc1+git")
        assert [t.text for t in tokens] == ["2", ".", "0rc1+git"]

    def test_last_token_is_value(self):
        tokens = tokenize_version("1.")
        assert tokens[-1].kind is TokenKind.VALUE
        assert tokens[-1].text == ""

    def test_numeric_detection(self):
        tokens = tokenize_version("10.b")
        assert tokens[0].is_numeric is True
        assert tokens[1].is_numeric is False  # delimiter
        assert tokens[2].is_numeric is False


class TestNextVersions:
    """Tests for next_versions."""

    def test_three_part_version(self):
        assert next_versions("1.2.3") == ["1.2.4", "1.3.0", "2.0.0"]

    def test_single_number(self):
        assert next_versions("5") == ["6"]

    def test_empty_string(self):
        assert next_versions("") == []

    @pytest.mark.parametrize("version", ["abc", "beta", "1.2.3a", "1.2rc1"])
    def test_non_numeric_trailing_token(self, version):
        assert next_versions(version) == []

    def test_keeps_candidates_before_non_numeric_position(self):
        assert next_versions("r8.1.2") == ["r8.1.3", "r8.2.0"]

    def test_preserves_mixed_delimiters(self):
        assert next_versions("1_2-3") == ["1_2-4", "1_3-0", "2_0-0"]

    def test_carry_grows_number(self):
        assert next_versions("1.9") == ["1.10", "2.0"]

    def test_leading_zeros_are_dropped(self):
        assert next_versions("2024.01") == ["2024.2", "2025.0"]

    def test_trailing_delimiter_yields_nothing(self):
        assert next_versions("1.2.") == []

    def test_leading_delimiter(self):
        assert next_versions("-1") == ["-2"]

    def test_ordered_least_significant_first(self):
        result = next_versions("3.4.5.6")
        assert result == ["3.4.5.7", "3.4.6.0", "3.5.0.0", "4.0.0.0"]

    def test_reparsing_first_candidate_bumps_same_position(self):
        first = next_versions("1.2.3")[0]
        assert next_versions(first)[0] == "1.2.5"
        assert next_versions(first)[1:] == ["1.3.0", "2.0.0"]

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int digit limit")
    def test_overlong_numeric_position_stops(self):
        huge = "9" * (sys.get_int_max_str_digits() + 1)
        assert next_versions("1." + huge) == []
        assert next_versions(huge + ".1") == [huge + ".2"]
