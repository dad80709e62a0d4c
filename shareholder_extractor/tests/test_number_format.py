"""Tests for shareholder_extractor.core.number_format module."""

import pytest

from shareholder_extractor.core.number_format import (
    format_percentage,
    group_thousands,
    parse_share_count,
)


class TestGroupThousands:
    """Tests for group_thousands()."""

    @pytest.mark.parametrize("value, expected", [
        (0, "0"),
        (999, "999"),
        (1000, "1,000"),
        (54000, "54,000"),
        (1234567, "1,234,567"),
        (-1234567, "-1,234,567"),
    ])
    def test_grouping(self, value, expected):
        assert group_thousands(value) == expected

    def test_custom_separator(self):
        assert group_thousands(1234567, separator=".") == "1.234.567"


class TestParseShareCount:
    """Tests for parse_share_count()."""

    @pytest.mark.parametrize("text, expected", [
        ("54,000", 54000),
        ("1,000,000", 1000000),
        ("10000", 10000),
        (" 1,000 ", 1000),
        ("1,000,", 1000),
    ])
    def test_parses(self, text, expected):
        assert parse_share_count(text) == expected

    @pytest.mark.parametrize("text", ["", ",", "12a", "1.5", "-10", "１２"])
    def test_rejects(self, text):
        with pytest.raises(ValueError):
            parse_share_count(text)


class TestFormatPercentage:
    """Tests for format_percentage()."""

    def test_two_decimals(self):
        assert format_percentage(1, 3) == "33.33%"
        assert format_percentage(2, 3) == "66.67%"

    def test_whole(self):
        assert format_percentage(5, 5) == "100.00%"

    def test_zero_total(self):
        assert format_percentage(0, 0) == "N/A"
