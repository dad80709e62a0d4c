"""Tests for shareholder_extractor.core.formatter module.

- format_shareholder_data(): grouped counts and ownership percentages
- format_total(): table footer
- sort_formatted(): table and export ordering
"""

import pytest

from shareholder_extractor.core.formatter import (
    format_shareholder_data,
    format_total,
    sort_formatted,
)
from shareholder_extractor.pydantic_models import FormattedRecord, ShareholderRecord


def _records(*pairs):
    return [ShareholderRecord(name=name, shares=shares) for name, shares in pairs]


# =============================================================================
# format_shareholder_data tests
# =============================================================================


class TestFormatShareholderData:
    """Tests for display formatting."""

    def test_majority_minority(self):
        formatted = format_shareholder_data(_records(
            ("Majority Owner", 75000),
            ("Minority Owner", 25000),
        ))
        assert formatted == [
            FormattedRecord(name="Majority Owner", shares="75,000", percentage="75.00%"),
            FormattedRecord(name="Minority Owner", shares="25,000", percentage="25.00%"),
        ]

    def test_thousands_grouping(self):
        [row] = format_shareholder_data(_records(("Elena Ondar", 450000)))
        assert row.shares == "450,000"
        assert row.percentage == "100.00%"

    def test_empty_list(self):
        assert format_shareholder_data([]) == []

    def test_zero_total(self):
        [row] = format_shareholder_data(_records(("Nobody Here", 0)))
        assert row.shares == "0"
        assert row.percentage == "N/A"

    def test_percentages_sum_to_about_100(self):
        records = _records(("Ann Lee", 1), ("Bob Ray", 1), ("Cy Dee", 1))
        formatted = format_shareholder_data(records)
        assert [r.percentage for r in formatted] == ["33.33%", "33.33%", "33.33%"]

        total = sum(float(r.percentage.rstrip("%")) for r in formatted)
        assert abs(total - 100) <= 0.01 * len(formatted)

    def test_input_order_preserved(self):
        records = _records(("Zed Young", 10), ("Ann Adams", 30))
        assert [r.name for r in format_shareholder_data(records)] == ["Zed Young", "Ann Adams"]

    def test_input_not_mutated(self):
        records = _records(("Zed Young", 10), ("Ann Adams", 30))
        snapshot = list(records)
        format_shareholder_data(records)
        assert records == snapshot

    def test_accepts_iterators(self):
        formatted = format_shareholder_data(iter(_records(("Ann Lee", 1), ("Bob Ray", 3))))
        assert [r.percentage for r in formatted] == ["25.00%", "75.00%"]


# =============================================================================
# Totals and sorting
# =============================================================================


class TestFormatTotal:
    """Tests for format_total()."""

    def test_total(self):
        assert format_total(_records(("Ann Lee", 54000), ("Bob Ray", 450000))) == "504,000"

    def test_empty(self):
        assert format_total([]) == "0"


class TestSortFormatted:
    """Tests for sort_formatted()."""

    @pytest.fixture
    def rows(self):
        return format_shareholder_data(_records(
            ("bob Ray", 9000),
            ("Ann Lee", 10000),
            ("Cy Dee", 500),
        ))

    def test_by_name_case_insensitive(self, rows):
        assert [r.name for r in sort_formatted(rows, "name")] == ["Ann Lee", "bob Ray", "Cy Dee"]

    def test_by_shares_numeric(self, rows):
        assert [r.shares for r in sort_formatted(rows, "shares")] == ["500", "9,000", "10,000"]

    def test_descending(self, rows):
        assert [r.shares for r in sort_formatted(rows, "shares", descending=True)] == [
            "10,000", "9,000", "500",
        ]

    def test_returns_copy(self, rows):
        before = list(rows)
        sort_formatted(rows, "shares")
        assert rows == before

    def test_unknown_field(self, rows):
        with pytest.raises(ValueError, match="Unknown sort field"):
            sort_formatted(rows, "percentage")
