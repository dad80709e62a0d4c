"""Display formatting for shareholder lists.

format_shareholder_data() is the consumer-facing view: grouped share
counts and ownership percentages, in input order. Sorting and totals are
presentation helpers for tables and exports.
"""

from typing import Iterable, Literal

from shareholder_extractor.core.number_format import (
    format_percentage,
    group_thousands,
    parse_share_count,
)
from shareholder_extractor.pydantic_models.shareholder_models import (
    FormattedRecord,
    ShareholderRecord,
)

SortField = Literal["name", "shares"]


def format_shareholder_data(shareholders: Iterable[ShareholderRecord]) -> list[FormattedRecord]:
    """Format records for display.

    The percentage denominator is the sum of all shares in the same list.
    When that sum is zero every percentage is "N/A".

    Example:
        >>> format_shareholder_data([
        ...     ShareholderRecord(name="Majority Owner", shares=75000),
        ...     ShareholderRecord(name="Minority Owner", shares=25000),
        ... ])[0].percentage
        '75.00%'
    """
    records = list(shareholders)
    total = sum(r.shares for r in records)

    return [
        FormattedRecord(
            name=r.name,
            shares=group_thousands(r.shares),
            percentage=format_percentage(r.shares, total),
        )
        for r in records
    ]


def format_total(shareholders: Iterable[ShareholderRecord]) -> str:
    """Grouped total share count, for table footers."""
    return group_thousands(sum(r.shares for r in shareholders))


def sort_formatted(
    records: Iterable[FormattedRecord],
    field: SortField = "name",
    descending: bool = False,
) -> list[FormattedRecord]:
    """Return a sorted copy of formatted records.

    Names sort case-insensitively; shares sort by numeric value.
    """
    if field == "name":
        key = lambda r: r.name.lower()  # noqa: E731
    elif field == "shares":
        key = lambda r: parse_share_count(r.shares)  # noqa: E731
    else:
        raise ValueError(f"Unknown sort field: {field}")

    return sorted(records, key=key, reverse=descending)
