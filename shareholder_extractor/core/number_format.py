"""Locale-independent share count parsing and formatting.

Grouping is done by hand instead of through locale-aware formatting so the
same share count renders identically on every machine.
"""

THOUSANDS_SEPARATOR = ","


def group_thousands(value: int, separator: str = THOUSANDS_SEPARATOR) -> str:
    """Insert a separator every three digits.

    Examples:
        >>> group_thousands(450000)
        '450,000'
        >>> group_thousands(-1234567)
        '-1,234,567'
        >>> group_thousands(999)
        '999'
    """
    sign = "-" if value < 0 else ""
    digits = str(abs(int(value)))

    groups = []
    while len(digits) > 3:
        groups.append(digits[-3:])
        digits = digits[:-3]
    groups.append(digits)

    return sign + separator.join(reversed(groups))


def parse_share_count(text: str, separator: str = THOUSANDS_SEPARATOR) -> int:
    """Parse a share count like "54,000" into an int.

    Separators are removed wherever they appear; anything other than ASCII
    digits afterwards is rejected.

    Raises:
        ValueError: If the text holds no digits or non-digit characters.
    """
    digits = text.strip().replace(separator, "")
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"Not a share count: {text!r}")
    return int(digits, 10)


def format_percentage(part: int, total: int) -> str:
    """Render part/total as "NN.NN%", or "N/A" when total is zero."""
    if total == 0:
        return "N/A"
    return f"{part / total * 100:.2f}%"
