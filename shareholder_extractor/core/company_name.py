"""Company name detection from the document header.

Board consents and stock purchase agreements open with the company name,
usually followed by "ACTION BY UNANIMOUS WRITTEN CONSENT" or
"BOARD OF DIRECTORS". Two strategies are tried:

1. The first 100 characters, cut at ACTION / CONSENT / BOARD
2. The first line of the document

This is best-effort: a miss is reported as a warning by the parser.
"""

import re

from shareholder_extractor.core.config import CompanyNameConfig, RegexPatterns

_HEADER_SPLIT = re.compile(RegexPatterns.COMPANY_HEADER_SPLIT, re.IGNORECASE)
_LEGAL_SUFFIX = re.compile(RegexPatterns.LEGAL_SUFFIX, re.IGNORECASE)
_SUFFIX_COMMA = re.compile(RegexPatterns.SUFFIX_COMMA, re.IGNORECASE)


def normalize_company_name(name: str) -> str:
    """Drop the comma before the legal suffix: "LEXSY, INC." -> "LEXSY INC."."""
    return _SUFFIX_COMMA.sub(" ", name, count=1).strip()


def is_company_candidate(candidate: str) -> bool:
    """Length strictly between the bounds and a recognized legal suffix."""
    return (
        CompanyNameConfig.MIN_LENGTH < len(candidate) < CompanyNameConfig.MAX_LENGTH
        and _LEGAL_SUFFIX.search(candidate) is not None
    )


def _from_header(text: str) -> str | None:
    header = text[:CompanyNameConfig.HEADER_CHARS].strip()
    candidate = _HEADER_SPLIT.split(header, maxsplit=1)[0].strip()
    if is_company_candidate(candidate):
        return normalize_company_name(candidate)
    return None


def _from_first_line(text: str) -> str | None:
    # Unlike the header, the first line is normalized before it is checked
    candidate = normalize_company_name(text.split("\n", 1)[0])
    return candidate if is_company_candidate(candidate) else None


def extract_company_name(text: str) -> str | None:
    """Return the company name from the document header, or None."""
    return _from_header(text) or _from_first_line(text)
