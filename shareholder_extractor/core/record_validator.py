"""Structural validation of candidate shareholder records.

Pure functions over (name, shares) pairs, independent of how the candidate
was found. A candidate is valid iff:
- the name has at least 2 whitespace-separated tokens
- every token is at least 2 characters
- the full name is at most 50 characters
- every token is Capitalized, an ACRONYM, or an initial ("J.")
- 10 <= shares <= 100,000,000

Rejections are silent; the reason is only exposed for logging and tests.
"""

import re
from enum import Enum

from shareholder_extractor.core.config import RegexPatterns, ValidationLimits

_TOKEN_SHAPES = (
    re.compile(RegexPatterns.TOKEN_CAPITALIZED),
    re.compile(RegexPatterns.TOKEN_ACRONYM),
    re.compile(RegexPatterns.TOKEN_INITIAL),
)


class RejectionReason(str, Enum):
    """Why a candidate failed validation."""

    TOO_FEW_TOKENS = "too_few_tokens"
    SHORT_TOKEN = "short_token"
    NAME_TOO_LONG = "name_too_long"
    BAD_CAPITALIZATION = "bad_capitalization"
    TOO_FEW_SHARES = "too_few_shares"
    TOO_MANY_SHARES = "too_many_shares"

    def __str__(self) -> str:
        return self.value


def has_name_shape(token: str) -> bool:
    """Check a single token against the accepted capitalization shapes."""
    return any(shape.fullmatch(token) for shape in _TOKEN_SHAPES)


def rejection_reason(name: str, shares: int) -> RejectionReason | None:
    """Return the first rule the candidate breaks, or None if it is valid."""
    tokens = name.split()

    if len(tokens) < ValidationLimits.MIN_NAME_TOKENS:
        return RejectionReason.TOO_FEW_TOKENS
    if any(len(t) < ValidationLimits.MIN_TOKEN_LENGTH for t in tokens):
        return RejectionReason.SHORT_TOKEN
    if len(name) > ValidationLimits.MAX_NAME_LENGTH:
        return RejectionReason.NAME_TOO_LONG
    if not all(has_name_shape(t) for t in tokens):
        return RejectionReason.BAD_CAPITALIZATION
    if shares < ValidationLimits.MIN_SHARES:
        return RejectionReason.TOO_FEW_SHARES
    if shares > ValidationLimits.MAX_SHARES:
        return RejectionReason.TOO_MANY_SHARES
    return None


def validate_candidate(name: str, shares: int) -> bool:
    """True if the (name, shares) pair passes every structural rule."""
    return rejection_reason(name, shares) is None
