"""Centralized configuration for the shareholder extraction pipeline.

All heuristic thresholds, anchor phrases and regex patterns live here.
Each constant includes:
- What it controls
- Which module uses it
"""

from typing import Final


# =============================================================================
# Section Location
# =============================================================================


class SectionConfig:
    """Where the shareholder table is expected to start.

    Anchors are checked in priority order, not document order: a document
    containing both "Exhibit A" and "Schedule A" always uses "Exhibit A".

    Used by: section_locator.py
    """

    ANCHOR_PHRASES: Final[tuple[str, ...]] = (
        "exhibit a",
        "schedule a",
        "restricted stock purchasers",
    )
    """Anchor phrases in priority order (matched case-insensitively)."""

    WINDOW_CHARS: Final[int] = 10_000
    """Maximum characters kept after the anchor match.

    Stock purchase agreements put the purchaser table right after the
    exhibit heading. 10k characters covers tables of a few hundred rows
    without dragging in unrelated schedules.
    """


# =============================================================================
# Company Name Detection
# =============================================================================


class CompanyNameConfig:
    """Bounds for the header-based company name heuristic.

    Used by: company_name.py
    """

    HEADER_CHARS: Final[int] = 100
    """Characters of the document header inspected by the first strategy."""

    MIN_LENGTH: Final[int] = 5
    """Candidate must be strictly longer than this."""

    MAX_LENGTH: Final[int] = 50
    """Candidate must be strictly shorter than this."""


# =============================================================================
# Record Validation
# =============================================================================


class ValidationLimits:
    """Structural rules a candidate (name, shares) pair must satisfy.

    Used by: record_validator.py
    """

    MIN_NAME_TOKENS: Final[int] = 2
    """Single-word "names" are almost always table headers or labels."""

    MIN_TOKEN_LENGTH: Final[int] = 2
    """Initials must carry their period ("J."), bare letters are rejected."""

    MAX_NAME_LENGTH: Final[int] = 50

    MIN_SHARES: Final[int] = 10
    """Smaller numbers are usually section or footnote references."""

    MAX_SHARES: Final[int] = 100_000_000
    """Larger numbers are usually authorized-share totals, not holdings."""


EXCLUDED_NAME_WORDS: Final[frozenset[str]] = frozenset({
    "schedule",
    "vesting",
    "stock",
    "plan",
    "price",
    "name",
    "shares",
})
"""Table header words stripped from matched names (compared lowercased).

Column headers like "Name Shares" or "Vesting Schedule" sit directly in
front of the first row once the PDF table is flattened to text.

Used by: record_extractor.py
"""


# =============================================================================
# Regex Patterns
# =============================================================================


class RegexPatterns:
    """Regex sources used for extraction."""

    SHAREHOLDER_LINE: Final[str] = (
        r"\b([A-Z][a-z]+\s+[A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)"
        r"\s+([0-9][0-9,]*)\s*(?i:shares?)"
    )
    """2-3 capitalized words, a share count, then "share(s)".

    Name tokens are case-sensitive; the "shares" keyword is not. The
    leading \b is a deliberate narrowing: without it a match could start
    inside a glued token, so "McDonald Smith 100 shares" would yield
    "Donald Smith". Such names are skipped rather than truncated.
    Used by: record_extractor.py
    """

    COMPANY_HEADER_SPLIT: Final[str] = r"ACTION|CONSENT|BOARD"
    """Words that end the company name in a consent header.
    Matched case-insensitively. Used by: company_name.py
    """

    LEGAL_SUFFIX: Final[str] = r"Inc\.|LLC|Corp\."
    """Recognized legal-entity suffixes (case-insensitive).
    Used by: company_name.py
    """

    SUFFIX_COMMA: Final[str] = r",\s*(?=Inc\.|LLC|Corp\.)"
    """Comma in front of the legal suffix ("LEXSY, INC.").
    Used by: company_name.py
    """

    TOKEN_CAPITALIZED: Final[str] = r"[A-Z][a-z]+"
    TOKEN_ACRONYM: Final[str] = r"[A-Z]+"
    TOKEN_INITIAL: Final[str] = r"[A-Z]\."
    """Accepted name token shapes. Used by: record_validator.py"""


# =============================================================================
# PDF Text Acquisition
# =============================================================================


class PDFConfig:
    """Limits and markers for PDF text acquisition.

    Used by: pdf_reader.py
    """

    PAGE_SEPARATOR: Final[str] = "\n\n--- PAGE BREAK ---\n\n"
    """Joins page texts into one stream."""

    LARGE_DOCUMENT_PAGES: Final[int] = 50
    """Documents above this page count get a slowness warning."""

    MIN_TEXT_CHARS: Final[int] = 100
    """Less text than this usually means a scanned or encrypted PDF."""

    LARGE_FILE_BYTES: Final[int] = 10 * 1024 * 1024
    """Files above this size are accepted with a note."""


# =============================================================================
# LLM Call Configuration
# =============================================================================


class LLMConfig:
    """Default parameters for the model-based backend."""

    DEFAULT_MODEL: Final[str] = "gpt-4o-mini"
    """Base model name; provider prefixes are added by settings.py."""

    TEMPERATURE: Final[float] = 0.0
    """0.0 keeps extraction deterministic."""

    RESPONSE_FORMAT: Final[dict[str, str]] = {"type": "json_object"}
    """Response format enforcing JSON output."""

    MAX_INPUT_CHARS: Final[int] = 2_000_000
    """Documents longer than this are truncated before the call."""

    MAX_COMPLETION_TOKENS: Final[int] = 20_000

    REQUEST_TIMEOUT: Final[float] = 120.0
    """Seconds before a single completion call is abandoned."""

    TRUNCATION_MARKER: Final[str] = "\n\n[...truncated...]"


# =============================================================================
# Retry Configuration
# =============================================================================


class RetryConfig:
    """Retry behavior of the litellm Router.

    Used by: llm_router.py
    """

    NUM_RETRIES: Final[int] = 2
    """Retries per deployment before falling back."""

    RETRY_AFTER_SECONDS: Final[int] = 4
    """Minimum wait before a retry."""

    COOLDOWN_SECONDS: Final[int] = 60
    """How long a failing deployment is skipped."""

    ALLOWED_FAILS: Final[int] = 2
    """Failures per minute before a deployment enters cooldown."""
