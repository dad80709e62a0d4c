"""Shareholder Extraction Pipeline.

Extracts a company name and a shareholder list (name, share count) from
text recovered from corporate PDF documents such as board consents and
stock purchase agreements.

Architecture:
    core/             - Heuristic parser, formatting, PDF reader, LLM client, errors
    prompts/          - LLM prompt templates
    agents/           - Model-based backend
    pydantic_models/  - Result and diagnostic models

Usage:
    from shareholder_extractor import parse_shareholder_info, format_shareholder_data

    result = parse_shareholder_info(text)
    rows = format_shareholder_data(result.shareholders)

CLI:
    shareholder-extract consent.pdf
"""

from shareholder_extractor.core import (
    ExtractorSettings,
    format_shareholder_data,
    parse_shareholder_info,
)
from shareholder_extractor.orchestrator import DocumentReport, Method, ShareholderExtractor
from shareholder_extractor.pydantic_models import (
    ExtractionMethod,
    ExtractionResult,
    ExtractionWarning,
    FormattedRecord,
    ShareholderRecord,
    WarningSeverity,
)

__all__ = [
    # Main entry points
    "parse_shareholder_info",
    "format_shareholder_data",
    "ShareholderExtractor",
    "ExtractorSettings",
    "DocumentReport",
    "Method",
    # Models
    "ExtractionMethod",
    "ExtractionResult",
    "ExtractionWarning",
    "FormattedRecord",
    "ShareholderRecord",
    "WarningSeverity",
]
