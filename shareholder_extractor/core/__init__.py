"""Core utilities for the extraction pipeline."""

from shareholder_extractor.core.config import (
    EXCLUDED_NAME_WORDS,
    CompanyNameConfig,
    LLMConfig,
    PDFConfig,
    RegexPatterns,
    RetryConfig,
    SectionConfig,
    ValidationLimits,
)
from shareholder_extractor.core.errors import (
    BackendError,
    BackendNotConfiguredError,
    ErrorCategory,
    InvalidDocumentTextError,
    LLMResponseError,
    PDFReadError,
    ShareholderExtractionError,
)
from shareholder_extractor.core.settings import ExtractorSettings
from shareholder_extractor.core.section_locator import LocatedSection, locate_section
from shareholder_extractor.core.company_name import extract_company_name
from shareholder_extractor.core.record_validator import (
    RejectionReason,
    rejection_reason,
    validate_candidate,
)
from shareholder_extractor.core.record_extractor import (
    CandidateRecord,
    extract_shareholders,
    find_candidates,
)
from shareholder_extractor.core.heuristic_parser import parse_shareholder_info
from shareholder_extractor.core.formatter import (
    format_shareholder_data,
    format_total,
    sort_formatted,
)
from shareholder_extractor.core.number_format import (
    format_percentage,
    group_thousands,
    parse_share_count,
)
from shareholder_extractor.core.cost_tracker import CostTracker
from shareholder_extractor.core.pipeline_logger import PipelineLogger, get_logger, reset_logger

__all__ = [
    # Config
    "EXCLUDED_NAME_WORDS",
    "CompanyNameConfig",
    "LLMConfig",
    "PDFConfig",
    "RegexPatterns",
    "RetryConfig",
    "SectionConfig",
    "ValidationLimits",
    "ExtractorSettings",
    # Errors
    "BackendError",
    "BackendNotConfiguredError",
    "ErrorCategory",
    "InvalidDocumentTextError",
    "LLMResponseError",
    "PDFReadError",
    "ShareholderExtractionError",
    # Heuristic pipeline
    "LocatedSection",
    "locate_section",
    "extract_company_name",
    "RejectionReason",
    "rejection_reason",
    "validate_candidate",
    "CandidateRecord",
    "extract_shareholders",
    "find_candidates",
    "parse_shareholder_info",
    # Formatting
    "format_shareholder_data",
    "format_total",
    "sort_formatted",
    "format_percentage",
    "group_thousands",
    "parse_share_count",
    # Infrastructure
    "CostTracker",
    "PipelineLogger",
    "get_logger",
    "reset_logger",
]
