"""Structured error types for the shareholder extraction pipeline.

Heuristic uncertainty never raises; it is reported as warnings on the
ExtractionResult. The exceptions below cover the hard failures:
- Input that is not document text
- PDF files that cannot be opened or read
- Model backend failures (API errors, malformed responses, not configured)
"""

from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Categories of extraction errors."""
    INVALID_INPUT = "invalid_input"   # Parser called with something that is not text
    PDF_READ = "pdf_read"             # PDF opening/reading errors
    CONFIGURATION = "configuration"   # Backend requested but not configured
    LLM_API = "llm_api"               # litellm/provider errors
    LLM_PARSE = "llm_parse"           # JSON or shape errors in the model response


class ShareholderExtractionError(Exception):
    """Base class for all hard failures raised by this package."""

    category: ErrorCategory = ErrorCategory.INVALID_INPUT

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "category": self.category.value,
            "error": type(self).__name__,
            "message": self.message,
            "context": self.context,
        }


class InvalidDocumentTextError(ShareholderExtractionError, TypeError):
    """The parser was given something other than a string."""

    category = ErrorCategory.INVALID_INPUT


class PDFReadError(ShareholderExtractionError):
    """The PDF could not be validated, opened or converted to text."""

    category = ErrorCategory.PDF_READ


class BackendError(ShareholderExtractionError):
    """The model-based backend failed.

    Distinct from warnings: the backend either returns a full result or
    raises this.
    """

    category = ErrorCategory.LLM_API


class BackendNotConfiguredError(BackendError):
    """The model-based backend was requested but is disabled in settings."""

    category = ErrorCategory.CONFIGURATION


class LLMResponseError(BackendError):
    """The model answered, but not with the expected JSON shape."""

    category = ErrorCategory.LLM_PARSE

    def __init__(self, message: str, raw_response: str | None = None):
        super().__init__(
            message,
            context={"raw_response": raw_response[:500] if raw_response else None},
        )
        self.raw_response = raw_response
