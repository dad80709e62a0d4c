"""Pydantic models for the extraction pipeline.

Modules:
- shareholder_models: ShareholderRecord, ExtractionResult, FormattedRecord
- diagnostics: ExtractionWarning with severity tags and keyword classification
- llm_responses: Raw JSON shape returned by the model backend
"""

from shareholder_extractor.pydantic_models.diagnostics import (
    ExtractionWarning,
    WarningSeverity,
    classify_warning,
    group_by_severity,
)
from shareholder_extractor.pydantic_models.shareholder_models import (
    ExtractionMethod,
    ExtractionResult,
    FormattedRecord,
    ShareholderRecord,
)
from shareholder_extractor.pydantic_models.llm_responses import LLMShareholderResponse

__all__ = [
    # Diagnostics
    "ExtractionWarning",
    "WarningSeverity",
    "classify_warning",
    "group_by_severity",
    # Results
    "ExtractionMethod",
    "ExtractionResult",
    "FormattedRecord",
    "ShareholderRecord",
    # LLM
    "LLMShareholderResponse",
]
