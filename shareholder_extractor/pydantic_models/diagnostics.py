"""Extraction warnings with a severity tag attached at emission.

Warnings produced by this package carry their severity from the start.
Warnings that arrive as plain strings (model notes, PDF reader messages)
are classified with the same keyword rules the results view has always
used, so both kinds sort into the same buckets.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class WarningSeverity(str, Enum):
    """Presentation bucket for a warning."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    def __str__(self) -> str:
        return self.value


_HIGH_KEYWORDS = ("not found", "invalid", "failed")
_MEDIUM_KEYWORDS = ("verify", "may", "truncated")


def classify_warning(text: str) -> WarningSeverity:
    """Classify a plain warning string by keyword (case-insensitive).

    High keywords win over medium ones; anything else is low.
    """
    lower = text.lower()
    if any(keyword in lower for keyword in _HIGH_KEYWORDS):
        return WarningSeverity.HIGH
    if any(keyword in lower for keyword in _MEDIUM_KEYWORDS):
        return WarningSeverity.MEDIUM
    return WarningSeverity.LOW


class ExtractionWarning(BaseModel):
    """A diagnostic message returned alongside extraction results.

    Example:
        {
            "message": "Could not automatically detect company name. Please verify results.",
            "severity": "medium",
            "code": "company_name_missing"
        }
    """

    model_config = ConfigDict(frozen=True)

    message: str = Field(description="Human-readable diagnostic text")
    severity: WarningSeverity = Field(
        default=WarningSeverity.LOW,
        description="Presentation bucket, set by the producer",
    )
    code: str | None = Field(
        default=None,
        description="Stable identifier for warnings emitted by this package",
    )

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_text(cls, message: str, code: str | None = None) -> "ExtractionWarning":
        """Wrap an untagged string, inferring severity from its keywords."""
        return cls(message=message, severity=classify_warning(message), code=code)


def group_by_severity(
    warnings: list[ExtractionWarning] | tuple[ExtractionWarning, ...],
) -> dict[WarningSeverity, list[ExtractionWarning]]:
    """Bucket warnings high -> medium -> low, keeping their order within a bucket."""
    groups: dict[WarningSeverity, list[ExtractionWarning]] = {
        WarningSeverity.HIGH: [],
        WarningSeverity.MEDIUM: [],
        WarningSeverity.LOW: [],
    }
    for warning in warnings:
        groups[warning.severity].append(warning)
    return groups
