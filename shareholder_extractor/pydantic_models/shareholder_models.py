"""Result schemas shared by the heuristic parser and the model backend.

Both extraction strategies return an ExtractionResult so callers can treat
them interchangeably. Models are frozen: a result is built once per parse
call and never modified afterwards.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shareholder_extractor.pydantic_models.diagnostics import ExtractionWarning


class ExtractionMethod(str, Enum):
    """Which strategy produced a result."""

    HEURISTIC = "heuristic"
    LLM = "llm"

    def __str__(self) -> str:
        return self.value


class ShareholderRecord(BaseModel):
    """One shareholder and the number of shares held.

    Structural checks (token count, capitalization, share bounds) belong to
    the record validator, so this model only guarantees a trimmed,
    non-empty name and a non-negative count.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Shareholder name, trimmed")
    shares: int = Field(ge=0, description="Number of shares held")

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value


class FormattedRecord(BaseModel):
    """Display view of a ShareholderRecord.

    Example:
        {"name": "Majority Owner", "shares": "75,000", "percentage": "75.00%"}
    """

    model_config = ConfigDict(frozen=True)

    name: str
    shares: str = Field(description="Share count with thousands separators")
    percentage: str = Field(description='"NN.NN%" or "N/A"')


class ExtractionResult(BaseModel):
    """Company name, shareholder list and diagnostics for one document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    company_name: str | None = Field(
        default=None,
        alias="companyName",
        description="Detected company name, None when not detected",
    )
    shareholders: tuple[ShareholderRecord, ...] = Field(
        default=(),
        description="Shareholders in first-match order",
    )
    warnings: tuple[ExtractionWarning, ...] = Field(default=())
    method: ExtractionMethod = ExtractionMethod.HEURISTIC

    @property
    def warning_messages(self) -> tuple[str, ...]:
        """Warnings as plain strings."""
        return tuple(w.message for w in self.warnings)

    @property
    def total_shares(self) -> int:
        return sum(s.shares for s in self.shareholders)

    def with_warnings(
        self,
        leading: list[ExtractionWarning] | tuple[ExtractionWarning, ...] = (),
    ) -> "ExtractionResult":
        """Return a copy with extra warnings placed before the existing ones."""
        return self.model_copy(update={"warnings": tuple(leading) + self.warnings})

    def to_output(self) -> dict[str, Any]:
        """The external output contract: companyName, shareholders, warnings."""
        return {
            "companyName": self.company_name,
            "shareholders": [
                {"name": s.name, "shares": s.shares} for s in self.shareholders
            ],
            "warnings": list(self.warning_messages),
        }
