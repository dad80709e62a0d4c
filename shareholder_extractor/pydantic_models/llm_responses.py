"""Pydantic model for the model backend's raw JSON answer.

Entries in `shareholders` are kept as raw values: malformed entries are
dropped one by one by the agent instead of failing the whole response.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LLMShareholderResponse(BaseModel):
    """Shape requested from the model in prompts/shareholder_prompt.py."""

    model_config = ConfigDict(extra="ignore")

    company_name: str | None = Field(default=None, alias="companyName")
    shareholders: list[Any]
    confidence: str | None = None
    notes: str | None = None

    @field_validator("company_name", "confidence", "notes", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, str):
            value = str(value)
        return value.strip() or None
