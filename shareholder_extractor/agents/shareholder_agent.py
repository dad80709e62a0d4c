"""Shareholder agent: model-based alternative to the heuristic parser.

Returns the same ExtractionResult shape as parse_shareholder_info() so
callers can swap strategies. Unlike the heuristic parser it fails hard:
API errors, malformed JSON and a non-array `shareholders` field all raise
BackendError. Individual malformed entries are dropped silently.
"""

import logging
from typing import Any

from pydantic import ValidationError

from shareholder_extractor.core.config import LLMConfig
from shareholder_extractor.core.errors import BackendError, BackendNotConfiguredError, LLMResponseError
from shareholder_extractor.core.llm_client import LLMClient
from shareholder_extractor.core.settings import ExtractorSettings
from shareholder_extractor.prompts.shareholder_prompt import (
    SHAREHOLDER_SYSTEM_PROMPT,
    build_shareholder_prompt,
)
from shareholder_extractor.pydantic_models.diagnostics import ExtractionWarning, WarningSeverity
from shareholder_extractor.pydantic_models.llm_responses import LLMShareholderResponse
from shareholder_extractor.pydantic_models.shareholder_models import (
    ExtractionMethod,
    ExtractionResult,
    ShareholderRecord,
)

logger = logging.getLogger(__name__)

AGENT_NAME = "shareholder_parser"

TRUNCATED = ExtractionWarning(
    message="Document was truncated for AI processing. Some shareholders may be missed.",
    severity=WarningSeverity.MEDIUM,
    code="llm_input_truncated",
)

AI_USED = ExtractionWarning(
    message="AI extraction used. Please verify accuracy of results.",
    severity=WarningSeverity.MEDIUM,
    code="llm_used",
)


def truncate_for_llm(text: str, max_chars: int) -> tuple[str, bool]:
    """Cut text to max_chars, appending a marker when anything was removed."""
    if len(text) <= max_chars:
        return text, False
    return text[:max_chars] + LLMConfig.TRUNCATION_MARKER, True


def coerce_shareholder(entry: Any) -> ShareholderRecord | None:
    """Turn one raw model entry into a record, or None if it is malformed.

    Accepts a string name and a positive whole-number share count.
    """
    if not isinstance(entry, dict):
        return None

    name = entry.get("name")
    shares = entry.get("shares")
    if not isinstance(name, str) or not name.strip():
        return None
    if isinstance(shares, bool) or not isinstance(shares, (int, float)):
        return None
    if isinstance(shares, float) and not shares.is_integer():
        return None
    if shares <= 0:
        return None

    return ShareholderRecord(name=name.strip(), shares=int(shares))


def build_result(response: LLMShareholderResponse, truncated: bool) -> ExtractionResult:
    """Convert a validated model answer into an ExtractionResult."""
    warnings: list[ExtractionWarning] = []
    if truncated:
        warnings.append(TRUNCATED)

    shareholders = []
    for entry in response.shareholders:
        record = coerce_shareholder(entry)
        if record is None:
            logger.debug(f"Dropped malformed model entry: {entry!r}")
            continue
        shareholders.append(record)

    if response.confidence and response.confidence != "high":
        warnings.append(ExtractionWarning.from_text(
            f"AI confidence: {response.confidence}", code="llm_confidence",
        ))
    if response.notes:
        warnings.append(ExtractionWarning.from_text(
            f"AI notes: {response.notes}", code="llm_notes",
        ))
    warnings.append(AI_USED)

    return ExtractionResult(
        company_name=response.company_name,
        shareholders=tuple(shareholders),
        warnings=tuple(warnings),
        method=ExtractionMethod.LLM,
    )


async def parse_with_llm(
    text: str,
    settings: ExtractorSettings,
    client: LLMClient,
) -> ExtractionResult:
    """Extract company name and shareholders with the model backend.

    Args:
        text: Full document text.
        settings: Backend settings (must have llm_enabled).
        client: LLM client used for the call.

    Returns:
        ExtractionResult with method=llm.

    Raises:
        BackendNotConfiguredError: If the backend is disabled in settings.
        BackendError: On any API or response failure.
    """
    if not settings.llm_enabled:
        raise BackendNotConfiguredError("LLM backend not configured")

    prompt_text, truncated = truncate_for_llm(text, settings.max_input_chars)
    if truncated:
        logger.info(f"Truncated document from {len(text):,} to {settings.max_input_chars:,} chars")

    try:
        response = await client.complete(
            system_prompt=SHAREHOLDER_SYSTEM_PROMPT,
            user_prompt=build_shareholder_prompt(prompt_text),
            model=settings.llm_model,
            agent=AGENT_NAME,
        )

        if not isinstance(response.content.get("shareholders"), list):
            raise LLMResponseError(
                "Shareholders field is not an array", raw_response=response.raw_content,
            )

        try:
            parsed = LLMShareholderResponse.model_validate(response.content)
        except ValidationError as e:
            raise LLMResponseError(
                f"Unexpected response shape: {e}", raw_response=response.raw_content,
            ) from e

    except LLMResponseError as e:
        raise LLMResponseError(f"AI extraction failed: {e.message}", raw_response=e.raw_response) from e
    except BackendError:
        raise
    except Exception as e:
        raise BackendError(f"AI extraction failed: {e}") from e

    return build_result(parsed, truncated)
