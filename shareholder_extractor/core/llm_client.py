"""JSON-mode completions for the model-based extraction backend.

LLMClient sends one system prompt and one user prompt through a litellm
Router (which owns keys, retries and fallbacks), records token usage and
returns the reply parsed as a JSON object. Malformed JSON is never
repaired: a reply is either a complete object or an LLMResponseError.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

from shareholder_extractor.core.config import LLMConfig
from shareholder_extractor.core.cost_tracker import CostTracker
from shareholder_extractor.core.errors import LLMResponseError
from shareholder_extractor.core.settings import ExtractorSettings

logger = logging.getLogger(__name__)

# litellm and httpx log every request at INFO
for _noisy in ("litellm", "httpx"):
    logging.getLogger(_noisy).setLevel(logging.ERROR)


def strip_code_fences(text: str) -> str:
    """Remove a markdown code fence wrapper (```json ... ```) if present.

    Examples:
        >>> strip_code_fences('```json\\n{"a": 1}\\n```')
        '{"a": 1}'
        >>> strip_code_fences('{"a": 1}')
        '{"a": 1}'
    """
    cleaned = text.strip()
    if not cleaned.startswith("```"):
        return cleaned

    first_newline = cleaned.find("\n")
    cleaned = cleaned[first_newline + 1:] if first_newline > 0 else cleaned[3:]
    if cleaned.rstrip().endswith("```"):
        cleaned = cleaned.rstrip()[:-3]
    return cleaned.strip()


def parse_json_object(raw_content: str | None) -> dict[str, Any]:
    """Decode a model reply that must be a single JSON object."""
    if not raw_content:
        raise LLMResponseError("Empty response from API", raw_response=raw_content)
    try:
        content = json.loads(strip_code_fences(raw_content))
    except json.JSONDecodeError as e:
        raise LLMResponseError(f"Failed to parse AI response: {e}", raw_response=raw_content) from e
    if not isinstance(content, dict):
        raise LLMResponseError("Response is not a JSON object", raw_response=raw_content)
    return content


@dataclass
class LLMResponse:
    """A decoded reply together with the text it came from."""

    content: dict[str, Any]
    raw_content: str
    model: str


class LLMClient:
    """Thin async wrapper over a litellm Router for JSON-mode calls.

        client = LLMClient.from_settings(settings, cost_tracker=tracker)
        reply = await client.complete(SYSTEM_PROMPT, user_prompt, model=settings.llm_model)
        reply.content["shareholders"]
    """

    def __init__(self, router: Any, cost_tracker: CostTracker | None = None) -> None:
        # router: a litellm Router or anything exposing async acompletion()
        self.router = router
        self.cost_tracker = cost_tracker

    @classmethod
    def from_settings(
        cls,
        settings: ExtractorSettings,
        cost_tracker: CostTracker | None = None,
    ) -> "LLMClient":
        """Build a client with a router configured from settings."""
        from shareholder_extractor.core.llm_router import build_router

        return cls(router=build_router(settings), cost_tracker=cost_tracker)

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        model: str,
        agent: str = "",
        temperature: float | None = None,
        max_completion_tokens: int | None = None,
    ) -> LLMResponse:
        """Run one completion and decode its JSON reply.

        Usage is recorded before decoding, so calls with unusable replies
        still count. Router errors (after its retries) propagate unchanged;
        empty or non-object replies raise LLMResponseError.
        """
        response = await self.router.acompletion(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            response_format=LLMConfig.RESPONSE_FORMAT,
            temperature=LLMConfig.TEMPERATURE if temperature is None else temperature,
            max_completion_tokens=max_completion_tokens or LLMConfig.MAX_COMPLETION_TOKENS,
        )

        if self.cost_tracker is not None:
            self.cost_tracker.record(model, response.usage, agent=agent)

        raw_content = response.choices[0].message.content
        logger.debug(f"Reply from {model}: {len(raw_content or '')} chars")
        return LLMResponse(content=parse_json_object(raw_content), raw_content=raw_content, model=model)
