"""Usage accounting for model backend calls.

Prices come from litellm's model cost map. Routed model names such as
"openrouter/openai/gpt-4o-mini" or "azure/gpt-4o-mini" are priced as the
underlying model.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

ROUTING_PREFIXES = ("openrouter/openai/", "openrouter/", "azure/")

_unpriced_models: set[str] = set()


def pricing_model(model: str) -> str:
    """Model name as litellm's cost map knows it."""
    for prefix in ROUTING_PREFIXES:
        if model.startswith(prefix):
            return model.removeprefix(prefix)
    return model


def price_call(model: str, prompt_tokens: int, completion_tokens: int) -> float:
    """USD cost of one call; 0.0 for models litellm cannot price (logged once)."""
    from litellm import cost_per_token

    try:
        prompt_usd, completion_usd = cost_per_token(
            model=pricing_model(model),
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
        )
    except Exception:
        if model not in _unpriced_models:
            _unpriced_models.add(model)
            logger.warning(f"No pricing for model {model!r}; its cost is reported as $0")
        return 0.0
    return prompt_usd + completion_usd


@dataclass(frozen=True)
class CallUsage:
    model: str
    prompt_tokens: int = 0
    completion_tokens: int = 0
    agent: str = ""

    @classmethod
    def from_usage(cls, model: str, usage: Any, agent: str = "") -> "CallUsage":
        """Build from a litellm ``response.usage`` object."""
        return cls(
            model=model,
            prompt_tokens=getattr(usage, "prompt_tokens", 0) or 0,
            completion_tokens=getattr(usage, "completion_tokens", 0) or 0,
            agent=agent,
        )

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens

    @property
    def cost(self) -> float:
        return price_call(self.model, self.prompt_tokens, self.completion_tokens)


@dataclass
class CostTracker:
    """Running usage totals for one extractor instance."""

    calls: list[CallUsage] = field(default_factory=list)

    def record(self, model: str, usage: Any, agent: str = "") -> CallUsage | None:
        """Store the usage of one response. Responses without usage are skipped."""
        if usage is None:
            return None
        call = CallUsage.from_usage(model, usage, agent)
        self.calls.append(call)
        return call

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def total_prompt_tokens(self) -> int:
        return sum(call.prompt_tokens for call in self.calls)

    @property
    def total_completion_tokens(self) -> int:
        return sum(call.completion_tokens for call in self.calls)

    @property
    def total_tokens(self) -> int:
        return sum(call.total_tokens for call in self.calls)

    @property
    def total_cost(self) -> float:
        return sum(call.cost for call in self.calls)

    def summary(self) -> str:
        """Usage block printed by the CLI after an AI-assisted run."""
        rule = "-" * 44
        return "\n".join([
            rule,
            "LLM USAGE",
            f"  API calls: {self.call_count}",
            f"  Tokens: {self.total_tokens:,} "
            f"({self.total_prompt_tokens:,} prompt / {self.total_completion_tokens:,} completion)",
            f"  Cost: ${self.total_cost:.4f}",
            rule,
        ])

    def to_dict(self) -> dict:
        return {
            "total_calls": self.call_count,
            "total_tokens": self.total_tokens,
            "prompt_tokens": self.total_prompt_tokens,
            "completion_tokens": self.total_completion_tokens,
            "total_cost_usd": round(self.total_cost, 6),
        }
