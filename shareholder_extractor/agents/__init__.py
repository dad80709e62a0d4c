"""Agent implementations for the extraction pipeline.

Each agent makes its calls with fresh LLM context, so data from different
documents never leaks between calls.
"""

from shareholder_extractor.agents.shareholder_agent import (
    build_result,
    coerce_shareholder,
    parse_with_llm,
    truncate_for_llm,
)

__all__ = [
    "build_result",
    "coerce_shareholder",
    "parse_with_llm",
    "truncate_for_llm",
]
