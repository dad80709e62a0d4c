"""Prompt templates for the model backend."""

from shareholder_extractor.prompts.shareholder_prompt import (
    SHAREHOLDER_SYSTEM_PROMPT,
    SHAREHOLDER_USER_PROMPT,
    build_shareholder_prompt,
)

__all__ = [
    "SHAREHOLDER_SYSTEM_PROMPT",
    "SHAREHOLDER_USER_PROMPT",
    "build_shareholder_prompt",
]
