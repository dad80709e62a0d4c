"""Runtime settings for the extraction pipeline.

The model backend is switched on or off by an ExtractorSettings value handed
to ShareholderExtractor at construction time. Only from_env() looks at the
process environment, and only the CLI calls it (after loading .env).

Supported providers, selected with LLM_PROVIDER:
    - "openai" (default): OPENAI_API_KEY
    - "openrouter": OPENROUTER_API_KEY
    - "azure": AZURE_API_KEY, AZURE_API_BASE, AZURE_API_VERSION
"""

import os
from dataclasses import dataclass, replace
from typing import Final, Mapping

from shareholder_extractor.core.config import LLMConfig

API_KEY_ENV_VARS: Final[dict[str, str]] = {
    "openai": "OPENAI_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
    "azure": "AZURE_API_KEY",
}
"""Environment variable holding the API key, per provider."""

SUPPORTED_PROVIDERS: Final[tuple[str, ...]] = tuple(API_KEY_ENV_VARS)


def provider_model_name(provider: str, base_model: str) -> str:
    """Convert a base model name to the litellm identifier for a provider.

    Examples:
        >>> provider_model_name("openai", "gpt-4o-mini")
        'gpt-4o-mini'
        >>> provider_model_name("openrouter", "gpt-4o-mini")
        'openrouter/openai/gpt-4o-mini'
        >>> provider_model_name("azure", "gpt-4o-mini")
        'azure/gpt-4o-mini'
    """
    if "/" in base_model:
        return base_model  # Already provider-qualified
    if provider == "openrouter":
        return f"openrouter/openai/{base_model}"
    if provider == "azure":
        return f"azure/{base_model}"
    return base_model


@dataclass(frozen=True)
class ExtractorSettings:
    """Explicit configuration for ShareholderExtractor.

    Attributes:
        llm_enabled: Whether the model backend may be used at all.
        llm_provider: One of SUPPORTED_PROVIDERS.
        llm_model: litellm model identifier (provider-qualified).
        api_key: Provider API key.
        api_base: Endpoint URL (Azure only).
        api_version: API version (Azure only).
        fallback_model: Optional model the router falls back to.
        max_input_chars: Documents longer than this are truncated.
        request_timeout: Seconds per completion call.
    """

    llm_enabled: bool = False
    llm_provider: str = "openai"
    llm_model: str = LLMConfig.DEFAULT_MODEL
    api_key: str | None = None
    api_base: str | None = None
    api_version: str | None = None
    fallback_model: str | None = None
    max_input_chars: int = LLMConfig.MAX_INPUT_CHARS
    request_timeout: float = LLMConfig.REQUEST_TIMEOUT

    def __post_init__(self):
        if self.llm_provider not in SUPPORTED_PROVIDERS:
            raise ValueError(
                f"Unsupported LLM provider {self.llm_provider!r}, "
                f"expected one of {', '.join(SUPPORTED_PROVIDERS)}"
            )
        if self.max_input_chars <= 0:
            raise ValueError("max_input_chars must be positive")

    @property
    def api_key_env_var(self) -> str:
        return API_KEY_ENV_VARS[self.llm_provider]

    def with_model(self, model: str) -> "ExtractorSettings":
        """Copy with a different model (provider prefix added if missing)."""
        return replace(self, llm_model=provider_model_name(self.llm_provider, model))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ExtractorSettings":
        """Build settings from environment variables.

        The backend is enabled iff the provider's API key is set.

        Args:
            environ: Mapping to read from. Defaults to os.environ.
        """
        env = os.environ if environ is None else environ

        provider = env.get("LLM_PROVIDER", "openai").strip().lower() or "openai"
        if provider not in API_KEY_ENV_VARS:
            raise ValueError(
                f"Unsupported LLM_PROVIDER {provider!r}, "
                f"expected one of {', '.join(SUPPORTED_PROVIDERS)}"
            )

        api_key = env.get(API_KEY_ENV_VARS[provider]) or None
        base_model = env.get("SHAREHOLDER_LLM_MODEL") or LLMConfig.DEFAULT_MODEL
        fallback = env.get("SHAREHOLDER_LLM_FALLBACK_MODEL") or None

        return cls(
            llm_enabled=api_key is not None,
            llm_provider=provider,
            llm_model=provider_model_name(provider, base_model),
            api_key=api_key,
            api_base=env.get("AZURE_API_BASE") if provider == "azure" else None,
            api_version=(
                env.get("AZURE_API_VERSION", "2024-02-15-preview")
                if provider == "azure" else None
            ),
            fallback_model=provider_model_name(provider, fallback) if fallback else None,
        )
