"""LiteLLM Router configuration for retry, fallback, and cooldown.

The router is built from ExtractorSettings when an LLMClient is created,
never at import time, so importing the package needs no API key.
"""

from litellm import Router

from shareholder_extractor.core.config import RetryConfig
from shareholder_extractor.core.settings import ExtractorSettings


def _deployment(model: str, settings: ExtractorSettings) -> dict:
    """Build one model_list entry for the configured provider."""
    params = {
        "model": model,
        "api_key": settings.api_key,
        "timeout": settings.request_timeout,
    }
    if settings.llm_provider == "azure":
        params["api_base"] = settings.api_base
        params["api_version"] = settings.api_version

    return {"model_name": model, "litellm_params": params}


def build_model_list(settings: ExtractorSettings) -> list[dict]:
    """Primary model, plus the fallback model when one is configured."""
    models = [_deployment(settings.llm_model, settings)]
    if settings.fallback_model and settings.fallback_model != settings.llm_model:
        models.append(_deployment(settings.fallback_model, settings))
    return models


def build_fallbacks(settings: ExtractorSettings) -> list[dict]:
    """Fall back from the primary to the fallback model on exhausted retries."""
    if settings.fallback_model and settings.fallback_model != settings.llm_model:
        return [{settings.llm_model: [settings.fallback_model]}]
    return []


def build_router(settings: ExtractorSettings) -> Router:
    """Build the LLM Router with retry and fallback configuration.

    The router handles:
    - Automatic retries with backoff
    - Fallback from primary to secondary model
    - Cooldown tracking for failed deployments
    """
    return Router(
        model_list=build_model_list(settings),
        num_retries=RetryConfig.NUM_RETRIES,
        retry_after=RetryConfig.RETRY_AFTER_SECONDS,
        cooldown_time=RetryConfig.COOLDOWN_SECONDS,
        allowed_fails=RetryConfig.ALLOWED_FAILS,
        fallbacks=build_fallbacks(settings),
    )
