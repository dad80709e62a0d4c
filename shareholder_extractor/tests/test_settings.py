"""Tests for shareholder_extractor.core.settings and llm_router modules.

Settings are read from explicit mappings; no test touches the real
environment or calls a provider.
"""

import pytest

from shareholder_extractor.core.config import LLMConfig
from shareholder_extractor.core.llm_router import build_fallbacks, build_model_list
from shareholder_extractor.core.settings import ExtractorSettings, provider_model_name


# =============================================================================
# provider_model_name tests
# =============================================================================


class TestProviderModelName:
    """Tests for litellm model identifiers."""

    @pytest.mark.parametrize("provider, expected", [
        ("openai", "gpt-4o-mini"),
        ("openrouter", "openrouter/openai/gpt-4o-mini"),
        ("azure", "azure/gpt-4o-mini"),
    ])
    def test_prefix(self, provider, expected):
        assert provider_model_name(provider, "gpt-4o-mini") == expected

    def test_qualified_name_unchanged(self):
        assert provider_model_name("openrouter", "anthropic/claude-3-haiku") == "anthropic/claude-3-haiku"


# =============================================================================
# ExtractorSettings tests
# =============================================================================


class TestExtractorSettings:
    """Tests for explicit settings and from_env()."""

    def test_defaults_disable_backend(self):
        settings = ExtractorSettings()
        assert not settings.llm_enabled
        assert settings.llm_model == LLMConfig.DEFAULT_MODEL
        assert settings.max_input_chars == 2_000_000

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unsupported LLM provider"):
            ExtractorSettings(llm_provider="cohere")

    def test_max_input_chars_positive(self):
        with pytest.raises(ValueError):
            ExtractorSettings(max_input_chars=0)

    def test_from_env_without_key(self):
        settings = ExtractorSettings.from_env({})
        assert not settings.llm_enabled
        assert settings.llm_provider == "openai"
        assert settings.api_key is None

    def test_from_env_with_openai_key(self):
        settings = ExtractorSettings.from_env({"OPENAI_API_KEY": "sk-test"})
        assert settings.llm_enabled
        assert settings.api_key == "sk-test"
        assert settings.api_key_env_var == "OPENAI_API_KEY"

    def test_from_env_empty_key_disables(self):
        assert not ExtractorSettings.from_env({"OPENAI_API_KEY": ""}).llm_enabled

    def test_from_env_openrouter(self):
        settings = ExtractorSettings.from_env({
            "LLM_PROVIDER": "OpenRouter",
            "OPENROUTER_API_KEY": "or-key",
            "OPENAI_API_KEY": "ignored",
        })
        assert settings.llm_provider == "openrouter"
        assert settings.api_key == "or-key"
        assert settings.llm_model == "openrouter/openai/gpt-4o-mini"

    def test_from_env_azure(self):
        settings = ExtractorSettings.from_env({
            "LLM_PROVIDER": "azure",
            "AZURE_API_KEY": "az-key",
            "AZURE_API_BASE": "https://example.openai.azure.com",
        })
        assert settings.llm_model == "azure/gpt-4o-mini"
        assert settings.api_base == "https://example.openai.azure.com"
        assert settings.api_version == "2024-02-15-preview"

    def test_from_env_models(self):
        settings = ExtractorSettings.from_env({
            "OPENAI_API_KEY": "sk-test",
            "SHAREHOLDER_LLM_MODEL": "gpt-4o",
            "SHAREHOLDER_LLM_FALLBACK_MODEL": "gpt-4o-mini",
        })
        assert settings.llm_model == "gpt-4o"
        assert settings.fallback_model == "gpt-4o-mini"

    def test_from_env_bad_provider(self):
        with pytest.raises(ValueError, match="Unsupported LLM_PROVIDER"):
            ExtractorSettings.from_env({"LLM_PROVIDER": "cohere"})

    def test_from_env_reads_process_environment(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "sk-env")
        assert ExtractorSettings.from_env().api_key == "sk-env"

    def test_with_model(self):
        settings = ExtractorSettings(llm_provider="openrouter").with_model("gpt-4o")
        assert settings.llm_model == "openrouter/openai/gpt-4o"
        assert settings.llm_provider == "openrouter"


# =============================================================================
# Router configuration tests
# =============================================================================


class TestRouterConfig:
    """Tests for the litellm Router model list and fallbacks."""

    def test_single_model(self):
        settings = ExtractorSettings(llm_enabled=True, api_key="sk-test")
        assert build_model_list(settings) == [{
            "model_name": "gpt-4o-mini",
            "litellm_params": {
                "model": "gpt-4o-mini",
                "api_key": "sk-test",
                "timeout": LLMConfig.REQUEST_TIMEOUT,
            },
        }]
        assert build_fallbacks(settings) == []

    def test_fallback_model(self):
        settings = ExtractorSettings(
            llm_enabled=True, api_key="sk-test", llm_model="gpt-4o", fallback_model="gpt-4o-mini",
        )
        assert [m["model_name"] for m in build_model_list(settings)] == ["gpt-4o", "gpt-4o-mini"]
        assert build_fallbacks(settings) == [{"gpt-4o": ["gpt-4o-mini"]}]

    def test_fallback_same_as_primary_ignored(self):
        settings = ExtractorSettings(llm_model="gpt-4o", fallback_model="gpt-4o")
        assert len(build_model_list(settings)) == 1
        assert build_fallbacks(settings) == []

    def test_azure_params(self):
        settings = ExtractorSettings(
            llm_provider="azure",
            llm_model="azure/gpt-4o-mini",
            api_key="az-key",
            api_base="https://example.openai.azure.com",
            api_version="2024-02-15-preview",
        )
        params = build_model_list(settings)[0]["litellm_params"]
        assert params["api_base"] == "https://example.openai.azure.com"
        assert params["api_version"] == "2024-02-15-preview"
