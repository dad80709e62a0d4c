"""Pytest configuration and shared fixtures.

Provides reusable test fixtures for:
- Sample document texts
- Mock LLM router and client responses
- Real PDF files built with PyMuPDF
- Logger isolation between tests
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import fitz  # PyMuPDF
import pytest

from shareholder_extractor.core.llm_client import LLMResponse
from shareholder_extractor.core.pipeline_logger import reset_logger
from shareholder_extractor.core.settings import ExtractorSettings


# =============================================================================
# Logger isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _isolated_logger():
    """Drop the global pipeline logger so handlers never outlive a test."""
    reset_logger()
    yield
    reset_logger()


# =============================================================================
# Sample documents
# =============================================================================


@pytest.fixture
def consent_text():
    """A board consent with a purchaser exhibit, as flattened by a PDF reader."""
    return (
        "LEXSY, INC. ACTION BY UNANIMOUS WRITTEN CONSENT OF THE BOARD OF DIRECTORS\n"
        "The undersigned directors approve the sale of Restricted Stock to the\n"
        "purchasers listed on Exhibit A at a price of $0.0001 per share.\n"
        "\n"
        "EXHIBIT A\n"
        "RESTRICTED STOCK PURCHASERS\n"
        "Name Shares Vesting Schedule\n"
        "Iryna Krutenko 54,000 shares 1/48 monthly\n"
        "Elena Ondar 450,000 shares 1/48 monthly\n"
        "John Michael Smith 10,000 shares fully vested\n"
    )


@pytest.fixture
def plain_text():
    return "This is just plain text with no shareholders."


# =============================================================================
# Settings
# =============================================================================


@pytest.fixture
def llm_settings():
    """Settings with the model backend enabled (no real key needed with mocks)."""
    return ExtractorSettings(llm_enabled=True, llm_model="test-model", api_key="sk-test")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove LLM configuration from the process environment."""
    for var in (
        "LLM_PROVIDER",
        "OPENAI_API_KEY",
        "OPENROUTER_API_KEY",
        "AZURE_API_KEY",
        "AZURE_API_BASE",
        "AZURE_API_VERSION",
        "SHAREHOLDER_LLM_MODEL",
        "SHAREHOLDER_LLM_FALLBACK_MODEL",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


# =============================================================================
# Mock LLM
# =============================================================================


@pytest.fixture
def mock_router():
    """A router whose acompletion returns a small JSON object."""
    router = MagicMock()
    router.acompletion = AsyncMock(return_value=MagicMock(
        choices=[MagicMock(message=MagicMock(content='{"shareholders": []}'))],
        usage=MagicMock(prompt_tokens=100, completion_tokens=50),
    ))
    return router


@pytest.fixture
def mock_llm_client():
    """Factory for an LLMClient stand-in returning a fixed JSON payload."""

    def _create(content: dict | None = None, side_effect: Exception | None = None):
        client = MagicMock()
        client.complete = AsyncMock(
            return_value=LLMResponse(content=content or {}, raw_content="{}", model="test-model"),
            side_effect=side_effect,
        )
        return client

    return _create


# =============================================================================
# PDF files
# =============================================================================


@pytest.fixture
def make_pdf(tmp_path):
    """Factory writing a real PDF with one text block per page."""

    def _create(pages: list[str], name: str = "document.pdf") -> Path:
        path = tmp_path / name
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            if text:
                page.insert_text((72, 72), text)
        doc.save(str(path))
        doc.close()
        return path

    return _create
