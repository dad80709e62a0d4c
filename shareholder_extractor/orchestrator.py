"""Pipeline orchestrator: chooses and runs an extraction strategy.

High-level flow:
  PDF -> text (PDFReader) -> heuristic parser -> [model backend fallback]

Whether the model backend may be used is decided by the ExtractorSettings
passed in at construction time; nothing here reads the environment.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from shareholder_extractor.core import (
    BackendNotConfiguredError,
    CostTracker,
    ExtractorSettings,
    PDFReadError,
    get_logger,
    parse_shareholder_info,
)
from shareholder_extractor.pydantic_models import ExtractionResult, ExtractionWarning


class Method(str, Enum):
    """Strategy requested by the caller."""

    HEURISTIC = "heuristic"
    LLM = "llm"
    AUTO = "auto"  # heuristic first, model backend if nothing was found

    def __str__(self) -> str:
        return self.value


@dataclass
class DocumentReport:
    """Extraction outcome for one PDF file.

    Attributes:
        file_name: Source file name.
        page_count: Pages in the PDF.
        result: Extraction result; its warnings start with PDF reader warnings.
    """

    file_name: str
    page_count: int
    result: ExtractionResult

    @property
    def method(self) -> str:
        return self.result.method.value


class ShareholderExtractor:
    """Runs heuristic and model-based extraction for documents."""

    def __init__(
        self,
        settings: ExtractorSettings | None = None,
        llm_client=None,
        verbose: bool = False,
        log_dir: str | Path | None = None,
    ):
        """Initialize the extractor.

        Args:
            settings: Explicit configuration. Defaults to heuristics only.
            llm_client: LLMClient to use. Built from settings on first use
                        when the backend is enabled and none is given.
            verbose: If True, show DEBUG logs.
            log_dir: Directory for log files.
        """
        self.settings = settings or ExtractorSettings()
        self.logger = get_logger(verbose=verbose, log_dir=log_dir)
        self.cost_tracker = CostTracker()
        self._llm_client = llm_client

    @property
    def llm_available(self) -> bool:
        return self.settings.llm_enabled

    def _client(self):
        if self._llm_client is None:
            from shareholder_extractor.core.llm_client import LLMClient

            self._llm_client = LLMClient.from_settings(self.settings, cost_tracker=self.cost_tracker)
        return self._llm_client

    def extract_text(self, text: str) -> ExtractionResult:
        """Run the heuristic parser on document text."""
        result = parse_shareholder_info(text)
        self.logger.stage_result(
            "heuristic",
            f"{len(result.shareholders)} shareholders",
            company=result.company_name or "-",
            warnings=len(result.warnings),
        )
        return result

    async def extract_text_with_llm(self, text: str) -> ExtractionResult:
        """Run the model backend on document text.

        Raises:
            BackendNotConfiguredError: If the backend is disabled.
            BackendError: On any backend failure.
        """
        if not self.llm_available:
            raise BackendNotConfiguredError("LLM backend not configured")

        from shareholder_extractor.agents.shareholder_agent import parse_with_llm

        try:
            result = await parse_with_llm(text, self.settings, self._client())
        except Exception as e:
            self.logger.error("Model backend failed", exc=e)
            raise

        self.logger.stage_result(
            "llm",
            f"{len(result.shareholders)} shareholders",
            model=self.settings.llm_model,
            warnings=len(result.warnings),
        )
        return result

    async def run(self, text: str, method: Method | str = Method.HEURISTIC) -> ExtractionResult:
        """Extract with the requested strategy.

        AUTO falls back to the model backend only when the heuristic parser
        found no shareholders and the backend is available.
        """
        method = Method(method)

        if method is Method.LLM:
            return await self.extract_text_with_llm(text)

        result = self.extract_text(text)
        if method is Method.AUTO and not result.shareholders and self.llm_available:
            self.logger.info("No shareholders found heuristically, trying model backend")
            return await self.extract_text_with_llm(text)
        return result

    async def extract_pdf(
        self,
        pdf_path: str | Path,
        method: Method | str = Method.HEURISTIC,
    ) -> DocumentReport:
        """Read a PDF and extract shareholders from its text.

        Raises:
            PDFReadError: If the file is not a readable PDF.
            BackendError: If the model backend was used and failed.
        """
        from shareholder_extractor.core.pdf_reader import PDFReader, validate_pdf_file

        pdf_path = Path(pdf_path)
        self.logger.start_document(str(pdf_path))

        validation = validate_pdf_file(pdf_path)
        if not validation.valid:
            self.logger.end_document(success=False)
            raise PDFReadError(validation.error or "Invalid PDF file", context={"path": str(pdf_path)})

        leading = []
        if validation.error:
            leading.append(ExtractionWarning.from_text(validation.error, code="large_file"))

        try:
            with PDFReader(pdf_path) as pdf:
                document = pdf.extract_text()
            leading.extend(
                ExtractionWarning.from_text(w, code="pdf_text") for w in document.warnings
            )
            result = await self.run(document.text, method)
        except Exception:
            self.logger.end_document(success=False)
            raise

        self.logger.end_document(
            success=True,
            pages=document.page_count,
            shareholders=len(result.shareholders),
        )
        return DocumentReport(
            file_name=pdf_path.name,
            page_count=document.page_count,
            result=result.with_warnings(leading),
        )
