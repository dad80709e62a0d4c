"""PDF text acquisition for the extraction pipeline.

Pure Python + PyMuPDF. Pages are flattened to whitespace-collapsed text and
joined into one stream; the parser has no notion of page boundaries.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

import fitz  # PyMuPDF

from shareholder_extractor.core.config import PDFConfig
from shareholder_extractor.core.errors import PDFReadError

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


@dataclass
class FileValidation:
    """Result of checking a file before extraction.

    A valid file may still carry a note (e.g. for very large files).
    """

    valid: bool
    error: str | None = None


@dataclass
class DocumentText:
    """Text recovered from a PDF.

    Attributes:
        text: All pages joined with PDFConfig.PAGE_SEPARATOR.
        page_count: Number of pages in the document.
        warnings: Plain-text notes about extraction quality.
    """

    text: str
    page_count: int
    warnings: list[str] = field(default_factory=list)


def validate_pdf_file(path: str | Path) -> FileValidation:
    """Check that a path points to a readable PDF.

    Args:
        path: Path to the file.

    Returns:
        FileValidation; large files are valid but carry a note in `error`.
    """
    path = Path(path)
    if not path.is_file():
        return FileValidation(valid=False, error="No file provided")

    if path.suffix.lower() != ".pdf":
        return FileValidation(valid=False, error="File must be a PDF")

    with open(path, "rb") as f:
        if not f.read(5).startswith(b"%PDF"):
            return FileValidation(valid=False, error="File must be a PDF")

    size = path.stat().st_size
    if size > PDFConfig.LARGE_FILE_BYTES:
        return FileValidation(
            valid=True,
            error=f"File is large ({size / 1024 / 1024:.2f}MB). Processing may be slow.",
        )

    return FileValidation(valid=True)


class PDFReader:
    """PDF document reader with page-level access.

    Usage:
        with PDFReader("consent.pdf") as pdf:
            document = pdf.extract_text()
    """

    def __init__(self, path: str | Path):
        """Open a PDF document.

        Args:
            path: Path to the PDF file.

        Raises:
            PDFReadError: If the file is missing or cannot be opened.
        """
        self.path = Path(path)
        if not self.path.exists():
            raise PDFReadError(f"PDF extraction failed: file not found: {self.path}")

        try:
            self._doc = fitz.open(str(self.path))
        except Exception as e:
            raise PDFReadError(f"PDF extraction failed: {e}") from e

    def __enter__(self) -> "PDFReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._doc.close()

    @property
    def page_count(self) -> int:
        """Total number of pages in the document."""
        return len(self._doc)

    @property
    def filename(self) -> str:
        """Filename without path."""
        return self.path.name

    def read_page(self, page_num: int) -> str:
        """Read whitespace-collapsed text from a single page (1-indexed).

        Raises:
            IndexError: If page_num is out of range.
        """
        if page_num < 1 or page_num > self.page_count:
            raise IndexError(f"Page {page_num} out of range (1-{self.page_count})")

        page = self._doc[page_num - 1]  # Convert to 0-indexed
        return _WHITESPACE.sub(" ", page.get_text()).strip()

    def extract_text(self) -> DocumentText:
        """Read every page and join them into one text stream.

        Raises:
            PDFReadError: If a page cannot be read.
        """
        try:
            pages = [self.read_page(n) for n in range(1, self.page_count + 1)]
        except Exception as e:
            raise PDFReadError(f"PDF extraction failed: {e}") from e

        text = PDFConfig.PAGE_SEPARATOR.join(pages)
        warnings = []

        if self.page_count > PDFConfig.LARGE_DOCUMENT_PAGES:
            warnings.append(
                f"Large document: {self.page_count} pages. Extraction may be slower."
            )
        if len(text) < PDFConfig.MIN_TEXT_CHARS:
            warnings.append(
                "Extracted text is very short. PDF might be image-based or encrypted."
            )

        logger.debug(f"Read {self.page_count} pages from {self.filename} ({len(text):,} chars)")
        return DocumentText(text=text, page_count=self.page_count, warnings=warnings)
