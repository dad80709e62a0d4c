"""Heuristic shareholder parser: the primary entry point.

Pipeline:
    raw text -> locate_section -> find_candidates -> validate -> ExtractionResult

Nothing here raises for a poorly formatted document. A missing company
name or an empty shareholder list still returns a result, with warnings
explaining what could not be found.
"""

import logging

from shareholder_extractor.core.company_name import extract_company_name
from shareholder_extractor.core.errors import InvalidDocumentTextError
from shareholder_extractor.core.record_extractor import extract_shareholders
from shareholder_extractor.core.section_locator import locate_section
from shareholder_extractor.pydantic_models.diagnostics import ExtractionWarning, WarningSeverity
from shareholder_extractor.pydantic_models.shareholder_models import (
    ExtractionMethod,
    ExtractionResult,
)

logger = logging.getLogger(__name__)

COMPANY_NAME_MISSING = ExtractionWarning(
    message="Could not automatically detect company name. Please verify results.",
    severity=WarningSeverity.MEDIUM,
    code="company_name_missing",
)

NO_SHAREHOLDERS = ExtractionWarning(
    message=(
        "No shareholders found. The document may not contain a "
        "'Restricted Stock Purchasers' table, or the table format is not recognized."
    ),
    severity=WarningSeverity.MEDIUM,
    code="no_shareholders",
)

RESTRICTED_STOCK_UNPARSED = ExtractionWarning(
    message=(
        "Found 'Restricted Stock' text but could not extract data. "
        "The table format may be unusual."
    ),
    severity=WarningSeverity.MEDIUM,
    code="restricted_stock_unparsed",
)


def parse_shareholder_info(text: str) -> ExtractionResult:
    """Extract company name and shareholders from document text.

    Args:
        text: Plain text of the whole document (pages concatenated).

    Returns:
        ExtractionResult with method=heuristic.

    Raises:
        InvalidDocumentTextError: If text is not a string.
    """
    if not isinstance(text, str):
        raise InvalidDocumentTextError(
            f"Document text must be a string, got {type(text).__name__}"
        )

    warnings: list[ExtractionWarning] = []

    company_name = extract_company_name(text)
    if not company_name:
        warnings.append(COMPANY_NAME_MISSING)

    section = locate_section(text)
    if section is None:
        logger.debug("No anchor phrase found, skipping record extraction")
    else:
        logger.debug(f"Section located at {section.start} via {section.anchor!r} ({len(section)} chars)")

    shareholders = extract_shareholders(section)

    if not shareholders:
        warnings.append(NO_SHAREHOLDERS)
        lower = text.lower()
        if "restricted" in lower and "stock" in lower:
            warnings.append(RESTRICTED_STOCK_UNPARSED)

    logger.debug(
        f"Heuristic parse: company={company_name!r}, "
        f"shareholders={len(shareholders)}, warnings={len(warnings)}"
    )

    return ExtractionResult(
        company_name=company_name,
        shareholders=tuple(shareholders),
        warnings=tuple(warnings),
        method=ExtractionMethod.HEURISTIC,
    )
