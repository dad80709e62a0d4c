"""Export formats for extraction results.

- CSV for download (company line, header, one row per shareholder)
- Tab-separated lines for pasting into a spreadsheet
- JSON of the external output contract
"""

import csv
import io
import json

from shareholder_extractor.core.number_format import THOUSANDS_SEPARATOR
from shareholder_extractor.pydantic_models.shareholder_models import (
    ExtractionResult,
    FormattedRecord,
)

CSV_HEADER = ("Shareholder Name", "Number of Shares")


def _raw_shares(record: FormattedRecord) -> str:
    return record.shares.replace(THOUSANDS_SEPARATOR, "")


def to_csv(records: list[FormattedRecord], company_name: str | None = None) -> str:
    """Render formatted records as CSV text.

    Share counts are written without separators so spreadsheets read them
    as numbers.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    if company_name:
        writer.writerow([f"Company: {company_name}"])
    writer.writerow(CSV_HEADER)
    for record in records:
        writer.writerow([record.name, _raw_shares(record)])
    return buffer.getvalue()


def to_tab_separated(records: list[FormattedRecord]) -> str:
    """One "name<TAB>shares" line per record."""
    return "\n".join(f"{r.name}\t{_raw_shares(r)}" for r in records)


def to_json(result: ExtractionResult, indent: int = 2) -> str:
    """Serialize the companyName/shareholders/warnings contract."""
    return json.dumps(result.to_output(), indent=indent, ensure_ascii=False)
