"""Tests for shareholder_extractor.core.exporters module."""

import json

from shareholder_extractor.core.exporters import to_csv, to_json, to_tab_separated
from shareholder_extractor.core.formatter import format_shareholder_data
from shareholder_extractor.pydantic_models import (
    ExtractionResult,
    ExtractionWarning,
    ShareholderRecord,
)


def _rows():
    return format_shareholder_data([
        ShareholderRecord(name="Iryna Krutenko", shares=54000),
        ShareholderRecord(name="Elena Ondar", shares=450000),
    ])


class TestCsv:
    """Tests for to_csv()."""

    def test_with_company(self):
        assert to_csv(_rows(), "LEXSY INC.") == (
            "Company: LEXSY INC.\n"
            "Shareholder Name,Number of Shares\n"
            "Iryna Krutenko,54000\n"
            "Elena Ondar,450000\n"
        )

    def test_without_company(self):
        assert to_csv(_rows()).splitlines()[0] == "Shareholder Name,Number of Shares"

    def test_empty(self):
        assert to_csv([]) == "Shareholder Name,Number of Shares\n"

    def test_commas_in_company_are_quoted(self):
        assert to_csv([], "Acme, Corp.").splitlines()[0] == '"Company: Acme, Corp."'


class TestTabSeparated:
    """Tests for to_tab_separated()."""

    def test_lines(self):
        assert to_tab_separated(_rows()) == "Iryna Krutenko\t54000\nElena Ondar\t450000"

    def test_empty(self):
        assert to_tab_separated([]) == ""


class TestJson:
    """Tests for to_json()."""

    def test_contract(self):
        result = ExtractionResult(
            company_name=None,
            shareholders=(ShareholderRecord(name="Iryna Krutenko", shares=54000),),
            warnings=(ExtractionWarning(message="Could not automatically detect company name."),),
        )
        assert json.loads(to_json(result)) == {
            "companyName": None,
            "shareholders": [{"name": "Iryna Krutenko", "shares": 54000}],
            "warnings": ["Could not automatically detect company name."],
        }

    def test_non_ascii_kept(self):
        result = ExtractionResult(company_name="Société Générale Inc.")
        assert "Société" in to_json(result)
