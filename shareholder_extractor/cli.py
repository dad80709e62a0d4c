"""CLI entrypoint for shareholder extraction."""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

# Suppress LiteLLM's direct prints (must be before import)
os.environ.setdefault("LITELLM_LOG", "ERROR")

# Suppress noisy loggers (HTTP clients, LiteLLM internals)
for logger_name in ["httpx", "httpcore", "litellm", "LiteLLM", "LiteLLM Router", "asyncio"]:
    logging.getLogger(logger_name).setLevel(logging.ERROR)

from dotenv import load_dotenv  # noqa: E402 - must be after logging config

from shareholder_extractor.core import (  # noqa: E402
    ExtractorSettings,
    ShareholderExtractionError,
    format_shareholder_data,
    format_total,
    sort_formatted,
)
from shareholder_extractor.core.exporters import to_csv, to_json, to_tab_separated  # noqa: E402
from shareholder_extractor.orchestrator import Method, ShareholderExtractor  # noqa: E402
from shareholder_extractor.pydantic_models import (  # noqa: E402
    ExtractionResult,
    WarningSeverity,
    group_by_severity,
)

SEVERITY_LABELS = {
    WarningSeverity.HIGH: "Critical Issues",
    WarningSeverity.MEDIUM: "Warnings",
    WarningSeverity.LOW: "Info",
}


def render_table(result: ExtractionResult, sort_field: str = "name", descending: bool = False) -> str:
    """Render the result as a plain-text table with a total row."""
    lines = [result.company_name or "Company Shareholders", ""]

    if not result.shareholders:
        lines.append("No shareholders found in document.")
        return "\n".join(lines)

    rows = sort_formatted(format_shareholder_data(result.shareholders), sort_field, descending)
    total = format_total(result.shareholders)

    name_width = max(len("Shareholder Name"), *(len(r.name) for r in rows))
    shares_width = max(len("Number of Shares"), len(total), *(len(r.shares) for r in rows))

    lines.append(f"{'Shareholder Name':<{name_width}}  {'Number of Shares':>{shares_width}}  {'Ownership':>9}")
    lines.append(f"{'-' * name_width}  {'-' * shares_width}  {'-' * 9}")
    for r in rows:
        lines.append(f"{r.name:<{name_width}}  {r.shares:>{shares_width}}  {r.percentage:>9}")
    lines.append(f"{'-' * name_width}  {'-' * shares_width}  {'-' * 9}")
    lines.append(f"{'Total':<{name_width}}  {total:>{shares_width}}")
    return "\n".join(lines)


def render_warnings(result: ExtractionResult) -> str:
    """Render warnings grouped high -> medium -> low."""
    if not result.warnings:
        return ""

    lines = [f"Extraction Warnings ({len(result.warnings)})"]
    for severity, warnings in group_by_severity(result.warnings).items():
        if not warnings:
            continue
        lines.append(f"  {SEVERITY_LABELS[severity]}:")
        lines.extend(f"    - {w.message}" for w in warnings)
    lines.append("  Always verify extracted data against the original document.")
    return "\n".join(lines)


async def extract(
    input_path: str,
    output_dir: str = "outputs",
    method: str = "heuristic",
    as_text: bool = False,
    output_format: str = "table",
    sort_field: str = "name",
    descending: bool = False,
    model: str | None = None,
    verbose: bool = False,
) -> ExtractionResult | None:
    """Run extraction for one document.

    Args:
        input_path: PDF file, or a plain-text file when as_text is set.
        output_dir: Directory for output files.
        method: heuristic, llm or auto.
        as_text: Treat the input as already-extracted text.
        output_format: table, json, csv or tsv (json is always written).
        sort_field: Table sort column (name or shares).
        descending: Reverse the table sort.
        model: Override the LLM model.
        verbose: Verbose output with DEBUG level logging.

    Returns:
        ExtractionResult, or None on failure.
    """
    path = Path(input_path)
    if not path.exists():
        print(f"Error: File not found: {path}")
        return None

    try:
        settings = ExtractorSettings.from_env()
    except ValueError as e:
        print(f"Error: {e}")
        return None
    if model:
        settings = settings.with_model(model)

    if method == Method.LLM and not settings.llm_enabled:
        print(f"Error: {settings.api_key_env_var} not set")
        print(f"Set it in .env or export {settings.api_key_env_var}=...")
        return None

    output_dir = Path(output_dir)
    extractor = ShareholderExtractor(settings=settings, verbose=verbose, log_dir=output_dir / "logs")

    try:
        if as_text:
            result = await extractor.run(path.read_text(encoding="utf-8"), method)
        else:
            report = await extractor.extract_pdf(path, method)
            result = report.result
    except ShareholderExtractionError as e:
        print(f"\n[ERROR] {e}")
        if verbose:
            import traceback
            traceback.print_exc()
        return None

    json_dir = output_dir / "json"
    json_dir.mkdir(parents=True, exist_ok=True)
    output_file = json_dir / f"{path.stem}.json"
    output_file.write_text(to_json(result), encoding="utf-8")

    rows = sort_formatted(format_shareholder_data(result.shareholders), sort_field, descending)
    if output_format == "csv":
        csv_dir = output_dir / "csv"
        csv_dir.mkdir(parents=True, exist_ok=True)
        csv_file = csv_dir / f"{path.stem}.csv"
        csv_file.write_text(to_csv(rows, result.company_name), encoding="utf-8")
        print(f"[OUTPUT] {csv_file}")
    elif output_format == "json":
        print(to_json(result))
    elif output_format == "tsv":
        # name<TAB>shares, for pasting into a spreadsheet
        print(to_tab_separated(rows))
    else:
        print(render_table(result, sort_field, descending))
        warnings_block = render_warnings(result)
        if warnings_block:
            print(f"\n{warnings_block}")

    print(f"\n[OUTPUT] {output_file}")

    if extractor.cost_tracker.call_count > 0:
        print(f"\n{extractor.cost_tracker.summary()}")

    return result


def main():
    parser = argparse.ArgumentParser(
        description="Extract company name and shareholders from corporate documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  shareholder-extract consent.pdf
  shareholder-extract -m auto --format csv consent.pdf   # model fallback, CSV export
  shareholder-extract --text --sort shares --desc consent.txt
  shareholder-extract --format tsv consent.pdf            # paste into a spreadsheet
        """,
    )
    parser.add_argument("input", help="Path to PDF file (or text file with --text)")
    parser.add_argument(
        "-m", "--method",
        choices=[m.value for m in Method],
        default=Method.HEURISTIC.value,
        help="Extraction strategy (default: heuristic)",
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="Input is plain text already extracted from the document",
    )
    parser.add_argument(
        "-o", "--output",
        default="outputs",
        help="Output directory (default: outputs)",
    )
    parser.add_argument(
        "-f", "--format",
        choices=["table", "json", "csv", "tsv"],
        default="table",
        help="Console/export format (default: table)",
    )
    parser.add_argument(
        "--sort",
        choices=["name", "shares"],
        default="name",
        help="Sort column for table and CSV output (default: name)",
    )
    parser.add_argument(
        "--desc",
        action="store_true",
        help="Sort descending",
    )
    parser.add_argument(
        "--model",
        default=None,
        help="LLM model for the model backend (default: SHAREHOLDER_LLM_MODEL or gpt-4o-mini)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output with DEBUG level logging",
    )

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    result = asyncio.run(extract(
        input_path=args.input,
        output_dir=args.output,
        method=args.method,
        as_text=args.text,
        output_format=args.format,
        sort_field=args.sort,
        descending=args.desc,
        model=args.model,
        verbose=args.verbose,
    ))

    sys.exit(0 if result is not None else 1)


if __name__ == "__main__":
    main()
