"""Workbook sheet discovery for the "Load Sheets" button.

Reads sheet names from the selected source so the host can fill the
sheet dropdown. Only xlsx/xlsm can be opened (via openpyxl); xls and
xlsb are recognised as Excel but rejected with a clear message.

Usage:
    from src.integrations.workbook import default_sheet, load_sheet_options

    options = load_sheet_options(model.source_path)
    selected = default_sheet(options)
"""

from pathlib import Path
from typing import Optional, Sequence

from src.core.exceptions import WorkbookError
from src.core.logging import get_logger
from src.models.file_form import SourceKind, classify_source

logger = get_logger(__name__)

READABLE_EXTENSIONS = (".xlsx", ".xlsm")


def load_sheet_options(source_path: Optional[str]) -> list[str]:
    """List the worksheets of an Excel source.

    Args:
        source_path: Path typed or picked in the source field

    Returns:
        Sheet names in workbook order; empty for blank or non-Excel sources

    Raises:
        WorkbookError: If the file is missing, unsupported, or unreadable
    """
    source = (source_path or "").strip()
    if not source or classify_source(source) != SourceKind.EXCEL:
        return []

    path = Path(source).expanduser()
    if path.suffix.lower() not in READABLE_EXTENSIONS:
        raise WorkbookError(f"Unsupported workbook format: {path.suffix}. Save as .xlsx")
    if not path.exists():
        raise WorkbookError(f"File not found: {path}")

    try:
        import openpyxl
    except ImportError:
        raise WorkbookError(
            "openpyxl is required for XLSX files. Install with: pip install openpyxl"
        )

    try:
        wb = openpyxl.load_workbook(str(path), read_only=True)
        try:
            sheets = list(wb.sheetnames)
        finally:
            wb.close()
    except Exception as e:
        raise WorkbookError(f"Cannot read workbook: {e}") from e

    logger.debug(
        "Loaded sheet options",
        extra={"context": {"source_path": str(path), "sheets": len(sheets)}},
    )
    return sheets


def default_sheet(options: Sequence[str]) -> Optional[str]:
    """First sheet, or None when there are no options."""
    return options[0] if options else None
