"""Integrations package - External file formats.

Modules:
    - workbook: Excel sheet discovery (requires openpyxl)
"""

from src.integrations.workbook import default_sheet, load_sheet_options

__all__ = ["default_sheet", "load_sheet_options"]
