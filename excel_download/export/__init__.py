"""
Excel Download - Export Package

This package turns lists of records into xlsx spreadsheets. It resolves the
columns of every worksheet, sizes them, renders the rows and hands the
assembled workbook to pandas/openpyxl for encoding.

Key Features:
- Column definitions with labels, render callbacks and nested-field columns
- Column inference from the first record (or an explicit field order)
- Exact and auto-fit column widths
- Multiple worksheets per file with a bold, frozen header row
"""

from excel_download.export.columns import resolve_columns
from excel_download.export.excel_export import (
    XLSX_EXTENSION,
    XLSX_MIME_TYPE,
    build_workbook,
    download_excel,
    encode_workbook,
    save_workbook,
)
from excel_download.export.models import (
    AUTO_WIDTH,
    ColumnSpec,
    EncodableWorkbook,
    EncodableWorksheet,
    ResolvedColumn,
    ResolvedRow,
    WorkbookSpec,
    WorksheetSpec,
)
from excel_download.export.rows import project_rows
from excel_download.export.widths import AUTO_FIT_BASELINE, compute_width

__all__ = [
    # Main functions
    'download_excel',   # Build, encode and save in one call
    'build_workbook',   # Assemble worksheets from a WorkbookSpec
    'encode_workbook',  # Assembled workbook -> xlsx bytes
    'save_workbook',    # xlsx bytes -> file
    'resolve_columns',
    'compute_width',
    'project_rows',

    # Models
    'ColumnSpec',
    'WorksheetSpec',
    'WorkbookSpec',
    'ResolvedColumn',
    'ResolvedRow',
    'EncodableWorksheet',
    'EncodableWorkbook',

    # Constants
    'AUTO_WIDTH',
    'AUTO_FIT_BASELINE',
    'XLSX_EXTENSION',
    'XLSX_MIME_TYPE',
]
