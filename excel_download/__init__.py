"""
Excel Download

Exports lists of records to xlsx spreadsheets with configurable columns,
custom cell rendering and exact or auto-fit column widths.
"""

from excel_download.export import (
    AUTO_WIDTH,
    ColumnSpec,
    WorkbookSpec,
    WorksheetSpec,
    build_workbook,
    download_excel,
)

__version__ = '1.0.0'

__all__ = [
    'AUTO_WIDTH',
    'ColumnSpec',
    'WorksheetSpec',
    'WorkbookSpec',
    'build_workbook',
    'download_excel',
]
