"""
Excel Download - Excel Export Module

This module assembles worksheets from record lists and column definitions,
encodes them to the xlsx format and saves the result.

Key Features:
- One or more worksheets per workbook, unnamed sheets titled Sheet1, Sheet2, ...
- Custom column definitions with render callbacks, or columns inferred from records
- Exact or auto-fit column widths
- Bold header row frozen in place on every sheet

Building is synchronous and validates the request before anything is encoded.
Encoding and save errors are not handled here; they reach the caller.
"""

import io
import os
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, List, Optional

import pandas as pd
from openpyxl.styles import Alignment, Border, Font
from openpyxl.utils import get_column_letter

from excel_download.export.accessors import get_field
from excel_download.export.columns import resolve_columns
from excel_download.export.models import (
    EncodableWorkbook,
    EncodableWorksheet,
    WorkbookSpec,
)
from excel_download.export.rows import project_rows
from excel_download.util.format import is_missing

XLSX_EXTENSION = '.xlsx'
XLSX_MIME_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
DEFAULT_SHEET_NAME_PREFIX = 'Sheet'

# Values openpyxl can store without conversion
_NATIVE_CELL_TYPES = (str, int, float, bool, Decimal, datetime, date, time, timedelta)


def build_workbook(spec: Optional[WorkbookSpec]) -> EncodableWorkbook:
    """
    Assemble the worksheets of a download.

    Args:
        spec: The download request

    Returns:
        EncodableWorkbook: Resolved columns and rows for every worksheet, in order

    Raises:
        ValueError: If the request is missing or has no worksheets
    """
    if spec is None:
        raise ValueError('Missing required argument [workbook].')

    if not spec.worksheets:
        raise ValueError('At least one worksheet is required.')

    worksheets: List[EncodableWorksheet] = []
    for index, worksheet in enumerate(spec.worksheets, start=1):
        columns = resolve_columns(worksheet)
        rows = project_rows(columns, worksheet)

        worksheets.append(EncodableWorksheet(
            name=worksheet.worksheet_name or f"{DEFAULT_SHEET_NAME_PREFIX}{index}",
            columns=columns,
            rows=rows,
            custom_columns=worksheet.has_custom_columns,
        ))

    return EncodableWorkbook(filename=spec.filename, worksheets=worksheets)


def _cell_value(value: Any) -> Any:
    """Convert a field value to something openpyxl can write."""
    if is_missing(value):
        return None
    if isinstance(value, _NATIVE_CELL_TYPES):
        return value
    # Nested objects are not flattened
    return str(value)


def _sheet_frame(worksheet: EncodableWorksheet) -> pd.DataFrame:
    """Lay out a worksheet's rows as a DataFrame with header labels as columns."""
    data = []
    for row in worksheet.rows:
        if worksheet.custom_columns:
            values = [row.get(column.id) for column in worksheet.columns]
        else:
            values = [get_field(row, column.id) for column in worksheet.columns]
        data.append([_cell_value(value) for value in values])

    headers = [column.header for column in worksheet.columns]
    return pd.DataFrame(data, columns=headers, dtype=object)


def format_worksheet(sheet, worksheet: EncodableWorksheet) -> None:
    """
    Apply the fixed presentation to a written sheet.

    Args:
        sheet: The openpyxl worksheet
        worksheet: The assembled worksheet it was written from
    """
    # Header row: bold only, no pandas borders or centering
    if worksheet.columns:
        for cell in sheet[1]:
            cell.font = Font(bold=worksheet.bold_header)
            cell.border = Border()
            cell.alignment = Alignment()

    # Text is stored as text; openpyxl would turn '=...' strings into formulas
    for row in sheet.iter_rows():
        for cell in row:
            if isinstance(cell.value, str):
                cell.data_type = 's'

    sheet.freeze_panes = f"A{worksheet.frozen_rows + 1}"

    for col_idx, column in enumerate(worksheet.columns, start=1):
        if column.width is not None:
            sheet.column_dimensions[get_column_letter(col_idx)].width = column.width


def encode_workbook(workbook: EncodableWorkbook) -> bytes:
    """
    Encode an assembled workbook to xlsx bytes.

    Args:
        workbook: The assembled workbook

    Returns:
        bytes: Contents of the xlsx file

    Raises:
        ValueError: If the workbook has no worksheets or two share a name
    """
    if not workbook.worksheets:
        raise ValueError('At least one worksheet is required.')

    names = workbook.sheet_names()
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ValueError(f"Worksheet name already exists: {', '.join(duplicates)}")

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine='openpyxl') as writer:
        for worksheet in workbook.worksheets:
            df = _sheet_frame(worksheet)
            df.to_excel(writer, sheet_name=worksheet.name, index=False)
            format_worksheet(writer.sheets[worksheet.name], worksheet)

    return output.getvalue()


def save_workbook(buffer: bytes, filename: str, output_dir: str = '.') -> str:
    """
    Write encoded workbook bytes to ``<output_dir>/<filename>.xlsx``.

    Returns:
        str: Path of the written file
    """
    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, f"{filename}{XLSX_EXTENSION}")

    with open(output_path, 'wb') as f:
        f.write(buffer)

    return output_path


def download_excel(spec: Optional[WorkbookSpec], output_dir: str = '.') -> str:
    """
    Build, encode and save a spreadsheet.

    Args:
        spec: The download request
        output_dir: Directory the file is saved to

    Returns:
        str: Path of the saved file

    Raises:
        ValueError: If the request is missing or has no worksheets
    """
    workbook = build_workbook(spec)

    for worksheet in workbook.worksheets:
        print(f"Exporting {len(worksheet.rows)} rows to '{worksheet.name}' sheet")

    buffer = encode_workbook(workbook)
    return save_workbook(buffer, workbook.filename, output_dir)
