"""
Excel Download - Row Projection Module

Renders each record into the cells of its row. With column definitions,
every cell is rendered to text (render callback or the value as text, with
EMPTY_STRING_VALUE for missing values). Without them, records are passed
through and the encoder reads the inferred fields itself.
"""

from typing import Any, Dict, List

from excel_download.export.accessors import get_field
from excel_download.export.models import ColumnSpec, ResolvedColumn, WorksheetSpec
from excel_download.util.format import get_string_value


def render_cell(column: ColumnSpec, record: Any) -> str:
    """
    Render one cell of a record.

    The render callback's result is used verbatim; nested selections such as
    ``address.street1`` are the callback's responsibility.
    """
    value = get_field(record, column.key)
    if column.render:
        return column.render(value, record)
    return get_string_value(value)


def project_rows(columns: List[ResolvedColumn], worksheet: WorksheetSpec) -> List[Any]:
    """
    Build the rows of a worksheet.

    Args:
        columns: The worksheet's resolved columns
        worksheet: The worksheet being projected

    Returns:
        One row per record, in record order: a mapping of column id to cell
        text for defined columns, the record itself for inferred columns
    """
    if not worksheet.has_custom_columns:
        return list(worksheet.records)

    rows: List[Dict[str, str]] = []
    for record in worksheet.records:
        row: Dict[str, str] = {}
        for resolved, column in zip(columns, worksheet.columns):
            row[resolved.id] = render_cell(column, record)
        rows.append(row)

    return rows
