"""
Excel Download - Column Width Module

Computes the width of each spreadsheet column from its definition and the
worksheet default. Widths are either exact or auto-fit; auto-fit sizes the
column to the longest rendered cell (or header) with a fixed minimum.

Precedence:
1. No column width and no worksheet default: library default (None)
2. Numeric column width: used as is, even when the worksheet default is 'auto'
3. Column width 'auto', or no column width and worksheet default 'auto': auto-fit
4. Otherwise: the worksheet's numeric default
"""

from typing import Any, Optional, Union

from excel_download.export.accessors import get_field
from excel_download.export.models import AUTO_WIDTH, ColumnSpec, WorksheetSpec

# Minimum width of an auto-fit column
AUTO_FIT_BASELINE = 10


def _text_length(value: Any) -> int:
    """Character count of a cell value, 0 for None."""
    if value is None:
        return 0
    return len(str(value))


def _is_exact(width: Any) -> bool:
    return width is not None and width != AUTO_WIDTH


def auto_fit_width(column: Optional[ColumnSpec], resolved_id: str, worksheet: WorksheetSpec) -> int:
    """
    Size a column to its content.

    With a column definition every row contributes the longer of the header
    and the rendered cell (render callback, or the raw value as text). Without
    one, only the raw value is measured.

    Args:
        column: The column definition, None for inferred columns
        resolved_id: Field name read for inferred columns
        worksheet: The worksheet whose records are measured

    Returns:
        int: The widest content, never less than AUTO_FIT_BASELINE
    """
    width = AUTO_FIT_BASELINE

    for record in worksheet.records:
        if column is None:
            candidate = _text_length(get_field(record, resolved_id))
        else:
            value = get_field(record, column.key)
            if column.render:
                cell = column.render(value, record)
            else:
                cell = value
            candidate = max(len(column.header), _text_length(cell))

        width = max(width, candidate)

    return width


def compute_width(
    column: Optional[ColumnSpec],
    resolved_id: str,
    worksheet: WorksheetSpec,
) -> Optional[Union[int, float]]:
    """
    Compute the width of one column.

    Args:
        column: The column definition, None for inferred columns
        resolved_id: The column's resolved id
        worksheet: The worksheet the column belongs to

    Returns:
        The width, or None to leave the library default in place
    """
    column_width = column.width if column is not None else None
    default_width = worksheet.default_column_width

    if column_width is None and default_width is None:
        return None

    if _is_exact(column_width):
        return column_width

    if column_width == AUTO_WIDTH or (column_width is None and default_width == AUTO_WIDTH):
        return auto_fit_width(column, resolved_id, worksheet)

    return default_width
