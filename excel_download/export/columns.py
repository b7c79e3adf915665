"""
Excel Download - Column Resolution Module

Turns a worksheet's column definitions, or its records when no definitions
are given, into the ordered list of columns written to the sheet.

Inferred columns come from the worksheet's explicit ``field_order`` when set,
otherwise from the first record only. Records after the first are never
inspected, so heterogeneous lists lose fields the first record lacks.
"""

from typing import List

from excel_download.export.accessors import get_accessor
from excel_download.export.models import ResolvedColumn, WorksheetSpec
from excel_download.export.widths import compute_width


def get_default_columns(worksheet: WorksheetSpec) -> List[ResolvedColumn]:
    """
    Infer columns from the worksheet's records.

    Returns:
        List[ResolvedColumn]: One column per field, header equal to the field
                              name; empty when there are no records and no
                              explicit field order.
    """
    if worksheet.field_order is not None:
        field_names = list(worksheet.field_order)
    elif worksheet.records:
        first = worksheet.records[0]
        field_names = get_accessor(first).field_names(first)
    else:
        field_names = []

    return [
        ResolvedColumn(
            id=name,
            header=name,
            width=compute_width(None, name, worksheet),
        )
        for name in field_names
    ]


def get_custom_columns(worksheet: WorksheetSpec) -> List[ResolvedColumn]:
    """Resolve the worksheet's column definitions, preserving their order."""
    return [
        ResolvedColumn(
            id=column.column_id,
            header=column.header,
            width=compute_width(column, column.column_id, worksheet),
        )
        for column in worksheet.columns or []
    ]


def resolve_columns(worksheet: WorksheetSpec) -> List[ResolvedColumn]:
    """
    Resolve the columns of a worksheet.

    Args:
        worksheet: The worksheet to resolve

    Returns:
        List[ResolvedColumn]: Columns in left-to-right order
    """
    if worksheet.has_custom_columns:
        return get_custom_columns(worksheet)
    return get_default_columns(worksheet)
