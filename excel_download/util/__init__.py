"""
Shared helpers for rendering cell values.
"""

from excel_download.util.format import (
    EMPTY_STRING_VALUE,
    STRING_DATE_FORMAT,
    get_formatted_date,
    get_string_value,
    is_missing,
)

__all__ = [
    'EMPTY_STRING_VALUE',
    'STRING_DATE_FORMAT',
    'get_formatted_date',
    'get_string_value',
    'is_missing',
]
