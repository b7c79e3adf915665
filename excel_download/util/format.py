"""
Excel Download - Display Formatting Helpers

Small helpers used when rendering cell values: the marker written for
missing values and date formatting for date-like strings.
"""

from typing import Any, Optional, Union

import pandas as pd

# Written in place of a missing cell value
EMPTY_STRING_VALUE = '-'

# Default display format for dates (MM/dd/yyyy)
STRING_DATE_FORMAT = '%m/%d/%Y'


def is_missing(value: Any) -> bool:
    """
    Check whether a cell value counts as absent.

    None, empty strings and NaN/NaT (as produced by pandas for empty CSV
    cells) are missing. Zero and False are real values.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ''
    if isinstance(value, float) or value is pd.NaT:
        return bool(pd.isna(value))
    return False


def get_formatted_date(date: Any, date_format: Optional[str] = None) -> str:
    """
    Format a date-like value for display.

    Args:
        date: ISO string, datetime, date or timestamp accepted by pandas
        date_format (Optional[str]): strftime pattern, defaults to STRING_DATE_FORMAT

    Returns:
        str: The formatted date

    Raises:
        ValueError: If the value can't be parsed as a date

    Example:
        >>> get_formatted_date('2022-01-15T00:00:00Z')
        '01/15/2022'
    """
    return pd.to_datetime(date).strftime(date_format or STRING_DATE_FORMAT)


def get_string_value(value: Any, date_string_format: Union[bool, str] = False) -> str:
    """
    Convert a cell value to display text.

    Args:
        value: The raw field value
        date_string_format (Union[bool, str]): True to format the value as a date with
                                               the default pattern, or a strftime pattern

    Returns:
        str: EMPTY_STRING_VALUE for missing or falsy values (0, False, empty
             collections included), otherwise the value as text
    """
    if is_missing(value) or not value:
        return EMPTY_STRING_VALUE

    if date_string_format:
        pattern = date_string_format if isinstance(date_string_format, str) else None
        return get_formatted_date(value, pattern)

    return str(value)
