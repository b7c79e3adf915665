"""
Excel Download - Record Loaders

Reads record lists from CSV and JSON files so they can be exported with
inferred columns. Column order follows the file; empty cells become None.
"""

import os
from typing import Any, Dict, List

import pandas as pd

SUPPORTED_EXTENSIONS = ('.csv', '.json')


def _frame_to_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Convert a DataFrame to plain dict records with None for missing cells."""
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient='records')


def load_records(path: str) -> List[Dict[str, Any]]:
    """
    Load records from a CSV or JSON file.

    JSON files must hold an array of objects. Nested objects are kept as
    dicts; dates are not parsed.

    Args:
        path: Path to a .csv or .json file

    Returns:
        List[Dict[str, Any]]: One dict per row, keys in file column order

    Raises:
        ValueError: If the file extension is not supported
        FileNotFoundError: If the file does not exist
    """
    extension = os.path.splitext(path)[1].lower()

    if extension == '.csv':
        df = pd.read_csv(path, skipinitialspace=True)
    elif extension == '.json':
        df = pd.read_json(path, orient='records', convert_dates=False, dtype=False)
    else:
        raise ValueError(
            f"Unsupported record file '{path}'. Expected one of: {', '.join(SUPPORTED_EXTENSIONS)}"
        )

    return _frame_to_records(df)
