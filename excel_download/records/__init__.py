"""
Record sources for downloads read from files.
"""

from excel_download.records.loaders import SUPPORTED_EXTENSIONS, load_records

__all__ = [
    'load_records',
    'SUPPORTED_EXTENSIONS',
]
