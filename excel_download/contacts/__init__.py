"""
Contact-info demo download: models, canned data source and column definitions.
"""

from excel_download.contacts.columns import (
    CONTACT_INFO_COLUMNS,
    CONTACT_INFO_FILENAME,
    CONTACT_INFO_WORKSHEET,
    build_contact_workbook,
)
from excel_download.contacts.models import Address, ContactInfo
from excel_download.contacts.service import get_contact_info

__all__ = [
    'Address',
    'ContactInfo',
    'get_contact_info',
    'build_contact_workbook',
    'CONTACT_INFO_COLUMNS',
    'CONTACT_INFO_FILENAME',
    'CONTACT_INFO_WORKSHEET',
]
