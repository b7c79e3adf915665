"""
Excel Download - Contact Info Columns

Column definitions and workbook request for the contact-info download.
Address fields are exported as separate columns of the same 'address'
field, told apart by their alt_key.
"""

from typing import List, Optional, Union

from excel_download.contacts.models import ContactInfo
from excel_download.export.models import AUTO_WIDTH, ColumnSpec, WorkbookSpec, WorksheetSpec
from excel_download.util.format import STRING_DATE_FORMAT, get_formatted_date

CONTACT_INFO_FILENAME = 'contact-info'
CONTACT_INFO_WORKSHEET = 'Contact Info'


def render_age(age: Optional[int], record: ContactInfo) -> str:
    return str(age) if age is not None else 'N/A'


def render_hire_date(hire_date: str, record: ContactInfo) -> str:
    return get_formatted_date(hire_date, STRING_DATE_FORMAT)


CONTACT_INFO_COLUMNS: List[ColumnSpec] = [
    ColumnSpec(key='first_name', label='First Name'),
    ColumnSpec(key='last_name', label='Last Name'),
    ColumnSpec(key='age', label='Age', render=render_age),
    ColumnSpec(key='hire_date', label='Hire Date', render=render_hire_date),
    ColumnSpec(
        key='address',
        alt_key='street1',
        label='Address Line 1',
        render=lambda address, record: address.street1,
    ),
    ColumnSpec(
        key='address',
        alt_key='street2',
        label='Address Line 2',
        width=100,
        render=lambda address, record: address.street2 or '',
    ),
    ColumnSpec(
        key='address',
        alt_key='city',
        label='City',
        render=lambda address, record: address.city,
    ),
    ColumnSpec(
        key='address',
        alt_key='state',
        label='State',
        render=lambda address, record: address.state or '',
    ),
    ColumnSpec(
        key='address',
        alt_key='country',
        label='Country',
        render=lambda address, record: address.country,
    ),
]


def build_contact_workbook(
    contacts: List[ContactInfo],
    filename: str = CONTACT_INFO_FILENAME,
    default_column_width: Optional[Union[int, float, str]] = AUTO_WIDTH,
) -> WorkbookSpec:
    """
    Prepare the contact-info download request.

    Args:
        contacts: Contacts to export, in row order
        filename: File name without extension
        default_column_width: Width for columns without their own ('auto' by default)

    Returns:
        WorkbookSpec: A single 'Contact Info' worksheet
    """
    return WorkbookSpec(
        filename=filename,
        worksheets=[
            WorksheetSpec(
                records=contacts,
                worksheet_name=CONTACT_INFO_WORKSHEET,
                columns=CONTACT_INFO_COLUMNS,
                default_column_width=default_column_width,
            ),
        ],
    )
