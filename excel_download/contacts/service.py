"""
Canned contact-info data source used by the demo download.
"""

from typing import List

from excel_download.contacts.models import Address, ContactInfo


def get_contact_info() -> List[ContactInfo]:
    """Return the demo contact list."""
    return [
        ContactInfo(
            first_name='John',
            last_name='Doe',
            age=30,
            hire_date='2022-01-15T00:00:00Z',
            address=Address(
                street1='100 Elm St.',
                street2='Apt 1200',
                city='Chicago',
                state='IL',
                zip_code='60601',
                country='USA',
            ),
        ),
        ContactInfo(
            first_name='Jane',
            last_name='Smith',
            hire_date='2020-04-20T00:00:00Z',
            address=Address(
                street1='200 Oak St.',
                city='New York',
                state='NY',
                zip_code='10001',
                country='USA',
            ),
        ),
        ContactInfo(
            first_name='Alice',
            last_name='Johnson',
            age=40,
            hire_date='2024-02-14T00:00:00Z',
            address=Address(
                street1='300 Maple Ave.',
                street2='Suite 500',
                city='Seattle',
                state='WA',
                zip_code='98101',
                country='USA',
            ),
        ),
        ContactInfo(
            first_name='Bob',
            last_name='Brown',
            hire_date='2005-07-28T00:00:00Z',
            address=Address(
                street1='400 Pine St.',
                city='Detroit',
                state='MI',
                zip_code='48201',
                country='USA',
            ),
        ),
        ContactInfo(
            first_name='Charlie',
            last_name='Davis',
            age=50,
            hire_date='2009-06-14T00:00:00Z',
            address=Address(
                street1='500 Cedar Blvd.',
                city='Nashville',
                state='TN',
                zip_code='37011',
                country='USA',
            ),
        ),
    ]
