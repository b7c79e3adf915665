"""
tests/conftest.py - shared pytest fixtures

Sample records and column definitions used across the export tests.
"""

import sys
from pathlib import Path

import pytest

# Make the project importable without installing it
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from excel_download.contacts import get_contact_info
from excel_download.export.models import ColumnSpec


@pytest.fixture
def name_records():
    """Two records with short and long first names."""
    return [
        {"firstName": "John"},
        {"firstName": "Alexandria"},
    ]


@pytest.fixture
def people():
    """Dict records with an optional age and a nested address."""
    return [
        {"first": "Ada", "age": 36, "address": {"city": "London", "street1": "12 St James Sq"}},
        {"first": "Grace", "age": None, "address": {"city": "Arlington", "street1": "1 Navy Way"}},
        {"first": "Linus", "address": {"city": "Portland", "street1": "9 Kernel Rd"}},
    ]


@pytest.fixture
def people_columns():
    """Column definitions for the people fixture."""
    return [
        ColumnSpec(key="first", label="First"),
        ColumnSpec(
            key="age",
            label="Age",
            render=lambda age, record: str(age) if age is not None else "N/A",
        ),
        ColumnSpec(
            key="address",
            alt_key="city",
            label="City",
            render=lambda address, record: address["city"],
        ),
    ]


@pytest.fixture
def contacts():
    """The demo contact list."""
    return get_contact_info()
