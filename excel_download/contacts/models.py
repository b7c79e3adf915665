"""
Excel Download - Contact Info Models

Pydantic models for the contact records exported by the demo download.
"""

from typing import Optional

from pydantic import BaseModel


class Address(BaseModel):
    """
    Postal address of a contact.

    Attributes:
        street1 (str): First address line
        street2 (Optional[str]): Second address line (apartment, suite)
        country (str): Country
        city (str): City
        state (Optional[str]): State or region code
        zip_code (Optional[str]): Postal code
        label (Optional[str]): Free-form label (e.g. 'Home')
    """
    street1: str
    street2: Optional[str] = None
    country: str
    city: str
    state: Optional[str] = None
    zip_code: Optional[str] = None
    label: Optional[str] = None


class ContactInfo(BaseModel):
    """
    A contact with its address.

    Attributes:
        first_name (str): Given name
        last_name (str): Family name
        age (Optional[int]): Age in years, when known
        address (Address): Postal address
        hire_date (str): ISO 8601 hire date (e.g. '2022-01-15T00:00:00Z')
    """
    first_name: str
    last_name: str
    age: Optional[int] = None
    address: Address
    hire_date: str
