"""
Base class for record field accessors.

This module defines the abstract base class that every record accessor must
implement. Accessors give the export pipeline one interface for reading named
fields from records of different shapes (dicts, pydantic models, dataclasses,
plain objects) without mutating them.
"""

from abc import ABC, abstractmethod
from typing import Any, List


class BaseFieldAccessor(ABC):
    """
    Abstract base class for record field accessors.

    All accessors must inherit from this class and implement its abstract
    methods. Accessors are stateless; every method is a classmethod.
    """

    @classmethod
    @abstractmethod
    def can_access(cls, record: Any) -> bool:
        """
        Determine if this accessor can read the given record.

        Args:
            record: A record from a worksheet

        Returns:
            True if this accessor handles the record's shape, False otherwise
        """
        pass

    @classmethod
    @abstractmethod
    def field_names(cls, record: Any) -> List[str]:
        """
        List the record's own fields in their natural order.

        Args:
            record: A record from a worksheet

        Returns:
            Field names, in declaration or insertion order
        """
        pass

    @classmethod
    @abstractmethod
    def get(cls, record: Any, field_id: str) -> Any:
        """
        Read one field from the record.

        Args:
            record: A record from a worksheet
            field_id: Name of the field to read

        Returns:
            The field's value, or None when the record has no such field
        """
        pass
