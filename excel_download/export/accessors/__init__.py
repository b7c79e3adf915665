from typing import Any, Type

# Import accessors
from excel_download.export.accessors.base import BaseFieldAccessor
from excel_download.export.accessors.mapping import MappingFieldAccessor
from excel_download.export.accessors.model import DataclassFieldAccessor, ModelFieldAccessor
from excel_download.export.accessors.attribute import AttributeFieldAccessor

# Registry of all available accessors, most specific first
ACCESSORS = [
    MappingFieldAccessor,
    ModelFieldAccessor,
    DataclassFieldAccessor,
    AttributeFieldAccessor,
]


def get_accessor(record: Any) -> Type[BaseFieldAccessor]:
    """
    Select the accessor for a record.

    Args:
        record: A record from a worksheet

    Returns:
        The first registered accessor that can read the record

    Raises:
        TypeError: If no accessor supports the record (e.g. ints, strings, tuples)
    """
    for accessor in ACCESSORS:
        if accessor.can_access(record):
            return accessor
    raise TypeError(f"Unsupported record type: {type(record).__name__}")


def get_field(record: Any, field_id: str) -> Any:
    """Read one field from any supported record, None when it is absent."""
    return get_accessor(record).get(record, field_id)


# Export for public API
__all__ = [
    'ACCESSORS',
    'BaseFieldAccessor',
    'MappingFieldAccessor',
    'ModelFieldAccessor',
    'DataclassFieldAccessor',
    'AttributeFieldAccessor',
    'get_accessor',
    'get_field',
]
