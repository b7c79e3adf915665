"""
Accessors for declared record types: pydantic models and dataclasses.

Both expose their fields in declaration order, which makes the inferred
column order stable for every record of the same type.
"""

import dataclasses
from typing import Any, List

from pydantic import BaseModel

from excel_download.export.accessors.base import BaseFieldAccessor


class ModelFieldAccessor(BaseFieldAccessor):
    """Reads declared fields from pydantic model instances."""

    @classmethod
    def can_access(cls, record: Any) -> bool:
        return isinstance(record, BaseModel)

    @classmethod
    def field_names(cls, record: Any) -> List[str]:
        return list(type(record).model_fields.keys())

    @classmethod
    def get(cls, record: Any, field_id: str) -> Any:
        if field_id not in type(record).model_fields:
            return None
        return getattr(record, field_id)


class DataclassFieldAccessor(BaseFieldAccessor):
    """Reads declared fields from dataclass instances."""

    @classmethod
    def can_access(cls, record: Any) -> bool:
        # Dataclass types themselves are not records
        return dataclasses.is_dataclass(record) and not isinstance(record, type)

    @classmethod
    def field_names(cls, record: Any) -> List[str]:
        return [field.name for field in dataclasses.fields(record)]

    @classmethod
    def get(cls, record: Any, field_id: str) -> Any:
        return getattr(record, field_id, None)
