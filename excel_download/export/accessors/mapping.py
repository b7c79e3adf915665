"""
Accessor for mapping records (dicts and other Mapping types).
"""

from collections.abc import Mapping
from typing import Any, List

from excel_download.export.accessors.base import BaseFieldAccessor


class MappingFieldAccessor(BaseFieldAccessor):
    """Reads fields from dict-like records by key."""

    @classmethod
    def can_access(cls, record: Any) -> bool:
        return isinstance(record, Mapping)

    @classmethod
    def field_names(cls, record: Any) -> List[str]:
        return [str(key) for key in record.keys()]

    @classmethod
    def get(cls, record: Any, field_id: str) -> Any:
        if field_id in record:
            return record[field_id]
        # Non-string keys are listed by their text form
        for key, value in record.items():
            if str(key) == field_id:
                return value
        return None
