"""
Fallback accessor for plain objects.

Only the instance's own attributes count as fields, in assignment order.
Class attributes, properties and names starting with an underscore are
ignored.
"""

from typing import Any, List

from excel_download.export.accessors.base import BaseFieldAccessor


class AttributeFieldAccessor(BaseFieldAccessor):
    """Reads instance attributes from arbitrary objects."""

    @classmethod
    def can_access(cls, record: Any) -> bool:
        return hasattr(record, '__dict__') and not isinstance(record, type)

    @classmethod
    def field_names(cls, record: Any) -> List[str]:
        return [name for name in vars(record) if not name.startswith('_')]

    @classmethod
    def get(cls, record: Any, field_id: str) -> Any:
        return vars(record).get(field_id)
