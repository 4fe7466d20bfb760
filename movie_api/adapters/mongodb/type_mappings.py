"""
Type coercion for query-string values.

Query parameters always arrive as strings; MongoDB compares by BSON type, so
values are cast to the declared type of the field before they reach a filter.
Fields without a declared type are left as strings.
"""

from datetime import datetime
from typing import Any, Callable, Dict, Optional

from bson import ObjectId


def _to_number(value: str) -> Any:
    try:
        return int(value)
    except ValueError:
        return float(value)


def _to_date(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _to_boolean(value: str) -> bool:
    lowered = value.lower()
    if lowered in ("true", "1"):
        return True
    if lowered in ("false", "0"):
        return False
    raise ValueError(value)


def _to_object_id(value: str) -> ObjectId:
    if not ObjectId.is_valid(value):
        raise ValueError(value)
    return ObjectId(value)


class TypeMapper:
    """Casts raw string values according to a field -> type mapping."""

    CONVERTERS: Dict[str, Callable[[str], Any]] = {
        "string": str,
        "number": _to_number,
        "date": _to_date,
        "boolean": _to_boolean,
        "objectid": _to_object_id,
    }

    def __init__(self, field_types: Optional[Dict[str, str]] = None):
        """
        Initialize type mapper.

        Args:
            field_types: Mapping of field path to normalized type
                (string, number, date, boolean, objectid)
        """
        self.field_types = field_types or {}

    def get_field_type(self, field_path: str) -> str:
        return self.field_types.get(field_path, "string")

    def coerce(self, field_path: str, value: Any) -> Any:
        """
        Cast a value (or each item of a tuple/list) to the field's type.

        Values that cannot be cast are returned unchanged, so a malformed
        value simply matches nothing instead of failing the request.
        """
        if isinstance(value, (list, tuple)):
            return [self.coerce(field_path, item) for item in value]
        if not isinstance(value, str):
            return value

        converter = self.CONVERTERS.get(self.get_field_type(field_path), str)
        try:
            return converter(value)
        except ValueError:
            return value


MOVIE_FIELD_TYPES: Dict[str, str] = {
    "_id": "objectid",
    "rating": "number",
    "duration": "number",
    "budget": "number",
    "boxOffice": "number",
    "awards.year": "number",
    "releaseDate": "date",
    "createdAt": "date",
    "updatedAt": "date",
    "createdBy": "objectid",
    "updatedBy": "objectid",
}
