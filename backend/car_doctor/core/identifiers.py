"""Document Identifiers — parse and render storage-native ids.

Invariants:
    - parse_object_id accepts exactly what bson.ObjectId accepts for strings
      (24 hex characters); anything else raises InvalidIdentifierError
    - to_jsonable renders every ObjectId as its hex string, recursively
"""

from typing import Any

from bson import ObjectId
from bson.errors import InvalidId

from car_doctor.core.errors import InvalidIdentifierError


def parse_object_id(value: str) -> ObjectId:
    """Parse a path id into an ObjectId."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidIdentifierError(value) from None


def to_jsonable(value: Any) -> Any:
    """Convert a document (or list of documents) into JSON-safe data."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_jsonable(v) for v in value]
    return value
