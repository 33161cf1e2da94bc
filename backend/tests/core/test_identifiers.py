"""Identifiers — ObjectId parsing and JSON rendering."""

import pytest
from bson import ObjectId

from car_doctor.core.errors import InvalidIdentifierError
from car_doctor.core.identifiers import parse_object_id, to_jsonable


def test_parse_valid_hex_id():
    oid = ObjectId()
    assert parse_object_id(str(oid)) == oid


@pytest.mark.parametrize("value", ["", "123", "zz" * 12, "64f1" + "0" * 21])
def test_parse_invalid_id_raises(value):
    with pytest.raises(InvalidIdentifierError) as exc_info:
        parse_object_id(value)
    assert exc_info.value.http_status == 400
    assert exc_info.value.value == value


def test_to_jsonable_renders_nested_object_ids():
    oid, inner = ObjectId(), ObjectId()
    doc = {"_id": oid, "items": [{"ref": inner}], "title": "Oil change"}
    assert to_jsonable(doc) == {
        "_id": str(oid), "items": [{"ref": str(inner)}], "title": "Oil change",
    }


def test_to_jsonable_passes_none_through():
    assert to_jsonable(None) is None
