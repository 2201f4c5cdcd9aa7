import pytest
from bson.objectid import ObjectId
from fastapi import HTTPException
from app.utils.validation import validate_object_id

def test_object_id_validation():
    valid_id = ObjectId()
    assert validate_object_id(str(valid_id), "not found") == valid_id

    with pytest.raises(HTTPException) as exc:
        validate_object_id("not-an-id", "Member not found")
    assert exc.value.status_code == 404
    assert exc.value.detail == "Member not found"
