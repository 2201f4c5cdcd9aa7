from fastapi import HTTPException
from bson.objectid import ObjectId


def validate_object_id(id: str, detail: str) -> ObjectId:
    if not ObjectId.is_valid(id):
        "Throw 404 since the interface requires a string while object id requires BSON i.e id not found"
        raise HTTPException(404, detail)
    return ObjectId(id)
