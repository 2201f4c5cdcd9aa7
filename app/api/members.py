import logging
from fastapi import APIRouter, Request, HTTPException
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from app.utils.validation import validate_object_id

from ..db import get_database
from ..media import MediaDeleteError, delete_member_image
from ..models import Member, MemberDelete, MemberInput, MemberUpdate

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get('')
def get_all_members(request: Request):
    '''List all member objects'''
    db = get_database(request)
    # a single malformed document fails the whole listing
    try:
        members = [Member.model_validate(m).model_dump() for m in db.members.find()]
    except (PyMongoError, ValidationError) as e:
        logger.error(f"Error fetching members: {e}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "An error occurred while fetching members",
                "details": str(e),
            })
    return members


@router.post('', status_code=201)
def create_member(request: Request, newMember: MemberInput):
    if not newMember.name:
        raise HTTPException(400, "Missing Name.")

    db = get_database(request)
    member = newMember.model_dump(exclude_none=True)
    try:
        db.members.insert_one(member)
    except PyMongoError as e:
        logger.error(f"Error adding member: {e}")
        raise HTTPException(500, f"Failed to add member: {e}")

    # insert_one sets _id on the inserted dict
    return {"message": "Member added successfully", "savedMember": Member.model_validate(member).model_dump()}


@router.put('')
def update_member(request: Request, memberData: MemberUpdate):
    if not memberData.id or not memberData.name:
        raise HTTPException(
            400, "Missing required fields: 'id' and 'name' are mandatory.")

    id = memberData.id
    notFoundMessage = f"No member found with ID: {id}"
    oid = validate_object_id(id, notFoundMessage)

    db = get_database(request)
    updateInfo = memberData.model_dump(exclude_unset=True, exclude={'id'})
    try:
        updated = db.members.find_one_and_update(
            {'_id': oid},
            {"$set": updateInfo},
            return_document=ReturnDocument.AFTER)
    except PyMongoError as e:
        logger.error(f"Error updating member: {e}")
        raise HTTPException(500, f"Failed to update member: {e}")

    if not updated:
        raise HTTPException(404, notFoundMessage)

    return {"message": "Member updated successfully", "data": Member.model_validate(updated).model_dump()}


@router.delete('')
def delete_member(request: Request, payload: MemberDelete):
    '''Deletes a member and the image it points to on the media service'''
    if not payload.id:
        raise HTTPException(400, "Missing member ID")

    oid = validate_object_id(payload.id, "Member not found")

    db = get_database(request)
    try:
        member = db.members.find_one({'_id': oid})
    except PyMongoError as e:
        logger.error(f"Error deleting member: {e}")
        raise HTTPException(500, "Failed to delete member")

    if not member:
        raise HTTPException(404, "Member not found")

    imageUrl = member.get('imageUrl')
    if imageUrl:
        try:
            delete_member_image(request, imageUrl)
        except MediaDeleteError as e:
            logger.error(f"Error during media image deletion: {e}")
            raise HTTPException(500, "Failed to delete image from storage")

    # not transactional, the image is already gone if this fails
    try:
        db.members.delete_one({'_id': oid})
    except PyMongoError as e:
        logger.error(f"Error deleting member: {e}")
        raise HTTPException(500, "Failed to delete member")

    return {"message": "Member and associated image deleted successfully"}
