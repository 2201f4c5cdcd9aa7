import logging
from typing import Optional

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError
from fastapi import Request

logger = logging.getLogger(__name__)


class MediaDeleteError(Exception):
    pass


def setup_media(app):
    cloudinary.config(
        cloud_name=app.config.CLOUDINARY_CLOUD_NAME,
        api_key=app.config.CLOUDINARY_API_KEY,
        api_secret=app.config.CLOUDINARY_API_SECRET,
        secure=True,
    )
    app.media_folder = app.config.MEDIA_FOLDER


def get_media_folder(request: Request) -> str:
    return request.app.media_folder


def get_public_id(image_url: str) -> Optional[str]:
    '''
    Extracts the public id from a hosted image url,
    e.g. https://res.cloudinary.com/demo/image/upload/v1/members/abc.jpg -> abc
    '''
    file_name = image_url.split("/")[-1]
    public_id = file_name.split(".")[0]
    return public_id or None


def delete_member_image(request: Request, image_url: str):
    """
    Deletes the image a member record points to from the media service.
    Parameters:
        image_url
            - Url of the image as stored on the member.
    Raises MediaDeleteError if the media service could not delete the image.
    Urls without a public id and images already gone from the media service are skipped.
    """
    public_id = get_public_id(image_url)
    if not public_id:
        return None

    # the SDK raises a plain ValueError when credentials are missing
    try:
        result = cloudinary.uploader.destroy(f"{get_media_folder(request)}/{public_id}")
    except (CloudinaryError, ValueError) as e:
        logger.error(f"Error deleting image from media service: {e}")
        raise MediaDeleteError("Failed to delete image from media service") from e

    logger.info(f"Media service deletion result: {result}")
    return result
