"""
Image storage for piece photos and outfit cover images.

Uploads go to Cloudinary when it is enabled and configured, otherwise to the
local static directory. Either way the caller gets back a string it stores
verbatim on the record, and hands the same string to delete_image later.
"""
import logging
import re
import uuid
from pathlib import Path
from typing import Optional, Dict, Any

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
from fastapi import UploadFile

from closet.config import settings
from closet.core.exceptions import ExternalServiceError, ValidationError

logger = logging.getLogger(__name__)

PIECES = "pieces"
OUTFITS = "outfits"

_CLOUDINARY_URL = re.compile(r"^https?://res\.cloudinary\.com/[^/]+/image/upload/(?:v\d+/)?(?P<public_id>.+?)(?:\.[A-Za-z0-9]+)?$")


"""Initialize Cloudinary with configuration from settings"""
def initialize_cloudinary() -> bool:
    if settings.cloudinary_configured:
        cloudinary.config(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET,
            secure=True
        )
        return True
    return False


def use_cloudinary() -> bool:
    return settings.USE_CLOUDINARY and settings.cloudinary_configured


def cloudinary_public_id(url: str) -> Optional[str]:
    """Recover the public id from a Cloudinary delivery URL"""
    match = _CLOUDINARY_URL.match(url or "")
    return match.group("public_id") if match else None


def _local_root() -> Path:
    return Path(settings.STATIC_DIR)


def _local_path(image_path: str) -> Optional[Path]:
    prefix = settings.STATIC_URL_PREFIX.rstrip("/") + "/"
    if not image_path.startswith(prefix):
        return None
    relative = image_path[len(prefix):]
    root = _local_root().resolve()
    full = (root / relative).resolve()
    # Never follow a stored path outside the static directory
    if root not in full.parents:
        return None
    return full


async def _read_upload(upload: UploadFile) -> bytes:
    if upload.content_type and not upload.content_type.startswith("image/"):
        raise ValidationError(f"Unsupported file type: {upload.content_type}", field="image")
    data = await upload.read()
    if not data:
        raise ValidationError("Uploaded image is empty", field="image")
    if len(data) > settings.MAX_IMAGE_SIZE:
        raise ValidationError(
            f"Image exceeds the {settings.MAX_IMAGE_SIZE} byte limit", field="image"
        )
    return data


"""     Store an uploaded image
    Args:
        upload: the multipart file
        kind: PIECES or OUTFITS, used as folder name
    Returns:
        Path or URL to store on the record
    Raises:
        ValidationError: not an image, empty, or too large
        ExternalServiceError: the upload itself failed
"""
async def store_image(upload: UploadFile, kind: str) -> str:
    data = await _read_upload(upload)

    if use_cloudinary():
        initialize_cloudinary()
        try:
            result = cloudinary.uploader.upload(
                data,
                folder=f"{settings.CLOUDINARY_FOLDER}/{kind}",
                resource_type="image",
                tags=["closet_log", kind],
            )
        except cloudinary.exceptions.Error as e:
            raise ExternalServiceError("Cloudinary", str(e)) from e
        logger.info(f"Uploaded {kind} image to Cloudinary: {result.get('public_id')}")
        return result.get("secure_url")

    suffix = Path(upload.filename or "").suffix.lower()
    filename = f"{uuid.uuid4().hex}{suffix}"
    target_dir = _local_root() / kind
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        (target_dir / filename).write_bytes(data)
    except OSError as e:
        raise ExternalServiceError("Local image storage", str(e)) from e
    return f"{settings.STATIC_URL_PREFIX}/{kind}/{filename}"


"""    Delete a stored image
    Args:
        image_path: value previously returned by store_image
    Returns:
        bool: True if something was deleted
"""
def delete_image(image_path: Optional[str]) -> bool:
    if not image_path:
        return False

    local = _local_path(image_path)
    if local is not None:
        try:
            local.unlink()
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning(f"Failed to delete local image {image_path}: {e}")
            return False

    public_id = cloudinary_public_id(image_path)
    if public_id and initialize_cloudinary():
        try:
            result = cloudinary.uploader.destroy(public_id)
            return result.get("result") == "ok"
        except Exception as e:
            logger.warning(f"Failed to delete image from Cloudinary: {e}")
            return False

    return False


def get_image_storage_status() -> Dict[str, Any]:
    """Image storage configuration status"""
    return {
        "backend": "cloudinary" if use_cloudinary() else "local",
        "cloudinary_configured": settings.cloudinary_configured,
        "cloud_name": settings.CLOUDINARY_CLOUD_NAME if settings.cloudinary_configured else None,
        "folder": settings.CLOUDINARY_FOLDER if use_cloudinary() else settings.STATIC_DIR,
    }
