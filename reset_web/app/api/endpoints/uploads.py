"""
Image upload views used by the product and slide forms.

Files are checked locally (type and size) before they are forwarded to
the backend.  Returned URLs are absolute.
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from reset_web.app.api.deps import require_admin
from reset_web.app.core.context import PageContext
from reset_web.app.core.images import MAX_IMAGE_SIZE, get_full_image_url, validate_image_upload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
def upload_image(file: UploadFile = File(...), page: PageContext = Depends(require_admin)):
    # The declared size may be missing; never read past the limit.
    validate_image_upload(file.content_type, file.size or 0)
    content = file.file.read(MAX_IMAGE_SIZE + 1)
    validate_image_upload(file.content_type, len(content))
    result = page.api.upload_image(file.filename or "image", content, file.content_type or "application/octet-stream")
    logger.info("Uploaded %s (%d bytes)", result.filename, len(content))
    data = result.model_dump()
    data["url"] = get_full_image_url(result.url, page.api.base_url)
    return data


@router.get("")
def list_images(page: PageContext = Depends(require_admin)):
    images = page.api.list_images()
    return {
        "items": [
            dict(image.model_dump(), url=get_full_image_url(image.url, page.api.base_url))
            for image in images
        ]
    }


@router.delete("/{filename}")
def delete_image(filename: str, page: PageContext = Depends(require_admin)):
    page.api.delete_image(filename)
    return {"success": True, "filename": filename}
