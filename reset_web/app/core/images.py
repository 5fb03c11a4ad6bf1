"""
Helpers for image URLs and image uploads.

The backend stores uploads under its own origin and returns paths such
as ``/uploads/abc.jpg``; pages need absolute URLs.  Uploads are checked
locally before they are sent so obvious mistakes never reach the
network.
"""

from typing import Optional

from reset_web.app.core.exceptions import UploadValidationError

ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/webp")
MAX_IMAGE_SIZE = 5 * 1024 * 1024

INVALID_TYPE_MESSAGE = "Tipo de archivo no válido. Solo se permiten JPG, PNG y WebP."
TOO_LARGE_MESSAGE = "El archivo es demasiado grande. Tamaño máximo: 5MB."


def get_full_image_url(url: Optional[str], origin: str) -> str:
    """Return ``url`` as an absolute URL rooted at ``origin``.

    Absolute ``http(s)`` URLs are returned unchanged and an empty value
    yields an empty string.
    """
    if not url:
        return ""
    if url.startswith("http://") or url.startswith("https://"):
        return url
    relative = url if url.startswith("/") else f"/{url}"
    return f"{origin.rstrip('/')}{relative}"


def validate_image_upload(content_type: Optional[str], size: int) -> None:
    """Raise :class:`UploadValidationError` if the file may not be uploaded."""
    if (content_type or "").lower() not in ALLOWED_IMAGE_TYPES:
        raise UploadValidationError(INVALID_TYPE_MESSAGE)
    if size > MAX_IMAGE_SIZE:
        raise UploadValidationError(TOO_LARGE_MESSAGE)
