# products/services/images.py

"""
PRODUCT IMAGE STORAGE

The product row keeps an opaque storage name only; bytes live in
Django's default_storage (MEDIA_ROOT locally).

Rules:
- allowed types: jpeg, jpg, png, gif, webp (extension AND content type)
- size limit: MAX_IMAGE_UPLOAD_BYTES (5 MB by default)
- names are products/<uuid><ext>, never the client filename
- release is best-effort: a missing/locked file never fails the request
"""

from __future__ import annotations

import logging
import os
import uuid

from django.conf import settings
from django.core.files.storage import default_storage

from common.exceptions import ValidationError

logger = logging.getLogger(__name__)

IMAGE_DIR = "products"
ALLOWED_IMAGE_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif", ".webp"}
ALLOWED_IMAGE_CONTENT_TYPES = {
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
}


def _max_upload_bytes() -> int:
    return int(getattr(settings, "MAX_IMAGE_UPLOAD_BYTES", 5 * 1024 * 1024))


def store_image(upload) -> str:
    """
    Validate and persist an uploaded image. Returns the storage name.
    """
    ext = os.path.splitext(getattr(upload, "name", "") or "")[1].lower()
    content_type = (getattr(upload, "content_type", "") or "").lower()

    if ext not in ALLOWED_IMAGE_EXTENSIONS or content_type not in ALLOWED_IMAGE_CONTENT_TYPES:
        raise ValidationError("Only image files are allowed!", field="image")

    max_bytes = _max_upload_bytes()
    if upload.size is not None and upload.size > max_bytes:
        raise ValidationError(
            f"File size too large. Maximum size is {max_bytes // (1024 * 1024)}MB.",
            field="image",
        )

    name = default_storage.save(f"{IMAGE_DIR}/{uuid.uuid4()}{ext}", upload)
    logger.info("Stored product image %s (%s bytes)", name, upload.size)
    return name


def release_image(ref: str | None) -> None:
    if not ref:
        return

    try:
        default_storage.delete(ref)
    except Exception:
        logger.warning("Failed to delete product image %s", ref, exc_info=True)


def image_url(ref: str | None, request=None) -> str | None:
    if not ref:
        return None

    url = default_storage.url(ref)
    if request is not None:
        return request.build_absolute_uri(url)
    return url
