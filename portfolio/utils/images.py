"""
Image payload utilities for the portfolio backend
Handles validation of base64 uploads before they are stored in a row
"""
import base64
import binascii
import logging
from typing import Optional

from fastapi import HTTPException, status

from portfolio.core.config import settings

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = (
    "image/png",
    "image/jpeg",
    "image/jpg",
    "image/webp",
    "image/gif",
)

PNG_SIGNATURE = b"\x89PNG"
JPEG_SIGNATURE = b"\xff\xd8\xff"
GIF_SIGNATURE = b"GIF"
RIFF_SIGNATURE = b"RIFF"
WEBP_SIGNATURE = b"WEBP"


def detect_image_format(data: bytes) -> Optional[str]:
    """Return the format whose magic bytes lead the buffer, or None."""
    if data.startswith(PNG_SIGNATURE):
        return "png"
    if data.startswith(JPEG_SIGNATURE):
        return "jpeg"
    if data.startswith(RIFF_SIGNATURE) and data[8:12] == WEBP_SIGNATURE:
        return "webp"
    if data.startswith(GIF_SIGNATURE):
        return "gif"
    return None


def decode_image_payload(payload: str) -> bytes:
    try:
        return base64.b64decode(payload or "")
    except (binascii.Error, ValueError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Image payload is not valid base64",
        )


def validate_image(payload: str, image_type: Optional[str]) -> bytes:
    """
    Validate a base64 image upload

    Args:
        payload: base64 encoded image bytes
        image_type: MIME type claimed by the client

    Returns:
        The decoded bytes, ready to store

    Raises:
        HTTPException(400) naming the first check that failed. The claimed
        MIME type is not compared with the detected format.
    """
    data = decode_image_payload(payload)

    if len(data) > settings.MAX_IMAGE_SIZE:
        logger.info("Rejected image upload", extra={"reason": "size", "size": len(data)})
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Image size exceeds {settings.MAX_IMAGE_SIZE // (1024 * 1024)}MB limit",
        )

    if detect_image_format(data) is None:
        logger.info("Rejected image upload", extra={"reason": "magic_bytes"})
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid image format. Only PNG, JPEG, WEBP, and GIF are allowed",
        )

    if image_type not in ALLOWED_IMAGE_TYPES:
        logger.info("Rejected image upload", extra={"reason": "mime_type", "image_type": image_type})
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Image type {image_type} not allowed",
        )

    return data
