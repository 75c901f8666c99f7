"""
image_utils.py — Upload Image Preparation
-----------------------------------------

This module prepares uploaded photos before they are sent to the vision model
and stored on disk.

Features:
- Validates that uploaded bytes decode as an image
- Converts to RGB JPEG and downsizes very large photos
- Base64-encodes image bytes for the model request

Dependencies:
- PIL (Pillow) for image handling

Project: Glaucus Fish Identification
"""

import base64
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from config.settings import MAX_IMAGE_SIDE


class InvalidImageError(ValueError):
    """Raised when an upload is not a readable image."""


def load_image(data: bytes) -> Image.Image:
    """
    Decode uploaded bytes into a PIL image.

    Args:
        data (bytes): Raw file contents

    Returns:
        Image.Image: Fully loaded image
    """
    if not data:
        raise InvalidImageError("Empty upload")
    try:
        image = Image.open(BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError(f"Could not read image: {e}") from e
    return image


def to_jpeg_bytes(image: Image.Image, max_side: int = MAX_IMAGE_SIDE, quality: int = 90) -> bytes:
    """
    Convert an image to RGB JPEG bytes, shrinking it so the longest side fits max_side.
    """
    image = image.convert("RGB")
    if max(image.size) > max_side:
        image.thumbnail((max_side, max_side))
    buffer = BytesIO()
    image.save(buffer, format="JPEG", quality=quality)
    return buffer.getvalue()


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
