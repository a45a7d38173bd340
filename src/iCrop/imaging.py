"""Apply a normalised crop and rotation to Pillow images."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from .crop.geometry import Rect
from .crop.rotation import CropRotation

LOGGER = logging.getLogger(__name__)

# Pillow's ROTATE_* transposes turn counter-clockwise
_TRANSPOSE_FOR_ROTATION = {
    CropRotation.RIGHT: Image.Transpose.ROTATE_270,
    CropRotation.DOWN: Image.Transpose.ROTATE_180,
    CropRotation.LEFT: Image.Transpose.ROTATE_90,
}


def pixel_box(crop: Rect, width: int, height: int) -> tuple[int, int, int, int]:
    """Round a normalised crop to a pixel box of at least 1x1 inside the image."""
    left = min(max(0, round(crop.left * width)), width - 1)
    top = min(max(0, round(crop.top * height)), height - 1)
    right = min(max(left + 1, round(crop.right * width)), width)
    bottom = min(max(top + 1, round(crop.bottom * height)), height)
    return (left, top, right, bottom)


def crop_pil_image(image: Image.Image, crop: Rect, rotation: CropRotation) -> Image.Image:
    """Return *image* cropped to *crop* (texture space) then turned by *rotation*."""
    cropped = image.crop(pixel_box(crop, image.width, image.height))
    transpose = _TRANSPOSE_FOR_ROTATION.get(CropRotation(rotation))
    if transpose is None:
        return cropped
    return cropped.transpose(transpose)


def crop_file(source: Path, target: Path, crop: Rect, rotation: CropRotation) -> tuple[int, int]:
    """Crop the image at *source* into *target*; return the output size."""
    with Image.open(source) as img:
        img.load()
        result = crop_pil_image(img, crop, rotation)
    result.save(target)
    LOGGER.info("Cropped %s -> %s (%sx%s)", source, target, result.width, result.height)
    return result.size
