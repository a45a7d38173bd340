"""
Quarter-turn rotation model and coordinate mapping.

**Texture space** is the unrotated source image. The stored crop rectangle
always lives here, so rotating never rewrites it and repeated turns cannot
accumulate floating-point error.

**Display space** is what the user sees after the rotation is applied.
Hit testing, dragging and aspect-ratio enforcement all run in display space;
results are mapped back to texture space before they are stored.
"""

from __future__ import annotations

import enum
import math

from .geometry import Rect, Size


class CropRotation(enum.IntEnum):
    """Clockwise quarter-turn applied to the displayed image."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def is_sideways(self) -> bool:
        """True when displayed width and height are swapped."""
        return self in (CropRotation.RIGHT, CropRotation.LEFT)

    @property
    def degrees(self) -> int:
        return int(self) * 90

    @property
    def radians(self) -> float:
        return math.radians(self.degrees)

    @property
    def rotate_right(self) -> CropRotation:
        return CropRotation((int(self) + 1) % 4)

    @property
    def rotate_left(self) -> CropRotation:
        return CropRotation((int(self) + 3) % 4)

    @classmethod
    def from_name(cls, name: str) -> CropRotation:
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown rotation: {name!r}") from None


def _rotate_rect_steps(rect: Rect, steps: int) -> Rect:
    """Rotate a normalised rect clockwise by *steps* quarter turns."""
    left, top, right, bottom = rect.as_tuple()
    steps %= 4
    if steps == 0:
        return rect
    if steps == 1:
        # (x, y) -> (1 - y, x): the texture top edge becomes the visual right edge
        return Rect(1.0 - bottom, left, 1.0 - top, right)
    if steps == 2:
        return Rect(1.0 - right, 1.0 - bottom, 1.0 - left, 1.0 - top)
    # (x, y) -> (y, 1 - x)
    return Rect(top, 1.0 - right, bottom, 1.0 - left)


def texture_rect_to_display(rect: Rect, rotation: CropRotation) -> Rect:
    """Map a texture-space crop into the rotated display frame."""
    return _rotate_rect_steps(rect, int(rotation))


def display_rect_to_texture(rect: Rect, rotation: CropRotation) -> Rect:
    """Inverse of :func:`texture_rect_to_display`."""
    return _rotate_rect_steps(rect, 4 - int(rotation))


def displayed_image_size(image_size: Size, rotation: CropRotation) -> Size:
    """Return the image size as seen after rotation."""
    return image_size.transposed() if rotation.is_sideways else image_size


def fit_display_size(image_size: Size, rotation: CropRotation, available: Size) -> Size:
    """Largest size with the rotated image's ratio that fits inside *available*.

    Parameters
    ----------
    image_size:
        Source bitmap size in texture space.
    rotation:
        Current rotation; sideways rotations invert the image ratio.
    available:
        Space offered by the layout, padding already removed.
    """
    if image_size.is_empty or available.is_empty:
        return Size(0.0, 0.0)
    image_ratio = displayed_image_size(image_size, rotation).aspect_ratio
    screen_ratio = available.aspect_ratio
    if image_ratio > screen_ratio:
        return Size(available.width, available.width / image_ratio)
    return Size(available.height * image_ratio, available.height)
