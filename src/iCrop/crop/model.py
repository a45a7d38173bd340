"""
Crop state values.

The controller replaces its :class:`CropValue` atomically on every update;
observers only ever see complete, immutable snapshots.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from ..config import DEFAULT_MAXIMUM_IMAGE_SIZE, DEFAULT_MINIMUM_IMAGE_SIZE
from ..errors import InvalidConfigurationError, InvalidRectError
from .geometry import Rect
from .rotation import CropRotation


@dataclass(frozen=True)
class SizeBounds:
    """Minimum and maximum crop size, in displayed pixels."""

    minimum: float = DEFAULT_MINIMUM_IMAGE_SIZE
    maximum: float = DEFAULT_MAXIMUM_IMAGE_SIZE

    def __post_init__(self) -> None:
        if not self.minimum > 0:
            raise InvalidConfigurationError("minimum crop size must be positive")
        if math.isnan(self.maximum) or self.maximum < self.minimum:
            raise InvalidConfigurationError(
                "maximum crop size cannot be less than the minimum crop size"
            )

    @property
    def is_fixed(self) -> bool:
        return self.minimum == self.maximum


def validate_aspect_ratio(ratio: float | None) -> float | None:
    """Return *ratio* as a float, rejecting non-positive values."""
    if ratio is None:
        return None
    value = float(ratio)
    if not (value > 0 and math.isfinite(value)):
        raise InvalidConfigurationError(f"aspect ratio must be a positive number, got {ratio!r}")
    return value


def validate_crop_rect(rect: Rect) -> Rect:
    """Reject inverted, empty or out-of-bounds normalised rectangles."""
    if rect.left >= rect.right or rect.top >= rect.bottom:
        raise InvalidRectError(f"crop rectangle is inverted or empty: {rect}")
    if not rect.is_normalised():
        raise InvalidRectError(f"crop rectangle lies outside [0, 1]: {rect}")
    return rect.clamp_to_unit()


@dataclass(frozen=True)
class CropValue:
    """Snapshot of the controller state.

    ``crop`` is normalised and expressed in texture (unrotated) space.
    ``aspect_ratio`` is width / height as displayed, or None when free.
    """

    crop: Rect = field(default_factory=Rect.full)
    aspect_ratio: float | None = None
    rotation: CropRotation = CropRotation.UP

    def copy_with(self, **changes) -> CropValue:
        return replace(self, **changes)
