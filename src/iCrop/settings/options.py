"""Interaction options for the crop control."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..config import (
    DEFAULT_GRID_CORNER_SIZE,
    DEFAULT_GRID_THICK_WIDTH,
    DEFAULT_GRID_THIN_WIDTH,
    DEFAULT_MAXIMUM_IMAGE_SIZE,
    DEFAULT_MINIMUM_IMAGE_SIZE,
    DEFAULT_PADDING_SIZE,
    DEFAULT_TOUCH_SIZE,
)
from ..crop.model import SizeBounds
from ..errors import InvalidConfigurationError
from .schema import merge_with_defaults, validation_errors


@dataclass(frozen=True)
class CropOptions:
    """Options for a crop control, validated on construction.

    Sizes are in displayed pixels. Setting ``minimum_image_size`` and
    ``maximum_image_size`` to the same value gives a fixed-size crop: the
    corner affordances are disabled and the rectangle can only be moved.
    ``show_corners`` only controls whether the corner marks are drawn.
    """

    padding_size: float = DEFAULT_PADDING_SIZE
    touch_size: float = DEFAULT_TOUCH_SIZE
    grid_corner_size: float = DEFAULT_GRID_CORNER_SIZE
    grid_thin_width: float = DEFAULT_GRID_THIN_WIDTH
    grid_thick_width: float = DEFAULT_GRID_THICK_WIDTH
    show_corners: bool = True
    always_show_third_lines: bool = False
    minimum_image_size: float = DEFAULT_MINIMUM_IMAGE_SIZE
    maximum_image_size: float = DEFAULT_MAXIMUM_IMAGE_SIZE
    always_move: bool = False

    def __post_init__(self) -> None:
        for name in ("touch_size", "grid_corner_size", "grid_thin_width", "grid_thick_width"):
            if not getattr(self, name) > 0:
                raise InvalidConfigurationError(f"{name} cannot be zero or negative")
        if not self.padding_size >= 0:
            raise InvalidConfigurationError("padding_size cannot be negative")
        # SizeBounds enforces minimum > 0 and maximum >= minimum
        SizeBounds(self.minimum_image_size, self.maximum_image_size)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CropOptions:
        """Build options from a JSON-style mapping merged over the defaults."""
        merged = merge_with_defaults(dict(data))
        errors = validation_errors(merged)
        if errors:
            raise InvalidConfigurationError("; ".join(errors))
        if merged["maximum_image_size"] is None:
            merged["maximum_image_size"] = math.inf
        return cls(**merged)

    def as_mapping(self) -> dict[str, Any]:
        """Export the options in the JSON-compatible form accepted by from_mapping."""
        maximum = None if math.isinf(self.maximum_image_size) else self.maximum_image_size
        return {
            "padding_size": self.padding_size,
            "touch_size": self.touch_size,
            "grid_corner_size": self.grid_corner_size,
            "grid_thin_width": self.grid_thin_width,
            "grid_thick_width": self.grid_thick_width,
            "show_corners": self.show_corners,
            "always_show_third_lines": self.always_show_third_lines,
            "minimum_image_size": self.minimum_image_size,
            "maximum_image_size": maximum,
            "always_move": self.always_move,
        }

    @property
    def bounds(self) -> SizeBounds:
        return SizeBounds(self.minimum_image_size, self.maximum_image_size)

    @property
    def is_fixed_size(self) -> bool:
        return self.minimum_image_size == self.maximum_image_size

    @property
    def corners_enabled(self) -> bool:
        return not self.is_fixed_size
