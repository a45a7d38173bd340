"""Interactive crop-rectangle geometry for image viewers."""

from __future__ import annotations

from .crop.controller import CropController
from .crop.geometry import Point, Rect, Size
from .crop.rotation import CropRotation
from .crop.utils import DragTarget
from .errors import (
    ControllerDisposedError,
    CropError,
    InvalidConfigurationError,
    InvalidRectError,
)
from .settings import CropOptions

__version__ = "0.1.0"

__all__ = [
    "ControllerDisposedError",
    "CropController",
    "CropError",
    "CropOptions",
    "CropRotation",
    "DragTarget",
    "InvalidConfigurationError",
    "InvalidRectError",
    "Point",
    "Rect",
    "Size",
]
