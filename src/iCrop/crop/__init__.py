"""
Crop geometry engine.

This package provides the pure crop interaction logic: geometry primitives,
the rotation model, hit testing and drag resolution. The controller facade
lives in :mod:`.controller` and the Qt bridge in :mod:`.qt_adapter`.
"""

from .geometry import Point, Rect, Size, clamp
from .hit_tester import HitTester, classify
from .model import CropValue, SizeBounds
from .resolver import resolve
from .rotation import CropRotation
from .utils import DragAnchor, DragTarget, cursor_for_target

__all__ = [
    "CropRotation",
    "CropValue",
    "DragAnchor",
    "DragTarget",
    "HitTester",
    "Point",
    "Rect",
    "Size",
    "SizeBounds",
    "clamp",
    "classify",
    "cursor_for_target",
    "resolve",
]
