"""
Pan/move strategy for crop box interaction.
"""

from __future__ import annotations

from ..geometry import Point, Rect, Size, clamp
from .abstract import DragStrategy


class PanStrategy(DragStrategy):
    """Strategy for moving the whole crop box without resizing it."""

    def resolve(self, point: Point, crop: Rect, size: Size) -> Rect:
        left = clamp(point.x, 0.0, size.width - crop.width)
        top = clamp(point.y, 0.0, size.height - crop.height)
        return Rect.from_ltwh(left, top, crop.width, crop.height)
