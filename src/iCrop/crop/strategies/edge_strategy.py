"""
Edge strategy: free-form resize of a single side of the crop box.
"""

from __future__ import annotations

from ..geometry import Point, Rect, Size
from ..model import SizeBounds
from ..utils import DragTarget
from .abstract import DragStrategy, drag_leading_edge, drag_trailing_edge


class EdgeStrategy(DragStrategy):
    """Moves only the grabbed edge; the aspect ratio is never enforced."""

    def __init__(self, *, target: DragTarget, bounds: SizeBounds) -> None:
        if not target.is_edge:
            raise ValueError(f"{target} is not an edge target")
        self._target = target
        self._bounds = bounds

    def resolve(self, point: Point, crop: Rect, size: Size) -> Rect:
        left, top, right, bottom = crop.as_tuple()
        target = self._target
        if target is DragTarget.TOP:
            top = drag_leading_edge(point.y, top, bottom, self._bounds)
        elif target is DragTarget.BOTTOM:
            bottom = drag_trailing_edge(point.y, bottom, top, size.height, self._bounds)
        elif target is DragTarget.LEFT:
            left = drag_leading_edge(point.x, left, right, self._bounds)
        elif target is DragTarget.RIGHT:
            right = drag_trailing_edge(point.x, right, left, size.width, self._bounds)
        return Rect(left, top, right, bottom)
