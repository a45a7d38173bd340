"""
Resize strategy for crop box corner dragging.
"""

from __future__ import annotations

from ..geometry import Point, Rect, Size
from ..model import SizeBounds
from ..utils import DragTarget
from .abstract import DragStrategy, drag_leading_edge, drag_trailing_edge

_LEFT_CORNERS = (DragTarget.UPPER_LEFT, DragTarget.LOWER_LEFT)
_UPPER_CORNERS = (DragTarget.UPPER_LEFT, DragTarget.UPPER_RIGHT)


class ResizeStrategy(DragStrategy):
    """Strategy for resizing the crop box from one of its corners.

    The two edges meeting at the grabbed corner move; the opposite edges stay
    put. With an aspect ratio, the moving edges are pulled back towards the
    fixed corner until width / height matches.
    """

    def __init__(
        self,
        *,
        target: DragTarget,
        bounds: SizeBounds,
        aspect_ratio: float | None = None,
    ) -> None:
        """Initialize resize strategy.

        Parameters
        ----------
        target:
            The corner being dragged.
        bounds:
            Crop size bounds in displayed pixels.
        aspect_ratio:
            Width / height to enforce, or None for free resizing.
        """
        if not target.is_corner:
            raise ValueError(f"{target} is not a corner target")
        self._target = target
        self._bounds = bounds
        self._aspect_ratio = aspect_ratio

    def resolve(self, point: Point, crop: Rect, size: Size) -> Rect:
        left, top, right, bottom = crop.as_tuple()
        moves_left = self._target in _LEFT_CORNERS
        moves_top = self._target in _UPPER_CORNERS

        if moves_left:
            left = drag_leading_edge(point.x, left, right, self._bounds)
        else:
            right = drag_trailing_edge(point.x, right, left, size.width, self._bounds)
        if moves_top:
            top = drag_leading_edge(point.y, top, bottom, self._bounds)
        else:
            bottom = drag_trailing_edge(point.y, bottom, top, size.height, self._bounds)

        ratio = self._aspect_ratio
        if ratio is not None:
            width = right - left
            height = bottom - top
            # Only shrinks, so the result stays inside the clamped envelope
            if width / height > ratio:
                if moves_left:
                    left = right - height * ratio
                else:
                    right = left + height * ratio
            elif moves_top:
                top = bottom - width / ratio
            else:
                bottom = top + width / ratio

        return Rect(left, top, right, bottom)
