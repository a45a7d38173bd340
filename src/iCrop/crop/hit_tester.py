"""
Hit testing logic for crop corners, edges and interior.

This module contains pure geometric functions for deciding which part of the
crop rectangle (if any) is under a given point, with no dependencies on Qt
events or controller state.
"""

from __future__ import annotations

from collections.abc import Mapping

from .geometry import Point, Rect
from .utils import CORNER_TARGETS, DragAnchor, DragTarget


def classify(
    point: Point,
    corners: Mapping[DragTarget, Point],
    touch_size: float,
    crop_rect: Rect,
    always_move: bool = False,
    *,
    corners_enabled: bool = True,
) -> DragTarget:
    """Determine which drag target is under *point*.

    Parameters
    ----------
    point:
        Pointer position in widget coordinates.
    corners:
        On-screen corner positions keyed by the four corner targets.
    touch_size:
        Side of the square touch zone around each corner; edges accept points
        within half of it.
    crop_rect:
        The crop rectangle in the same coordinates as *corners*.
    always_move:
        Treat any press that misses corners and edges as a move, even outside
        the rectangle.
    corners_enabled:
        False for fixed-size crops, which can only be moved.

    Returns
    -------
    DragTarget:
        The grabbed target, or ``DragTarget.NONE``.
    """
    if corners_enabled:
        # Corners first, in fixed priority order
        for target in CORNER_TARGETS:
            area = Rect.from_center(corners[target], touch_size, touch_size)
            if area.contains(point):
                return target

        half = touch_size / 2
        inside_x = crop_rect.left < point.x < crop_rect.right
        inside_y = crop_rect.top < point.y < crop_rect.bottom
        if abs(point.y - crop_rect.top) < half and inside_x:
            return DragTarget.TOP
        if abs(point.y - crop_rect.bottom) < half and inside_x:
            return DragTarget.BOTTOM
        if abs(point.x - crop_rect.left) < half and inside_y:
            return DragTarget.LEFT
        if abs(point.x - crop_rect.right) < half and inside_y:
            return DragTarget.RIGHT

    if always_move:
        return DragTarget.MOVE
    return DragTarget.MOVE if crop_rect.contains(point) else DragTarget.NONE


def reference_point(
    target: DragTarget, corners: Mapping[DragTarget, Point], crop_rect: Rect
) -> Point:
    """Return the feature a drag of *target* is anchored on."""
    if target.is_corner:
        return corners[target]
    center = crop_rect.center
    if target is DragTarget.TOP:
        return Point(center.x, crop_rect.top)
    if target is DragTarget.BOTTOM:
        return Point(center.x, crop_rect.bottom)
    if target is DragTarget.LEFT:
        return Point(crop_rect.left, center.y)
    if target is DragTarget.RIGHT:
        return Point(crop_rect.right, center.y)
    if target is DragTarget.MOVE:
        return corners[DragTarget.UPPER_LEFT]
    raise ValueError(f"{target} has no reference point")


class HitTester:
    """Hit tester bound to a touch size and move policy."""

    def __init__(self, touch_size: float, always_move: bool = False) -> None:
        self._touch_size = float(touch_size)
        self._always_move = bool(always_move)

    @property
    def touch_size(self) -> float:
        return self._touch_size

    def test(
        self,
        point: Point,
        corners: Mapping[DragTarget, Point],
        *,
        corners_enabled: bool = True,
    ) -> DragTarget:
        """Classify *point* against the rectangle spanned by *corners*."""
        crop_rect = Rect.from_points(
            corners[DragTarget.UPPER_LEFT], corners[DragTarget.LOWER_RIGHT]
        )
        return classify(
            point,
            corners,
            self._touch_size,
            crop_rect,
            self._always_move,
            corners_enabled=corners_enabled,
        )

    def anchor(
        self,
        point: Point,
        corners: Mapping[DragTarget, Point],
        *,
        corners_enabled: bool = True,
    ) -> DragAnchor | None:
        """Hit-test *point* and build the anchor for the drag it starts."""
        target = self.test(point, corners, corners_enabled=corners_enabled)
        if target is DragTarget.NONE:
            return None
        crop_rect = Rect.from_points(
            corners[DragTarget.UPPER_LEFT], corners[DragTarget.LOWER_RIGHT]
        )
        return DragAnchor(target, point - reference_point(target, corners, crop_rect))
