"""
Drag resolution: pick the strategy for a drag target and apply it.
"""

from __future__ import annotations

from .geometry import Point, Rect, Size
from .model import SizeBounds
from .strategies import DragStrategy, EdgeStrategy, PanStrategy, ResizeStrategy
from .utils import DragTarget


def strategy_for(
    target: DragTarget, bounds: SizeBounds, aspect_ratio: float | None = None
) -> DragStrategy:
    """Return the strategy handling drags of *target*."""
    if target is DragTarget.MOVE:
        return PanStrategy()
    if target.is_corner:
        return ResizeStrategy(target=target, bounds=bounds, aspect_ratio=aspect_ratio)
    if target.is_edge:
        return EdgeStrategy(target=target, bounds=bounds)
    raise ValueError(f"cannot drag {target}")


def resolve(
    target: DragTarget,
    point: Point,
    anchor_offset: Point,
    crop: Rect,
    bounds: SizeBounds,
    aspect_ratio: float | None,
    size: Size,
) -> Rect:
    """Compute the crop rectangle, in displayed pixels, after a drag step.

    *point* is the padding-adjusted pointer position; *anchor_offset* is the
    offset recorded when the drag started.
    """
    strategy = strategy_for(target, bounds, aspect_ratio)
    return strategy.resolve(point - anchor_offset, crop, size)
