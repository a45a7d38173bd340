"""
Abstract base class for crop drag strategies, plus the edge clamps they share.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..geometry import Point, Rect, Size, clamp
from ..model import SizeBounds


class DragStrategy(ABC):
    """Base class for crop drag strategies."""

    @abstractmethod
    def resolve(self, point: Point, crop: Rect, size: Size) -> Rect:
        """Return the crop rectangle produced by dragging to *point*.

        Parameters
        ----------
        point:
            Pointer position with the anchor offset and padding removed, in
            displayed pixels.
        crop:
            Current crop rectangle in displayed pixels.
        size:
            Displayed image size in pixels.
        """


def drag_leading_edge(value: float, current: float, trailing: float, bounds: SizeBounds) -> float:
    """Clamp a moving left/top edge against its fixed right/bottom partner.

    The edge stays at *current* when the bounds leave no feasible position.
    """
    lo = max(0.0, trailing - bounds.maximum)
    hi = trailing - bounds.minimum
    if lo > hi:
        return current
    return clamp(value, lo, hi)


def drag_trailing_edge(
    value: float, current: float, leading: float, limit: float, bounds: SizeBounds
) -> float:
    """Clamp a moving right/bottom edge against its fixed left/top partner."""
    lo = leading + bounds.minimum
    hi = min(leading + bounds.maximum, limit)
    if lo > hi:
        return current
    return clamp(value, lo, hi)
