"""
Crop interaction data structures and small helpers.

Nothing here depends on Qt event handling; the cursor mapping only refers to
Qt's cursor enumeration so the adapter can hand it straight to a widget.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from PySide6.QtCore import Qt

from .geometry import Point


class DragTarget(enum.Enum):
    """What a pointer press grabbed."""

    UPPER_LEFT = "upper_left"
    UPPER_RIGHT = "upper_right"
    LOWER_RIGHT = "lower_right"
    LOWER_LEFT = "lower_left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"
    MOVE = "move"
    NONE = "none"

    @property
    def is_corner(self) -> bool:
        return self in CORNER_TARGETS

    @property
    def is_edge(self) -> bool:
        return self in EDGE_TARGETS


# Hit-test priority order.
CORNER_TARGETS: tuple[DragTarget, ...] = (
    DragTarget.UPPER_LEFT,
    DragTarget.UPPER_RIGHT,
    DragTarget.LOWER_RIGHT,
    DragTarget.LOWER_LEFT,
)
EDGE_TARGETS: tuple[DragTarget, ...] = (
    DragTarget.TOP,
    DragTarget.BOTTOM,
    DragTarget.LEFT,
    DragTarget.RIGHT,
)


@dataclass(frozen=True)
class DragAnchor:
    """Target grabbed at pointer-down plus the pointer's offset from it.

    The offset is subtracted from later pointer positions so the grabbed
    feature stays under the pointer instead of jumping to it.
    """

    target: DragTarget
    offset: Point


def cursor_for_target(target: DragTarget) -> Qt.CursorShape:
    """Return the appropriate cursor shape for a given drag target."""
    return {
        DragTarget.LEFT: Qt.CursorShape.SizeHorCursor,
        DragTarget.RIGHT: Qt.CursorShape.SizeHorCursor,
        DragTarget.TOP: Qt.CursorShape.SizeVerCursor,
        DragTarget.BOTTOM: Qt.CursorShape.SizeVerCursor,
        DragTarget.UPPER_LEFT: Qt.CursorShape.SizeFDiagCursor,
        DragTarget.LOWER_RIGHT: Qt.CursorShape.SizeFDiagCursor,
        DragTarget.UPPER_RIGHT: Qt.CursorShape.SizeBDiagCursor,
        DragTarget.LOWER_LEFT: Qt.CursorShape.SizeBDiagCursor,
        DragTarget.MOVE: Qt.CursorShape.OpenHandCursor,
    }.get(target, Qt.CursorShape.ArrowCursor)
