"""
Drag strategies for crop gestures.

Each strategy turns a pointer position into a new crop rectangle for one
family of drag targets (move, corner resize, edge resize).
"""

from .abstract import DragStrategy
from .edge_strategy import EdgeStrategy
from .pan_strategy import PanStrategy
from .resize_strategy import ResizeStrategy

__all__ = [
    "DragStrategy",
    "EdgeStrategy",
    "PanStrategy",
    "ResizeStrategy",
]
