"""
Qt bridge for the crop controller.

Forwards Qt mouse events to :class:`CropController` gestures, re-emits crop
changes as a Qt signal and reports cursor shapes for hover feedback.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from PySide6.QtCore import QObject, QPointF, Qt, Signal
from PySide6.QtGui import QMouseEvent

from .controller import CropController
from .geometry import Point, Rect
from .utils import DragTarget, cursor_for_target

_LOGGER = logging.getLogger(__name__)


def point_from_qt(pos: QPointF) -> Point:
    """Convert a Qt point into a crop-engine point."""
    return Point(float(pos.x()), float(pos.y()))


class CropInteractionAdapter(QObject):
    """Connects a widget's mouse events to a crop controller.

    When no controller is supplied the adapter creates one and owns it:
    :meth:`dispose` then disposes the controller too. A controller handed in
    by the caller is only unsubscribed from.
    """

    cropChanged = Signal(float, float, float, float)

    def __init__(
        self,
        controller: CropController | None = None,
        *,
        on_cursor_change: Callable[[Qt.CursorShape | None], None] | None = None,
        on_request_update: Callable[[], None] | None = None,
        parent: QObject | None = None,
    ) -> None:
        """Initialize the adapter.

        Parameters
        ----------
        controller:
            Controller to drive; a private one is created if None.
        on_cursor_change:
            Callback to change cursor, signature: (cursor_shape or None to unset).
        on_request_update:
            Callback to request widget update/repaint.
        parent:
            Parent QObject (optional).
        """
        super().__init__(parent)
        self._owns_controller = controller is None
        self._controller = controller if controller is not None else CropController()
        self._on_cursor_change = on_cursor_change or (lambda shape: None)
        self._on_request_update = on_request_update or (lambda: None)
        self._subscription = self._controller.add_listener(self._handle_crop_changed)

    @property
    def controller(self) -> CropController:
        return self._controller

    @property
    def owns_controller(self) -> bool:
        return self._owns_controller

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def handle_mouse_press(self, event: QMouseEvent) -> None:
        """Handle mouse press events."""
        target = self._controller.on_pointer_down(point_from_qt(event.position()))
        if target is DragTarget.NONE:
            return
        if target is DragTarget.MOVE:
            self._on_cursor_change(Qt.CursorShape.ClosedHandCursor)
        else:
            self._on_cursor_change(cursor_for_target(target))
        self._on_request_update()
        event.accept()

    def handle_mouse_move(self, event: QMouseEvent) -> None:
        """Handle mouse move events; hovering only updates the cursor."""
        pos = point_from_qt(event.position())
        if not self._controller.is_dragging:
            self._on_cursor_change(cursor_for_target(self._controller.hover_target(pos)))
            return
        if self._controller.on_pointer_move(pos):
            event.accept()

    def handle_mouse_release(self, event: QMouseEvent) -> None:
        """Handle mouse release events."""
        del event  # unused
        was_dragging = self._controller.is_dragging
        self._controller.on_pointer_up()
        self._on_cursor_change(None)
        if was_dragging:
            # Third lines are only drawn while moving
            self._on_request_update()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def dispose(self) -> None:
        """Detach from the controller, disposing it only if this adapter created it."""
        if self._subscription is None:
            return
        if self._owns_controller:
            self._controller.dispose()
        else:
            self._controller.remove_listener(self._subscription)
        self._subscription = None
        _LOGGER.debug("Crop adapter disposed (owned controller: %s)", self._owns_controller)

    def _handle_crop_changed(self, crop: Rect) -> None:
        self.cropChanged.emit(*crop.as_tuple())
        self._on_request_update()
