"""
Crop controller (facade over state, hit testing and drag resolution).

The controller is the single writer of the crop state. Rendering layers read
:attr:`CropController.value` and subscribe through :meth:`add_listener`; they
never receive a writable handle.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..errors import ControllerDisposedError, InvalidConfigurationError, InvalidRectError
from ..events import CropChangedEvent, EventBus, Subscription
from ..settings import CropOptions
from .geometry import Point, Rect, Size
from .hit_tester import HitTester
from .model import CropValue, validate_aspect_ratio, validate_crop_rect
from .resolver import resolve
from .rotation import (
    CropRotation,
    display_rect_to_texture,
    displayed_image_size,
    fit_display_size,
    texture_rect_to_display,
)
from .utils import DragAnchor, DragTarget

_LOGGER = logging.getLogger(__name__)


class CropController:
    """Owns the crop value and turns pointer gestures into crop updates."""

    def __init__(
        self,
        *,
        aspect_ratio: float | None = None,
        default_crop: Rect | None = None,
        rotation: CropRotation = CropRotation.UP,
        options: CropOptions | None = None,
    ) -> None:
        """Initialize the crop controller.

        Parameters
        ----------
        aspect_ratio:
            Displayed width / height to lock corner drags to, or None.
        default_crop:
            Initial normalised crop in texture space; the full image if None.
        rotation:
            Initial rotation of the displayed image.
        options:
            Interaction options; the defaults if None.
        """
        self._options = options or CropOptions()
        self._events = EventBus(_LOGGER)
        self._value = CropValue(
            crop=validate_crop_rect(default_crop or Rect.full()),
            aspect_ratio=validate_aspect_ratio(aspect_ratio),
            rotation=CropRotation(rotation),
        )
        self._hit_tester = HitTester(self._options.touch_size, self._options.always_move)
        self._image_size: Size | None = None
        self._display_size = Size()
        self._anchor: DragAnchor | None = None
        self._disposed = False

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------
    @property
    def value(self) -> CropValue:
        return self._value

    @property
    def crop(self) -> Rect:
        return self._value.crop

    @property
    def aspect_ratio(self) -> float | None:
        return self._value.aspect_ratio

    @property
    def rotation(self) -> CropRotation:
        return self._value.rotation

    @property
    def options(self) -> CropOptions:
        return self._options

    @property
    def image_size(self) -> Size | None:
        return self._image_size

    @property
    def display_size(self) -> Size:
        return self._display_size

    @property
    def is_dragging(self) -> bool:
        return self._anchor is not None

    @property
    def active_target(self) -> DragTarget:
        return self._anchor.target if self._anchor is not None else DragTarget.NONE

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def get_crop_rect(self) -> Rect:
        """Return the normalised crop rectangle in texture space."""
        return self._value.crop

    def display_crop(self) -> Rect:
        """Return the normalised crop rectangle as currently displayed."""
        return texture_rect_to_display(self._value.crop, self._value.rotation)

    def grid_corners(self) -> dict[DragTarget, Point]:
        """Return the on-screen corner positions, padding included."""
        rect = self.display_crop().multiply(self._display_size)
        pad = self._options.padding_size
        return {
            DragTarget.UPPER_LEFT: rect.top_left.translate(pad, pad),
            DragTarget.UPPER_RIGHT: rect.top_right.translate(pad, pad),
            DragTarget.LOWER_RIGHT: rect.bottom_right.translate(pad, pad),
            DragTarget.LOWER_LEFT: rect.bottom_left.translate(pad, pad),
        }

    def crop_size(self) -> Rect:
        """Return the crop rectangle in source image pixels."""
        if self._image_size is None:
            raise InvalidConfigurationError("image size is not known yet")
        return self._value.crop.multiply(self._image_size)

    def cropped_image(self, image):
        """Return *image* (a Pillow image) cropped and rotated like the display."""
        from ..imaging import crop_pil_image

        return crop_pil_image(image, self._value.crop, self._value.rotation)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def add_listener(self, callback: Callable[[Rect], None]) -> Subscription:
        """Call *callback* with the normalised crop after every accepted change."""
        self._ensure_alive()
        return self._events.subscribe(CropChangedEvent, lambda event: callback(event.crop))

    def remove_listener(self, subscription: Subscription) -> None:
        self._events.unsubscribe(subscription)

    def add_event_listener(self, callback: Callable[[CropChangedEvent], None]) -> Subscription:
        """Like :meth:`add_listener`, but the callback receives the full event."""
        self._ensure_alive()
        return self._events.subscribe(CropChangedEvent, callback)

    # ------------------------------------------------------------------
    # External mutation
    # ------------------------------------------------------------------
    def set_crop_rect(self, rect: Rect) -> None:
        """Replace the crop rectangle.

        With an aspect ratio set and the image size known, *rect* is shrunk
        around its center to that ratio before it is stored, so
        :meth:`get_crop_rect` may return a narrower or shorter rectangle.

        Raises
        ------
        InvalidRectError:
            If *rect* is inverted, empty or leaves ``[0, 1]``. The current
            state is kept and no listener is notified.
        """
        self._ensure_alive()
        try:
            crop = validate_crop_rect(rect)
        except InvalidRectError:
            _LOGGER.warning("Rejected crop rectangle %s", rect)
            raise
        crop = self._adjust_ratio(crop, self._value.aspect_ratio)
        self._set_value(self._value.copy_with(crop=crop))

    def set_aspect_ratio(self, ratio: float | None) -> None:
        """Set or clear the aspect-ratio lock, reshaping the crop around its center."""
        self._ensure_alive()
        ratio = validate_aspect_ratio(ratio)
        crop = self._adjust_ratio(self._value.crop, ratio)
        _LOGGER.info("Aspect ratio set to %s", ratio)
        self._set_value(self._value.copy_with(crop=crop, aspect_ratio=ratio))

    def set_rotation(self, rotation: CropRotation) -> None:
        """Change the display rotation; the stored crop coordinates are untouched."""
        self._ensure_alive()
        rotation = CropRotation(rotation)
        _LOGGER.info("Rotation set to %s", rotation.name)
        self._set_value(self._value.copy_with(rotation=rotation))

    def rotate_right(self) -> None:
        self.set_rotation(self._value.rotation.rotate_right)

    def rotate_left(self) -> None:
        self.set_rotation(self._value.rotation.rotate_left)

    def set_image_size(self, size: Size) -> None:
        """Record the source bitmap size and re-apply the aspect ratio to it."""
        self._ensure_alive()
        if size.is_empty:
            raise InvalidConfigurationError(f"image size must be positive, got {size}")
        self._image_size = size
        _LOGGER.info("Image size set to %sx%s", size.width, size.height)
        crop = self._adjust_ratio(self._value.crop, self._value.aspect_ratio)
        self._set_value(self._value.copy_with(crop=crop))

    def set_display_size(self, size: Size) -> None:
        """Record the on-screen size of the image, padding excluded."""
        self._display_size = size

    def layout(self, available: Size) -> Size:
        """Fit the rotated image into *available* and remember the result."""
        pad = self._options.padding_size
        inner = Size(max(0.0, available.width - 2 * pad), max(0.0, available.height - 2 * pad))
        if self._image_size is None:
            self._display_size = Size()
        else:
            self._display_size = fit_display_size(self._image_size, self._value.rotation, inner)
        return self._display_size

    def dispose(self) -> None:
        """Drop all listeners and any active drag; the controller becomes unusable."""
        if self._disposed:
            return
        self._events.clear()
        self._anchor = None
        self._disposed = True

    # ------------------------------------------------------------------
    # Gestures
    # ------------------------------------------------------------------
    def hover_target(self, position: Point) -> DragTarget:
        """Return what a press at *position* would grab, without grabbing it."""
        if self._display_size.is_empty:
            return DragTarget.NONE
        return self._hit_tester.test(
            position, self.grid_corners(), corners_enabled=self._options.corners_enabled
        )

    def on_pointer_down(self, position: Point) -> DragTarget:
        """Start a drag if *position* hits the crop; return the grabbed target."""
        self._ensure_alive()
        if self._anchor is not None:
            _LOGGER.debug("Ignoring press at %s: a drag is already active", position)
            return DragTarget.NONE
        if self._display_size.is_empty:
            return DragTarget.NONE
        anchor = self._hit_tester.anchor(
            position, self.grid_corners(), corners_enabled=self._options.corners_enabled
        )
        if anchor is None:
            return DragTarget.NONE
        self._anchor = anchor
        _LOGGER.debug("Drag started on %s", anchor.target.name)
        return anchor.target

    def on_pointer_move(self, position: Point) -> bool:
        """Apply one drag step; return False when no drag is active."""
        self._ensure_alive()
        anchor = self._anchor
        size = self._display_size
        if anchor is None or size.is_empty:
            return False
        pad = self._options.padding_size
        rect = resolve(
            anchor.target,
            position.translate(-pad, -pad),
            anchor.offset,
            self.display_crop().multiply(size),
            self._options.bounds,
            self._value.aspect_ratio,
            size,
        )
        display = rect.divide(size).clamp_to_unit()
        crop = display_rect_to_texture(display, self._value.rotation)
        self._set_value(self._value.copy_with(crop=crop))
        return True

    def on_pointer_up(self) -> None:
        if self._anchor is not None:
            _LOGGER.debug("Drag ended on %s", self._anchor.target.name)
        self._anchor = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _ensure_alive(self) -> None:
        if self._disposed:
            raise ControllerDisposedError("crop controller has been disposed")

    def _set_value(self, value: CropValue) -> None:
        self._value = value
        self._events.publish(
            CropChangedEvent(
                crop=value.crop, rotation=value.rotation, aspect_ratio=value.aspect_ratio
            )
        )

    def _adjust_ratio(self, crop: Rect, ratio: float | None) -> Rect:
        """Shrink *crop* around its center until it matches *ratio* on screen."""
        if ratio is None or self._image_size is None:
            return crop
        rotation = self._value.rotation
        bitmap = displayed_image_size(self._image_size, rotation)
        display = texture_rect_to_display(crop, rotation)
        width = display.width * bitmap.width
        height = display.height * bitmap.height
        center = display.center
        if width / height > ratio:
            w = height * ratio / bitmap.width
            adjusted = Rect.from_ltwh(center.x - w / 2, display.top, w, display.height)
        else:
            h = width / ratio / bitmap.height
            adjusted = Rect.from_ltwh(display.left, center.y - h / 2, display.width, h)
        return display_rect_to_texture(adjusted.clamp_to_unit(), rotation)
