"""
Geometry primitives used by the crop engine.

Points, sizes and rectangles are immutable value types. Rectangles are stored
as (left, top, right, bottom) so the same type can describe normalised crops
in ``[0, 1]`` and pixel rectangles in display space.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import FLOAT_TOLERANCE


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* into ``[lo, hi]``.

    An inverted range (``lo > hi``) means the constraint cannot be satisfied;
    the value is returned unchanged instead of raising.
    """
    if lo > hi:
        return value
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class Point:
    """A 2D point or offset."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def translate(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)

    def scale(self, sx: float, sy: float) -> Point:
        return Point(self.x * sx, self.y * sy)


@dataclass(frozen=True)
class Size:
    """Width/height pair in pixels."""

    width: float = 0.0
    height: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def aspect_ratio(self) -> float:
        return float(self.width) / float(self.height)

    def transposed(self) -> Size:
        return Size(self.height, self.width)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle described by its four edges."""

    left: float
    top: float
    right: float
    bottom: float

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_ltrb(cls, left: float, top: float, right: float, bottom: float) -> Rect:
        return cls(float(left), float(top), float(right), float(bottom))

    @classmethod
    def from_ltwh(cls, left: float, top: float, width: float, height: float) -> Rect:
        return cls(float(left), float(top), float(left + width), float(top + height))

    @classmethod
    def from_points(cls, a: Point, b: Point) -> Rect:
        """Build the rectangle spanned by two opposite corners, in any order."""
        return cls(min(a.x, b.x), min(a.y, b.y), max(a.x, b.x), max(a.y, b.y))

    @classmethod
    def from_center(cls, center: Point, width: float, height: float) -> Rect:
        half_w = width * 0.5
        half_h = height * 0.5
        return cls(center.x - half_w, center.y - half_h, center.x + half_w, center.y + half_h)

    @classmethod
    def full(cls) -> Rect:
        """The normalised rectangle covering the whole image."""
        return cls(0.0, 0.0, 1.0, 1.0)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Point:
        return Point((self.left + self.right) * 0.5, (self.top + self.bottom) * 0.5)

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.top)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def bottom_left(self) -> Point:
        return Point(self.left, self.bottom)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)

    def contains(self, point: Point) -> bool:
        """Half-open containment: the right and bottom edges are excluded."""
        return self.left <= point.x < self.right and self.top <= point.y < self.bottom

    def is_normalised(self, tolerance: float = FLOAT_TOLERANCE) -> bool:
        """Return True when the rect is non-empty and lies inside ``[0, 1]``."""
        return (
            self.left >= -tolerance
            and self.top >= -tolerance
            and self.right <= 1.0 + tolerance
            and self.bottom <= 1.0 + tolerance
            and self.left < self.right
            and self.top < self.bottom
        )

    def almost_equals(self, other: Rect, tolerance: float = FLOAT_TOLERANCE) -> bool:
        return all(
            abs(a - b) <= tolerance for a, b in zip(self.as_tuple(), other.as_tuple(), strict=True)
        )

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------
    def translate(self, dx: float, dy: float) -> Rect:
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    def scale(self, sx: float, sy: float) -> Rect:
        return Rect(self.left * sx, self.top * sy, self.right * sx, self.bottom * sy)

    def multiply(self, size: Size) -> Rect:
        """Map a normalised rect onto a pixel rect of *size*."""
        return self.scale(size.width, size.height)

    def divide(self, size: Size) -> Rect:
        """Map a pixel rect of *size* back to normalised coordinates."""
        return Rect(
            self.left / size.width,
            self.top / size.height,
            self.right / size.width,
            self.bottom / size.height,
        )

    def clamp_to_unit(self) -> Rect:
        """Snap each edge into ``[0, 1]`` to absorb floating-point drift."""
        return Rect(
            clamp(self.left, 0.0, 1.0),
            clamp(self.top, 0.0, 1.0),
            clamp(self.right, 0.0, 1.0),
            clamp(self.bottom, 0.0, 1.0),
        )
