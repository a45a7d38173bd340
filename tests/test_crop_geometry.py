"""Tests for the crop geometry primitives."""

import pytest

from iCrop.crop.geometry import Point, Rect, Size, clamp


def test_clamp_within_range():
    assert clamp(5.0, 0.0, 10.0) == 5.0
    assert clamp(-1.0, 0.0, 10.0) == 0.0
    assert clamp(11.0, 0.0, 10.0) == 10.0


def test_clamp_skips_inverted_range():
    assert clamp(7.0, 10.0, 0.0) == 7.0


def test_point_arithmetic():
    p = Point(3.0, 4.0)
    assert p - Point(1.0, 1.0) == Point(2.0, 3.0)
    assert p + Point(1.0, 1.0) == Point(4.0, 5.0)
    assert p.translate(2.0, -4.0) == Point(5.0, 0.0)
    assert p.scale(2.0, 0.5) == Point(6.0, 2.0)


def test_rect_from_points_normalises_order():
    rect = Rect.from_points(Point(300, 50), Point(100, 200))
    assert rect == Rect(100, 50, 300, 200)
    assert rect.width == 200
    assert rect.height == 150


def test_rect_from_center_and_corners():
    rect = Rect.from_center(Point(10, 10), 20, 10)
    assert rect == Rect(0, 5, 20, 15)
    assert rect.top_left == Point(0, 5)
    assert rect.top_right == Point(20, 5)
    assert rect.bottom_right == Point(20, 15)
    assert rect.bottom_left == Point(0, 15)
    assert rect.center == Point(10, 10)


def test_multiply_and_divide_are_inverse():
    size = Size(640, 480)
    rect = Rect(0.25, 0.5, 0.75, 1.0)
    pixels = rect.multiply(size)
    assert pixels == Rect(160, 240, 480, 480)
    assert pixels.divide(size).almost_equals(rect)


def test_contains_is_half_open():
    rect = Rect(0, 0, 10, 10)
    assert rect.contains(Point(0, 0))
    assert rect.contains(Point(9.99, 5))
    assert not rect.contains(Point(10, 5))
    assert not rect.contains(Point(5, 10))


def test_is_normalised():
    assert Rect.full().is_normalised()
    assert not Rect(-0.1, 0, 1, 1).is_normalised()
    assert not Rect(0.5, 0, 0.5, 1).is_normalised()
    assert Rect(0, 0, 1.0 + 1e-9, 1).is_normalised()


def test_clamp_to_unit_absorbs_drift():
    rect = Rect(-1e-12, 0.2, 1.0000000001, 0.8).clamp_to_unit()
    assert rect == Rect(0.0, 0.2, 1.0, 0.8)


def test_size_helpers():
    assert Size(0, 10).is_empty
    assert not Size(1, 1).is_empty
    assert Size(200, 100).aspect_ratio == pytest.approx(2.0)
    assert Size(200, 100).transposed() == Size(100, 200)
