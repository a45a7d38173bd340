"""Tests for the rotation model and texture/display mapping."""

import math

import pytest

from iCrop.crop.geometry import Rect, Size
from iCrop.crop.rotation import (
    CropRotation,
    display_rect_to_texture,
    displayed_image_size,
    fit_display_size,
    texture_rect_to_display,
)


def test_rotation_cycle():
    assert CropRotation.UP.rotate_right is CropRotation.RIGHT
    assert CropRotation.LEFT.rotate_right is CropRotation.UP
    assert CropRotation.UP.rotate_left is CropRotation.LEFT
    assert CropRotation.DOWN.rotate_left is CropRotation.RIGHT


def test_rotation_angles_and_sideways():
    assert [r.degrees for r in CropRotation] == [0, 90, 180, 270]
    assert CropRotation.RIGHT.radians == pytest.approx(math.pi / 2)
    assert CropRotation.RIGHT.is_sideways
    assert CropRotation.LEFT.is_sideways
    assert not CropRotation.UP.is_sideways
    assert not CropRotation.DOWN.is_sideways


def test_from_name():
    assert CropRotation.from_name(" Right ") is CropRotation.RIGHT
    with pytest.raises(ValueError):
        CropRotation.from_name("diagonal")


def test_texture_to_display_quarter_turn():
    rect = Rect(0.1, 0.2, 0.5, 0.6)
    assert texture_rect_to_display(rect, CropRotation.UP) == rect
    assert texture_rect_to_display(rect, CropRotation.RIGHT).almost_equals(
        Rect(0.4, 0.1, 0.8, 0.5)
    )
    assert texture_rect_to_display(rect, CropRotation.DOWN).almost_equals(
        Rect(0.5, 0.4, 0.9, 0.8)
    )
    assert texture_rect_to_display(rect, CropRotation.LEFT).almost_equals(
        Rect(0.2, 0.5, 0.6, 0.9)
    )


@pytest.mark.parametrize("rotation", list(CropRotation))
def test_display_to_texture_inverts_mapping(rotation):
    rect = Rect(0.05, 0.3, 0.45, 0.95)
    display = texture_rect_to_display(rect, rotation)
    assert display_rect_to_texture(display, rotation).almost_equals(rect)


def test_sideways_rotation_swaps_extent():
    rect = Rect(0.0, 0.0, 0.25, 1.0)
    display = texture_rect_to_display(rect, CropRotation.RIGHT)
    assert display.width == pytest.approx(1.0)
    assert display.height == pytest.approx(0.25)


def test_displayed_image_size():
    assert displayed_image_size(Size(2000, 1000), CropRotation.UP) == Size(2000, 1000)
    assert displayed_image_size(Size(2000, 1000), CropRotation.LEFT) == Size(1000, 2000)


def test_fit_display_size_landscape_and_rotated():
    image = Size(2000, 1000)
    assert fit_display_size(image, CropRotation.UP, Size(500, 500)) == Size(500, 250)
    assert fit_display_size(image, CropRotation.RIGHT, Size(500, 500)) == Size(250, 500)


def test_fit_display_size_empty_inputs():
    assert fit_display_size(Size(0, 10), CropRotation.UP, Size(500, 500)) == Size(0.0, 0.0)
    assert fit_display_size(Size(10, 10), CropRotation.UP, Size(0, 500)) == Size(0.0, 0.0)
