from pathlib import Path

from PIL import Image

from iCrop.crop.controller import CropController
from iCrop.crop.geometry import Rect
from iCrop.crop.rotation import CropRotation
from iCrop.imaging import crop_file, crop_pil_image, pixel_box

RED = (255, 0, 0)
WHITE = (255, 255, 255)


def _marked_image() -> Image.Image:
    image = Image.new("RGB", (100, 50), WHITE)
    image.putpixel((0, 0), RED)
    return image


def test_pixel_box_rounds_edges():
    assert pixel_box(Rect(0.333, 0.0, 0.666, 1.0), 100, 50) == (33, 0, 67, 50)


def test_pixel_box_never_empty():
    left, top, right, bottom = pixel_box(Rect(0.999, 0.999, 1.0, 1.0), 100, 50)
    assert right - left >= 1
    assert bottom - top >= 1
    assert right <= 100 and bottom <= 50


def test_crop_without_rotation():
    result = crop_pil_image(_marked_image(), Rect(0.0, 0.0, 0.5, 1.0), CropRotation.UP)
    assert result.size == (50, 50)
    assert result.getpixel((0, 0)) == RED


def test_crop_with_clockwise_rotation():
    result = crop_pil_image(_marked_image(), Rect(0.0, 0.0, 1.0, 0.5), CropRotation.RIGHT)
    # 100x25 turned clockwise; the top-left pixel ends up top-right
    assert result.size == (25, 100)
    assert result.getpixel((24, 0)) == RED


def test_crop_upside_down():
    result = crop_pil_image(_marked_image(), Rect.full(), CropRotation.DOWN)
    assert result.size == (100, 50)
    assert result.getpixel((99, 49)) == RED


def test_controller_cropped_image_matches_display():
    ctrl = CropController(rotation=CropRotation.LEFT, default_crop=Rect(0.0, 0.0, 0.5, 1.0))
    result = ctrl.cropped_image(_marked_image())
    # 50x50 turned counter-clockwise; the top-left pixel ends up bottom-left
    assert result.size == (50, 50)
    assert result.getpixel((0, 49)) == RED


def test_crop_file(tmp_path: Path):
    source = tmp_path / "source.png"
    target = tmp_path / "target.png"
    _marked_image().save(source)

    size = crop_file(source, target, Rect(0.5, 0.0, 1.0, 1.0), CropRotation.UP)
    assert size == (50, 50)
    with Image.open(target) as saved:
        assert saved.size == (50, 50)
        assert saved.getpixel((0, 0)) == WHITE
