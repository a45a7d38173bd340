import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from iCrop.crop.controller import CropController  # noqa: E402
from iCrop.crop.geometry import Size  # noqa: E402
from iCrop.settings import CropOptions  # noqa: E402


@pytest.fixture
def controller():
    """A controller for a 1000x1000 image shown at 500x500."""
    ctrl = CropController(options=CropOptions(touch_size=50, minimum_image_size=100))
    ctrl.set_image_size(Size(1000, 1000))
    ctrl.layout(Size(500, 500))
    return ctrl


@pytest.fixture
def notifications(controller):
    """Collect every crop rect the controller publishes."""
    received = []
    controller.add_listener(received.append)
    return received
