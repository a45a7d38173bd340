from dataclasses import dataclass
from typing import Optional

from ..crop.geometry import Rect
from ..crop.rotation import CropRotation
from .bus import Event


@dataclass(kw_only=True)
class CropChangedEvent(Event):
    """Published after every accepted change to the crop state."""
    crop: Rect
    rotation: CropRotation = CropRotation.UP
    aspect_ratio: Optional[float] = None
