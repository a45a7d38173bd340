"""Default configuration values for iCrop."""

from __future__ import annotations

import math
from typing import Final

# Interaction defaults, expressed in displayed (logical) pixels.
DEFAULT_PADDING_SIZE: Final[float] = 0.0
DEFAULT_TOUCH_SIZE: Final[float] = 50.0
DEFAULT_GRID_CORNER_SIZE: Final[float] = 25.0
DEFAULT_GRID_THIN_WIDTH: Final[float] = 2.0
DEFAULT_GRID_THICK_WIDTH: Final[float] = 5.0

# Crop size bounds.  Setting both to the same value yields a fixed-size crop
# that can only be moved.
DEFAULT_MINIMUM_IMAGE_SIZE: Final[float] = 100.0
DEFAULT_MAXIMUM_IMAGE_SIZE: Final[float] = math.inf

# Tolerance used when comparing normalised coordinates.
FLOAT_TOLERANCE: Final[float] = 1e-6
