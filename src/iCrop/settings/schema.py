"""Schema helpers for crop interaction options."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import (
    DEFAULT_GRID_CORNER_SIZE,
    DEFAULT_GRID_THICK_WIDTH,
    DEFAULT_GRID_THIN_WIDTH,
    DEFAULT_MINIMUM_IMAGE_SIZE,
    DEFAULT_PADDING_SIZE,
    DEFAULT_TOUCH_SIZE,
)

_POSITIVE_NUMBER: dict[str, Any] = {"type": "number", "exclusiveMinimum": 0}

OPTIONS_SCHEMA: dict[str, Any] = {
    "$id": "iCrop/options.schema.json",
    "type": "object",
    "properties": {
        "padding_size": {"type": "number", "minimum": 0},
        "touch_size": _POSITIVE_NUMBER,
        "grid_corner_size": _POSITIVE_NUMBER,
        "grid_thin_width": _POSITIVE_NUMBER,
        "grid_thick_width": _POSITIVE_NUMBER,
        "show_corners": {"type": "boolean"},
        "always_show_third_lines": {"type": "boolean"},
        "minimum_image_size": _POSITIVE_NUMBER,
        # ``null`` stands for an unbounded maximum
        "maximum_image_size": {"type": ["number", "null"], "exclusiveMinimum": 0},
        "always_move": {"type": "boolean"},
    },
    "additionalProperties": False,
}

DEFAULT_OPTIONS: dict[str, Any] = {
    "padding_size": DEFAULT_PADDING_SIZE,
    "touch_size": DEFAULT_TOUCH_SIZE,
    "grid_corner_size": DEFAULT_GRID_CORNER_SIZE,
    "grid_thin_width": DEFAULT_GRID_THIN_WIDTH,
    "grid_thick_width": DEFAULT_GRID_THICK_WIDTH,
    "show_corners": True,
    "always_show_third_lines": False,
    "minimum_image_size": DEFAULT_MINIMUM_IMAGE_SIZE,
    "maximum_image_size": None,
    "always_move": False,
}

_VALIDATOR = Draft202012Validator(OPTIONS_SCHEMA)


def merge_with_defaults(data: dict[str, Any]) -> dict[str, Any]:
    """Return *data* layered over a copy of the default options."""

    merged = deepcopy(DEFAULT_OPTIONS)
    merged.update(data)
    return merged


def validation_errors(data: dict[str, Any]) -> list[str]:
    """Return human-readable schema violations for *data*, sorted by path."""

    errors = sorted(_VALIDATOR.iter_errors(data), key=lambda err: list(err.path))
    messages = []
    for error in errors:
        location = ".".join(str(part) for part in error.path) or "<root>"
        messages.append(f"{location}: {error.message}")
    return messages
