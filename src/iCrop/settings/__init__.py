"""Crop interaction options and their schema."""

from .options import CropOptions
from .schema import DEFAULT_OPTIONS, OPTIONS_SCHEMA

__all__ = ["CropOptions", "DEFAULT_OPTIONS", "OPTIONS_SCHEMA"]
