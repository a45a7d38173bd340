"""Custom exception hierarchy for iCrop."""

from __future__ import annotations


class CropError(Exception):
    """Base class for all custom errors raised by iCrop."""


class InvalidConfigurationError(CropError):
    """Raised when interaction options or controller inputs are unusable."""


class InvalidRectError(CropError):
    """Raised when an externally supplied crop rectangle is inverted or out of bounds."""


class ControllerDisposedError(CropError):
    """Raised when a disposed controller is mutated or subscribed to."""
