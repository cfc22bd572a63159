#!/usr/bin/env python3
# ascii_art/errors.py
"""
Exception types raised by the rendering engine and its collaborators.
All of them are ValueErrors so callers can catch either.
"""

from __future__ import annotations

__all__ = [
    "RenderError",
    "InvalidDimensions",
    "EmptyRamp",
    "UnknownMode",
    "ImageLoadError",
]


class RenderError(ValueError):
    """Base class for every rejected render request."""


class InvalidDimensions(RenderError):
    """Output width <= 0, or a source image with zero width or height."""


class EmptyRamp(RenderError):
    """Character ramp shorter than two glyphs."""


class UnknownMode(RenderError):
    """Render mode name not present in the dispatcher."""


class ImageLoadError(RenderError):
    """Source image could not be read, fetched or decoded."""
