#!/usr/bin/env python3
# ascii_art/sampler.py
"""
Grid sizing and resampling.

The character grid is W columns by floor(imgH / imgW * W * aspect) rows.
Braille output ignores the aspect correction: it samples at 2W x
floor(imgH / imgW * 2W) pixels and steps a 2x4 dot window over it.
Resampling goes through Pillow and is deterministic for identical inputs.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

from PIL import Image

from ascii_art.errors import InvalidDimensions
from ascii_art.options import RenderOptions
from ascii_art.pixels import PixelBuffer

log = logging.getLogger(__name__)

__all__ = ["grid_size", "braille_grid_size", "sample", "sample_braille", "resize"]

_FILTERS = {
    "box": Image.Resampling.BOX,
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
    "lanczos": Image.Resampling.LANCZOS,
}


def grid_size(img_w: int, img_h: int, width: int, aspect_ratio: float) -> Tuple[int, int]:
    """(W, H) of the character grid. H is clamped to at least one row."""
    if width <= 0:
        raise InvalidDimensions(f"output width must be positive, got {width}")
    if img_w <= 0 or img_h <= 0:
        raise InvalidDimensions(f"image must be non-empty, got {img_w}x{img_h}")
    h = math.floor(img_h / img_w * width * aspect_ratio)
    return width, max(1, h)


def braille_grid_size(img_w: int, img_h: int, width: int) -> Tuple[int, int]:
    """(pixel_w, pixel_h) of the dot buffer. Dots are square, so the source
    proportions are kept as they are."""
    return grid_size(img_w, img_h, width * 2, 1.0)


def resize(src: PixelBuffer, w: int, h: int, method: str = "box") -> PixelBuffer:
    if src.width == w and src.height == h:
        return src
    img = src.to_image().resize((w, h), _FILTERS[method])
    return PixelBuffer.from_image(img)


def sample(src: PixelBuffer, options: RenderOptions) -> PixelBuffer:
    w, h = grid_size(src.width, src.height, options.output_width, options.aspect_ratio)
    log.debug("sample %dx%d -> grid %dx%d (%s)", src.width, src.height, w, h, options.resample)
    return resize(src, w, h, options.resample)


def sample_braille(src: PixelBuffer, options: RenderOptions) -> PixelBuffer:
    w, h = braille_grid_size(src.width, src.height, options.output_width)
    log.debug("sample %dx%d -> dots %dx%d (%s)", src.width, src.height, w, h, options.resample)
    return resize(src, w, h, options.resample)
