#!/usr/bin/env python3
# ascii_art/pixels.py
"""
Immutable RGBA pixel buffers.

PixelBuffer is what the image-loading side hands to the engine and what the
sampler hands to each renderer: width, height and a row-major RGBA8 byte
string with the origin at the top-left.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from PIL import Image

from ascii_art.errors import InvalidDimensions

__all__ = ["PixelBuffer"]


@dataclass(frozen=True)
class PixelBuffer:
    width: int
    height: int
    pixels: bytes

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(f"image must be non-empty, got {self.width}x{self.height}")
        expected = self.width * self.height * 4
        if len(self.pixels) != expected:
            raise ValueError(
                f"RGBA buffer for {self.width}x{self.height} needs {expected} bytes, got {len(self.pixels)}"
            )

    # --- Constructors

    @classmethod
    def from_rgb(cls, width: int, height: int, rgb) -> "PixelBuffer":
        """Build from a flat sequence of (r, g, b) triples, alpha forced opaque."""
        out = bytearray()
        for r, g, b in rgb:
            out += bytes((r, g, b, 255))
        return cls(width, height, bytes(out))

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "PixelBuffer":
        """Build from an (H, W, 3) or (H, W, 4) uint8 array."""
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise ValueError(f"expected (H, W, 3|4) array, got shape {arr.shape}")
        arr = np.asarray(arr, dtype=np.uint8)
        if arr.shape[2] == 3:
            alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
            arr = np.concatenate([arr, alpha], axis=2)
        h, w = arr.shape[:2]
        return cls(w, h, np.ascontiguousarray(arr).tobytes())

    @classmethod
    def from_image(cls, img: Image.Image) -> "PixelBuffer":
        if img.mode != "RGBA":
            img = img.convert("RGBA")
        return cls(img.width, img.height, img.tobytes())

    # --- Views

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def as_array(self) -> np.ndarray:
        """Read-only (H, W, 4) uint8 view over the buffer."""
        return np.frombuffer(self.pixels, dtype=np.uint8).reshape(self.height, self.width, 4)

    def to_image(self) -> Image.Image:
        return Image.frombytes("RGBA", (self.width, self.height), self.pixels)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        i = (y * self.width + x) * 4
        p = self.pixels
        return p[i], p[i + 1], p[i + 2], p[i + 3]
