#!/usr/bin/env python3
# ascii_art/rendering/ramp_mode.py
"""
Ramp renderers: classic (plain glyphs) and color (glyph + source RGB per cell).
Both map BT.601 luminance to a ramp index with floor(gray / 255 * (L - 1)).
"""

from __future__ import annotations

from typing import List, NamedTuple

import numpy as np

from ascii_art.luminance import grayscale
from ascii_art.options import RenderOptions
from ascii_art.pixels import PixelBuffer
from ascii_art.ramps import glyph_indices
from ascii_art.sampler import sample

__all__ = ["ColorCell", "ColorRow", "ClassicRenderer", "ColorRenderer", "grid_to_text"]


class ColorCell(NamedTuple):
    glyph: str
    r: int
    g: int
    b: int


ColorRow = List[ColorCell]


def grid_to_text(chars: np.ndarray) -> str:
    """(H, W) array of single glyphs -> rows joined, each terminated by a newline."""
    return "".join("".join(row.tolist()) + "\n" for row in chars)


class ClassicRenderer:
    name = "classic"

    @staticmethod
    def indices(grid: PixelBuffer, options: RenderOptions) -> np.ndarray:
        return glyph_indices(grayscale(grid.as_array()), options.ramp_len, options.invert)

    def render(self, pixels: PixelBuffer, options: RenderOptions) -> str:
        grid = sample(pixels, options)
        glyphs = np.array(list(options.ramp))
        return grid_to_text(glyphs[self.indices(grid, options)])


class ColorRenderer:
    """
    Same index math as classic but never inverted; each cell keeps the
    sampled pixel's RGB for a downstream formatter to paint with.
    """

    name = "color"

    @staticmethod
    def indices(grid: PixelBuffer, options: RenderOptions) -> np.ndarray:
        return glyph_indices(grayscale(grid.as_array()), options.ramp_len, False)

    def render(self, pixels: PixelBuffer, options: RenderOptions) -> List[ColorRow]:
        grid = sample(pixels, options)
        arr = grid.as_array()
        idx = self.indices(grid, options)
        ramp = options.ramp
        rows: List[ColorRow] = []
        for y in range(grid.height):
            row: ColorRow = []
            for x in range(grid.width):
                r, g, b = arr[y, x, :3].tolist()
                row.append(ColorCell(ramp[idx[y, x]], r, g, b))
            rows.append(row)
        return rows
