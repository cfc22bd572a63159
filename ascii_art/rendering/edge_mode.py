#!/usr/bin/env python3
# ascii_art/rendering/edge_mode.py
"""
Sobel edge renderer.

Gradients are taken over the whole grayscale grid with edge-replicated
borders. Cells whose gradient magnitude is below the threshold stay blank;
the rest get a line glyph matching the gradient direction folded into
[0, 180) degrees.
"""

from __future__ import annotations

import numpy as np

from ascii_art.luminance import grayscale
from ascii_art.options import RenderOptions
from ascii_art.pixels import PixelBuffer
from ascii_art.rendering.ramp_mode import grid_to_text
from ascii_art.sampler import sample

__all__ = ["SOBEL_X", "SOBEL_Y", "EDGE_CHARS", "EdgeRenderer", "sobel", "classify"]

SOBEL_X = (
    (-1, 0, 1),
    (-2, 0, 2),
    (-1, 0, 1),
)

SOBEL_Y = (
    (-1, -2, -1),
    (0, 0, 0),
    (1, 2, 1),
)

EDGE_CHARS = {
    "horizontal": "─",
    "vertical": "│",
    "diagonal_right": "/",
    "diagonal_left": "\\",
    "empty": " ",
}


def sobel(gray: np.ndarray):
    """(H, W) grayscale -> (gx, gy), neighbours clamped to the border."""
    h, w = gray.shape
    padded = np.pad(gray, 1, mode="edge")
    gx = np.zeros((h, w), dtype=np.float64)
    gy = np.zeros((h, w), dtype=np.float64)
    # Row-major kernel walk, one term at a time, so sums round like a scalar loop.
    for ky in range(3):
        for kx in range(3):
            window = padded[ky:ky + h, kx:kx + w]
            gx = gx + window * SOBEL_X[ky][kx]
            gy = gy + window * SOBEL_Y[ky][kx]
    return gx, gy


def classify(gx: np.ndarray, gy: np.ndarray, threshold: float) -> np.ndarray:
    """Per-cell edge glyph from gradient components."""
    magnitude = np.sqrt(gx * gx + gy * gy)
    deg = (np.arctan2(gy, gx) * 180 / np.pi + 180) % 180

    # Narrower bands are written last so they win.
    glyphs = np.full(gx.shape, EDGE_CHARS["diagonal_left"], dtype="<U1")
    glyphs[deg < 112.5] = EDGE_CHARS["vertical"]
    glyphs[deg < 67.5] = EDGE_CHARS["diagonal_right"]
    glyphs[(deg < 22.5) | (deg >= 157.5)] = EDGE_CHARS["horizontal"]
    glyphs[magnitude < threshold] = EDGE_CHARS["empty"]
    return glyphs


class EdgeRenderer:
    name = "edges"

    def render(self, pixels: PixelBuffer, options: RenderOptions) -> str:
        grid = sample(pixels, options)
        gx, gy = sobel(grayscale(grid.as_array()))
        return grid_to_text(classify(gx, gy, options.threshold))
