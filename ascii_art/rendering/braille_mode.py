#!/usr/bin/env python3
# ascii_art/rendering/braille_mode.py
"""
Braille (2x4) renderer.
Encodes eight dots per output character using Unicode Braille patterns,
sampled at two dots per column with the source proportions kept.
"""

from __future__ import annotations

import numpy as np

from ascii_art.luminance import grayscale
from ascii_art.options import RenderOptions
from ascii_art.pixels import PixelBuffer
from ascii_art.sampler import sample_braille

__all__ = ["BRAILLE_OFFSET", "DOT_BITS", "BrailleRenderer"]

# Braille bit positions:
#  dots: 1 4
#        2 5
#        3 6
#        7 8
# Unicode = 0x2800 | bits
BRAILLE_OFFSET = 0x2800
DOT_BITS = (
    (0x01, 0x08),  # row 0: col 0 -> dot1, col 1 -> dot4
    (0x02, 0x10),  # row 1: col 0 -> dot2, col 1 -> dot5
    (0x04, 0x20),  # row 2: col 0 -> dot3, col 1 -> dot6
    (0x40, 0x80),  # row 3: col 0 -> dot7, col 1 -> dot8
)


class BrailleRenderer:
    name = "braille"

    @staticmethod
    def _raised(gray: np.ndarray, threshold: int, invert: bool) -> np.ndarray:
        return gray < threshold if invert else gray > threshold

    def render(self, pixels: PixelBuffer, options: RenderOptions) -> str:
        dots = sample_braille(pixels, options)
        raised = self._raised(grayscale(dots.as_array()), options.threshold, options.invert)

        # Pad to whole 2x4 cells; padding dots are never raised.
        h, w = raised.shape
        cell_rows = -(-h // 4)
        cell_cols = -(-w // 2)
        padded = np.zeros((cell_rows * 4, cell_cols * 2), dtype=bool)
        padded[:h, :w] = raised

        bits = np.zeros((cell_rows, cell_cols), dtype=np.int64)
        for dy in range(4):
            for dx in range(2):
                bits |= padded[dy::4, dx::2].astype(np.int64) * DOT_BITS[dy][dx]

        codes = BRAILLE_OFFSET | bits
        return "".join("".join(map(chr, row.tolist())) + "\n" for row in codes)
