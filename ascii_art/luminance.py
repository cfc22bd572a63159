#!/usr/bin/env python3
# ascii_art/luminance.py
"""
RGB to grayscale conversion with BT.601 luma weights.
Alpha is ignored; pixels are treated as opaque.
"""

from __future__ import annotations

import numpy as np

__all__ = ["WEIGHTS", "rgb_to_gray", "grayscale"]

WEIGHTS = (0.299, 0.587, 0.114)


def rgb_to_gray(r: float, g: float, b: float) -> float:
    return WEIGHTS[0] * r + WEIGHTS[1] * g + WEIGHTS[2] * b


def grayscale(arr: np.ndarray) -> np.ndarray:
    """
    (H, W, 3|4) uint8 -> (H, W) float64 luminance in [0, 255].
    Same operation order as rgb_to_gray so scalar and array paths agree bit for bit.
    """
    rgb = arr[..., :3].astype(np.float64)
    return WEIGHTS[0] * rgb[..., 0] + WEIGHTS[1] * rgb[..., 1] + WEIGHTS[2] * rgb[..., 2]
