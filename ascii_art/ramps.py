#!/usr/bin/env python3
# ascii_art/ramps.py
"""
Named character ramps and the brightness -> glyph index mapping.

Index 0 is the darkest mapped glyph. Glyph counts matter: ramp renderers
split [0, 255] into len - 1 equal steps.
"""

from __future__ import annotations

import math
from typing import Dict, Optional

import numpy as np

from ascii_art.errors import EmptyRamp

__all__ = [
    "RAMPS",
    "DEFAULT_RAMP",
    "CUSTOM",
    "default_ramps",
    "get_ramp",
    "resolve_ramp",
    "validate_ramp",
    "glyph_index",
    "glyph_indices",
]

CUSTOM = "custom"
DEFAULT_RAMP = "standard"


def default_ramps() -> Dict[str, str]:
    return {
        "standard": '$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,"^`\'. ',
        "detailed": "@#S%?*+;:,. ",
        "simple": "@%#*+=-:. ",
        "blocks": "█▓▒░ ",
        "dots": "●◉◎○. ",
        "binary": "█ ",
        "tech": "╬╦╣╠╩═║╔╗╚╝┼├┤┬┴─│┌┐└┘",
        CUSTOM: "",
    }


RAMPS: Dict[str, str] = default_ramps()


def validate_ramp(ramp: str) -> str:
    if ramp is None or len(ramp) < 2:
        raise EmptyRamp(f"ramp needs at least 2 glyphs, got {0 if ramp is None else len(ramp)}")
    return ramp


def get_ramp(name: str) -> str:
    """Look up a named ramp. Unknown names raise KeyError."""
    try:
        return RAMPS[name]
    except KeyError:
        raise KeyError(f"unknown ramp {name!r}; choose from {', '.join(sorted(RAMPS))}") from None


def resolve_ramp(name: Optional[str], custom: Optional[str] = None) -> str:
    """Ramp name (or 'custom' + glyphs) -> validated glyph string."""
    if not name:
        name = DEFAULT_RAMP
    ramp = (custom or "") if name == CUSTOM else get_ramp(name)
    return validate_ramp(ramp)


def glyph_index(gray: float, ramp_len: int, invert: bool = False) -> int:
    """floor(gray / 255 * (L - 1)), clamped into [0, L - 1], optionally mirrored."""
    top = ramp_len - 1
    idx = math.floor(gray / 255 * top)
    if idx < 0:
        idx = 0
    elif idx > top:
        idx = top
    return top - idx if invert else idx


def glyph_indices(gray: np.ndarray, ramp_len: int, invert: bool = False) -> np.ndarray:
    """Array form of glyph_index."""
    top = ramp_len - 1
    idx = np.clip(np.floor(gray / 255 * top), 0, top).astype(np.int64)
    return top - idx if invert else idx
