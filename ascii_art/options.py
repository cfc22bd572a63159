#!/usr/bin/env python3
# ascii_art/options.py
"""Per-call render options."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ascii_art.errors import InvalidDimensions
from ascii_art.ramps import RAMPS, resolve_ramp, validate_ramp

__all__ = ["RenderOptions", "RESAMPLE_METHODS", "ASPECT_RATIO"]

# Monospace cells are roughly twice as tall as they are wide.
ASPECT_RATIO = 0.5

RESAMPLE_METHODS = ("box", "nearest", "bilinear", "lanczos")


@dataclass(frozen=True)
class RenderOptions:
    """
    output_width  columns of the character grid
    ramp          glyph string, darkest first, at least two glyphs
    invert        mirror ramp index (classic) or dot test (braille)
    threshold     0..255, braille dot cut-off and edge magnitude floor
    aspect_ratio  cell height correction applied to the row count
    resample      sampler filter, one of RESAMPLE_METHODS
    """

    output_width: int = 100
    ramp: str = RAMPS["standard"]
    invert: bool = False
    threshold: int = 128
    aspect_ratio: float = ASPECT_RATIO
    resample: str = "box"

    def __post_init__(self):
        if int(self.output_width) <= 0:
            raise InvalidDimensions(f"output width must be positive, got {self.output_width}")
        validate_ramp(self.ramp)
        if not 0 <= self.threshold <= 255:
            raise ValueError(f"threshold must be within 0..255, got {self.threshold}")
        if not self.aspect_ratio > 0:
            raise InvalidDimensions(f"aspect ratio must be positive, got {self.aspect_ratio}")
        if self.resample not in RESAMPLE_METHODS:
            raise ValueError(f"resample must be one of {RESAMPLE_METHODS}, got {self.resample!r}")

    @classmethod
    def named(cls, ramp_name: str = "standard", custom_ramp: Optional[str] = None, **kwargs) -> "RenderOptions":
        """Build options with the ramp picked from the registry by name."""
        return cls(ramp=resolve_ramp(ramp_name, custom_ramp), **kwargs)

    def evolve(self, **changes) -> "RenderOptions":
        return replace(self, **changes)

    @property
    def ramp_len(self) -> int:
        return len(self.ramp)
