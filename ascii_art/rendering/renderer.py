#!/usr/bin/env python3
# ascii_art/rendering/renderer.py
"""
Rendering dispatcher and public entry points.

- Common API: Renderer.render(pixels, options, mode)
- Backends register via Renderer.register(mode, backend); each exposes
  `name` and `render(pixels, options)`.
- Text modes return a newline-terminated glyph grid; "color" returns rows
  of ColorCell(glyph, r, g, b).

Every call samples the source afresh and owns its scratch buffers, so a
Renderer can be shared between threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Union

from ascii_art.errors import UnknownMode
from ascii_art.options import RenderOptions
from ascii_art.pixels import PixelBuffer
from ascii_art.rendering.braille_mode import BrailleRenderer
from ascii_art.rendering.dither_mode import AtkinsonRenderer, BayerRenderer, FloydRenderer
from ascii_art.rendering.edge_mode import EdgeRenderer
from ascii_art.rendering.ramp_mode import ClassicRenderer, ColorRenderer, ColorRow

log = logging.getLogger(__name__)

RenderResult = Union[str, List[ColorRow]]

MODES = ("classic", "color", "braille", "edges", "floyd", "bayer", "atkinson")

__all__ = [
    "MODES",
    "RenderBackend",
    "RenderResult",
    "Renderer",
    "default_backends",
    "render",
    "render_classic",
    "render_color",
    "render_braille",
    "render_edges",
    "render_floyd",
    "render_bayer",
    "render_atkinson",
]


class RenderBackend:
    """Interface for all renderers."""
    name: str = "base"

    def render(self, pixels: PixelBuffer, options: RenderOptions) -> RenderResult:
        raise NotImplementedError


def default_backends() -> Dict[str, RenderBackend]:
    backends = (
        ClassicRenderer(),
        ColorRenderer(),
        BrailleRenderer(),
        EdgeRenderer(),
        FloydRenderer(),
        BayerRenderer(),
        AtkinsonRenderer(),
    )
    return {b.name: b for b in backends}


@dataclass
class Renderer:
    """
    Mode name -> backend table.
    Use register() to add or replace modes.
    """
    backends: Dict[str, RenderBackend] = field(default_factory=default_backends)

    def register(self, mode: str, backend: RenderBackend) -> None:
        self.backends[mode] = backend

    @property
    def modes(self) -> List[str]:
        return list(self.backends)

    def backend(self, mode: str) -> RenderBackend:
        try:
            return self.backends[mode]
        except KeyError:
            raise UnknownMode(f"unknown render mode {mode!r}; choose from {', '.join(self.backends)}") from None

    def render(self, pixels: PixelBuffer, options: RenderOptions, mode: str = "classic") -> RenderResult:
        backend = self.backend(mode)
        log.debug("render mode=%s width=%d ramp_len=%d", mode, options.output_width, options.ramp_len)
        return backend.render(pixels, options)


_default = Renderer()


def render(pixels: PixelBuffer, options: RenderOptions, mode: str = "classic") -> RenderResult:
    return _default.render(pixels, options, mode)


def render_classic(pixels: PixelBuffer, options: RenderOptions) -> str:
    return _default.render(pixels, options, "classic")


def render_color(pixels: PixelBuffer, options: RenderOptions) -> List[ColorRow]:
    return _default.render(pixels, options, "color")


def render_braille(pixels: PixelBuffer, options: RenderOptions) -> str:
    return _default.render(pixels, options, "braille")


def render_edges(pixels: PixelBuffer, options: RenderOptions) -> str:
    return _default.render(pixels, options, "edges")


def render_floyd(pixels: PixelBuffer, options: RenderOptions) -> str:
    return _default.render(pixels, options, "floyd")


def render_bayer(pixels: PixelBuffer, options: RenderOptions) -> str:
    return _default.render(pixels, options, "bayer")


def render_atkinson(pixels: PixelBuffer, options: RenderOptions) -> str:
    return _default.render(pixels, options, "atkinson")
