#!/usr/bin/env python3
# ascii_art/loader.py
"""
Image loading for the CLI and other callers.

Reads a local file or fetches an http(s) URL, decodes it with Pillow and
hands back an RGBA PixelBuffer. HTTP goes through a requests session with
urllib3 Retry, like any other network access in this package.
"""

from __future__ import annotations

import io
import logging
import os
from typing import Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from PIL import Image, UnidentifiedImageError

from ascii_art.errors import ImageLoadError
from ascii_art.pixels import PixelBuffer

log = logging.getLogger(__name__)

__all__ = ["ImageLoader", "is_url", "decode_image"]


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def decode_image(data: bytes, label: str = "<bytes>") -> PixelBuffer:
    """Decode any Pillow-readable image into an RGBA PixelBuffer."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            if img.width == 0 or img.height == 0:
                raise ImageLoadError(f"{label}: image has no pixels")
            return PixelBuffer.from_image(img.convert("RGBA"))
    except (UnidentifiedImageError, OSError) as e:
        raise ImageLoadError(f"{label}: cannot decode image ({e})") from e


class ImageLoader:
    """
    Load images from disk or the network.
    One session per loader; safe to reuse across calls.
    """

    def __init__(
        self,
        user_agent: str = "ascii-art/1.0",
        connect_timeout: float = 5.0,
        read_timeout: float = 15.0,
        retries: int = 3,
        max_bytes: int = 32 * 1024 * 1024,
        session: Optional[requests.Session] = None,
    ):
        self.timeout: Tuple[float, float] = (connect_timeout, read_timeout)
        self.max_bytes = max_bytes

        if session is None:
            session = requests.Session()
            retry = Retry(
                total=retries,
                connect=retries,
                read=retries,
                backoff_factor=0.3,
                status_forcelist=(429, 500, 502, 503, 504),
                allowed_methods=False,
            )
            adapter = HTTPAdapter(max_retries=retry)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        session.headers["User-Agent"] = user_agent
        self.session = session

    @classmethod
    def from_config(cls, cfg) -> "ImageLoader":
        n = cfg["network"]
        return cls(
            user_agent=n["user_agent"],
            connect_timeout=n["connect_timeout_s"],
            read_timeout=n["read_timeout_s"],
            retries=n["retries"],
            max_bytes=n["max_bytes"],
        )

    def load(self, source: str) -> PixelBuffer:
        if is_url(source):
            return self.load_url(source)
        return self.load_path(source)

    def load_path(self, path: str) -> PixelBuffer:
        path = os.path.expanduser(path)
        log.debug("loading image from %s", path)
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise ImageLoadError(f"{path}: {e.strerror or e}") from e
        return decode_image(data, path)

    def load_url(self, url: str) -> PixelBuffer:
        log.debug("fetching image from %s", url)
        try:
            with self.session.get(url, timeout=self.timeout, stream=True) as r:
                r.raise_for_status()
                declared = r.headers.get("Content-Length", "")
                if declared.isdigit() and int(declared) > self.max_bytes:
                    raise ImageLoadError(f"{url}: response exceeds {self.max_bytes} bytes")
                data = self._read_capped(r, url)
        except requests.RequestException as e:
            raise ImageLoadError(f"{url}: {e}") from e
        if not data:
            raise ImageLoadError(f"{url}: empty response")
        return decode_image(data, url)

    def _read_capped(self, r: requests.Response, url: str) -> bytes:
        # Content-Length can be absent or wrong; count what actually arrives.
        buf = bytearray()
        for chunk in r.iter_content(chunk_size=64 * 1024):
            buf += chunk
            if len(buf) > self.max_bytes:
                raise ImageLoadError(f"{url}: response exceeds {self.max_bytes} bytes")
        return bytes(buf)
