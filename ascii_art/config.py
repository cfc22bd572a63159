#!/usr/bin/env python3
# ascii_art/config.py
"""
Config loader/saver and defaults for the ASCII art renderer.

Goals:
- Single JSON file per user.
- Safe atomic writes.
- Deep-merge of user config over defaults.
- Basic validation with sane fallbacks.

Usage:
    from ascii_art.config import Config, DEFAULT_CONFIG
    cfg = Config.load()                 # ~/.config/ascii_art/ascii_art.json or OS-specific
    opts = cfg.render_options(output_width=120)
    cfg["render"]["mode"] = "braille"
    cfg.save()
"""

from __future__ import annotations

import copy
import json
import os
import platform
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ascii_art.options import RESAMPLE_METHODS, RenderOptions
from ascii_art.ramps import CUSTOM, RAMPS
from ascii_art.rendering.renderer import MODES

# ----------------------------
# Defaults
# ----------------------------


DEFAULT_CONFIG: Dict[str, Any] = {
    "render": {
        "mode": "classic",               # classic | color | braille | edges | floyd | bayer | atkinson
        "width": 100,                    # output columns
        "ramp": "standard",              # see ascii_art.ramps
        "custom_ramp": "",               # used when ramp == "custom"
        "invert": False,
        "threshold": 128,                # braille cut-off, edge magnitude floor
        "aspect_ratio": 0.5,             # monospace cell correction
        "resample": "box",               # box | nearest | bilinear | lanczos
    },
    "output": {
        "color": True,                   # ANSI color for color mode on a terminal
        "html_title": "ASCII Art",
    },
    "network": {
        "user_agent": "ascii-art/1.0 (+https://example.invalid)",
        "connect_timeout_s": 5.0,
        "read_timeout_s": 15.0,
        "retries": 3,
        "max_bytes": 32 * 1024 * 1024,
    },
    "logging": {
        "level": "WARNING",
        "http_debug": False,
        "file": None,                    # path or None
        "rotate_bytes": 5 * 1024 * 1024,
        "rotate_keep": 3,
    },
}

# ----------------------------
# Helpers
# ----------------------------

def _os_config_home() -> str:
    """Return per-OS config base directory."""
    if platform.system() == "Windows":
        base = os.environ.get("APPDATA") or os.path.expanduser("~\\AppData\\Roaming")
        return os.path.join(base, "AsciiArt")
    if platform.system() == "Darwin":
        return os.path.join(os.path.expanduser("~/Library/Application Support"), "AsciiArt")
    return os.path.join(os.path.expanduser("~/.config"), "ascii_art")

def _default_config_path() -> str:
    """Resolve default config path, honoring ASCII_ART_CONFIG env override."""
    env = os.environ.get("ASCII_ART_CONFIG")
    if env:
        return os.path.expanduser(env)
    return os.path.join(_os_config_home(), "ascii_art.json")

def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Return deep-merged copy of dicts: values in b override a."""
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def _atomic_write_json(path: str, data: Dict[str, Any]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".tmp_cfg_", dir=os.path.dirname(path) or ".")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
            f.write("\n")
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise

def _coerce_num(v: Any, default: float, minmax: Optional[Tuple[float, float]] = None) -> float:
    try:
        x = float(v)
    except (TypeError, ValueError):
        return float(default)
    if x != x:
        return float(default)
    if minmax:
        lo, hi = minmax
        if x < lo: x = lo
        if x > hi: x = hi
    return x

def _coerce_int(v: Any, default: int, minmax: Optional[Tuple[int, int]] = None) -> int:
    try:
        x = int(v)
    except (TypeError, ValueError):
        return int(default)
    if minmax:
        lo, hi = minmax
        if x < lo: x = lo
        if x > hi: x = hi
    return x

def _coerce_bool(v: Any, default: bool) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "on"): return True
        if s in ("0", "false", "no", "off"): return False
    return default

# ----------------------------
# Validation
# ----------------------------

def _validate(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Return validated copy with fallbacks applied."""
    c = _deep_merge(copy.deepcopy(DEFAULT_CONFIG), cfg or {})
    d = DEFAULT_CONFIG

    # render
    r = c["render"]
    if r.get("mode") not in MODES:
        r["mode"] = d["render"]["mode"]
    r["width"] = _coerce_int(r.get("width"), d["render"]["width"], (1, 1000))
    r["custom_ramp"] = str(r.get("custom_ramp") or "")
    if r.get("ramp") not in RAMPS:
        r["ramp"] = d["render"]["ramp"]
    if r["ramp"] == CUSTOM and len(r["custom_ramp"]) < 2:
        r["ramp"] = d["render"]["ramp"]
    r["invert"] = _coerce_bool(r.get("invert"), d["render"]["invert"])
    r["threshold"] = _coerce_int(r.get("threshold"), d["render"]["threshold"], (0, 255))
    r["aspect_ratio"] = _coerce_num(r.get("aspect_ratio"), d["render"]["aspect_ratio"], (0.05, 10.0))
    if r.get("resample") not in RESAMPLE_METHODS:
        r["resample"] = d["render"]["resample"]

    # output
    o = c["output"]
    o["color"] = _coerce_bool(o.get("color"), d["output"]["color"])
    o["html_title"] = str(o.get("html_title") or d["output"]["html_title"])

    # network
    n = c["network"]
    n["user_agent"] = str(n.get("user_agent") or d["network"]["user_agent"])
    n["connect_timeout_s"] = _coerce_num(n.get("connect_timeout_s"), 5.0, (0.2, 60.0))
    n["read_timeout_s"]    = _coerce_num(n.get("read_timeout_s"), 15.0, (0.5, 120.0))
    n["retries"]           = _coerce_int(n.get("retries"), 3, (0, 10))
    n["max_bytes"]         = _coerce_int(n.get("max_bytes"), d["network"]["max_bytes"], (1024, 512 * 1024 * 1024))

    # logging
    lg = c["logging"]
    level = str(lg.get("level") or "").upper()
    lg["level"] = level if level in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET") else d["logging"]["level"]
    lg["http_debug"] = _coerce_bool(lg.get("http_debug"), d["logging"]["http_debug"])
    lf = lg.get("file")
    lg["file"] = str(lf) if lf else None
    lg["rotate_bytes"] = _coerce_int(lg.get("rotate_bytes"), d["logging"]["rotate_bytes"], (256 * 1024, 50 * 1024 * 1024))
    lg["rotate_keep"]  = _coerce_int(lg.get("rotate_keep"), d["logging"]["rotate_keep"], (0, 50))

    return c

# ----------------------------
# Public API
# ----------------------------

@dataclass
class Config:
    """Thin wrapper around a nested dict with load/save/merge."""
    data: Dict[str, Any] = field(default_factory=lambda: _validate(DEFAULT_CONFIG))
    path: str = field(default_factory=_default_config_path)

    # --- Mapping-style access
    def __getitem__(self, k: str) -> Any:
        return self.data[k]

    def __setitem__(self, k: str, v: Any) -> None:
        self.data[k] = v

    def get(self, k: str, default: Any = None) -> Any:
        return self.data.get(k, default)

    # --- Ops
    @classmethod
    def load(cls, path: Optional[str] = None, create_if_missing: bool = True) -> "Config":
        cfg_path = os.path.expanduser(path) if path else _default_config_path()
        if not os.path.exists(cfg_path):
            cfg = _validate(DEFAULT_CONFIG)
            if create_if_missing:
                _atomic_write_json(cfg_path, cfg)
            return cls(cfg, cfg_path)

        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                user_cfg = json.load(f)
            if not isinstance(user_cfg, dict):
                raise ValueError("config root must be an object")
        except (OSError, ValueError):
            # Corrupt file. Backup and regenerate.
            shutil.copyfile(cfg_path, cfg_path + ".corrupt.bak")
            user_cfg = {}

        return cls(_validate(user_cfg), cfg_path)

    def save(self) -> None:
        """Persist to JSON atomically."""
        full = _validate(self.data)
        _atomic_write_json(self.path, full)
        self.data = full  # sync in-memory with normalized values

    def update(self, partial: Dict[str, Any]) -> None:
        """Deep-merge a partial config then validate."""
        merged = _deep_merge(self.data, partial)
        self.data = _validate(merged)

    def diff(self) -> Dict[str, Any]:
        """Keys whose values differ from the defaults."""
        return _diff(_validate(DEFAULT_CONFIG), self.data)

    # Convenience getters
    @property
    def mode(self) -> str:
        return self.data["render"]["mode"]

    def render_options(self, **overrides: Any) -> RenderOptions:
        """Validated RenderOptions from the render section, with keyword overrides."""
        r = self.data["render"]
        kwargs: Dict[str, Any] = {
            "output_width": r["width"],
            "invert": r["invert"],
            "threshold": r["threshold"],
            "aspect_ratio": r["aspect_ratio"],
            "resample": r["resample"],
        }
        ramp_name = overrides.pop("ramp_name", r["ramp"])
        custom = overrides.pop("custom_ramp", r["custom_ramp"])
        kwargs.update(overrides)
        return RenderOptions.named(ramp_name, custom, **kwargs)


def _diff(base: Dict[str, Any], cur: Dict[str, Any]) -> Dict[str, Any]:
    """Return nested dictionary of keys where cur differs from base."""
    out: Dict[str, Any] = {}
    for k in cur.keys() | base.keys():
        if k not in base:
            out[k] = cur[k]
            continue
        if k not in cur:
            continue
        vb = base[k]
        vc = cur[k]
        if isinstance(vb, dict) and isinstance(vc, dict):
            d = _diff(vb, vc)
            if d:
                out[k] = d
        elif vb != vc:
            out[k] = vc
    return out

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "MODES",
    "_default_config_path",
]
