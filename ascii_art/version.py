#!/usr/bin/env python3
# ascii_art/version.py
"""
Version metadata for the ASCII art renderer.
"""

__version__ = "1.0.0"
__license__ = "MIT"

def version_info() -> str:
    """Return human-readable version string."""
    return f"ascii-art v{__version__}"
