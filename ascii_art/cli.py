#!/usr/bin/env python3
# ascii_art/cli.py
"""
Entry point for the ascii-art command.
Loads configuration, reads an image from disk or a URL, renders it in the
chosen mode and prints it or writes it to a file.
"""

import argparse
import html
import logging
import sys
from typing import List, Optional

from ascii_art.config import Config
from ascii_art.errors import RenderError
from ascii_art.formatting import export_html, export_text, print_color, to_ansi, to_html_document, to_html_spans, to_plain
from ascii_art.loader import ImageLoader
from ascii_art.logging_conf import setup_logging
from ascii_art.ramps import RAMPS
from ascii_art.rendering.renderer import MODES, render
from ascii_art.version import version_info

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ascii-art",
        description="Convert images to ASCII, braille, edge and dithered text art",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s photo.jpg
  %(prog)s photo.jpg -m braille -w 60 --threshold 100
  %(prog)s https://example.com/cat.png -m color --html -o cat.html
  %(prog)s photo.jpg -m floyd -r blocks -o photo.txt
        """,
    )
    parser.add_argument("input", nargs="?", help="Path or http(s) URL of the source image")
    parser.add_argument("-m", "--mode", choices=MODES, help="Render mode (default from config: classic)")
    parser.add_argument("-w", "--width", type=int, help="Output width in characters")
    parser.add_argument("-r", "--ramp", choices=sorted(RAMPS), help="Character ramp name")
    parser.add_argument("--custom-ramp", help="Glyphs for --ramp custom, darkest first")
    parser.add_argument("-i", "--invert", action=argparse.BooleanOptionalAction, default=None,
                        help="Invert brightness mapping (--no-invert overrides the config)")
    parser.add_argument("-t", "--threshold", type=int, help="Braille/edge threshold 0-255")
    parser.add_argument("-a", "--aspect-ratio", type=float, help="Character cell aspect correction (default 0.5)")
    parser.add_argument("-o", "--output", help="Write output to this file instead of stdout")
    parser.add_argument("--html", action="store_true", help="Emit a standalone HTML document")
    parser.add_argument("--no-color", action="store_true", help="Plain glyphs for color mode")
    parser.add_argument("--ansi", action="store_true", help="Raw ANSI truecolor escapes for color mode")
    parser.add_argument("-c", "--config", help="Config file path (default: per-user config)")
    parser.add_argument("--log-level", help="Override logging level")
    parser.add_argument("--list-ramps", action="store_true", help="List available ramps and exit")
    parser.add_argument("--version", action="version", version=version_info())
    return parser


def _overrides(args: argparse.Namespace) -> dict:
    out = {}
    if args.width is not None:
        out["output_width"] = args.width
    if args.ramp is not None:
        out["ramp_name"] = args.ramp
    if args.custom_ramp is not None:
        out["custom_ramp"] = args.custom_ramp
    if args.invert is not None:
        out["invert"] = args.invert
    if args.threshold is not None:
        out["threshold"] = args.threshold
    if args.aspect_ratio is not None:
        out["aspect_ratio"] = args.aspect_ratio
    return out


def _emit(text: str, output: Optional[str]) -> None:
    if output:
        path = export_text(text, output)
        print(f"Wrote {path}", file=sys.stderr)
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def run(args: argparse.Namespace) -> int:
    if args.list_ramps:
        for name, glyphs in RAMPS.items():
            print(f"{name:10s} {len(glyphs):3d}  {glyphs}")
        return 0

    cfg = Config.load(args.config, create_if_missing=False)
    setup_logging(cfg, args.log_level)

    mode = args.mode or cfg.mode
    options = cfg.render_options(**_overrides(args))
    pixels = ImageLoader.from_config(cfg).load(args.input)
    log.info("rendering %s (%dx%d) as %s", args.input, pixels.width, pixels.height, mode)
    result = render(pixels, options, mode)

    title = cfg["output"]["html_title"]
    if mode == "color":
        if args.html:
            if args.output:
                path = export_html(result, args.output, title)
                print(f"Wrote {path}", file=sys.stderr)
            else:
                _emit(to_html_document(to_html_spans(result), title), None)
        elif args.no_color or not cfg["output"]["color"]:
            _emit(to_plain(result), args.output)
        elif args.ansi or args.output:
            _emit(to_ansi(result), args.output)
        else:
            print_color(result)
        return 0

    if args.html:
        body = html.escape(result, quote=False)
        result = to_html_document(body, title)
    _emit(result, args.output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.input and not args.list_ramps:
        parser.print_help()
        return 1
    try:
        return run(args)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except (RenderError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
