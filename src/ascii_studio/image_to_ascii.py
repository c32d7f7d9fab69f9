#!/usr/bin/env python3
"""Convert an image file to ASCII art."""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from . import palettes
from .colorize_ascii import HtmlOptions, grid_to_dict, render_ansi, render_html
from .errors import AsciiStudioError
from .options import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    RenderOptions,
    options_from_mapping,
)
from .pipeline import AsciiGrid, convert_image

FORMATS = ("text", "ansi", "html", "json")


# -----------------------------
# Shared CLI plumbing
# -----------------------------


def add_render_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o", "--output", default=None, help="Output file (default: stdout)"
    )
    parser.add_argument(
        "-W",
        "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help="Output columns, clamped to 10..300",
    )
    parser.add_argument(
        "-H",
        "--height",
        type=int,
        default=DEFAULT_HEIGHT,
        help="Output rows, clamped to 10..200",
    )
    parser.add_argument(
        "--charset",
        choices=palettes.names(),
        default=palettes.DEFAULT_PALETTE,
        help="Glyph palette",
    )
    parser.add_argument(
        "--invert", action="store_true", help="Mirror the luminance-to-glyph order"
    )
    parser.add_argument(
        "--threshold",
        action="store_true",
        help="Binarize luminance at 128 (only the palette ends are used)",
    )
    parser.add_argument(
        "--brightness", type=int, default=0, help="Brightness offset (-255..255)"
    )
    parser.add_argument(
        "--contrast", type=int, default=0, help="Contrast adjustment (-255..258)"
    )
    parser.add_argument("--flip-h", action="store_true", help="Mirror horizontally")
    parser.add_argument("--flip-v", action="store_true", help="Mirror vertically")
    parser.add_argument(
        "--keep-aspect",
        action="store_true",
        help="Fit inside width x height instead of stretching",
    )
    parser.add_argument(
        "--format", choices=FORMATS, default="text", help="Output format"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING)",
    )


def setup_logging(level_name: str) -> None:
    numeric_level = getattr(logging, level_name.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logging.basicConfig(
        stream=sys.stderr, level=numeric_level, format="%(levelname)s: %(message)s"
    )


def options_from_args(args: argparse.Namespace) -> RenderOptions:
    return options_from_mapping(
        {
            "width": args.width,
            "height": args.height,
            "charset": args.charset,
            "invert": args.invert,
            "threshold": args.threshold,
            "brightness": args.brightness,
            "contrast": args.contrast,
            "flip_h": args.flip_h,
            "flip_v": args.flip_v,
            "keep_aspect": args.keep_aspect,
        }
    )


def format_grid(grid: AsciiGrid, fmt: str, title: str = "ASCII Art") -> str:
    if fmt == "ansi":
        return render_ansi(grid)
    if fmt == "html":
        return render_html(grid, HtmlOptions(title=title))
    if fmt == "json":
        return json.dumps(grid_to_dict(grid), ensure_ascii=False)
    return grid.to_text()


def write_output(output: str, path: Optional[str]) -> None:
    if path:
        with open(path, "w", encoding="utf-8") as f:
            f.write(output + "\n")
    else:
        print(output)


def report_error(exc: Exception) -> int:
    print(f"\033[31mError: {exc}\033[0m", file=sys.stderr)
    return 1


# -----------------------------
# CLI
# -----------------------------


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ascii-studio image", description="Convert an image to ASCII art"
    )
    parser.add_argument("input", help="Input image path")
    add_render_arguments(parser)
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    log = logging.getLogger(__name__)

    try:
        opt = options_from_args(args)
        log.debug("Options: %s", opt)
        grid = convert_image(args.input, opt)
        output = format_grid(grid, args.format, title=args.input)
        write_output(output, args.output)
    except (AsciiStudioError, OSError) as e:
        return report_error(e)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
