#!/usr/bin/env python3
"""Render text with a font, then convert the rendering to ASCII art."""

import argparse
import os
import sys
import logging
from typing import List, Optional, Sequence

from PIL import Image, ImageDraw, ImageFont

from .errors import AsciiStudioError
from .image_to_ascii import (
    add_render_arguments,
    format_grid,
    options_from_args,
    report_error,
    setup_logging,
    write_output,
)
from .options import RenderOptions
from .pipeline import AsciiGrid, PixelBuffer, render

DEFAULT_FONTS = [
    "Arial",
    "Times New Roman",
    "Courier New",
    "Georgia",
    "Verdana",
    "Monaco",
    "Menlo",
    "Consolas",
]

# canvas layout, in multiples of the requested text size
FONT_SCALE = 3
LINE_SPACING = 1.2
MARGIN_PX = 20


# =============================
# Font Management
# =============================


def available_fonts(fallback: Optional[Sequence[str]] = None) -> List[str]:
    """Font family names offered to callers; `fallback` replaces the defaults."""
    return list(fallback) if fallback else list(DEFAULT_FONTS)


def find_default_font(font_name: str = "DejaVuSansMono"):
    """Find a suitable monospace font on the system."""
    candidates = {
        "DejaVuSansMono": [
            "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
            "/System/Library/Fonts/Monaco.ttf",
            "C:\\Windows\\Fonts\\consola.ttf",
        ],
        "LiberationMono": [
            "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
        ],
    }

    for path in candidates.get(font_name, []):
        if os.path.exists(path):
            return path
    return None


def load_font(font_path: str | None, font_size: int) -> ImageFont.FreeTypeFont:
    """Load a font, falling back to default if not found."""
    logger = logging.getLogger(__name__)
    if font_path and os.path.exists(font_path):
        logger.debug("Loading font from %s (size=%d)", font_path, font_size)
        return ImageFont.truetype(font_path, font_size)

    default = find_default_font()
    if default:
        logger.debug("Falling back to default font %s (size=%d)", default, font_size)
        return ImageFont.truetype(default, font_size)

    logger.debug("Using PIL default font (size=%d)", font_size)
    return ImageFont.load_default(size=font_size)


# =============================
# Text Rendering
# =============================


def measure_text(text: str, font: ImageFont.FreeTypeFont) -> tuple[int, int]:
    """Measure text dimensions."""
    bbox = font.getbbox(text)
    width = bbox[2] - bbox[0]
    height = bbox[3] - bbox[1]
    return width, height


def render_text_to_image(
    text: str,
    text_size: int = 30,
    font_path: str | None = None,
    text_color: str = "#ffffff",
    bg_color: str = "#000000",
) -> Image.Image:
    """
    Draw (possibly multi-line) text onto a solid canvas.

    The font is drawn at text_size * 3 px with 1.2x line spacing and a 20px
    margin on every side, so the canvas always has room for the ink.
    """
    logger = logging.getLogger(__name__)
    font_size = max(1, text_size * FONT_SCALE)
    font = load_font(font_path, font_size)

    lines = text.split("\n")
    line_height = font_size * LINE_SPACING
    max_line_w = max(measure_text(line, font)[0] for line in lines)

    img_width = max_line_w + 2 * MARGIN_PX
    img_height = round(len(lines) * line_height + 2 * MARGIN_PX)
    logger.debug(
        "Rendering %d line(s) at %dpx onto %dx%d canvas",
        len(lines),
        font_size,
        img_width,
        img_height,
    )

    img = Image.new("RGB", (img_width, img_height), color=bg_color)
    draw = ImageDraw.Draw(img)

    y = float(MARGIN_PX)
    for line in lines:
        draw.text((MARGIN_PX, round(y)), line, font=font, fill=text_color)
        y += line_height

    return img


# =============================
# ASCII Art Generation
# =============================


def text_to_ascii(
    text: str,
    options: Optional[RenderOptions] = None,
    text_size: int = 30,
    font_path: str | None = None,
    text_color: str = "#ffffff",
) -> AsciiGrid:
    """
    Convert text to ASCII art.

    Args:
        text: Input text, newlines start new lines
        options: Render options for the ASCII pipeline
        text_size: Nominal text size; drawn at 3x
        font_path: Path to a .ttf font, system mono font if omitted
        text_color: Any Pillow color spec

    Returns:
        AsciiGrid with the colors of the rendered text
    """
    logging.getLogger(__name__).info(
        "Generating ASCII art for %d characters (text_size=%d)", len(text), text_size
    )
    img = render_text_to_image(
        text, text_size=text_size, font_path=font_path, text_color=text_color
    )
    return render(PixelBuffer.from_image(img), options)


# =============================
# CLI
# =============================


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for text-to-ASCII CLI."""
    parser = argparse.ArgumentParser(
        prog="ascii-studio text", description="Convert text to ASCII art"
    )

    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to convert",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read text from standard input (supports piped input)",
    )
    parser.add_argument(
        "--text-size",
        type=int,
        default=30,
        help="Text size; the canvas font is three times this",
    )
    parser.add_argument(
        "--font",
        default=None,
        help="Path to .ttf font file",
    )
    parser.add_argument(
        "--text-color",
        default="#ffffff",
        help="Text color (background is black)",
    )
    parser.add_argument(
        "--list-fonts",
        action="store_true",
        help="List suggested font families and exit",
    )
    add_render_arguments(parser)

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.list_fonts:
        print("\n".join(available_fonts()))
        return 0

    # Get input text ! --stdin flag overrides CLI text
    if args.stdin:
        text = sys.stdin.read().strip()
    else:
        text = args.text

    if not text:
        # No input text provided; display error, show help, and exit 1
        print("\033[31mError: [1] no text provided\n\033[0m", file=sys.stderr)
        parser.print_help()
        return 1

    try:
        grid = text_to_ascii(
            text,
            options=options_from_args(args),
            text_size=args.text_size,
            font_path=args.font,
            text_color=args.text_color,
        )
        write_output(format_grid(grid, args.format), args.output)
    except (AsciiStudioError, OSError, ValueError) as e:
        return report_error(e)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
