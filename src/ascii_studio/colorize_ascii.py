"""Colored renderings of an AsciiGrid: ANSI truecolor, HTML, and plain dicts."""

import html
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .pipeline import AsciiGrid, RGB

ESC = "\x1b"


# -----------------------------
# Data model / options
# -----------------------------


@dataclass
class HtmlOptions:
    font_size_px: int = 12
    line_height_px: Optional[int] = None  # None => match font-size
    fill_spaces: bool = False
    title: str = "ASCII Art"


def css_color(rgb: RGB) -> str:
    r, g, b = rgb
    return f"rgb({r}, {g}, {b})"


def grid_to_dict(grid: AsciiGrid) -> Dict[str, Any]:
    """Structured colored grid: {"lines": [{"chars": [{"char", "color"}]}]}."""
    return {
        "lines": [
            {"chars": [{"char": c.glyph, "color": css_color(c.color)} for c in row]}
            for row in grid.rows
        ]
    }


# -----------------------------
# Rendering
# -----------------------------


def colorize_lines_ansi(grid: AsciiGrid, color_spaces: bool = False) -> List[str]:
    """Return list of ANSI-colored lines."""
    out_lines = []
    for cells in grid.rows:
        prev = None
        row = []
        for ch, rgb in cells:
            if ch == " " and not color_spaces:
                if prev is not None:
                    row.append(f"{ESC}[0m")
                    prev = None
                row.append(" ")
                continue

            if prev != rgb:
                r, g, b = rgb
                row.append(f"{ESC}[38;2;{r};{g};{b}m")
                prev = rgb

            row.append(ch)

        row.append(f"{ESC}[0m")
        out_lines.append("".join(row))
    return out_lines


def colorize_lines_html(
    grid: AsciiGrid, color_spaces: bool = False, fill_spaces: bool = False
) -> List[str]:
    """Return list of HTML lines (no surrounding <pre>)."""
    out_lines = []
    for cells in grid.rows:
        prev = None
        span_open = False
        row = []

        for ch, rgb in cells:
            if ch == " " and not color_spaces:
                if span_open:
                    row.append("</span>")
                    span_open = False
                    prev = None
                if fill_spaces:
                    row.append(
                        f'<span style="background-color: {css_color(rgb)}">&nbsp;</span>'
                    )
                else:
                    row.append(" ")
                continue

            if prev != rgb:
                if span_open:
                    row.append("</span>")
                row.append(f'<span style="color: {css_color(rgb)}">')
                span_open = True
                prev = rgb

            row.append(html.escape(ch))

        if span_open:
            row.append("</span>")

        out_lines.append("".join(row))

    return out_lines


def wrap_html(pre_lines, title="ASCII Art", font_size_px=12, line_height_px=None):
    # Browsers can drift if line-height is not locked; keep px values.
    if line_height_px is None:
        line_height_px = font_size_px

    return (
        "<!doctype html>\n"
        "<html>\n<head>\n"
        '  <meta charset="utf-8">\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"  <title>{html.escape(title)}</title>\n"
        "  <style>\n"
        "    html, body { margin: 0; background: #000; }\n"
        "    .wrap { padding: 16px; }\n"
        "    pre {\n"
        "      margin: 0;\n"
        "      white-space: pre;\n"
        "      overflow: auto;\n"
        '      font-family: "Hack", "JetBrains Mono", "Cascadia Mono", "Fira Code", Consolas, monospace;\n'
        "      font-variant-ligatures: none;\n"
        f"      font-size: {font_size_px}px;\n"
        f"      line-height: {line_height_px}px;\n"
        "      letter-spacing: 0;\n"
        "    }\n"
        "  </style>\n"
        "</head>\n<body>\n"
        '  <div class="wrap">\n'
        "    <pre>\n" + "\n".join(pre_lines) + "\n    </pre>\n"
        "  </div>\n"
        "</body>\n</html>\n"
    )


def render_ansi(grid: AsciiGrid, color_spaces: bool = False) -> str:
    return "\n".join(colorize_lines_ansi(grid, color_spaces=color_spaces))


def render_html(grid: AsciiGrid, opt: Optional[HtmlOptions] = None) -> str:
    opt = opt or HtmlOptions()
    pre_lines = colorize_lines_html(grid, fill_spaces=opt.fill_spaces)
    return wrap_html(
        pre_lines,
        title=opt.title,
        font_size_px=opt.font_size_px,
        line_height_px=opt.line_height_px,
    )
