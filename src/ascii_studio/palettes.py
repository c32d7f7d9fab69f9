#!/usr/bin/env python3
"""Named glyph palettes, ordered from darkest (index 0) to densest."""

import argparse
from types import MappingProxyType
from typing import List, Optional, Sequence

DEFAULT_PALETTE = "detailed"

# Order matters: it is the order the `charsets` command lists them in.
PALETTES = MappingProxyType(
    {
        "simple": " .:-=+*#%",
        "detailed": (
            "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "
        ),
        "blocks": " ▓▒░ ",
        "minimal": " .:-#",
        "binary": " █",
        "starburst": " .*+-oO#%@",
        "brackets": " [](){}<>",
        "lines": " |\\/-:.,",
        "hash": " #",
        "slash": " /\\|",
        "dot": " .",
        "at": " @",
        "box": " ▖▗▘▙▚▛▜▝▞▟",
        "geometric": " ┌┐└┘├┤┬┴┼═║╔╗╚╝╠╣╦╩╬",
        "braille": " ⠁⠂⠄⠆⠈⠐⠠⠰⠱⠲⠴⠆⠖⠶⠸⠨⠬⠫⠯⠳⠼⠽⠾",
    }
)


def names() -> List[str]:
    return list(PALETTES)


def lookup(name: Optional[str]) -> str:
    """Return the palette called `name`, or the detailed one if unknown."""
    if not isinstance(name, str):
        return PALETTES[DEFAULT_PALETTE]
    return PALETTES.get(name, PALETTES[DEFAULT_PALETTE])


# -----------------------------
# CLI
# -----------------------------


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ascii-studio charsets", description="List available glyph palettes"
    )
    parser.add_argument(
        "--names-only", action="store_true", help="Print palette names only"
    )
    args = parser.parse_args(argv)

    width = max(len(n) for n in PALETTES)
    for name, glyphs in PALETTES.items():
        if args.names_only:
            print(name)
        else:
            marker = "*" if name == DEFAULT_PALETTE else " "
            print(f"{marker} {name.ljust(width)}  {glyphs!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
