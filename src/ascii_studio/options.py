"""Render options and parsing of loosely typed request fields."""

import math
import numbers
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from .palettes import DEFAULT_PALETTE

DEFAULT_WIDTH = 200
DEFAULT_HEIGHT = 100
MAX_WIDTH = 300
MAX_HEIGHT = 200
MIN_DIMENSION = 10

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_TRUTHY = ("true", "1", "yes", "on")


# -----------------------------
# Data model / options
# -----------------------------


@dataclass(frozen=True)
class RenderOptions:
    # target grid size in cells; not clamped here, see options_from_mapping
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    charset: str = DEFAULT_PALETTE  # unknown names fall back to detailed
    invert: bool = False
    threshold: bool = False

    brightness: int = 0  # added to each channel
    contrast: int = 0  # [-255, 259)

    flip_h: bool = False
    flip_v: bool = False

    # fit inside width x height instead of stretching to it
    keep_aspect: bool = False

    def __post_init__(self):
        for name in ("width", "height"):
            v = getattr(self, name)
            if not isinstance(v, numbers.Integral) or isinstance(v, bool) or v < 1:
                raise ValueError(f"{name} must be a positive integer, got {v!r}")
            object.__setattr__(self, name, int(v))


# -----------------------------
# Parsing
# -----------------------------


def parse_int(value: Any, default: int = 0) -> int:
    """Parse a leading integer the way form fields arrive ("12px" -> 12)."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if value is None:
        return default
    m = _LEADING_INT.match(str(value))
    return int(m.group(1)) if m else default


def parse_dimension(value: Any, default: int, maximum: int) -> int:
    # 0 and unparseable both mean "use the default"
    parsed = parse_int(value, 0) or default
    return max(MIN_DIMENSION, min(maximum, parsed))


def parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def _pick(fields: Mapping[str, Any], *keys: str) -> Optional[Any]:
    for k in keys:
        if k in fields and fields[k] is not None:
            return fields[k]
    return None


def options_from_mapping(fields: Mapping[str, Any]) -> RenderOptions:
    """
    Build RenderOptions from request-style fields.

    Dimensions are clamped into [MIN_DIMENSION, MAX_*]; numbers that fail to
    parse become 0 (or the default dimension); booleans accept "true"/"on"/...
    Both camelCase (flipH) and snake_case (flip_h) keys are understood.
    """
    charset = _pick(fields, "charset")
    return RenderOptions(
        width=parse_dimension(_pick(fields, "width", "maxWidth"), DEFAULT_WIDTH, MAX_WIDTH),
        height=parse_dimension(
            _pick(fields, "height", "maxHeight"), DEFAULT_HEIGHT, MAX_HEIGHT
        ),
        charset=str(charset) if charset is not None else DEFAULT_PALETTE,
        invert=parse_bool(_pick(fields, "invert")),
        threshold=parse_bool(_pick(fields, "threshold")),
        brightness=parse_int(_pick(fields, "brightness")),
        contrast=parse_int(_pick(fields, "contrast")),
        flip_h=parse_bool(_pick(fields, "flipH", "flip_h")),
        flip_v=parse_bool(_pick(fields, "flipV", "flip_v")),
        keep_aspect=parse_bool(_pick(fields, "keepAspect", "keep_aspect")),
    )


def fit_dimensions(src_w: int, src_h: int, width: int, height: int) -> Tuple[int, int]:
    """Largest (w, h) inside width x height with the source aspect ratio."""
    aspect = src_w / src_h
    draw_w, draw_h = width, height
    if aspect > width / height:
        draw_h = round(width / aspect)
    else:
        draw_w = round(height * aspect)
    return max(1, draw_w), max(1, draw_h)
