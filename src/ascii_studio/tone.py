"""Brightness and contrast adjustment."""

from typing import Tuple

import numpy as np

from .errors import DegenerateContrastError

MIN_CONTRAST = -255
MAX_CONTRAST = 259  # exclusive; the factor's denominator vanishes here


def contrast_factor(contrast: int) -> float:
    """
    Standard contrast curve factor.

    0 leaves pixels unchanged, -255 flattens everything to mid-grey. Values
    at or past 259 divide by zero and values below -255 flip the curve, so
    both are rejected.
    """
    if not MIN_CONTRAST <= contrast < MAX_CONTRAST:
        raise DegenerateContrastError(contrast)
    return (259 * (contrast + 255)) / (255 * (259 - contrast))


def _clamp(v: float) -> float:
    return 0.0 if v < 0 else (255.0 if v > 255 else v)


def adjust_rgb(
    r: int, g: int, b: int, brightness: int, factor: float
) -> Tuple[int, int, int]:
    """Apply brightness then contrast to one pixel; channels stay in 0..255."""
    out = []
    for ch in (r, g, b):
        ch = _clamp(ch + brightness)
        ch = _clamp(factor * (ch - 128) + 128)
        out.append(int(ch))  # non-negative, so int() floors
    return out[0], out[1], out[2]


def adjust_array(rgba: np.ndarray, brightness: int, contrast: int) -> np.ndarray:
    """
    rgba: HxWx4 uint8
    returns a new HxWx4 uint8 array; alpha is copied through
    """
    factor = contrast_factor(contrast)

    rgb = rgba[..., :3].astype(np.float64)
    rgb = np.clip(rgb + brightness, 0, 255)
    rgb = np.clip(factor * (rgb - 128) + 128, 0, 255)

    out = rgba.copy()
    out[..., :3] = np.floor(rgb).astype(np.uint8)
    return out
