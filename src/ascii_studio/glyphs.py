"""Luminance and luminance-to-glyph quantization."""

import numpy as np

THRESHOLD_LEVEL = 128


def luminance(r: int, g: int, b: int) -> int:
    # Plain channel mean, not perceptual luma.
    return (r + g + b) // 3


def luminance_array(rgba: np.ndarray) -> np.ndarray:
    """HxWx{3,4} uint8 -> HxW int32 channel mean."""
    rgb = rgba[..., :3].astype(np.int32)
    return rgb.sum(axis=-1) // 3


def glyph_index(
    lum: int, palette_len: int, invert: bool = False, threshold: bool = False
) -> int:
    if threshold:
        lum = 255 if lum >= THRESHOLD_LEVEL else 0
    idx = int((lum / 255) * (palette_len - 1))
    # Invert is applied once, on the index, so it is an exact mirror.
    return palette_len - 1 - idx if invert else idx


def map_glyph(lum: int, palette: str, invert: bool = False, threshold: bool = False) -> str:
    return palette[glyph_index(lum, len(palette), invert=invert, threshold=threshold)]


def glyph_indices(
    lum: np.ndarray, palette_len: int, invert: bool = False, threshold: bool = False
) -> np.ndarray:
    """Vectorized glyph_index over an array of luminance values."""
    lum = np.asarray(lum)
    if threshold:
        lum = np.where(lum >= THRESHOLD_LEVEL, 255, 0)
    idx = np.floor((lum / 255.0) * (palette_len - 1)).astype(np.int64)
    if invert:
        idx = (palette_len - 1) - idx
    return idx
