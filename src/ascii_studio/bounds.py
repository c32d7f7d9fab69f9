"""Autocrop: locate the content rectangle inside a light background."""

from typing import NamedTuple

import numpy as np

from .glyphs import luminance_array

# Pixels at or above this luminance count as background.
BACKGROUND_LUMINANCE = 250


class Bounds(NamedTuple):
    # inclusive on both ends
    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1


def full_frame(width: int, height: int) -> Bounds:
    return Bounds(0, width - 1, 0, height - 1)


def content_bounds(rgba: np.ndarray) -> Bounds:
    """
    Smallest rectangle holding every pixel darker than the background level.

    Falls back to the whole frame when nothing qualifies or when the content
    spans a single row or column. Dark backgrounds are never cropped.
    """
    h, w = rgba.shape[:2]
    ys, xs = np.nonzero(luminance_array(rgba) < BACKGROUND_LUMINANCE)
    if xs.size == 0:
        return full_frame(w, h)

    min_x, max_x = int(xs.min()), int(xs.max())
    min_y, max_y = int(ys.min()), int(ys.max())
    if min_x >= max_x or min_y >= max_y:
        return full_frame(w, h)
    return Bounds(min_x, max_x, min_y, max_y)
