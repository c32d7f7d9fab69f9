"""Shared fixtures: small synthetic pixel buffers."""

import numpy as np
import pytest

from ascii_studio.pipeline import PixelBuffer


def _solid(width, height, rgba=(128, 128, 128, 255)):
    return PixelBuffer(width, height, bytes(rgba) * (width * height))


def _from_gray(gray):
    """HxW array of grey levels -> opaque PixelBuffer."""
    gray = np.asarray(gray, dtype=np.uint8)
    h, w = gray.shape
    arr = np.empty((h, w, 4), dtype=np.uint8)
    arr[..., :3] = gray[..., None]
    arr[..., 3] = 255
    return PixelBuffer.from_array(arr)


@pytest.fixture
def solid():
    return _solid


@pytest.fixture
def from_gray():
    return _from_gray
