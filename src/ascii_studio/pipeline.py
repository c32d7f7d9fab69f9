"""
Raster pipeline: pixels in, glyph grid out.

    resize -> flip -> tone adjust -> autocrop -> glyph mapping

Every stage returns a new array, so the caller's buffer is never modified.
"""

import io
import logging
import os
from dataclasses import dataclass
from typing import BinaryIO, List, NamedTuple, Optional, Tuple, Union

import numpy as np
from PIL import Image

from . import palettes
from .bounds import content_bounds
from .errors import MalformedBufferError
from .glyphs import glyph_indices, luminance_array
from .options import RenderOptions, fit_dimensions
from .tone import adjust_array

LOG = logging.getLogger(__name__)

RGB = Tuple[int, int, int]
ImageSource = Union[str, "os.PathLike[str]", bytes, BinaryIO, Image.Image]

__all__ = [
    "AsciiGrid",
    "Cell",
    "PixelBuffer",
    "RenderOptions",
    "convert_image",
    "render",
    "render_text",
]


# -----------------------------
# Data model
# -----------------------------


@dataclass(frozen=True)
class PixelBuffer:
    """Decoded RGBA pixels, row-major, top row first."""

    width: int
    height: int
    data: bytes

    def __post_init__(self):
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        if self.width < 1 or self.height < 1:
            raise MalformedBufferError(
                f"dimensions must be positive, got {self.width}x{self.height}"
            )
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise MalformedBufferError(
                f"expected {expected} bytes for {self.width}x{self.height} RGBA, "
                f"got {len(self.data)}"
            )

    @classmethod
    def from_image(cls, img: Image.Image) -> "PixelBuffer":
        rgba = img.convert("RGBA")
        return cls(rgba.width, rgba.height, rgba.tobytes())

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "PixelBuffer":
        if arr.ndim != 3 or arr.shape[2] != 4:
            raise MalformedBufferError(f"expected an HxWx4 array, got {arr.shape}")
        h, w = arr.shape[:2]
        return cls(w, h, np.ascontiguousarray(arr, dtype=np.uint8).tobytes())

    def to_array(self) -> np.ndarray:
        """Read-only HxWx4 uint8 view over the data."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.height, self.width, 4
        )

    def to_image(self) -> Image.Image:
        return Image.frombytes("RGBA", (self.width, self.height), self.data)


class Cell(NamedTuple):
    glyph: str
    color: RGB  # after tone adjustment


@dataclass(frozen=True)
class AsciiGrid:
    rows: Tuple[Tuple[Cell, ...], ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max((len(r) for r in self.rows), default=0)

    def lines(self) -> List[str]:
        return ["".join(c.glyph for c in row) for row in self.rows]

    def to_text(self) -> str:
        """Rows joined by newlines, trailing whitespace of the block removed."""
        return "\n".join(self.lines()).rstrip()

    def __str__(self) -> str:
        return self.to_text()


# -----------------------------
# Stages
# -----------------------------


def _resize(buffer: PixelBuffer, size: Tuple[int, int]) -> np.ndarray:
    img = buffer.to_image()
    if img.size != size:
        # Resize colour and alpha separately; RGBA resampling premultiplies
        # and would blacken transparent pixels.
        alpha = img.getchannel("A").resize(size, resample=Image.Resampling.BILINEAR)
        img = img.convert("RGB").resize(size, resample=Image.Resampling.BILINEAR)
        img.putalpha(alpha)
    return np.asarray(img, dtype=np.uint8)


def _flip(arr: np.ndarray, flip_h: bool, flip_v: bool) -> np.ndarray:
    if flip_h:
        arr = arr[:, ::-1]
    if flip_v:
        arr = arr[::-1]
    return arr


def render(buffer: PixelBuffer, options: Optional[RenderOptions] = None) -> AsciiGrid:
    """Convert decoded pixels into a grid of (glyph, colour) cells."""
    opt = options or RenderOptions()

    if opt.keep_aspect:
        size = fit_dimensions(buffer.width, buffer.height, opt.width, opt.height)
    else:
        size = (opt.width, opt.height)
    LOG.debug("Resizing %dx%d -> %dx%d", buffer.width, buffer.height, *size)
    arr = _resize(buffer, size)

    arr = _flip(arr, opt.flip_h, opt.flip_v)

    LOG.debug("Tone: brightness=%d contrast=%d", opt.brightness, opt.contrast)
    arr = adjust_array(arr, opt.brightness, opt.contrast)

    box = content_bounds(arr)
    LOG.debug("Content bounds: %s", box)
    arr = arr[box.min_y : box.max_y + 1, box.min_x : box.max_x + 1]

    chars = palettes.lookup(opt.charset)
    idx = glyph_indices(
        luminance_array(arr), len(chars), invert=opt.invert, threshold=opt.threshold
    )

    rows = []
    for y in range(arr.shape[0]):
        row = []
        for x in range(arr.shape[1]):
            r, g, b = (int(v) for v in arr[y, x, :3])
            row.append(Cell(chars[idx[y, x]], (r, g, b)))
        rows.append(tuple(row))

    LOG.debug("Rendered %d rows x %d cols", len(rows), arr.shape[1])
    return AsciiGrid(tuple(rows))


def render_text(buffer: PixelBuffer, options: Optional[RenderOptions] = None) -> str:
    return render(buffer, options).to_text()


# -----------------------------
# Decoding
# -----------------------------


def load_image(source: ImageSource) -> Image.Image:
    """Decode a path, raw bytes, a binary file object or an already-open image."""
    if isinstance(source, Image.Image):
        return source
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    with Image.open(source) as img:
        img.load()
        return img.copy()


def convert_image(source: ImageSource, options: Optional[RenderOptions] = None) -> AsciiGrid:
    img = load_image(source)
    LOG.info("Converting %dx%d %s image", img.width, img.height, img.mode)
    return render(PixelBuffer.from_image(img), options)
