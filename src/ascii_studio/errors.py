"""Exceptions raised by the conversion pipeline."""


class AsciiStudioError(Exception):
    """Base class for conversion failures."""


class MalformedBufferError(AsciiStudioError, ValueError):
    """Pixel data does not match the declared dimensions."""


class DegenerateContrastError(AsciiStudioError, ValueError):
    """Contrast adjustment would produce an undefined or negative factor."""

    def __init__(self, contrast: int):
        super().__init__(
            f"contrast must be in [-255, 259), got {contrast}"
        )
        self.contrast = contrast
