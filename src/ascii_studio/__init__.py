"""ASCII Studio - Convert images and text to ASCII art."""

__version__ = "0.2.0"

"""
Expose lightweight lazy wrappers to avoid importing submodules at package
import time. Importing submodules in `__init__` causes `runpy` to warn when
executing a module with `-m` because the submodule may already appear in
`sys.modules` before execution. Wrappers import on-demand.
"""


def render(*args, **kwargs):
    from .pipeline import render as _r

    return _r(*args, **kwargs)


def convert_image(*args, **kwargs):
    from .pipeline import convert_image as _c

    return _c(*args, **kwargs)


def convert_text(*args, **kwargs):
    from .text_to_ascii import text_to_ascii as _t

    return _t(*args, **kwargs)


def image_to_ascii_main(*args, **kwargs):
    from .image_to_ascii import main as _m

    return _m(*args, **kwargs)


def text_to_ascii_main(*args, **kwargs):
    from .text_to_ascii import main as _m

    return _m(*args, **kwargs)


__all__ = [
    "convert_image",
    "convert_text",
    "image_to_ascii_main",
    "render",
    "text_to_ascii_main",
]
