from __future__ import annotations

# Alias package: re-export public API from the existing implementation.
from pixgrid.color import Color, pack, unpack, unpack_red, unpack_green, unpack_blue  # noqa: F401
from pixgrid.buffer import PixelBuffer, PixelIndexError  # noqa: F401
from pixgrid.ops import apply_op, rotate, down_sample, patch  # noqa: F401
from pixgrid.session import EditSession  # noqa: F401
from pixgrid.utils.loader import load_image, save_image  # noqa: F401
from pixgrid.utils.dump import format_buffer, print_buffer  # noqa: F401

__all__ = [
    "Color",
    "pack",
    "unpack",
    "unpack_red",
    "unpack_green",
    "unpack_blue",
    "PixelBuffer",
    "PixelIndexError",
    "apply_op",
    "rotate",
    "down_sample",
    "patch",
    "EditSession",
    "load_image",
    "save_image",
    "format_buffer",
    "print_buffer",
]
