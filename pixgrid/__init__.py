"""pixgrid: an in-memory raster image editor built on NumPy arrays.

Subpackages
-----------
- ops: rotate, block-average downsample and masked patch operations.
- utils: Pillow-based load/save and a human-readable debug dump.

For debug logging, enable with::

    import logging
    logging.basicConfig(level=logging.DEBUG)
"""
from __future__ import annotations

import logging

# Package logger - silent unless the application configures logging
logger = logging.getLogger("pixgrid")
logger.addHandler(logging.NullHandler())

from .color import Color, pack, unpack, unpack_red, unpack_green, unpack_blue  # noqa: E402
from .buffer import PixelBuffer, PixelIndexError  # noqa: E402
from .ops import apply_op, rotate, rotate_once, down_sample, patch  # noqa: E402
from .session import EditSession  # noqa: E402

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
    "rotate_once",
    "down_sample",
    "patch",
    "EditSession",
]
