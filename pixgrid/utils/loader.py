"""Image loading and saving using Pillow.

These helpers only convert between image files and :class:`PixelBuffer`;
all editing happens on the buffer's NumPy array.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from ..buffer import PixelBuffer

logger = logging.getLogger(__name__)

SUPPORTED_MODES = ("RGB", "RGBA")
NON_RGB_WARNING = (
    "image %s has mode %r, not plain RGB/RGBA; channels are extracted on a "
    "best-effort basis"
)


def load_image(path: Union[str, Path]) -> PixelBuffer:
    """Load an image file into a :class:`PixelBuffer`.

    Non-RGB images (palette, greyscale, CMYK, ...) are still loaded by
    converting to RGB, but a warning is logged. Any alpha channel is
    discarded.

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow.

    Returns
    -------
    PixelBuffer
        Buffer of shape (height, width).

    Raises
    ------
    OSError
        If the file is missing or cannot be decoded.
    """
    p = Path(path)
    with Image.open(p) as im:
        if im.mode not in SUPPORTED_MODES:
            logger.warning(NON_RGB_WARNING, p, im.mode)
        arr = np.array(im.convert("RGB"), dtype=np.uint8)
    logger.info("loaded %s (%dx%d)", p, arr.shape[0], arr.shape[1])
    return PixelBuffer.from_rgb_array(arr)


def save_image(buffer: PixelBuffer, path: Union[str, Path]) -> None:
    """Save a :class:`PixelBuffer` as an RGB PNG file.

    The output is always PNG, whatever the file extension.

    Parameters
    ----------
    buffer : PixelBuffer
        Image to write.
    path : str | Path
        Output file path.
    """
    if not isinstance(buffer, PixelBuffer):
        raise TypeError("buffer must be a PixelBuffer")

    p = Path(path)
    im = Image.fromarray(buffer.to_rgb_array())
    im.save(p, format="PNG")
    logger.info("saved %s (%dx%d)", p, buffer.height, buffer.width)
