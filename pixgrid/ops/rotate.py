"""Clockwise rotation by multiples of 90 degrees."""
from __future__ import annotations

import logging

import numpy as np

from ..buffer import PixelBuffer

logger = logging.getLogger(__name__)


def rotate_once(buffer: PixelBuffer) -> PixelBuffer:
    """Rotate a buffer a single quarter turn clockwise.

    For a source of shape (H, W) the result has shape (W, H) and
    ``dest[col][H - 1 - row] == src[row][col]``.
    """
    src = buffer.words
    h, w = src.shape
    out = np.empty((w, h), dtype=np.uint32)
    for i in range(h):
        out[:, h - 1 - i] = src[i, :]
    return PixelBuffer._wrap(out)


def rotate(buffer: PixelBuffer, degree: int) -> PixelBuffer:
    """Rotate a buffer ``degree`` degrees clockwise.

    Parameters
    ----------
    buffer : PixelBuffer
        Image to rotate.
    degree : int
        Clockwise angle. Must be >= 0 and a multiple of 90.

    Returns
    -------
    PixelBuffer
        A new rotated buffer, or ``buffer`` itself when ``degree`` is
        invalid (the image is left unchanged, nothing is raised).
    """
    if degree < 0 or degree % 90 != 0:
        logger.debug("rotate: invalid degree %r, image unchanged", degree)
        return buffer

    k = int(degree // 90) % 4
    # np.rot90 turns counter-clockwise for positive k
    out = np.rot90(buffer.words, k=-k).copy()
    return PixelBuffer._wrap(out)
