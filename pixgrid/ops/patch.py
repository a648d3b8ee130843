"""Masked patch compositing.

Copies a source buffer onto a destination at an offset, skipping every
source cell whose packed color equals the transparent color.
"""
from __future__ import annotations

import logging
from typing import Sequence, Union

import numpy as np

from ..buffer import PixelBuffer
from ..color import Color, RGB_MASK

logger = logging.getLogger(__name__)


def _fits(destination: PixelBuffer, start_row: int, start_column: int, source: PixelBuffer) -> bool:
    dh, dw = destination.shape
    sh, sw = source.shape
    if start_row < 0 or start_row > dh:
        return False
    if start_column < 0 or start_column > dw:
        return False
    if sh > dh or sw > dw:
        return False
    if start_row + sh > dh or start_column + sw > dw:
        return False
    return True


def patch(
    destination: PixelBuffer,
    start_row: int,
    start_column: int,
    source: PixelBuffer,
    transparent: Union[Color, Sequence[int]],
) -> int:
    """Composite ``source`` onto ``destination`` in place.

    Parameters
    ----------
    destination : PixelBuffer
        Buffer that is modified in place.
    start_row, start_column : int
        Destination cell receiving ``source[0][0]``.
    source : PixelBuffer
        Patch image. It must fit entirely inside ``destination`` at the
        given offset.
    transparent : Color | tuple[int, int, int]
        Source cells equal to this color are not copied.

    Returns
    -------
    int
        Number of destination cells written. 0 when the placement is out
        of bounds, in which case ``destination`` is left unchanged.
    """
    if not _fits(destination, start_row, start_column, source):
        logger.debug(
            "patch: %dx%d source does not fit at (%r, %r) in %dx%d image",
            source.height, source.width, start_row, start_column,
            destination.height, destination.width,
        )
        return 0

    red, green, blue = transparent
    trans = Color(red, green, blue).packed()

    src = source.words
    mask = src != np.uint32(trans & RGB_MASK)
    region = destination.words[
        start_row:start_row + source.height,
        start_column:start_column + source.width,
    ]
    region[mask] = src[mask]
    return int(np.count_nonzero(mask))
