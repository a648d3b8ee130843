"""Block-average downsampling by integer factors.

Each output cell is the per-channel mean of a ``height_scale x
width_scale`` block of source cells. Channels are summed over the whole
block and truncated once by integer division, so the result is a true
block average rather than an iterated pairwise one.
"""
from __future__ import annotations

import logging

import numpy as np

from ..buffer import PixelBuffer
from ..color import pack_array

logger = logging.getLogger(__name__)


def _valid_scales(height: int, width: int, height_scale: int, width_scale: int) -> bool:
    if height_scale < 1 or height_scale > height:
        return False
    if width_scale < 1 or width_scale > width:
        return False
    return height % height_scale == 0 and width % width_scale == 0


def down_sample(buffer: PixelBuffer, height_scale: int, width_scale: int) -> PixelBuffer:
    """Downsample a buffer by block-averaging.

    Parameters
    ----------
    buffer : PixelBuffer
        Source image of shape (H, W).
    height_scale : int
        Rows per block. Must satisfy ``1 <= height_scale <= H`` and divide H.
    width_scale : int
        Columns per block. Must satisfy ``1 <= width_scale <= W`` and divide W.

    Returns
    -------
    PixelBuffer
        New buffer of shape (H // height_scale, W // width_scale), or
        ``buffer`` itself when the scales are invalid.
    """
    H, W = buffer.shape
    if not _valid_scales(H, W, height_scale, width_scale):
        logger.debug(
            "down_sample: invalid scales (%r, %r) for %dx%d image, image unchanged",
            height_scale, width_scale, H, W,
        )
        return buffer

    # Snapshot every channel before building the output
    rgb = buffer.to_rgb_array().astype(np.int64)

    new_h = H // height_scale
    new_w = W // width_scale
    blocks = rgb.reshape(new_h, height_scale, new_w, width_scale, 3)
    sums = blocks.sum(axis=(1, 3))
    avg = sums // (height_scale * width_scale)
    return PixelBuffer._wrap(pack_array(avg))
