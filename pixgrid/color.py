"""Packed 24-bit RGB color codec.

A color is stored as a single integer word laid out as::

    bits [23:16] red | [15:8] green | [7:0] blue

Bits above 23 (for example an alpha byte) are ignored when unpacking and
are always zero when packing. ``Color`` is the structured value used at
API boundaries; the packed word is the storage form inside buffers.
"""
from __future__ import annotations

from typing import NamedTuple

import numpy as np

Array = np.ndarray

RED_SHIFT = 16
GREEN_SHIFT = 8
BLUE_SHIFT = 0
RED_MASK = 0xFF << RED_SHIFT
GREEN_MASK = 0xFF << GREEN_SHIFT
BLUE_MASK = 0xFF << BLUE_SHIFT
RGB_MASK = RED_MASK | GREEN_MASK | BLUE_MASK


def pack(red: int, green: int, blue: int) -> int:
    """Pack three channel values into one color word.

    Each channel must lie in [0, 255]. Values outside that range are not
    checked and give an undefined word; use :func:`clamp_channel` first
    when the input is not known to be in range.
    """
    return (int(red) << RED_SHIFT) + (int(green) << GREEN_SHIFT) + (int(blue) << BLUE_SHIFT)


def unpack_red(word: int) -> int:
    return (int(word) & RED_MASK) >> RED_SHIFT


def unpack_green(word: int) -> int:
    return (int(word) & GREEN_MASK) >> GREEN_SHIFT


def unpack_blue(word: int) -> int:
    return (int(word) & BLUE_MASK) >> BLUE_SHIFT


def clamp_channel(value: int) -> int:
    """Clamp a channel value to [0, 255]."""
    if value < 0:
        return 0
    if value > 255:
        return 255
    return int(value)


class Color(NamedTuple):
    """An RGB color with 8-bit channels."""

    red: int
    green: int
    blue: int

    def packed(self) -> int:
        return pack(self.red, self.green, self.blue)

    @classmethod
    def from_word(cls, word: int) -> "Color":
        return cls(unpack_red(word), unpack_green(word), unpack_blue(word))


def unpack(word: int) -> Color:
    """Unpack a color word into a :class:`Color`."""
    return Color.from_word(word)


def pack_array(rgb: Array) -> Array:
    """Pack an (H, W, 3) channel array into an (H, W) uint32 word array.

    Parameters
    ----------
    rgb : np.ndarray
        Array of shape (H, W, 3) holding red, green, blue in [0, 255].

    Returns
    -------
    np.ndarray
        Array of shape (H, W), dtype=uint32.
    """
    if not isinstance(rgb, np.ndarray) or rgb.ndim != 3 or rgb.shape[2] != 3:
        raise ValueError("rgb must be an array with shape (H, W, 3)")
    wide = rgb.astype(np.uint32)
    return (
        (wide[:, :, 0] << RED_SHIFT)
        | (wide[:, :, 1] << GREEN_SHIFT)
        | (wide[:, :, 2] << BLUE_SHIFT)
    ).astype(np.uint32)


def unpack_array(words: Array) -> Array:
    """Unpack an (H, W) word array into an (H, W, 3) uint8 channel array."""
    if not isinstance(words, np.ndarray) or words.ndim != 2:
        raise ValueError("words must be an array with shape (H, W)")
    w = words.astype(np.uint32)
    out = np.empty(w.shape + (3,), dtype=np.uint8)
    out[:, :, 0] = (w & RED_MASK) >> RED_SHIFT
    out[:, :, 1] = (w & GREEN_MASK) >> GREEN_SHIFT
    out[:, :, 2] = (w & BLUE_MASK) >> BLUE_SHIFT
    return out
