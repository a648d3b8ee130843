"""Rectangular, row-major grid of packed colors.

``PixelBuffer`` owns a NumPy ``uint32`` array of shape (H, W). Every
operation reads the backing array through :attr:`PixelBuffer.words`;
shape-changing operations build a fresh buffer instead of resizing.
"""
from __future__ import annotations

from typing import Iterable, Sequence, Union

import numpy as np

from .color import Color, RGB_MASK, pack_array, unpack_array

Array = np.ndarray
ColorLike = Union[Color, Sequence[int]]


class PixelIndexError(IndexError):
    """Raised when a cell outside the buffer is read or written."""


def _to_word(color: Union[ColorLike, int]) -> int:
    if isinstance(color, (int, np.integer)):
        return int(color) & RGB_MASK
    red, green, blue = color
    return Color(red, green, blue).packed() & RGB_MASK


class PixelBuffer:
    """An owned H x W grid of colors stored as packed 24-bit words."""

    __slots__ = ("_words",)

    def __init__(self, height: int, width: int) -> None:
        if height < 0 or width < 0:
            raise ValueError("height and width must be >= 0")
        self._words = np.zeros((int(height), int(width)), dtype=np.uint32)

    # ---- construction ----
    @classmethod
    def _wrap(cls, words: Array) -> "PixelBuffer":
        buf = cls.__new__(cls)
        buf._words = words
        return buf

    @classmethod
    def from_buffer(cls, other: "PixelBuffer") -> "PixelBuffer":
        """Deep copy of ``other``."""
        return cls._wrap(other._words.copy())

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Union[ColorLike, int]]]) -> "PixelBuffer":
        """Build a buffer from nested rows of packed words or colors.

        Raises
        ------
        ValueError
            If the rows do not all have the same length.
        """
        grid = [[_to_word(c) for c in row] for row in rows]
        width = len(grid[0]) if grid else 0
        for row in grid:
            if len(row) != width:
                raise ValueError("ragged rows: every row must have the same width")
        buf = cls(len(grid), width)
        if grid and width:
            buf._words[:, :] = np.array(grid, dtype=np.uint32)
        return buf

    @classmethod
    def from_rgb_array(cls, arr: Array) -> "PixelBuffer":
        """Build a buffer from an (H, W, 3) uint8 RGB array."""
        if not isinstance(arr, np.ndarray):
            raise TypeError("arr must be a NumPy array")
        if arr.dtype != np.uint8:
            raise TypeError("arr must have dtype=uint8")
        return cls._wrap(pack_array(arr))

    # ---- shape ----
    @property
    def height(self) -> int:
        return int(self._words.shape[0])

    @property
    def width(self) -> int:
        return int(self._words.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self.height, self.width

    @property
    def words(self) -> Array:
        """The backing (H, W) uint32 array."""
        return self._words

    # ---- cell access ----
    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise PixelIndexError(
                f"cell ({row}, {col}) outside buffer of shape {self.shape}"
            )

    def get_word(self, row: int, col: int) -> int:
        self._check(row, col)
        return int(self._words[row, col])

    def set_word(self, row: int, col: int, word: int) -> None:
        self._check(row, col)
        self._words[row, col] = int(word) & RGB_MASK

    def get(self, row: int, col: int) -> Color:
        return Color.from_word(self.get_word(row, col))

    def set(self, row: int, col: int, color: ColorLike) -> None:
        self.set_word(row, col, _to_word(color))

    # ---- conversion ----
    def copy(self) -> "PixelBuffer":
        return PixelBuffer.from_buffer(self)

    def to_rows(self) -> list[list[int]]:
        """Nested lists of packed words, row-major."""
        return self._words.astype(np.int64).tolist()

    def to_rgb_array(self) -> Array:
        """An (H, W, 3) uint8 RGB array."""
        return unpack_array(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._words, other._words))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelBuffer(height={self.height}, width={self.width})"
