"""Single-owner editing session holding the current image.

``EditSession`` keeps one current :class:`PixelBuffer`. Rotate and
downsample replace it wholesale, patch writes into it. A lock serializes
every call so a session shared between threads is never edited by two
operations at once.
"""
from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

from .buffer import PixelBuffer
from .color import Color
from .ops import rotate, down_sample, patch
from .utils.dump import format_buffer, print_buffer
from .utils.loader import load_image, save_image


class EditSession:
    def __init__(self, buffer: Optional[PixelBuffer] = None) -> None:
        self._image = buffer
        self._lock = threading.Lock()

    @property
    def image(self) -> Optional[PixelBuffer]:
        return self._image

    def _require_image(self) -> PixelBuffer:
        if self._image is None:
            raise RuntimeError("no image loaded")
        return self._image

    def load(self, path: Union[str, Path]) -> None:
        buf = load_image(path)
        with self._lock:
            self._image = buf

    def save(self, path: Union[str, Path]) -> None:
        with self._lock:
            save_image(self._require_image(), path)

    def rotate(self, degree: int) -> None:
        """Rotate the current image; invalid degrees leave it unchanged."""
        with self._lock:
            self._image = rotate(self._require_image(), degree)

    def down_sample(self, height_scale: int, width_scale: int) -> None:
        with self._lock:
            self._image = down_sample(self._require_image(), height_scale, width_scale)

    def patch(
        self,
        start_row: int,
        start_column: int,
        source: PixelBuffer,
        transparent: Union[Color, Sequence[int]],
    ) -> int:
        """Patch ``source`` into the current image and return the cells written."""
        with self._lock:
            return patch(self._require_image(), start_row, start_column, source, transparent)

    def dump(self) -> str:
        with self._lock:
            return format_buffer(self._require_image())

    def print_image(self, file: Optional[TextIO] = None) -> None:
        with self._lock:
            print_buffer(self._require_image(), file=file)
