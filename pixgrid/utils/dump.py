"""Human-readable dump of a buffer, one image row per line."""
from __future__ import annotations

import sys
from typing import Optional, TextIO

from ..buffer import PixelBuffer

RGB_TEMPLATE = "(%3d, %3d, %3d) "


def format_buffer(buffer: PixelBuffer) -> str:
    rgb = buffer.to_rgb_array()
    lines = []
    for row in rgb:
        lines.append("".join(RGB_TEMPLATE % (int(r), int(g), int(b)) for r, g, b in row))
    return "".join(line + "\n" for line in lines)


def print_buffer(buffer: PixelBuffer, file: Optional[TextIO] = None) -> None:
    """Print every pixel as an ``(r, g, b)`` triple, one row per line."""
    out = file if file is not None else sys.stdout
    out.write(format_buffer(buffer))
