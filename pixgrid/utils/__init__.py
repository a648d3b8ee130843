"""Utility functions for pixgrid.

Modules:
- loader: Load/save between image files and PixelBuffer via Pillow.
- dump: Fixed-width (r, g, b) text rendering for manual inspection.
"""
from .loader import load_image, save_image
from .dump import format_buffer, print_buffer

__all__ = [
    "load_image",
    "save_image",
    "format_buffer",
    "print_buffer",
]
