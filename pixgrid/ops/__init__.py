"""Buffer transforms and a unified entry-point for shape-changing ops.

Exported API
------------
- apply_op(buffer, method, **params)
- rotate, rotate_once, down_sample, patch

Supported methods for ``apply_op``
----------------------------------
- "rotate"     : clockwise rotation, ``degree`` (multiple of 90, >= 0)
- "downsample" : block-average, ``height_scale`` and ``width_scale``

Implementation notes
--------------------
Invalid parameters never raise: the input buffer is returned unchanged.
``patch`` is not dispatched here because it writes into its destination
and returns a count instead of a new buffer.
"""
from __future__ import annotations

from typing import Literal

from ..buffer import PixelBuffer
from .rotate import rotate, rotate_once
from .downsample import down_sample
from .patch import patch


def apply_op(
    buffer: PixelBuffer,
    method: Literal["rotate", "downsample"],
    **params: int,
) -> PixelBuffer:
    """Apply the named operation to a buffer.

    Parameters
    ----------
    buffer : PixelBuffer
        Input image.
    method : str
        Operation name.
    **params
        Keyword arguments of the operation.

    Returns
    -------
    PixelBuffer
        Result buffer (``buffer`` itself when the parameters are invalid).
    """
    m = method.lower()
    if m == "rotate":
        _require(m, params, "degree")
        return rotate(buffer, params["degree"])
    if m == "downsample":
        _require(m, params, "height_scale", "width_scale")
        return down_sample(buffer, params["height_scale"], params["width_scale"])

    raise ValueError(f"Unknown operation: {method}")


def _require(method: str, params: dict, *names: str) -> None:
    missing = [n for n in names if n not in params]
    if missing:
        raise ValueError(f"{method} requires parameter(s): {', '.join(missing)}")


__all__ = ["apply_op", "rotate", "rotate_once", "down_sample", "patch"]
