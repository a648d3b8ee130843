"""Command-line entry point for pixgrid.

This tool loads an image, optionally rotates it, block-average
downsamples it, patches another image over it, and saves the result as
PNG.

All processing occurs on NumPy arrays; Pillow is used only for
loading and saving.

Usage example:
    python -m pixgrid.main -i input.png -o output.png --rotate 90 --downsample 2 2
    python -m pixgrid.main -i long.png -o out.png --patch gray.png --at 0 1 --transparent 160 150 140
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .session import EditSession
from .utils.loader import load_image


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Build the pixgrid argument parser and parse ``argv``.

    ``--rotate`` and ``--downsample`` are parsed as plain integers; their
    validity is decided later by the operations themselves. ``--at`` and
    ``--transparent`` only take effect together with ``--patch``.

    Parameters
    ----------
    argv : list[str] | None
        Arguments to parse instead of ``sys.argv[1:]``.

    Returns
    -------
    argparse.Namespace
        Namespace with input/output paths and the requested edit steps.
    """
    parser = argparse.ArgumentParser(
        prog="pixgrid",
        description=(
            "Rotate, downsample, and patch images. Invalid operation "
            "parameters leave the image unchanged."
        ),
    )

    parser.add_argument("-i", "--input", required=True, help="Path to input image file")
    parser.add_argument("-o", "--output", required=True, help="Path to output PNG file")

    parser.add_argument(
        "--rotate",
        type=int,
        default=None,
        metavar="DEG",
        help="Clockwise rotation in degrees (>= 0, multiple of 90).",
    )
    parser.add_argument(
        "--downsample",
        type=int,
        nargs=2,
        default=None,
        metavar=("HS", "WS"),
        help="Block-average by HS rows and WS columns (must divide the image size).",
    )
    parser.add_argument(
        "--patch",
        type=str,
        default=None,
        metavar="PATH",
        help="Image to composite over the input after the other steps.",
    )
    parser.add_argument(
        "--at",
        type=int,
        nargs=2,
        default=(0, 0),
        metavar=("ROW", "COL"),
        help="Top-left cell of the patch (default: 0 0).",
    )
    parser.add_argument(
        "--transparent",
        type=int,
        nargs=3,
        default=None,
        metavar=("R", "G", "B"),
        help="Patch color that is skipped instead of copied (required with --patch).",
    )
    parser.add_argument(
        "--print",
        dest="print_image",
        action="store_true",
        help="Print the resulting pixels as (r, g, b) triples.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Check file paths and patch options before any image is loaded.

    Rotation and downsample values are not checked here: out-of-range
    values are accepted and leave the image unchanged.

    Parameters
    ----------
    ns : argparse.Namespace
        Result of :func:`parse_args`.

    Raises
    ------
    ValueError
        If the input or patch file is missing, or the transparent color is
        absent, out of 0..255, or given without ``--patch``.
    """
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")
    if ns.patch is not None:
        if ns.transparent is None:
            raise ValueError("--transparent is required with --patch")
        if any(c < 0 or c > 255 for c in ns.transparent):
            raise ValueError("--transparent components must be in 0..255")
        if not Path(ns.patch).exists():
            raise ValueError(f"Patch file not found: {ns.patch}")
    elif ns.transparent is not None:
        raise ValueError("--transparent only applies with --patch")


def main(argv: Optional[list[str]] = None) -> int:
    """Run load, rotate, downsample, patch and save on one image.

    Warnings such as a non-RGB input are always written to stderr;
    ``--verbose`` adds progress messages.

    Parameters
    ----------
    argv : list[str] | None
        Arguments to use instead of ``sys.argv[1:]``.

    Returns
    -------
    int
        0 when the output was written, 2 on an argument error. Errors
        reading or writing images are raised, not mapped to a code.
    """
    args = parse_args(argv)
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # 1) Load (Pillow -> PixelBuffer)
    session = EditSession()
    session.load(args.input)

    # 2) Rotate
    if args.rotate is not None:
        session.rotate(args.rotate)

    # 3) Downsample
    if args.downsample is not None:
        hs, ws = args.downsample
        session.down_sample(hs, ws)

    # 4) Patch
    if args.patch is not None:
        source = load_image(args.patch)
        row, col = args.at
        patched = session.patch(row, col, source, tuple(args.transparent))
        print(f"Patched pixels: {patched}")

    if args.print_image:
        session.print_image()

    # 5) Save (PixelBuffer -> Pillow PNG)
    session.save(args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
