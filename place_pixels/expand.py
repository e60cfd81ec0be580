# place_pixels/expand.py
from __future__ import annotations

"""
3x pixel expansion.

Each input pixel is placed on the centre of its own 3x3 cell; everything
else is transparent black. Output cells are walked column by column (x outer,
y inner) and input pixels are consumed in the same order (y fastest), which
puts input (x, y) at output (3x+1, 3y+1).
"""

from typing import Iterator, Tuple

import numpy as np
from numpy.typing import NDArray

from .constants import EXPAND_OFFSET, EXPAND_SCALE, TRANSPARENT_RGBA
from .core_types import U8Image, assert_u8_rgba_image
from .errors import ExpansionError


def _placement_axis(size: int) -> NDArray[np.bool_]:
    """Placement flags along one output axis: stride hit, not first, not last."""
    coords = np.arange(size)
    hit = (coords % EXPAND_SCALE) == EXPAND_OFFSET
    if size:
        hit[0] = False
        hit[-1] = False
    return hit


def placement_mask(out_width: int, out_height: int) -> NDArray[np.bool_]:
    """bool [out_height, out_width]; True where an input pixel is placed."""
    return _placement_axis(out_height)[:, None] & _placement_axis(out_width)[None, :]


def placement_coordinates(
    width: int, height: int
) -> Iterator[Tuple[int, int, int, int]]:
    """
    Yield (out_x, out_y, in_x, in_y) for every placement cell in traversal order.

    A stride-3 grid has exactly width * height placement cells, so the input
    counter ends on the last pixel.
    """
    out_w, out_h = width * EXPAND_SCALE, height * EXPAND_SCALE
    cols = np.flatnonzero(_placement_axis(out_w)).tolist()
    rows = np.flatnonzero(_placement_axis(out_h)).tolist()
    in_x = in_y = 0
    for out_x in cols:
        for out_y in rows:
            yield out_x, out_y, in_x, in_y
            in_y += 1
            if in_y >= height:
                in_y = 0
                in_x += 1


def expand_rgba(rgba: U8Image) -> U8Image:
    """
    Expand an RGBA image by EXPAND_SCALE in both directions.

    Args:
      rgba: uint8 [H,W,4]

    Returns:
      New uint8 [3H,3W,4] image with input pixels on placement cells and
      (0,0,0,0) elsewhere.

    Raises:
      ExpansionError: placement cell count differs from the input pixel count.
        With stride 3 the counts always agree; the guard only fires if the
        placement layout changes.
    """
    img = assert_u8_rgba_image(rgba)
    height, width = img.shape[0], img.shape[1]
    out_h, out_w = height * EXPAND_SCALE, width * EXPAND_SCALE

    out = np.empty((out_h, out_w, 4), dtype=np.uint8)
    out[...] = np.array(TRANSPARENT_RGBA, dtype=np.uint8)

    cols = np.flatnonzero(_placement_axis(out_w))
    rows = np.flatnonzero(_placement_axis(out_h))
    if cols.size * rows.size != width * height:
        raise ExpansionError(
            f"{cols.size * rows.size} placement cells for {width * height} input pixels"
        )
    if cols.size and rows.size:
        # Column-major walk on both sides: output column k takes input column k.
        out[np.ix_(rows, cols)] = img
    return out


__all__ = ["placement_mask", "placement_coordinates", "expand_rgba"]
