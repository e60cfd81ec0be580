# place_pixels/quantize.py
from __future__ import annotations

"""
Palette quantization.

Every pixel with alpha != 0 is recoloured to the palette entry with the
smallest cube-sum distance; its alpha is kept. Pixels with alpha == 0 are
copied through untouched. Ties go to the earliest palette entry.
"""

from typing import Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from .colour_distance import cube_sum, cube_sum_matrix
from .constants import QUANTIZE_CHUNK
from .core_types import Palette, U8Image, assert_u8_rgba_image
from .errors import EmptyPaletteError


def _require_colours(palette: Palette) -> None:
    if len(palette) == 0:
        raise EmptyPaletteError()


def nearest_palette_index(rgb: Sequence[int], palette: Palette) -> int:
    """
    Brute-force nearest entry for one colour.

    Walks the palette in order and only replaces the best on a strictly
    smaller distance, so the first of several equal entries wins.
    """
    _require_colours(palette)
    best_idx = 0
    best = cube_sum(rgb, palette[0].rgb)
    for i, item in enumerate(palette):
        d = cube_sum(rgb, item.rgb)
        if d < best:
            best = d
            best_idx = i
    return best_idx


def nearest_palette_indices(
    src_rgb: np.ndarray, palette: Palette, chunk: int = QUANTIZE_CHUNK
) -> NDArray[np.intp]:
    """
    Vectorised nearest_palette_index for [N,3] rows.

    Ranks on the integer cube sum; the cube root is monotonic so the winner is
    the same. np.argmin returns the first minimum, matching the scalar tie-break.
    """
    _require_colours(palette)
    arr = np.asarray(src_rgb)
    rows = arr.reshape(-1, arr.shape[-1])[:, :3]
    pal_rgb = palette.rgb_array()
    out = np.empty(rows.shape[0], dtype=np.intp)
    step = max(1, int(chunk))
    for start in range(0, rows.shape[0], step):
        sl = rows[start : start + step]
        out[start : start + sl.shape[0]] = np.argmin(cube_sum_matrix(sl, pal_rgb), axis=1)
    return out


def quantize_rgba(
    rgba: U8Image, palette: Palette, chunk: Optional[int] = None
) -> U8Image:
    """
    Map an RGBA image onto the palette.

    Args:
      rgba   : uint8 [H,W,4]
      palette: non-empty Palette
      chunk  : unique colours per distance batch (default QUANTIZE_CHUNK)

    Returns:
      New uint8 [H,W,4] image. The input is not modified.

    Raises:
      EmptyPaletteError: palette has no entries.
      InvalidInputError: rgba is not a uint8 (H,W,4) array.
    """
    _require_colours(palette)
    img = assert_u8_rgba_image(rgba)
    out = img.copy()

    visible = img[..., 3] != 0
    if not np.any(visible):
        return out

    # Each distinct visible colour is searched once.
    uniq, inverse = np.unique(img[visible][:, :3], axis=0, return_inverse=True)
    idx = nearest_palette_indices(
        uniq, palette, chunk=QUANTIZE_CHUNK if chunk is None else chunk
    )
    pal_rgb = palette.rgb_array()
    out[visible, :3] = pal_rgb[idx][np.asarray(inverse).reshape(-1)]
    return out


__all__ = ["nearest_palette_index", "nearest_palette_indices", "quantize_rgba"]
