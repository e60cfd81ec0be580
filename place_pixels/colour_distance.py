# place_pixels/colour_distance.py
"""
Cube-sum colour distance.

For two colours the metric is

    (|dr|^3 + |dg|^3 + |db|^3) ** (1/3)

over the RGB channels only; alpha is ignored. Large single-channel differences
weigh more than under Euclidean distance, so the two disagree on which palette
entry is closest. Keep this exact formula.

Exports:
  cube_sum(a, b)               -> int
  cube_distance(a, b)          -> float
  cube_sum_matrix(src, pal)    -> int64 [N,P]
  cube_distance_matrix(src, pal) -> float64 [N,P]
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

_ONE_THIRD = 1.0 / 3.0


def cube_sum(a: Sequence[int], b: Sequence[int]) -> int:
    """Sum of absolute cubed channel differences over RGB."""
    total = 0
    for ch in range(3):
        d = int(a[ch]) - int(b[ch])
        total += abs(d * d * d)
    return total


def cube_distance(a: Sequence[int], b: Sequence[int]) -> float:
    """Cube root of cube_sum(a, b). Non-negative, symmetric, zero on identity."""
    return float(cube_sum(a, b)) ** _ONE_THIRD


def cube_sum_matrix(src_rgb: np.ndarray, pal_rgb: np.ndarray) -> NDArray[np.int64]:
    """
    Vectorised cube_sum.

    src_rgb: [N,3+] integer rows, pal_rgb: [P,3+] integer rows.
    Returns int64 [N,P]. Inputs are widened before subtracting so uint8 never wraps.
    """
    src = np.asarray(src_rgb)[..., :3].astype(np.int64, copy=False).reshape(-1, 3)
    pal = np.asarray(pal_rgb)[..., :3].astype(np.int64, copy=False).reshape(-1, 3)
    diff = src[:, None, :] - pal[None, :, :]
    return np.abs(diff * diff * diff).sum(axis=2)


def cube_distance_matrix(
    src_rgb: np.ndarray, pal_rgb: np.ndarray
) -> NDArray[np.float64]:
    """Vectorised cube_distance. Returns float64 [N,P]."""
    sums = cube_sum_matrix(src_rgb, pal_rgb).astype(np.float64)
    return np.power(sums, _ONE_THIRD)


__all__ = [
    "cube_sum",
    "cube_distance",
    "cube_sum_matrix",
    "cube_distance_matrix",
]
