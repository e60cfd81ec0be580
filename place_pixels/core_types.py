# place_pixels/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidInputError

# Basic aliases

RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
HexStr = str

U8Image = NDArray[np.uint8]  # (H, W, 4) RGBA
U8Rows = NDArray[np.uint8]  # (N, 3) RGB rows
NameOf = Mapping[HexStr, str]  # "#rrggbb" -> human-readable name

# Value objects


@dataclass(frozen=True)
class PaletteItem:
    """Palette entry. Alpha is implicitly fully opaque."""

    rgb: RGBTuple
    name: str


@dataclass(frozen=True)
class Palette:
    """
    Ordered, immutable palette.

    Order is significant: on equal distance the earlier entry wins.
    """

    items: Tuple[PaletteItem, ...]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[PaletteItem]:
        return iter(self.items)

    def __getitem__(self, index: int) -> PaletteItem:
        return self.items[index]

    def rgb_array(self) -> U8Rows:
        """uint8 [P,3] array of palette colours in palette order."""
        if not self.items:
            return np.zeros((0, 3), dtype=np.uint8)
        return np.array([it.rgb for it in self.items], dtype=np.uint8)

    def name_of_hex(self) -> Dict[HexStr, str]:
        """Map '#rrggbb' -> name. First entry wins for duplicate colours."""
        out: Dict[HexStr, str] = {}
        for it in self.items:
            out.setdefault(rgb_to_hex(it.rgb), it.name)
        return out


# Small helpers


def rgb_to_hex(rgb: Sequence[int]) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{int(rgb[0]):02x}{int(rgb[1]):02x}{int(rgb[2]):02x}"


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """Parse '#rgb', '#rrggbb' or 'rrggbb' (case-insensitive) into an RGB tuple."""
    s = hex_str.strip().lower()
    if not s.startswith("#"):
        s = f"#{s}"
    if len(s) == 4:
        r, g, b = s[1], s[2], s[3]
        s = f"#{r}{r}{g}{g}{b}{b}"
    if len(s) != 7:
        raise ValueError(f"hex must be '#rrggbb' or '#rgb', got {hex_str!r}")
    try:
        return (int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))
    except ValueError:
        raise ValueError(f"invalid hex colour {hex_str!r}") from None


def coerce_to_rgb_tuple(value: Union[Sequence[int], NDArray[np.generic]]) -> RGBTuple:
    """
    Coerce a 3+ length sequence or array to an (int, int, int) RGB tuple.
    Extra channels (alpha) are ignored.
    """
    if len(value) < 3:  # type: ignore[arg-type]
        raise ValueError("sequence too small for RGB")
    return (int(value[0]), int(value[1]), int(value[2]))


def assert_u8_rgba_image(image: np.ndarray) -> U8Image:
    """Validate a uint8 (H,W,4) image and return it typed as U8Image."""
    if not isinstance(image, np.ndarray):
        raise InvalidInputError(f"expected numpy array, got {type(image).__name__}")
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[-1] != 4:
        raise InvalidInputError(
            f"expected uint8 (H,W,4) RGBA image, got {image.dtype} {image.shape}"
        )
    return image  # type: ignore[return-value]


__all__ = [
    # aliases / types
    "RGBTuple",
    "RGBATuple",
    "HexStr",
    "U8Image",
    "U8Rows",
    "NameOf",
    # value objects
    "PaletteItem",
    "Palette",
    # helpers
    "rgb_to_hex",
    "hex_to_rgb",
    "coerce_to_rgb_tuple",
    "assert_u8_rgba_image",
]
