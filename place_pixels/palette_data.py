# place_pixels/palette_data.py
from __future__ import annotations

"""
Palette definitions and builders.

Exports:
  PLACE_PALETTE: list[tuple[str, str]]  # [(hex, name), ...]
  build_palette(hex_name_pairs=PLACE_PALETTE) -> Palette
  palette_from_rgb(colours) -> Palette
  default_palette() -> Palette
"""

from functools import lru_cache
from typing import Iterable, List, Sequence, Tuple

from .constants import PLACE_PALETTE
from .core_types import Palette, PaletteItem, coerce_to_rgb_tuple, hex_to_rgb, rgb_to_hex


def build_palette(
    hex_name_pairs: Iterable[Tuple[str, str]] = PLACE_PALETTE,
) -> Palette:
    """Convert a list of (hex, name) into an ordered Palette."""
    items: List[PaletteItem] = [
        PaletteItem(rgb=hex_to_rgb(hx), name=name) for hx, name in hex_name_pairs
    ]
    return Palette(items=tuple(items))


def palette_from_rgb(colours: Iterable[Sequence[int]]) -> Palette:
    """
    Build an unnamed Palette from RGB triples, keeping order.
    Entries are named by their hex code.
    """
    items: List[PaletteItem] = []
    for c in colours:
        rgb = coerce_to_rgb_tuple(c)
        if not all(0 <= v <= 255 for v in rgb):
            raise ValueError(f"RGB channel out of range: {rgb}")
        items.append(PaletteItem(rgb=rgb, name=rgb_to_hex(rgb)))
    return Palette(items=tuple(items))


@lru_cache(maxsize=1)
def default_palette() -> Palette:
    """The built-in palette, built once per process."""
    return build_palette(PLACE_PALETTE)


__all__ = ["PLACE_PALETTE", "build_palette", "palette_from_rgb", "default_palette"]
