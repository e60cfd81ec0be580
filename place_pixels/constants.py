"""
Global palette and tunables used across the project.

- PLACE_PALETTE: the built-in 32 colour palette (hex, name)
- Expansion layout (EXPAND_SCALE, EXPAND_OFFSET, TRANSPARENT_RGBA)
- Mode names
- Quantizer batching
"""
from __future__ import annotations

from typing import List, Tuple

# =========================
# Built-in palette (hex, name)
# =========================
# Order matters: ties go to the earlier entry.
PLACE_PALETTE: List[Tuple[str, str]] = [
    ("#6d001a", "Burgundy"),
    ("#be0039", "Dark Red"),
    ("#ff4500", "Red"),
    ("#ffa800", "Orange"),
    ("#ffd635", "Yellow"),
    ("#fff8b8", "Pale Yellow"),
    ("#00a368", "Dark Green"),
    ("#00cc78", "Green"),
    ("#7eed56", "Light Green"),
    ("#00756f", "Dark Teal"),
    ("#009eaa", "Teal"),
    ("#00ccc0", "Light Teal"),
    ("#2450a4", "Dark Blue"),
    ("#3690ea", "Blue"),
    ("#51e9f4", "Light Blue"),
    ("#493ac1", "Indigo"),
    ("#6a5cff", "Periwinkle"),
    ("#94b3ff", "Lavender"),
    ("#811e9f", "Dark Purple"),
    ("#b44ac0", "Purple"),
    ("#e4abff", "Pale Purple"),
    ("#de107f", "Magenta"),
    ("#ff3881", "Pink"),
    ("#ff99aa", "Light Pink"),
    ("#6d482f", "Dark Brown"),
    ("#9c6926", "Brown"),
    ("#ffb470", "Beige"),
    ("#000000", "Black"),
    ("#515252", "Dark Gray"),
    ("#898d90", "Gray"),
    ("#d4d7d9", "Light Gray"),
    ("#ffffff", "White"),
]

# =========================
# Expansion
# =========================
EXPAND_SCALE: int = 3
EXPAND_OFFSET: int = 1  # placement cells sit at coord % EXPAND_SCALE == EXPAND_OFFSET
TRANSPARENT_RGBA: Tuple[int, int, int, int] = (0, 0, 0, 0)

# =========================
# Modes
# =========================
MODE_CONVERT_COLORS: str = "convert_colors"
MODE_EXPAND: str = "expand"
MODES: Tuple[str, ...] = (MODE_CONVERT_COLORS, MODE_EXPAND)
INVALID_MODE_MARKER: str = "INVALID_MODE"

# =========================
# Quantizer
# =========================
# Unique colours per distance batch; bounds the (N, P) int64 matrix.
QUANTIZE_CHUNK: int = 65_536
