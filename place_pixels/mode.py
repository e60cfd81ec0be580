# place_pixels/mode.py
from __future__ import annotations

from typing import Literal, cast

from .constants import MODES
from .errors import InvalidModeError

"""
Mode selection helpers.

Exports:
- Mode: Literal["convert_colors", "expand"]
- parse_mode(text) -> Mode, raising InvalidModeError for anything else.

Matching is exact; "Expand" or " expand" are rejected like any other string.
"""


Mode = Literal["convert_colors", "expand"]


def is_valid_mode(text: str) -> bool:
    return text in MODES


def parse_mode(text: str) -> Mode:
    """Return text as a Mode or raise InvalidModeError."""
    if not is_valid_mode(text):
        raise InvalidModeError(text, MODES)
    return cast(Mode, text)


__all__ = ["Mode", "is_valid_mode", "parse_mode"]
