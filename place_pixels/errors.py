# place_pixels/errors.py
"""
Error types raised by place_pixels.

Library code raises these; only the CLI turns them into exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union


class PlacePixelsError(Exception):
    """Base class for all place_pixels failures."""

    exit_code = 1


class InvalidModeError(PlacePixelsError, ValueError):
    """Mode string matches no known operation."""

    exit_code = 2

    def __init__(self, mode: str, valid: Sequence[str] = ()) -> None:
        self.mode = mode
        self.valid = tuple(valid)
        msg = f"invalid mode {mode!r}"
        if self.valid:
            msg += f" (expected one of: {', '.join(self.valid)})"
        super().__init__(msg)


class _ImageFileError(PlacePixelsError, OSError):
    action = "access"

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None) -> None:
        self.path = Path(path)
        self.reason = reason
        msg = f"cannot {self.action} image {str(self.path)!r}"
        if reason:
            msg += f": {reason}"
        # OSError's multi-arg constructor would reinterpret args as errno.
        super().__init__(msg)

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ImageLoadError(_ImageFileError):
    """Source image missing, unreadable, or undecodable."""

    action = "load"


class ImageSaveError(_ImageFileError):
    """Destination image could not be written."""

    action = "save"


class InvalidInputError(PlacePixelsError, ValueError):
    """Input data cannot be processed."""


class EmptyPaletteError(InvalidInputError):
    """Quantization requested with a palette that has no colours."""

    def __init__(self, message: str = "palette is empty; nothing to quantize to") -> None:
        super().__init__(message)


class ExpansionError(InvalidInputError):
    """Expansion placement cells do not match the input pixel count."""


__all__ = [
    "PlacePixelsError",
    "InvalidModeError",
    "ImageLoadError",
    "ImageSaveError",
    "InvalidInputError",
    "EmptyPaletteError",
    "ExpansionError",
]
