# place_pixels/__init__.py
"""
place_pixels package.

Purpose:
  Recolour images to the r/place palette and expand pixel art 3x onto a
  transparent grid. See place_pixels.cli for the command line.

Public API:
  quantize_rgba   : palette quantization of a uint8 [H,W,4] image.
  expand_rgba     : 3x expansion of a uint8 [H,W,4] image.
  cube_distance   : the colour distance used for quantization.
  build_palette   : Palette from (hex, name) pairs.
  default_palette : the built-in 32 colour palette.
  load_image_rgba / save_image_rgba : Pillow-backed image I/O.

Quick start:
  from place_pixels import default_palette, load_image_rgba, quantize_rgba
  out = quantize_rgba(load_image_rgba("in.png"), default_palette())
"""

__version__ = "0.1.0"

from . import colour_distance
from . import core_types
from . import errors
from . import palette_data

from .colour_distance import cube_distance  # noqa: E402,F401
from .core_types import Palette, PaletteItem  # noqa: E402,F401
from .errors import (  # noqa: E402,F401
    EmptyPaletteError,
    ExpansionError,
    ImageLoadError,
    ImageSaveError,
    InvalidInputError,
    InvalidModeError,
    PlacePixelsError,
)
from .expand import expand_rgba  # noqa: E402,F401
from .image_io import load_image_rgba, save_image_rgba  # noqa: E402,F401
from .palette_data import build_palette, default_palette  # noqa: E402,F401
from .quantize import quantize_rgba  # noqa: E402,F401

__all__ = [
    "__version__",
    "colour_distance",
    "core_types",
    "errors",
    "palette_data",
    "cube_distance",
    "Palette",
    "PaletteItem",
    "PlacePixelsError",
    "InvalidModeError",
    "ImageLoadError",
    "ImageSaveError",
    "InvalidInputError",
    "EmptyPaletteError",
    "ExpansionError",
    "expand_rgba",
    "load_image_rgba",
    "save_image_rgba",
    "build_palette",
    "default_palette",
    "quantize_rgba",
]
