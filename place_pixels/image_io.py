# place_pixels/image_io.py
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from .core_types import U8Image, assert_u8_rgba_image
from .errors import ImageLoadError, ImageSaveError
from .utils import warn

"""
Image I/O helpers (RGBA) with atomic output publishing.

Pillow picks the decoder from the file contents and the encoder from the
output file extension.
"""

PathLike = Union[str, Path]

# Encoders that cannot store an alpha channel.
_NO_ALPHA_FORMATS = {"JPEG", "MPEG", "EPS"}

# Single-channel integer modes holding 16-bit samples.
_WIDE_GREY_MODES = {"I", "I;16", "I;16L", "I;16B", "I;16N"}


def _default_file_mode() -> int:
    # mkstemp creates 0600; published files get the umask-derived mode.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _to_rgba8(im: Image.Image) -> Image.Image:
    """Convert to 8-bit RGBA, scaling 16-bit grey down by 1/257."""
    if im.mode in _WIDE_GREY_MODES:
        wide = np.asarray(im, dtype=np.float64)
        grey = np.clip(np.rint(wide / 257.0), 0, 255).astype(np.uint8)
        return Image.fromarray(grey).convert("RGBA")
    return im.convert("RGBA")


def load_image_rgba(path: PathLike) -> U8Image:
    """Decode any Pillow-readable image into a uint8 [H,W,4] RGBA array."""
    p = Path(path)
    try:
        with Image.open(p) as im:
            im.load()
            rgba = _to_rgba8(im)
    except FileNotFoundError:
        raise ImageLoadError(p, "file not found") from None
    except UnidentifiedImageError:
        raise ImageLoadError(p, "unrecognised image format") from None
    except Image.DecompressionBombError as e:
        raise ImageLoadError(p, str(e)) from e
    except (OSError, ValueError) as e:
        raise ImageLoadError(p, str(e) or type(e).__name__) from e
    return np.array(rgba, dtype=np.uint8)


def output_format_for(path: PathLike) -> str:
    """Pillow format name for the output path's extension."""
    p = Path(path)
    ext = p.suffix.lower()
    fmt = Image.registered_extensions().get(ext)
    if fmt is None or fmt not in Image.SAVE:
        raise ImageSaveError(p, f"unsupported output extension {ext or '(none)'!r}")
    return fmt


def save_image_rgba(path: PathLike, rgba: U8Image) -> Path:
    """
    Encode a uint8 [H,W,4] array to path.

    Writes a temporary file next to the target and renames it into place, so
    the target is either the complete new image or untouched.
    """
    p = Path(path)
    img = assert_u8_rgba_image(rgba)
    fmt = output_format_for(p)

    im = Image.fromarray(np.ascontiguousarray(img))
    if fmt in _NO_ALPHA_FORMATS:
        warn(f"{fmt} cannot store alpha; writing {p.name} as RGB")
        im = im.convert("RGB")

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{p.name}.", suffix=".tmp", dir=p.parent
        )
    except OSError as e:
        raise ImageSaveError(p, e.strerror or str(e)) from e

    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as fh:
            im.save(fh, format=fmt)
        os.chmod(tmp, _default_file_mode())
        os.replace(tmp, p)
    except (OSError, ValueError) as e:
        tmp.unlink(missing_ok=True)
        raise ImageSaveError(p, str(e) or type(e).__name__) from e
    return p


__all__ = [
    "load_image_rgba",
    "output_format_for",
    "save_image_rgba",
]
