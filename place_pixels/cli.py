#!/usr/bin/env python3
"""
place_pixels.cli
Recolour an RGBA image to the r/place palette, or expand it 3x onto a
transparent grid.

Usage:
  place-pixels --mode [convert_colors|expand] --in-file INPUT --out-file OUTPUT [--debug]
  python -m place_pixels -m expand -i sprite.png -o sprite_3x.png

Modes:
  convert_colors : Every pixel with alpha != 0 takes the nearest palette colour
                   under the cube-sum metric. Alpha is preserved. Fully
                   transparent pixels are left as they are.
  expand         : Output is 3x wider and taller. Each input pixel sits in the
                   centre of its own 3x3 cell; the rest is transparent black.

Exit status:
  0 on success, 2 for an unknown mode (nothing is read or written),
  1 when the image cannot be loaded, processed or saved.
"""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import List, Optional, Sequence, Union

from . import __version__
from .constants import INVALID_MODE_MARKER, MODE_CONVERT_COLORS, MODES
from .core_types import Palette, U8Image
from .errors import InvalidModeError, PlacePixelsError
from .expand import expand_rgba
from .image_io import load_image_rgba, save_image_rgba
from .mode import Mode, parse_mode
from .palette_data import default_palette
from .quantize import quantize_rgba
from .utils import (
    colour_usage_report,
    count_alpha,
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    format_total_duration_compact,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
)

# CLI args


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        mode: raw mode string, validated later by run()
        in_file: Path to the source image
        out_file: Path for the result
        debug: bool for verbose details
    """
    parser = argparse.ArgumentParser(
        prog="place-pixels",
        description="Image colour changer and image expander.",
    )
    parser.add_argument(
        "-m",
        "--mode",
        required=True,
        metavar="MODE",
        help=f"Operation: {' or '.join(MODES)}.",
    )
    parser.add_argument(
        "-i", "--in-file", type=Path, required=True, help="Source image path"
    )
    parser.add_argument(
        "-o",
        "--out-file",
        type=Path,
        required=True,
        help="Destination image path; format follows the extension.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose details")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


# Processing


def _transform(
    mode: Mode, rgba: U8Image, palette: Palette, debug: bool
) -> U8Image:
    if mode == MODE_CONVERT_COLORS:
        print_config_line(
            "convert_colors", [("Palette size", len(palette))], debug=debug
        )
        return quantize_rgba(rgba, palette)
    return expand_rgba(rgba)


def run(
    mode: str,
    in_file: Union[str, Path],
    out_file: Union[str, Path],
    palette: Optional[Palette] = None,
    debug: bool = False,
) -> Path:
    """
    Process one image end-to-end:
      validate mode -> load -> transform -> save -> report.

    The mode is checked before any file is touched.
    """
    mode_effective = parse_mode(mode)
    src = Path(in_file)
    dst = Path(out_file)
    pal = default_palette() if palette is None else palette

    t_start = time.perf_counter()
    print_banner(src.name)
    log(f"Reading {src}")

    rgba_in = load_image_rgba(src)
    height, width = rgba_in.shape[0], rgba_in.shape[1]
    t_loaded = time.perf_counter()

    if debug:
        visible, transparent = count_alpha(rgba_in)
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Loaded", f"{width}x{height}"),
                    ("Alpha>0", visible),
                    ("Alpha=0", transparent),
                ]
            )
        )
        debug_log(f"mode: {mode_effective}")

    rgba_out = _transform(mode_effective, rgba_in, pal, debug)
    t_mapped = time.perf_counter()

    log(f"Saving {dst}")
    save_image_rgba(dst, rgba_out)
    t_saved = time.perf_counter()

    out_h, out_w = rgba_out.shape[0], rgba_out.shape[1]
    log(f"Mode: {mode_effective}")
    log(f"Wrote {dst.name} | size={out_w}x{out_h}")
    if mode_effective == MODE_CONVERT_COLORS:
        log("Colours used:")
        for hex_code, name, count in colour_usage_report(rgba_out, pal.name_of_hex()):
            log(f"  {hex_code}  {name}: {count:,}")
        log(f"Total pixels: {count_alpha(rgba_out)[0]:,}")

    if debug:
        debug_log(
            f"Total {format_total_duration_compact(t_saved - t_start)}  "
            f"(load={format_seconds_compact(t_loaded - t_start)}, "
            f"{mode_effective}={format_seconds_compact(t_mapped - t_loaded)}, "
            f"save={format_seconds_compact(t_saved - t_mapped)})"
        )
    else:
        log(f"Total time {format_total_duration_compact(t_saved - t_start)}")
    return dst


# Entry point


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point. Returns the process exit status.

    Every failure is reported on stderr; nothing is written for an unknown mode.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)
    try:
        run(args.mode, args.in_file, args.out_file, debug=args.debug)
    except InvalidModeError as e:
        error(f"{INVALID_MODE_MARKER}: {e}")
        return e.exit_code
    except PlacePixelsError as e:
        error(str(e))
        return e.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
