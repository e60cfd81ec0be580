"""Shared fixtures: small palettes and PNG writers."""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from place_pixels.palette_data import palette_from_rgb


@pytest.fixture
def red_blue_palette():
    return palette_from_rgb([(200, 0, 0), (0, 0, 200)])


@pytest.fixture
def write_png(tmp_path: Path):
    """Write an RGBA array to a PNG under tmp_path and return its path."""

    def _write(rgba, name: str = 'in.png') -> Path:
        path = tmp_path / name
        Image.fromarray(np.asarray(rgba, dtype=np.uint8)).save(path)
        return path

    return _write
