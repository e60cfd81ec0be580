"""Tests for place_pixels.image_io: Pillow load/save and atomic publish."""

import numpy as np
import pytest
from PIL import Image

from place_pixels.errors import ImageLoadError, ImageSaveError
from place_pixels.image_io import load_image_rgba, output_format_for, save_image_rgba


class TestLoad:
    def test_rgba_roundtrip_png(self, write_png, tmp_path):
        img = np.array([[[1, 2, 3, 4], [5, 6, 7, 0]]], dtype=np.uint8)
        src = write_png(img)
        loaded = load_image_rgba(src)
        assert loaded.dtype == np.uint8
        assert loaded.shape == (1, 2, 4)
        assert np.array_equal(loaded, img)

    def test_rgb_image_gets_opaque_alpha(self, tmp_path):
        path = tmp_path / 'rgb.png'
        Image.new('RGB', (2, 3), (10, 20, 30)).save(path)
        loaded = load_image_rgba(path)
        assert loaded.shape == (3, 2, 4)
        assert (loaded[..., 3] == 255).all()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageLoadError) as exc:
            load_image_rgba(tmp_path / 'nope.png')
        assert 'nope.png' in str(exc.value)

    def test_not_an_image(self, tmp_path):
        path = tmp_path / 'junk.png'
        path.write_bytes(b'not a png at all')
        with pytest.raises(ImageLoadError):
            load_image_rgba(path)

    def test_load_error_is_oserror(self, tmp_path):
        with pytest.raises(OSError):
            load_image_rgba(tmp_path / 'missing.png')

    def test_oversized_image_is_load_error(self, tmp_path, monkeypatch):
        path = tmp_path / 'big.png'
        Image.new('RGBA', (100, 100)).save(path)
        monkeypatch.setattr(Image, 'MAX_IMAGE_PIXELS', 10)
        with pytest.raises(ImageLoadError) as exc:
            load_image_rgba(path)
        assert 'big.png' in str(exc.value)

    def test_16bit_grey_scaled_to_8bit(self, tmp_path):
        path = tmp_path / 'grey16.png'
        Image.fromarray(np.full((2, 2), 32896, dtype=np.uint16)).save(path)
        loaded = load_image_rgba(path)
        assert loaded.shape == (2, 2, 4)
        assert loaded[0, 0].tolist() == [128, 128, 128, 255]

    def test_16bit_grey_extremes(self, tmp_path):
        path = tmp_path / 'grey16.png'
        Image.fromarray(np.array([[0, 65535]], dtype=np.uint16)).save(path)
        loaded = load_image_rgba(path)
        assert loaded[0, 0].tolist() == [0, 0, 0, 255]
        assert loaded[0, 1].tolist() == [255, 255, 255, 255]


class TestSave:
    def test_writes_png(self, tmp_path):
        img = np.zeros((2, 2, 4), dtype=np.uint8)
        img[0, 0] = (255, 69, 0, 255)
        dst = save_image_rgba(tmp_path / 'out.png', img)
        assert dst.exists()
        assert np.array_equal(np.array(Image.open(dst)), img)

    def test_no_temp_files_left(self, tmp_path):
        save_image_rgba(tmp_path / 'out.png', np.zeros((1, 1, 4), dtype=np.uint8))
        assert [p.name for p in tmp_path.iterdir()] == ['out.png']

    def test_replaces_existing(self, tmp_path):
        dst = tmp_path / 'out.png'
        dst.write_bytes(b'old')
        save_image_rgba(dst, np.full((1, 1, 4), 9, dtype=np.uint8))
        assert np.array(Image.open(dst)).tolist() == [[[9, 9, 9, 9]]]

    def test_jpeg_drops_alpha(self, tmp_path):
        dst = save_image_rgba(tmp_path / 'out.jpg', np.full((4, 4, 4), 128, dtype=np.uint8))
        assert Image.open(dst).mode == 'RGB'

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ImageSaveError) as exc:
            save_image_rgba(tmp_path / 'no' / 'such' / 'out.png', np.zeros((1, 1, 4), dtype=np.uint8))
        assert 'out.png' in str(exc.value)

    def test_unknown_extension(self, tmp_path):
        with pytest.raises(ImageSaveError):
            save_image_rgba(tmp_path / 'out.notaformat', np.zeros((1, 1, 4), dtype=np.uint8))
        assert list(tmp_path.iterdir()) == []

    def test_output_format_for(self):
        assert output_format_for('a/b/c.PNG') == 'PNG'
        assert output_format_for('x.gif') == 'GIF'
