"""Tests for dominant_color.backends.pillow — PIL images as pixel sources."""

from pathlib import Path

import numpy as np
import pytest
from dominant_color.backends.pillow import PillowPixelSource, open_image
from dominant_color.core.errors import DecodeError
from dominant_color.core.types import Pixel
from PIL import Image


def _paletted(size: tuple[int, int], index: int) -> Image.Image:
    img = Image.new('P', size, index)
    img.putpalette([255, 0, 0, 0, 0, 255])
    return img


class TestPillowPixelSource:
    def test_rgb_is_opaque(self):
        src = PillowPixelSource(Image.new('RGB', (3, 2), (1, 2, 3)))
        assert (src.width, src.height) == (3, 2)
        assert src.pixel_at(2, 1) == Pixel(1, 2, 3, 255)

    def test_rgba_keeps_alpha(self):
        img = Image.new('RGBA', (2, 2), (10, 20, 30, 255))
        img.putpixel((1, 0), (10, 20, 30, 0))
        src = PillowPixelSource(img)
        assert src.pixel_at(0, 0).a == 255
        assert src.pixel_at(1, 0).a == 0

    def test_greyscale(self):
        src = PillowPixelSource(Image.new('L', (1, 1), 99))
        assert src.pixel_at(0, 0) == Pixel(99, 99, 99, 255)

    def test_palette_transparency_index(self):
        img = _paletted((2, 1), 0)
        img.putpixel((1, 0), 1)
        img.info['transparency'] = 1
        src = PillowPixelSource(img)
        assert src.pixel_at(0, 0) == Pixel(255, 0, 0, 255)
        assert src.pixel_at(1, 0).a == 0

    def test_zero_size(self):
        with pytest.raises(DecodeError):
            PillowPixelSource(Image.new('RGB', (0, 0)))

    def test_out_of_bounds(self):
        src = PillowPixelSource(Image.new('RGB', (2, 2)))
        with pytest.raises(IndexError):
            src.pixel_at(2, 0)

    def test_does_not_retain_mutable_view_of_caller_image(self):
        img = Image.new('RGB', (1, 1), (0, 0, 0))
        src = PillowPixelSource(img)
        img.putpixel((0, 0), (255, 255, 255))
        assert src.pixel_at(0, 0) == Pixel(0, 0, 0, 255)

    def test_grey_alpha(self):
        src = PillowPixelSource(Image.new('LA', (1, 1), (40, 90)))
        assert src.pixel_at(0, 0) == Pixel(40, 40, 40, 90)

    def test_palette_alpha_table(self):
        img = _paletted((2, 1), 0)
        img.putpixel((1, 0), 1)
        img.info['transparency'] = b'\xff\x40'
        src = PillowPixelSource(img)
        assert src.pixel_at(0, 0) == Pixel(255, 0, 0, 255)
        assert src.pixel_at(1, 0) == Pixel(0, 0, 255, 0x40)

    def test_palette_kept_as_indices(self):
        src = PillowPixelSource(_paletted((100, 50), 1))
        assert src.nbytes == 100 * 50
        assert src.pixel_at(99, 49) == Pixel(0, 0, 255, 255)

    def test_rgb_not_expanded_to_rgba(self):
        src = PillowPixelSource(Image.new('RGB', (100, 50)))
        assert src.nbytes == 100 * 50 * 3


class TestSixteenBitGrey:
    def test_high_byte_kept(self):
        img = Image.fromarray(np.full((4, 4), 0x8000, dtype=np.uint16))
        assert img.mode.startswith('I;16')
        src = PillowPixelSource(img)
        assert src.pixel_at(3, 3) == Pixel(128, 128, 128, 255)

    def test_32_bit_int_mode(self):
        src = PillowPixelSource(Image.new('I', (2, 2), 0x8000))
        assert src.pixel_at(0, 0) == Pixel(128, 128, 128, 255)

    def test_png_round_trip(self, tmp_path: Path):
        path = tmp_path / 'grey16.png'
        Image.fromarray(np.full((4, 4), 0x8000, dtype=np.uint16)).save(path)
        assert open_image(str(path)).pixel_at(0, 0) == Pixel(128, 128, 128, 255)


class TestAnimatedFirstFrame:
    def _write_animation(self, path: Path) -> Path:
        first = _paletted((4, 4), 0)
        second = _paletted((4, 4), 1)
        first.save(path, save_all=True, append_images=[second], duration=100, loop=0)
        return path

    def test_first_frame_only(self, tmp_path: Path):
        path = self._write_animation(tmp_path / 'anim.gif')
        src = open_image(str(path))
        assert src.pixel_at(0, 0)[:3] == (255, 0, 0)

    def test_caller_frame_position_restored(self, tmp_path: Path):
        path = self._write_animation(tmp_path / 'anim.gif')
        with Image.open(path) as img:
            img.seek(1)
            src = PillowPixelSource(img)
            assert img.tell() == 1
        assert src.pixel_at(0, 0)[:3] == (255, 0, 0)


class TestOpenImage:
    def test_png(self, tmp_path: Path):
        path = tmp_path / 'a.png'
        Image.new('RGBA', (5, 4), (9, 8, 7, 6)).save(path)
        src = open_image(str(path))
        assert (src.width, src.height) == (5, 4)
        assert src.pixel_at(4, 3) == Pixel(9, 8, 7, 6)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(DecodeError):
            open_image(str(tmp_path / 'nope.png'))

    def test_not_an_image(self, tmp_path: Path):
        path = tmp_path / 'bad.png'
        path.write_bytes(b'\x00\x01garbage')
        with pytest.raises(DecodeError):
            open_image(str(path))

    def test_truncated_png(self, tmp_path: Path):
        path = tmp_path / 'cut.png'
        Image.new('RGB', (64, 64), (1, 2, 3)).save(path)
        data = path.read_bytes()
        path.write_bytes(data[: len(data) // 2])
        with pytest.raises(DecodeError):
            open_image(str(path))
