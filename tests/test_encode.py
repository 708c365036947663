"""Tests for dominant_color.core.encode — hex encoding and decoding."""

import pytest
from dominant_color.core.encode import hex_to_rgb, rgb_to_hex


class TestRgbToHex:
    def test_white(self):
        assert rgb_to_hex(255, 255, 255) == 'ffffff'

    def test_black(self):
        assert rgb_to_hex(0, 0, 0) == '000000'

    def test_zero_padded_per_channel(self):
        assert rgb_to_hex(0x13, 0x3F, 0x00) == '133f00'

    def test_lowercase_no_hash(self):
        out = rgb_to_hex(0xAB, 0xCD, 0xEF)
        assert out == 'abcdef'
        assert not out.startswith('#')

    def test_out_of_range_fails_loudly(self):
        with pytest.raises(AssertionError):
            rgb_to_hex(256, 0, 0)
        with pytest.raises(AssertionError):
            rgb_to_hex(0, -1, 0)


class TestHexToRgb:
    def test_plain(self):
        assert hex_to_rgb('133f00') == (0x13, 0x3F, 0x00)

    def test_with_hash(self):
        assert hex_to_rgb('#2563eb') == (37, 99, 235)

    def test_uppercase(self):
        assert hex_to_rgb('#FFFFFF') == (255, 255, 255)

    def test_short_hex(self):
        assert hex_to_rgb('#fff') == (255, 255, 255)

    def test_invalid_raises(self):
        for bad in ('invalid', '#ff', '#ffffffff', 'zzzzzz'):
            with pytest.raises(ValueError):
                hex_to_rgb(bad)

    def test_inverse_of_rgb_to_hex(self):
        assert hex_to_rgb(rgb_to_hex(1, 128, 254)) == (1, 128, 254)
