"""Tests for dominant_color.core.transparency."""

from dominant_color.core.transparency import has_transparency
from dominant_color.core.types import Pixel


class TestHasTransparency:
    def test_all_opaque(self):
        assert has_transparency([Pixel(1, 2, 3, 255)] * 10) is False

    def test_one_translucent_pixel(self):
        pixels = [Pixel(0, 0, 0, 255)] * 10 + [Pixel(0, 0, 0, 254)]
        assert has_transparency(pixels) is True

    def test_fully_transparent(self):
        assert has_transparency([Pixel(0, 0, 0, 0)]) is True

    def test_empty(self):
        assert has_transparency([]) is False

    def test_short_circuits(self):
        seen = []

        def gen():
            for px in [Pixel(0, 0, 0, 255), Pixel(0, 0, 0, 0), Pixel(0, 0, 0, 255)]:
                seen.append(px)
                yield px

        assert has_transparency(gen()) is True
        assert len(seen) == 2

    def test_threshold_tolerates_near_opaque(self):
        pixels = [Pixel(0, 0, 0, 253)]
        assert has_transparency(pixels, alpha_threshold=250) is False
        assert has_transparency(pixels, alpha_threshold=254) is True
