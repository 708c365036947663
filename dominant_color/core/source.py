"""Array-backed pixel source.

Every backend ends up here: whatever decoded the file, the pixels are handed
over as a numpy array of shape (h, w) or (h, w, c) with c in 1..4
(grey, grey+alpha, RGB, RGBA). The array is kept in its native channel layout
and expanded to RGBA one pixel at a time, so only sampled pixels pay for it.

Paletted images keep their (h, w) index array plus a 256-entry RGBA lookup
table.

Accepted dtypes: uint8; 16-bit unsigned (any byte order), reduced to its high
byte; other integer dtypes whose values all lie in 0..255.
"""

import numpy as np

from dominant_color.core.errors import DecodeError
from dominant_color.core.types import Pixel


def to_pixel_array(array: np.ndarray) -> np.ndarray:
    """Validate and normalise to a (h, w, c) uint8 array without adding channels."""
    arr = np.asarray(array)
    if arr.dtype.kind == 'u' and arr.dtype.itemsize == 2:
        # 16-bit PNGs: keep the high byte
        arr = (arr.astype(np.uint16) >> 8).astype(np.uint8)
    elif arr.dtype != np.uint8:
        if arr.dtype.kind not in 'iu':
            raise DecodeError(f'Unsupported pixel dtype: {arr.dtype}')
        if arr.size and (int(arr.min()) < 0 or int(arr.max()) > 255):
            raise DecodeError(f'Pixel values outside 0..255 for dtype {arr.dtype}')
        arr = arr.astype(np.uint8)

    if arr.ndim == 2:
        arr = arr[:, :, np.newaxis]
    if arr.ndim != 3:
        raise DecodeError(f'Unsupported pixel array shape: {arr.shape}')

    h, w, channels = arr.shape
    if h == 0 or w == 0:
        raise DecodeError(f'Image has zero dimensions: {w}×{h}')
    if channels not in (1, 2, 3, 4):
        raise DecodeError(f'Unsupported channel count: {channels}')
    return arr


class ArrayPixelSource:
    """PixelSource over an in-memory pixel array, optionally paletted."""

    def __init__(self, array: np.ndarray, palette: np.ndarray | None = None):
        self._pixels = to_pixel_array(array)
        self._palette = None
        if palette is not None:
            lut = np.asarray(palette, dtype=np.uint8)
            if self._pixels.shape[2] != 1 or lut.shape != (256, 4):
                raise DecodeError(f'Bad palette image: pixels {self._pixels.shape}, palette {lut.shape}')
            self._palette = lut

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def nbytes(self) -> int:
        """Bytes held for pixel data, palette excluded."""
        return int(self._pixels.nbytes)

    def pixel_at(self, x: int, y: int) -> Pixel:
        # numpy would wrap negative indices silently
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f'Pixel ({x}, {y}) outside {self.width}×{self.height}')
        px = self._pixels[y, x]
        if self._palette is not None:
            r, g, b, a = self._palette[px[0]]
            return Pixel(int(r), int(g), int(b), int(a))
        if len(px) == 1:
            v = int(px[0])
            return Pixel(v, v, v, 255)
        if len(px) == 2:
            v = int(px[0])
            return Pixel(v, v, v, int(px[1]))
        if len(px) == 3:
            return Pixel(int(px[0]), int(px[1]), int(px[2]), 255)
        return Pixel(int(px[0]), int(px[1]), int(px[2]), int(px[3]))
