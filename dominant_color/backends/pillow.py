"""Decode images with Pillow (default backend).

Opens anything Pillow can read. Pixels stay in the frame's own layout and are
expanded to RGBA only when sampled:
  - L, LA, RGB, RGBA are used as they are.
  - 16-bit grey (I;16*, I) keeps the high byte, the same reduction the opencv
    backend applies, instead of Pillow's clip-to-255 conversion.
  - Palette images keep their index array plus a 256-entry RGBA table built
    by Pillow's own P -> RGBA conversion, so a transparency index (GIF,
    paletted PNG) keeps alpha 0.
  - Any other mode is converted to RGBA up front.

Animated images contribute their first frame only.

Example:
    dominant-color extract photo.jpg --backend pillow
"""

import numpy as np
from PIL import Image

from dominant_color.core.errors import DecodeError
from dominant_color.core.source import ArrayPixelSource
from dominant_color.core.types import Backend

backend = Backend(
    name='pillow',
    help='Decode with Pillow. Handles JPEG, PNG, GIF, WebP and friends.',
)

_NATIVE_MODES = {'L', 'LA', 'RGB', 'RGBA'}


def _palette_lut(image: Image.Image) -> np.ndarray | None:
    """RGBA value of every palette index, or None if the image carries no palette."""
    if image.palette is None:
        return None
    rawmode = image.palette.mode
    entries = image.getpalette(rawmode)
    if not entries:
        return None
    lut = Image.new('P', (256, 1))
    lut.putdata(range(256))
    lut.putpalette(entries, rawmode)
    if 'transparency' in image.info:
        lut.info['transparency'] = image.info['transparency']
    return np.asarray(lut.convert('RGBA'))[0]


def _frame_pixels(image: Image.Image) -> tuple[np.ndarray, np.ndarray | None]:
    """Pixel array (copied out of Pillow) and optional palette for the current frame."""
    image.load()
    mode = image.mode
    if mode in _NATIVE_MODES or mode.startswith('I;16'):
        return np.asarray(image), None
    if mode == 'I':
        # 16-bit greyscale decoded into 32-bit ints
        return np.clip(np.asarray(image), 0, 0xFFFF).astype(np.uint16), None
    if mode == 'P':
        lut = _palette_lut(image)
        if lut is not None:
            return np.asarray(image), lut
    return np.asarray(image.convert('RGBA')), None


class PillowPixelSource(ArrayPixelSource):
    """PixelSource over the first frame of a PIL image."""

    def __init__(self, image: Image.Image):
        width, height = image.size
        if width == 0 or height == 0:
            raise DecodeError(f'Image has zero dimensions: {width}×{height}')

        # Leave the caller's frame position as it was
        frame = image.tell()
        try:
            if frame != 0:
                image.seek(0)
            pixels, palette = _frame_pixels(image)
        except (OSError, ValueError, EOFError) as e:
            raise DecodeError(f'Pillow could not read pixels: {e}') from e
        finally:
            if frame != 0:
                image.seek(frame)

        super().__init__(pixels, palette=palette)


@backend.opener
def open_image(path: str) -> PillowPixelSource:
    try:
        with Image.open(path) as img:
            return PillowPixelSource(img)
    except (OSError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(f'{path}: {e}') from e
