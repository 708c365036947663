"""Decode images with OpenCV.

Reads the file with cv2.imdecode(IMREAD_UNCHANGED) so an alpha channel
survives, then reorders BGR/BGRA to RGB/RGBA; grey arrays are used as they
are. 16-bit images keep their high byte, the same reduction the pillow
backend applies to 16-bit grey and Pillow itself applies to 16-bit colour.

For lossless formats (PNG, BMP, TIFF) this backend and the pillow backend
return the same RGBA value at every coordinate. JPEG decoding can differ by a
few levels between libjpeg builds, so results there may not be identical.

Requires opencv-python-headless.

Example:
    dominant-color extract logo.png --backend opencv
"""

import numpy as np

from dominant_color.core.errors import DecodeError, UnsupportedBackendError
from dominant_color.core.source import ArrayPixelSource
from dominant_color.core.types import Backend

backend = Backend(
    name='opencv',
    help='Decode with OpenCV (cv2.imdecode, alpha preserved). Needs opencv-python-headless.',
)


def _cv2():
    try:
        import cv2
    except ImportError as e:
        raise UnsupportedBackendError('opencv backend: pip install opencv-python-headless') from e
    return cv2


class OpenCVPixelSource(ArrayPixelSource):
    """PixelSource over an OpenCV image array (BGR channel order)."""

    def __init__(self, image: np.ndarray | None):
        if image is None:
            raise DecodeError('OpenCV could not decode the image')
        cv2 = _cv2()
        if image.ndim == 2:
            code = None
        elif image.ndim == 3 and image.shape[2] == 3:
            code = cv2.COLOR_BGR2RGB
        elif image.ndim == 3 and image.shape[2] == 4:
            code = cv2.COLOR_BGRA2RGBA
        else:
            raise DecodeError(f'Unsupported OpenCV image shape: {image.shape}')
        if image.shape[0] == 0 or image.shape[1] == 0:
            raise DecodeError(f'Image has zero dimensions: {image.shape[1]}×{image.shape[0]}')
        super().__init__(image if code is None else cv2.cvtColor(image, code))


@backend.opener
def open_image(path: str) -> OpenCVPixelSource:
    cv2 = _cv2()
    try:
        data = np.fromfile(path, dtype=np.uint8)
    except OSError as e:
        raise DecodeError(f'{path}: {e}') from e
    if data.size == 0:
        raise DecodeError(f'{path}: empty file')
    try:
        image = cv2.imdecode(data, cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        raise DecodeError(f'{path}: {e}') from e
    if image is None:
        raise DecodeError(f'{path}: OpenCV could not decode the image')
    return OpenCVPixelSource(image)
