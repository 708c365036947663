"""Bounded, deterministic pixel sampling.

Small images are read in full. Larger ones are walked on a fixed grid with
step = ceil(sqrt(w * h / max_samples)) in both directions, row-major, so the
sample is spread over the whole image and identical dimensions always yield
the same coordinates. The grid may under-sample; it never over-samples and
never visits a pixel twice.
"""

import logging
import math

from dominant_color.core.types import Pixel, PixelSource

logger = logging.getLogger(__name__)

DEFAULT_MAX_SAMPLES = 4096


def grid_step(width: int, height: int, max_samples: int) -> int:
    """Grid step for an image of this size. 1 means every pixel."""
    if max_samples < 1:
        raise ValueError(f'max_samples must be >= 1, got {max_samples}')
    total = width * height
    if total <= max_samples:
        return 1
    return math.ceil(math.sqrt(total / max_samples))


def sample_pixels(source: PixelSource, max_samples: int = DEFAULT_MAX_SAMPLES) -> list[Pixel]:
    """Return at most max_samples pixels of source in row-major order."""
    width, height = source.width, source.height
    step = grid_step(width, height, max_samples)

    samples: list[Pixel] = []
    for y in range(0, height, step):
        for x in range(0, width, step):
            if len(samples) >= max_samples:
                break
            samples.append(source.pixel_at(x, y))
        if len(samples) >= max_samples:
            break

    logger.debug('sampled %d of %d pixels (step %d)', len(samples), width * height, step)
    return samples
