"""Colour bucketing and dominant bucket selection.

Each pixel's R, G and B are truncated to their top `bits` bits. The three
truncated values are packed into one integer key, R highest, so comparing keys
compares truncated R, then G, then B. Every bucket counts its pixels and sums
their true channel values.

Only opaque pixels (alpha >= alpha_threshold) vote. If the sample has no opaque
pixel at all, every pixel votes so a colour is always produced.

The dominant bucket is the most populous one; ties go to the lowest key. Its
representative colour is the per-channel mean, rounded half up.
"""

import logging
from collections.abc import Sequence

import numpy as np

from dominant_color.core.types import BucketStats, Pixel

logger = logging.getLogger(__name__)

DEFAULT_BUCKET_BITS = 4


def _check_bits(bits: int) -> None:
    if not 1 <= bits <= 8:
        raise ValueError(f'bucket bits must be between 1 and 8, got {bits}')


def bucket_key(r: int, g: int, b: int, bits: int = DEFAULT_BUCKET_BITS) -> int:
    """Pack the top `bits` bits of each channel into one sortable key."""
    _check_bits(bits)
    shift = 8 - bits
    return ((r >> shift) << (2 * bits)) | ((g >> shift) << bits) | (b >> shift)


def quantize(
    pixels: Sequence[Pixel],
    bits: int = DEFAULT_BUCKET_BITS,
    alpha_threshold: int = 255,
) -> dict[int, BucketStats]:
    """Bucket the voting pixels. Returns {key: BucketStats}, empty for no pixels."""
    _check_bits(bits)
    if len(pixels) == 0:
        return {}

    arr = np.asarray(pixels, dtype=np.int64).reshape(-1, 4)
    voters = arr[arr[:, 3] >= alpha_threshold]
    if len(voters) == 0:
        logger.debug('no opaque pixels in %d samples, all pixels vote', len(arr))
        voters = arr

    shift = 8 - bits
    rgb = voters[:, :3]
    keys = ((rgb[:, 0] >> shift) << (2 * bits)) | ((rgb[:, 1] >> shift) << bits) | (rgb[:, 2] >> shift)

    unique, inverse, counts = np.unique(keys, return_inverse=True, return_counts=True)
    sums = np.zeros((len(unique), 3), dtype=np.int64)
    np.add.at(sums, inverse.reshape(-1), rgb)

    buckets: dict[int, BucketStats] = {}
    for key, count, (r_sum, g_sum, b_sum) in zip(unique, counts, sums):
        buckets[int(key)] = BucketStats(count=int(count), r_sum=int(r_sum), g_sum=int(g_sum), b_sum=int(b_sum))
    logger.debug('%d voting pixels in %d buckets', len(voters), len(buckets))
    return buckets


def _mean_channel(total: int, count: int) -> int:
    # floor(total / count + 0.5) in integers
    value = (2 * total + count) // (2 * count)
    return min(255, max(0, value))


def select_dominant(buckets: dict[int, BucketStats]) -> tuple[int, int, int]:
    """Representative RGB of the most populous bucket, lowest key on ties."""
    if not buckets:
        raise ValueError('cannot select a dominant colour from no buckets')
    key = min(buckets, key=lambda k: (-buckets[k].count, k))
    stats = buckets[key]
    return (
        _mean_channel(stats.r_sum, stats.count),
        _mean_channel(stats.g_sum, stats.count),
        _mean_channel(stats.b_sum, stats.count),
    )


def dominant_rgb(
    pixels: Sequence[Pixel],
    bits: int = DEFAULT_BUCKET_BITS,
    alpha_threshold: int = 255,
) -> tuple[int, int, int]:
    """Quantize then select. Raises ValueError for an empty pixel sequence."""
    return select_dominant(quantize(pixels, bits=bits, alpha_threshold=alpha_threshold))
