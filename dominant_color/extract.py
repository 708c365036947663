"""Dominant colour and transparency extraction.

Two pure operations over a decoded image:

    compute_dominant_color(source)    -> 'rrggbb'
    compute_has_transparency(source)  -> bool

`extract` computes both from one shared sample set. `source` is anything
`as_pixel_source` accepts: a PixelSource, a PIL image or a numpy array.
Failures raise DecodeError (bad pixel data) or UnsupportedBackendError (no
pixel access at all); both are ExtractionError.

No file or network I/O happens here except in `extract_files`, which opens
paths through a registered backend and records per-file failures instead of
raising, so one bad image never aborts the batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np
from PIL import Image

from dominant_color import registry
from dominant_color.backends.pillow import PillowPixelSource
from dominant_color.core.encode import rgb_to_hex
from dominant_color.core.env import ExtractionConfig
from dominant_color.core.errors import DecodeError, ExtractionError, UnsupportedBackendError
from dominant_color.core.quantize import dominant_rgb
from dominant_color.core.sampling import sample_pixels
from dominant_color.core.source import ArrayPixelSource
from dominant_color.core.transparency import has_transparency
from dominant_color.core.types import ExtractionResult, FileResult, Pixel, PixelSource

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ExtractionConfig()


def as_pixel_source(obj: Any) -> PixelSource:
    """Adapt a decoded image to the PixelSource contract.

    numpy arrays may be (h, w) or (h, w, c) with c in 1..4, dtype uint8, 16-bit
    unsigned (reduced to the high byte) or any integer dtype holding 0..255.
    """
    if isinstance(obj, PixelSource):
        return obj
    if isinstance(obj, Image.Image):
        return PillowPixelSource(obj)
    if isinstance(obj, np.ndarray):
        return ArrayPixelSource(obj)
    raise UnsupportedBackendError(f'No pixel access for {type(obj).__name__}')


def _samples(source: Any, config: ExtractionConfig) -> tuple[PixelSource, list[Pixel]]:
    src = as_pixel_source(source)
    if src.width <= 0 or src.height <= 0:
        raise DecodeError(f'Image has zero dimensions: {src.width}×{src.height}')
    return src, sample_pixels(src, config.max_samples)


def compute_dominant_color(source: Any, config: ExtractionConfig | None = None) -> str:
    """Hex code ('rrggbb') of the most common opaque colour bucket."""
    config = config or _DEFAULT_CONFIG
    _src, pixels = _samples(source, config)
    rgb = dominant_rgb(pixels, bits=config.bucket_bits, alpha_threshold=config.alpha_threshold)
    return rgb_to_hex(*rgb)


def compute_has_transparency(source: Any, config: ExtractionConfig | None = None) -> bool:
    """True if any sampled pixel is less than fully opaque."""
    config = config or _DEFAULT_CONFIG
    _src, pixels = _samples(source, config)
    return has_transparency(pixels, config.alpha_threshold)


def extract(source: Any, config: ExtractionConfig | None = None) -> ExtractionResult:
    """Compute both outputs from a single sample set."""
    config = config or _DEFAULT_CONFIG
    src, pixels = _samples(source, config)
    transparent = has_transparency(pixels, config.alpha_threshold)
    rgb = dominant_rgb(pixels, bits=config.bucket_bits, alpha_threshold=config.alpha_threshold)
    return ExtractionResult(
        dominant_color=rgb_to_hex(*rgb),
        has_transparency=transparent,
        width=src.width,
        height=src.height,
        samples=len(pixels),
    )


def image_metadata(source: Any, config: ExtractionConfig | None = None) -> dict[str, str | bool]:
    """Metadata entries for an image, leaving out whatever could not be computed.

    Returns {'dominant_color': 'rrggbb', 'has_transparency': bool}, or a subset
    of it. Failures are logged, not raised.
    """
    metadata: dict[str, str | bool] = {}
    try:
        metadata['dominant_color'] = compute_dominant_color(source, config)
    except ExtractionError as e:
        logger.warning('dominant colour skipped: %s', e)
    try:
        metadata['has_transparency'] = compute_has_transparency(source, config)
    except ExtractionError as e:
        logger.warning('transparency skipped: %s', e)
    return metadata


def extract_file(path: str, backend: str = 'pillow', config: ExtractionConfig | None = None) -> ExtractionResult:
    """Decode path with the named backend and extract both outputs."""
    source = registry.get(backend).open(path)
    return extract(source, config)


def extract_files(
    paths: Iterable[str],
    backend: str = 'pillow',
    config: ExtractionConfig | None = None,
) -> list[FileResult]:
    """Extract every path, recording failures per file."""
    results = []
    for path in paths:
        entry = FileResult(path=path, backend=backend)
        try:
            entry.result = extract_file(path, backend, config)
        except UnsupportedBackendError as e:
            logger.warning('%s: unsupported: %s', path, e)
            entry.error, entry.error_kind = str(e), 'unsupported'
        except DecodeError as e:
            logger.warning('%s: decode failed: %s', path, e)
            entry.error, entry.error_kind = str(e), 'decode'
        results.append(entry)
    return results
