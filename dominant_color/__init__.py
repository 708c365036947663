"""Dominant colour and transparency extraction for image placeholders."""

from dominant_color.core.env import ExtractionConfig
from dominant_color.core.errors import DecodeError, ExtractionError, UnsupportedBackendError
from dominant_color.core.types import ExtractionResult, Pixel, PixelSource
from dominant_color.extract import (
    as_pixel_source,
    compute_dominant_color,
    compute_has_transparency,
    extract,
    extract_file,
    extract_files,
    image_metadata,
)

__all__ = [
    'DecodeError',
    'ExtractionConfig',
    'ExtractionError',
    'ExtractionResult',
    'Pixel',
    'PixelSource',
    'UnsupportedBackendError',
    'as_pixel_source',
    'compute_dominant_color',
    'compute_has_transparency',
    'extract',
    'extract_file',
    'extract_files',
    'image_metadata',
]
