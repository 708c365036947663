"""Shared types for dominant-color: Pixel, PixelSource, BucketStats, ExtractionResult, Backend."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import NamedTuple, Protocol, runtime_checkable


class Pixel(NamedTuple):
    """One RGBA pixel, 8 bits per channel. a == 255 is fully opaque."""

    r: int
    g: int
    b: int
    a: int = 255


@runtime_checkable
class PixelSource(Protocol):
    """Read-only view of width x height pixels, borrowed for a single call."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def pixel_at(self, x: int, y: int) -> Pixel: ...


@dataclass
class BucketStats:
    """Population and running channel sums for one colour bucket."""

    count: int = 0
    r_sum: int = 0
    g_sum: int = 0
    b_sum: int = 0


@dataclass(frozen=True)
class ExtractionResult:
    """Both outputs of one extraction, computed from a shared sample set."""

    dominant_color: str  # 6 lowercase hex digits, no '#'
    has_transparency: bool
    width: int
    height: int
    samples: int

    def as_metadata(self) -> dict[str, str | bool]:
        return {'dominant_color': self.dominant_color, 'has_transparency': self.has_transparency}


class Backend:
    """A self-registering image decoding backend.

    Usage in a backend module:

        backend = Backend(name='pillow', help='Decode with Pillow')

        @backend.opener
        def open_image(path):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._open_fn: Callable[[str], PixelSource] | None = None

    def opener(self, fn: Callable[[str], PixelSource]) -> Callable[[str], PixelSource]:
        """Decorator to register the function that decodes a file into a PixelSource."""
        self._open_fn = fn
        return fn

    def open(self, path: str) -> PixelSource:
        """Decode the file at path with this backend."""
        if self._open_fn is None:
            raise RuntimeError(f'Backend {self.name} has no opener')
        return self._open_fn(path)


@dataclass
class FileResult:
    """Outcome for one file in a batch: either a result or the error that stopped it."""

    path: str
    backend: str
    result: ExtractionResult | None = None
    error: str | None = None
    error_kind: str | None = None  # 'decode' | 'unsupported'

    @property
    def ok(self) -> bool:
        return self.result is not None
