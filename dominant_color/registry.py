"""Decoding backends by name.

Each module in dominant_color/backends/ defines one `backend` object; this
map is the single place that lists them. The CLI's --backend choices and
DOMINANT_COLOR_BACKEND are checked against it.
"""

from dominant_color.backends import opencv, pillow
from dominant_color.core.types import Backend

BACKENDS: dict[str, Backend] = {b.name: b for b in (pillow.backend, opencv.backend)}


def get(name: str) -> Backend:
    """Get a backend by name."""
    if name not in BACKENDS:
        raise KeyError(f'Unknown backend: {name}. Available: {", ".join(sorted(BACKENDS))}')
    return BACKENDS[name]


def all_backends() -> dict[str, Backend]:
    """Return all backends, keyed by name."""
    return dict(BACKENDS)
