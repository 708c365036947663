"""Transparency detection over a sample set.

Any pixel with alpha below the threshold marks the whole image as having
transparency. The consumer only needs a yes/no to decide whether a
placeholder background is safe to paint.
"""

from collections.abc import Iterable

from dominant_color.core.types import Pixel

OPAQUE = 255


def has_transparency(pixels: Iterable[Pixel], alpha_threshold: int = OPAQUE) -> bool:
    """True on the first pixel whose alpha is below alpha_threshold."""
    for px in pixels:
        if px.a < alpha_threshold:
            return True
    return False
