"""Failure taxonomy for dominant colour extraction.

All errors are local to one image. Callers processing a batch catch
ExtractionError per image and carry on with the rest.
"""


class ExtractionError(Exception):
    """Base class for anything that stops an extraction from producing a result."""


class DecodeError(ExtractionError):
    """The image cannot report valid dimensions or pixel data."""


class UnsupportedBackendError(ExtractionError):
    """The decoding backend cannot give pixel-level access at all.

    Kept distinct from DecodeError so callers can skip the image type instead
    of treating the file as corrupt.
    """
