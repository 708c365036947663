"""Image decoding backends.

Each module defines a `backend` (dominant_color.core.types.Backend) whose
opener turns a file path into a PixelSource. Register new modules in
dominant_color.registry.BACKENDS.
"""
