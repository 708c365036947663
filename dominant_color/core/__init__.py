"""dominant_color.core — Foundation layer.

Contains the pixel types, sampling, transparency detection, quantization,
hex encoding, configuration and report formatting.
This module has NO dependencies on dominant_color.backends or dominant_color.registry.
Only stdlib and numpy are allowed here.
"""
