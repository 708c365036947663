"""Logging configuration."""

import logging

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'


def configure_logging(level: str = 'WARNING') -> None:
    """Configure the root logger. Unknown level names fall back to WARNING."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )
