"""Core utilities shared across :mod:`resreader` modules.

The core namespace holds the settings loader and logging setup so the
resource and editor modules stay free of process-wide concerns.

Example:
    >>> from resreader.core import ReaderSettings
    >>> ReaderSettings().default_encoding
    'utf-8'
"""

from __future__ import annotations

from .config import ReaderSettings, load_settings, render_settings
from .logging import Logger, configure_logging, get_logger

__all__ = [
    "Logger",
    "ReaderSettings",
    "configure_logging",
    "get_logger",
    "load_settings",
    "render_settings",
]
