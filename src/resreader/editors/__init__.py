"""Text-to-value editors used when binding configuration values.

Example:
    >>> from resreader.editors import ReaderEditor
    >>> editor = ReaderEditor()
    >>> editor.set_as_text("")
    >>> editor.value is None, editor.get_as_text() is None
    (True, True)
"""

from __future__ import annotations

from .base import TextConvertible
from .reader import ReaderEditor
from .resource import ResourceEditor
from .stream import InputStreamEditor

__all__ = [
    "InputStreamEditor",
    "ReaderEditor",
    "ResourceEditor",
    "TextConvertible",
]
