"""Bind resource locations to decoded readers.

The package turns location strings such as ``classpath:config/app.properties``,
``file:/etc/app.conf`` or ``https://example.org/seed.txt`` into open text or
byte streams, for configuration models that declare such fields.

Example:
    >>> from resreader import ReaderEditor
    >>> editor = ReaderEditor()
    >>> editor.get_as_text() is None
    True
"""

from importlib import metadata

from resreader.editors import (
    InputStreamEditor,
    ReaderEditor,
    ResourceEditor,
    TextConvertible,
)
from resreader.errors import (
    InvalidArgumentError,
    ReaderConversionError,
    ResourceAccessError,
    ResourceLocationError,
    StreamConversionError,
)
from resreader.io import EncodedResource, ResourceLoader

try:
    __version__ = metadata.version("resreader")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for editable installs
    __version__ = "0.0.0"

__all__ = [
    "EncodedResource",
    "InputStreamEditor",
    "InvalidArgumentError",
    "ReaderConversionError",
    "ReaderEditor",
    "ResourceAccessError",
    "ResourceEditor",
    "ResourceLoader",
    "ResourceLocationError",
    "StreamConversionError",
    "TextConvertible",
    "__version__",
]
