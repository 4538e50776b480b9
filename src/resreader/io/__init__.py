"""Resource resolution and decoding.

Example:
    >>> from resreader.io import ResourceLoader, EncodedResource
    >>> resource = ResourceLoader().get_resource("notes.txt")
    >>> resource.filename
    'notes.txt'
"""

from __future__ import annotations

from .encoded import EncodedResource, detect_bom
from .loader import CLASSPATH_PREFIX, ResourceLoader
from .placeholders import resolve_placeholders
from .resource import (
    BytesResource,
    ClassPathResource,
    FileResource,
    Resource,
    UrlResource,
)

__all__ = [
    "BytesResource",
    "CLASSPATH_PREFIX",
    "ClassPathResource",
    "EncodedResource",
    "FileResource",
    "Resource",
    "ResourceLoader",
    "UrlResource",
    "detect_bom",
    "resolve_placeholders",
]
