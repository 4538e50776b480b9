"""Resource-plus-encoding pairing that produces decoded readers."""

from __future__ import annotations

import codecs
import io
from typing import BinaryIO, TextIO

from .resource import Resource

__all__ = ["EncodedResource", "detect_bom"]

# Longest marks first: the UTF-32-LE mark starts with the UTF-16-LE one.
_BOMS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)
_BOM_PROBE_SIZE = 4


def detect_bom(head: bytes) -> str | None:
    """Return the codec implied by a byte-order mark at the start of ``head``.

    The returned codecs consume the mark while decoding.

    Example:
        >>> detect_bom(b"\\xef\\xbb\\xbfkey=value")
        'utf-8-sig'
        >>> detect_bom(b"key=value") is None
        True
    """

    for mark, encoding in _BOMS:
        if head.startswith(mark):
            return encoding
    return None


class EncodedResource:
    """A :class:`Resource` paired with an optional declared encoding.

    Without a declared encoding the reader honours a byte-order mark (when
    ``detect_bom`` is on) and otherwise falls back to ``default_encoding``.
    """

    __slots__ = ("_resource", "_encoding", "_default_encoding", "_detect_bom")

    def __init__(
        self,
        resource: Resource,
        encoding: str | None = None,
        *,
        default_encoding: str = "utf-8",
        detect_bom: bool = True,
    ) -> None:
        if resource is None:
            raise ValueError("resource must not be None")
        self._resource = resource
        self._encoding = encoding
        self._default_encoding = default_encoding
        self._detect_bom = detect_bom

    @property
    def resource(self) -> Resource:
        return self._resource

    @property
    def encoding(self) -> str | None:
        return self._encoding

    def requires_reader(self) -> bool:
        """Return whether an explicit encoding was declared."""

        return self._encoding is not None

    def get_input_stream(self) -> BinaryIO:
        """Open the raw byte stream of the underlying resource."""

        return self._resource.open()

    def get_reader(self) -> TextIO:
        """Open the resource and return a decoded text stream.

        The caller owns the returned reader and must close it; closing it
        also closes the byte stream underneath. Decoding is strict and lazy:
        bytes invalid for the chosen encoding raise
        :class:`UnicodeDecodeError` (a ``ValueError``) from the reader's
        ``read`` calls, not from here.

        Raises:
            LookupError: If the declared encoding is unknown.
            OSError: If the resource cannot be opened or read.
        """

        if self._encoding is not None:
            codecs.lookup(self._encoding)
        raw = self._resource.open()
        try:
            buffered = raw
            if not isinstance(raw, io.BufferedReader):
                buffered = io.BufferedReader(raw)
            encoding = self._encoding
            if encoding is None:
                encoding = self._default_encoding
                if self._detect_bom:
                    encoding = detect_bom(buffered.peek(_BOM_PROBE_SIZE)) or encoding
            return io.TextIOWrapper(buffered, encoding=encoding)
        except Exception:
            raw.close()
            raise

    def read_text(self) -> str:
        """Return the whole decoded content, closing the stream afterwards."""

        with self.get_reader() as reader:
            return reader.read()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EncodedResource):
            return NotImplemented
        return (self._resource, self._encoding) == (other._resource, other._encoding)

    def __hash__(self) -> int:
        return hash((self._resource, self._encoding))

    def __str__(self) -> str:
        return str(self._resource)

    def __repr__(self) -> str:
        return f"EncodedResource({self._resource!r}, encoding={self._encoding!r})"
