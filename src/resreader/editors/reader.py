"""One-way editor from a location string to a decoded reader."""

from __future__ import annotations

import codecs
from typing import TextIO

from resreader.core.logging import get_logger
from resreader.errors import InvalidArgumentError, ReaderConversionError
from resreader.io.encoded import EncodedResource

from .base import MISSING, require
from .resource import ResourceEditor

__all__ = ["ReaderEditor"]


class ReaderEditor:
    """Convert text to a :class:`typing.TextIO`, reading it as a location.

    Any location :class:`~resreader.io.loader.ResourceLoader` understands is
    accepted: ``file:`` and ``http(s):`` URLs, ``classpath:`` pseudo-URLs and
    plain paths. The resource is opened immediately, so conversion performs
    blocking I/O.

    Readers produced here are never closed by the editor. Whoever reads
    :attr:`value` owns it, and a previous value is simply replaced.

    Args:
        resource_editor: Resolver for the location text. Omit it to use a
            default :class:`ResourceEditor`; passing ``None`` is an error.
        encoding: Encoding forced on every reader. ``None`` defers to the
            byte-order mark, then to the configured default encoding.

    Raises:
        InvalidArgumentError: If ``resource_editor`` is ``None`` or
            ``encoding`` names an unknown codec.
    """

    def __init__(
        self,
        resource_editor: ResourceEditor | None = MISSING,
        *,
        encoding: str | None = None,
    ) -> None:
        if resource_editor is MISSING:
            resource_editor = ResourceEditor()
        self._resource_editor = require(resource_editor, "resource_editor")
        if encoding is not None:
            try:
                codecs.lookup(encoding)
            except LookupError as exc:
                raise InvalidArgumentError(f"Unknown encoding: {encoding!r}") from exc
        self._encoding = encoding
        self._value: TextIO | None = None
        self._logger = get_logger(__name__, editor="reader")

    @property
    def value(self) -> TextIO | None:
        return self._value

    def get_value(self) -> TextIO | None:
        return self._value

    def set_value(self, value: TextIO | None) -> None:
        self._value = value

    def set_as_text(self, text: str | None) -> None:
        """Resolve ``text`` and store a reader over the resource.

        Raises:
            ReaderConversionError: If the resource cannot be opened; the
                ``OSError`` is chained as ``__cause__``.
            ResourceLocationError: Propagated from the resource editor.
        """

        self._resource_editor.set_as_text(text)
        resource = self._resource_editor.value
        if resource is None:
            self._value = None
            return
        settings = self._resource_editor.loader.settings
        encoded = EncodedResource(
            resource,
            self._encoding,
            default_encoding=settings.default_encoding,
            detect_bom=settings.detect_bom,
        )
        try:
            reader = encoded.get_reader()
        except OSError as exc:
            self._logger.warning(
                "reader-open-failed",
                resource=resource.description,
                error=str(exc),
            )
            raise ReaderConversionError(
                f"Failed to retrieve reader for {resource}"
            ) from exc
        self._logger.debug(
            "reader-opened",
            resource=resource.description,
            encoding=reader.encoding,
        )
        self._value = reader

    def get_as_text(self) -> str | None:
        """Return ``None``: a reader has no text form to go back to.

        The stream is not the location that produced it, so there is nothing
        faithful to render, whatever the current value.
        """

        return None

    from_text = set_as_text
    to_text = get_as_text
