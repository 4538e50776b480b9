"""One-way editor from a location string to a raw byte stream."""

from __future__ import annotations

from typing import BinaryIO

from resreader.core.logging import get_logger
from resreader.errors import StreamConversionError

from .base import MISSING, require
from .resource import ResourceEditor

__all__ = ["InputStreamEditor"]


class InputStreamEditor:
    """Convert text to an open :class:`typing.BinaryIO`.

    Same contract as :class:`~resreader.editors.reader.ReaderEditor` minus the
    decoding step; the caller closes the stream.
    """

    def __init__(self, resource_editor: ResourceEditor | None = MISSING) -> None:
        if resource_editor is MISSING:
            resource_editor = ResourceEditor()
        self._resource_editor = require(resource_editor, "resource_editor")
        self._value: BinaryIO | None = None
        self._logger = get_logger(__name__, editor="input-stream")

    @property
    def value(self) -> BinaryIO | None:
        return self._value

    def get_value(self) -> BinaryIO | None:
        return self._value

    def set_value(self, value: BinaryIO | None) -> None:
        self._value = value

    def set_as_text(self, text: str | None) -> None:
        self._resource_editor.set_as_text(text)
        resource = self._resource_editor.value
        if resource is None:
            self._value = None
            return
        try:
            stream = resource.open()
        except OSError as exc:
            self._logger.warning(
                "stream-open-failed",
                resource=resource.description,
                error=str(exc),
            )
            raise StreamConversionError(
                f"Failed to retrieve input stream for {resource}"
            ) from exc
        self._logger.debug("stream-opened", resource=resource.description)
        self._value = stream

    def get_as_text(self) -> str | None:
        """Return ``None``; an open stream has no text representation."""

        return None

    from_text = set_as_text
    to_text = get_as_text
