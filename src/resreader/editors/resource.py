"""Editor turning location strings into resource handles."""

from __future__ import annotations

import os
from typing import Mapping

from resreader.io.loader import ResourceLoader
from resreader.io.placeholders import resolve_placeholders
from resreader.io.resource import Resource

from .base import MISSING, require

__all__ = ["ResourceEditor"]


class ResourceEditor:
    """Resolve text to a :class:`~resreader.io.resource.Resource`.

    Blank text (empty or whitespace only) yields ``None``. Otherwise
    ``${NAME}`` and ``${NAME:default}`` placeholders are expanded from
    ``environ`` (``os.environ`` when unset), surrounding whitespace is
    stripped, and the loader resolves the result. Errors raised by the loader
    propagate unchanged.

    Example:
        >>> editor = ResourceEditor()
        >>> editor.set_as_text("   ")
        >>> editor.value is None
        True
    """

    def __init__(
        self,
        resource_loader: ResourceLoader | None = MISSING,
        environ: Mapping[str, str] | None = None,
        *,
        ignore_unresolvable_placeholders: bool | None = None,
    ) -> None:
        if resource_loader is MISSING:
            resource_loader = ResourceLoader()
        self._loader = require(resource_loader, "resource_loader")
        self._environ = environ
        if ignore_unresolvable_placeholders is None:
            ignore_unresolvable_placeholders = (
                self._loader.settings.ignore_unresolvable_placeholders
            )
        self._ignore_unresolvable = ignore_unresolvable_placeholders
        self._value: Resource | None = None

    @property
    def loader(self) -> ResourceLoader:
        return self._loader

    @property
    def value(self) -> Resource | None:
        return self._value

    def get_value(self) -> Resource | None:
        return self._value

    def set_value(self, value: Resource | None) -> None:
        self._value = value

    def set_as_text(self, text: str | None) -> None:
        if text is None or not text.strip():
            self._value = None
            return
        location = self._resolve_path(text).strip()
        self._value = self._loader.get_resource(location)

    def get_as_text(self) -> str | None:
        """Return the resource's URL, ``""`` when it has none."""

        if self._value is None:
            return None
        return self._value.url or ""

    def _resolve_path(self, text: str) -> str:
        environ = os.environ if self._environ is None else self._environ
        return resolve_placeholders(
            text,
            environ,
            ignore_unresolvable=self._ignore_unresolvable,
        )

    from_text = set_as_text
    to_text = get_as_text
