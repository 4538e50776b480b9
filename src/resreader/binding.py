"""Type-driven editor lookup and pydantic field binding.

A configuration model declares what it wants and the registry picks the
editor::

    class JobConfig(BaseModel):
        template: ReaderValue
        payload: InputStreamValue = None

    JobConfig.model_validate({"template": "classpath:templates/job.txt"})

Strings are converted; already-open objects and ``None`` pass through. The
registry can be swapped per call through the validation context key
``"editor_registry"``. Without one, a shared registry is built on first use
from the packaged defaults overlaid with ``RESREADER_*`` variables, the same
layers the CLI reads apart from its flags and config file.
"""

from __future__ import annotations

import io
from functools import lru_cache
from typing import Annotated, Any, BinaryIO, Callable, Mapping, TextIO

import httpx
from pydantic import PlainValidator, ValidationInfo

from resreader.core.config import ReaderSettings, load_settings, settings_from_env
from resreader.editors import (
    InputStreamEditor,
    ReaderEditor,
    ResourceEditor,
    TextConvertible,
)
from resreader.errors import InvalidArgumentError
from resreader.io.loader import ResourceLoader
from resreader.io.resource import Resource

__all__ = [
    "CONTEXT_KEY",
    "EditorFactory",
    "EditorRegistry",
    "InputStreamValue",
    "ReaderValue",
    "ResourceValue",
    "bind_text",
    "default_registry",
]

CONTEXT_KEY = "editor_registry"

EditorFactory = Callable[[], TextConvertible]


class EditorRegistry:
    """Map target types to factories producing fresh editors.

    A new editor is built per conversion, so no state leaks between values.
    """

    def __init__(self) -> None:
        self._factories: dict[type, EditorFactory] = {}

    def register(self, target: type, factory: EditorFactory) -> None:
        self._factories[target] = factory

    def targets(self) -> tuple[type, ...]:
        return tuple(self._factories)

    def find_editor(self, target: type) -> TextConvertible | None:
        factory = self._factories.get(target)
        return factory() if factory is not None else None

    def convert(self, text: str | None, target: type) -> Any:
        """Convert ``text`` into a ``target`` value.

        Raises:
            InvalidArgumentError: If no editor handles ``target``, or the
                editor rejects ``text``.
        """

        editor = self.find_editor(target)
        if editor is None:
            raise InvalidArgumentError(f"No editor registered for {target!r}")
        editor.set_as_text(text)
        return editor.value


def default_registry(
    settings: ReaderSettings | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    http_client: httpx.Client | None = None,
) -> EditorRegistry:
    """Build the standard registry: resources, readers and byte streams."""

    loader = ResourceLoader(settings, http_client=http_client)

    def resource_editor() -> ResourceEditor:
        return ResourceEditor(loader, environ)

    def reader_editor() -> ReaderEditor:
        return ReaderEditor(resource_editor())

    def stream_editor() -> InputStreamEditor:
        return InputStreamEditor(resource_editor())

    registry = EditorRegistry()
    registry.register(Resource, resource_editor)
    registry.register(TextIO, reader_editor)
    registry.register(io.TextIOBase, reader_editor)
    registry.register(BinaryIO, stream_editor)
    registry.register(io.BufferedIOBase, stream_editor)
    return registry


@lru_cache(maxsize=1)
def _shared_registry() -> EditorRegistry:
    return default_registry(load_settings(env_config=settings_from_env()))


def bind_text(target: type, accepts: tuple[type, ...]) -> PlainValidator:
    """Return a pydantic validator converting strings into ``target`` values.

    Values that are already instances of ``accepts`` (and ``None``) are kept
    as they are; anything else is rejected.
    """

    def _validate(value: Any, info: ValidationInfo) -> Any:
        if value is None or isinstance(value, accepts):
            return value
        if not isinstance(value, str):
            raise ValueError(
                f"Expected a location string, got {type(value).__name__}"
            )
        registry = None
        if isinstance(info.context, Mapping):
            registry = info.context.get(CONTEXT_KEY)
        if registry is None:
            registry = _shared_registry()
        return registry.convert(value, target)

    return PlainValidator(_validate)


ReaderValue = Annotated[TextIO, bind_text(TextIO, (io.TextIOBase,))]
InputStreamValue = Annotated[
    BinaryIO, bind_text(BinaryIO, (io.BufferedIOBase, io.RawIOBase))
]
ResourceValue = Annotated[Resource, bind_text(Resource, (Resource,))]
