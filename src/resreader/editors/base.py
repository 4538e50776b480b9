"""Capability shared by every text-to-value editor."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from resreader.errors import InvalidArgumentError

__all__ = ["MISSING", "TextConvertible", "require"]

_T = TypeVar("_T")


class _Missing:
    """Marker for "argument not passed", distinct from an explicit ``None``."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@runtime_checkable
class TextConvertible(Protocol):
    """Two-operation contract a binding framework drives.

    ``set_as_text`` converts and stores; ``value`` exposes the stored result;
    ``get_as_text`` renders the stored value back to text, returning ``None``
    when the conversion has no inverse.
    """

    @property
    def value(self) -> Any: ...

    def set_as_text(self, text: str) -> None: ...

    def get_as_text(self) -> str | None: ...


def require(value: _T | None, name: str) -> _T:
    """Return ``value`` or raise :class:`InvalidArgumentError` if it is ``None``.

    Example:
        >>> require(None, "resource_editor")
        Traceback (most recent call last):
        ...
        resreader.errors.InvalidArgumentError: resource_editor must not be None
    """

    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value
