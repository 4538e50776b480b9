"""Domain-specific exceptions for resource binding."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Base error for text-to-value coercion failures.

    Binding frameworks only need to catch this category; the original
    failure stays reachable through ``__cause__``.
    """


class ResourceLocationError(InvalidArgumentError):
    """Raised when a location string is malformed or uses an unknown scheme."""


class ReaderConversionError(InvalidArgumentError):
    """Raised when a resolved resource cannot be opened as a reader."""


class StreamConversionError(InvalidArgumentError):
    """Raised when a resolved resource cannot be opened as a byte stream."""


class ResourceAccessError(OSError):
    """Raised when a resolved resource cannot be read.

    Carries the ``location`` that failed so callers can report it without
    parsing the message.
    """

    def __init__(self, message: str, *, location: str) -> None:
        super().__init__(message)
        self.location = location


__all__ = [
    "InvalidArgumentError",
    "ReaderConversionError",
    "ResourceAccessError",
    "ResourceLocationError",
    "StreamConversionError",
]
