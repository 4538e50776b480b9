"""Byte-readable resource handles.

Every handle is cheap to build and touches the underlying source only when
:meth:`Resource.open` or :meth:`Resource.exists` is called. ``open`` hands
ownership of a fresh binary stream to the caller on every call.
"""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass, field
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path, PurePosixPath
from typing import BinaryIO, Protocol, Sequence, runtime_checkable
from urllib.parse import urlsplit

import httpx

from resreader.core.logging import get_logger
from resreader.errors import ResourceAccessError

__all__ = [
    "BytesResource",
    "ClassPathResource",
    "FileResource",
    "Resource",
    "UrlResource",
    "as_search_path",
]

_logger = get_logger(__name__, component="resource")


@runtime_checkable
class Resource(Protocol):
    """A source of bytes identified by a location."""

    @property
    def description(self) -> str:
        """Human-readable identity used in error messages."""
        ...

    @property
    def url(self) -> str | None:
        """External URL form, or ``None`` when the resource has no URL."""
        ...

    @property
    def filename(self) -> str | None:
        """Last path segment, when the resource has one."""
        ...

    def exists(self) -> bool:
        """Return whether :meth:`open` is expected to succeed."""
        ...

    def open(self) -> BinaryIO:
        """Open a new binary stream; the caller must close it.

        Raises:
            OSError: If the source cannot be opened.
        """
        ...


@dataclass(frozen=True, slots=True)
class FileResource:
    """A file on the local filesystem."""

    path: Path

    @property
    def description(self) -> str:
        return f"file [{self.path.absolute()}]"

    @property
    def url(self) -> str:
        return self.path.absolute().as_uri()

    @property
    def filename(self) -> str:
        return self.path.name

    def exists(self) -> bool:
        return self.path.is_file()

    def open(self) -> BinaryIO:
        return open(self.path, "rb")

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, slots=True)
class ClassPathResource:
    """A file found on the import path.

    ``path`` is ``/``-separated and relative. Anchor packages are searched
    first through :func:`importlib.resources.files`, which also covers zipped
    packages; afterwards every directory on ``search_path`` (``sys.path``
    when unset) is tried in order. The first match wins.

    Example:
        >>> ClassPathResource("config/app.properties").description
        'class path resource [config/app.properties]'
    """

    path: str
    anchors: tuple[str, ...] = ()
    search_path: tuple[str, ...] | None = None

    @property
    def description(self) -> str:
        return f"class path resource [{self.path}]"

    @property
    def url(self) -> str | None:
        located = self._locate()
        if isinstance(located, Path):
            return located.absolute().as_uri()
        return None

    @property
    def filename(self) -> str:
        return PurePosixPath(self.path).name

    def _parts(self) -> list[str]:
        return [part for part in self.path.split("/") if part]

    def _iter_candidates(self) -> list[Traversable]:
        parts = self._parts()
        candidates: list[Traversable] = []
        for anchor in self.anchors:
            try:
                root = resources.files(anchor)
            except ModuleNotFoundError:
                _logger.warning("classpath-anchor-missing", anchor=anchor)
                continue
            candidates.append(root.joinpath(*parts))
        entries = sys.path if self.search_path is None else self.search_path
        for entry in entries:
            root_dir = Path(entry or ".")
            if root_dir.is_dir():
                candidates.append(root_dir.joinpath(*parts))
        return candidates

    def _locate(self) -> Traversable | None:
        for candidate in self._iter_candidates():
            if candidate.is_file():
                return candidate
        return None

    def exists(self) -> bool:
        return self._locate() is not None

    def open(self) -> BinaryIO:
        located = self._locate()
        if located is None:
            raise ResourceAccessError(
                f"{self.description} cannot be opened because it does not exist",
                location=self.path,
            )
        return located.open("rb")

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, slots=True)
class UrlResource:
    """An ``http``/``https`` resource fetched with :mod:`httpx`.

    The body is downloaded in full by :meth:`open`; the returned stream is an
    in-memory buffer. Pass ``client`` to share connection pools or to inject
    a transport in tests.
    """

    location: str
    timeout: float = 10.0
    client: httpx.Client | None = field(default=None, compare=False, repr=False)

    @property
    def description(self) -> str:
        return f"URL [{self.location}]"

    @property
    def url(self) -> str:
        return self.location

    @property
    def filename(self) -> str | None:
        name = PurePosixPath(urlsplit(self.location).path).name
        return name or None

    def _request(self, method: str) -> httpx.Response:
        if self.client is not None:
            return self.client.request(
                method,
                self.location,
                timeout=self.timeout,
                follow_redirects=True,
            )
        with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
            return client.request(method, self.location)

    def exists(self) -> bool:
        try:
            response = self._request("HEAD")
        except httpx.HTTPError as exc:
            _logger.debug("url-probe-failed", url=self.location, error=str(exc))
            return False
        return response.is_success

    def open(self) -> BinaryIO:
        try:
            response = self._request("GET")
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise ResourceAccessError(
                f"{self.description} cannot be opened: {exc}",
                location=self.location,
            ) from exc
        return io.BytesIO(response.content)

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, slots=True)
class BytesResource:
    """An in-memory resource, mainly for programmatic binding and tests."""

    data: bytes
    label: str = "resource loaded from byte array"

    @property
    def description(self) -> str:
        return f"byte array [{self.label}]"

    @property
    def url(self) -> None:
        return None

    @property
    def filename(self) -> None:
        return None

    def exists(self) -> bool:
        return True

    def open(self) -> BinaryIO:
        return io.BytesIO(self.data)

    def __str__(self) -> str:
        return self.description


def as_search_path(entries: Sequence[str | Path] | None) -> tuple[str, ...] | None:
    """Freeze an optional search path into a hashable tuple."""

    if entries is None:
        return None
    return tuple(str(entry) for entry in entries)
