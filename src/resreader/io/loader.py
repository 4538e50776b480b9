"""Location-string resolution into :class:`~resreader.io.resource.Resource`."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Sequence
from urllib.parse import unquote, urlsplit

import httpx

from resreader.core.config import ReaderSettings
from resreader.core.logging import get_logger
from resreader.errors import ResourceLocationError

from .resource import (
    ClassPathResource,
    FileResource,
    Resource,
    UrlResource,
    as_search_path,
)

__all__ = ["CLASSPATH_PREFIX", "ResourceLoader"]

CLASSPATH_PREFIX = "classpath:"

_SCHEME_PATTERN = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]+):")
_HTTP_SCHEMES = frozenset({"http", "https"})
_LOCAL_HOSTS = frozenset({"", "localhost"})


class ResourceLoader:
    """Resolve location strings to resource handles.

    Recognized forms, checked in order:

    * ``classpath:<path>`` for files on the import path,
    * ``file:`` URLs,
    * ``http:`` and ``https:`` URLs,
    * anything else, read as a filesystem path.

    Unknown schemes are not rejected: ``notes:v1.txt`` is a relative file
    name, and a single-letter "scheme" is a Windows drive, so
    ``C:\\data\\x.txt`` stays a path too. Resolution never touches the
    resource itself.

    Example:
        >>> loader = ResourceLoader()
        >>> loader.get_resource("classpath:config/app.properties").description
        'class path resource [config/app.properties]'
    """

    def __init__(
        self,
        settings: ReaderSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
        search_path: Sequence[str | Path] | None = None,
    ) -> None:
        self._settings = settings or ReaderSettings()
        self._http_client = http_client
        self._search_path = as_search_path(search_path)
        self._logger = get_logger(__name__, component="loader")

    @property
    def settings(self) -> ReaderSettings:
        return self._settings

    def get_resource(self, location: str) -> Resource:
        """Return the resource handle for ``location``.

        Raises:
            ResourceLocationError: If a ``classpath:``, ``file:`` or
                ``http(s):`` location is malformed.
        """

        if location.startswith(CLASSPATH_PREFIX):
            resource: Resource = self._classpath(location[len(CLASSPATH_PREFIX):])
        else:
            match = _SCHEME_PATTERN.match(location)
            if match is None:
                resource = self._filesystem(location)
            else:
                resource = self._url(location, match.group("scheme").lower())
        self._logger.debug(
            "resource-resolved",
            location=location,
            resource=resource.description,
        )
        return resource

    def _classpath(self, path: str) -> ClassPathResource:
        cleaned = path.strip().lstrip("/")
        if not cleaned:
            raise ResourceLocationError(
                f"Class path location must name a resource: {CLASSPATH_PREFIX}{path!r}"
            )
        if ".." in cleaned.split("/"):
            raise ResourceLocationError(
                f"Class path location may not leave its root: {cleaned!r}"
            )
        return ClassPathResource(
            cleaned,
            anchors=self._settings.classpath_anchors,
            search_path=self._search_path,
        )

    def _url(self, location: str, scheme: str) -> Resource:
        parts = urlsplit(location)
        if scheme == "file":
            if parts.netloc.lower() not in _LOCAL_HOSTS:
                raise ResourceLocationError(
                    f"file: URL must point at the local host: {location!r}"
                )
            if not parts.path:
                raise ResourceLocationError(f"file: URL has no path: {location!r}")
            return FileResource(Path(unquote(parts.path)))
        if scheme in _HTTP_SCHEMES:
            if not parts.hostname:
                raise ResourceLocationError(f"URL has no host: {location!r}")
            return UrlResource(
                location,
                timeout=self._settings.http_timeout,
                client=self._http_client,
            )
        return self._filesystem(location)

    def _filesystem(self, location: str) -> FileResource:
        path = Path(os.path.expanduser(location))
        base = self._settings.base_path
        if base is not None and not path.is_absolute():
            path = base / path
        return FileResource(path)
