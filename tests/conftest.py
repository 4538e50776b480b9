"""Shared pytest fixtures for resource binding tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import httpx
import pytest
from rich.logging import RichHandler

from resreader.core.config import ReaderSettings
from resreader.io.loader import ResourceLoader


@pytest.fixture(autouse=True)
def reset_root_handlers() -> Iterator[None]:
    """Keep handlers installed by CLI commands from leaking across tests."""

    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, (RichHandler, logging.FileHandler)):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def classpath_root(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Put a directory holding ``config/app.properties`` on ``sys.path``."""

    root = tmp_path / "classpath"
    config_dir = root / "config"
    config_dir.mkdir(parents=True)
    (config_dir / "app.properties").write_text("key=value", encoding="utf-8")
    monkeypatch.syspath_prepend(str(root))
    return root


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Write raw bytes under ``tmp_path`` and return the path."""

    def _write(name: str, payload: bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
        return path

    return _write


@pytest.fixture
def http_client() -> Iterator[httpx.Client]:
    """Client answering from a fixed route table instead of the network."""

    routes = {
        "/seed.txt": "seeded over http".encode("utf-8"),
        "/latin.txt": "caf\xe9".encode("latin-1"),
    }

    def handler(request: httpx.Request) -> httpx.Response:
        body = routes.get(request.url.path)
        if body is None:
            return httpx.Response(404, text="missing")
        return httpx.Response(200, content=body)

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        yield client


@pytest.fixture
def loader(http_client: httpx.Client) -> ResourceLoader:
    """Default-configured loader wired to the mock HTTP client."""

    return ResourceLoader(ReaderSettings(), http_client=http_client)
