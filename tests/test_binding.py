"""Tests for :mod:`resreader.binding`."""

from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO, Iterator, TextIO

import httpx
import pytest
from pydantic import BaseModel, ValidationError

from resreader.binding import (
    CONTEXT_KEY,
    EditorRegistry,
    InputStreamValue,
    ReaderValue,
    ResourceValue,
    _shared_registry,
    default_registry,
)
from resreader.errors import InvalidArgumentError, ReaderConversionError
from resreader.io.resource import FileResource, Resource


class _JobConfig(BaseModel):
    template: ReaderValue
    payload: InputStreamValue = None
    source: ResourceValue = None

    model_config = {"arbitrary_types_allowed": True}


def test_registry_converts_by_target_type(
    classpath_root: Path,
    http_client: httpx.Client,
) -> None:
    registry = default_registry(http_client=http_client)

    reader = registry.convert("classpath:config/app.properties", TextIO)
    stream = registry.convert("http://example.test/seed.txt", BinaryIO)
    resource = registry.convert("classpath:config/app.properties", Resource)

    with reader, stream:
        assert reader.read() == "key=value"
        assert stream.read() == b"seeded over http"
    assert resource.exists()
    assert registry.convert("", TextIO) is None


def test_registry_rejects_unknown_target() -> None:
    with pytest.raises(InvalidArgumentError, match="No editor registered"):
        EditorRegistry().convert("x", TextIO)


def test_registry_uses_fresh_editor_per_conversion() -> None:
    registry = default_registry()

    assert registry.find_editor(TextIO) is not registry.find_editor(TextIO)
    assert TextIO in registry.targets()


def test_registry_propagates_conversion_errors() -> None:
    with pytest.raises(ReaderConversionError):
        default_registry().convert("file:/nonexistent/path.txt", TextIO)


def test_model_field_binds_from_location(classpath_root: Path) -> None:
    config = _JobConfig.model_validate(
        {"template": "classpath:config/app.properties"}
    )

    with config.template as reader:
        assert reader.read() == "key=value"
    assert config.payload is None


def test_model_fields_bind_streams_and_resources(tmp_path: Path) -> None:
    blob = tmp_path / "blob.bin"
    blob.write_bytes(b"\x01\x02")

    config = _JobConfig(
        template=io.StringIO("inline"),
        payload=str(blob),
        source=str(blob),
    )

    assert config.template.read() == "inline"
    with config.payload as stream:
        assert stream.read() == b"\x01\x02"
    assert config.source == FileResource(blob)


def test_model_validation_error_wraps_conversion_failure() -> None:
    with pytest.raises(ValidationError) as excinfo:
        _JobConfig.model_validate({"template": "file:/nonexistent/path.txt"})

    assert "Failed to retrieve reader" in str(excinfo.value)


def test_model_rejects_non_string_input() -> None:
    with pytest.raises(ValidationError, match="Expected a location string"):
        _JobConfig.model_validate({"template": 42})


def test_registry_from_validation_context(http_client: httpx.Client) -> None:
    registry = default_registry(http_client=http_client)

    config = _JobConfig.model_validate(
        {"template": "https://example.test/seed.txt"},
        context={CONTEXT_KEY: registry},
    )

    with config.template as reader:
        assert reader.read() == "seeded over http"


@pytest.fixture
def fresh_shared_registry() -> Iterator[None]:
    _shared_registry.cache_clear()
    yield
    _shared_registry.cache_clear()


def test_shared_registry_reads_environment(
    fresh_shared_registry: None,
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.setenv("RESREADER_DEFAULT_ENCODING", "latin-1")
    latin = tmp_path / "latin.txt"
    latin.write_bytes(b"caf\xe9")

    config = _JobConfig.model_validate({"template": str(latin)})

    with config.template as reader:
        assert reader.read() == "café"
