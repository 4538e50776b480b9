"""Tests for :mod:`resreader.editors.resource`."""

from __future__ import annotations

from pathlib import Path

import pytest

from resreader.core.config import ReaderSettings
from resreader.editors import ResourceEditor
from resreader.errors import InvalidArgumentError, ResourceLocationError
from resreader.io.loader import ResourceLoader
from resreader.io.resource import ClassPathResource, FileResource


def test_location_is_trimmed_before_resolution(tmp_path: Path) -> None:
    editor = ResourceEditor()

    editor.set_as_text(f"  {tmp_path / 'a.txt'}  ")

    assert editor.value == FileResource(tmp_path / "a.txt")


def test_get_as_text_renders_url_or_none(tmp_path: Path) -> None:
    editor = ResourceEditor()
    assert editor.get_as_text() is None

    editor.set_as_text(str(tmp_path / "a.txt"))

    assert editor.get_as_text() == (tmp_path / "a.txt").as_uri()


def test_get_as_text_is_empty_for_unlocated_classpath_entry(
    tmp_path: Path,
) -> None:
    loader = ResourceLoader(search_path=[tmp_path])
    editor = ResourceEditor(loader)

    editor.set_as_text("classpath:nowhere.txt")

    assert isinstance(editor.value, ClassPathResource)
    assert editor.get_as_text() == ""


def test_default_placeholder_value_is_used() -> None:
    editor = ResourceEditor(environ={})

    editor.set_as_text("classpath:${PROFILE:dev}/app.properties")

    assert isinstance(editor.value, ClassPathResource)
    assert editor.value.path == "dev/app.properties"


def test_unresolvable_placeholder_kept_by_default(tmp_path: Path) -> None:
    editor = ResourceEditor(environ={})

    editor.set_as_text(f"{tmp_path}/${{UNKNOWN}}.txt")

    assert editor.value == FileResource(tmp_path / "${UNKNOWN}.txt")


def test_unresolvable_placeholder_fails_when_strict() -> None:
    editor = ResourceEditor(environ={}, ignore_unresolvable_placeholders=False)

    with pytest.raises(ResourceLocationError, match="UNKNOWN"):
        editor.set_as_text("${UNKNOWN}/app.txt")


def test_strictness_defaults_to_loader_settings() -> None:
    settings = ReaderSettings(ignore_unresolvable_placeholders=False)
    editor = ResourceEditor(ResourceLoader(settings), environ={})

    with pytest.raises(ResourceLocationError):
        editor.set_as_text("${UNKNOWN}")


def test_environment_defaults_to_process_environ(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.setenv("RESREADER_TEST_HOME", str(tmp_path))
    editor = ResourceEditor()

    editor.set_as_text("${RESREADER_TEST_HOME}/x.txt")

    assert editor.value == FileResource(tmp_path / "x.txt")


def test_none_loader_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        ResourceEditor(None)


def test_set_value_and_blank_text_reset() -> None:
    editor = ResourceEditor()
    editor.set_value(FileResource(Path("x")))

    editor.set_as_text("")

    assert editor.value is None
