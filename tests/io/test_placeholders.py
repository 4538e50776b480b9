"""Tests for :mod:`resreader.io.placeholders`."""

from __future__ import annotations

import pytest

from resreader.errors import ResourceLocationError
from resreader.io.placeholders import resolve_placeholders


def test_multiple_placeholders_and_defaults() -> None:
    result = resolve_placeholders(
        "${SCHEME:file}:${ROOT}/${NAME:app}.txt",
        {"ROOT": "/srv"},
    )

    assert result == "file:/srv/app.txt"


def test_environment_value_beats_default() -> None:
    assert resolve_placeholders("${A:x}", {"A": "y"}) == "y"


def test_empty_default_is_allowed() -> None:
    assert resolve_placeholders("pre${A:}post", {}) == "prepost"


def test_values_are_not_rescanned() -> None:
    assert resolve_placeholders("${A}", {"A": "${B}", "B": "no"}) == "${B}"


def test_strict_mode_raises() -> None:
    with pytest.raises(ResourceLocationError, match="'A'"):
        resolve_placeholders("${A}", {}, ignore_unresolvable=False)


def test_text_without_placeholders_is_unchanged() -> None:
    assert resolve_placeholders("$HOME/{x}", {}) == "$HOME/{x}"
