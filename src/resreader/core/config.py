"""Settings models and loaders for :mod:`resreader`."""

from __future__ import annotations

import codecs
import os
from collections.abc import Mapping as MappingABC
from pathlib import Path
from typing import Any, Mapping

import tomllib
import tomlkit
from pydantic import BaseModel, Field, field_validator

from resreader.resources import get_resource

DEFAULTS_RESOURCE_NAME = "resreader.defaults.toml"
ENV_PREFIX = "RESREADER_"


class ReaderSettings(BaseModel):
    """Knobs shared by the loader, the decoder and the editors."""

    default_encoding: str = Field(
        default="utf-8",
        description="Encoding used when none is declared and no BOM is found.",
    )
    detect_bom: bool = Field(
        default=True,
        description="Whether a byte-order mark selects the encoding.",
    )
    http_timeout: float = Field(
        default=10.0,
        gt=0.0,
        description="Seconds to wait for http(s) resources.",
    )
    classpath_anchors: tuple[str, ...] = Field(
        default=(),
        description=(
            "Packages searched before sys.path when resolving classpath: "
            "locations."
        ),
    )
    base_path: Path | None = Field(
        default=None,
        description="Directory that relative filesystem paths resolve against.",
    )
    ignore_unresolvable_placeholders: bool = Field(
        default=True,
        description="Leave unknown ${...} placeholders verbatim instead of failing.",
    )
    log_level: str = Field(
        default="INFO",
        description="Default logging level for the command-line runtime.",
    )

    model_config = {
        "frozen": True,
        "str_strip_whitespace": True,
    }

    @field_validator("default_encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {value!r}") from exc

    @field_validator("classpath_anchors", mode="before")
    @classmethod
    def _split_anchors(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(item.strip() for item in value.split(",") if item.strip())
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def read_packaged_defaults_text() -> str:
    """Return the raw packaged defaults TOML content.

    Example:
        >>> read_packaged_defaults_text().startswith("#")
        True
    """

    return get_resource(DEFAULTS_RESOURCE_NAME).read_text(encoding="utf-8")


def load_packaged_defaults() -> dict[str, Any]:
    """Load the packaged defaults as a plain dictionary.

    Example:
        >>> load_packaged_defaults()["default_encoding"]
        'utf-8'
    """

    return tomllib.loads(read_packaged_defaults_text())


def load_user_config(path: str | Path) -> dict[str, Any]:
    """Parse a user TOML file; the ``[resreader]`` table is used when present."""

    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    section = data.get("resreader", data)
    if not isinstance(section, MappingABC):
        raise TypeError(f"Unsupported [resreader] payload: {section!r}")
    return dict(section)


def settings_from_env(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Collect ``RESREADER_*`` variables into a settings overlay.

    Example:
        >>> settings_from_env({"RESREADER_HTTP_TIMEOUT": "3", "HOME": "/"})
        {'http_timeout': '3'}
    """

    source = os.environ if environ is None else environ
    known = set(ReaderSettings.model_fields)
    overlay: dict[str, Any] = {}
    for key, value in source.items():
        if not key.startswith(ENV_PREFIX):
            continue
        name = key[len(ENV_PREFIX):].lower()
        if name in known:
            overlay[name] = value
    return overlay


def _deep_merge(
    base: Mapping[str, Any],
    overlay: Mapping[str, Any],
) -> dict[str, Any]:
    merged: dict[str, Any] = dict(base)
    for key, value in overlay.items():
        if (
            key in merged
            and isinstance(merged[key], MappingABC)
            and isinstance(value, MappingABC)
        ):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(
    *,
    defaults: Mapping[str, Any] | None = None,
    user_config: Mapping[str, Any] | None = None,
    env_config: Mapping[str, Any] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> ReaderSettings:
    """Load settings according to the precedence stack.

    Later layers win: packaged defaults, then the user file, then the
    environment, then explicit overrides (CLI flags). ``None`` values in
    ``overrides`` are skipped so unset flags do not mask lower layers.

    Raises:
        pydantic.ValidationError: If the merged payload is invalid.
    """

    stack = dict(load_packaged_defaults() if defaults is None else defaults)
    cleaned = {
        key: value for key, value in (overrides or {}).items() if value is not None
    }
    for layer in (user_config, env_config, cleaned):
        if layer:
            stack = _deep_merge(stack, layer)
    if stack.get("base_path") == "":
        stack["base_path"] = None
    return ReaderSettings(**stack)


def render_settings(settings: ReaderSettings) -> str:
    """Render ``settings`` as a ``[resreader]`` TOML document."""

    document = tomlkit.document()
    document.add(tomlkit.comment("Effective resreader settings"))
    table = tomlkit.table()
    for name, field in ReaderSettings.model_fields.items():
        value = getattr(settings, name)
        if isinstance(value, Path):
            value = str(value)
        elif isinstance(value, tuple):
            value = list(value)
        elif value is None:
            value = ""
        item = tomlkit.item(value)
        if field.description:
            item.comment(field.description)
        table.add(name, item)
    document.add("resreader", table)
    return tomlkit.dumps(document)


__all__ = [
    "DEFAULTS_RESOURCE_NAME",
    "ENV_PREFIX",
    "ReaderSettings",
    "load_packaged_defaults",
    "load_settings",
    "load_user_config",
    "read_packaged_defaults_text",
    "render_settings",
    "settings_from_env",
]
