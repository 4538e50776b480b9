"""Command-line interface primitives for :mod:`resreader`.

Example:
    >>> import typer
    >>> from resreader.cli import create_app
    >>> isinstance(create_app(), typer.Typer)
    True
"""

from __future__ import annotations

import os
from pathlib import Path

import typer

from resreader.core.config import (
    ReaderSettings,
    load_settings,
    load_user_config,
    render_settings,
    settings_from_env,
)
from resreader.core.logging import configure_logging, get_logger
from resreader.editors import ReaderEditor, ResourceEditor
from resreader.errors import InvalidArgumentError
from resreader.io.loader import ResourceLoader

_app_help = (
    "Open resource locations (paths, file:/http(s): URLs, classpath: entries)"
    " as decoded text."
)

_EXIT_NO_VALUE = 1
_EXIT_CONVERSION = 2

_CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    exists=True,
    dir_okay=False,
    help="TOML file with a [resreader] table overriding the packaged defaults.",
)
_LOG_LEVEL_OPTION = typer.Option(
    None,
    "--log-level",
    "-l",
    help="Override the logging level (DEBUG/INFO/WARNING/ERROR).",
)


def _build_settings(
    config_path: Path | None,
    *,
    log_level: str | None = None,
) -> ReaderSettings:
    """Merge defaults, the user file, ``RESREADER_*`` variables and flags."""

    user_config = load_user_config(config_path) if config_path else None
    return load_settings(
        user_config=user_config,
        env_config=settings_from_env(os.environ),
        overrides={"log_level": log_level},
    )


def _fail(message: str, exc: BaseException, code: int) -> typer.Exit:
    typer.secho(f"{message}: {exc}", err=True, fg=typer.colors.RED)
    cause = exc.__cause__
    if cause is not None:
        typer.secho(f"  caused by: {cause}", err=True, fg=typer.colors.RED)
    return typer.Exit(code=code)


def create_app() -> "typer.Typer":
    """Return the Typer application powering the ``resreader`` CLI."""

    app = typer.Typer(
        help=_app_help,
        no_args_is_help=True,
        rich_markup_mode="rich",
    )

    @app.callback()
    def main_callback() -> None:
        """Top-level CLI callback ensuring subcommands are dispatched."""

        return None

    @app.command("cat", help="Print the decoded content of LOCATION.")
    def cat_command(
        location: str = typer.Argument(..., help="Path, URL or classpath: entry."),
        encoding: str | None = typer.Option(
            None,
            "--encoding",
            "-e",
            help="Force an encoding instead of BOM detection and the default.",
        ),
        config_path: Path | None = _CONFIG_OPTION,
        log_level: str | None = _LOG_LEVEL_OPTION,
    ) -> None:
        settings = _build_settings(config_path, log_level=log_level)
        configure_logging(level=settings.log_level)
        logger = get_logger(__name__, command="cat")

        try:
            editor = ReaderEditor(
                ResourceEditor(ResourceLoader(settings)),
                encoding=encoding,
            )
            editor.set_as_text(location)
        except InvalidArgumentError as exc:
            raise _fail("Conversion failed", exc, _EXIT_CONVERSION) from exc

        reader = editor.value
        if reader is None:
            typer.secho("No location given.", err=True, fg=typer.colors.YELLOW)
            raise typer.Exit(code=_EXIT_NO_VALUE)

        with reader:
            try:
                content = reader.read()
            except UnicodeDecodeError as exc:
                raise _fail("Decoding failed", exc, _EXIT_CONVERSION) from exc
        logger.debug("cat-complete", location=location, characters=len(content))
        typer.echo(content, nl=False)

    @app.command("resolve", help="Show which resource LOCATION resolves to.")
    def resolve_command(
        location: str = typer.Argument(..., help="Path, URL or classpath: entry."),
        config_path: Path | None = _CONFIG_OPTION,
        log_level: str | None = _LOG_LEVEL_OPTION,
    ) -> None:
        settings = _build_settings(config_path, log_level=log_level)
        configure_logging(level=settings.log_level)

        editor = ResourceEditor(ResourceLoader(settings))
        try:
            editor.set_as_text(location)
        except InvalidArgumentError as exc:
            raise _fail("Resolution failed", exc, _EXIT_CONVERSION) from exc

        resource = editor.value
        if resource is None:
            typer.secho("No location given.", err=True, fg=typer.colors.YELLOW)
            raise typer.Exit(code=_EXIT_NO_VALUE)

        typer.echo(f"resource: {resource.description}")
        typer.echo(f"url: {editor.get_as_text() or '-'}")
        typer.echo(f"exists: {'yes' if resource.exists() else 'no'}")

    @app.command("config", help="Print the effective settings as TOML.")
    def config_command(
        config_path: Path | None = _CONFIG_OPTION,
    ) -> None:
        settings = _build_settings(config_path)
        typer.echo(render_settings(settings), nl=False)

    return app


__all__ = ["create_app"]
