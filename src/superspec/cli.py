"""Typer entry point for the ``superspec`` command."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Optional

import typer

from . import __version__
from . import log as superspec_log
from .commands import setting as setting_cmd
from .errors import SuperSpecError

app = typer.Typer(
    name="superspec",
    help="SuperSpec project tooling.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _log_level_callback(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in superspec_log.LEVEL_NAMES:
        expected = ", ".join(superspec_log.LEVEL_NAMES)
        raise typer.BadParameter(f"expected one of: {expected}")
    return normalized


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (trace|debug|info|success|warning|error).",
        callback=_log_level_callback,
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    if log_level is not None:
        superspec_log.set_level(log_level)
    if no_color:
        superspec_log.set_no_color(True)


@app.command("setting")
def setting(
    directory: Optional[str] = typer.Option(
        None,
        "--directory",
        "-C",
        help="Directory to start the project root search from.",
    ),
) -> None:
    """Configure external AI review for the current project."""
    try:
        setting_cmd.run_setting(SimpleNamespace(directory=directory))
    except SuperSpecError as exc:
        superspec_log.error(f"error: {exc}")
        if exc.recovery_hint:
            superspec_log.info(exc.recovery_hint, style="dim")
        raise typer.Exit(code=1) from exc


def main() -> None:
    app()


if __name__ == "__main__":
    main()
