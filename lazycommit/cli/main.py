"""Root callback for the lazycommit CLI."""

import typer

from lazycommit import __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lazycommit {__version__}")
        raise typer.Exit()


def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Suggest commit messages for staged changes with OpenAI."""
