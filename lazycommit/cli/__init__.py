"""CLI entry point for lazycommit."""

import typer

from lazycommit.cli.commit import commit_command
from lazycommit.cli.init import init_config
from lazycommit.cli.main import main_callback

app = typer.Typer(
    name="lazycommit",
    help="lazycommit: AI-suggested commit messages for your staged changes",
    add_completion=False,
    no_args_is_help=True,
)

app.command(
    "commit",
    help="Print suggested commit messages for the staged diff and commit with the chosen one",
)(commit_command)
app.command("init")(init_config)

app.callback()(main_callback)


__all__ = [
    "app",
    "commit_command",
    "init_config",
    "main_callback",
]
