"""CLI command that suggests a commit message and commits with it."""

import typer

from lazycommit.config import API_KEY_ENV_VAR
from lazycommit.git import GitError, commit_changes, get_staged_diff
from lazycommit.global_config import get_api_key
from lazycommit.llm import generate_commit_messages
from lazycommit.cli.selection import SelectionCancelledError, select_commit_message


def commit_command() -> None:
    """Suggest commit messages for the staged diff and commit with the chosen one.

    Every failure prints a message and stops before the commit. The exit
    status stays 0 in all of these cases.
    """
    api_key = get_api_key()
    if not api_key:
        typer.echo(
            f"No OpenAI API key found. Either set an {API_KEY_ENV_VAR} environment "
            "variable or use the lazycommit init command to set it.",
        )
        return

    try:
        diff = get_staged_diff()
    except GitError as e:
        typer.echo(f"Error running git diff: {e}")
        return

    commit_messages = generate_commit_messages(diff, api_key)
    if not commit_messages:
        typer.echo("An error occurred while getting commit messages.")
        return

    try:
        _, selected_message = select_commit_message(commit_messages)
    except SelectionCancelledError as e:
        typer.echo(f"Prompt failed: {e}")
        return

    try:
        result = commit_changes(selected_message)
    except GitError as e:
        typer.echo(f"Error committing changes: {e}")
        return

    if not result.succeeded:
        typer.echo("Error committing changes:")
    typer.echo(result.output.rstrip("\n"))
