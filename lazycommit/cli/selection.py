"""Interactive selection of a suggested commit message."""

from InquirerPy import inquirer
from InquirerPy.base.control import Choice


class SelectionCancelledError(Exception):
    """Raised when the user cancels the selection or the terminal fails."""

    pass


def select_commit_message(messages: list[str]) -> tuple[int, str]:
    """Show the suggestions in an arrow-key list and wait for a choice.

    Args:
        messages: The suggestions, in display order. Must not be empty.

    Returns:
        Tuple of (index, message) for the chosen suggestion.

    Raises:
        ValueError: If messages is empty.
        SelectionCancelledError: If the user aborts or input fails.
    """
    if not messages:
        raise ValueError("No commit messages to select from")

    # Values are indices so duplicate suggestions stay distinguishable
    choices = [Choice(value=i, name=message) for i, message in enumerate(messages)]

    try:
        index = inquirer.select(
            message="Select a commit message",
            choices=choices,
        ).execute()
    except KeyboardInterrupt:
        raise SelectionCancelledError("^C")
    except (EOFError, OSError) as e:
        raise SelectionCancelledError(str(e) or type(e).__name__)

    if index is None:
        raise SelectionCancelledError("no selection made")

    return index, messages[index]
