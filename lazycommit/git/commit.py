"""Committing staged changes."""

from dataclasses import dataclass

from lazycommit.git.runner import _run_git


@dataclass
class CommitResult:
    """Outcome of a ``git commit`` invocation."""

    returncode: int
    output: str

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


def commit_changes(message: str) -> CommitResult:
    """Commit the staged changes with the given message.

    The message is handed to git as a single argument, unmodified.

    Args:
        message: The commit message.

    Returns:
        A CommitResult with git's exit status and combined output.

    Raises:
        GitError: If git cannot be executed.
    """
    result = _run_git(["commit", "-m", message])
    return CommitResult(returncode=result.returncode, output=result.stdout or "")
