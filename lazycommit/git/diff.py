"""Staged diff collection."""

from lazycommit.git.exceptions import NoStagedChangesError
from lazycommit.git.runner import _run_git_command


def get_staged_diff() -> str:
    """Get the raw output of ``git diff --staged``.

    Returns:
        The staged diff exactly as git printed it.

    Raises:
        GitError: If git is missing, the directory is not a repository,
            or git exits with a non-zero status.
        NoStagedChangesError: If nothing is staged.
    """
    diff = _run_git_command(["diff", "--staged"])

    if not diff.strip():
        raise NoStagedChangesError(
            "No staged changes found. Stage your changes first with: git add <files>"
        )

    return diff
