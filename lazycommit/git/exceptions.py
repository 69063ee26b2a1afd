"""Exceptions raised by the git helpers."""


class GitError(Exception):
    """Git could not be run or reported a failure."""

    pass


class NoStagedChangesError(GitError):
    """``git diff --staged`` succeeded but printed nothing."""

    pass
