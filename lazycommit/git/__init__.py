"""Git access for lazycommit.

This package provides:
- exceptions: GitError, NoStagedChangesError
- runner: _run_git, _run_git_command
- diff: get_staged_diff
- commit: commit_changes, CommitResult
"""

# Exceptions
from lazycommit.git.exceptions import (
    GitError,
    NoStagedChangesError,
)

# Runner utilities
from lazycommit.git.runner import (
    _run_git,
    _run_git_command,
)

# Diff collection
from lazycommit.git.diff import get_staged_diff

# Commit execution
from lazycommit.git.commit import (
    CommitResult,
    commit_changes,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoStagedChangesError",
    # Runner
    "_run_git",
    "_run_git_command",
    # Diff
    "get_staged_diff",
    # Commit
    "CommitResult",
    "commit_changes",
]
