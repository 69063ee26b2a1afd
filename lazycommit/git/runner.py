"""Git command runner.

Contains:
- _run_git: Run a git command and capture stdout and stderr together
- _run_git_command: Run a git command and return its output, failing on non-zero exit
"""

import subprocess

from lazycommit.git.exceptions import GitError


def _run_git(args: list[str]) -> subprocess.CompletedProcess:
    """Run a git command with stderr merged into stdout.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The completed process. ``stdout`` holds the combined output.

    Raises:
        GitError: If git cannot be executed.
    """
    try:
        return subprocess.run(
            ["git"] + args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    except OSError as e:
        raise GitError(f"Failed to run git: {e}")


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its combined output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The combined stdout/stderr of the git command, unmodified.

    Raises:
        GitError: If git cannot be executed or exits with a non-zero status.
    """
    result = _run_git(args)
    if result.returncode != 0:
        output = (result.stdout or "").strip()
        raise GitError(
            f"Git command failed: git {' '.join(args)} "
            f"(exit status {result.returncode})\n{output}".rstrip()
        )
    return result.stdout or ""
