"""Suggest commit messages for staged changes and commit with the chosen one."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("lazycommit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
