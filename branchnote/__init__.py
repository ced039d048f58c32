"""Prefix commit messages with text derived from the current branch name."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("branchnote")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
