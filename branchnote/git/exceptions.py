"""Git-related exception classes.

Contains:
- GitError: Base exception for git-related errors
- DetachedHeadError: Raised when HEAD does not point at a branch
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class DetachedHeadError(GitError):
    """Raised when HEAD is detached and there is no branch name."""

    pass
