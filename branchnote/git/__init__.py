"""Git access for branchnote.

This package provides:
- exceptions: GitError, DetachedHeadError
- runner: _run_git_command, get_repo_root
- branch: get_branch
"""

from branchnote.git.exceptions import (
    DetachedHeadError,
    GitError,
)
from branchnote.git.runner import (
    _run_git_command,
    get_repo_root,
)
from branchnote.git.branch import get_branch


__all__ = [
    # Exceptions
    "GitError",
    "DetachedHeadError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Branch
    "get_branch",
]
