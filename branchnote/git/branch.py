"""Current branch lookup."""

from branchnote.git.exceptions import DetachedHeadError
from branchnote.git.runner import _run_git_command


def get_branch() -> str:
    """Get the current branch name.

    Returns:
        The short name of the checked-out branch.

    Raises:
        DetachedHeadError: If HEAD is detached.
        GitError: If git cannot be run.
    """
    branch = _run_git_command(["branch", "--show-current"])
    if not branch:
        raise DetachedHeadError("HEAD is detached; no branch is checked out.")
    return branch
