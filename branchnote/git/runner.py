"""Git command runner.

Contains:
- _run_git_command: Run git and return its output
- get_repo_root: Locate the top of the working tree
"""

import subprocess
from pathlib import Path
from typing import Optional

from branchnote.git.exceptions import GitError


def _run_git_command(args: list[str], cwd: Optional[Path] = None) -> str:
    """Run git with args and return its stripped stdout.

    Args:
        args: Arguments to pass to git.
        cwd: Directory to run git in; the current directory by default.

    Raises:
        GitError: If git is missing or exits non-zero.
    """
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"git {' '.join(args)} failed (exit {e.returncode}): {stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    return result.stdout.strip()


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the working tree containing cwd.

    Raises:
        GitError: If cwd is not inside a git working tree.
    """
    try:
        return Path(_run_git_command(["rev-parse", "--show-toplevel"], cwd=cwd))
    except GitError as e:
        raise GitError(f"Not in a git repository ({e})")
