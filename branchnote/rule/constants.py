"""Constants for the replace-branch rule.

Contains:
- CommitKind: Commit message sources passed to prepare-commit-msg
- DEFAULT_BRANCH_PATTERN / DEFAULT_REPLACEMENT_TEXT: Option defaults
- NO_MATCH_WARNING: Warning shown when the branch does not match
"""

from enum import Enum


class CommitKind(str, Enum):
    """Kinds of commit operation, as named by git's prepare-commit-msg hook."""

    NORMAL = "normal"
    MESSAGE = "message"
    COMMIT = "commit"
    MERGE = "merge"
    SQUASH = "squash"
    TEMPLATE = "template"


# Leading issue number and topic, e.g. "123-fix-login"
DEFAULT_BRANCH_PATTERN = r"\A(\d+)-(\w+).*\Z"
DEFAULT_REPLACEMENT_TEXT = r"[#\1]"

NO_MATCH_WARNING = "branch name does not match expected pattern"
