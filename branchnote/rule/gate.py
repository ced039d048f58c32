"""Commit-type exemption check."""

from typing import Iterable, Union

from branchnote.rule.constants import CommitKind


def is_exempt(kind: Union[CommitKind, str], skipped_commit_types: Iterable[str]) -> bool:
    """Check whether the commit kind is excluded from the rule.

    Args:
        kind: The commit kind of the current invocation.
        skipped_commit_types: Kind names configured as exempt.

    Returns:
        True if kind is one of skipped_commit_types. Kinds outside the
        known vocabulary are only exempt if listed verbatim.
    """
    name = kind.value if isinstance(kind, CommitKind) else str(kind).lower()
    return name in {str(k).lower() for k in skipped_commit_types}
