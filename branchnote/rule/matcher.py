"""Branch pattern matching.

Contains:
- apply_pattern: Search a pattern in a piece of text
- match_branch: Match the branch pattern against a branch name
"""

import re
from typing import Optional, Union

from branchnote.rule.models import MatchResult


def apply_pattern(pattern: Union[str, re.Pattern], text: str) -> MatchResult:
    """Search pattern anywhere in text.

    The pattern is used as given; it is anchored only if it contains
    anchors itself.

    Args:
        pattern: Regular expression, compiled or not.
        text: The text to search.

    Returns:
        MatchResult with the captured groups, or a no-match result.
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    match = pattern.search(text)
    if match is None:
        return MatchResult.no_match()
    return MatchResult.from_match(match)


def match_branch(pattern: Union[str, re.Pattern], branch: Optional[str]) -> MatchResult:
    """Match the branch pattern against the current branch name.

    Args:
        pattern: The configured branch pattern.
        branch: The branch name, or None if it could not be determined.

    Returns:
        MatchResult. An unknown or empty branch never matches.
    """
    if not branch:
        return MatchResult.no_match()
    return apply_pattern(pattern, branch)
