"""Replacement text resolution.

The configured replacement_text is either a path to a file, whose contents
are inserted as-is, or a template whose backreferences (\\1 .. \\9, \\0 for
the whole match, \\k<name> for named groups) are filled from the branch
match. A doubled backslash stands for one literal backslash.
"""

import os
import re
from pathlib import Path

from branchnote.rule.exceptions import ConfigError
from branchnote.rule.models import MatchResult

_BACKREFERENCE = re.compile(r"\\(?:(\d)|k<(\w+)>|(\\))")


def _is_readable_file(text: str) -> bool:
    """Check whether text names an existing, readable regular file."""
    if not text:
        return False
    try:
        path = Path(text)
        return path.is_file() and os.access(path, os.R_OK)
    except (OSError, ValueError):
        # Not representable as a path (too long, NUL bytes, ...)
        return False


def expand_template(template: str, match: MatchResult) -> str:
    """Substitute backreferences in template with captured text.

    Args:
        template: Replacement template.
        match: The branch match supplying the captures.

    Returns:
        The expanded text. Missing or unmatched groups expand to "".
    """

    def _substitute(ref: re.Match) -> str:
        index, name, backslash = ref.groups()
        if backslash is not None:
            return backslash
        if index is not None:
            return match.group(int(index))
        return match.named_group(name)

    return _BACKREFERENCE.sub(_substitute, template)


def resolve_replacement(replacement_text: str, match: MatchResult) -> str:
    """Turn the configured replacement_text into the text to insert.

    Args:
        replacement_text: File path or template.
        match: The branch match supplying the captures.

    Returns:
        The file contents verbatim if replacement_text names a readable
        file, otherwise the expanded template.

    Raises:
        ConfigError: If the replacement file exists but cannot be read.
    """
    if _is_readable_file(replacement_text):
        try:
            with open(replacement_text, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
                return f.read()
        except OSError as e:
            raise ConfigError(f"Failed to read replacement text from {replacement_text}: {e}")
    return expand_template(replacement_text, match)
