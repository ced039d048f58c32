"""Data models for the replace-branch rule.

Contains:
- RuleConfig: Pydantic model for the rule options
- CommitContext: Dataclass describing the commit in progress
- MatchResult: Dataclass holding the outcome of a pattern match
- HookStatus / HookResult: Outcome reported back to the caller
"""

import re
import shlex
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from branchnote.rule.constants import (
    DEFAULT_BRANCH_PATTERN,
    DEFAULT_REPLACEMENT_TEXT,
    CommitKind,
)
from branchnote.rule.exceptions import ConfigError


class RuleConfig(BaseModel):
    """Options for the replace-branch rule.

    Attributes:
        branch_pattern: Regular expression applied to the branch name.
        replacement_text: Template with backreferences, or a path to a file.
        skip_if_pattern_matches_commit_message: Skip when the message
            already matches branch_pattern.
        skip_if: Command (argv) whose zero exit status skips the rewrite.
        skipped_commit_types: Commit kinds the rule does not apply to.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    branch_pattern: str = DEFAULT_BRANCH_PATTERN
    replacement_text: str = DEFAULT_REPLACEMENT_TEXT
    skip_if_pattern_matches_commit_message: bool = False
    skip_if: Optional[list[str]] = None
    skipped_commit_types: frozenset[str] = frozenset()

    @field_validator("branch_pattern")
    @classmethod
    def ensure_valid_pattern(cls, v):
        """Ensure branch_pattern compiles."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regular expression {v!r}: {e}")
        return v

    @field_validator("replacement_text", mode="before")
    @classmethod
    def ensure_replacement_string(cls, v):
        """Treat a missing replacement as empty."""
        if v is None:
            return ""
        return v

    @field_validator("skip_if", mode="before")
    @classmethod
    def ensure_skip_if_argv(cls, v):
        """Ensure skip_if is an argv list, or None when not configured."""
        if v is None:
            return None
        if isinstance(v, str):
            v = shlex.split(v)
        if isinstance(v, (list, tuple)):
            argv = [str(part) for part in v]
            return argv or None
        return v

    @field_validator("skipped_commit_types", mode="before")
    @classmethod
    def ensure_commit_types_set(cls, v):
        """Ensure skipped_commit_types is a set of lowercase kind names."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple, set, frozenset)):
            return frozenset(_kind_name(kind) for kind in v)
        return v

    @property
    def pattern(self) -> re.Pattern:
        """The compiled branch_pattern."""
        return re.compile(self.branch_pattern)

    @classmethod
    def from_options(cls, options: Optional[dict]) -> "RuleConfig":
        """Build a RuleConfig from a configuration mapping.

        Args:
            options: The rule's option mapping. Unknown keys are ignored.

        Returns:
            RuleConfig instance.

        Raises:
            ConfigError: If an option is invalid.
        """
        if options is None:
            options = {}
        if not isinstance(options, dict):
            raise ConfigError(f"Rule options must be a mapping, got {type(options).__name__}")
        try:
            return cls(**{str(key): value for key, value in options.items()})
        except ValidationError as e:
            raise ConfigError(f"Invalid replace_branch configuration:\n{e}")


def _kind_name(kind) -> str:
    """Normalise a CommitKind or string to its lowercase name."""
    if isinstance(kind, CommitKind):
        return kind.value
    return str(kind).strip().lower()


@dataclass(frozen=True)
class CommitContext:
    """The commit operation a hook invocation belongs to.

    kind is the raw source name git passed ("normal" when it passed none),
    so unknown sources are kept as given.
    """

    message_file: Path
    kind: str = CommitKind.NORMAL.value
    refs: tuple[str, ...] = ()

    @classmethod
    def from_argv(cls, argv: list[str]) -> "CommitContext":
        """Build a context from prepare-commit-msg arguments.

        Args:
            argv: [message_file, source?, refs...] as passed by git.

        Returns:
            CommitContext instance.

        Raises:
            ValueError: If argv is empty.
        """
        if not argv:
            raise ValueError("prepare-commit-msg requires the commit message file path")
        kind = _kind_name(argv[1]) if len(argv) > 1 and argv[1] else CommitKind.NORMAL.value
        return cls(
            message_file=Path(argv[0]),
            kind=kind,
            refs=tuple(argv[2:]),
        )


@dataclass(frozen=True)
class MatchResult:
    """Outcome of applying branch_pattern to a string.

    groups[0] is the whole match and groups[1..N] the captures; unmatched
    optional groups are None.
    """

    matched: bool
    groups: tuple[Optional[str], ...] = ()
    named: dict[str, Optional[str]] = field(default_factory=dict)

    @classmethod
    def no_match(cls) -> "MatchResult":
        return cls(matched=False)

    @classmethod
    def from_match(cls, match: re.Match) -> "MatchResult":
        return cls(
            matched=True,
            groups=(match.group(0),) + match.groups(),
            named=match.groupdict(),
        )

    def group(self, index: int) -> str:
        """Return capture group index, or "" if it is missing or unmatched."""
        if 0 <= index < len(self.groups):
            return self.groups[index] or ""
        return ""

    def named_group(self, name: str) -> str:
        """Return the named capture, or "" if it is missing or unmatched."""
        return self.named.get(name) or ""


class HookStatus(Enum):
    """Outcome of a hook run."""

    PASS = "pass"
    WARN = "warn"


@dataclass(frozen=True)
class HookResult:
    """Status of a hook run plus an optional message for the user."""

    status: HookStatus
    message: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.status is HookStatus.PASS
