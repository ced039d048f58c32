"""Skip decision for the replace-branch rule.

Contains:
- SkipPredicate: Protocol for the skip_if predicate
- CommandPredicate: Predicate backed by an external command
- build_predicate: Create the predicate from the skip_if option
- SkipDecision / evaluate_skip: Decide whether to leave the message alone
"""

import subprocess
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from branchnote.rule.matcher import apply_pattern
from branchnote.rule.models import RuleConfig

# Exit status reported when the command cannot be started
COMMAND_NOT_RUN = 127


class SkipPredicate(Protocol):
    """Anything that can be run and reports an exit status."""

    def run(self) -> int:
        ...


class CommandPredicate:
    """Run an argv command and report its exit status.

    The command gets no input and its output is discarded. There is no
    timeout.
    """

    def __init__(self, argv: Sequence[str]):
        self.argv = list(argv)

    def run(self) -> int:
        try:
            result = subprocess.run(
                self.argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError:
            return COMMAND_NOT_RUN
        return result.returncode

    def __repr__(self) -> str:
        return f"CommandPredicate({self.argv!r})"


def build_predicate(skip_if: Optional[Sequence[str]]) -> Optional[SkipPredicate]:
    """Create the skip_if predicate, or None when skip_if is not configured."""
    if not skip_if:
        return None
    return CommandPredicate(skip_if)


@dataclass(frozen=True)
class SkipDecision:
    """Inputs and result of the skip evaluation."""

    skip: bool
    message_already_matches: bool
    predicate_ok: bool


def evaluate_skip(
    config: RuleConfig,
    message: str,
    predicate: Optional[SkipPredicate],
) -> SkipDecision:
    """Decide whether the rewrite must be skipped.

    The predicate is run whenever one is configured, even when the
    message match already settles the outcome.

    Args:
        config: The rule configuration.
        message: The current, unmodified commit message.
        predicate: The skip_if predicate, or None.

    Returns:
        SkipDecision.
    """
    message_already_matches = apply_pattern(config.pattern, message).matched
    predicate_ok = predicate is not None and predicate.run() == 0

    skip = (
        config.skip_if_pattern_matches_commit_message and message_already_matches
    ) or predicate_ok
    return SkipDecision(
        skip=skip,
        message_already_matches=message_already_matches,
        predicate_ok=predicate_ok,
    )
