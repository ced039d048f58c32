"""The replace-branch rule.

Prefixes the commit message with text built from the current branch name,
for example turning branch ``123-login`` into a ``[#123]`` message prefix.

Order of checks:
1. Exempt commit kinds pass silently.
2. A branch that does not match branch_pattern produces one warning.
3. The skip conditions may leave the message as it is.
4. Otherwise the resolved replacement is written in front of the message.
"""

from typing import Callable, Optional

from branchnote.git import GitError, get_branch
from branchnote.log import HookLogger
from branchnote.rule.constants import NO_MATCH_WARNING
from branchnote.rule.gate import is_exempt
from branchnote.rule.matcher import match_branch
from branchnote.rule.models import CommitContext, HookResult, HookStatus, RuleConfig
from branchnote.rule.replacement import resolve_replacement
from branchnote.rule.rewriter import prepend_to_message, read_message
from branchnote.rule.skip import SkipPredicate, build_predicate, evaluate_skip


class ReplaceBranchRule:
    """Insert branch-derived text in front of the commit message.

    Args:
        config: The rule options.
        branch_provider: Returns the current branch name; may raise GitError.
        predicate: The skip_if predicate. Built from config.skip_if when omitted.
        logger: Warning and debug sink.
    """

    def __init__(
        self,
        config: RuleConfig,
        branch_provider: Callable[[], str] = get_branch,
        predicate: Optional[SkipPredicate] = None,
        logger: Optional[HookLogger] = None,
    ):
        self.config = config
        self.branch_provider = branch_provider
        self.predicate = predicate if predicate is not None else build_predicate(config.skip_if)
        self.logger = logger if logger is not None else HookLogger()

    def current_branch(self) -> Optional[str]:
        """Return the branch name, or None if it cannot be determined."""
        try:
            return self.branch_provider() or None
        except GitError as e:
            self.logger.debug(f"Could not determine current branch: {e}")
            return None

    def run(self, context: CommitContext) -> HookResult:
        """Apply the rule to the commit described by context.

        Returns:
            HookResult with PASS, or WARN when the branch does not match.

        Raises:
            MessageFileError: If the message file cannot be read or written.
            ConfigError: If the replacement file cannot be read.
        """
        config = self.config

        if is_exempt(context.kind, config.skipped_commit_types):
            self.logger.debug(f"'{context.kind}' commits are exempt, skipping")
            return HookResult(HookStatus.PASS)

        branch = self.current_branch()
        self.logger.debug(f"Checking if '{branch}' matches {config.branch_pattern}")
        match = match_branch(config.pattern, branch)
        if not match.matched:
            if branch is None:
                warning = f"{NO_MATCH_WARNING} (current branch could not be determined)"
            else:
                warning = f"{NO_MATCH_WARNING}: '{branch}' !~ {config.branch_pattern}"
            self.logger.warning(warning)
            return HookResult(HookStatus.WARN, warning)

        message = read_message(context.message_file)

        decision = evaluate_skip(config, message, self.predicate)
        if decision.skip:
            self.logger.debug(
                "Leaving commit message unchanged "
                f"(message matches: {decision.message_already_matches}, "
                f"skip_if succeeded: {decision.predicate_ok})"
            )
            return HookResult(HookStatus.PASS)

        replacement = resolve_replacement(config.replacement_text, match)
        self.logger.debug(f"Writing {context.message_file} with {replacement!r}")
        prepend_to_message(context.message_file, replacement, message)
        return HookResult(HookStatus.PASS)


def run_replace_branch(
    argv: list[str],
    config: RuleConfig,
    logger: Optional[HookLogger] = None,
    branch_provider: Callable[[], str] = get_branch,
    predicate: Optional[SkipPredicate] = None,
) -> HookResult:
    """Run the rule for one prepare-commit-msg invocation.

    Args:
        argv: The hook arguments (message file, source, refs).
        config: The rule options.
        logger: Warning and debug sink.
        branch_provider: Returns the current branch name.
        predicate: Overrides the skip_if predicate.

    Returns:
        HookResult.
    """
    context = CommitContext.from_argv(argv)
    rule = ReplaceBranchRule(
        config,
        branch_provider=branch_provider,
        predicate=predicate,
        logger=logger,
    )
    return rule.run(context)
