"""The replace-branch commit message rule.

This package provides:
- constants: CommitKind, option defaults
- exceptions: RuleError, ConfigError, MessageFileError
- models: RuleConfig, CommitContext, MatchResult, HookStatus, HookResult
- gate: is_exempt
- matcher: apply_pattern, match_branch
- replacement: expand_template, resolve_replacement
- skip: SkipPredicate, CommandPredicate, build_predicate, evaluate_skip
- rewriter: read_message, prepend_to_message
- replace_branch: ReplaceBranchRule, run_replace_branch
"""

from branchnote.rule.constants import (
    DEFAULT_BRANCH_PATTERN,
    DEFAULT_REPLACEMENT_TEXT,
    NO_MATCH_WARNING,
    CommitKind,
)
from branchnote.rule.exceptions import (
    ConfigError,
    MessageFileError,
    RuleError,
)
from branchnote.rule.models import (
    CommitContext,
    HookResult,
    HookStatus,
    MatchResult,
    RuleConfig,
)
from branchnote.rule.gate import is_exempt
from branchnote.rule.matcher import apply_pattern, match_branch
from branchnote.rule.replacement import expand_template, resolve_replacement
from branchnote.rule.skip import (
    CommandPredicate,
    SkipDecision,
    SkipPredicate,
    build_predicate,
    evaluate_skip,
)
from branchnote.rule.rewriter import prepend_to_message, read_message
from branchnote.rule.replace_branch import ReplaceBranchRule, run_replace_branch


__all__ = [
    # Constants
    "CommitKind",
    "DEFAULT_BRANCH_PATTERN",
    "DEFAULT_REPLACEMENT_TEXT",
    "NO_MATCH_WARNING",
    # Exceptions
    "RuleError",
    "ConfigError",
    "MessageFileError",
    # Models
    "RuleConfig",
    "CommitContext",
    "MatchResult",
    "HookStatus",
    "HookResult",
    # Components
    "is_exempt",
    "apply_pattern",
    "match_branch",
    "expand_template",
    "resolve_replacement",
    "SkipPredicate",
    "CommandPredicate",
    "SkipDecision",
    "build_predicate",
    "evaluate_skip",
    "read_message",
    "prepend_to_message",
    # Entry points
    "ReplaceBranchRule",
    "run_replace_branch",
]
