"""Rule-related exception classes.

Contains:
- RuleError: Base exception for rule errors
- ConfigError: Raised when rule options are invalid
- MessageFileError: Raised when the commit message file cannot be read or written
"""


class RuleError(Exception):
    """Base exception for rule errors."""

    pass


class ConfigError(RuleError):
    """Raised when the rule configuration is invalid."""

    pass


class MessageFileError(RuleError):
    """Raised when the commit message file cannot be read or written."""

    pass
