"""User-facing diagnostics for hook runs.

Output goes to stderr via typer.echo so that it never mixes with anything
git reads from stdout.
"""

import typer


class HookLogger:
    """Warning and debug sink handed to the rule.

    Warnings are always printed and also kept in ``warnings`` so callers
    and tests can inspect them. Debug lines are printed only when
    ``debug`` is set.
    """

    def __init__(self, debug: bool = False, prefix: str = "branchnote"):
        self.debug_enabled = debug
        self.prefix = prefix
        self.warnings: list[str] = []

    def warning(self, message: str) -> None:
        self.warnings.append(message)
        typer.echo(f"[{self.prefix}] Warning: {message}", err=True)

    def debug(self, message: str) -> None:
        if self.debug_enabled:
            typer.echo(f"[{self.prefix}] {message}", err=True)
