"""CLI entry point for branchnote.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from branchnote.cli.config import config_app
from branchnote.cli.hook import prepare_commit_msg_command
from branchnote.cli.main import main_command

# Main application
app = typer.Typer(
    name="branchnote",
    help="branchnote: prefix commit messages with branch-derived text",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("prepare-commit-msg")(prepare_commit_msg_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "prepare_commit_msg_command",
    "main_command",
]
