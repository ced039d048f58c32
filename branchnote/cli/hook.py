"""CLI command run from git's prepare-commit-msg hook."""

from pathlib import Path
from typing import List, Optional

import typer

from branchnote.config import load_rule_config
from branchnote.git import GitError, get_branch, get_repo_root
from branchnote.log import HookLogger
from branchnote.rule import RuleError, run_replace_branch


def prepare_commit_msg_command(
    message_file: Path = typer.Argument(
        ...,
        help="Path to the commit message file (first hook argument)",
    ),
    source: Optional[str] = typer.Argument(
        None,
        help="Source of the message: message, template, merge, squash or commit",
    ),
    refs: Optional[List[str]] = typer.Argument(
        None,
        help="Commit object name, passed by git for 'commit' sources",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Print each decision the rule makes",
    ),
) -> None:
    """Prefix the commit message with text derived from the branch name.

    Install by calling this from .git/hooks/prepare-commit-msg with the
    hook's own arguments, e.g. 'branchnote prepare-commit-msg "$@"'.
    """
    logger = HookLogger(debug=debug)

    try:
        repo_root = get_repo_root()
    except GitError as e:
        logger.debug(f"{e} Using {Path.cwd()} for configuration.")
        repo_root = Path.cwd()

    argv = [str(message_file)]
    if source:
        argv.append(source)
        argv.extend(refs or [])

    try:
        config = load_rule_config(repo_root)
        run_replace_branch(argv, config, logger=logger, branch_provider=get_branch)
    except RuleError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
