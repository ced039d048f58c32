"""CLI commands for repository configuration management."""

import typer

from branchnote.config import (
    DEFAULT_CONFIG,
    get_config_file,
    load_rule_config,
    save_config,
)
from branchnote.git import GitError, get_repo_root
from branchnote.rule import ConfigError

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage branchnote configuration in .branchnote/config.yaml",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective replace_branch options."""
    try:
        repo_root = get_repo_root()
        config = load_rule_config(repo_root)
        config_file = get_config_file(repo_root)

        if config_file.exists():
            typer.echo(f"replace_branch options ({config_file}):")
        else:
            typer.echo("replace_branch options (defaults, no config file found):")
        typer.echo()
        typer.echo(f"  branch_pattern: {config.branch_pattern}")
        typer.echo(f"  replacement_text: {config.replacement_text!r}")
        typer.echo(
            "  skip_if_pattern_matches_commit_message: "
            f"{config.skip_if_pattern_matches_commit_message}"
        )
        skip_if = " ".join(config.skip_if) if config.skip_if else "not set"
        typer.echo(f"  skip_if: {skip_if}")
        skipped = ", ".join(sorted(config.skipped_commit_types)) or "none"
        typer.echo(f"  skipped_commit_types: {skipped}")

    except (GitError, ConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("init")
def config_init(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing config file",
    ),
) -> None:
    """Write the default configuration to .branchnote/config.yaml."""
    try:
        repo_root = get_repo_root()
        config_file = get_config_file(repo_root)

        if config_file.exists() and not force:
            typer.echo(f"Config file already exists: {config_file}")
            typer.echo("Use --force to overwrite it.")
            raise typer.Exit(0)

        save_config(repo_root, DEFAULT_CONFIG)
        typer.echo(f"✓ Wrote default configuration to {config_file}")

    except (GitError, ConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
