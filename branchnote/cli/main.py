"""Top-level callback for the branchnote CLI."""

import typer

from branchnote import __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"branchnote {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Prefix commit messages with text derived from the branch name."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return
    typer.echo(ctx.get_help())
