"""saidify CLI - Main entry point with subcommand registration.

This module defines the main typer app and registers all subcommands.
"""

from typing import Optional

import typer

from saidify import __version__
from saidify.cli import said, version
from saidify.logs import configure_logging

# Main app
app = typer.Typer(
    name="saidify",
    help="Compute, inject and verify SAIDs (Self-Addressing Identifiers).",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"saidify version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    show_version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (default: SAIDIFY_LOG_LEVEL or INFO)",
    ),
) -> None:
    """saidify - Self-Addressing Identifier tools.

    All commands taking a structure accept a file path, inline JSON, or
    '-' for stdin.  Output is JSON by default for easy piping.

    Examples:
        saidify said compute credential.json
        saidify said inject - < draft.json | saidify said verify -
        saidify version parse KERI10JSON000041_
    """
    configure_logging(level=log_level)


app.add_typer(said.app, name="said", help="Compute and validate SAIDs")
app.add_typer(version.app, name="version", help="Generate and parse version strings")


if __name__ == "__main__":
    app()
