"""Main CLI application."""

from __future__ import annotations

import typer

from typomatch import __version__
from typomatch.cli import config
from typomatch.cli.context import CLIContext
from typomatch.cli.match import match
from typomatch.infrastructure.logging import configure_logging

# Main application
app = typer.Typer(
    name="typomatch",
    help="Typo-tolerant completion matching.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Register commands
app.command("match")(match)
app.add_typer(config.app, name="config")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"typomatch {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - handled by callback
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress informational output.",
    ),
) -> None:
    """typomatch: find completions within a few typos of what you typed."""
    ctx = CLIContext.get()
    ctx.verbose = verbose
    ctx.quiet = quiet

    configure_logging(debug=verbose)
