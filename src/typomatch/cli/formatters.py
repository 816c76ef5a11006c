"""Rich console output formatting utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from typomatch.cli.context import CLIContext
from typomatch.infrastructure.similarity import levenshtein_distance

if TYPE_CHECKING:
    from typomatch.infrastructure.config import Settings

__all__ = [
    "console",
    "error_console",
    "print_best_match",
    "print_did_you_mean",
    "print_error",
    "print_info",
    "print_match_table",
    "print_settings",
    "print_success",
    "print_warning",
]

# Shared console instance
console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message.

    Suppressed when --quiet flag is set.
    """
    if not CLIContext.get().quiet:
        console.print(f"[blue]i[/blue] {message}")


def print_did_you_mean(suggestions: list[str]) -> None:
    """Print 'Did you mean?' suggestions."""
    if not suggestions:
        return

    console.print()
    console.print("[dim]Did you mean?[/dim]")
    for name in suggestions:
        console.print(f"  [cyan]{name}[/cyan]")


def print_match_table(word: str, candidates: list[str]) -> None:
    """Print accepted candidates with their distance to the word.

    Rows keep the order the engine produced them in.
    """
    table = Table(title=f"Typo matches for {escape(repr(word))}")
    table.add_column("Candidate", style="cyan", no_wrap=True)
    table.add_column("Distance", justify="right")
    table.add_column("Length", justify="right", style="dim")

    for candidate in candidates:
        table.add_row(
            escape(candidate),
            str(levenshtein_distance(word, candidate)),
            str(len(candidate)),
        )

    console.print(table)


def print_best_match(word: str, candidate: str) -> None:
    """Print the selected best match.

    With --quiet only the candidate itself is printed, for scripting.
    """
    if CLIContext.get().quiet:
        console.print(candidate, markup=False, highlight=False)
        return

    distance = levenshtein_distance(word, candidate)
    print_success(
        f"[bold]{escape(candidate)}[/bold] [dim](distance {distance})[/dim]"
    )


def print_settings(settings: Settings) -> None:
    """Print effective settings as a two-column table."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("level", str(settings.level))
    table.add_row("shrink", str(settings.shrink))
    table.add_row("expand", str(settings.expand))
    table.add_row("all_completions", str(settings.all_completions).lower())

    console.print(table)
