"""Typo matching CLI command."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from typomatch.cli.context import CLIContext
from typomatch.cli.formatters import (
    print_best_match,
    print_error,
    print_info,
    print_match_table,
    print_warning,
)
from typomatch.infrastructure.candidates import (
    CandidateFileError,
    load_candidates,
    parse_lines,
)
from typomatch.modules.matching import MatchError, all_matches, best_match


def _stdin_is_terminal() -> bool:
    return sys.stdin.isatty()


def match(
    word: Annotated[str, typer.Argument(help="Word to complete")],
    candidates_file: Annotated[
        Path | None,
        typer.Argument(
            help="Candidate file (.json, .yaml or one per line); stdin if omitted",
            dir_okay=False,
        ),
    ] = None,
    best: Annotated[
        bool,
        typer.Option("--best", "-b", help="Print only the closest match"),
    ] = False,
    level: Annotated[
        str | None,
        typer.Option("--level", "-l", help="Typo budget: a count, 'sqrt' or 'half'"),
    ] = None,
    shrink: Annotated[
        int | None,
        typer.Option("--shrink", help="Max characters a match may be shorter"),
    ] = None,
    expand: Annotated[
        int | None,
        typer.Option("--expand", help="Max characters a match may be longer"),
    ] = None,
) -> None:
    """Find candidates that are within a few typos of WORD.

    \b
    Examples:
        typomatch match foobor words.txt           # Every match
        typomatch match foobor words.txt --best    # Closest match only
        cat words.txt | typomatch match foobor -l 2
    """
    settings = CLIContext.get().get_settings()
    if level is not None:
        settings = replace(settings, level=level)
    if shrink is not None:
        settings = replace(settings, shrink=shrink)
    if expand is not None:
        settings = replace(settings, expand=expand)

    try:
        if candidates_file is None:
            if _stdin_is_terminal():
                print_info("Reading candidates from stdin, one per line (Ctrl-D ends)")
            source = parse_lines(sys.stdin)
        else:
            source = load_candidates(candidates_file)
        config = settings.to_typo_config()

        if best:
            result = best_match(word, source, config=config)
        else:
            found = all_matches(word, source, config=config)
    except (CandidateFileError, MatchError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if best:
        if result is None:
            print_warning(f"No match for {word!r}")
            raise typer.Exit(1)
        print_best_match(word, result[0])
        return

    if not config.all_completions:
        print_warning("Listing all completions is disabled (use --best)")
        return
    if not found:
        print_warning(f"No matches for {word!r}")
        return

    print_match_table(word, found)
    print_info(f"{len(found)} match(es)")
