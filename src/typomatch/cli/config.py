"""Settings CLI commands."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape

from typomatch.cli.context import CLIContext
from typomatch.cli.formatters import (
    print_did_you_mean,
    print_error,
    print_settings,
    print_success,
)
from typomatch.infrastructure.config import (
    SETTING_KEYS,
    ConfigError,
    save_settings,
    update_setting,
)
from typomatch.infrastructure.similarity import find_similar_names

app = typer.Typer(
    name="config",
    help="Show and change matching settings.",
    no_args_is_help=True,
)


@app.command("show")
def show() -> None:
    """Show the effective settings."""
    print_settings(CLIContext.get().get_settings())


@app.command("set")
def set_value(
    key: Annotated[str, typer.Argument(help="Setting name")],
    value: Annotated[str, typer.Argument(help="New value")],
) -> None:
    """Validate and persist one setting.

    \b
    Examples:
        typomatch config set level half
        typomatch config set level 2
        typomatch config set shrink 0
        typomatch config set all_completions false
    """
    ctx = CLIContext.get()

    if key not in SETTING_KEYS:
        print_error(f"Unknown setting: {key}")
        print_did_you_mean(find_similar_names(key, list(SETTING_KEYS)))
        raise typer.Exit(1)

    try:
        settings = update_setting(ctx.get_settings(), key, value)
        save_settings(settings)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    ctx.settings = settings
    print_success(f"{key} = {escape(value)}")
