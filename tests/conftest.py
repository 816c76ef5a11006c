"""Shared test fixtures for typomatch tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from typomatch.cli.context import CLIContext
from typomatch.infrastructure.paths import HOME_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None]:
    """Drop logging config a CLI invocation bound to its captured stderr."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path]:
    """Point settings storage at a temp dir and reset the CLI context.

    Returns the (not yet created) storage directory.
    """
    home = tmp_path / "home"
    monkeypatch.setenv(HOME_ENV_VAR, str(home))
    CLIContext.reset()
    yield home
    CLIContext.reset()


@pytest.fixture
def words_file(tmp_path: Path) -> Path:
    """A plain text candidate file, one word per line."""
    path = tmp_path / "words.txt"
    path.write_text("foobar\nfoo\nbarfoo\n", encoding="utf-8")
    return path
