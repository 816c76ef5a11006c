"""Tests for the config CLI commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from typomatch.cli.app import app
from typomatch.cli.context import CLIContext

if TYPE_CHECKING:
    from pathlib import Path

runner = CliRunner()


@pytest.mark.usefixtures("isolated_home")
class TestConfigShow:
    """Tests for typomatch config show."""

    def test_shows_defaults(self) -> None:
        """Defaults are shown when nothing is saved."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0, result.output
        assert "sqrt" in result.output
        assert "shrink" in result.output
        assert "expand" in result.output


@pytest.mark.usefixtures("isolated_home")
class TestConfigSet:
    """Tests for typomatch config set."""

    def test_persists_value(self, isolated_home: Path) -> None:
        """A valid value is written to config.json."""
        result = runner.invoke(app, ["config", "set", "shrink", "0"])

        assert result.exit_code == 0, result.output
        data = json.loads((isolated_home / "config.json").read_text(encoding="utf-8"))
        assert data["shrink"] == 0

    def test_value_used_by_show(self) -> None:
        """A saved value shows up in later commands."""
        runner.invoke(app, ["config", "set", "level", "half"])
        CLIContext.reset()

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0, result.output
        assert "half" in result.output

    def test_unknown_key_suggests(self) -> None:
        """Unknown keys fail with suggestions."""
        result = runner.invoke(app, ["config", "set", "shrnk", "0"])

        assert result.exit_code == 1
        assert "Unknown setting" in result.output
        assert "Did you mean?" in result.output
        assert "shrink" in result.output

    def test_invalid_value(self, isolated_home: Path) -> None:
        """Invalid values are rejected and nothing is saved."""
        result = runner.invoke(app, ["config", "set", "level", "cubic"])

        assert result.exit_code == 1
        assert not (isolated_home / "config.json").exists()
