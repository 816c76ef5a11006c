"""Tests for logging configuration."""

from __future__ import annotations

import json

import pytest
import structlog

from typomatch.infrastructure.logging import configure_logging


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON mode renders one JSON object per event."""
        configure_logging(debug=True, json_logs=True)

        structlog.get_logger().debug("edits_generated", word="cat", count=2)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "edits_generated"
        assert event["count"] == 2
        assert event["level"] == "debug"

    def test_debug_filtered_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without debug only warnings and above are emitted."""
        configure_logging(json_logs=True)

        structlog.get_logger().debug("edits_generated")
        structlog.get_logger().warning("config_invalid_json")

        err = capsys.readouterr().err
        assert "edits_generated" not in err
        assert "config_invalid_json" in err
