"""Global settings persistence.

Handles reading and writing config.json with schema versioning and
atomic writes. The matching engine never reads this file; the CLI turns
the loaded settings into a ``TypoConfig`` and passes it along.
"""

from __future__ import annotations

import json
import tempfile
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any

import structlog

from typomatch.infrastructure.paths import PathResolver
from typomatch.modules.matching.budget import (
    DEFAULT_EXPAND,
    DEFAULT_SHRINK,
    TypoConfig,
    resolve_level_policy,
)
from typomatch.modules.matching.errors import InvalidConfigurationError

__all__ = [
    "SETTING_KEYS",
    "ConfigError",
    "Settings",
    "load_settings",
    "save_settings",
    "update_setting",
]

logger = structlog.get_logger()

# Current schema version - increment when making breaking changes
# v1: level, shrink, expand, all_completions
SCHEMA_VERSION = "1"

# Maximum config file size (1MB)
MAX_CONFIG_SIZE = 1 * 1024 * 1024

SETTING_KEYS = ("level", "shrink", "expand", "all_completions")

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


class ConfigError(Exception):
    """Raised when configuration operations fail."""


@dataclass(frozen=True)
class Settings:
    """Immutable persisted settings.

    Attributes:
        level: Fixed typo budget, or a policy name such as "sqrt".
        shrink: Maximum characters a candidate may be shorter than the word.
        expand: Maximum characters a candidate may be longer than the word.
        all_completions: Whether listing every match is enabled.
    """

    level: int | str = "sqrt"
    shrink: int = DEFAULT_SHRINK
    expand: int = DEFAULT_EXPAND
    all_completions: bool = True

    def to_typo_config(self) -> TypoConfig:
        """Build the engine configuration.

        Raises:
            InvalidConfigurationError: If any value is out of range.
        """
        return TypoConfig(
            level_policy=resolve_level_policy(self.level),
            shrink=self.shrink,
            expand=self.expand,
            all_completions=self.all_completions,
        )


def update_setting(settings: Settings, key: str, value: str) -> Settings:
    """Return settings with one key set from its command-line text.

    Raises:
        ConfigError: If the key is unknown or the value is invalid.
    """
    if key not in SETTING_KEYS:
        raise ConfigError(f"Unknown setting: {key}")

    parsed: int | str | bool
    if key == "level":
        parsed = int(value) if value.strip().isdigit() else value.strip().lower()
    elif key == "all_completions":
        word = value.strip().lower()
        if word not in _TRUE_WORDS | _FALSE_WORDS:
            raise ConfigError(f"all_completions must be true or false, got {value!r}")
        parsed = word in _TRUE_WORDS
    else:
        try:
            parsed = int(value)
        except ValueError as e:
            raise ConfigError(f"{key} must be an integer, got {value!r}") from e

    updated = replace(settings, **{key: parsed})
    try:
        updated.to_typo_config()
    except InvalidConfigurationError as e:
        raise ConfigError(str(e)) from e
    return updated


def save_settings(settings: Settings, resolver: PathResolver | None = None) -> None:
    """Save settings to a JSON file.

    Uses atomic write (temp file + rename) to prevent corruption.

    Args:
        settings: Settings to save.
        resolver: Path resolver (defaults to $TYPOMATCH_HOME or ~/.typomatch).

    Raises:
        ConfigError: If saving fails.
    """
    if resolver is None:
        resolver = PathResolver()

    path = resolver.global_config()
    data = _settings_to_dict(settings)

    try:
        resolver.ensure_base()

        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as tmp:
            json.dump(data, tmp, indent=2)
            tmp_path = Path(tmp.name)

        tmp_path.replace(path)

        logger.debug("config_saved", path=str(path))

    except OSError as e:
        if "tmp_path" in locals():
            tmp_path.unlink(missing_ok=True)
        raise ConfigError(f"Failed to save config: {e}") from e


def load_settings(resolver: PathResolver | None = None) -> Settings:
    """Load settings from a JSON file.

    Missing, oversized or malformed files fall back to default settings
    with a warning.

    Args:
        resolver: Path resolver (defaults to $TYPOMATCH_HOME or ~/.typomatch).

    Returns:
        Settings instance (defaults if file missing or invalid).
    """
    if resolver is None:
        resolver = PathResolver()

    path = resolver.global_config()

    if not path.exists():
        logger.debug("config_not_found", path=str(path))
        return Settings()

    try:
        file_size = path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            logger.warning(
                "config_too_large",
                path=str(path),
                size=file_size,
                max_size=MAX_CONFIG_SIZE,
            )
            return Settings()

        data = json.loads(path.read_text(encoding="utf-8"))

        version = data.get("version")
        if version and version != SCHEMA_VERSION:
            logger.warning(
                "config_version_mismatch",
                path=str(path),
                expected=SCHEMA_VERSION,
                found=version,
            )

        settings = _dict_to_settings(data)
        settings.to_typo_config()
        return settings

    except json.JSONDecodeError as e:
        logger.warning("config_invalid_json", path=str(path), error=str(e))
        return Settings()
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        logger.warning("config_parse_error", path=str(path), error=str(e))
        return Settings()
    except InvalidConfigurationError as e:
        logger.warning("config_invalid_value", path=str(path), error=str(e))
        return Settings()
    except OSError as e:
        logger.warning("config_read_error", path=str(path), error=str(e))
        return Settings()


def _settings_to_dict(settings: Settings) -> dict[str, Any]:
    data = asdict(settings)
    data["version"] = SCHEMA_VERSION
    return data


def _dict_to_settings(data: dict[str, Any]) -> Settings:
    all_completions = data.get("all_completions", True)
    if not isinstance(all_completions, bool):
        raise TypeError(f"all_completions must be a boolean, got {all_completions!r}")
    return Settings(
        level=data.get("level", "sqrt"),
        shrink=data.get("shrink", DEFAULT_SHRINK),
        expand=data.get("expand", DEFAULT_EXPAND),
        all_completions=all_completions,
    )
