"""Loading candidate collections from files.

Structured files (.json, .yaml, .yml) keep their shape: a mapping becomes
a frequency table, a list of [key, value] pairs an associative list and a
list of strings a plain sequence. Any other file is read as one candidate
per non-blank line.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import structlog
import yaml

from typomatch.modules.matching.sources import (
    AssociativeListSource,
    CandidateSource,
    FrequencyTableSource,
    SequenceSource,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

__all__ = [
    "CandidateFileError",
    "load_candidates",
    "parse_lines",
]

logger = structlog.get_logger()

# Maximum candidate file size (16MB)
MAX_CANDIDATE_FILE_SIZE = 16 * 1024 * 1024

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class CandidateFileError(Exception):
    """Raised when a candidate file cannot be read or parsed."""


def parse_lines(lines: Iterable[str]) -> SequenceSource:
    """One candidate per non-blank line, surrounding whitespace stripped."""
    return SequenceSource(line.strip() for line in lines if line.strip())


def load_candidates(path: Path) -> CandidateSource:
    """Read a candidate source from disk.

    Args:
        path: Candidate file.

    Returns:
        A frequency table, associative list or sequence source.

    Raises:
        CandidateFileError: If the file is unreadable, too large, or its
            contents have an unsupported shape.
    """
    try:
        file_size = path.stat().st_size
        if file_size > MAX_CANDIDATE_FILE_SIZE:
            raise CandidateFileError(
                f"Candidate file too large: {path} ({file_size} bytes)"
            )
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CandidateFileError(f"Cannot read candidate file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise CandidateFileError(f"Candidate file {path} is not UTF-8: {e}") from e

    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise CandidateFileError(f"Invalid JSON in {path}: {e}") from e
    elif suffix in _YAML_SUFFIXES:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise CandidateFileError(f"Invalid YAML in {path}: {e}") from e
    else:
        source = parse_lines(content.splitlines())
        logger.debug("candidates_loaded", path=str(path), kind="lines")
        return source

    source = _structured_source(data, path)
    logger.debug("candidates_loaded", path=str(path), kind=type(source).__name__)
    return source


def _structured_source(data: Any, path: Path) -> CandidateSource:
    if data is None:
        return SequenceSource([])

    if isinstance(data, dict):
        return FrequencyTableSource({str(key): value for key, value in data.items()})

    if isinstance(data, list):
        if data and all(_is_pair(entry) for entry in data):
            return AssociativeListSource((str(key), value) for key, value in data)
        if all(isinstance(entry, str) for entry in data):
            return SequenceSource(data)

    raise CandidateFileError(
        f"{path} must hold a mapping, a list of strings or a list of "
        f"[key, value] pairs"
    )


def _is_pair(entry: Any) -> bool:
    return isinstance(entry, list) and len(entry) == 2 and isinstance(entry[0], str)
