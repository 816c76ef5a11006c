"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

__all__ = [
    "configure_logging",
]


def configure_logging(*, debug: bool = False, json_logs: bool = False) -> None:
    """Configure structured logging for the typomatch CLI.

    The matching engine only emits events; it never calls this itself, so
    embedding hosts keep whatever structlog setup they already have.

    Args:
        debug: Emit per-query debug events (candidate counts, budgets).
        json_logs: Render events as JSON lines instead of console text.
    """
    log_level = logging.DEBUG if debug else logging.WARNING

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # CLI tests swap stderr between invocations
        cache_logger_on_first_use=False,
    )

