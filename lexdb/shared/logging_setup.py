"""
lexdb/shared/logging_setup.py
-----------------------------

Central logging configuration for lexdb.

Goals:
- Provide a single place to configure log level and rendering.
- Make it easy to get a logger in any module:
      import structlog
      logger = structlog.get_logger()
- Allow overrides via settings / environment variables:
      LEXDB_LOG_LEVEL   (e.g. DEBUG, INFO, WARNING, ERROR)
      LEXDB_LOG_FORMAT  ("console" or "json")

Usage
=====

In your module:

    import structlog

    logger = structlog.get_logger()

    logger.info("index_scan_complete", category="noun", terms=12)

In an application entry point (optional):

    from lexdb.shared.logging_setup import init_logging

    init_logging()  # ensures consistent global config

Implementation notes
====================

- Events are rendered by structlog and written to stderr, which is the
  error channel for file-open failures during index scans.
- `init_logging` is idempotent; calling it multiple times is safe.
- Filtering happens in the bound logger, so disabled levels cost nothing.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

import structlog

from lexdb.shared.config import LogFormat, settings

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False


def _stderr_logger_factory(*args: object) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honoured.
    return structlog.PrintLogger(sys.stderr)


def _resolve_level(level: Union[int, str, None]) -> int:
    """
    Map a level name or number to a logging level.
    Defaults to logging.INFO if unset or invalid.
    """
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def init_logging(
    level: Union[int, str, None] = None,
    fmt: Optional[str] = None,
    *,
    force: bool = False,
) -> None:
    """
    Initialize structlog configuration.

    Args:
        level:
            Logging level (e.g. logging.DEBUG or "DEBUG"). If None, it is read
            from settings.LOG_LEVEL.
        fmt:
            "console" or "json". If None, settings.LOG_FORMAT is used.
        force:
            If True, reconfigure logging even if it was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    fmt = LogFormat(fmt) if fmt is not None else settings.LOG_FORMAT

    renderer: structlog.typing.Processor
    if fmt == LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

    _INITIALIZED = True


__all__ = ["init_logging"]
