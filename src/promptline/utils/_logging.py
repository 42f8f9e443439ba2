"""Logging utilities for promptline.

This module provides standalone structlog logger factories that write
JSON-formatted or text-formatted logs to a file. Each logger is
self-contained and does not modify global structlog configuration.

promptline runs on every prompt render, so logging is off unless a log
file is configured: without one, the factory returns a logger that drops
every record.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]

DEBUG_ENV_VAR = "PROMPTLINE_DEBUG"


def _log_level_from_string(level: str, *, respect_env: bool = False) -> int:
    """Convert a log level string to a logging level integer.

    Args:
        level: Log level string (debug, info, warning, error).
        respect_env: If True, PROMPTLINE_DEBUG overrides to DEBUG level.

    Returns:
        The logging level as an integer.
    """
    if respect_env and getenv(DEBUG_ENV_VAR, None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.INFO)


def _build_processors(log_format: LogFormatType) -> list[structlog.typing.Processor]:
    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        # Add dict_tracebacks for structured exception logging in JSON
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Text format: "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def _create_logger(
    log_file_path: str,
    *,
    log_level: int = logging.INFO,
    log_format: LogFormatType = "json",
    max_bytes: int | None = None,
    backup_count: int | None = None,
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a standalone structlog logger writing to the specified file.

    Args:
        log_file_path: Path to the log file (will be opened in append mode).
        log_level: Minimum level of records to write.
        log_format: Output format, either "json" or "text".
        max_bytes: Maximum size in bytes before rotation. Must be set with
            backup_count for rotation to be enabled.
        backup_count: Number of rotated log files to keep. Must be set with
            max_bytes for rotation to be enabled.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    log_path = Path(log_file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # Use stdlib logger with RotatingFileHandler when both max_bytes and
    # backup_count are provided, otherwise write to the file directly
    raw_logger: object
    if max_bytes is not None and backup_count is not None:
        stdlib_logger = logging.getLogger(f"promptline.{log_path.stem}.{id(log_path)}")
        stdlib_logger.handlers.clear()
        stdlib_logger.propagate = False
        stdlib_logger.setLevel(log_level)

        handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        handler.setLevel(log_level)
        # structlog renders the record; the handler only writes the message
        handler.setFormatter(logging.Formatter("%(message)s"))
        stdlib_logger.addHandler(handler)
        raw_logger = stdlib_logger
    else:
        raw_logger = structlog.WriteLoggerFactory(file=log_path.open("a"))()

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            raw_logger,
            processors=_build_processors(log_format),
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            context_class=dict,
        ),
    )


def create_null_logger() -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger that discards every record."""
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=[],
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
            context_class=dict,
        ),
    )


def create_cli_logger(
    *,
    level: str = "warning",
    log_format: LogFormatType = "json",
    log_file: str = "",
    max_bytes: int | None = None,
    backup_count: int | None = None,
    command: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger for the promptline CLI.

    The log level can be overridden by environment variables:
    - PROMPTLINE_DEBUG: If set, enables DEBUG level logging regardless of config

    Args:
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to log file. Empty disables logging.
        max_bytes: Maximum size in bytes before rotation.
        backup_count: Number of rotated log files to keep.
        command: Name of the CLI command for context (bound to all entries).

    Returns:
        A FilteringBoundLogger instance configured for CLI logging. If the log
        file cannot be opened, a warning goes to stderr and the returned
        logger drops every record.
    """
    if not log_file:
        return create_null_logger()

    try:
        logger = _create_logger(
            log_file,
            log_level=_log_level_from_string(level, respect_env=True),
            log_format=log_format,
            max_bytes=max_bytes,
            backup_count=backup_count,
        )
    except OSError as e:
        print(f"Warning: Cannot open log file {log_file}: {e}", file=sys.stderr)  # noqa: T201
        return create_null_logger()

    # Bind command name to all log entries if provided
    if command:
        return logger.bind(command=command)
    return logger
