"""promptline exceptions."""

# ruff: noqa: TC003  # Sequence and Path needed at runtime for annotations
from collections.abc import Sequence
from pathlib import Path
from typing import Any


class PromptlineError(Exception):
    """Base exception for promptline errors."""


class GitError(PromptlineError):
    """Base exception for git invocation errors."""


class GitSpawnError(GitError):
    """Raised when the git executable cannot be started at all.

    A failure to spawn git indicates a broken environment rather than a
    property of the repository, so it is not degraded to a default value.
    """

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str],
        cause: OSError | None = None,
    ) -> None:
        """Initialize with error message and the command that failed."""
        super().__init__(message)
        self.command: tuple[str, ...] = tuple(command)
        self.cause: OSError | None = cause


class ConfigError(PromptlineError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source
