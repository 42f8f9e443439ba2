# pyright: reportExplicitAny=false, reportAny=false
"""Configuration models.

This module provides the Pydantic models for promptline settings and the
Config container that validates merged configuration dictionaries.
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path  # noqa: TC003 - Used at runtime in dataclass field
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from promptline.config._defaults import DEFAULT_CONFIG
from promptline.config._loader import deep_merge, read_toml_file
from promptline.exceptions import ConfigValidationError


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class ConfigSourceName(StrEnum):
    """Configuration source names in precedence order.

    Values are ordered from highest precedence (CLI) to lowest (DEFAULT).
    """

    CLI = "cli"
    ENV = "env"
    FILE = "file"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """Represents a configuration source.

    Attributes:
        name: The source type identifier.
        path: Path to the config file, or None for non-file sources.
        exists: Whether the source exists (file exists, or values are present).
        values: Configuration values from this source.
    """

    name: ConfigSourceName
    path: Path | None
    exists: bool
    values: dict[str, Any]


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty disables logging).
        max_bytes: Log size in bytes that triggers rotation.
        backup_count: Number of rotated log files to keep.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.JSON
    file: str = ""
    max_bytes: int | None = Field(default=None, gt=0)
    backup_count: int | None = Field(default=None, ge=0)


class GitConfig(BaseModel):
    """Git configuration section.

    Attributes:
        executable: Name or path of the git executable.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    executable: str = Field(default="git", min_length=1)


def _validation_error(error: ValidationError, source: str | None) -> ConfigValidationError:
    """Convert the first Pydantic validation error into a ConfigValidationError."""
    first = error.errors()[0]
    key = ".".join(str(part) for part in first["loc"])
    msg = f"Invalid configuration value for '{key}': {first['msg']}"
    return ConfigValidationError(
        msg,
        key=key,
        value=first.get("input"),
        expected=first["type"],
        source=source,
    )


class Config(BaseModel):
    """Configuration container with typed access.

    Use the factory methods rather than the constructor so that values are
    merged with the defaults before validation.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    git: GitConfig = Field(default_factory=GitConfig)

    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        *,
        sources: tuple[ConfigSource, ...] = (),
        source_label: str | None = None,
    ) -> Self:
        """Create configuration from a dictionary.

        Args:
            data: Dictionary of configuration values.
            sources: Sources that contributed to the dictionary.
            source_label: Label used in validation error messages.

        Returns:
            Configuration object from the dictionary.

        Raises:
            ConfigValidationError: If validation fails.
        """
        merged = deep_merge(DEFAULT_CONFIG, data)
        try:
            config = cls.model_validate(merged)
        except ValidationError as e:
            raise _validation_error(e, source_label) from e
        config._sources = sources
        return config

    @classmethod
    def from_file(
        cls,
        path: Path,
        *,
        cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
    ) -> Self:
        """Load configuration from a specific file.

        User config and environment variables are not consulted.

        Args:
            path: Path to the TOML config file.
            cli_overrides: Dict of CLI argument overrides applied on top.

        Returns:
            Configuration object from the specified file and CLI overrides.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigValidationError: If validation fails.
        """
        data = read_toml_file(path)
        source = ConfigSource(
            name=ConfigSourceName.FILE,
            path=path,
            exists=True,
            values=data,
        )
        if not cli_overrides:
            return cls.from_dict(data, sources=(source,), source_label=str(path))

        cli_source = ConfigSource(
            name=ConfigSourceName.CLI,
            path=None,
            exists=True,
            values=cli_overrides,
        )
        return cls.from_dict(
            deep_merge(data, cli_overrides),
            sources=(cli_source, source),
            source_label=str(path),
        )

    @classmethod
    def load(
        cls,
        *,
        include_env: bool = True,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Load merged configuration from all sources.

        Sources are merged in precedence order (defaults -> user -> env -> cli).

        Args:
            include_env: Include environment variables as a source.
            cli_overrides: Dict of CLI argument overrides.

        Returns:
            Merged configuration object.

        Raises:
            ConfigLoadError: If the user config file cannot be parsed.
            ConfigValidationError: If merged config fails validation.
        """
        from promptline.config._discovery import discover_sources  # noqa: PLC0415

        sources = discover_sources(include_env=include_env, cli_overrides=cli_overrides)

        # Sources are discovered highest-to-lowest, so reverse for merging
        merged: dict[str, Any] = {}
        for source in reversed(sources):
            if source.exists:
                merged = deep_merge(merged, source.values)

        return cls.from_dict(merged, sources=tuple(sources))

    @property
    def sources(self) -> list[ConfigSource]:
        """Return the sources that contributed to this configuration."""
        return list(self._sources)
