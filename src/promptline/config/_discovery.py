# pyright: reportExplicitAny=false
"""Configuration source discovery.

This module determines the platform-specific user config file path and
collects every configuration source in precedence order.
"""

from pathlib import Path
from typing import Any

import platformdirs

from promptline.config._defaults import DEFAULT_CONFIG
from promptline.config._loader import parse_env_vars, read_toml_file
from promptline.config._models import ConfigSource, ConfigSourceName

APP_NAME = "promptline"


def get_user_config_path() -> Path:
    r"""Get platform-specific user config file path.

    - Linux: ``~/.config/promptline/config.toml``
    - macOS: ``~/Library/Application Support/promptline/config.toml``
    - Windows: ``%APPDATA%\promptline\config.toml``

    The path is returned regardless of whether the file exists.

    Returns:
        Path to the user config file for the current platform.
    """
    return platformdirs.user_config_path(APP_NAME) / "config.toml"


def _file_source(name: ConfigSourceName, path: Path) -> ConfigSource:
    """Build a source for a config file, reading it if present.

    Raises:
        ConfigLoadError: If the file exists but cannot be parsed.
    """
    if not path.is_file():
        return ConfigSource(name=name, path=path, exists=False, values={})
    return ConfigSource(name=name, path=path, exists=True, values=read_toml_file(path))


def discover_sources(
    *,
    include_env: bool = True,
    cli_overrides: dict[str, Any] | None = None,
) -> list[ConfigSource]:
    """Discover all configuration sources.

    Args:
        include_env: Include environment variables as a source.
        cli_overrides: Values from CLI flags, if any.

    Returns:
        Sources ordered from highest precedence (CLI) to lowest (DEFAULT).

    Raises:
        ConfigLoadError: If the user config file cannot be parsed.
    """
    sources: list[ConfigSource] = []

    if cli_overrides:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.CLI,
                path=None,
                exists=True,
                values=cli_overrides,
            )
        )

    if include_env:
        env_values = parse_env_vars()
        sources.append(
            ConfigSource(
                name=ConfigSourceName.ENV,
                path=None,
                exists=bool(env_values),
                values=env_values,
            )
        )

    sources.append(_file_source(ConfigSourceName.USER, get_user_config_path()))
    sources.append(
        ConfigSource(
            name=ConfigSourceName.DEFAULT,
            path=None,
            exists=True,
            values=DEFAULT_CONFIG,
        )
    )
    return sources
