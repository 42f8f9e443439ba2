"""Configuration for promptline.

Configuration is optional. Values come from, in increasing precedence:
built-in defaults, the user config file, ``PROMPTLINE_`` environment
variables, and CLI flags.
"""

from promptline.exceptions import ConfigError, ConfigLoadError, ConfigValidationError

from ._defaults import DEFAULT_CONFIG
from ._discovery import discover_sources, get_user_config_path
from ._load import safe_load_config
from ._loader import deep_merge, parse_env_vars, read_toml_file
from ._models import (
    Config,
    ConfigSource,
    ConfigSourceName,
    GitConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "DEFAULT_CONFIG",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "ConfigValidationError",
    "GitConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "deep_merge",
    "discover_sources",
    "get_user_config_path",
    "parse_env_vars",
    "read_toml_file",
    "safe_load_config",
]
