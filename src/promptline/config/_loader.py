# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""TOML configuration file loading and merging."""

import json
import os
import tomllib
from pathlib import Path  # noqa: TC003 - Used at runtime in annotations
from typing import Any

from promptline.exceptions import ConfigLoadError

ENV_PREFIX = "PROMPTLINE_"


def read_toml_file(path: Path) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Read and parse a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Parsed TOML content as dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file cannot be parsed.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse TOML file: {e}"
        raise ConfigLoadError(
            msg,
            path=path,
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e


def copy_value(value: Any) -> Any:  # pyright: ignore[reportExplicitAny]
    """Create a deep copy of a configuration value."""
    if isinstance(value, dict):
        return {k: copy_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [copy_value(item) for item in value]
    return value


def deep_merge(
    base: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    override: dict[str, Any],  # pyright: ignore[reportExplicitAny]
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Deep merge two configuration dictionaries.

    Merges `override` into `base`, returning a new dictionary. Neither input
    is modified.

    Merge rules:
        - Dictionaries are recursively merged
        - Arrays are replaced entirely (no element-wise merge)
        - Scalars are replaced with override value
        - Missing keys in override preserve base values

    Args:
        base: Base configuration (lower precedence).
        override: Override configuration (higher precedence).

    Returns:
        Merged configuration dictionary.
    """
    result: dict[str, Any] = {k: copy_value(v) for k, v in base.items()}  # pyright: ignore[reportExplicitAny]

    for key, override_val in override.items():
        base_val = result.get(key)
        if isinstance(base_val, dict) and isinstance(override_val, dict):
            result[key] = deep_merge(base_val, override_val)
        else:
            result[key] = copy_value(override_val)

    return result


def set_nested_key(
    data: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    dotted_key: str,
    value: Any,  # pyright: ignore[reportExplicitAny]
) -> None:
    """Set a value in a nested dictionary using a dotted key path.

    Intermediate dictionaries are created as needed; a non-dict value in the
    way is replaced.
    """
    parts = dotted_key.split(".")
    current = data
    for part in parts[:-1]:
        child = current.get(part)
        if not isinstance(child, dict):
            child = {}
            current[part] = child
        current = child
    current[parts[-1]] = value


def _parse_env_value(value: str) -> Any:  # pyright: ignore[reportExplicitAny]
    """Parse environment variable value with type inference.

    Order of type inference:
        1. Boolean: true/false (case-insensitive)
        2. Integer: parseable as int
        3. JSON array or object: starts with [ or {
        4. String: anything else

    Args:
        value: The raw string value from the environment variable.

    Returns:
        The parsed value with appropriate type.
    """
    lower_value = value.lower()
    if lower_value in ("true", "false"):
        return lower_value == "true"

    try:
        return int(value)
    except ValueError:
        pass

    if (value.startswith("[") and value.endswith("]")) or (
        value.startswith("{") and value.endswith("}")
    ):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            pass

    return value


def parse_env_vars(prefix: str = ENV_PREFIX) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Parse environment variables into config dictionary.

    Environment variable naming:
        - Add prefix (PROMPTLINE_)
        - Convert to uppercase
        - Replace dots with double underscores
        - Example: logging.level -> PROMPTLINE_LOGGING__LEVEL

    Variables without a double underscore (such as PROMPTLINE_DEBUG) are not
    configuration keys and are skipped.

    Args:
        prefix: Environment variable prefix.

    Returns:
        Dictionary of parsed config values with nested structure.
    """
    result: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]

    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue

        config_key = key[len(prefix) :]
        if "__" not in config_key:
            continue

        # PROMPTLINE_LOGGING__LEVEL -> logging.level
        config_path = config_key.replace("__", ".").lower()
        set_nested_key(result, config_path, _parse_env_value(value))

    return result
