import os
import sys
from pathlib import Path  # noqa: TC003 - Used at runtime in annotations

from promptline.exceptions import ConfigError

from ._models import Config

STRICT_CONFIG_ENV_VAR = "PROMPTLINE_STRICT_CONFIG"


def _fail_or_default(
    error_msg: str,
    *,
    strict_mode: bool,
    cli_overrides: dict[str, object] | None = None,
) -> tuple[Config, str]:
    if strict_mode:
        print(f"Error: {error_msg}", file=sys.stderr)  # noqa: T201
        sys.exit(1)
    print(f"Warning: {error_msg}", file=sys.stderr)  # noqa: T201
    return Config.from_dict(cli_overrides or {}), error_msg


def safe_load_config(
    *,
    config_path: Path | None = None,
    cli_overrides: dict[str, object] | None = None,
) -> tuple[Config, str | None]:
    """Load configuration with error handling.

    Attempts to load configuration and handles errors based on the
    PROMPTLINE_STRICT_CONFIG environment variable:
    - If unset or "0": warn to stderr and return default config
    - If "1": fail fast with sys.exit(1)

    When config_path is provided, the file must exist (explicit user request).

    Args:
        config_path: Explicit path to config file (--config flag).
        cli_overrides: CLI argument overrides, applied above every other source.

    Returns:
        Tuple of (Config, error_message). On success, error_message is None.
        On failure (non-strict mode), returns default Config plus any
        CLI overrides, with error message.
    """
    strict_mode = os.environ.get(STRICT_CONFIG_ENV_VAR, "0") == "1"

    try:
        if config_path is not None:
            if not config_path.exists():
                # Always fail for explicit path
                print(f"Error: Config file not found: {config_path}", file=sys.stderr)  # noqa: T201
                sys.exit(1)
            return Config.from_file(config_path, cli_overrides=cli_overrides), None

        config = Config.load(include_env=True, cli_overrides=cli_overrides)
    except ConfigError as e:
        return _fail_or_default(
            f"Failed to load config: {e}",
            strict_mode=strict_mode,
            cli_overrides=cli_overrides,
        )
    except OSError as e:
        return _fail_or_default(
            f"Failed to load config: {e}",
            strict_mode=strict_mode,
            cli_overrides=cli_overrides,
        )
    else:
        return config, None
