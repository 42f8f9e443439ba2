"""Default configuration values.

DEFAULT_CONFIG is a plain dict so it can be passed straight to deep_merge,
which copies rather than mutates its inputs.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "warning",
        "format": "json",
        "file": "",
        "max_bytes": None,
        "backup_count": None,
    },
    "git": {
        "executable": "git",
    },
}
