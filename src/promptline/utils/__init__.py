"""Utilities used by promptline."""

from ._git import (
    count_stashes,
    get_git_dir,
    get_prompt_status,
    query_porcelain_status,
    resolve_detached_label,
    run_git,
)
from ._logging import LogFormatType, create_cli_logger, create_null_logger

__all__ = [
    "LogFormatType",
    "count_stashes",
    "create_cli_logger",
    "create_null_logger",
    "get_git_dir",
    "get_prompt_status",
    "query_porcelain_status",
    "resolve_detached_label",
    "run_git",
]
