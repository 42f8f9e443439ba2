"""Git utilities for promptline.

This package wraps the git queries promptline depends on: the porcelain
status query, stash counting, and detached HEAD label resolution.
"""

from promptline.utils._git._common import DEFAULT_GIT_EXECUTABLE, resolve_cwd, run_git
from promptline.utils._git._refs import (
    get_short_hash,
    get_tags_at_head,
    resolve_detached_label,
)
from promptline.utils._git._stash import count_lines, count_stashes, get_git_dir
from promptline.utils._git._status import get_prompt_status, query_porcelain_status

__all__ = [
    "DEFAULT_GIT_EXECUTABLE",
    "count_lines",
    "count_stashes",
    "get_git_dir",
    "get_prompt_status",
    "get_short_hash",
    "get_tags_at_head",
    "query_porcelain_status",
    "resolve_cwd",
    "resolve_detached_label",
    "run_git",
]
