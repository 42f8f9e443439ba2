"""Prompt status collection.

This module runs ``git status --porcelain --branch`` and feeds its output,
together with the stash and detached HEAD collaborators, into the status
summary builder.
"""

from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING

from promptline.status import RunSummary, build_summary
from promptline.utils._git._common import DEFAULT_GIT_EXECUTABLE, resolve_cwd, run_git
from promptline.utils._git._refs import resolve_detached_label
from promptline.utils._git._stash import count_stashes

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_STATUS_ARGS = ["status", "--porcelain", "--branch"]


def query_porcelain_status(
    cwd: Path | str | None = None,
    *,
    executable: str = DEFAULT_GIT_EXECUTABLE,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> str | None:
    """Run the porcelain status query.

    Args:
        cwd: Directory to query. If None, uses current directory.
        executable: Name or path of the git executable.
        logger: Optional logger for the query outcome.

    Returns:
        Raw status output, or None if git exited non-zero (the directory is
        not inside a repository).

    Raises:
        GitSpawnError: If git cannot be started.
    """
    result = run_git(_STATUS_ARGS, cwd=cwd, executable=executable)
    if result.returncode != 0:
        if logger is not None:
            logger.debug(
                "not_a_repository",
                exit_code=result.returncode,
                stderr=result.stderr.strip(),
            )
        return None

    if logger is not None:
        logger.debug("status_query", lines=len(result.stdout.splitlines()))
    return result.stdout


def get_prompt_status(
    cwd: Path | str | None = None,
    *,
    executable: str = DEFAULT_GIT_EXECUTABLE,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> RunSummary | None:
    """Summarize the working tree state for a shell prompt.

    Runs the status query, then (only on detached HEAD) the tag and hash
    queries, then the stash count. All queries run sequentially.

    Args:
        cwd: Directory to summarize. If None, uses current directory.
        executable: Name or path of the git executable.
        logger: Optional logger passed down to every query.

    Returns:
        RunSummary for the repository, or None if not in a git repository
        or if the current directory no longer exists.

    Raises:
        GitSpawnError: If git cannot be started for any query.
    """
    try:
        directory = resolve_cwd(cwd)
    except OSError as e:
        # The current directory was removed; git itself exits 128 here
        if logger is not None:
            logger.debug("not_a_repository", error=str(e))
        return None

    output = query_porcelain_status(directory, executable=executable, logger=logger)
    if output is None:
        return None

    summary = build_summary(
        output,
        resolve_detached=partial(
            resolve_detached_label, directory, executable=executable, logger=logger
        ),
        count_stashes=partial(
            count_stashes, directory, executable=executable, logger=logger
        ),
        logger=logger,
    )
    if logger is not None:
        logger.info("prompt_status", **summary.to_dict())
    return summary
