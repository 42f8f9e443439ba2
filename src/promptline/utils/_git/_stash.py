"""Stash counting from the stash reflog."""

from pathlib import Path
from typing import TYPE_CHECKING

from promptline.utils._git._common import DEFAULT_GIT_EXECUTABLE, resolve_cwd, run_git

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

STASH_LOG_PATH = Path("logs") / "refs" / "stash"


def get_git_dir(
    cwd: Path | str | None = None,
    *,
    executable: str = DEFAULT_GIT_EXECUTABLE,
) -> Path | None:
    """Get the repository metadata directory.

    ``git rev-parse --git-dir`` may print a path relative to the directory it
    ran in, so the result is anchored at ``cwd``.

    Args:
        cwd: Repository directory. If None, uses current directory.
        executable: Name or path of the git executable.

    Returns:
        Path to the git directory, or None if git printed nothing.
    """
    result = run_git(["rev-parse", "--git-dir"], cwd=cwd, executable=executable)
    git_dir = result.stdout.strip()
    if not git_dir:
        return None
    return resolve_cwd(cwd) / git_dir


def count_lines(path: Path) -> int:
    """Count lines in a file, or return 0 if it cannot be read."""
    try:
        with path.open("rb") as f:
            return sum(1 for _ in f)
    except OSError:
        return 0


def count_stashes(
    cwd: Path | str | None = None,
    *,
    executable: str = DEFAULT_GIT_EXECUTABLE,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> int:
    """Count stash entries.

    Each stash entry is one line of ``<git-dir>/logs/refs/stash``. A missing
    or unreadable log means no stashes.

    Args:
        cwd: Repository directory. If None, uses current directory.
        executable: Name or path of the git executable.
        logger: Optional logger for the stash count.

    Returns:
        Number of stash entries.

    Raises:
        GitSpawnError: If git cannot be started.
    """
    git_dir = get_git_dir(cwd, executable=executable)
    if git_dir is None:
        return 0

    stashes = count_lines(git_dir / STASH_LOG_PATH)
    if logger is not None:
        logger.debug("stash_counted", git_dir=str(git_dir), stashes=stashes)
    return stashes
