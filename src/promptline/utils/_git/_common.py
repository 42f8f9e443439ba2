"""Common git utility functions.

This module provides the single entry point through which every git query
is executed, plus small helpers shared by the query modules.
"""

import subprocess
from pathlib import Path

from promptline.exceptions import GitSpawnError

DEFAULT_GIT_EXECUTABLE = "git"


def resolve_cwd(cwd: Path | str | None = None) -> Path:
    """Resolve the working directory for git queries.

    Args:
        cwd: Directory to run in. If None, uses current directory.

    Returns:
        The directory as a Path.
    """
    if cwd is None:
        return Path.cwd()
    return Path(cwd)


def run_git(
    args: list[str],
    *,
    cwd: Path | str | None = None,
    executable: str = DEFAULT_GIT_EXECUTABLE,
) -> subprocess.CompletedProcess[str]:
    """Run a git command and capture its output.

    The exit code is not checked; callers decide what a non-zero exit means.

    Args:
        args: Arguments following the git executable.
        cwd: Directory to run in. If None, uses current directory.
        executable: Name or path of the git executable.

    Returns:
        The completed process with decoded stdout and stderr.

    Raises:
        GitSpawnError: If the git process cannot be started.
    """
    cmd = [executable, *args]
    try:
        return subprocess.run(  # noqa: S603
            cmd,
            cwd=str(resolve_cwd(cwd)),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as e:
        msg = f"Failed to run {' '.join(cmd)}: {e}"
        raise GitSpawnError(msg, command=cmd, cause=e) from e
