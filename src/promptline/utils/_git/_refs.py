"""Detached HEAD label resolution."""

from pathlib import Path
from typing import TYPE_CHECKING

from promptline.utils._git._common import DEFAULT_GIT_EXECUTABLE, run_git

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

# Two results are enough to tell "one tag" from "more than one"
MAX_TAGS = 2
MULTIPLE_TAGS_SUFFIX = "+"

_TAGS_AT_HEAD_ARGS = [
    "for-each-ref",
    "--points-at=HEAD",
    f"--count={MAX_TAGS}",
    "--sort=-version:refname",
    "--format=%(refname:short)",
    "refs/tags",
]
_SHORT_HASH_ARGS = ["rev-parse", "--short", "HEAD"]


def get_tags_at_head(
    cwd: Path | str | None = None,
    *,
    executable: str = DEFAULT_GIT_EXECUTABLE,
) -> list[str]:
    """List up to two tags pointing at HEAD, highest version first.

    Args:
        cwd: Repository directory. If None, uses current directory.
        executable: Name or path of the git executable.

    Returns:
        Short tag names, at most MAX_TAGS of them.
    """
    result = run_git(_TAGS_AT_HEAD_ARGS, cwd=cwd, executable=executable)
    return result.stdout.split()


def get_short_hash(
    cwd: Path | str | None = None,
    *,
    executable: str = DEFAULT_GIT_EXECUTABLE,
) -> str | None:
    """Get the abbreviated HEAD commit hash.

    Returns:
        The abbreviated hash, or None if git printed nothing.
    """
    result = run_git(_SHORT_HASH_ARGS, cwd=cwd, executable=executable)
    return result.stdout.strip() or None


def resolve_detached_label(
    cwd: Path | str | None = None,
    *,
    executable: str = DEFAULT_GIT_EXECUTABLE,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> str | None:
    """Resolve a display label for a detached HEAD.

    Prefers a tag at HEAD; when a second tag also points at HEAD the label
    gets a ``+`` suffix. The tag query is capped at two results, so three or
    more tags are reported the same way as two. Without tags the abbreviated
    commit hash is used.

    Args:
        cwd: Repository directory. If None, uses current directory.
        executable: Name or path of the git executable.
        logger: Optional logger for the resolved label.

    Returns:
        The label, or None if neither a tag nor a hash is available.

    Raises:
        GitSpawnError: If git cannot be started.
    """
    tags = get_tags_at_head(cwd, executable=executable)
    if tags:
        label = tags[0] + (MULTIPLE_TAGS_SUFFIX if len(tags) > 1 else "")
        if logger is not None:
            logger.debug("detached_label_resolved", source="tag", label=label)
        return label

    short_hash = get_short_hash(cwd, executable=executable)
    if logger is not None:
        logger.debug("detached_label_resolved", source="hash", label=short_hash)
    return short_hash
