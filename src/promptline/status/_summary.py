"""Aggregation of classified status lines into a RunSummary."""

from collections.abc import Callable
from typing import TYPE_CHECKING

from promptline.status._branch import DetachedResolver, parse_branch_header
from promptline.status._classifier import classify_entry, is_header, parse_status_line
from promptline.status._models import (
    BranchInfo,
    RunSummary,
    StatusBuckets,
    StatusCategory,
)

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def collect_entries(
    output: str, resolve_detached: DetachedResolver
) -> tuple[BranchInfo, StatusBuckets]:
    """Classify every line of porcelain status output.

    Args:
        output: Raw ``git status --porcelain --branch`` output.
        resolve_detached: Label resolver used if the header reports a
            detached HEAD.

    Returns:
        Tuple of (branch info, classified buckets). Without a header line the
        branch info holds its defaults.
    """
    branch = BranchInfo()
    buckets = StatusBuckets()

    # Paths may contain other line separators such as U+2028
    for line in output.split("\n"):
        entry = parse_status_line(line)
        if entry is None:
            continue
        if is_header(entry):
            branch = parse_branch_header(entry.payload, resolve_detached)
            continue
        category = classify_entry(entry)
        if category is not None:
            buckets.add(category, entry)

    return branch, buckets


def build_summary(
    output: str,
    *,
    resolve_detached: DetachedResolver,
    count_stashes: Callable[[], int],
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> RunSummary:
    """Build the prompt summary from raw porcelain status output.

    The stash count is requested only after every line has been processed.

    Args:
        output: Raw ``git status --porcelain --branch`` output.
        resolve_detached: Label resolver for a detached HEAD.
        count_stashes: Returns the number of stash entries.
        logger: Optional logger for the resolved branch state.

    Returns:
        The assembled RunSummary.
    """
    branch, buckets = collect_entries(output, resolve_detached)
    if logger is not None:
        logger.debug(
            "branch_resolved",
            branch=branch.name,
            ahead=branch.ahead,
            behind=branch.behind,
        )

    stashes = count_stashes()

    return RunSummary(
        branch=branch.name,
        ahead=branch.ahead,
        behind=branch.behind,
        staged=buckets.count(StatusCategory.STAGED),
        conflicts=buckets.count(StatusCategory.CONFLICTED),
        changed=buckets.count(StatusCategory.CHANGED),
        untracked=buckets.count(StatusCategory.UNTRACKED),
        stashes=stashes,
        clean=buckets.is_clean,
        deleted=buckets.count(StatusCategory.DELETED),
    )
