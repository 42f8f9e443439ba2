"""Porcelain status line classification.

Each line of ``git status --porcelain`` output starts with two status
columns (index, then worktree) followed by the path. The branch summary
line uses ``##`` in place of the status columns.
"""

from promptline.status._models import StatusCategory, StatusEntry

HEADER_CODE = "#"
UNTRACKED_CODE = "?"

# Shorter lines carry no status columns plus payload
MIN_LINE_LENGTH = 3


def parse_status_line(line: str) -> StatusEntry | None:
    """Split one porcelain line into its status codes and payload.

    Only trailing whitespace is stripped: a leading space is the index
    column of an unstaged change and must stay in place.

    Args:
        line: One line of porcelain status output.

    Returns:
        The parsed StatusEntry, or None if the line is too short to carry
        two status codes and a payload.
    """
    line = line.rstrip()
    if len(line) < MIN_LINE_LENGTH:
        return None
    return StatusEntry(index=line[0], worktree=line[1], payload=line[2:])


def is_header(entry: StatusEntry) -> bool:
    """Check whether the entry is the ``##`` branch summary line."""
    return entry.index == HEADER_CODE and entry.worktree == HEADER_CODE


def classify_entry(entry: StatusEntry) -> StatusCategory | None:
    """Classify a status entry into a category.

    Rules are evaluated in order and the first match wins, so worktree
    state outranks index state:

    1. ``##`` header: never classified
    2. ``??``: untracked
    3. worktree ``M``: changed
    4. worktree ``D``: deleted
    5. index ``U``: conflicted
    6. any other non-space index code: staged

    Args:
        entry: The parsed status entry.

    Returns:
        The matching category, or None for header lines and lines with no
        index or worktree change.
    """
    if is_header(entry):
        return None
    if entry.index == UNTRACKED_CODE and entry.worktree == UNTRACKED_CODE:
        return StatusCategory.UNTRACKED
    if entry.worktree == "M":
        return StatusCategory.CHANGED
    if entry.worktree == "D":
        return StatusCategory.DELETED
    if entry.index == "U":
        return StatusCategory.CONFLICTED
    if entry.index != " ":
        return StatusCategory.STAGED
    return None
