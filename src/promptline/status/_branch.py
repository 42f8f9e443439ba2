"""Branch header interpretation.

The header line of ``git status --porcelain --branch`` takes one of these
forms (after the leading ``##``)::

    No commits yet on main
    HEAD (no branch)
    main
    main...origin/main
    main...origin/main [ahead 2, behind 1]
    main...origin/main [gone]

The marker phrases below are English text emitted by git and are matched
verbatim. They are tied to git's porcelain v1 header format; a git that
words them differently will fall through to the plain branch-name rule.
"""

from collections.abc import Callable

from promptline.status._models import BranchInfo

# Older git releases print "Initial commit on", newer ones "No commits yet on"
NO_COMMITS_MARKERS: tuple[str, ...] = ("Initial commit on", "No commits yet on")
DETACHED_MARKER = "no branch"
UPSTREAM_SEPARATOR = "..."
DIVERGENCE_SEPARATOR = ", "

type DetachedResolver = Callable[[], str | None]


def _parse_count(segment: str, keyword: str) -> int:
    """Parse the integer following ``keyword`` in a divergence segment.

    Returns:
        The parsed count, or 0 if the remainder is not an integer.
    """
    try:
        return int(segment[len(keyword) :].strip())
    except ValueError:
        return 0


def parse_divergence(annotation: str) -> tuple[int, int]:
    """Parse an ahead/behind annotation such as ``[ahead 2, behind 1]``.

    Args:
        annotation: Annotation text, with or without its brackets.

    Returns:
        Tuple of (ahead, behind). Missing or unparseable counts are 0.
    """
    ahead = 0
    behind = 0
    for segment in annotation.lstrip("[").rstrip("]").split(DIVERGENCE_SEPARATOR):
        if segment.startswith("ahead"):
            ahead = _parse_count(segment, "ahead")
        elif segment.startswith("behind"):
            behind = _parse_count(segment, "behind")
    return ahead, behind


def parse_branch_header(payload: str, resolve_detached: DetachedResolver) -> BranchInfo:
    """Interpret the payload of the ``##`` header line.

    Args:
        payload: Header text following the ``##`` marker.
        resolve_detached: Called only for a detached HEAD to obtain a display
            label (tag or abbreviated hash).

    Returns:
        BranchInfo with the branch name and divergence counts.
    """
    payload = payload.strip()

    if any(marker in payload for marker in NO_COMMITS_MARKERS):
        return BranchInfo(name=payload.split()[-1])

    if DETACHED_MARKER in payload:
        return BranchInfo(name=resolve_detached())

    if UPSTREAM_SEPARATOR not in payload:
        return BranchInfo(name=payload)

    local, _, upstream = payload.partition(UPSTREAM_SEPARATOR)
    tokens = upstream.split()
    if len(tokens) <= 1:
        return BranchInfo(name=local)

    ahead, behind = parse_divergence(" ".join(tokens[1:]))
    return BranchInfo(name=local, ahead=ahead, behind=behind)
