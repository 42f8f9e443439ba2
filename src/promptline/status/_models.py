"""Status data models.

This module provides the records produced while summarizing porcelain
status output: the per-line StatusEntry, the BranchInfo built from the
``##`` header, the per-category StatusBuckets, and the final RunSummary.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class StatusCategory(StrEnum):
    """Categories a porcelain status line can be classified into."""

    UNTRACKED = "untracked"
    STAGED = "staged"
    CHANGED = "changed"
    DELETED = "deleted"
    CONFLICTED = "conflicted"


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """One line of porcelain status output.

    Attributes:
        index: Status code for the index (first column).
        worktree: Status code for the working tree (second column).
        payload: Remainder of the line from the third character on. For path
            lines this is the path (with its leading separator space); for the
            header line it is the branch summary.
    """

    index: str
    worktree: str
    payload: str


@dataclass(frozen=True, slots=True)
class BranchInfo:
    """Branch identity and divergence from the ``##`` header line.

    Attributes:
        name: Branch name or detached HEAD label, or None if unknown.
        ahead: Commits on the local branch missing from the upstream.
        behind: Commits on the upstream missing from the local branch.
    """

    name: str | None = None
    ahead: int = 0
    behind: int = 0


@dataclass(slots=True)
class StatusBuckets:
    """Classified entries, one ordered list per category.

    Entries keep input order and are never deduplicated.
    """

    untracked: list[StatusEntry] = field(default_factory=list)
    staged: list[StatusEntry] = field(default_factory=list)
    changed: list[StatusEntry] = field(default_factory=list)
    deleted: list[StatusEntry] = field(default_factory=list)
    conflicted: list[StatusEntry] = field(default_factory=list)

    def bucket(self, category: StatusCategory) -> list[StatusEntry]:
        """Return the list holding entries of the given category."""
        bucket: list[StatusEntry] = getattr(self, category.value)
        return bucket

    def add(self, category: StatusCategory, entry: StatusEntry) -> None:
        self.bucket(category).append(entry)

    def count(self, category: StatusCategory) -> int:
        return len(self.bucket(category))

    @property
    def is_clean(self) -> bool:
        """Whether every bucket is empty."""
        return all(self.count(category) == 0 for category in StatusCategory)


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Summary of one status run, rendered for the shell prompt.

    Attributes:
        branch: Branch name or detached label, or None if unresolved.
        ahead: Commits ahead of upstream.
        behind: Commits behind upstream.
        staged: Number of staged entries.
        conflicts: Number of conflicted entries.
        changed: Number of modified (unstaged) entries.
        untracked: Number of untracked entries.
        stashes: Number of stash entries.
        clean: Whether all entry categories are empty.
        deleted: Number of deleted (unstaged) entries.
    """

    branch: str | None
    ahead: int
    behind: int
    staged: int
    conflicts: int
    changed: int
    untracked: int
    stashes: int
    clean: bool
    deleted: int

    def to_line(self) -> str:
        """Render the ten space-separated prompt fields.

        A missing branch renders as an empty first field.
        """
        fields = (
            self.branch or "",
            self.ahead,
            self.behind,
            self.staged,
            self.conflicts,
            self.changed,
            self.untracked,
            self.stashes,
            int(self.clean),
            self.deleted,
        )
        return " ".join(str(value) for value in fields)

    def to_dict(self) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
        return {
            "branch": self.branch,
            "ahead": self.ahead,
            "behind": self.behind,
            "staged": self.staged,
            "conflicts": self.conflicts,
            "changed": self.changed,
            "untracked": self.untracked,
            "stashes": self.stashes,
            "clean": self.clean,
            "deleted": self.deleted,
        }
