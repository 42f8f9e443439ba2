"""Porcelain status parsing and summarizing.

This package classifies ``git status --porcelain --branch`` output into
status categories, interprets the branch header, and assembles the
RunSummary printed for the shell prompt.
"""

from promptline.status._branch import (
    DETACHED_MARKER,
    NO_COMMITS_MARKERS,
    DetachedResolver,
    parse_branch_header,
    parse_divergence,
)
from promptline.status._classifier import classify_entry, is_header, parse_status_line
from promptline.status._models import (
    BranchInfo,
    RunSummary,
    StatusBuckets,
    StatusCategory,
    StatusEntry,
)
from promptline.status._summary import build_summary, collect_entries

__all__ = [
    "DETACHED_MARKER",
    "NO_COMMITS_MARKERS",
    "BranchInfo",
    "DetachedResolver",
    "RunSummary",
    "StatusBuckets",
    "StatusCategory",
    "StatusEntry",
    "build_summary",
    "classify_entry",
    "collect_entries",
    "is_header",
    "parse_branch_header",
    "parse_divergence",
    "parse_status_line",
]
