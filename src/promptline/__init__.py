"""Summarize git working tree state as a single line for shell prompts."""

from promptline.exceptions import GitError, GitSpawnError, PromptlineError
from promptline.status import BranchInfo, RunSummary, StatusCategory, StatusEntry
from promptline.utils import get_prompt_status

__all__ = [
    "BranchInfo",
    "GitError",
    "GitSpawnError",
    "PromptlineError",
    "RunSummary",
    "StatusCategory",
    "StatusEntry",
    "get_prompt_status",
]
