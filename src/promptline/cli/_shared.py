"""Shared CLI utilities.

This module provides the exit codes and output renderers used by the
promptline CLI.
"""

from enum import IntEnum, StrEnum

import orjson

from promptline.status import RunSummary

__all__ = [
    "ExitCode",
    "OutputFormat",
    "format_json",
    "render_summary",
]


class ExitCode(IntEnum):
    """Exit codes for the promptline CLI.

    Leaving a non-repository directory is a success, not an error.
    """

    SUCCESS = 0
    CONFIG_ERROR = 1
    GIT_UNAVAILABLE = 2


class OutputFormat(StrEnum):
    """Output formats for the status summary."""

    LINE = "line"
    JSON = "json"


def format_json(summary: RunSummary) -> str:
    return orjson.dumps(summary.to_dict()).decode("utf-8")


def render_summary(summary: RunSummary, output_format: OutputFormat) -> str:
    """Render a summary in the requested output format.

    Args:
        summary: The summary to render.
        output_format: LINE for the space-separated prompt fields, JSON for
            an object keyed by field name.

    Returns:
        The rendered text, without a trailing newline.
    """
    if output_format is OutputFormat.JSON:
        return format_json(summary)
    return summary.to_line()
