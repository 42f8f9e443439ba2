"""Utilities used by the promptline CLI."""

from ._app import create_app, main
from ._shared import ExitCode, OutputFormat, render_summary

__all__ = ["ExitCode", "OutputFormat", "create_app", "main", "render_summary"]
