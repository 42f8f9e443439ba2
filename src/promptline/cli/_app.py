"""The command-line interface for promptline."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

import sys
from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from promptline.config import LogLevel, safe_load_config
from promptline.exceptions import GitSpawnError
from promptline.utils import create_cli_logger, get_prompt_status

from ._shared import ExitCode, OutputFormat, render_summary

APP_HELP = "Summarize git working tree state as a single line for shell prompts."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="promptline",
        help=APP_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.default
    def _status(  # pyright: ignore[reportUnusedFunction]
        *,
        directory: Annotated[
            Path | None,
            Parameter(name=["--directory", "-C"], help="Directory to summarize"),
        ] = None,
        output_format: Annotated[
            OutputFormat, Parameter(name="--format", help="Output format")
        ] = OutputFormat.LINE,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
        verbose: Annotated[bool, Parameter(help="Enable debug logging")] = False,
    ) -> None:
        """Print the prompt status line for the current repository.

        Fields: branch, ahead, behind, staged, conflicts, changed, untracked,
        stashes, clean, deleted. Prints nothing outside a git repository.

        Args:
            directory: Directory to summarize instead of the current one.
            output_format: Output format, the prompt line or a JSON object.
            config: Explicit path to config file.
            verbose: Log at debug level regardless of configuration.
        """
        cli_overrides: dict[str, object] | None = None
        if verbose:
            cli_overrides = {"logging": {"level": LogLevel.DEBUG.value}}
        loaded_config, config_error = safe_load_config(
            config_path=config, cli_overrides=cli_overrides
        )

        logging_config = loaded_config.logging
        logger = create_cli_logger(
            level=logging_config.level.value,
            log_format=logging_config.format.value,  # type: ignore[arg-type]
            log_file=logging_config.file,
            max_bytes=logging_config.max_bytes,
            backup_count=logging_config.backup_count,
            command="status",
        )
        if config_error is not None:
            logger.warning("config_fallback", error=config_error)
        logger.debug(
            "config_loaded",
            sources=[source.name.value for source in loaded_config.sources if source.exists],
        )

        try:
            summary = get_prompt_status(
                directory,
                executable=loaded_config.git.executable,
                logger=logger,
            )
        except GitSpawnError as e:
            logger.error("git_spawn_failed", command=list(e.command), error=str(e))
            error_console.print(f"Error: {e}", markup=False, highlight=False)
            sys.exit(ExitCode.GIT_UNAVAILABLE)

        if summary is None:
            return

        console.out(render_summary(summary, output_format), end="", highlight=False)

    return app


def main() -> None:
    """Default entrypoint for the `promptline` CLI."""
    app = create_app()
    app()
