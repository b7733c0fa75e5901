from __future__ import annotations

import logging
import pathlib
import sys
from typing import List, Optional

import typer
from pydantic import ValidationError

from spmrun.errors import RunError
from spmrun.intent import RunIntent
from spmrun.launcher import LaunchContext
from spmrun.observability.logger import InvocationLogger
from spmrun.script import Diagnostic
from spmrun.settings import RunSettings, get_run_settings
from spmrun.tool import RunTool

app = typer.Typer(add_completion=False)
logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if not value:
        return
    from spmrun import __version__

    typer.echo(f"spmrun {__version__}")
    raise typer.Exit()


def _echo_diagnostic(diagnostic: Diagnostic) -> None:
    typer.echo(str(diagnostic), err=True)


def _configure_logging(verbose: bool, settings: RunSettings) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("spmrun").setLevel(level)


def _load_settings() -> RunSettings:
    try:
        return get_run_settings()
    except ValidationError as exc:
        typer.echo(f"error: invalid configuration: {exc}", err=True)
        raise typer.Exit(1)


@app.command(
    context_settings={
        "allow_interspersed_args": False,
        "ignore_unknown_options": True,
    },
)
def run(
    executable: Optional[List[str]] = typer.Argument(
        None,
        metavar="[EXECUTABLE [ARGUMENTS]...]",
        help="The executable to run, followed by arguments passed to it unchanged.",
        show_default=False,
    ),
    skip_build: bool = typer.Option(
        False, "--skip-build", help="Skip building the executable product"
    ),
    package_path: Optional[pathlib.Path] = typer.Option(
        None,
        "--package-path",
        help="Package root containing the package graph manifest (defaults to cwd).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the tool version and exit.",
    ),
) -> None:
    """Build and run an executable product."""
    try:
        context = LaunchContext.capture()
    except RunError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(1)

    settings = _load_settings()
    _configure_logging(verbose, settings)

    intent = RunIntent.from_positionals(executable or [], should_build=not skip_build)

    ledger = None
    if settings.RUN_LOG_DIR:
        log_dir = context.original_working_directory / settings.RUN_LOG_DIR
        try:
            ledger = InvocationLogger(log_dir, tool_name=settings.TOOL_NAME)
        except OSError as exc:
            logger.warning("Run log disabled, cannot write to %s: %s", log_dir, exc)

    tool = RunTool(
        settings,
        context,
        package_root=package_path,
        ledger=ledger,
        on_diagnostic=_echo_diagnostic,
    )
    try:
        tool.run(intent)
    except RunError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
