"""CLI command implementations"""

import json
import logging
from typing import Annotated, Optional

import typer

from cfgdiff.config import Settings, load_config
from cfgdiff.core.controller import DiffController


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail("Invalid configuration", e)


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ):
    """Show what a file change will do before applying it."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )


def diff_cmd(
    old: Annotated[str, typer.Argument(help="Current file (missing means the file will be created)")],
    new: Annotated[str, typer.Argument(help="New content (missing means the file will be deleted)")],
    report: Annotated[bool, typer.Option("--report", help="Print the single-line reporting form")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print status and reporting form as JSON")] = False,
    context: Annotated[Optional[int], typer.Option("--context", "-U", help="Lines of context")] = None,
    size: Annotated[Optional[int], typer.Option("--filesize-threshold", help="Max input size in bytes")] = None,
    length: Annotated[Optional[int], typer.Option("--output-threshold", help="Max diff length in characters")] = None,
    disabled: Annotated[Optional[bool], typer.Option("--disabled/--enabled", help="Suppress diff output")] = None,
    ):
    """Print a unified diff of OLD against NEW, or the reason it was suppressed."""
    settings = _settings(overrides={
        "context_lines": context, "diff_filesize_threshold": size,
        "diff_output_threshold": length, "diff_disabled": disabled,
    })
    controller = DiffController(settings)
    status = controller.diff(old, new)

    if as_json:
        typer.echo(json.dumps({"status": status, "diff": controller.for_reporting()}, indent=2))
    elif report:
        typer.echo(controller.for_reporting() or status)
    else:
        for line in controller.for_output():
            typer.echo(line)


def show_config_cmd():
    """Print the effective settings after config.yaml, env vars and defaults."""
    settings = _settings()
    typer.echo(settings.model_dump_json(indent=2))
