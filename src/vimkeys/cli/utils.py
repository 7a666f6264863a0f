"""
vimkeys CLI Utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform

import typer

from vimkeys._version import get_version
from vimkeys.core import ir


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"vimkeys version {get_version()}")
        typer.echo(
            f"Python {platform.python_implementation()} {platform.python_version()}"
            f" on {platform.system()} {platform.release()}"
        )
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Route library logging to stderr at the configured level."""
    numeric = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric,
        format="%(name)s - %(levelname)s - %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(numeric)


def print_human_diagnostics(diagnostics: list[ir.Diagnostic], source: str) -> None:
    """Print diagnostics in human-readable format."""
    if not diagnostics:
        return
    typer.echo(f"{len(diagnostics)} statement(s) could not be parsed:\n", err=True)
    for diagnostic in diagnostics:
        typer.echo(f"{source}:{diagnostic}", err=True)
