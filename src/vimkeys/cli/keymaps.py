"""
Keymap commands for vimkeys CLI.

- parse: Extract mappings from a vim config and print them
- import: Parse a vim config and store its mappings
- show: List stored mappings
- clear: Remove stored mappings
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from vimkeys.cli.utils import configure_logging, print_human_diagnostics
from vimkeys.core import ir
from vimkeys.core.errors import VimkeysError
from vimkeys.core.importer import import_config
from vimkeys.core.manifest import (
    DEFAULT_MANIFEST_NAME,
    VimkeysManifest,
    load_manifest_or_default,
)
from vimkeys.core.parser import parse_config_file
from vimkeys.core.store import KeymapStore

console = Console()

ManifestOption = Annotated[
    str, typer.Option("--manifest", "-m", help="Path to vimkeys.toml")
]


def _load_manifest(manifest: str) -> VimkeysManifest:
    try:
        mf = load_manifest_or_default(Path(manifest))
    except VimkeysError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    configure_logging(mf.logging.level)
    return mf


def _read_source(file: Path) -> str:
    try:
        return file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error: cannot read {file}: {e}", err=True)
        raise typer.Exit(code=1)


def _mapping_table(title: str, rows: list[tuple[str, str, str, bool]]) -> Table:
    table = Table(title=title)
    table.add_column("Mode")
    table.add_column("LHS")
    table.add_column("RHS")
    table.add_column("Recursive")
    for mode, lhs, rhs, recursive in rows:
        table.add_row(mode, Text(lhs), Text(rhs), "yes" if recursive else "no")
    return table


def parse_command(
    file: Annotated[Path, typer.Argument(help="init.vim / .vimrc to parse")],
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: 'human' or 'json'")
    ] = "human",
    manifest: ManifestOption = DEFAULT_MANIFEST_NAME,
) -> None:
    """
    Extract key mappings from a vim configuration file.

    Exits with code 1 when any statement could not be parsed.
    """
    _load_manifest(manifest)
    try:
        outcome = parse_config_file(file)
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error: cannot read {file}: {e}", err=True)
        raise typer.Exit(code=1)

    if format == "json":
        typer.echo(json.dumps(outcome.model_dump(mode="json"), indent=2))
    else:
        _print_outcome(outcome)
        print_human_diagnostics(outcome.diagnostics, str(file))

    if outcome.diagnostics:
        raise typer.Exit(code=1)


def _print_outcome(outcome: ir.ParseOutcome) -> None:
    if not outcome.mappings:
        console.print("[dim]No mappings found.[/dim]")
    else:
        rows = [(str(m.mode), m.lhs, m.rhs, m.is_recursive) for m in outcome.mappings]
        console.print(_mapping_table("Mappings", rows))
    console.print(f"Leader: {outcome.leader!r}", markup=False)


def import_command(
    file: Annotated[Path, typer.Argument(help="init.vim / .vimrc to import")],
    manifest: ManifestOption = DEFAULT_MANIFEST_NAME,
    force: Annotated[
        bool, typer.Option("--force", help="Store mappings even if some statements failed")
    ] = False,
) -> None:
    """Parse a vim configuration file and store its key mappings."""
    mf = _load_manifest(manifest)
    source = _read_source(file)
    reject = mf.import_.reject_on_diagnostics and not force

    try:
        report = import_config(source, KeymapStore(mf.store_path), reject_on_diagnostics=reject)
    except VimkeysError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not report.saved:
        typer.echo(report.message, err=True)
        raise typer.Exit(code=1)

    typer.echo(f"✓ Stored {report.stored_count} keymap(s) in {mf.store_path}")
    if report.outcome.diagnostics:
        print_human_diagnostics(report.outcome.diagnostics, str(file))


def show_command(
    manifest: ManifestOption = DEFAULT_MANIFEST_NAME,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List stored key mappings."""
    mf = _load_manifest(manifest)
    try:
        keymaps = KeymapStore(mf.store_path).get_keymaps()
    except VimkeysError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_json:
        records = [k.model_dump(mode="json", by_alias=True) for k in keymaps]
        typer.echo(json.dumps(records, indent=2))
        return

    if not keymaps:
        console.print("[dim]No keymaps stored.[/dim]")
        return

    rows = [(str(k.mode), k.lhs, k.rhs, k.is_recursive) for k in keymaps]
    console.print(_mapping_table("Stored keymaps", rows))
    console.print(f"\n[dim]{len(keymaps)} keymap(s)[/dim]")


def clear_command(manifest: ManifestOption = DEFAULT_MANIFEST_NAME) -> None:
    """Remove all stored key mappings."""
    mf = _load_manifest(manifest)
    try:
        KeymapStore(mf.store_path).clear()
    except VimkeysError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo("✓ Cleared stored keymaps")


__all__ = [
    "clear_command",
    "import_command",
    "parse_command",
    "show_command",
]
