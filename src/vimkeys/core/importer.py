"""
Configuration import: parse a vim config and persist its keymaps.

A source with diagnostics is refused by default; only the first
diagnostic's message is surfaced to the user.
"""

import logging
from dataclasses import dataclass

from . import ir
from .converter import to_external
from .parser import parse_config
from .store import KeymapStore

logger = logging.getLogger(__name__)


@dataclass
class ImportReport:
    """Result of one import attempt."""

    outcome: ir.ParseOutcome
    saved: bool
    stored_count: int = 0
    message: str | None = None


def import_config(
    source: str,
    store: KeymapStore,
    *,
    reject_on_diagnostics: bool = True,
) -> ImportReport:
    """
    Parse source and store its mappings.

    Args:
        source: vim configuration text
        store: Destination keymap store
        reject_on_diagnostics: Skip storing when the parse reported problems

    Returns:
        ImportReport describing what happened

    Raises:
        StoreError: If the store cannot be written
    """
    outcome = parse_config(source)

    if outcome.diagnostics and reject_on_diagnostics:
        message = f"Vim config has errors: {outcome.first_message}"
        logger.info("Import rejected: %s", message)
        return ImportReport(outcome=outcome, saved=False, message=message)

    mappings = to_external(outcome)
    store.set_keymaps(mappings)
    return ImportReport(outcome=outcome, saved=True, stored_count=len(mappings))
