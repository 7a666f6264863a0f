"""
Keymap storage.

Persists converted mappings as a JSON document under the ``keymaps`` key,
the same shape the extension kept in its local storage area.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from . import ir
from .errors import StoreError

logger = logging.getLogger(__name__)

KEYMAPS_KEY = "keymaps"


class KeymapStore:
    """
    File-backed keymap store.

    A missing file reads as an empty keymap list.
    """

    def __init__(self, path: Path):
        self.path = path

    def _load_document(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise StoreError(f"Failed to read keymap store {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Keymap store {self.path} does not contain a JSON object")
        return data

    def _write_document(self, data: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise StoreError(f"Failed to write keymap store {self.path}: {e}") from e

    def get_keymaps(self) -> list[ir.ExternalMapping]:
        """
        Load stored keymaps.

        Raises:
            StoreError: If the store file is corrupted
        """
        records = self._load_document().get(KEYMAPS_KEY, [])
        try:
            return [ir.ExternalMapping.model_validate(record) for record in records]
        except (ValidationError, TypeError) as e:
            raise StoreError(f"Invalid keymap record in {self.path}: {e}") from e

    def set_keymaps(self, mappings: list[ir.ExternalMapping]) -> None:
        """Replace the stored keymaps, keeping any other keys in the document."""
        data = self._load_document()
        data[KEYMAPS_KEY] = [m.model_dump(mode="json", by_alias=True) for m in mappings]
        self._write_document(data)
        logger.info("Stored %d keymap(s) in %s", len(mappings), self.path)

    def clear(self) -> None:
        """Remove all stored keymaps."""
        self.set_keymaps([])
