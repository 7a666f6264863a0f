"""
vimkeys Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .keymaps import (
    MODE_PREFIXES,
    Diagnostic,
    ExternalMapping,
    KeymapMode,
    MappingRecord,
    ParseOutcome,
)

__all__ = [
    "MODE_PREFIXES",
    "Diagnostic",
    "ExternalMapping",
    "KeymapMode",
    "MappingRecord",
    "ParseOutcome",
]
