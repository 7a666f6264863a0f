"""
Keymap types for vimkeys IR.

Parser output (MappingRecord, Diagnostic, ParseOutcome) and the projection
persisted by the keymap store (ExternalMapping).
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class KeymapMode(StrEnum):
    """Editor mode a mapping applies to."""

    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    COMMAND = "command"
    OPERATOR_PENDING = "operator-pending"
    ALL = "all"


# One-letter command prefix -> mode. Select mode (s) folds into visual.
MODE_PREFIXES: dict[str, KeymapMode] = {
    "n": KeymapMode.NORMAL,
    "i": KeymapMode.INSERT,
    "v": KeymapMode.VISUAL,
    "x": KeymapMode.VISUAL,
    "c": KeymapMode.COMMAND,
    "o": KeymapMode.OPERATOR_PENDING,
    "s": KeymapMode.VISUAL,
}


class MappingRecord(BaseModel):
    """
    A key mapping extracted from one mapping statement.

    Attributes:
        mode: Mode the mapping applies to
        lhs: Key sequence that triggers the mapping (never empty)
        rhs: Action sequence, trimmed
        is_recursive: False for the noremap family
        silent: True when the <silent> argument was given
        line: Source line of the mapping command (1-indexed)
    """

    mode: KeymapMode
    lhs: str = Field(min_length=1)
    rhs: str
    is_recursive: bool
    silent: bool = False
    line: int

    model_config = ConfigDict(frozen=True)


class Diagnostic(BaseModel):
    """A recovered, non-fatal problem at the start of a statement."""

    line: int
    column: int
    message: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.message}"


class ParseOutcome(BaseModel):
    """
    Everything one parse produces.

    Attributes:
        mappings: Mapping records in source order
        leader: Leader value at the end of the source
        diagnostics: Recovered statement faults in source order
    """

    mappings: list[MappingRecord] = Field(default_factory=list)
    leader: str = "\\"
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def first_message(self) -> str | None:
        """Message of the first diagnostic, the one shown to users."""
        if not self.diagnostics:
            return None
        return self.diagnostics[0].message


class ExternalMapping(BaseModel):
    """
    Storage shape of a mapping: MappingRecord without silent and line.

    Serializes ``is_recursive`` as ``isRecursive`` when dumped by alias.
    """

    mode: KeymapMode
    lhs: str
    rhs: str
    is_recursive: bool = Field(alias="isRecursive")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
