"""
Error types for vimkeys parsing, configuration, and storage.
"""

from dataclasses import dataclass
from typing import Optional


class VimkeysError(Exception):
    """Base exception for all vimkeys errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(VimkeysError):
    """
    Raised inside a statement rule when a statement cannot be parsed.

    Never escapes the parser: the statement runner turns it into a
    Diagnostic and resumes at the next line.
    """

    pass


class ConfigError(VimkeysError):
    """
    Raised when vimkeys.toml cannot be read.

    Examples:
    - Invalid TOML syntax
    - Wrong value types for known keys
    """

    pass


class StoreError(VimkeysError):
    """
    Raised when the keymap store cannot be read or written.

    Examples:
    - Corrupted JSON document
    - Unwritable storage directory
    """

    pass


@dataclass
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    line: int
    column: int

    def format(self) -> str:
        """Format as "line:column"."""
        return f"{self.line}:{self.column}"


def make_parse_error(message: str, line: int, column: int) -> ParseError:
    """
    Helper to create a ParseError with its location attached.

    Args:
        message: Error description
        line: Line number (1-indexed)
        column: Column number (1-indexed)

    Returns:
        ParseError with context attached
    """
    return ParseError(message, ErrorContext(line=line, column=column))
