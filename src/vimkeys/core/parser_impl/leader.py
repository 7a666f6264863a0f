"""
Leader assignment parser mixin.

Recognizes ``let mapleader = ","`` and ``let g:mapleader = ","``. Any other
``let`` is inert, and so is a malformed leader assignment.
"""

import logging
from typing import TYPE_CHECKING, Any

from ..lexer import TokenType
from .base import StatementResult

logger = logging.getLogger(__name__)

LEADER_VARIABLES = ("mapleader", "g:mapleader")

QUOTE_CHARS = ('"', "'")


def strip_quotes(value: str) -> str:
    """Strip exactly one matching pair of surrounding quotes."""
    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[-1] == value[0]:
        return value[1:-1]
    return value


class LeaderParserMixin:
    """
    Mixin providing leader assignment parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        advance: Any
        current_token: Any
        skip_whitespace: Any
        skip_to_next_line: Any
        leader: str

    def parse_leader_assignment(self) -> StatementResult:
        """
        Parse a ``let`` statement, updating the leader when it assigns one.

        Always finishes on the next line.
        """
        self.advance()  # consume 'let'
        self.skip_whitespace()

        value = self._read_leader_value()
        if value is not None:
            self.leader = value
            logger.debug("Leader set to %r", value)

        self.skip_to_next_line()
        return StatementResult.empty()

    def _read_leader_value(self) -> str | None:
        """Read ``mapleader = VALUE``; None when the statement is anything else."""
        name = self.current_token()
        if name.kind != TokenType.WORD or name.text not in LEADER_VARIABLES:
            return None
        self.advance()
        self.skip_whitespace()

        if self.current_token().text != "=":
            return None
        self.advance()
        self.skip_whitespace()

        value = self.current_token()
        if value.kind != TokenType.WORD:
            return None
        self.advance()
        return strip_quotes(value.text)
