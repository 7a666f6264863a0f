"""
Mapping command parser mixin.

Parses ``nnoremap <silent> LHS RHS`` and the rest of the map/noremap/unmap
command families into MappingRecords.
"""

import logging
import re
from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import make_parse_error
from ..keys import is_silent_marker, normalize_key, substitute_leader
from ..lexer import TokenType
from .base import StatementResult

logger = logging.getLogger(__name__)

NOREMAP_SUFFIX_RE = re.compile(r"n?o?remap$")
MAP_SUFFIX_RE = re.compile(r"map$")


def mode_for_keyword(keyword: str) -> ir.KeymapMode:
    """
    Derive the mode from a mapping command name.

    ``nnoremap`` -> normal, ``imap`` -> insert, ``noremap`` -> all. The unmap
    family leaves a multi-letter prefix (``nun``) and so maps to all.
    """
    prefix = MAP_SUFFIX_RE.sub("", NOREMAP_SUFFIX_RE.sub("", keyword))
    return ir.MODE_PREFIXES.get(prefix, ir.KeymapMode.ALL)


def is_recursive_keyword(keyword: str) -> bool:
    """Everything outside the noremap family counts as recursive, unmap included."""
    return "noremap" not in keyword


class MappingParserMixin:
    """
    Mixin providing mapping command parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        advance: Any
        current_token: Any
        match: Any
        skip_whitespace: Any
        leader: str

    def parse_mapping(self) -> StatementResult:
        """
        Parse one mapping command.

        Returns an empty result when the command has no left-hand side.

        Raises:
            ParseError: If the left-hand side vanishes after leader substitution
        """
        keyword = self.advance()
        mode = mode_for_keyword(keyword.text)
        is_recursive = is_recursive_keyword(keyword.text)
        silent = False

        self.skip_whitespace()

        current = self.current_token()
        if current.kind == TokenType.SPECIAL_KEY and is_silent_marker(current.text):
            silent = True
            self.advance()
            self.skip_whitespace()

        lhs = self._read_lhs()
        if not lhs:
            logger.debug("Dropping %r on line %d: no left-hand side", keyword.text, keyword.line)
            return StatementResult.empty()

        self.skip_whitespace()
        rhs = self._read_rhs()

        lhs = substitute_leader(lhs, self.leader)
        rhs = substitute_leader(rhs, self.leader)
        if not lhs:
            raise make_parse_error(
                "Mapping left-hand side is empty after leader substitution",
                keyword.line,
                keyword.column,
            )

        record = ir.MappingRecord(
            mode=mode,
            lhs=lhs,
            rhs=rhs.strip(),
            is_recursive=is_recursive,
            silent=silent,
            line=keyword.line,
        )
        logger.debug("Parsed %s mapping %r -> %r", record.mode, record.lhs, record.rhs)
        return StatementResult.mapped(record)

    def _read_lhs(self) -> str:
        """Read the key sequence up to the first whitespace or line end."""
        parts = []
        while not self.match(TokenType.WHITESPACE, TokenType.NEWLINE, TokenType.EOF):
            parts.append(normalize_key(self.advance().text))
        return "".join(parts)

    def _read_rhs(self) -> str:
        """Read the action up to the line end, keeping inner whitespace."""
        rhs = ""
        while not self.match(TokenType.NEWLINE, TokenType.EOF):
            token = self.advance()
            if token.kind == TokenType.SPECIAL_KEY:
                rhs += normalize_key(token.text)
            elif token.kind != TokenType.WHITESPACE or rhs:
                rhs += token.text
        return rhs
