"""
vimkeys statement parser package.

The parser is built from mixins, one per statement form:
- LeaderParserMixin: ``let mapleader = ...``
- MappingParserMixin: ``nmap``, ``nnoremap``, ``nunmap`` and friends

Usage:
    from vimkeys.core.parser_impl import parse_tokens

    outcome = parse_tokens(tokenize(text))
"""

import logging

from .. import ir
from ..lexer import MAP_KEYWORDS, Token, TokenType
from .base import DEFAULT_LEADER, BaseParser, StatementResult
from .leader import LeaderParserMixin
from .mapping import MappingParserMixin

logger = logging.getLogger(__name__)


class KeymapParser(
    BaseParser,
    LeaderParserMixin,
    MappingParserMixin,
):
    """
    Complete keymap statement parser.

    Everything outside a recognized statement is skipped one token at a
    time. A fault inside a statement becomes a Diagnostic and never stops
    the rest of the source from being parsed.
    """

    def parse(self) -> ir.ParseOutcome:
        """
        Parse the whole token list.

        Returns:
            ParseOutcome with mappings, final leader and diagnostics
        """
        mappings: list[ir.MappingRecord] = []
        diagnostics: list[ir.Diagnostic] = []

        while not self.is_at_end():
            token = self.current_token()

            if token.kind != TokenType.KEYWORD:
                self.advance()
                continue

            if token.text == "let":
                result = self.run_statement(self.parse_leader_assignment, token)
            elif token.text in MAP_KEYWORDS:
                result = self.run_statement(self.parse_mapping, token)
            else:
                self.advance()
                continue

            if result.diagnostic is not None:
                diagnostics.append(result.diagnostic)
            elif result.record is not None:
                mappings.append(result.record)

        logger.debug(
            "Parsed %d mapping(s), %d diagnostic(s), leader %r",
            len(mappings),
            len(diagnostics),
            self.leader,
        )
        return ir.ParseOutcome(mappings=mappings, leader=self.leader, diagnostics=diagnostics)


def parse_tokens(tokens: list[Token]) -> ir.ParseOutcome:
    """
    Convenience function to parse a token list.

    Args:
        tokens: Tokens from the lexer

    Returns:
        ParseOutcome for this token list
    """
    return KeymapParser(tokens).parse()


__all__ = [
    "DEFAULT_LEADER",
    "KeymapParser",
    "StatementResult",
    "parse_tokens",
]
