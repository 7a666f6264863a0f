"""
Base parser class for vim configuration statements.

Provides the token cursor, per-statement result values, and the statement
runner that turns a fault inside one statement into a Diagnostic.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .. import ir
from ..errors import ParseError
from ..lexer import Token, TokenType

logger = logging.getLogger(__name__)

DEFAULT_LEADER = "\\"


@dataclass(frozen=True)
class StatementResult:
    """
    Outcome of one statement rule.

    Exactly one of ``record`` and ``diagnostic`` may be set; both None means
    the statement was consumed without producing anything.
    """

    record: ir.MappingRecord | None = None
    diagnostic: ir.Diagnostic | None = None

    @classmethod
    def empty(cls) -> "StatementResult":
        return cls()

    @classmethod
    def mapped(cls, record: ir.MappingRecord) -> "StatementResult":
        return cls(record=record)

    @classmethod
    def failed(cls, diagnostic: ir.Diagnostic) -> "StatementResult":
        return cls(diagnostic=diagnostic)


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    All state (cursor, leader) belongs to one instance, and one instance
    parses one token list.
    """

    def __init__(self, tokens: list[Token]):
        """
        Initialize parser.

        Args:
            tokens: List of tokens from the lexer, ending with EOF
        """
        if not tokens or tokens[-1].kind != TokenType.EOF:
            tokens = [*tokens, Token(TokenType.EOF, "", 1, 1)]
        self.tokens = tokens
        self.pos = 0
        self.leader = DEFAULT_LEADER

    def current_token(self) -> Token:
        """Get current token."""
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # EOF
        return self.tokens[self.pos]

    def advance(self) -> Token:
        """Consume and return current token. Never moves past EOF."""
        token = self.current_token()
        if token.kind != TokenType.EOF:
            self.pos += 1
        return token

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current_token().kind in token_types

    def is_at_end(self) -> bool:
        return self.match(TokenType.EOF)

    def skip_whitespace(self) -> None:
        """Skip WHITESPACE tokens (not newlines)."""
        while self.match(TokenType.WHITESPACE):
            self.advance()

    def skip_to_next_line(self) -> None:
        """Skip past the next NEWLINE, or up to EOF."""
        while not self.match(TokenType.NEWLINE, TokenType.EOF):
            self.advance()
        if self.match(TokenType.NEWLINE):
            self.advance()

    def run_statement(
        self, rule: Callable[[], StatementResult], start: Token
    ) -> StatementResult:
        """
        Run one statement rule, converting any fault into a Diagnostic.

        The diagnostic is placed at the location carried by a ParseError,
        or else at the keyword that started the statement. Parsing resumes
        on the following line.
        """
        line, column = start.line, start.column
        try:
            return rule()
        except ParseError as e:
            message = e.message
            if e.context:
                line, column = e.context.line, e.context.column
            logger.debug("Recovered from %r at %d:%d: %s", start.text, line, column, message)
        except Exception as e:
            message = str(e) or type(e).__name__
            logger.warning(
                "Unexpected error in %r statement at %d:%d: %s",
                start.text,
                start.line,
                start.column,
                message,
            )

        self.skip_to_next_line()
        return StatementResult.failed(
            ir.Diagnostic(line=line, column=column, message=message)
        )
