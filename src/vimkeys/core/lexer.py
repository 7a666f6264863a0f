"""
Lexer/Tokenizer for vim-style configuration sources.

Converts raw init.vim text into a flat, lossless stream of tokens with source
location tracking. Comment lines are the only text that does not survive
into the token stream.
"""

import re
from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Token types in a vim configuration source."""

    KEYWORD = "KEYWORD"
    SPECIAL_KEY = "SPECIAL_KEY"
    WORD = "WORD"
    WHITESPACE = "WHITESPACE"
    NEWLINE = "NEWLINE"
    EOF = "EOF"


# Mapping commands, including the unmap family
MAP_KEYWORDS = frozenset(
    {
        "map",
        "nmap",
        "vmap",
        "imap",
        "cmap",
        "omap",
        "xmap",
        "smap",
        "noremap",
        "nnoremap",
        "vnoremap",
        "inoremap",
        "cnoremap",
        "onoremap",
        "xnoremap",
        "snoremap",
        "unmap",
        "nunmap",
        "vunmap",
        "iunmap",
        "cunmap",
    }
)

SETTING_KEYWORDS = frozenset({"let", "set"})

KEYWORDS = MAP_KEYWORDS | SETTING_KEYWORDS

# <...> notation; never crosses a line boundary
SPECIAL_KEY_RE = re.compile(r"<[^>\n]+>")

COMMENT_CHAR = '"'


@dataclass(frozen=True)
class Token:
    """
    A single token in the configuration source.

    Attributes:
        kind: Type of token
        text: Original source text of the token
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    kind: TokenType
    text: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.text!r}, {self.line}:{self.column})"


class Lexer:
    """
    Lexer for vim configuration text.

    Never fails: anything it does not recognise becomes a WORD token.
    """

    def __init__(self, text: str):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
        """
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []
        # True while only whitespace has been seen on the current line
        self.at_line_start = True

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def advance(self) -> None:
        """Move to next character, updating line/column."""
        if self.pos < len(self.text):
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def skip_comment(self) -> None:
        """Skip comment (from " to end of line, newline excluded)."""
        while self.current_char() is not None and self.current_char() != "\n":
            self.advance()

    def read_while(self, predicate) -> str:
        """Read characters while predicate holds."""
        start = self.pos
        current = self.current_char()
        while current is not None and predicate(current):
            self.advance()
            current = self.current_char()
        return self.text[start : self.pos]

    def read_special_key(self) -> str | None:
        """Read a <...> special key, or return None if there is none here."""
        match = SPECIAL_KEY_RE.match(self.text, self.pos)
        if not match:
            return None
        for _ in range(len(match.group(0))):
            self.advance()
        return match.group(0)

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens terminated by a single EOF token
        """
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            token_line = self.line
            token_col = self.column

            if ch == COMMENT_CHAR and self.at_line_start:
                self.skip_comment()
                continue

            if ch == "\n":
                self.advance()
                self.tokens.append(Token(TokenType.NEWLINE, "\n", token_line, token_col))
                self.at_line_start = True
                continue

            if ch.isspace():
                value = self.read_while(lambda c: c.isspace() and c != "\n")
                self.tokens.append(Token(TokenType.WHITESPACE, value, token_line, token_col))
                continue

            self.at_line_start = False

            if ch == "<":
                special = self.read_special_key()
                if special is not None:
                    self.tokens.append(
                        Token(TokenType.SPECIAL_KEY, special, token_line, token_col)
                    )
                    continue

            value = self.read_while(lambda c: not c.isspace())
            token_type = TokenType.KEYWORD if value in KEYWORDS else TokenType.WORD
            self.tokens.append(Token(token_type, value, token_line, token_col))

        self.tokens.append(Token(TokenType.EOF, "", self.line, self.column))
        return self.tokens


def tokenize(text: str) -> list[Token]:
    """
    Convenience function to tokenize configuration text.

    Args:
        text: Source text

    Returns:
        List of tokens
    """
    lexer = Lexer(text)
    return lexer.tokenize()
