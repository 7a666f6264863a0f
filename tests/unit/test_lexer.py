"""Tests for the configuration lexer."""

from vimkeys.core.lexer import KEYWORDS, MAP_KEYWORDS, Token, TokenType, tokenize


def kinds(text: str) -> list[TokenType]:
    return [t.kind for t in tokenize(text)]


def texts(text: str) -> list[str]:
    return [t.text for t in tokenize(text)]


class TestBasicTokens:
    """Words, keywords, whitespace and positions."""

    def test_empty_input_is_just_eof(self) -> None:
        assert tokenize("") == [Token(TokenType.EOF, "", 1, 1)]

    def test_mapping_line(self) -> None:
        tokens = tokenize("nnoremap H ^")
        assert [t.kind for t in tokens] == [
            TokenType.KEYWORD,
            TokenType.WHITESPACE,
            TokenType.WORD,
            TokenType.WHITESPACE,
            TokenType.WORD,
            TokenType.EOF,
        ]
        assert [t.column for t in tokens] == [1, 9, 10, 11, 12, 13]
        assert all(t.line == 1 for t in tokens)

    def test_newline_advances_line_and_resets_column(self) -> None:
        tokens = tokenize("ab\ncd")
        assert tokens[1] == Token(TokenType.NEWLINE, "\n", 1, 3)
        assert tokens[2] == Token(TokenType.WORD, "cd", 2, 1)
        assert tokens[3] == Token(TokenType.EOF, "", 2, 3)

    def test_whitespace_run_is_one_token(self) -> None:
        tokens = tokenize("\t \tx")
        assert tokens[0] == Token(TokenType.WHITESPACE, "\t \t", 1, 1)
        assert tokens[1] == Token(TokenType.WORD, "x", 1, 4)

    def test_consecutive_newlines(self) -> None:
        assert kinds("\n\n") == [TokenType.NEWLINE, TokenType.NEWLINE, TokenType.EOF]

    def test_keywords(self) -> None:
        for word in KEYWORDS:
            assert tokenize(word)[0].kind == TokenType.KEYWORD

    def test_unmap_family_are_mapping_keywords(self) -> None:
        assert {"unmap", "nunmap", "vunmap", "iunmap", "cunmap"} <= MAP_KEYWORDS

    def test_keyword_match_is_exact(self) -> None:
        assert tokenize("nnoremaps")[0].kind == TokenType.WORD
        assert tokenize("Nmap")[0].kind == TokenType.WORD
        assert tokenize("map!")[0].kind == TokenType.WORD

    def test_word_includes_embedded_notation(self) -> None:
        assert texts(":w<CR>") == [":w<CR>", ""]
        assert kinds(":w<CR>") == [TokenType.WORD, TokenType.EOF]


class TestSpecialKeys:
    """<...> notation."""

    def test_special_key_followed_by_word(self) -> None:
        tokens = tokenize("<C-a>x")
        assert tokens[0] == Token(TokenType.SPECIAL_KEY, "<C-a>", 1, 1)
        assert tokens[1] == Token(TokenType.WORD, "x", 1, 6)

    def test_adjacent_special_keys(self) -> None:
        assert texts("<silent><leader>") == ["<silent>", "<leader>", ""]
        assert kinds("<silent><leader>")[:2] == [TokenType.SPECIAL_KEY, TokenType.SPECIAL_KEY]

    def test_unterminated_bracket_is_a_word(self) -> None:
        tokens = tokenize("<abc def")
        assert tokens[0] == Token(TokenType.WORD, "<abc", 1, 1)

    def test_empty_brackets_are_a_word(self) -> None:
        assert tokenize("<>")[0] == Token(TokenType.WORD, "<>", 1, 1)

    def test_special_key_does_not_cross_lines(self) -> None:
        assert kinds("<a\nb>") == [
            TokenType.WORD,
            TokenType.NEWLINE,
            TokenType.WORD,
            TokenType.EOF,
        ]

    def test_special_key_may_contain_spaces(self) -> None:
        tokens = tokenize("< 2 >")
        assert tokens[0] == Token(TokenType.SPECIAL_KEY, "< 2 >", 1, 1)


class TestComments:
    """Lines whose first non-blank character is a double quote."""

    def test_comment_line_emits_no_tokens(self) -> None:
        tokens = tokenize('" nnoremap a b\nnmap x y')
        assert tokens[0] == Token(TokenType.NEWLINE, "\n", 1, 15)
        assert tokens[1] == Token(TokenType.KEYWORD, "nmap", 2, 1)

    def test_indented_comment(self) -> None:
        assert texts('  " note\n') == ["  ", "\n", ""]

    def test_comment_at_end_of_input(self) -> None:
        assert tokenize('" only a comment') == [Token(TokenType.EOF, "", 1, 17)]

    def test_quote_after_text_is_not_a_comment(self) -> None:
        assert texts('let mapleader = ","') == ["let", " ", "mapleader", " ", "=", " ", '","', ""]

    def test_trailing_quote_comment_is_kept(self) -> None:
        assert '"' in texts('nmap a b " trailing')

    def test_lossless_without_comments(self) -> None:
        source = "let mapleader = ','\n  nnoremap <silent> <Leader>f :Find<CR>\n\tset nu\n"
        assert "".join(texts(source)) == source
