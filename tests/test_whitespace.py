"""Test whitespace skipping, line tracking, and EOF placement."""

from glscan.lexer import Lexer, tokenize
from glscan.tokens import Position, TokenKind

from .conftest import assert_kinds, lexeme


class TestWhitespace:
    def test_only_whitespace(self, lex):
        assert lex(" \t\r\n  ") == []

    def test_tab_is_one_column(self, lex):
        tokens = lex("\tx")
        assert tokens[0].position_start == Position(1, 0, 1)

    def test_carriage_return_skipped(self, lex):
        tokens = lex("a\r\nb")
        assert_kinds(tokens, [TokenKind.IDENTIFIER, TokenKind.IDENTIFIER])
        assert tokens[0].line_text == "a\r"
        assert tokens[1].position_start == Position(0, 1, 0)


class TestLineTracking:
    def test_second_line(self, lex):
        tokens = lex("a\nbc")
        assert tokens[1].position_start == Position(0, 1, 0)
        assert tokens[1].position_end == Position(2, 1, 2)
        assert tokens[1].line_text == "bc"

    def test_blank_lines(self, lex):
        tokens = lex("a\n\n\n  b")
        assert tokens[1].position_start == Position(2, 3, 2)
        assert tokens[1].line_text == "  b"

    def test_start_line_offset(self, lex):
        tokens = lex("x\ny", lineno=10)
        assert tokens[0].position_start.lineno == 10
        assert tokens[1].position_start.lineno == 11

    def test_line_text_is_verbatim(self, lex):
        tokens = lex("first;\n\tsecond (x);")
        assert tokens[0].line_text == "first;"
        assert all(t.line_text == "\tsecond (x);" for t in tokens[2:])


class TestEof:
    def test_empty_input(self):
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.EOF
        assert tokens[0].position_start == Position(0, 0, 0)
        assert tokens[0].position_end == Position(0, 0, 0)

    def test_empty_input_with_start_line(self):
        tokens = tokenize("", lineno=4)
        assert tokens[0].position_start == Position(0, 4, 0)

    def test_eof_at_last_token_end(self):
        tokens = tokenize("abc  \n\n")
        eof = tokens[-1]
        assert eof.kind == TokenKind.EOF
        assert eof.position_start == tokens[0].position_end == Position(3, 0, 3)
        assert eof.position_end == eof.position_start
        assert eof.line_text == "abc  "

    def test_eof_at_cursor_without_tokens(self):
        tokens = tokenize("   \n  ")
        assert len(tokens) == 1
        assert tokens[0].position_start == Position(2, 1, 2)

    def test_exactly_one_eof(self):
        tokens = tokenize("a b c")
        assert [t.kind for t in tokens].count(TokenKind.EOF) == 1
        assert tokens[-1].kind == TokenKind.EOF


class TestSpans:
    def test_spans_recover_source(self):
        source = "foo(12, bar);\n  {baz_9 ,7}\n\tx;"
        tokens = tokenize(source)[:-1]
        assert "".join(lexeme(t) for t in tokens) == "".join(source.split())

    def test_end_is_next_start_when_adjacent(self):
        tokens = tokenize("f(x)")[:-1]
        for prev, cur in zip(tokens, tokens[1:]):
            assert prev.position_end == cur.position_start


class TestAccessors:
    def test_tokens_returns_copy(self):
        lexer = Lexer("a b")
        tokens = lexer.tokenize()
        tokens.clear()
        assert len(lexer.tokens) == 3

    def test_tokenize_twice(self):
        lexer = Lexer("a")
        first = lexer.tokenize()
        assert lexer.tokenize() == first
