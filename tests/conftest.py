"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from glscan.lexer import tokenize
from glscan.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str, filename: str = "test.gl", lineno: int = 0) -> list[Token]:
        tokens = tokenize(source, filename, lineno)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.kind != TokenKind.EOF]

    return _lex


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def lexeme(tok: Token) -> str:
    """Return the source text a single-line token was scanned from."""
    return tok.line_text[tok.position_start.column : tok.position_end.column]
