"""Token kinds, data structures, and character classification tables."""

from __future__ import annotations

import string
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from glscan.errors import IllegalCharacterError, InvalidSyntaxError


class TokenKind(Enum):
    EOF = auto()

    # Payload-carrying (value holds the text)
    INTEGER = auto()  # digit+
    IDENTIFIER = auto()  # letter (letter | digit)*
    STRING = auto()  # "...": value is the decoded text

    # Punctuation (single-character)
    SEMICOLON = auto()  # ;
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    COMMA = auto()  # ,
    LBRACE = auto()  # {
    RBRACE = auto()  # }


@dataclass(frozen=True, slots=True)
class Position:
    """Scan location: 0-based index and column within the line, 0-based line number."""

    index: int
    lineno: int
    column: int

    def copy(self) -> Position:
        return replace(self)

    def advance(self) -> Position:
        """Return the position one character further along the same line."""
        return Position(self.index + 1, self.lineno, self.column + 1)

    def next_line(self) -> Position:
        """Return the position at the start of the following line."""
        return Position(0, self.lineno + 1, 0)


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme with its source line kept for diagnostics."""

    kind: TokenKind
    value: str
    filename: str
    line_text: str
    position_start: Position
    position_end: Position

    def copy(self) -> Token:
        return replace(self)

    def illegal_char(self) -> IllegalCharacterError:
        """Build an illegal-character error anchored at this token's start."""
        from glscan.errors import IllegalCharacterError

        col = self.position_start.column
        return IllegalCharacterError(self, repr(self.line_text[col : col + 1]))

    def invalid_syntax(self, detail: str = "") -> InvalidSyntaxError:
        """Build an invalid-syntax error anchored at this token's start."""
        from glscan.errors import InvalidSyntaxError

        return InvalidSyntaxError(self, detail)


DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters + "_")
LETTERS_DIGITS = DIGITS | LETTERS
# Only the first six produce tokens; the rest are rejected by the lexer.
PUNCTUATIONS = frozenset(";(),{}" + "[].:+-*/%=<>!&|^~?#")
SPACES = frozenset(" \t\n\r")

QUOTE = '"'
ESCAPE = "\\"

PUNCTUATION_KINDS: dict[str, TokenKind] = {
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}


def is_token_start(ch: str) -> bool:
    """Return True if ch can begin some token (digit, letter, punctuation or quote)."""
    return ch in LETTERS_DIGITS or ch in PUNCTUATIONS or ch == QUOTE
