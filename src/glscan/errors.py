"""Lexical error types and source-anchored diagnostic rendering."""

from __future__ import annotations

from enum import Enum

from glscan.tokens import Position, Token


class ErrorKind(Enum):
    ILLEGAL_CHARACTER = "IllegalCharacter"
    INVALID_SYNTAX = "InvalidSyntax"


def render_diagnostic(token: Token, detail: str = "") -> str:
    """Render the four-line file/line/caret diagnostic for *token*.

    The source line is shown with tabs as single spaces and surrounding
    whitespace trimmed; the caret is shifted left by the amount of leading
    whitespace removed.
    """
    line = token.line_text.replace("\t", " ")
    stripped = line.lstrip()
    lead = len(line) - len(stripped)

    if stripped.endswith("\n"):
        stripped = stripped[:-1]
    if stripped.endswith("\r"):
        stripped = stripped[:-1]
    stripped = stripped.rstrip()

    pad = " " * max(0, token.position_start.column - lead)

    return (
        f'  File "{token.filename}", line {token.position_start.lineno + 1}\n'
        f"    {stripped}\n"
        f"    {pad}^\n"
        f"{detail}"
    )


class LexError(Exception):
    """Raised on the first lexing error, anchored at a token's start position."""

    kind: ErrorKind

    def __init__(self, token: Token, detail: str = "") -> None:
        self.token = token
        self.detail = detail
        super().__init__(self.format())

    @property
    def position(self) -> Position:
        return self.token.position_start

    @property
    def message(self) -> str:
        """Kind label plus detail, without the source context."""
        if self.detail:
            return f"{self.kind.value}: {self.detail}"
        return self.kind.value

    def format(self) -> str:
        return render_diagnostic(self.token, self.message)


class IllegalCharacterError(LexError):
    """A character that belongs to no recognized class."""

    kind = ErrorKind.ILLEGAL_CHARACTER


class InvalidSyntaxError(LexError):
    """A run followed by a character that cannot follow it, or an unterminated string."""

    kind = ErrorKind.INVALID_SYNTAX
