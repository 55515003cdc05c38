"""glscan lexer: converts source text into a flat token stream."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from glscan.errors import ErrorKind, LexError
from glscan.tokens import (
    DIGITS,
    ESCAPE,
    LETTERS,
    LETTERS_DIGITS,
    PUNCTUATION_KINDS,
    PUNCTUATIONS,
    QUOTE,
    SPACES,
    Position,
    Token,
    TokenKind,
    is_token_start,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of a scan: the tokens so far and the error that stopped it, if any."""

    tokens: list[Token]
    error: LexError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def diagnostic(self) -> str | None:
        if self.error is None:
            return None
        return self.error.format()


class Lexer:
    """Tokenize source text into a list of Token objects, stopping at the first error."""

    def __init__(self, source: str, filename: str = "<input>", lineno: int = 0) -> None:
        self._source = source
        self._filename = filename
        self._offset = 0
        self._lines = source.split("\n")
        self._line_idx = 0
        self._position = Position(0, lineno, 0)
        self._current_char = source[0] if source else ""
        self._current_linetext = self._lines[0]
        self._tokens: list[Token] = []
        self._error: LexError | None = None
        self._finished = False

    @property
    def tokens(self) -> list[Token]:
        """A copy of the tokens accumulated so far."""
        return list(self._tokens)

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        if self._error is not None:
            raise self._error
        if self._finished:
            return self.tokens

        while self._current_char:
            self._lex_next()

        self._emit_eof()
        self._finished = True
        return self.tokens

    def scan(self) -> ScanResult:
        """Tokenize, capturing a lexical error in the result instead of raising it."""
        try:
            tokens = self.tokenize()
        except LexError as exc:
            logger.debug("scan of %s failed: %s", self._filename, exc.message)
            return ScanResult(self.tokens, exc)
        logger.debug("scanned %s: %d tokens", self._filename, len(tokens))
        return ScanResult(tokens)

    # ------------------------------------------------------------------
    # Cursor primitives
    # ------------------------------------------------------------------

    def _advance_char(self) -> str:
        self._offset += 1
        if self._offset < len(self._source):
            self._current_char = self._source[self._offset]
        else:
            self._current_char = ""
        return self._current_char

    def _advance_position(self) -> None:
        self._position = self._position.advance()

    def _advance_linetext(self) -> None:
        self._position = self._position.next_line()
        self._line_idx += 1
        if self._line_idx < len(self._lines):
            self._current_linetext = self._lines[self._line_idx]
        else:
            self._current_linetext = ""

    def _advance(self) -> str:
        self._advance_position()
        return self._advance_char()

    def _step(self) -> str:
        """Consume the current character, crossing into the next line on a newline."""
        if self._current_char == "\n":
            self._advance_linetext()
            return self._advance_char()
        return self._advance()

    # ------------------------------------------------------------------
    # Token construction and failure
    # ------------------------------------------------------------------

    def _emit(self, kind: TokenKind, value: str, start: Position, line_text: str) -> Token:
        tok = Token(kind, value, self._filename, line_text, start, self._position)
        self._tokens.append(tok)
        return tok

    def _emit_eof(self) -> Token:
        if self._tokens:
            last = self._tokens[-1]
            tok = Token(
                TokenKind.EOF,
                "",
                last.filename,
                last.line_text,
                last.position_end,
                last.position_end,
            )
        else:
            pos = self._position.copy()
            tok = Token(TokenKind.EOF, "", self._filename, self._current_linetext, pos, pos)
        self._tokens.append(tok)
        return tok

    def _fail(
        self,
        kind: ErrorKind,
        detail: str = "",
        start: Position | None = None,
        line_text: str | None = None,
    ) -> LexError:
        """Terminate the scan and return the error anchored at *start*.

        A terminal EOF marker is recorded so the token list stays well formed,
        and the rest of the faulty line is skipped.
        """
        if start is None:
            start = self._position.copy()
        if line_text is None:
            line_text = self._current_linetext

        anchor = Token(TokenKind.EOF, "", self._filename, line_text, start, start)
        self._tokens.append(anchor)

        while self._current_char and self._current_char != "\n":
            self._advance()
        if self._current_char:
            self._step()

        err: LexError
        if kind is ErrorKind.ILLEGAL_CHARACTER:
            err = anchor.illegal_char()
        else:
            err = anchor.invalid_syntax(detail)
        self._error = err
        return err

    # ------------------------------------------------------------------
    # Recognition
    # ------------------------------------------------------------------

    def _lex_next(self) -> None:
        ch = self._current_char

        if ch in SPACES:
            self._step()
            return

        if ch in DIGITS:
            self._lex_run(DIGITS, TokenKind.INTEGER, "integer literal")
            return

        if ch in LETTERS:
            self._lex_run(LETTERS_DIGITS, TokenKind.IDENTIFIER, "identifier")
            return

        if ch in PUNCTUATION_KINDS:
            start = self._position
            line_text = self._current_linetext
            self._advance()
            self._emit(PUNCTUATION_KINDS[ch], ch, start, line_text)
            return

        if ch == QUOTE:
            self._lex_string()
            return

        # Unhandled punctuation, a stray backslash, or a character of no class
        raise self._fail(ErrorKind.ILLEGAL_CHARACTER)

    def _lex_run(self, charset: frozenset[str], kind: TokenKind, what: str) -> None:
        start = self._position
        line_text = self._current_linetext
        chars = []
        while self._current_char and self._current_char in charset:
            chars.append(self._current_char)
            self._advance()
        self._check_trailing(what)
        self._emit(kind, "".join(chars), start, line_text)

    def _lex_string(self) -> None:
        start = self._position
        line_text = self._current_linetext
        self._advance()  # opening quote

        chars = []
        escaped = False
        while self._current_char:
            ch = self._current_char
            if escaped:
                if ch == "n":
                    # The escape flag is left set after \n
                    chars.append("\n")
                else:
                    chars.append(ch)
                    escaped = False
            elif ch == ESCAPE:
                escaped = True
            elif ch == QUOTE:
                break
            else:
                chars.append(ch)
            self._step()
        else:
            raise self._fail(
                ErrorKind.INVALID_SYNTAX, "unterminated string literal", start, line_text
            )

        self._advance()  # closing quote
        self._check_trailing("string literal")
        self._emit(TokenKind.STRING, "".join(chars), start, line_text)

    def _check_trailing(self, what: str) -> None:
        """Reject a character that cannot directly follow a completed run."""
        ch = self._current_char
        if not ch or ch in SPACES or ch in PUNCTUATIONS:
            return
        if is_token_start(ch):
            raise self._fail(ErrorKind.INVALID_SYNTAX, f"unexpected {ch!r} after {what}")
        raise self._fail(ErrorKind.ILLEGAL_CHARACTER)


def tokenize(source: str, filename: str = "<input>", lineno: int = 0) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, filename, lineno).tokenize()


def scan(source: str, filename: str = "<input>", lineno: int = 0) -> ScanResult:
    """Convenience function: tokenize source text without raising on lexical errors."""
    return Lexer(source, filename, lineno).scan()
