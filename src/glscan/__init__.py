"""glscan: lexical front end for a small programming language."""

from __future__ import annotations

from glscan.errors import IllegalCharacterError, InvalidSyntaxError, LexError
from glscan.lexer import Lexer, ScanResult, scan, tokenize
from glscan.tokens import Position, Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    "IllegalCharacterError",
    "InvalidSyntaxError",
    "LexError",
    "Lexer",
    "Position",
    "ScanResult",
    "Token",
    "TokenKind",
    "scan",
    "tokenize",
]
