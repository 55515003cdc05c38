"""Token stream dumps for the command line."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from glscan.tokens import Position, Token, TokenKind


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one human-readable line per token to *file*."""
    for tok in tokens:
        span = f"{_loc(tok.position_start)}-{_loc(tok.position_end)}"
        if tok.kind == TokenKind.EOF:
            file.write(f"{span}  {tok.kind.name}\n")
        else:
            file.write(f"{span}  {tok.kind.name} {tok.value!r}\n")


def tokens_to_json(tokens: list[Token]) -> list[dict[str, Any]]:
    """Convert tokens to plain dicts suitable for json.dump."""
    return [
        {
            "kind": tok.kind.name,
            "value": tok.value,
            "start": _pos_dict(tok.position_start),
            "end": _pos_dict(tok.position_end),
        }
        for tok in tokens
    ]


def _loc(pos: Position) -> str:
    return f"{pos.lineno + 1}:{pos.column + 1}"


def _pos_dict(pos: Position) -> dict[str, int]:
    return {"index": pos.index, "lineno": pos.lineno, "column": pos.column}
