"""Minimal LSP server for glscan: lexical diagnostics only."""

from __future__ import annotations

import logging

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from glscan.lexer import scan

logger = logging.getLogger(__name__)

server = LanguageServer("glscan-lsp", "0.1.0", text_document_sync_kind=TextDocumentSyncKind.Full)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish its diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    diagnostics: list[Diagnostic] = []

    result = scan(doc.source, filename)
    if result.error is not None:
        pos = result.error.position
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=pos.lineno, character=pos.column),
                    end=Position(line=pos.lineno, character=pos.column + 1),
                ),
                message=result.error.message,
                severity=DiagnosticSeverity.Error,
                source="glscan",
            )
        )

    logger.debug("publishing %d diagnostics for %s", len(diagnostics), uri)
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
