"""Minimal LSP server for Lox: publishes scanner diagnostics."""

from __future__ import annotations

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

from loxscan import __version__
from loxscan.errors import ErrorCollector, line_text
from loxscan.lexer import scan_all

server = LanguageServer(
    "loxscan-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish one diagnostic per reported error."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source

    collector = ErrorCollector()
    scan_all(source, collector)

    diagnostics: list[Diagnostic] = []
    for diag in collector.diagnostics:
        line = diag.line - 1
        # Reports carry no column, so highlight the whole line
        width = len(line_text(source, diag.line))
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=0),
                    end=Position(line=line, character=width),
                ),
                message=diag.message,
                severity=DiagnosticSeverity.Error,
                source="loxscan",
            )
        )

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
