"""Minimal LSP server for Lox, scan diagnostics only."""

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
from loxscan.errors import LexError
from loxscan.lexer import scan_tokens

server = LanguageServer("loxscan-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _line_range(source: str, line: int) -> Range:
    """Range covering the whole of 1-based *line* (0-based in LSP terms)."""
    # Only "\n" ends a line, as in the scanner
    lines = source.split("\n")
    idx = line - 1
    width = len(lines[idx]) if 0 <= idx < len(lines) else 0
    return Range(
        start=Position(line=idx, character=0),
        end=Position(line=idx, character=width),
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    diagnostics: list[Diagnostic] = []

    try:
        scan_tokens(source)
    except LexError as exc:
        diagnostics.append(
            Diagnostic(
                range=_line_range(source, exc.line),
                message=exc.message,
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
