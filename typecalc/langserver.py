"""
TypeCalc Language Server.

This server provides basic editor support for TypeCalc source files using
`pygls`. It reuses the front end to check each document as it is opened or
edited and publishes the recorded syntax and semantic errors as diagnostics.
Variables declared by the document are indexed for hover information and
document symbols.

Run with ``python -m typecalc.langserver``; the server talks LSP over stdio.
"""
from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from typecalc import __version__
from typecalc.config import Settings
from typecalc.runner import RunResult, run_source


@dataclass
class TypeCalcSymbol:
    """Represents a declared variable in a TypeCalc file."""

    name: str
    line: int
    detail: str


def check_document(uri: str, text: str) -> RunResult:
    """Run the front end over ``text`` with all printed output discarded."""
    return run_source(text, Settings(trace=False), out=io.StringIO(), name=uri)


def line_range(line: int) -> Range:
    """Return the range covering one-based source ``line``."""
    start = max(line - 1, 0)
    return Range(Position(start, 0), Position(start + 1, 0))


def to_lsp_diagnostics(result: RunResult) -> List[Diagnostic]:
    """Convert recorded errors into LSP diagnostics."""
    return [
        Diagnostic(
            range=line_range(entry.line),
            message=f"{entry.message} (at '{entry.token}')",
            severity=DiagnosticSeverity.Error,
            source="typecalc",
            code=entry.kind,
        )
        for entry in result.diagnostics
    ]


def to_symbols(result: RunResult) -> List[TypeCalcSymbol]:
    """Index the variables declared by a run."""
    return [
        TypeCalcSymbol(
            symbol.name,
            max(symbol.line - 1, 0),
            f"{symbol.type} {symbol.name} = {symbol.formatted()}",
        )
        for symbol in result.symbols
    ]


class TypeCalcLanguageServer(LanguageServer):
    """Language server for TypeCalc source files."""

    def __init__(self) -> None:
        super().__init__("typecalc-ls", f"v{__version__}")
        self.symbols_by_uri: Dict[str, List[TypeCalcSymbol]] = {}

    def update(self, uri: str, text: str) -> None:
        """Check ``text``, publish its diagnostics and refresh the index."""
        result = check_document(uri, text)
        self.symbols_by_uri[uri] = to_symbols(result)
        self.publish_diagnostics(uri, to_lsp_diagnostics(result))

    def find_symbol(self, uri: str, name: str) -> Optional[TypeCalcSymbol]:
        for sym in self.symbols_by_uri.get(uri, []):
            if sym.name == name:
                return sym
        return None


lang_server = TypeCalcLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: TypeCalcLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Check a document when it is opened."""
    ls.update(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: TypeCalcLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-check a document when it changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    ls.update(doc.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: TypeCalcLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return the type and value of the variable under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    sym = ls.find_symbol(params.text_document.uri, word)
    if sym is None:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=sym.detail)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: TypeCalcLanguageServer, params: DocumentSymbolParams):
    """Return the declared variables of the given document."""
    result: List[DocumentSymbol] = []
    for sym in ls.symbols_by_uri.get(params.text_document.uri, []):
        rng = Range(Position(sym.line, 0), Position(sym.line, len(sym.name)))
        result.append(
            DocumentSymbol(
                name=sym.name,
                kind=SymbolKind.Variable,
                range=rng,
                selection_range=rng,
                detail=sym.detail,
            )
        )
    return result


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
