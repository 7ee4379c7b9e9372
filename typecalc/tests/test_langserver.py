"""
Tests for the language server helpers.
"""
from lsprotocol.types import DiagnosticSeverity

from typecalc.langserver import (
    TypeCalcLanguageServer,
    check_document,
    line_range,
    to_lsp_diagnostics,
    to_symbols,
)

URI = "file:///tmp/prog.tc"


def test_check_document_is_silent(capsys):
    result = check_document(URI, "int a = 1; print(a);")
    assert result.ok
    assert capsys.readouterr().out == ""


def test_diagnostics_use_zero_based_lines():
    result = check_document(URI, "int a = 1;\nprint(b);\n")
    diagnostics = to_lsp_diagnostics(result)
    assert len(diagnostics) == 1
    diag = diagnostics[0]
    assert diag.range.start.line == 1
    assert diag.range.end.line == 2
    assert diag.severity == DiagnosticSeverity.Error
    assert diag.source == "typecalc"
    assert diag.code == "semantic"
    assert diag.message == "Variable 'b' used in print() before declaration (at 'b')"


def test_clean_document_has_no_diagnostics():
    assert to_lsp_diagnostics(check_document(URI, "double d = 1.5;")) == []


def test_symbols_from_declarations():
    result = check_document(URI, "int a = 2;\n\ndouble d = a / 4;")
    symbols = to_symbols(result)
    assert [(s.name, s.line, s.detail) for s in symbols] == [
        ("a", 0, "int a = 2"),
        ("d", 2, "double d = 0.50"),
    ]


def test_line_range_clamps_at_start():
    rng = line_range(0)
    assert rng.start.line == 0


def test_server_indexes_documents(monkeypatch):
    server = TypeCalcLanguageServer()
    published = []
    monkeypatch.setattr(
        server, "publish_diagnostics", lambda uri, diags: published.append((uri, diags))
    )
    server.update(URI, "int total = 3 * 4;")
    assert published == [(URI, [])]
    sym = server.find_symbol(URI, "total")
    assert sym is not None
    assert sym.detail == "int total = 12"
    assert server.find_symbol(URI, "missing") is None
