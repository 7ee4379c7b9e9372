"""Diagnostics reporter.

Keeps the error counters, the sticky failure flag and the current source
line for a parse session. Errors are printed as they happen and recorded as
:class:`Diagnostic` entries so callers such as the language server can
inspect them after the run.

Once any error is recorded ``failed`` stays set for the rest of the session;
the statement driver checks it before starting each new statement.


File: diagnostics.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys
from dataclasses import dataclass

SYNTAX = "syntax"
SEMANTIC = "semantic"


@dataclass(frozen=True)
class Diagnostic:
    """A single recorded error."""

    kind: str
    line: int
    message: str
    token: str

    def __str__(self) -> str:
        return f"[{self.kind.upper()} ERROR] Line {self.line}: {self.message}"


class Diagnostics:
    """Error counters and line tracking for one session."""

    def __init__(self, out=None):
        """
        Parameters:
            out: Text stream for error and summary output (defaults to stdout).
        """
        self.out = out
        self.syntax_errors = 0
        self.semantic_errors = 0
        self.failed = False
        self.line = 1
        self.entries: list[Diagnostic] = []

    def write(self, text: str = "") -> None:
        print(text, file=self.out if self.out is not None else sys.stdout)

    def newline(self) -> None:
        """Advance the current line number."""
        self.line += 1

    def syntax_error(self, message: str, token: str) -> None:
        """Record a syntax error against the offending token text."""
        self.syntax_errors += 1
        self._record(SYNTAX, message, token)

    def semantic_error(self, message: str, token: str) -> None:
        """Record a semantic error against the offending token text."""
        self.semantic_errors += 1
        self._record(SEMANTIC, message, token)

    def _record(self, kind: str, message: str, token: str) -> None:
        entry = Diagnostic(kind, self.line, message, token)
        self.entries.append(entry)
        self.failed = True
        self.write()
        self.write(str(entry))
        self.write(f"  Current token: '{token}'")

    def summary(self, symbols, expressions: int) -> None:
        """
        Print the end of run report.

        The symbol table is dumped only when no error was recorded.
        """
        self.write()
        self.write("=== Parse Complete ===")
        self.write(f"Syntax Errors: {self.syntax_errors}")
        self.write(f"Semantic Errors: {self.semantic_errors}")
        self.write(f"Expressions Parsed: {expressions}")
        if self.failed:
            self.write("Status: FAILED")
            return
        self.write("Status: SUCCESS")
        self.write("=== Symbol Table ===")
        if not len(symbols):
            self.write("(empty)")
        for symbol in symbols:
            self.write(f"  {symbol.name} ({symbol.type}) = {symbol.formatted()}")
        self.write("====================")
