"""Run helpers.

Wire source text through a parse session and collect the outcome:

1. The source is wrapped in a character reader.
2. The Parser fetches tokens from the Lexer on demand.
3. Each statement is checked against the Symbol Table and evaluated as it
   is parsed.
4. The Diagnostics reporter prints the final summary.


File: runner.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field

from typecalc.config import Settings
from typecalc.diagnostics import Diagnostic
from typecalc.parser import Parser
from typecalc.source import SourceReader
from typecalc.symbols import Symbol


@dataclass
class RunResult:
    """Outcome of one run."""

    ok: bool
    syntax_errors: int
    semantic_errors: int
    expressions: int
    symbols: list[Symbol] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def values(self) -> dict[str, int | float]:
        """Map each declared name to its stored value."""
        return {symbol.name: symbol.value for symbol in self.symbols}


def run(reader: SourceReader, settings: Settings | None = None, out=None) -> RunResult:
    """
    Parse and evaluate everything ``reader`` yields.
    """
    parser = Parser(reader, settings, out)
    ok = parser.parse()
    diagnostics = parser.diagnostics
    return RunResult(
        ok=ok,
        syntax_errors=diagnostics.syntax_errors,
        semantic_errors=diagnostics.semantic_errors,
        expressions=parser.expressions,
        symbols=list(parser.symbols),
        diagnostics=list(diagnostics.entries),
    )


def run_source(text: str, settings: Settings | None = None, out=None,
               name: str = "<string>") -> RunResult:
    """
    Run a program given as a string.
    """
    return run(SourceReader(text, name), settings, out)


def run_file(path, settings: Settings | None = None, out=None) -> RunResult:
    """
    Run a program stored in a file.

    Raises:
        SourceUnavailableException: If the file cannot be read.
    """
    return run(SourceReader.from_path(path), settings, out)
