"""
Main parser entry point for TypeCalc.

This module defines the `Parser` class, which owns the state of one parse
session (current token, lexer, symbol table, diagnostics and evaluator) and
coordinates the recursive descent. The grammar procedures themselves live in
`typecalc.parser.statements` and `typecalc.parser.expressions`.

Grammar:

    program      -> statement* EOF
    statement    -> declaration | assignment | printStmt
    declaration  -> ('int' | 'double') ID '=' expression ';'
    assignment   -> ID '=' expression ';'
    printStmt    -> 'print' '(' ID ')' ';'
    expression   -> term (('+' | '-') term)*
    term         -> factor (('*' | '/') factor)*
    factor       -> ID | INTEGER | DECIMAL


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typecalc.config import Settings
from typecalc.diagnostics import Diagnostics
from typecalc.evaluator import InlineEvaluator
from typecalc.lexer import Lexer, Token
from typecalc.symbols import SymbolTable

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """TypeCalc parser and evaluator."""

    def __init__(self, reader, settings: Settings | None = None, out=None, evaluator=None):
        """
        Initialize a parse session over a source reader.

        Parameters:
            reader (SourceReader): The program text.
            settings (Settings): Session settings; defaults apply when omitted.
            out: Text stream for narration, traces and errors (stdout if None).
            evaluator (Evaluator): Expression evaluator; inline by default.
        """
        self.settings = settings if settings is not None else Settings()
        self.diagnostics = Diagnostics(out)
        self.lexer = Lexer(
            reader,
            self.diagnostics,
            max_length=self.settings.max_lexeme_length,
            trace=self.settings.trace,
        )
        self.symbols = SymbolTable(
            self.diagnostics,
            initial_capacity=self.settings.initial_capacity,
            max_capacity=self.settings.max_capacity,
        )
        self.evaluator = evaluator if evaluator is not None else InlineEvaluator(self.symbols)
        self.curr_token: Token | None = None
        self.untraced: Token | None = None
        self.expressions = 0


    def advance(self, defer: bool = False) -> Token:
        """
        Move to the next token.

        Parameters:
            defer (bool): Hold the trace back until :meth:`flush_trace`.
        """
        self.flush_trace()
        token = self.lexer.fetch()
        if defer:
            self.untraced = token
        else:
            self.lexer.emit_trace(token)
        self.curr_token = token
        return token

    def flush_trace(self) -> None:
        """Print the trace of a token fetched with ``defer=True``."""
        if self.untraced is not None:
            self.lexer.emit_trace(self.untraced)
            self.untraced = None

    def check(self, token_type: str) -> bool:
        return self.curr_token.type == token_type

    def skip_past(self, token_type: str) -> None:
        """
        Recover by discarding tokens up to and including ``token_type``.

        Stops at ``EOF`` if the boundary never appears.
        """
        while self.curr_token.type not in (token_type, 'EOF'):
            self.advance()
        if self.curr_token.type == token_type:
            self.advance()

    def syntax_error(self, message: str) -> None:
        self.diagnostics.syntax_error(message, self.curr_token.value)

    def semantic_error(self, message: str) -> None:
        self.diagnostics.semantic_error(message, self.curr_token.value)

    def write(self, text: str = "") -> None:
        self.diagnostics.write(text)


    # Expression wrappers
    def factor(self) -> float:
        """
        Parse a factor: a variable reference or a numeric literal.
        """
        return _expr.parse_factor(self)

    def term(self) -> float:
        """
        Parse a term: factors joined by multiplication or division.
        """
        return _expr.parse_term(self)

    def expression(self) -> float:
        """
        Parse an expression: terms joined by addition or subtraction.
        """
        return _expr.parse_expression(self)


    # Statement wrappers
    def statement(self) -> None:
        """
        Parse a single statement.
        """
        _stmt.parse_statement(self)

    def declaration(self) -> None:
        """
        Parse an 'int' or 'double' declaration.
        """
        _stmt.parse_declaration(self)

    def assignment(self) -> None:
        """
        Parse an assignment to an existing variable.
        """
        _stmt.parse_assignment(self)

    def print_statement(self) -> None:
        """
        Parse a 'print' statement.
        """
        _stmt.parse_print(self)


    def parse(self) -> bool:
        """
        Parse and evaluate the whole program, then print the summary.

        Statements are processed until end of input or until the first
        recorded error.

        Returns:
            bool: True if no error was recorded.
        """
        self.write("=== Starting Parse ===")
        self.advance(defer=True)
        while not self.check('EOF') and not self.diagnostics.failed:
            self.expressions += 1
            self.write()
            self.write(f"--- Expression #{self.expressions} ---")
            self.flush_trace()
            self.statement()
        self.flush_trace()
        self.diagnostics.summary(self.symbols, self.expressions)
        return not self.diagnostics.failed
