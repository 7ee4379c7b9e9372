"""Lexer for TypeCalc.

The lexer reads the source one character at a time and hands out exactly one
:class:`Token` per request. Each token carries its type tag, its text and the
line it was found on.

Tokens cover the keywords ``int``, ``double`` and ``print``, identifiers,
integer and decimal literals, the operators ``= + - * /`` and the symbols
``; ( )``. Whitespace is skipped and newlines advance the line counter held
by the session diagnostics. Identifiers and numbers longer than the
configured cap are truncated with a syntax error, and unrecognised
characters become ``UNKNOWN`` tokens, so lexing never stops early.

Fetching and tracing are separate steps: :meth:`Lexer.fetch` returns the next
token silently and :meth:`Lexer.emit_trace` prints its trace line, which lets
the parser place the trace where it belongs in the narration.
:meth:`Lexer.next_token` does both.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import io
import string
from dataclasses import dataclass

from typecalc.config import MAX_LEXEME_LENGTH
from typecalc.diagnostics import Diagnostics
from typecalc.source import SourceReader

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
ALNUM = LETTERS | DIGITS
WHITESPACE = frozenset(" \t\r\n\v\f")

KEYWORDS = {
    'int': 'INT',
    'double': 'DOUBLE',
    'print': 'PRINT',
}

SINGLE_CHAR_TOKENS = {
    '=': 'ASSIGN',
    '+': 'PLUS',
    '-': 'MINUS',
    '*': 'MUL',
    '/': 'DIV',
    ';': 'SEMI',
    '(': 'LPAREN',
    ')': 'RPAREN',
}


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a type, text and line number.
    """
    type: str
    value: str
    line: int

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value}, line={self.line})"


class Lexer:
    """Character-level lexer over a :class:`~typecalc.source.SourceReader`."""

    def __init__(self, reader, diagnostics, max_length: int = MAX_LEXEME_LENGTH,
                 trace: bool = True):
        """
        Parameters:
            reader (SourceReader): The character stream.
            diagnostics (Diagnostics): Receives lexical errors and line updates.
            max_length (int): Longest identifier or number kept intact.
            trace (bool): Whether :meth:`emit_trace` prints anything.
        """
        self.reader = reader
        self.diagnostics = diagnostics
        self.max_length = max_length
        self.trace = trace
        self._done = False

    def next_token(self) -> Token:
        """
        Fetch the next token and print its trace line.
        """
        token = self.fetch()
        self.emit_trace(token)
        return token

    def emit_trace(self, token: Token) -> None:
        """
        Print the trace line for ``token`` if tracing is enabled.
        """
        if self.trace:
            self.diagnostics.write(f"  [line {token.line}] {token.type:<8} '{token.value}'")

    def fetch(self) -> Token:
        """
        Consume characters until one complete token is recognised.

        Returns:
            Token: The token; ``EOF`` forever once input is exhausted.
        """
        if self._done:
            return Token('EOF', 'EOF', self.diagnostics.line)

        ch = self.reader.read()
        while ch in WHITESPACE:
            if ch == '\n':
                self.diagnostics.newline()
            ch = self.reader.read()

        line = self.diagnostics.line

        if not ch:
            self._done = True
            return Token('EOF', 'EOF', line)

        if ch in LETTERS:
            text = self._accumulate(ch, ALNUM, "Identifier too long")
            return Token(KEYWORDS.get(text, 'ID'), text, line)

        if ch in DIGITS:
            return self._number(ch, line)

        if ch in SINGLE_CHAR_TOKENS:
            return Token(SINGLE_CHAR_TOKENS[ch], ch, line)

        self.diagnostics.syntax_error(
            f"Unknown character '{ch}' (code: {ord(ch)})", ch
        )
        return Token('UNKNOWN', ch, line)

    def _accumulate(self, first: str, allowed, overflow_message: str) -> str:
        """Collect a run of ``allowed`` characters, enforcing the length cap."""
        chars = [first]
        ch = self.reader.read()
        while ch in allowed:
            if len(chars) >= self.max_length:
                self._overflow(overflow_message, ''.join(chars))
                break
            chars.append(ch)
            ch = self.reader.read()
        self.reader.unread(ch)
        return ''.join(chars)

    def _number(self, first: str, line: int) -> Token:
        chars = [first]
        seen_point = False
        ch = self.reader.read()
        while ch and (ch in DIGITS or (ch == '.' and not seen_point)):
            if len(chars) >= self.max_length:
                self._overflow("Number too long", ''.join(chars))
                break
            if ch == '.':
                seen_point = True
            chars.append(ch)
            ch = self.reader.read()
        self.reader.unread(ch)
        return Token('DECIMAL' if seen_point else 'INTEGER', ''.join(chars), line)

    def _overflow(self, message: str, text: str) -> None:
        self.diagnostics.syntax_error(
            f"{message} (max {self.max_length} characters)", text
        )


def tokenize(text: str, diagnostics=None, max_length: int = MAX_LEXEME_LENGTH) -> list[Token]:
    """
    Convert a string of source code into a list of tokens ending with ``EOF``.

    Lexical errors are recorded on ``diagnostics`` (a fresh, silent instance
    when omitted).
    """
    if diagnostics is None:
        diagnostics = Diagnostics(out=io.StringIO())
    lexer = Lexer(SourceReader(text), diagnostics, max_length, trace=False)
    tokens = []
    while True:
        token = lexer.fetch()
        tokens.append(token)
        if token.type == 'EOF':
            return tokens
