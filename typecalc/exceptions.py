"""Errors.

Syntax and semantic problems in a program are recorded by the diagnostics
reporter rather than raised. The exceptions here cover faults that sit
outside the language itself.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class SourceUnavailableException(Exception):
    """
    Error for source files that cannot be opened or read.
    """
    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f"Error opening file: {path}"
        if reason is not None:
            message += f" ({reason})"
        super().__init__(message)


class SymbolTableFullException(Exception):
    """
    Error for symbol table growth beyond its configured limit.
    """
    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"Symbol table full (max {capacity} variables)")


class DivisionByZero(Exception):
    """
    Control flow handling for division by a zero operand.
    """
    pass
