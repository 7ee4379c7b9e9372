"""Symbol table.

A single global table mapping variable names to their declared type and
current value. Entries keep insertion order and are never removed during a
session.

Values are stored as the declared type: ``int`` symbols hold Python ints and
``double`` symbols hold floats. Reads always widen to ``float`` so that
arithmetic over mixed types runs in floating point, and writes narrow back
to the declared type (truncating toward zero for ``int``).

Capacity starts small and doubles when full. An optional upper bound stands
in for allocation failure; reaching it rejects the declaration with a
semantic error.


File: symbols.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from enum import Enum

from typecalc.config import INITIAL_CAPACITY
from typecalc.exceptions import SymbolTableFullException


class VarType(str, Enum):
    """
    Declared variable types.
    """

    INT = "int"
    DOUBLE = "double"

    def __str__(self) -> str:
        return self.value

    def coerce(self, number: float) -> int | float:
        """
        Convert ``number`` to this type's storage representation.
        """
        if self is VarType.INT:
            return math.trunc(number)
        return float(number)

    def render(self, value) -> str:
        """
        Format a value for output: integers bare, doubles with two decimals.
        """
        if self is VarType.INT:
            return str(math.trunc(value))
        return f"{value:.2f}"


class Symbol:
    """A declared variable."""

    def __init__(self, name: str, type_: VarType, line: int = 0):
        self.name = name
        self.type = type_
        self.value = type_.coerce(0)
        self.declared = True
        self.line = line

    def formatted(self) -> str:
        return self.type.render(self.value)

    def __repr__(self) -> str:
        return f"Symbol({self.name}, {self.type}, {self.value!r})"


class SymbolTable:
    """Insertion ordered, growable collection of :class:`Symbol` entries."""

    def __init__(self, diagnostics, initial_capacity: int = INITIAL_CAPACITY,
                 max_capacity: int | None = None):
        """
        Parameters:
            diagnostics (Diagnostics): Receives semantic errors.
            initial_capacity (int): Starting capacity.
            max_capacity (int | None): Capacity limit, or None for no limit.
        """
        self.diagnostics = diagnostics
        self.max_capacity = max_capacity
        if max_capacity is not None:
            initial_capacity = min(initial_capacity, max_capacity)
        self.capacity = initial_capacity
        self._symbols: list[Symbol] = []
        self._index: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self):
        return iter(self._symbols)

    def __contains__(self, name: str) -> bool:
        return self.is_declared(name)

    def is_declared(self, name: str) -> bool:
        idx = self.find(name)
        return idx is not None and self._symbols[idx].declared

    def find(self, name: str) -> int | None:
        """Return the insertion index of ``name``, or None."""
        return self._index.get(name)

    def lookup(self, name: str) -> Symbol | None:
        idx = self.find(name)
        return None if idx is None else self._symbols[idx]

    def _grow(self) -> None:
        new_capacity = self.capacity * 2
        if self.max_capacity is not None:
            if self.capacity >= self.max_capacity:
                raise SymbolTableFullException(self.max_capacity)
            new_capacity = min(new_capacity, self.max_capacity)
        self.capacity = new_capacity

    def declare(self, name: str, type_: VarType, line: int = 0) -> bool:
        """
        Add a new symbol with a zero value.

        Returns:
            bool: False if the name already exists or the table cannot grow.
        """
        if self.is_declared(name):
            self.diagnostics.semantic_error(f"Variable '{name}' already declared", name)
            return False

        if len(self._symbols) >= self.capacity:
            try:
                self._grow()
            except SymbolTableFullException as e:
                self.diagnostics.semantic_error(str(e), name)
                return False

        self._index[name] = len(self._symbols)
        self._symbols.append(Symbol(name, type_, line))
        return True

    def get_value(self, name: str) -> float:
        """
        Return the value of ``name`` widened to float.

        An undeclared name is a semantic error and reads as zero.
        """
        symbol = self.lookup(name)
        if symbol is None or not symbol.declared:
            self.diagnostics.semantic_error(f"Variable '{name}' used before declaration", name)
            return 0.0
        return float(symbol.value)

    def set_value(self, name: str, number: float) -> None:
        """
        Store ``number`` into ``name`` coerced to its declared type.

        An undeclared name, or a non-finite value for an ``int`` symbol, is a
        semantic error and nothing is stored.
        """
        symbol = self.lookup(name)
        if symbol is None or not symbol.declared:
            self.diagnostics.semantic_error(f"Variable '{name}' assigned before declaration", name)
            return
        if symbol.type is VarType.INT and not math.isfinite(number):
            self.diagnostics.semantic_error(f"Value out of range for int variable '{name}'", name)
            return
        symbol.value = symbol.type.coerce(number)
