"""Expression evaluation.

The expression procedures of the parser do not build a tree. Instead they
call into an :class:`Evaluator` as each operand and operator is recognised,
and fold the returned values left to right. :class:`InlineEvaluator` computes
numbers immediately against the symbol table; a different evaluator (one
that builds nodes, say) can be swapped in without touching the grammar code.

All values produced here are floats. Narrowing to a declared type happens
only when a value is stored.


File: evaluator.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typecalc.exceptions import DivisionByZero
from typecalc.operations import Op


class Evaluator:
    """Interface driven by the expression procedures."""

    def number(self, token) -> float:
        """Value of an ``INTEGER`` or ``DECIMAL`` literal token."""
        raise NotImplementedError

    def variable(self, name: str) -> float:
        """Current value of a variable reference."""
        raise NotImplementedError

    def binary(self, op: Op, left: float, right: float) -> float:
        """
        Combine two operand values.

        Raises:
            DivisionByZero: If ``op`` is division and ``right`` is zero.
        """
        raise NotImplementedError


class InlineEvaluator(Evaluator):
    """Evaluates values as they are parsed."""

    def __init__(self, symbols):
        self.symbols = symbols

    def number(self, token) -> float:
        return float(token.value)

    def variable(self, name: str) -> float:
        return self.symbols.get_value(name)

    def binary(self, op: Op, left: float, right: float) -> float:
        if op == Op.ADD:
            return left + right
        if op == Op.SUB:
            return left - right
        if op == Op.MUL:
            return left * right
        if op == Op.DIV:
            if right == 0.0:
                raise DivisionByZero()
            return left / right
        raise ValueError(f"Unknown operation '{op}'")
