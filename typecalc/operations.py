"""Shared definitions for arithmetic operators.

The expression procedures map operator tokens to these names and the
evaluator dispatches on them, so both sides agree on one set of labels.
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported binary operators.
    """

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


TOKEN_OPS = {
    'PLUS': Op.ADD,
    'MINUS': Op.SUB,
    'MUL': Op.MUL,
    'DIV': Op.DIV,
}


__all__ = ["Op", "TOKEN_OPS"]
