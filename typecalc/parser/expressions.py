"""
Expression parsing utilities for TypeCalc.

These functions operate on a `typecalc.parser.parser.Parser` instance and
implement the recursive descent logic for expressions. Values are computed
while parsing: each procedure returns a float, and operators of equal
precedence fold left to right as they are met.
"""

from typing import TYPE_CHECKING

from typecalc.exceptions import DivisionByZero
from typecalc.operations import TOKEN_OPS

if TYPE_CHECKING:
    from typecalc.parser import Parser


# ---- Highest precedence ----

def parse_factor(parser: 'Parser') -> float:
    """Parse a variable reference or a numeric literal."""
    tok = parser.curr_token
    if tok.type == 'ID':
        value = parser.evaluator.variable(tok.value)
        parser.advance()
        return value

    if tok.type in ('INTEGER', 'DECIMAL'):
        value = parser.evaluator.number(tok)
        parser.advance()
        return value

    parser.syntax_error("Expected identifier or number in expression")
    parser.advance()
    return 0.0


def parse_term(parser: 'Parser') -> float:
    """
    Parse multiplication and division.

    Division by zero is a semantic error; the remaining factors of the term
    are still consumed but the term as a whole evaluates to zero.
    """
    result = parser.factor()
    divided_by_zero = False
    while parser.curr_token.type in ('MUL', 'DIV'):
        op = TOKEN_OPS[parser.curr_token.type]
        parser.advance()
        right = parser.factor()
        if divided_by_zero:
            continue
        try:
            result = parser.evaluator.binary(op, result, right)
        except DivisionByZero:
            parser.semantic_error("Division by zero")
            divided_by_zero = True
            result = 0.0
    return result


# ---- Entry point ----

def parse_expression(parser: 'Parser') -> float:
    """Parse addition and subtraction."""
    result = parser.term()
    while parser.curr_token.type in ('PLUS', 'MINUS'):
        op = TOKEN_OPS[parser.curr_token.type]
        parser.advance()
        result = parser.evaluator.binary(op, result, parser.term())
    return result
