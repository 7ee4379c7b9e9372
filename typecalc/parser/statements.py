"""Statement parsing utilities for TypeCalc.

These functions operate on a `typecalc.parser.parser.Parser` instance and
handle the three statement forms: declarations, assignments and print
statements. Each one checks names against the symbol table as it goes and
stores evaluated values immediately.

A statement that fails part way through returns without consuming the rest
of its tokens, except where a local recovery loop resynchronises on ``;`` or
``)``. The statement driver stops after the first error in any case.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from typecalc.symbols import VarType

if TYPE_CHECKING:
    from typecalc.parser import Parser


TYPE_KEYWORDS = {
    'INT': VarType.INT,
    'DOUBLE': VarType.DOUBLE,
}


def parse_statement(parser: 'Parser') -> None:
    """
    Dispatch on the leading token of a statement.

    Unrecognised leading tokens are a syntax error; one token is skipped so
    the parse always makes progress.
    """
    tok = parser.curr_token
    if tok.type in TYPE_KEYWORDS:
        parser.declaration()
    elif tok.type == 'PRINT':
        parser.print_statement()
    elif tok.type == 'ID':
        parser.assignment()
    elif tok.type == 'UNKNOWN':
        parser.syntax_error("Unexpected character in statement")
        parser.advance()
    else:
        parser.syntax_error("Expected statement (declaration, assignment, or print)")
        parser.advance()


def parse_declaration(parser: 'Parser') -> None:
    """
    Parse a typed declaration with an initializer.

    Syntax:
        ('int' | 'double') <identifier> = <expression> ;

    The symbol is registered before its initializer is evaluated, so a
    reference to the name inside its own initializer reads zero. The
    initializer is only stored when the statement ends with ``;`` and the
    declaration was accepted.

    Args:
        parser: The parser instance.
    """
    parser.write("Parsing declaration...")
    keyword = parser.curr_token
    var_type = TYPE_KEYWORDS.get(keyword.type)
    if var_type is None:
        parser.syntax_error("Expected 'int' or 'double' keyword")
        return
    parser.advance()

    if not parser.check('ID'):
        parser.syntax_error(f"Expected identifier after '{keyword.value}'")
        parser.skip_past('SEMI')
        return

    name_tok = parser.curr_token
    parser.advance()
    accepted = parser.symbols.declare(name_tok.value, var_type, name_tok.line)

    if not parser.check('ASSIGN'):
        parser.syntax_error("Expected '=' operator after identifier")
        return
    parser.advance()

    value = parser.expression()

    if not parser.check('SEMI'):
        parser.syntax_error("Expected ';' at end of declaration")
        return
    if accepted:
        parser.symbols.set_value(name_tok.value, value)
    parser.advance(defer=True)


def parse_assignment(parser: 'Parser') -> None:
    """
    Parse an assignment to a previously declared variable.

    Syntax:
        <identifier> = <expression> ;

    An undeclared target is reported up front, but the rest of the statement
    is still parsed; the store then fails as well.

    Args:
        parser: The parser instance.
    """
    parser.write("Parsing assignment...")
    if not parser.check('ID'):
        parser.syntax_error("Expected identifier")
        return

    name = parser.curr_token.value
    if not parser.symbols.is_declared(name):
        parser.semantic_error(f"Variable '{name}' used before declaration")
    parser.advance()

    if not parser.check('ASSIGN'):
        parser.syntax_error("Expected '=' operator")
        return
    parser.advance()

    value = parser.expression()

    if not parser.check('SEMI'):
        parser.syntax_error("Expected ';' at end of assignment")
        return
    parser.symbols.set_value(name, value)
    parser.advance(defer=True)


def parse_print(parser: 'Parser') -> None:
    """
    Parse a print statement and output the variable's value.

    Syntax:
        print ( <identifier> ) ;

    Integer variables print without a decimal point and doubles with two
    decimals. An undeclared name prints ``0``.

    Args:
        parser: The parser instance.
    """
    parser.write("Parsing print statement...")
    if not parser.check('PRINT'):
        parser.syntax_error("Expected 'print' keyword")
        return
    parser.advance()

    if not parser.check('LPAREN'):
        parser.syntax_error("Expected '(' after print")
        return
    parser.advance()

    if not parser.check('ID'):
        parser.syntax_error("Expected identifier inside print()")
        parser.skip_past('RPAREN')
        return

    name = parser.curr_token.value
    symbol = parser.symbols.lookup(name)
    if symbol is None or not symbol.declared:
        parser.semantic_error(f"Variable '{name}' used in print() before declaration")
        text = VarType.INT.render(0)
    else:
        text = symbol.formatted()
    parser.advance()

    if not parser.check('RPAREN'):
        parser.syntax_error("Expected ')' after identifier")
        return
    parser.advance()

    if not parser.check('SEMI'):
        parser.syntax_error("Expected ';' at end of print statement")
        return
    parser.write(f"Result: {text}")
    parser.advance(defer=True)
