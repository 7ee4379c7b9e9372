"""
Tests for inline expression evaluation.
"""
import io

from typecalc.config import Settings
from typecalc.evaluator import Evaluator, InlineEvaluator
from typecalc.exceptions import DivisionByZero
from typecalc.operations import Op
from typecalc.parser import Parser
from typecalc.source import SourceReader
from typecalc.symbols import SymbolTable
from typecalc.tests.utils import messages, quiet_diagnostics, run_quiet


def test_inline_evaluator_ops():
    evaluator = InlineEvaluator(SymbolTable(quiet_diagnostics()))
    assert evaluator.binary(Op.ADD, 1.0, 2.0) == 3.0
    assert evaluator.binary(Op.SUB, 1.0, 2.0) == -1.0
    assert evaluator.binary(Op.MUL, 1.5, 2.0) == 3.0
    assert evaluator.binary(Op.DIV, 7.0, 2.0) == 3.5


def test_inline_evaluator_division_by_zero_raises():
    evaluator = InlineEvaluator(SymbolTable(quiet_diagnostics()))
    try:
        evaluator.binary(Op.DIV, 1.0, 0.0)
    except DivisionByZero:
        pass
    else:
        raise AssertionError('expected DivisionByZero')


def test_division_by_zero_literal():
    result, _ = run_quiet("double c = 4 / 0;")
    assert result.semantic_errors == 1
    assert messages(result) == ["Division by zero"]
    assert result.values() == {'c': 0.0}


def test_division_by_zero_variable():
    result, _ = run_quiet("int a = 0; int b = 10 / a;")
    assert result.semantic_errors == 1
    assert result.values() == {'a': 0, 'b': 0}


def test_division_by_zero_zeroes_the_whole_term_only():
    result, _ = run_quiet("double c = 1 + 4 / 0 * 3 + 2;")
    assert result.semantic_errors == 1
    assert result.values() == {'c': 3.0}


def test_division_by_zero_decimal():
    result, _ = run_quiet("double c = 5 / 0.0;")
    assert messages(result) == ["Division by zero"]


def test_decimal_literals():
    result, _ = run_quiet("double a = 0.5 + 1.25; double b = 3. * 2;")
    assert result.values() == {'a': 1.75, 'b': 6.0}


class RecordingEvaluator(Evaluator):
    """Evaluator that records the operations it is asked to perform."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = []

    def number(self, token):
        self.calls.append(('number', token.value))
        return self.inner.number(token)

    def variable(self, name):
        self.calls.append(('variable', name))
        return self.inner.variable(name)

    def binary(self, op, left, right):
        self.calls.append((op, left, right))
        return self.inner.binary(op, left, right)


def test_evaluator_can_be_swapped():
    parser = Parser(SourceReader("int a = 2; int b = a * 3 + 1;"), Settings(trace=False), io.StringIO())
    recorder = RecordingEvaluator(parser.evaluator)
    parser.evaluator = recorder
    assert parser.parse()
    assert recorder.calls == [
        ('number', '2'),
        ('variable', 'a'),
        ('number', '3'),
        (Op.MUL, 2.0, 3.0),
        ('number', '1'),
        (Op.ADD, 6.0, 1.0),
    ]
    assert parser.symbols.lookup('b').value == 7
