"""
Tests for arithmetic, comparison, logical and concatenation operators.
"""
import pytest

from bisaya.exceptions import (
    BisayaRuntimeError,
    DivisionByZeroException,
    NestingDepthException,
    UnknownNodeException,
    UnknownOpException,
)
from bisaya.interpreter import Interpreter
from bisaya.nodes import Binary, Literal, Print, Unary
from bisaya.operations import Op
from bisaya.tests.utils import program, run_source


def show(expression: str) -> str:
    return run_source(program(f"IPAKITA: {expression}"))


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("1 + 2 * 3", "7"),
        ("(1 + 2) * 3", "9"),
        ("10 - 4 - 3", "3"),
        ("10 / 4", "2.5"),
        ("7 / 2", "3.5"),
        ("-7 / 2", "-3.5"),
        ("9 / 3", "3.0"),
        ("7.0 / 2", "3.5"),
        ("7 % 3", "1"),
        ("-7 % 3", "2"),
        ("2.5 * 2", "5.0"),
        ("-(2 + 3)", "-5"),
    ],
)
def test_arithmetic(expression, expected):
    assert show(expression) == expected


def test_division_by_zero():
    with pytest.raises(DivisionByZeroException) as exc_info:
        show("10 / 0")
    err = exc_info.value
    assert isinstance(err, BisayaRuntimeError)
    assert err.output == ""
    assert (err.line, err.column) == (2, 13)


def test_remainder_by_zero():
    with pytest.raises(DivisionByZeroException):
        show("10 % 0")


def test_decimal_zero_divisor():
    with pytest.raises(DivisionByZeroException):
        show("1 / 0.0")


@pytest.mark.parametrize("expression", ['1 + "a"', "OO + 1", "'a' * 2", '-"x"'])
def test_arithmetic_requires_numbers(expression):
    with pytest.raises(BisayaRuntimeError, match="must be numbers"):
        show(expression)


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("3 > 2", "OO"),
        ("3 < 2", "DILI"),
        ("2 >= 2", "OO"),
        ("2 <= 1.5", "DILI"),
        ('"a" < "b"', "OO"),
        ("1 == 1", "OO"),
        ("1 == 1.0", "OO"),
        ("1 <> 2", "OO"),
        ("'a' == \"a\"", "OO"),
        ("OO == 1", "DILI"),
        ('"1" == 1', "DILI"),
        ('"OO" == OO', "OO"),
    ],
)
def test_comparison_and_equality(expression, expected):
    assert show(expression) == expected


def test_ordering_mixed_kinds_is_an_error():
    with pytest.raises(BisayaRuntimeError, match="Cannot compare number and text"):
        show('1 < "a"')


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("OO UG OO", "OO"),
        ('OO UG "DILI"', "DILI"),
        ('"DILI" O OO', "OO"),
        ("DILI 0", "OO"),
        ('DILI "OO"', "DILI"),
        ('DILI ""', "OO"),
        ("1 UG 'a'", "OO"),
    ],
)
def test_logical_operators(expression, expected):
    assert show(expression) == expected


def test_logical_and_evaluates_both_operands():
    source = program(
        "MUGNA NUMERO n = 0",
        'MUGNA TINUOD r = "DILI" UG (n = 5)',
        "IPAKITA: n & r",
    )
    assert run_source(source) == "5DILI"


def test_logical_or_evaluates_both_operands():
    source = program(
        "MUGNA NUMERO n = 0",
        "MUGNA TINUOD r = OO O (n = 7)",
        "IPAKITA: n & r",
    )
    assert run_source(source) == "7OO"


def test_no_short_circuit_on_error():
    with pytest.raises(DivisionByZeroException):
        show('"DILI" UG 1 / 0 == 0')


def test_concatenation_joins_display_text():
    assert show("5 & 'a'") == "5a"
    assert show('"x = " & 1 + 1') == "x = 2"
    assert show("OO & DILI OO") == "OODILI"


def test_unknown_operator_is_reported():
    interpreter = Interpreter('<test>')
    node = Print(Binary(Literal(1, 1, 1), "pow", Literal(2, 1, 5), 1, 3), 1, 1)
    with pytest.raises(UnknownOpException, match="Unknown operation 'pow'"):
        interpreter.interpret([node])


def test_unknown_node_is_an_internal_error():
    interpreter = Interpreter('<test>')
    with pytest.raises(UnknownNodeException) as exc_info:
        interpreter.interpret([object()])
    assert exc_info.value.category == "internal error"


def test_statement_in_expression_position_is_rejected():
    interpreter = Interpreter('<test>')
    with pytest.raises(UnknownNodeException, match="Print"):
        interpreter.eval_expr(Print(Literal(1, 1, 1), 1, 1))


def test_deep_evaluation_is_an_internal_error_with_partial_output():
    expr = Literal(1, 3, 10)
    for _ in range(10000):
        expr = Unary(Op.NEG, expr, 3, 10)
    statements = [Print(Literal("una", 2, 10), 2, 1), Print(expr, 3, 1)]
    with pytest.raises(NestingDepthException) as exc_info:
        Interpreter('<test>').interpret(statements)
    err = exc_info.value
    assert err.category == "internal error"
    assert err.output == "una"
    assert (err.line, err.column) == (3, 1)
