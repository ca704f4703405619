"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
variable declarations, arithmetic, comparison and logical operators, string concatenation,
conditionals, loops, nested blocks, and input/output statements.

1. Execution Model
The interpreter evaluates the AST in a top-down, recursive manner. Statements are executed
via `execute()` and expressions are evaluated by `eval_expr()`. Both dispatch with a `match`
over the closed set of node classes in `bisaya.nodes`; a node that matches none of them is an
internal error, never silently skipped.

2. Environment
Each call to `interpret()` starts from a fresh root frame. Blocks push a child frame on entry
and restore the previous frame on exit, including when an error unwinds through them.

3. Output
`IPAKITA` appends text to a per-run buffer rather than writing to the console. `interpret()`
returns the buffer joined in execution order with no separators. When a runtime error aborts
the run, the text produced so far travels on the exception as `output`.

4. Operators
Both operands of every binary operator are evaluated before it is applied; `UG` and `O` do not
short-circuit. Arithmetic requires numbers, `/` is always true division (`10 / 4` is 2.5),
and dividing by zero is a runtime error.

5. Error Handling
Runtime errors (undefined variables, division by zero, type mismatches, unknown operations or
nodes) are raised as typed exceptions carrying line, column and file.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from decimal import Decimal
from typing import Any, Callable, Optional

from bisaya.environment import Environment
from bisaya.exceptions import (
    BisayaRuntimeError,
    DivisionByZeroException,
    NestingDepthException,
    UnknownNodeException,
    UnknownOpException,
)
from bisaya.nodes import (
    Assign,
    Binary,
    Block,
    DataType,
    For,
    If,
    Literal,
    Print,
    Read,
    Unary,
    VarDecl,
    VariableRef,
)
from bisaya.operations import Op

logger = logging.getLogger(__name__)

NULL_WORD = "wala"
TRUE_WORD = "OO"
FALSE_WORD = "DILI"
NEWLINE_SENTINEL = "$"
HASH_SENTINEL = "#"

OP_SYMBOLS = {
    Op.ADD: '+',
    Op.SUB: '-',
    Op.MUL: '*',
    Op.DIV: '/',
    Op.MOD: '%',
    Op.GT: '>',
    Op.LT: '<',
    Op.GE: '>=',
    Op.LE: '<=',
    Op.NEG: '-',
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _kind(value: Any) -> str:
    """Coarse runtime kind used by the equality rule."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "text"
    return type(value).__name__


def is_truthy(value: Any) -> bool:
    """
    Truthiness rule: null is false, booleans are themselves, numbers are true
    when nonzero, text when non-empty, and anything else is true.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if _is_number(value):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


def is_equal(left: Any, right: Any) -> bool:
    """Value equality without coercion between kinds."""
    if left is None and right is None:
        return True
    if _kind(left) != _kind(right):
        return False
    return left == right


def _format_decimal(value: float) -> str:
    """
    Decimal display text. Magnitudes in [1e-7, 1e21) are always written
    positionally, so 1e16 shows as 10000000000000000.0 rather than 1e+16.
    """
    text = repr(value)
    if "e" not in text or not 1e-7 <= abs(value) < 1e21:
        return text
    text = format(Decimal(text), "f")
    return text if "." in text else text + ".0"


def stringify(value: Any) -> str:
    """Convert a runtime value to the text ``IPAKITA`` and ``&`` produce."""
    if value is None:
        return NULL_WORD
    if isinstance(value, bool):
        return TRUE_WORD if value else FALSE_WORD
    if isinstance(value, float):
        return _format_decimal(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        if value == NEWLINE_SENTINEL:
            return "\n"
        if value == HASH_SENTINEL:
            return HASH_SENTINEL
        return value
    return str(value)


class Interpreter:
    """Tree-walk interpreter for Bisaya++."""

    def __init__(self, file: str = "<input>", input_source: Optional[Callable[[], str]] = None):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Script name used in error messages.
            input_source (callable): Returns one line of text per 'DAWAT'.
        """
        self.file = file
        self.input_source = input_source
        self.env = Environment(file)
        self._output: list[str] = []

    def interpret(self, statements: list) -> str:
        """
        Execute a program and return everything it printed.

        Parameters:
            statements (list): Top-level statements from `Parser.parse()`.

        Returns:
            str: Printed text in execution order, or "" if nothing was printed.

        Raises:
            BisayaRuntimeError: On the first runtime fault. Its ``output``
                attribute holds the text printed before the fault.
            NestingDepthException: If evaluation recurses past the stack limit.
        """
        self.env = Environment(self.file)
        self._output = []
        try:
            for stmt in statements:
                try:
                    self.execute(stmt)
                except RecursionError:
                    raise NestingDepthException(
                        getattr(stmt, 'line', None), getattr(stmt, 'column', None), self.file
                    ) from None
        except BisayaRuntimeError as err:
            err.output = "".join(self._output)
            logger.debug("Run aborted after %d characters of output", len(err.output))
            raise
        output = "".join(self._output)
        logger.debug("Run finished with %d characters of output", len(output))
        return output

    def _error(self, message: str, node) -> BisayaRuntimeError:
        return BisayaRuntimeError(message, node.line, node.column, self.file)

    def execute(self, stmt) -> None:
        """
        Execute a single statement.

        Raises:
            UnknownNodeException: For nodes outside the statement set.
        """
        match stmt:
            case VarDecl():
                self._declare(stmt)
            case Print(value=value):
                self._output.append(stringify(self.eval_expr(value)))
            case Read():
                self._read(stmt)
            case Block(statements=statements):
                with self.env.scope():
                    for inner in statements:
                        self.execute(inner)
            case If(condition=condition, then_branch=then_branch, else_branch=else_branch):
                if is_truthy(self.eval_expr(condition)):
                    self.execute(then_branch)
                elif else_branch is not None:
                    self.execute(else_branch)
            case For(initializer=initializer, condition=condition, increment=increment, body=body):
                self.execute(initializer)
                while is_truthy(self.eval_expr(condition)):
                    self.execute(body)
                    self.execute(increment)
            case Binary() | Unary() | Literal() | VariableRef() | Assign():
                self.eval_expr(stmt)
            case _:
                raise UnknownNodeException(
                    stmt, getattr(stmt, 'line', None), getattr(stmt, 'column', None), self.file
                )

    def _declare(self, stmt: VarDecl) -> None:
        if not isinstance(stmt.declared_type, DataType):
            raise self._error(
                f"Invalid type '{stmt.declared_type}' for variable declaration", stmt
            )
        if stmt.initializer is not None:
            # Evaluated once; every name shares the result.
            value = self.eval_expr(stmt.initializer)
        else:
            value = stmt.declared_type.zero_value
        for name in stmt.names:
            self.env.define(name, stmt.declared_type, value)

    def _read(self, stmt: Read) -> None:
        if self.input_source is None:
            raise self._error("No input available for 'DAWAT'", stmt)
        fields = [part.strip() for part in self.input_source().split(',')]
        if len(fields) != len(stmt.names):
            raise self._error(
                f"'DAWAT' expected {len(stmt.names)} value(s) but got {len(fields)}", stmt
            )
        targets = [self.env.resolve(name, stmt.line, stmt.column) for name in stmt.names]
        values = [
            self._convert_input(text, target.declared_type, name, stmt)
            for text, target, name in zip(fields, targets, stmt.names)
        ]
        for target, value in zip(targets, values):
            target.value = value

    def _convert_input(self, text: str, declared_type: DataType, name: str, stmt: Read) -> Any:
        try:
            match declared_type:
                case DataType.NUMERO:
                    return int(text)
                case DataType.TIPIK:
                    return float(text)
                case DataType.TINUOD:
                    if text == TRUE_WORD:
                        return True
                    if text == FALSE_WORD:
                        return False
                    raise ValueError(text)
                case _:
                    return text
        except ValueError:
            raise self._error(
                f"Cannot read '{text}' into {declared_type.value} variable '{name}'", stmt
            ) from None

    def eval_expr(self, node) -> Any:
        """
        Recursively evaluate an expression node and return its computed value.

        Raises:
            UndefinedVariableException: If a variable is referenced that has not been defined.
            DivisionByZeroException: If the right operand of '/' or '%' is zero.
            UnknownOpException: If an unrecognized operator is encountered.
            UnknownNodeException: If the node is not an expression.
        """
        match node:
            case Literal(value=value):
                return value
            case VariableRef(name=name):
                return self.env.read(name, node.line, node.column)
            case Assign(name=name, value=value_node):
                value = self.eval_expr(value_node)
                self.env.write(name, value, node.line, node.column)
                return value
            case Unary(operator=operator, right=right):
                operand = self.eval_expr(right)
                match operator:
                    case Op.NEG:
                        self._require_numbers(node, operand)
                        return -operand
                    case Op.NOT:
                        return not is_truthy(operand)
                    case _:
                        raise UnknownOpException(operator, node.line, node.column, self.file)
            case Binary(left=left, operator=operator, right=right):
                lhs = self.eval_expr(left)
                rhs = self.eval_expr(right)
                return self._apply_binary(node, operator, lhs, rhs)
            case _:
                raise UnknownNodeException(
                    node, getattr(node, 'line', None), getattr(node, 'column', None), self.file
                )

    def _require_numbers(self, node, *operands) -> None:
        if not all(_is_number(value) for value in operands):
            symbol = OP_SYMBOLS.get(node.operator, node.operator)
            raise self._error(f"Operands of '{symbol}' must be numbers", node)

    def _apply_binary(self, node: Binary, op: Op, lhs: Any, rhs: Any) -> Any:
        match op:
            # Arithmetic
            case Op.ADD:
                self._require_numbers(node, lhs, rhs)
                return lhs + rhs
            case Op.SUB:
                self._require_numbers(node, lhs, rhs)
                return lhs - rhs
            case Op.MUL:
                self._require_numbers(node, lhs, rhs)
                return lhs * rhs
            case Op.DIV:
                self._require_numbers(node, lhs, rhs)
                if rhs == 0:
                    raise DivisionByZeroException(node.line, node.column, self.file)
                return lhs / rhs
            case Op.MOD:
                self._require_numbers(node, lhs, rhs)
                if rhs == 0:
                    raise DivisionByZeroException(node.line, node.column, self.file)
                return lhs % rhs
            # Comparison
            case Op.GT | Op.LT | Op.GE | Op.LE:
                both_numbers = _is_number(lhs) and _is_number(rhs)
                both_text = isinstance(lhs, str) and isinstance(rhs, str)
                if not (both_numbers or both_text):
                    raise self._error(
                        f"Cannot compare {_kind(lhs)} and {_kind(rhs)} "
                        f"with '{OP_SYMBOLS[op]}'",
                        node,
                    )
                if op == Op.GT:
                    return lhs > rhs
                if op == Op.LT:
                    return lhs < rhs
                if op == Op.GE:
                    return lhs >= rhs
                return lhs <= rhs
            case Op.EQ:
                return is_equal(lhs, rhs)
            case Op.NE:
                return not is_equal(lhs, rhs)
            # Logical, operands already evaluated
            case Op.AND:
                return is_truthy(lhs) and is_truthy(rhs)
            case Op.OR:
                return is_truthy(lhs) or is_truthy(rhs)
            # Text
            case Op.CONCAT:
                return stringify(lhs) + stringify(rhs)
            case _:
                raise UnknownOpException(op, node.line, node.column, self.file)
