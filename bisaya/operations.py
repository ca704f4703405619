"""Shared definitions for AST operation identifiers.

The parser stores one of these on every ``Binary`` and ``Unary`` node and
the interpreter dispatches on them, so the two components cannot drift apart
on operator spelling.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported AST operation names.
    """

    # Arithmetic
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"

    # Comparison
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    LT = "lt"
    GE = "ge"
    LE = "le"

    # Boolean
    AND = "and"
    OR = "or"
    NOT = "not"

    # Unary arithmetic
    NEG = "neg"

    # Text
    CONCAT = "concat"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Token kinds that map directly onto a binary operation.
BINARY_OPS = {
    'PLUS': Op.ADD,
    'MINUS': Op.SUB,
    'MUL': Op.MUL,
    'DIV': Op.DIV,
    'MOD': Op.MOD,
    'EQ': Op.EQ,
    'NE': Op.NE,
    'GT': Op.GT,
    'LT': Op.LT,
    'GE': Op.GE,
    'LE': Op.LE,
    'UG': Op.AND,
    'O': Op.OR,
    'CONCAT': Op.CONCAT,
}

UNARY_OPS = {
    'MINUS': Op.NEG,
    'DILI': Op.NOT,
}


__all__ = ["Op", "BINARY_OPS", "UNARY_OPS"]
