"""AST node definitions for Bisaya++.

The parser builds the tree exclusively from the dataclasses below; the set is
closed, and the interpreter matches on every class explicitly. Each node keeps
the ``line`` and ``column`` of the token that introduced it so runtime errors
can point back into the source. Nodes are frozen once built.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from bisaya.operations import Op


class DataType(str, Enum):
    """
    The four declarable variable kinds.
    """
    NUMERO = "NUMERO"
    LETRA = "LETRA"
    TINUOD = "TINUOD"
    TIPIK = "TIPIK"

    @property
    def zero_value(self) -> Any:
        """
        Value a variable of this type holds when declared without initializer.
        """
        return _ZERO_VALUES[self]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


_ZERO_VALUES = {
    DataType.NUMERO: 0,
    DataType.LETRA: '\0',
    DataType.TINUOD: False,
    DataType.TIPIK: 0.0,
}


# Expressions

@dataclass(frozen=True)
class Binary:
    left: Expr
    operator: Op
    right: Expr
    line: int
    column: int


@dataclass(frozen=True)
class Unary:
    operator: Op
    right: Expr
    line: int
    column: int


@dataclass(frozen=True)
class Literal:
    value: Any
    line: int
    column: int


@dataclass(frozen=True)
class VariableRef:
    name: str
    line: int
    column: int


@dataclass(frozen=True)
class Assign:
    name: str
    value: Expr
    line: int
    column: int


# Statements

@dataclass(frozen=True)
class VarDecl:
    """
    ``MUGNA <type> a, b, c = <expr>``. One initializer is shared by all names.
    """
    declared_type: DataType
    names: tuple[str, ...]
    initializer: Optional[Expr]
    line: int
    column: int


@dataclass(frozen=True)
class Print:
    value: Expr
    line: int
    column: int


@dataclass(frozen=True)
class Read:
    """
    ``DAWAT: a, b``. Reads one comma separated line into the named variables.
    """
    names: tuple[str, ...]
    line: int
    column: int


@dataclass(frozen=True)
class Block:
    statements: tuple[Stmt, ...]
    line: int
    column: int


@dataclass(frozen=True)
class If:
    condition: Expr
    then_branch: Block
    else_branch: Optional[Block]
    line: int
    column: int


@dataclass(frozen=True)
class For:
    initializer: Stmt
    condition: Expr
    increment: Stmt
    body: Block
    line: int
    column: int


Expr = Union[Binary, Unary, Literal, VariableRef, Assign]
Stmt = Union[VarDecl, Print, Read, Block, If, For, Expr]


__all__ = [
    "DataType",
    "Binary",
    "Unary",
    "Literal",
    "VariableRef",
    "Assign",
    "VarDecl",
    "Print",
    "Read",
    "Block",
    "If",
    "For",
    "Expr",
    "Stmt",
]
