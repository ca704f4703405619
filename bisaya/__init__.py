"""Bisaya++ language interpreter.

The pipeline is ``tokenize`` -> ``Parser.parse`` -> ``Interpreter.interpret``.
Each stage fails fast with a :class:`BisayaError` subclass, so nothing from a
later stage runs once an earlier one has failed.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import Callable, Optional

from bisaya.exceptions import (
    BisayaError,
    BisayaRuntimeError,
    DivisionByZeroException,
    LexicalError,
    NestingDepthException,
    ParseError,
    UndefinedVariableException,
    UnknownNodeException,
    UnknownOpException,
)
from bisaya.interpreter import Interpreter
from bisaya.lexer import Token, tokenize
from bisaya.parser import Parser

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def run(
    source: str,
    file: str = "<input>",
    input_source: Optional[Callable[[], str]] = None,
) -> str:
    """
    Scan, parse and evaluate one complete program.

    Parameters:
        source (str): Program text including ``SUGOD`` and ``KATAPUSAN``.
        file (str): Name used in error messages.
        input_source (callable): Supplies one line per 'DAWAT' statement.

    Returns:
        str: Everything the program printed.

    Raises:
        LexicalError, ParseError, BisayaRuntimeError
    """
    tokens = tokenize(source)
    statements = Parser(tokens, file).parse()
    return Interpreter(file, input_source).interpret(statements)


__all__ = [
    "BisayaError",
    "BisayaRuntimeError",
    "DivisionByZeroException",
    "Interpreter",
    "LexicalError",
    "NestingDepthException",
    "ParseError",
    "Parser",
    "Token",
    "UndefinedVariableException",
    "UnknownNodeException",
    "UnknownOpException",
    "run",
    "tokenize",
]
