"""Errors.

Every failure the pipeline can surface derives from :class:`BisayaError`, so a
driver can catch one type and still label the message by its ``category``
(lexical, syntax, runtime or internal).


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class BisayaError(Exception):
    """
    Base class for errors raised while scanning, parsing or evaluating.
    """
    category = "error"

    def __init__(self, description, line=None, column=None, file=None):
        self.description = description
        self.line = line
        self.column = column
        self.file = file
        message = description
        if line is not None:
            message += f" on line {line}"
            if column is not None:
                message += f", column {column}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class LexicalError(BisayaError):
    """
    Error for characters the scanner cannot turn into a token.
    """
    category = "lexical error"


class ParseError(BisayaError):
    """
    Error for token sequences that violate the grammar.
    """
    category = "syntax error"

    def __init__(self, description, token=None, file=None):
        self.token = token
        # Set once the parser has skipped ahead to the next statement boundary.
        self.synchronized = False
        line = token.line if token is not None else None
        column = token.column if token is not None else None
        super().__init__(description, line, column, file)


class BisayaRuntimeError(BisayaError):
    """
    Error raised while evaluating the AST.

    ``output`` holds whatever the program printed before the fault.
    """
    category = "runtime error"

    def __init__(self, description, line=None, column=None, file=None):
        self.output = ""
        super().__init__(description, line, column, file)


class UndefinedVariableException(BisayaRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, column=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line, column, file)


class DivisionByZeroException(BisayaRuntimeError):
    """
    Error for division or remainder by zero.
    """
    def __init__(self, line=None, column=None, file=None):
        super().__init__("Division by zero", line, column, file)


class UnknownOpException(BisayaRuntimeError):
    """
    Error for unknown operations.
    """
    def __init__(self, op, line=None, column=None, file=None):
        self.op = op
        super().__init__(f"Unknown operation '{op}'", line, column, file)


class UnknownNodeException(BisayaRuntimeError):
    """
    Error for AST nodes the interpreter has no rule for.
    """
    category = "internal error"

    def __init__(self, node, line=None, column=None, file=None):
        self.node = node
        super().__init__(
            f"Unknown node type '{type(node).__name__}'", line, column, file
        )


class NestingDepthException(BisayaRuntimeError):
    """
    Error for programs nested deeper than the evaluator can recurse.
    """
    category = "internal error"

    def __init__(self, line=None, column=None, file=None):
        super().__init__("Program nested too deeply to evaluate", line, column, file)
