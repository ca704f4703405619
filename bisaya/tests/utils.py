"""
Utility functions shared across Bisaya++ tests.
"""
from bisaya.lexer import tokenize
from bisaya.parser import Parser
from bisaya.interpreter import Interpreter


def program(*lines: str) -> str:
    """
    Wrap statement lines in SUGOD ... KATAPUSAN.
    """
    return "\n".join(("SUGOD",) + lines + ("KATAPUSAN",)) + "\n"


def parse_source(source: str) -> list:
    """
    Parse source code and return the AST.
    """
    return Parser(tokenize(source), "<test>").parse()


def run_source(source: str, inputs=None) -> str:
    """
    Run source code and return the printed output.

    ``inputs`` is an optional list of lines handed out one per 'DAWAT'.
    """
    input_source = iter(inputs).__next__ if inputs is not None else None
    interpreter = Interpreter("<test>", input_source)
    return interpreter.interpret(parse_source(source))
