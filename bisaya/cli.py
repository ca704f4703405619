"""
Bisaya++ Language Interpreter

This is the command line driver for the Bisaya++ interpreter.

Workflow:
1. The source script is read from the file given on the command line, or
   collected line by line in the REPL between a ``SUGOD`` line and a
   ``KATAPUSAN`` line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST and returns the printed text.
5. Program output goes to stdout, diagnostics go to stderr.

Set ``BISAYADEBUG`` in the environment to dump tokens and AST before
evaluation and to enable debug logging.
"""
import argparse
import logging
import os
import sys

from bisaya.exceptions import BisayaError, BisayaRuntimeError
from bisaya.interpreter import Interpreter
from bisaya.lexer import tokenize
from bisaya.parser import Parser

logger = logging.getLogger(__name__)

BEGIN_MARKER = "SUGOD"
END_MARKER = "KATAPUSAN"


def debug_enabled() -> bool:
    """
    Whether ``BISAYADEBUG`` is set to a non-empty value.
    """
    return bool(os.environ.get('BISAYADEBUG'))


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n", file=sys.stderr)
    print(tokens, file=sys.stderr)
    print("\nAST:\n", file=sys.stderr)
    for stmt in ast:
        print(stmt, file=sys.stderr)
    print(" ", file=sys.stderr)


def report_error(err: BisayaError) -> None:
    """
    Print an error to stderr labelled with its category.
    """
    print(f"{err.category.capitalize()}: {err}", file=sys.stderr)


def execute_source(source: str, file: str, input_source=input) -> int:
    """
    Run one complete program and print its output.

    Returns:
        int: 0 on success, 1 if any stage failed.
    """
    try:
        tokens = tokenize(source)
        ast = Parser(tokens, file).parse()

        if debug_enabled():
            debug_print_tokens_ast(tokens, ast)

        output = Interpreter(file, input_source).interpret(ast)
    except BisayaRuntimeError as e:
        if e.output:
            print(e.output)
        report_error(e)
        return 1
    except BisayaError as e:
        report_error(e)
        return 1
    if output:
        print(output)
    return 0


def check_script(script_name: str) -> int:
    """
    Report every syntax error in a script without running it.
    """
    with open(script_name, "r", encoding="utf-8") as f:
        code = f.read()
    try:
        errors = Parser(tokenize(code), script_name).check()
    except BisayaError as e:
        report_error(e)
        return 1
    for err in errors:
        report_error(err)
    if not errors:
        print(f"{script_name}: OK")
    return 1 if errors else 0


def run_script(script_name: str) -> int:
    """
    Run a Bisaya++ script
    """
    with open(script_name, "r", encoding="utf-8") as f:
        code = f.read()
    logger.debug("Running %s (%d characters)", script_name, len(code))
    return execute_source(code, script_name)


def run_repl():
    """
    Run the interactive REPL
    """
    print("Bisaya++ Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    print(f"Start a program with `{BEGIN_MARKER}` and end it with `{END_MARKER}`.")
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            stripped = line.strip()
            if not buffer and stripped in {"exit", "quit"}:
                break
            if not buffer:
                if stripped == "":
                    continue
                if stripped != BEGIN_MARKER:
                    print(f"Error: program must start with {BEGIN_MARKER}", file=sys.stderr)
                    continue
            buffer.append(line)
            if stripped == END_MARKER:
                execute_source("\n".join(buffer), "<stdin>")
                buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the command line parser.
    """
    parser = argparse.ArgumentParser(
        prog="bisaya",
        description="Bisaya++ Language Interpreter. Run with no script to enter the REPL.",
    )
    parser.add_argument("script", nargs="?", help="path to a Bisaya++ source file")
    parser.add_argument(
        "--check",
        action="store_true",
        help="report every syntax error in the script without running it",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No script: enter the REPL.
    - A script: run it, or only report syntax errors with ``--check``.
    """
    args = build_arg_parser().parse_args(argv)
    if debug_enabled():
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.script is None:
        if args.check:
            print("--check requires a script", file=sys.stderr)
            return 2
        run_repl()
        return 0
    try:
        if args.check:
            return check_script(args.script)
        return run_script(args.script)
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
