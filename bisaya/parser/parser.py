"""
Main parser entry point for Bisaya++.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`bisaya.parser.expressions` and `bisaya.parser.statements`.

A program is the token stream between ``SUGOD`` and ``KATAPUSAN``. When a
declaration fails to parse, or is nested too deeply to recurse into, the
parser skips ahead to the next token that can start a statement before
re-raising, so `check` can keep collecting errors while `parse` stops at the
first one.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

from bisaya.exceptions import ParseError
from bisaya.lexer import Token, TOKEN_SPELLINGS

from . import expressions as _expr
from . import statements as _stmt

logger = logging.getLogger(__name__)

STATEMENT_START = ('MUGNA', 'IPAKITA', 'DAWAT', 'KUNG', 'ALANG_SA', 'PUNDOK')


class Parser:
    """Bisaya++ parser."""

    def __init__(self, tokens: list[Token], file: str = "<input>"):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with ``EOF``.
            file (str): The name of the script, used in error messages.
        """
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file

    def advance(self) -> Token:
        """
        Move to the next token and return the one just consumed.
        """
        tok = self.curr_token
        if tok.type != 'EOF':
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok

    def eat(self, token_type: str, message: str | None = None) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.
            message (str): Optional description used instead of the generic one.

        Returns:
            Token: The consumed token.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        if self.curr_token.type == token_type:
            return self.advance()
        if message is None:
            expected = TOKEN_SPELLINGS.get(token_type, token_type)
            message = f"Expected '{expected}'"
        raise self.error(f"{message}, but got {self.describe(self.curr_token)}")

    def describe(self, tok: Token) -> str:
        """
        Render a token for an error message.
        """
        if tok.type == 'EOF':
            return "end of input"
        return f"'{tok.lexeme}'"

    def error(self, message: str, tok: Token | None = None) -> ParseError:
        """
        Build a ParseError positioned at ``tok`` (the current token by default).
        """
        return ParseError(message, tok or self.curr_token, self.source_file)

    # Expression wrappers
    def expr(self):
        """
        Parse a full expression, including ``&`` concatenation.
        """
        return _expr.parse_expr(self)

    def assignment(self):
        """
        Parse an assignment or fall through to logical OR.
        """
        return _expr.parse_assignment(self)

    def logical_or(self):
        """
        Parse a logical OR expression using the 'O' keyword.
        """
        return _expr.parse_logical_or(self)

    def logical_and(self):
        """
        Parse a logical AND expression using the 'UG' keyword.
        """
        return _expr.parse_logical_and(self)

    def equality(self):
        """
        Parse an equality expression ('==' or '<>').
        """
        return _expr.parse_equality(self)

    def comparison(self):
        """
        Parse a comparison expression using relational operators.
        """
        return _expr.parse_comparison(self)

    def term(self):
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_term(self)

    def factor(self):
        """
        Parse multiplication, division and remainder.
        """
        return _expr.parse_factor(self)

    def unary(self):
        """
        Parse a negated or logically inverted operand.
        """
        return _expr.parse_unary(self)

    def primary(self):
        """
        Parse a literal, variable reference or parenthesized group.
        """
        return _expr.parse_primary(self)

    # Statement wrappers
    def declaration(self):
        """
        Parse a declaration or statement, resynchronizing on error.
        """
        start = self.position
        try:
            if self.curr_token.type == 'MUGNA':
                return _stmt.parse_declaration(self)
            return self.statement()
        except ParseError as err:
            if not err.synchronized:
                self.synchronize(start)
                err.synchronized = True
            raise
        except RecursionError:
            err = self.error("Nesting too deep to parse")
            self.synchronize(start)
            err.synchronized = True
            raise err from None

    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self):
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def synchronize(self, start: int) -> None:
        """
        Skip tokens until one that can begin a statement, or ``KATAPUSAN``.

        At least one token is skipped when the failed declaration consumed
        nothing, so repeated calls always make progress.
        """
        if self.position == start and self.curr_token.type not in ('EOF', 'KATAPUSAN'):
            self.advance()
        while self.curr_token.type not in ('EOF', 'KATAPUSAN'):
            if self.curr_token.type in STATEMENT_START:
                return
            self.advance()

    def parse(self) -> list:
        """
        Parse the full input into a list of statements.

        Raises:
            ParseError: On the first grammar violation.
        """
        self.eat('SUGOD', "Expected 'SUGOD' at start of program")
        statements = []
        while self.curr_token.type not in ('KATAPUSAN', 'EOF'):
            statements.append(self.declaration())
        self.eat('KATAPUSAN', "Expected 'KATAPUSAN' at end of program")
        if self.curr_token.type != 'EOF':
            raise self.error(
                f"Unexpected {self.describe(self.curr_token)} after 'KATAPUSAN'"
            )
        logger.debug("Parsed %d top-level statements", len(statements))
        return statements

    def check(self) -> list[ParseError]:
        """
        Parse the full input and return every syntax error found.

        Unlike `parse`, an error does not end the run: the parser continues
        from the statement boundary it resynchronized to.
        """
        errors: list[ParseError] = []
        try:
            self.eat('SUGOD', "Expected 'SUGOD' at start of program")
        except ParseError as err:
            errors.append(err)
        while self.curr_token.type not in ('KATAPUSAN', 'EOF'):
            try:
                self.declaration()
            except ParseError as err:
                errors.append(err)
        try:
            self.eat('KATAPUSAN', "Expected 'KATAPUSAN' at end of program")
            if self.curr_token.type != 'EOF':
                raise self.error(
                    f"Unexpected {self.describe(self.curr_token)} after 'KATAPUSAN'"
                )
        except ParseError as err:
            errors.append(err)
        logger.debug("Check found %d syntax errors", len(errors))
        return errors
