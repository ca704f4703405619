"""
Expression parsing utilities for Bisaya++.

These functions operate on a `bisaya.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and associativity. Every level is reachable from
`parse_expr`, lowest precedence first:

    &  ->  =  ->  O  ->  UG  ->  == <>  ->  > >= < <=  ->  + -  ->  * / %  ->  - DILI
"""

from typing import TYPE_CHECKING

from bisaya.nodes import Assign, Binary, Literal, Unary, VariableRef
from bisaya.operations import BINARY_OPS, UNARY_OPS

if TYPE_CHECKING:
    from bisaya.parser import Parser


LITERAL_TOKENS = ('INTEGER', 'DECIMAL', 'CHAR', 'STRING', 'BOOLEAN')


def _binary_level(parser: 'Parser', operand, token_types: tuple) -> object:
    """Parse a left-associative chain of ``operand (op operand)*``."""
    result = operand()
    while parser.curr_token.type in token_types:
        op_tok = parser.advance()
        result = Binary(
            result, BINARY_OPS[op_tok.type], operand(), op_tok.line, op_tok.column
        )
    return result


# ---- Highest precedence ----

def parse_primary(parser: 'Parser'):
    """Parse a literal, variable reference or parenthesized expression."""
    tok = parser.curr_token

    if tok.type in LITERAL_TOKENS:
        parser.advance()
        return Literal(tok.value, tok.line, tok.column)

    if tok.type == 'ID':
        parser.advance()
        return VariableRef(tok.lexeme, tok.line, tok.column)

    if tok.type == 'LPAREN':
        parser.eat('LPAREN')
        node = parser.expr()
        parser.eat('RPAREN', "Expected ')' after expression")
        return node

    raise parser.error(f"Expected expression, but got {parser.describe(tok)}")


def parse_unary(parser: 'Parser'):
    """Parse unary minus and the 'DILI' logical negation."""
    tok = parser.curr_token
    if tok.type in UNARY_OPS:
        parser.advance()
        return Unary(UNARY_OPS[tok.type], parser.unary(), tok.line, tok.column)
    return parser.primary()


def parse_factor(parser: 'Parser'):
    """Parse multiplication, division, and remainder expressions."""
    return _binary_level(parser, parser.unary, ('MUL', 'DIV', 'MOD'))


def parse_term(parser: 'Parser'):
    """Parse addition and subtraction expressions."""
    return _binary_level(parser, parser.factor, ('PLUS', 'MINUS'))


def parse_comparison(parser: 'Parser'):
    """Parse ordering comparisons (>, >=, <, <=)."""
    return _binary_level(parser, parser.term, ('GT', 'GE', 'LT', 'LE'))


def parse_equality(parser: 'Parser'):
    """Parse equality comparisons (==, <>)."""
    return _binary_level(parser, parser.comparison, ('EQ', 'NE'))


def parse_logical_and(parser: 'Parser'):
    """Parse logical AND expressions using the 'UG' keyword."""
    return _binary_level(parser, parser.equality, ('UG',))


def parse_logical_or(parser: 'Parser'):
    """Parse logical OR expressions using the 'O' keyword."""
    return _binary_level(parser, parser.logical_and, ('O',))


def parse_assignment(parser: 'Parser'):
    """
    Parse ``<identifier> = <expression>`` or fall through to logical OR.

    The right-hand side is a full expression, so ``x = y = 4`` assigns
    right to left.
    """
    target = parser.logical_or()
    if parser.curr_token.type == 'ASSIGN':
        eq_tok = parser.advance()
        value = parser.expr()
        if isinstance(target, VariableRef):
            return Assign(target.name, value, target.line, target.column)
        raise parser.error("Invalid assignment target", eq_tok)
    return target


# ---- Entry point ----

def parse_expr(parser: 'Parser'):
    """Parse an expression starting from the lowest-precedence operator."""
    return _binary_level(parser, parser.assignment, ('CONCAT',))
