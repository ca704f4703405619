"""Statement parsing utilities for Bisaya++.

These functions operate on a `bisaya.parser.parser.Parser` instance and
handle the various statement forms in the language such as declarations,
output, input, blocks, conditionals and loops.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from bisaya.lexer import Token
from bisaya.nodes import Block, DataType, For, If, Print, Read, VarDecl

if TYPE_CHECKING:
    from bisaya.parser import Parser


TYPE_KEYWORDS = {
    'NUMERO': DataType.NUMERO,
    'LETRA': DataType.LETRA,
    'TINUOD': DataType.TINUOD,
    'TIPIK': DataType.TIPIK,
}


def _parse_names(parser: 'Parser', message: str) -> tuple[str, ...]:
    """
    Parse a comma separated list of one or more identifiers.
    """
    names = [parser.eat('ID', message).lexeme]
    while parser.curr_token.type == 'COMMA':
        parser.eat('COMMA')
        names.append(parser.eat('ID', message).lexeme)
    return tuple(names)


def parse_block(parser: 'Parser') -> Block:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        [PUNDOK] { <declaration>* }

    Args:
        parser: The parser instance.

    Returns:
        Block: the statements in source order.
    """
    tok = parser.curr_token
    if tok.type == 'PUNDOK':
        parser.eat('PUNDOK')
    parser.eat('LBRACE', "Expected '{' before block")
    statements = []
    while parser.curr_token.type not in ('RBRACE', 'KATAPUSAN', 'EOF'):
        statements.append(parser.declaration())
    parser.eat('RBRACE', "Expected '}' after block")
    return Block(tuple(statements), tok.line, tok.column)


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    Anything that does not start with a statement keyword or a brace is
    parsed as an expression statement.

    Args:
        parser: The parser instance.

    Returns:
        The statement node.
    """
    tok = parser.curr_token
    if tok.type == 'IPAKITA':
        return parse_print(parser)
    elif tok.type == 'DAWAT':
        return parse_read(parser)
    elif tok.type == 'MUGNA':
        return parse_declaration(parser)
    elif tok.type == 'KUNG':
        return parse_if(parser)
    elif tok.type == 'ALANG_SA':
        return parse_for(parser)
    elif tok.type in ('PUNDOK', 'LBRACE'):
        return parse_block(parser)
    elif tok.type in ('KUNG_DILI', 'KUNG_WALA'):
        raise parser.error(f"'{tok.lexeme}' without a preceding 'KUNG'")
    return parser.expr()


def parse_declaration(parser: 'Parser') -> VarDecl:
    """
    Parse a ``MUGNA`` variable declaration.

    Syntax:
        MUGNA <type> <identifier> (, <identifier>)* [= <expression>]

    Args:
        parser: The parser instance.

    Returns:
        VarDecl: with the declared type, names and optional shared initializer.
    """
    start_tok = parser.eat('MUGNA')
    type_tok = parser.curr_token
    if type_tok.type not in TYPE_KEYWORDS:
        raise parser.error(
            f"Expected type after 'MUGNA', got {parser.describe(type_tok)}"
        )
    parser.advance()
    names = _parse_names(parser, "Expected variable name")
    initializer = None
    if parser.curr_token.type == 'ASSIGN':
        parser.eat('ASSIGN')
        initializer = parser.expr()
    return VarDecl(
        TYPE_KEYWORDS[type_tok.type], names, initializer, start_tok.line, start_tok.column
    )


def parse_print(parser: 'Parser') -> Print:
    """
    Parse an 'IPAKITA' statement.

    Syntax:
        IPAKITA: <expression>

    Args:
        parser: The parser instance.

    Returns:
        Print
    """
    tok = parser.eat('IPAKITA')
    parser.eat('COLON', "Expected ':' after 'IPAKITA'")
    value = parser.expr()
    return Print(value, tok.line, tok.column)


def parse_read(parser: 'Parser') -> Read:
    """
    Parse a 'DAWAT' statement.

    Syntax:
        DAWAT: <identifier> (, <identifier>)*

    Args:
        parser: The parser instance.

    Returns:
        Read
    """
    tok = parser.eat('DAWAT')
    parser.eat('COLON', "Expected ':' after 'DAWAT'")
    names = _parse_names(parser, "Expected variable name")
    return Read(names, tok.line, tok.column)


def _parse_conditional(parser: 'Parser', tok: Token) -> If:
    """
    Parse ``<condition> <block>`` and any trailing 'KUNG DILI'/'KUNG WALA'.
    """
    condition = parser.expr()
    then_branch = parser.block()
    else_branch = None

    if parser.curr_token.type == 'KUNG_DILI':
        dili_tok = parser.eat('KUNG_DILI')
        if parser.curr_token.type in ('LBRACE', 'PUNDOK'):
            else_branch = parser.block()
        else:
            nested = _parse_conditional(parser, dili_tok)
            else_branch = Block((nested,), dili_tok.line, dili_tok.column)
    elif parser.curr_token.type == 'KUNG_WALA':
        parser.eat('KUNG_WALA')
        else_branch = parser.block()

    return If(condition, then_branch, else_branch, tok.line, tok.column)


def parse_if(parser: 'Parser') -> If:
    """
    Parse a conditional 'KUNG' statement with optional alternatives.

    Syntax:
        KUNG <condition> { <block> }
        KUNG DILI [<condition>] { <block> }
        KUNG WALA { <block> }

    A 'KUNG DILI' followed directly by a block is an unconditional
    alternative; with a condition it chains another test.

    Args:
        parser: The parser instance.

    Returns:
        If
    """
    tok = parser.eat('KUNG')
    return _parse_conditional(parser, tok)


def parse_for(parser: 'Parser') -> For:
    """
    Parse an 'ALANG SA' loop.

    Syntax:
        ALANG SA [(] <init>, <condition>, <increment> [)] { <block> }

    Args:
        parser: The parser instance.

    Returns:
        For
    """
    tok = parser.eat('ALANG_SA')
    parenthesized = parser.curr_token.type == 'LPAREN'
    if parenthesized:
        parser.eat('LPAREN')
    initializer = parser.expr()
    parser.eat('COMMA', "Expected ',' after loop initializer")
    condition = parser.expr()
    parser.eat('COMMA', "Expected ',' after loop condition")
    increment = parser.expr()
    if parenthesized:
        parser.eat('RPAREN', "Expected ')' after loop clauses")
    body = parser.block()
    return For(initializer, condition, increment, body, tok.line, tok.column)
