"""Lexer for Bisaya++.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields an immutable
:class:`Token` carrying its type, source text, decoded literal value and the
line/column where it starts.

Tokens cover literals (integers, decimals, characters, strings, booleans),
Cebuano keywords (``SUGOD``, ``MUGNA``, ``IPAKITA`` …), operators and
delimiters. Comments beginning with ``--`` run to the end of the line and are
skipped, as is whitespace; newlines only advance the line counter. Keywords
spelled as two words (``KUNG WALA``, ``KUNG DILI``, ``ALANG SA``) are matched
as a pair before single words so they produce one token.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import re
from dataclasses import dataclass
from typing import Any

from bisaya.exceptions import LexicalError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Attributes:
        type (str): The token type, e.g. ``'ID'`` or ``'MUGNA'``.
        lexeme (str): The exact source text of the token.
        value (Any): The decoded literal for literal tokens, otherwise None.
        line (int): 1-based line of the first character.
        column (int): 1-based column of the first character.
    """
    type: str
    lexeme: str
    value: Any
    line: int
    column: int

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.lexeme!r}, line={self.line}, col={self.column})"


KEYWORDS: dict[str, str] = {
    'SUGOD': 'SUGOD',
    'KATAPUSAN': 'KATAPUSAN',
    'MUGNA': 'MUGNA',
    'IPAKITA': 'IPAKITA',
    'DAWAT': 'DAWAT',
    'UG': 'UG',
    'O': 'O',
    'DILI': 'DILI',
    'KUNG': 'KUNG',
    'KUNG WALA': 'KUNG_WALA',
    'KUNG DILI': 'KUNG_DILI',
    'PUNDOK': 'PUNDOK',
    'ALANG SA': 'ALANG_SA',
    'NUMERO': 'NUMERO',
    'LETRA': 'LETRA',
    'TINUOD': 'TINUOD',
    'TIPIK': 'TIPIK',
    'OO': 'BOOLEAN',
}

# String literals with these exact contents are boolean literals.
BOOLEAN_WORDS = {'OO': True, 'DILI': False}

# Human readable spelling of each token type, used in parser messages.
TOKEN_SPELLINGS: dict[str, str] = {
    **{kind: word for word, kind in KEYWORDS.items() if kind != 'BOOLEAN'},
    'ASSIGN': '=',
    'EQ': '==',
    'NE': '<>',
    'GE': '>=',
    'LE': '<=',
    'GT': '>',
    'LT': '<',
    'PLUS': '+',
    'MINUS': '-',
    'MUL': '*',
    'DIV': '/',
    'MOD': '%',
    'CONCAT': '&',
    'COMMA': ',',
    'COLON': ':',
    'LPAREN': '(',
    'RPAREN': ')',
    'LBRACE': '{',
    'RBRACE': '}',
    'ID': 'identifier',
    'EOF': 'end of input',
}

TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Comments
    ('COMMENT',   r'--[^\n]*'),

    # Literals
    ('DECIMAL',   r'\d+\.\d+'),
    ('INTEGER',   r'\d+'),
    ('STRING',    r'"(?:[^"\\]|\\[\s\S])*"'),
    ('CHAR',      r"'[^\n]'"),
    ('ESCAPE',    r'\[[^\n]\]'),
    ('DOLLAR',    r'\$'),

    # Keywords and identifiers
    ('PAIR',      r'\b(?:KUNG[ \t]+WALA|KUNG[ \t]+DILI|ALANG[ \t]+SA)\b'),
    ('WORD',      r'[A-Za-z_][A-Za-z0-9_]*'),

    # Comparison operators
    ('NE',        r'<>|!='),
    ('GE',        r'>='),
    ('LE',        r'<='),
    ('EQ',        r'=='),
    ('GT',        r'>'),
    ('LT',        r'<'),

    # Assignment
    ('ASSIGN',    r'='),

    # Arithmetic operators
    ('PLUS',      r'\+'),
    ('MINUS',     r'-'),
    ('MUL',       r'\*'),
    ('DIV',       r'/'),
    ('MOD',       r'%'),
    ('CONCAT',    r'&'),

    # Delimiters
    ('COMMA',     r','),
    ('COLON',     r':'),
    ('LPAREN',    r'\('),
    ('RPAREN',    r'\)'),
    ('LBRACE',    r'\{'),
    ('RBRACE',    r'\}'),

    # Miscellaneous
    ('NEWLINE',   r'\n'),
    ('SKIP',      r'[ \t\r]+'),
    ('MISMATCH',  r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


def _unescape(text: str) -> str:
    """
    Resolve ``\\"`` and ``\\\\`` inside a string literal body.
    """
    return re.sub(r'\\(["\\])', r'\1', text)


def _mismatch_error(code: str, pos: int, line: int, column: int) -> LexicalError:
    """
    Build the error for a character no token pattern accepts.
    """
    char = code[pos]
    if char == '"':
        return LexicalError("Unterminated string", line, column)
    if char == "'":
        rest = code[pos + 1:].split('\n', 1)[0]
        if "'" not in rest:
            return LexicalError("Unterminated character", line, column)
        return LexicalError("Invalid character literal", line, column)
    return LexicalError(f"Unexpected character '{char}'", line, column)


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: Token instances, always terminated by an ``EOF`` token.

    Raises:
        LexicalError: If a character cannot start any token or a literal is
            left unterminated.
    """
    tokens: list[Token] = []
    line_num = 1
    line_start = 0

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        text = match_obj.group()
        start = match_obj.start()
        column = start - line_start + 1

        if kind == 'NEWLINE':
            line_num += 1
            line_start = match_obj.end()
            continue
        if kind in ('SKIP', 'COMMENT'):
            continue
        if kind == 'MISMATCH':
            raise _mismatch_error(code, start, line_num, column)

        if kind == 'INTEGER':
            tokens.append(Token('INTEGER', text, int(text), line_num, column))
        elif kind == 'DECIMAL':
            tokens.append(Token('DECIMAL', text, float(text), line_num, column))
        elif kind == 'CHAR':
            tokens.append(Token('CHAR', text, text[1], line_num, column))
        elif kind == 'STRING':
            value = _unescape(text[1:-1])
            if value in BOOLEAN_WORDS:
                tokens.append(Token('BOOLEAN', text, BOOLEAN_WORDS[value], line_num, column))
            else:
                tokens.append(Token('STRING', text, value, line_num, column))
            newlines = text.count('\n')
            if newlines:
                line_num += newlines
                line_start = start + text.rindex('\n') + 1
        elif kind == 'ESCAPE':
            tokens.append(Token('STRING', text, text[1], line_num, column))
        elif kind == 'DOLLAR':
            tokens.append(Token('STRING', text, '$', line_num, column))
        elif kind in ('PAIR', 'WORD'):
            word = ' '.join(text.split())
            keyword = KEYWORDS.get(word)
            if keyword == 'BOOLEAN':
                tokens.append(Token('BOOLEAN', text, True, line_num, column))
            elif keyword is not None:
                tokens.append(Token(keyword, text, None, line_num, column))
            else:
                tokens.append(Token('ID', text, None, line_num, column))
        else:
            tokens.append(Token(kind, text, None, line_num, column))

    tokens.append(Token('EOF', '', None, line_num, len(code) - line_start + 1))
    logger.debug("Scanned %d tokens over %d lines", len(tokens), line_num)
    return tokens
