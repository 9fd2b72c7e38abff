"""Lexer for the page scripting language.

The lexer performs a single pass over the script source using a combined
regular expression of named groups. Matching is driven by ``re.finditer`` so
tokens are produced lazily, one per ``next()`` call, and every new iteration
starts again from the beginning of the source.

Tokens cover punctuators (``+ - ; = ( ) { } , .``), unsigned decimal numbers,
identifiers, the keywords ``var``, ``return`` and ``function``, and single or
double quoted strings. Whitespace is skipped. Any other character is fatal.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from typing import Iterator

from sabajs.exceptions import UnexpectedCharacterException, UnterminatedStringException
from sabajs.values import U64_MODULUS

PUNCTUATOR = 'PUNCTUATOR'
NUMBER = 'NUMBER'
IDENTIFIER = 'IDENTIFIER'
STRING = 'STRING'
KEYWORD = 'KEYWORD'

KEYWORDS = frozenset({'var', 'return', 'function'})


class Token:
    """
    Represents a lexical token with a type and value.

    Equality ignores the line number so that token streams can be compared
    against expectations built by hand.
    """
    def __init__(self, type_, value, line=1):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (Any): The token value.
            line (int): The source line the token starts on.
        """
        self.type = type_
        self.value = value
        self.line = line

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    def is_punctuator(self, char: str) -> bool:
        """
        Return True if this token is the punctuator ``char``.
        """
        return self.type == PUNCTUATOR and self.value == char

    def is_keyword(self, word: str) -> bool:
        """
        Return True if this token is the keyword ``word``.
        """
        return self.type == KEYWORD and self.value == word

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line})"


token_specification: list[tuple[str, str]] = [
    # Literals
    ('NUMBER',       r'[0-9]+'),
    ('STRING',       r'"[^"\n]*"|\'[^\'\n]*\''),
    ('UNTERMINATED', r'["\']'),

    # Identifiers and keywords
    ('ID',           r'[A-Za-z_][A-Za-z0-9_]*'),

    # Punctuators
    ('PUNCT',        r'[+\-;=(){},.]'),

    # Miscellaneous
    ('NEWLINE',      r'\n'),
    ('SKIP',         r'[ \t\r]+'),
    ('MISMATCH',     r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification)
)


def fold_digits(digits: str) -> int:
    """
    Fold a run of decimal digits into an unsigned 64-bit value, wrapping on
    overflow. Literals of any length are accepted.
    """
    value = 0
    for digit in digits:
        value = (value * 10 + ord(digit) - ord('0')) % U64_MODULUS
    return value


class Lexer:
    """
    Lazy token stream over a script source.

    Iterating a ``Lexer`` yields :class:`Token` instances until the end of
    the input. A fresh iteration always starts from the first character.
    """

    def __init__(self, source: str, file: str = "<script>"):
        self.source = source
        self.file = file

    def __iter__(self) -> Iterator[Token]:
        """
        Yield the tokens of the source in order.

        Raises:
            UnexpectedCharacterException: If no rule matches a character.
            UnterminatedStringException: If a string has no closing quote.
        """
        line_num = 1

        for match_obj in TOKEN_REGEX.finditer(self.source):
            kind = match_obj.lastgroup
            value = match_obj.group()

            if kind == 'NEWLINE':
                line_num += 1
                continue
            if kind == 'SKIP':
                continue
            if kind == 'MISMATCH':
                raise UnexpectedCharacterException(value, line_num, self.file)
            if kind == 'UNTERMINATED':
                raise UnterminatedStringException(line_num, self.file)

            if kind == 'NUMBER':
                yield Token(NUMBER, fold_digits(value), line_num)
            elif kind == 'STRING':
                yield Token(STRING, value[1:-1], line_num)
            elif kind == 'ID':
                type_ = KEYWORD if value in KEYWORDS else IDENTIFIER
                yield Token(type_, value, line_num)
            else:
                yield Token(PUNCTUATOR, value, line_num)


def tokenize(code: str, file: str = "<script>") -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): Name used in error messages.

    Returns:
        list[Token]: A list of Token instances.

    Raises:
        LexError: If the source contains text no rule accepts.
    """
    return list(Lexer(code, file))
