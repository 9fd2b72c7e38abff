"""
Main parser entry point.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process over a token cursor with exactly one token of
lookahead. The actual parsing routines are split across
`sabajs.parser.expressions` and `sabajs.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Iterable, Optional

from sabajs.exceptions import NestingDepthException, StructuralParseException
from sabajs.lexer import Token
from sabajs.nodes import Node, Program

from . import expressions as _expr
from . import statements as _stmt

# Bounds recursion on deeply nested input so it fails as a parse error
MAX_NESTING_DEPTH = 64


class Parser:
    """Recursive descent parser producing a :class:`Program`."""

    def __init__(self, tokens: Iterable[Token], file: str = "<script>"):
        """
        Initialize the parser with a token stream.

        Parameters:
            tokens (Iterable[Token]): Tokens to parse, typically a ``Lexer``.
                The stream is consumed lazily.
            file (str): The name of the script, used in error messages.
        """
        self.tokens = iter(tokens)
        self.source_file = file
        self.curr_token: Optional[Token] = next(self.tokens, None)
        self.depth = 0

    def advance(self) -> Optional[Token]:
        """
        Consume and return the current token, or None at end of input.
        """
        tok = self.curr_token
        if tok is not None:
            self.curr_token = next(self.tokens, None)
        return tok

    def at_punctuator(self, char: str) -> bool:
        """
        Return True if the lookahead token is the punctuator ``char``.
        """
        return self.curr_token is not None and self.curr_token.is_punctuator(char)

    def eat(self, char: str) -> Token:
        """
        Consume the current token if it is the expected punctuator.

        Parameters:
            char (str): The expected punctuator.

        Raises:
            StructuralParseException: If the token does not match.
        """
        tok = self.advance()
        if tok is None or not tok.is_punctuator(char):
            raise StructuralParseException(char, tok, self.source_file)
        return tok

    def nested(self, parse_fn):
        """
        Run a recursive parsing routine one nesting level deeper.

        Raises:
            NestingDepthException: If the input nests past MAX_NESTING_DEPTH.
        """
        if self.depth >= MAX_NESTING_DEPTH:
            raise NestingDepthException(MAX_NESTING_DEPTH, self.curr_token, self.source_file)
        self.depth += 1
        try:
            return parse_fn(self)
        finally:
            self.depth -= 1


    # Expression wrappers
    def assignment_expression(self) -> Optional[Node]:
        """
        Parse a right-associative assignment expression.
        """
        return self.nested(_expr.parse_assignment_expression)

    def additive_expression(self) -> Optional[Node]:
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_additive_expression(self)

    def left_hand_side_expression(self) -> Optional[Node]:
        """
        Parse a member expression with an optional call suffix.
        """
        return _expr.parse_left_hand_side_expression(self)

    def arguments(self) -> tuple:
        """
        Parse call arguments after the opening parenthesis.
        """
        return _expr.parse_arguments(self)

    def member_expression(self) -> Optional[Node]:
        """
        Parse a primary expression with an optional property access.
        """
        return _expr.parse_member_expression(self)

    def primary_expression(self) -> Optional[Node]:
        """
        Parse an identifier, string or number.
        """
        return _expr.parse_primary_expression(self)

    def identifier(self) -> Optional[Node]:
        """
        Parse a single identifier.
        """
        return _expr.parse_identifier(self)


    # Statement wrappers
    def source_element(self) -> Optional[Node]:
        """
        Parse a function declaration or a statement.
        """
        return _stmt.parse_source_element(self)

    def statement(self) -> Optional[Node]:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def variable_declaration(self) -> Optional[Node]:
        """
        Parse the remainder of a 'var' declaration.
        """
        return _stmt.parse_variable_declaration(self)

    def initializer(self) -> Optional[Node]:
        """
        Parse the '= value' part of a declarator.
        """
        return _stmt.parse_initializer(self)

    def function_declaration(self) -> Optional[Node]:
        """
        Parse the remainder of a function declaration.
        """
        return _stmt.parse_function_declaration(self)

    def parameter_list(self) -> tuple:
        """
        Parse a parenthesized parameter list.
        """
        return _stmt.parse_parameter_list(self)

    def function_body(self) -> Optional[Node]:
        """
        Parse a braced function body.
        """
        return self.nested(_stmt.parse_function_body)


    def parse(self) -> Program:
        """
        Parse the full input into a program.

        Parsing stops at the first source element that yields nothing, which
        at the top level only happens at the end of the input.
        """
        body = []
        while True:
            node = self.source_element()
            if node is None:
                return Program(tuple(body))
            body.append(node)
