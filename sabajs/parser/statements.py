"""Statement parsing utilities.

These functions operate on a `sabajs.parser.parser.Parser` instance and
handle source elements, statements, variable declarations and function
declarations. Missing punctuation in a function declaration is the only
structural error the grammar cannot recover from.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING, Optional

from sabajs.exceptions import StructuralParseException
from sabajs.lexer import KEYWORD
from sabajs.nodes import (
    BlockStatement,
    ExpressionStatement,
    FunctionDeclaration,
    Node,
    ReturnStatement,
    VariableDeclaration,
    VariableDeclarator,
)

if TYPE_CHECKING:
    from sabajs.parser import Parser


def parse_source_element(parser: 'Parser') -> Optional[Node]:
    """
    Parse a function declaration or a statement.

    Syntax:
        'function' <function_declaration> | <statement>

    Args:
        parser: The parser instance.

    Returns:
        The parsed node, or None at end of input.
    """
    tok = parser.curr_token
    if tok is None:
        return None
    if tok.is_keyword('function'):
        parser.advance()
        return parser.function_declaration()
    return parser.statement()


def parse_statement(parser: 'Parser') -> Optional[Node]:
    """
    Parse a single statement followed by an optional ';'.

    Syntax:
        'var' <variable_declaration>
        | 'return' <assignment>
        | <assignment>

    Args:
        parser: The parser instance.

    Returns:
        The parsed node, or None at end of input or on a keyword that cannot
        start a statement.
    """
    tok = parser.curr_token
    if tok is None:
        return None

    if tok.type == KEYWORD:
        if tok.value == 'var':
            parser.advance()
            node = parser.variable_declaration()
        elif tok.value == 'return':
            parser.advance()
            node = ReturnStatement(parser.assignment_expression())
        else:
            node = None
    else:
        node = ExpressionStatement(parser.assignment_expression())

    if parser.at_punctuator(';'):
        parser.advance()

    return node


def parse_variable_declaration(parser: 'Parser') -> Node:
    """
    Parse a variable declaration after the 'var' keyword.

    Syntax:
        var <identifier> ( '=' <assignment> )?

    Args:
        parser: The parser instance.

    Returns:
        VariableDeclaration: holding exactly one declarator.
    """
    ident = parser.identifier()
    declarator = VariableDeclarator(ident, parser.initializer())
    return VariableDeclaration((declarator,))


def parse_initializer(parser: 'Parser') -> Optional[Node]:
    """
    Parse a declarator initializer. The token after the identifier is always
    consumed; anything other than '=' means there is no initializer.

    Syntax:
        '=' <assignment>
    """
    tok = parser.advance()
    if tok is not None and tok.is_punctuator('='):
        return parser.assignment_expression()
    return None


def parse_function_declaration(parser: 'Parser') -> Node:
    """
    Parse a function declaration after the 'function' keyword.

    Syntax:
        function <identifier> ( <params> ) { <source_element>* }

    Args:
        parser: The parser instance.

    Returns:
        FunctionDeclaration

    Raises:
        StructuralParseException: If '(' or '{' is missing or the body is
            not closed before the end of input.
    """
    ident = parser.identifier()
    params = parser.parameter_list()
    return FunctionDeclaration(ident, params, parser.function_body())


def parse_parameter_list(parser: 'Parser') -> tuple:
    """
    Parse a parameter list including both parentheses.

    Syntax:
        '(' ( <identifier> ( ',' <identifier> )* )? ')'
    """
    parser.eat('(')
    params = []
    while True:
        tok = parser.curr_token
        if tok is None:
            return tuple(params)
        if tok.is_punctuator(')'):
            parser.advance()
            return tuple(params)
        if tok.is_punctuator(','):
            parser.advance()
            continue
        params.append(parser.identifier())


def parse_function_body(parser: 'Parser') -> Node:
    """
    Parse a block of source elements enclosed in braces.

    Syntax:
        { <source_element>* }

    Returns:
        BlockStatement
    """
    parser.eat('{')
    body = []
    while True:
        tok = parser.curr_token
        if tok is None:
            raise StructuralParseException('}', None, parser.source_file)
        if tok.is_punctuator('}'):
            parser.advance()
            return BlockStatement(tuple(body))
        body.append(parser.source_element())
