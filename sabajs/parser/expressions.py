"""
Expression parsing utilities.

These functions operate on a `sabajs.parser.parser.Parser` instance and
implement the recursive descent logic for expressions. A token that cannot
start an expression is consumed and produces ``None`` in its place, so one
malformed operand leaves a hole in the tree instead of failing the parse.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING, Optional

from sabajs.lexer import IDENTIFIER, NUMBER, PUNCTUATOR, STRING
from sabajs.nodes import (
    AdditiveExpression,
    AssignmentExpression,
    CallExpression,
    Identifier,
    MemberExpression,
    Node,
    NumericLiteral,
    StringLiteral,
)
from sabajs.operations import ADDITIVE_OPS, Op

if TYPE_CHECKING:
    from sabajs.parser import Parser


# ---- Lowest precedence ----

def parse_assignment_expression(parser: 'Parser') -> Optional[Node]:
    """
    Parse an assignment expression.

    Syntax:
        <additive> ( '=' <assignment> )?
    """
    expr = parser.additive_expression()
    if parser.at_punctuator('='):
        parser.advance()
        return AssignmentExpression(Op.ASSIGN, expr, parser.assignment_expression())
    return expr


def parse_additive_expression(parser: 'Parser') -> Optional[Node]:
    """
    Parse an addition or subtraction expression.

    Syntax:
        <lhs> ( ('+' | '-') <assignment> )?

    The right operand is parsed as a full assignment expression, so
    ``1 - 2 - 3`` groups as ``1 - (2 - 3)``.
    """
    left = parser.left_hand_side_expression()
    tok = parser.curr_token
    if tok is not None and tok.type == PUNCTUATOR and tok.value in ADDITIVE_OPS:
        parser.advance()
        return AdditiveExpression(
            ADDITIVE_OPS[tok.value], left, parser.assignment_expression()
        )
    return left


def parse_left_hand_side_expression(parser: 'Parser') -> Optional[Node]:
    """
    Parse a member expression, wrapping it in a call when '(' follows.

    Syntax:
        <member> ( '(' <arguments> )?
    """
    expr = parser.member_expression()
    if parser.at_punctuator('('):
        parser.advance()
        return CallExpression(expr, parser.arguments())
    return expr


def parse_arguments(parser: 'Parser') -> tuple:
    """
    Parse call arguments up to and including the closing ')'.

    Syntax:
        ( <assignment> ( ',' <assignment> )* )? ')'

    Returns:
        tuple: Argument nodes, with None for holes. End of input ends the
        list without error.
    """
    arguments = []
    while True:
        tok = parser.curr_token
        if tok is None:
            return tuple(arguments)
        if tok.is_punctuator(')'):
            parser.advance()
            return tuple(arguments)
        if tok.is_punctuator(','):
            parser.advance()
            continue
        arguments.append(parser.assignment_expression())


def parse_member_expression(parser: 'Parser') -> Optional[Node]:
    """
    Parse a primary expression with an optional single property access.

    Syntax:
        <primary> ( '.' <identifier> )?
    """
    expr = parser.primary_expression()
    if parser.at_punctuator('.'):
        parser.advance()
        return MemberExpression(expr, parser.identifier())
    return expr


# ---- Highest precedence ----

def parse_primary_expression(parser: 'Parser') -> Optional[Node]:
    """Parse an identifier, string literal or number. Always consumes a token."""
    tok = parser.advance()
    if tok is None:
        return None
    if tok.type == IDENTIFIER:
        return Identifier(tok.value)
    if tok.type == STRING:
        return StringLiteral(tok.value)
    if tok.type == NUMBER:
        return NumericLiteral(tok.value)
    return None


def parse_identifier(parser: 'Parser') -> Optional[Node]:
    """Parse one identifier. Always consumes a token."""
    tok = parser.advance()
    if tok is not None and tok.type == IDENTIFIER:
        return Identifier(tok.value)
    return None
