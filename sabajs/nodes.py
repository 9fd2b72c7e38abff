"""AST node types.

Nodes are frozen dataclasses, so a parsed tree is immutable and can be shared
freely between a program, its tests and repeated evaluations. Children that
the parser could not build are stored as ``None``; the grammar does not tell
an omitted construct apart from a malformed one. Sequences are tuples so that
equality stays structural all the way down.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from sabajs.operations import Op


@dataclass(frozen=True)
class ExpressionStatement:
    """An expression evaluated for its effect."""

    expression: Optional[Node]


@dataclass(frozen=True)
class AdditiveExpression:
    """``left + right`` or ``left - right``."""

    operator: Op
    left: Optional[Node]
    right: Optional[Node]


@dataclass(frozen=True)
class AssignmentExpression:
    """``left = right``; the value of the expression is the assigned value."""

    operator: Op
    left: Optional[Node]
    right: Optional[Node]


@dataclass(frozen=True)
class MemberExpression:
    """``object.property``."""

    object: Optional[Node]
    property: Optional[Node]


@dataclass(frozen=True)
class NumericLiteral:
    value: int


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class VariableDeclarator:
    """A single ``id = init`` binding inside a ``var`` declaration."""

    id: Optional[Node]
    init: Optional[Node]


@dataclass(frozen=True)
class VariableDeclaration:
    declarations: tuple[Optional[Node], ...]


@dataclass(frozen=True)
class BlockStatement:
    body: tuple[Optional[Node], ...]


@dataclass(frozen=True)
class ReturnStatement:
    argument: Optional[Node]


@dataclass(frozen=True)
class FunctionDeclaration:
    """``function id(params) { body }``."""

    id: Optional[Node]
    params: tuple[Optional[Node], ...]
    body: Optional[Node]


@dataclass(frozen=True)
class CallExpression:
    """``callee(arguments)``; arguments are evaluated left to right."""

    callee: Optional[Node]
    arguments: tuple[Optional[Node], ...]


Node = Union[
    ExpressionStatement,
    AdditiveExpression,
    AssignmentExpression,
    MemberExpression,
    NumericLiteral,
    StringLiteral,
    Identifier,
    VariableDeclarator,
    VariableDeclaration,
    BlockStatement,
    ReturnStatement,
    FunctionDeclaration,
    CallExpression,
]


@dataclass(frozen=True)
class Program:
    """
    The result of a parse: top-level nodes in source order.
    """

    body: tuple[Node, ...] = ()

    def __iter__(self):
        return iter(self.body)

    def __len__(self) -> int:
        return len(self.body)

    def __getitem__(self, index):
        return self.body[index]


def format_node(node: Optional[Node]) -> str:
    """
    Convert an AST node back to a readable string for error messages.

    Args:
        node: An AST node or ``None`` for a hole.

    Returns:
        str: A source-like rendering of the node.
    """
    match node:
        case None:
            return "<missing>"
        case Identifier(name=name):
            return name
        case NumericLiteral(value=value):
            return str(value)
        case StringLiteral(value=value):
            return f'"{value}"'
        case MemberExpression(object=obj, property=prop):
            return f"{format_node(obj)}.{format_node(prop)}"
        case CallExpression(callee=callee, arguments=args):
            return f"{format_node(callee)}({', '.join(format_node(a) for a in args)})"
        case AdditiveExpression(operator=op, left=left, right=right):
            return f"({format_node(left)} {op} {format_node(right)})"
        case AssignmentExpression(left=left, right=right):
            return f"{format_node(left)} = {format_node(right)}"
        case FunctionDeclaration(id=ident):
            return f"function {format_node(ident)}"
        case _:
            return f"<{type(node).__name__}>"
