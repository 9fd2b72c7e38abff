"""Interpreter.

This is a tree-walk interpreter for evaluating the AST produced by the parser.
It supports numeric and string literals, variables, addition and subtraction,
assignment, function declarations and calls, and property access on host
objects.

1. Execution Model
The interpreter evaluates the AST top-down and recursively. `execute()` runs
every top-level node of a program in order, and `eval_node()` reduces a single
node to a runtime value. Statements and holes left by the parser evaluate to
`None`, meaning "no value".

2. Environment
The interpreter owns a global `Environment` frame. Each function call pushes
a fresh local frame whose parent is the global frame; names missing locally
resolve globally. Function declarations are hoisted: every declaration
directly inside a program or function body is registered before that body
runs, so a function can be called above its declaration.

3. Expression Evaluation
Operands are evaluated left to right. Numbers are unsigned 64-bit integers
and wrap on overflow. `+` also concatenates two strings; any other mix of
operand types is a runtime error.

4. Control Flow
`return` raises `ReturnControlFlow`, which unwinds every enclosing block up
to the function call that is running. A `return` at the top level ends the
program.

5. Host Objects
Values placed in the global frame at construction time are how the embedding
page exposes its objects. Member expressions read and write their properties
and calls invoke Python callables found there.

6. Error Handling
Runtime errors, such as undefined variables, calls to undeclared functions or
operator type mismatches, are raised as `ScriptRuntimeError` subclasses and
abort the evaluation pass. Side effects that already happened are kept.
Exceptions raised by host callables are wrapped in `HostCallException`, and
trees nested deeper than `MAX_EVAL_DEPTH` raise `EvaluationDepthException`
instead of exhausting the Python stack.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import Any, Iterable, Optional

from sabajs.config import EngineConfig
from sabajs.environment import Environment
from sabajs.exceptions import (
    CallDepthException,
    EvaluationDepthException,
    HostCallException,
    InvalidAssignmentException,
    NotCallableException,
    OperandTypeException,
    ReadOnlyPropertyException,
    ReturnControlFlow,
    ScriptException,
    StepLimitException,
    UndefinedFunctionException,
    UndefinedPropertyException,
    UndefinedVariableException,
    UnknownOpException,
)
from sabajs.host import HostObject
from sabajs.nodes import (
    AdditiveExpression,
    AssignmentExpression,
    BlockStatement,
    CallExpression,
    ExpressionStatement,
    FunctionDeclaration,
    Identifier,
    MemberExpression,
    Node,
    NumericLiteral,
    ReturnStatement,
    StringLiteral,
    VariableDeclaration,
    VariableDeclarator,
    format_node,
)
from sabajs.operations import Op
from sabajs.values import UNDEFINED, U64_MODULUS, FunctionValue, format_value

logger = logging.getLogger(__name__)

# Bounds Python recursion while walking deeply nested trees
MAX_EVAL_DEPTH = 256


def _is_number(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Interpreter:
    """Tree-walk interpreter for page scripts."""

    def __init__(
        self,
        file: str = "<script>",
        host_globals: Optional[dict[str, Any]] = None,
        config: Optional[EngineConfig] = None,
    ):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Script name used in error messages.
            host_globals (dict): Host objects and callables to expose as
                global variables.
            config (EngineConfig): Step and call depth limits.
        """
        self.file = file
        self.config = config or EngineConfig()
        self.global_env = Environment()
        self.env = self.global_env
        self.steps = 0
        self.call_depth = 0
        self.depth = 0
        for name, value in (host_globals or {}).items():
            self.global_env.declare(name, value)

    @property
    def vars(self) -> dict:
        """
        Variables of the active frame.
        """
        return self.env.vars

    def lookup(self, name: str) -> Any:
        """
        Resolve ``name`` in the active frame, falling back to the global one.

        Raises:
            UndefinedVariableException: If no frame binds the name.
        """
        frame = self.env.find(name)
        if frame is None:
            raise UndefinedVariableException(name, self.file)
        return frame.get(name)

    def execute(self, program: Iterable[Node]) -> None:
        """
        Evaluate every top-level node of a program in order.

        Parameters:
            program (Program): The parsed program.

        Raises:
            ScriptRuntimeError: On the first runtime error.
        """
        body = tuple(program)
        self.hoist(body)
        try:
            for node in body:
                self.eval_node(node)
        except ReturnControlFlow:
            logger.debug("Top-level return in %s ended the script", self.file)

    def hoist(self, body: Iterable[Optional[Node]]) -> None:
        """
        Register the function declarations found directly in ``body``.
        """
        for node in body:
            if isinstance(node, FunctionDeclaration):
                self.declare_function(node)

    def declare_function(self, node: FunctionDeclaration) -> Optional[FunctionValue]:
        """
        Bind a function declaration in the active frame.
        """
        if not isinstance(node.id, Identifier):
            return None
        params = tuple(p.name if isinstance(p, Identifier) else None for p in node.params)
        func = FunctionValue(node.id.name, params, node.body)
        self.env.declare_function(func)
        logger.debug("Declared function %s(%s)", func.name, ", ".join(str(p) for p in params))
        return func

    def _count_step(self) -> None:
        self.steps += 1
        limit = self.config.max_steps
        if limit is not None and self.steps > limit:
            raise StepLimitException(limit, self.file)

    def eval_node(self, node: Optional[Node]) -> Any:
        """
        Recursively evaluate a node and return its value.

        Parameters:
            node: An AST node, or None for a hole left by the parser.

        Returns:
            The runtime value, or None when the node produces no value.

        Raises:
            ReturnControlFlow: When a return statement runs.
            ScriptRuntimeError: On invalid references or operands.
        """
        if node is None:
            return None
        self._count_step()
        if self.depth >= MAX_EVAL_DEPTH:
            raise EvaluationDepthException(MAX_EVAL_DEPTH, self.file)

        self.depth += 1
        try:
            match node:
                # Literals
                case NumericLiteral(value=value):
                    return value % U64_MODULUS
                case StringLiteral(value=value):
                    return value

                # Variables
                case Identifier(name=name):
                    return self.lookup(name)

                case ExpressionStatement(expression=expr):
                    return self.eval_node(expr)

                case AdditiveExpression(operator=op, left=left, right=right):
                    return self.eval_additive(op, left, right)

                case AssignmentExpression(left=left, right=right):
                    return self.eval_assignment(left, right)

                case MemberExpression(object=obj_node, property=prop):
                    target = self.eval_node(obj_node)
                    if target is None or not isinstance(prop, Identifier):
                        return None
                    return self.get_property(target, prop.name)

                case VariableDeclaration(declarations=declarations):
                    for declarator in declarations:
                        self.eval_node(declarator)
                    return None

                case VariableDeclarator(id=ident, init=init):
                    value = self.eval_node(init)
                    if isinstance(ident, Identifier):
                        self.env.declare(ident.name, UNDEFINED if value is None else value)
                    return None

                case BlockStatement(body=body):
                    self.hoist(body)
                    for stmt in body:
                        self.eval_node(stmt)
                    return None

                case ReturnStatement(argument=argument):
                    value = self.eval_node(argument)
                    raise ReturnControlFlow(UNDEFINED if value is None else value)

                case FunctionDeclaration(id=ident):
                    # Normally hoisted already; register only if evaluated directly.
                    if isinstance(ident, Identifier) and ident.name not in self.env.functions:
                        self.declare_function(node)
                    return None

                case CallExpression(callee=callee, arguments=arguments):
                    return self.eval_call(callee, arguments)
        finally:
            self.depth -= 1

        raise UnknownOpException(type(node).__name__, self.file)

    def eval_additive(self, op: Op, left: Optional[Node], right: Optional[Node]) -> Any:
        """
        Evaluate ``left + right`` or ``left - right``.

        Both operands are always evaluated, left first, so side effects on
        the right still happen when the left is a hole.

        Raises:
            OperandTypeException: For operands other than two numbers, or
                two strings under ``+``.
        """
        lhs = self.eval_node(left)
        rhs = self.eval_node(right)
        if lhs is None or rhs is None:
            return None

        match op:
            case Op.ADD:
                if _is_number(lhs) and _is_number(rhs):
                    return (lhs + rhs) % U64_MODULUS
                if isinstance(lhs, str) and isinstance(rhs, str):
                    return lhs + rhs
            case Op.SUB:
                if _is_number(lhs) and _is_number(rhs):
                    return (lhs - rhs) % U64_MODULUS
            case _:
                raise UnknownOpException(op, self.file)
        raise OperandTypeException(str(op), lhs, rhs, self.file)

    def eval_assignment(self, left: Optional[Node], right: Optional[Node]) -> Any:
        """
        Evaluate ``left = right`` and return the assigned value.

        Raises:
            InvalidAssignmentException: If the left side is not an identifier
                or member expression.
        """
        if isinstance(left, MemberExpression):
            target = self.eval_node(left.object)
            value = self.eval_node(right)
            if target is None or value is None or not isinstance(left.property, Identifier):
                return None
            self.set_property(target, left.property.name, value)
            return value

        value = self.eval_node(right)
        if value is None or left is None:
            return None
        if not isinstance(left, Identifier):
            raise InvalidAssignmentException(format_node(left), self.file)
        self.env.assign(left.name, value)
        return value

    def get_property(self, target: Any, name: str) -> Any:
        """
        Read a named property from a host object.
        """
        if not isinstance(target, HostObject):
            raise UndefinedPropertyException(name, format_value(target), self.file)
        try:
            value = target.get_property(name)
        except UndefinedPropertyException as e:
            if e.file is not None:
                raise
            raise UndefinedPropertyException(e.name, e.owner, self.file) from e
        return UNDEFINED if value is None else value

    def set_property(self, target: Any, name: str, value: Any) -> None:
        """
        Write a named property on a host object.
        """
        if not isinstance(target, HostObject):
            raise InvalidAssignmentException(f"{format_value(target)}.{name}", self.file)
        try:
            target.set_property(name, value)
        except ReadOnlyPropertyException as e:
            if e.file is not None:
                raise
            raise ReadOnlyPropertyException(e.name, e.owner, self.file) from e

    def resolve_callee(self, callee: Node) -> Any:
        """
        Evaluate the callee of a call expression.

        Raises:
            UndefinedFunctionException: If an identifier callee is unbound.
        """
        if isinstance(callee, Identifier):
            frame = self.env.find(callee.name)
            if frame is None:
                raise UndefinedFunctionException(callee.name, self.file)
            return frame.get(callee.name)
        return self.eval_node(callee)

    def eval_call(self, callee: Optional[Node], arguments: tuple) -> Any:
        """
        Evaluate a call expression.

        Arguments are evaluated left to right in the caller's frame. Script
        functions run in a fresh frame; host callables are invoked directly.

        Raises:
            NotCallableException: If the callee is not a function.
            HostCallException: If a host callable raises.
        """
        if callee is None:
            return None
        func = self.resolve_callee(callee)
        if func is None:
            return None

        args = []
        for arg in arguments:
            value = self.eval_node(arg)
            args.append(UNDEFINED if value is None else value)

        if isinstance(func, FunctionValue):
            return self.call_function(func, args)
        if callable(func):
            try:
                result = func(*args)
            except ScriptException:
                raise
            except Exception as e:
                raise HostCallException(format_node(callee), e, self.file) from e
            return UNDEFINED if result is None else result
        raise NotCallableException(format_node(callee), self.file)

    def call_function(self, func: FunctionValue, args: list) -> Any:
        """
        Run a script function with positional arguments.

        Extra arguments are ignored and missing ones are ``undefined``.

        Returns:
            The returned value, or ``undefined`` if the body finishes
            without a return statement.
        """
        if self.call_depth >= self.config.max_call_depth:
            raise CallDepthException(self.config.max_call_depth, func.name, self.file)

        frame = Environment(parent=self.global_env)
        for index, param in enumerate(func.params):
            if param is None:
                continue
            frame.declare(param, args[index] if index < len(args) else UNDEFINED)

        logger.debug("Calling %s with %d argument(s)", func.name, len(args))
        saved_env = self.env
        self.env = frame
        self.call_depth += 1
        try:
            self.eval_node(func.body)
            result = UNDEFINED
        except ReturnControlFlow as ret:
            result = ret.value
        finally:
            self.env = saved_env
            self.call_depth -= 1

        return result
