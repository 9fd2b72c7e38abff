"""Errors.

Lexing and structural parse failures abort the parse. Runtime failures abort
the evaluation pass. Every failure a script can cause derives from
:class:`ScriptException` so the embedding page can recover from all of them
in one place. :class:`ReturnControlFlow` is a control-flow signal and is
deliberately outside that hierarchy.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def _located(message, line=None, file=None):
    if line is not None:
        message += f" on line {line}"
    if file is not None:
        message += f" in {file}"
    return message


class ScriptException(Exception):
    """
    Base class for every error raised while running a script.
    """


class LexError(ScriptException):
    """
    Error raised while turning source text into tokens.
    """


class UnexpectedCharacterException(LexError):
    """
    Error for characters no lexical rule accepts.
    """
    def __init__(self, char, line=None, file=None):
        self.char = char
        self.line = line
        super().__init__(_located(f"Unexpected character {char!r}", line, file))


class UnterminatedStringException(LexError):
    """
    Error for string literals without a closing quote.
    """
    def __init__(self, line=None, file=None):
        self.line = line
        super().__init__(_located("Unterminated string literal", line, file))


class ParseError(ScriptException):
    """
    Error raised when the token stream cannot form a program.
    """


class StructuralParseException(ParseError):
    """
    Error for missing punctuation the grammar cannot recover from.
    """
    def __init__(self, expected, found, file=None):
        self.expected = expected
        self.found = found
        found_text = "end of input" if found is None else f"{found.value!r}"
        line = None if found is None else found.line
        super().__init__(
            _located(f"Expected {expected!r} but got {found_text}", line, file)
        )


class NestingDepthException(ParseError):
    """
    Error for expressions or function bodies nested too deeply to parse.
    """
    def __init__(self, limit, found, file=None):
        self.limit = limit
        self.found = found
        line = None if found is None else found.line
        super().__init__(
            _located(f"Nesting exceeds the limit of {limit} levels", line, file)
        )


class ScriptRuntimeError(ScriptException):
    """
    Error raised while evaluating the AST.
    """


class UndefinedVariableException(ScriptRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, file=None):
        self.varname = varname
        super().__init__(_located(f"Undefined variable '{varname}'", file=file))


class UndefinedFunctionException(ScriptRuntimeError):
    """
    Error for calls to functions that were never declared.
    """
    def __init__(self, name, file=None):
        self.name = name
        super().__init__(_located(f"Undefined function '{name}'", file=file))


class NotCallableException(ScriptRuntimeError):
    """
    Error for calling a value that is not a function.
    """
    def __init__(self, description, file=None):
        self.description = description
        super().__init__(
            _located(f"Attempted to call non-function '{description}'", file=file)
        )


class OperandTypeException(ScriptRuntimeError):
    """
    Error for operators applied to operands of the wrong type.
    """
    def __init__(self, op, left, right, file=None):
        self.op = op
        self.left = left
        self.right = right
        super().__init__(
            _located(
                f"Unsupported operand types for '{op}': "
                f"{type(left).__name__} and {type(right).__name__}",
                file=file,
            )
        )


class UnknownOpException(ScriptRuntimeError):
    """
    Error for unknown operations.
    """
    def __init__(self, op, file=None):
        self.op = op
        super().__init__(_located(f"Unknown operation '{op}'", file=file))


class InvalidAssignmentException(ScriptRuntimeError):
    """
    Error for assignments whose left side cannot be bound.
    """
    def __init__(self, description, file=None):
        self.description = description
        super().__init__(
            _located(f"Invalid assignment target '{description}'", file=file)
        )


class UndefinedPropertyException(ScriptRuntimeError):
    """
    Error for property lookups a host object does not provide.
    """
    def __init__(self, name, owner, file=None):
        self.name = name
        self.owner = owner
        self.file = file
        super().__init__(_located(f"'{owner}' has no property '{name}'", file=file))


class ReadOnlyPropertyException(ScriptRuntimeError):
    """
    Error for writes to host properties that cannot be assigned.
    """
    def __init__(self, name, owner, file=None):
        self.name = name
        self.owner = owner
        self.file = file
        super().__init__(
            _located(f"Property '{name}' of '{owner}' is read-only", file=file)
        )


class StepLimitException(ScriptRuntimeError):
    """
    Error raised once a script exceeds its evaluation budget.
    """
    def __init__(self, limit, file=None):
        self.limit = limit
        super().__init__(
            _located(f"Script exceeded the limit of {limit} evaluation steps", file=file)
        )


class CallDepthException(ScriptRuntimeError):
    """
    Error raised when script function calls nest too deeply.
    """
    def __init__(self, limit, name, file=None):
        self.limit = limit
        self.name = name
        super().__init__(
            _located(
                f"Maximum call depth of {limit} exceeded calling '{name}'", file=file
            )
        )


class EvaluationDepthException(ScriptRuntimeError):
    """
    Error raised when evaluation nests deeper than the interpreter allows.
    """
    def __init__(self, limit, file=None):
        self.limit = limit
        super().__init__(
            _located(f"Evaluation nested deeper than {limit} levels", file=file)
        )


class HostCallException(ScriptRuntimeError):
    """
    Error for host callables that fail when called from a script.
    """
    def __init__(self, description, error, file=None):
        self.description = description
        self.error = error
        super().__init__(
            _located(
                f"Call to '{description}' failed: {type(error).__name__}: {error}",
                file=file,
            )
        )


class ReturnControlFlow(Exception):
    """
    Control flow handling for return statements.
    """
    def __init__(self, value):
        super().__init__()
        self.value = value
