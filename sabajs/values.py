"""Runtime values.

Numbers are Python ``int`` kept in the unsigned 64-bit range and strings are
Python ``str``. Functions declared by a script are :class:`FunctionValue`
instances, and the absence of a value is the :data:`UNDEFINED` singleton.
Values handed out by host objects pass through unchanged.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

U64_MODULUS = 2 ** 64


class _Undefined:
    """Type of the ``undefined`` value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


class FunctionValue:
    """Runtime representation of a declared function."""

    def __init__(self, name, params, body):
        self.name = name
        # Parameter names in declaration order; holes are kept as None so
        # positions still line up with arguments.
        self.params = params
        self.body = body

    def __repr__(self) -> str:
        return f"FunctionValue({self.name!r}, params={self.params!r})"


def format_value(value) -> str:
    """
    Render a runtime value the way scripts see it printed.
    """
    if value is UNDEFINED or value is None:
        return "undefined"
    if isinstance(value, FunctionValue):
        return f"function {value.name}() {{ [code] }}"
    return str(value)
