"""Shared definitions for operator tags.

The parser stores these on additive and assignment nodes and the interpreter
dispatches on them, so both sides agree on the spelling of each operator.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported operators.
    """

    # Additive
    ADD = "+"
    SUB = "-"

    # Assignment
    ASSIGN = "="

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


ADDITIVE_OPS = {Op.ADD.value: Op.ADD, Op.SUB.value: Op.SUB}

__all__ = ["Op", "ADDITIVE_OPS"]
