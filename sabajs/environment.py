"""Variable and function bindings.

An :class:`Environment` is one frame of bindings. The interpreter keeps a
single global frame for the whole script and pushes a fresh frame, whose
parent is the global frame, for every function call. There is no deeper
nesting: function bodies never see the locals of their caller.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import Any, Optional

from sabajs.values import FunctionValue


class Environment:
    """One frame of variable and function bindings."""

    def __init__(self, parent: Optional[Environment] = None):
        self.vars: dict[str, Any] = {}
        self.functions: dict[str, FunctionValue] = {}
        self.parent = parent

    def find(self, name: str) -> Optional[Environment]:
        """
        Return the nearest frame binding ``name``, or None.
        """
        frame: Optional[Environment] = self
        while frame is not None:
            if name in frame.vars or name in frame.functions:
                return frame
            frame = frame.parent
        return None

    def get(self, name: str) -> Any:
        """
        Return the value bound to ``name`` in this frame.

        Variables shadow functions of the same name.
        """
        if name in self.vars:
            return self.vars[name]
        return self.functions[name]

    def declare(self, name: str, value: Any) -> None:
        """
        Bind ``name`` in this frame, replacing any earlier binding here.
        """
        self.vars[name] = value

    def declare_function(self, func: FunctionValue) -> None:
        """
        Register a function declaration in this frame.
        """
        self.functions[func.name] = func

    def assign(self, name: str, value: Any) -> None:
        """
        Rebind ``name`` in the nearest frame that defines it, or create it in
        this frame when no frame does.
        """
        frame = self.find(name)
        (frame or self).vars[name] = value

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def __repr__(self) -> str:
        scope = "global" if self.parent is None else "local"
        return f"Environment({scope}, vars={sorted(self.vars)}, functions={sorted(self.functions)})"
