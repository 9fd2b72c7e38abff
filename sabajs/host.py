"""Host objects.

The embedding application exposes its own objects to scripts through
:class:`HostObject`. Scripts reach them with member expressions, read and
write named properties, and call any property that is a Python callable.
The interpreter depends only on this contract, never on the document model
behind it.


File: host.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Any, Optional

from sabajs.exceptions import ReadOnlyPropertyException, UndefinedPropertyException
from sabajs.values import format_value


class HostObject:
    """
    Base class for objects exposed to scripts.

    Subclasses override :meth:`get_property` and :meth:`set_property`.
    Returning ``None`` from ``get_property`` reads as ``undefined``.
    """

    def describe(self) -> str:
        """
        Return the name used for this object in error messages.
        """
        return type(self).__name__

    def get_property(self, name: str) -> Any:
        raise UndefinedPropertyException(name, self.describe())

    def set_property(self, name: str, value: Any) -> None:
        raise ReadOnlyPropertyException(name, self.describe())


class HostNamespace(HostObject):
    """
    A host object backed by a dictionary of properties.
    """

    def __init__(self, name: str, properties: Optional[dict] = None, writable: bool = True):
        self.name = name
        self.properties = dict(properties or {})
        self.writable = writable

    def describe(self) -> str:
        return self.name

    def get_property(self, name: str) -> Any:
        if name in self.properties:
            return self.properties[name]
        return super().get_property(name)

    def set_property(self, name: str, value: Any) -> None:
        if not self.writable:
            super().set_property(name, value)
        self.properties[name] = value

    def __repr__(self) -> str:
        return f"HostNamespace({self.name!r}, {sorted(self.properties)})"


class Console(HostNamespace):
    """
    The ``console`` object: ``console.log(...)`` prints its arguments.
    """

    def __init__(self, stream=None):
        super().__init__("console", {"log": self.log}, writable=False)
        self.stream = stream

    def log(self, *values) -> None:
        """
        Print the values separated by spaces, formatted as scripts see them.
        """
        print(" ".join(format_value(v) for v in values), file=self.stream)
