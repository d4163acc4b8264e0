"""Error taxonomy for json-navigator.

Every failure raised by path resolution, shape access, or scalar coercion is a
``NavigatorError``. Each concrete error also derives from the matching built-in
exception so callers can catch with standard types:

- PathSyntaxError       -> ValueError   : malformed path string
- TypeMismatchError     -> TypeError    : operation invoked on the wrong shape
- KeyNotFoundError      -> LookupError  : key step absent from an object
- IndexOutOfBoundsError -> IndexError   : index step outside an array
- CoercionError         -> ValueError   : scalar cannot become the target type
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "CoercionError",
    "IndexOutOfBoundsError",
    "KeyNotFoundError",
    "NavigatorError",
    "PathSyntaxError",
    "TypeMismatchError",
]


class NavigatorError(Exception):
    """Base class for all json-navigator errors."""


def _describe(value: Any) -> str:
    try:
        return repr(value)
    except ValueError:
        # int past the interpreter's decimal conversion limit
        return f"<{value.bit_length()}-bit integer>"


class PathSyntaxError(NavigatorError, ValueError):
    """Raised when a path string cannot be tokenized."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"invalid path {path!r}: {reason}")


class TypeMismatchError(NavigatorError, TypeError):
    """Raised when a node's shape does not support the requested operation.

    Attributes:
        expected: Shape name the operation required (e.g. ``"object"``).
        actual:   Shape name the node actually has.
        location: Rendered path of the offending node ("" for the root).
    """

    def __init__(self, expected: str, actual: str, location: str = "") -> None:
        self.expected = expected
        self.actual = actual
        self.location = location
        where = f" at {location!r}" if location else ""
        super().__init__(f"expected {expected} node{where}, got {actual}")


class KeyNotFoundError(NavigatorError, LookupError):
    """Raised when a key step names a key the current object does not have."""

    def __init__(self, key: str, location: str = "") -> None:
        self.key = key
        self.location = location
        where = f" at {location!r}" if location else ""
        super().__init__(f"key {key!r} not found{where}")


class IndexOutOfBoundsError(NavigatorError, IndexError):
    """Raised when an index step falls outside the current array."""

    def __init__(self, index: int, length: int, location: str = "") -> None:
        self.index = index
        self.length = length
        self.location = location
        where = f" at {location!r}" if location else ""
        shown = _describe(index)
        super().__init__(
            f"index {shown} out of bounds for array of length {length}{where}"
        )


class CoercionError(NavigatorError, ValueError):
    """Raised when a scalar value cannot be converted to the target type.

    Attributes:
        target: Name of the requested target type (e.g. ``"integer"``).
        value:  The raw scalar that failed to convert.
    """

    def __init__(self, target: str, value: Any, reason: str = "") -> None:
        self.target = target
        self.value = value
        self.reason = reason
        detail = f": {reason}" if reason else ""
        shown = _describe(value)
        super().__init__(
            f"cannot coerce {type(value).__name__} {shown} to {target}{detail}"
        )
