"""json-navigator - path navigation and typed extraction over decoded JSON."""

from __future__ import annotations

from json_navigator.api import find, parse, resolve, wrap
from json_navigator.config import NavigatorConfig
from json_navigator.errors import (
    CoercionError,
    IndexOutOfBoundsError,
    KeyNotFoundError,
    NavigatorError,
    PathSyntaxError,
    TypeMismatchError,
)
from json_navigator.path import IndexStep, KeyStep, PathResolver
from json_navigator.tree import Node, Shape

__version__: str = "0.1.0"
__all__: list[str] = [
    "CoercionError",
    "IndexOutOfBoundsError",
    "IndexStep",
    "KeyNotFoundError",
    "KeyStep",
    "NavigatorConfig",
    "NavigatorError",
    "Node",
    "PathResolver",
    "PathSyntaxError",
    "Shape",
    "TypeMismatchError",
    "find",
    "parse",
    "resolve",
    "wrap",
]
