"""Public API functions for json-navigator.

This module provides the user-facing entry points: parse, wrap, resolve and
find. They are thin conveniences over ``Node`` and ``PathResolver``; path
parsing is memoized by a shared resolver whose cache is invisible to callers.
"""

from __future__ import annotations

from typing import Any

from json_navigator.config import NavigatorConfig
from json_navigator.path import resolver
from json_navigator.tree.nodes import Node

__all__ = ["find", "parse", "resolve", "wrap"]


def parse(text: str | bytes, config: NavigatorConfig | None = None) -> Node:
    """Decode JSON ``text`` and return the root Node.

    Args:
        text:   JSON document as ``str`` or UTF-8 ``bytes``.
        config: Decoding, caching and coercion settings. Defaults to
                ``NavigatorConfig()`` when None.

    Returns:
        The root ``Node`` of the decoded document.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON.
    """
    return Node.from_json(text, config=config)


def wrap(raw: Any, config: NavigatorConfig | None = None) -> Node:
    """Wrap an already-decoded JSON value (dict, list, or scalar) as a root Node.

    Raises:
        TypeError: If ``raw`` is not a JSON-compatible value.
    """
    return Node.wrap(raw, config=config)


def resolve(start: Node | Any, path: str) -> Node:
    """Return the node addressed by ``path`` relative to ``start``.

    Args:
        start: A ``Node``, or a raw decoded value that is wrapped first.
        path:  Dot-separated path such as ``"menu.popup.menuitem.[1].value"``.

    Raises:
        PathSyntaxError:       Malformed path (empty, empty token, glued index).
        TypeMismatchError:     A step does not fit the shape it is applied to.
        KeyNotFoundError:      A key step names an absent key.
        IndexOutOfBoundsError: An index step is beyond the array's length.
    """
    node = start if isinstance(start, Node) else Node.wrap(start)
    return resolver.resolve(node, path)


def find(start: Node | Any, path: str) -> Node | None:
    """Return the node addressed by ``path``, or None if it does not exist.

    Raises:
        PathSyntaxError: Malformed path; syntax errors are never hidden.
    """
    node = start if isinstance(start, Node) else Node.wrap(start)
    return resolver.find(node, path)
