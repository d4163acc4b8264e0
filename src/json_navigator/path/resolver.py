"""PathResolver: walks a Node through the steps of a path string.

Each resolver keeps its own ``LRUCache`` of parsed step tuples keyed by the
literal path string. The cache only holds immutable tuples, so a resolver is
safe to share; it never changes what ``resolve`` returns.

Example::

    from json_navigator import Node
    from json_navigator.path import resolve

    root = Node.from_json('{"menu": {"items": [{"value": "New"}]}}')
    resolve(root, "menu.items.[0].value").get_string_value()  # "New"
"""

from __future__ import annotations

from collections.abc import Iterable
from logging import getLogger
from typing import TYPE_CHECKING

from cachetools import LRUCache

from json_navigator.config import DEFAULT_CONFIG, NavigatorConfig
from json_navigator.errors import (
    IndexOutOfBoundsError,
    KeyNotFoundError,
    TypeMismatchError,
)
from json_navigator.path.tokenizer import IndexStep, KeyStep, Step, tokenize

if TYPE_CHECKING:
    from json_navigator.tree.nodes import Node

__all__ = ["PathResolver", "find", "get_resolver", "resolve", "resolve_steps"]

logger = getLogger(__name__)


class PathResolver:
    """Resolves dot-separated paths against nodes, caching parsed paths.

    Args:
        cache_size: Maximum number of distinct path strings whose parsed steps
            are retained.  0 disables caching entirely.
    """

    def __init__(self, cache_size: int = DEFAULT_CONFIG.path_cache_size) -> None:
        self._cache: LRUCache[str, tuple[Step, ...]] | None = (
            LRUCache(maxsize=cache_size) if cache_size > 0 else None
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of parsed paths this resolver can hold."""
        return 0 if self._cache is None else int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The number of parsed paths currently cached."""
        return 0 if self._cache is None else int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def steps(self, path: str) -> tuple[Step, ...]:
        """Return the parsed steps for ``path``, consulting the cache first.

        Raises:
            PathSyntaxError: If ``path`` is malformed. Failures are not cached.
        """
        if self._cache is None:
            return tokenize(path)

        cached = self._cache.get(path)
        if cached is not None:
            return cached

        parsed = tokenize(path)
        logger.debug("parsed path %r into %d steps", path, len(parsed))
        self._cache[path] = parsed
        return parsed

    def resolve(self, start: Node, path: str) -> Node:
        """Return the node reached by walking ``path`` from ``start``.

        Raises:
            PathSyntaxError:       Malformed path string.
            TypeMismatchError:     Key step on a non-object, or index step on
                                   a non-array.
            KeyNotFoundError:      Key step naming an absent key.
            IndexOutOfBoundsError: Index step beyond the array's length.
        """
        return resolve_steps(start, self.steps(path))

    def find(self, start: Node, path: str) -> Node | None:
        """Like ``resolve`` but return None when the location does not exist.

        ``PathSyntaxError`` is still raised: a malformed path is a caller bug,
        not an absent location.
        """
        steps = self.steps(path)
        try:
            return resolve_steps(start, steps)
        except (KeyNotFoundError, IndexOutOfBoundsError, TypeMismatchError):
            return None


def resolve_steps(start: Node, steps: Iterable[Step]) -> Node:
    """Walk already-parsed ``steps`` from ``start``; no steps returns ``start``."""
    current = start
    for step in steps:
        match step:
            case KeyStep(key=key):
                current = current.child(key)
            case IndexStep(index=index):
                current = current.child(index)
            case _:
                raise TypeError(f"unsupported path step: {step!r}")
    return current


# One shared resolver per cache size; resolvers hold no per-tree state.
_RESOLVERS: dict[int, PathResolver] = {}


def get_resolver(config: NavigatorConfig | None = None) -> PathResolver:
    """Return the shared resolver matching ``config.path_cache_size``."""
    size = (config or DEFAULT_CONFIG).path_cache_size
    resolver = _RESOLVERS.get(size)
    if resolver is None:
        resolver = PathResolver(cache_size=size)
        _RESOLVERS[size] = resolver
    return resolver


def resolve(start: Node, path: str) -> Node:
    """Resolve ``path`` relative to ``start`` using the node's configuration."""
    return get_resolver(start.config).resolve(start, path)


def find(start: Node, path: str) -> Node | None:
    """Resolve ``path`` relative to ``start``, returning None if absent."""
    return get_resolver(start.config).find(start, path)
