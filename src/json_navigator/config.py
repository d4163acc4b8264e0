"""NavigatorConfig: immutable settings for decoding, path caching and coercion.

A single frozen dataclass is threaded from the root node down to every child
node, so settings chosen at ``Node.from_json``/``Node.wrap`` time apply to the
whole tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, tzinfo

__all__ = ["DEFAULT_CONFIG", "NavigatorConfig"]


@dataclass(frozen=True, slots=True)
class NavigatorConfig:
    """Immutable configuration for json-navigator.

    Attributes:
        path_cache_size: Maximum number of parsed path strings kept in the
            resolver's LRU cache.  0 disables caching.  Default 256.
        decimal_floats: When True, ``Node.from_json`` decodes JSON numbers with
            a fractional part or exponent as ``decimal.Decimal`` instead of
            ``float``.  Default False.
        epoch_timezone: Zone in which epoch-millisecond numbers are rendered
            when coerced to date, time or datetime.  Default UTC.
    """

    path_cache_size: int = 256
    decimal_floats: bool = False
    epoch_timezone: tzinfo = UTC

    def __post_init__(self) -> None:
        if isinstance(self.path_cache_size, bool) or not isinstance(
            self.path_cache_size, int
        ):
            msg = f"path_cache_size must be an int, got {self.path_cache_size!r}"
            raise ValueError(msg)
        if self.path_cache_size < 0:
            msg = f"path_cache_size must be >= 0, got {self.path_cache_size}"
            raise ValueError(msg)
        if not isinstance(self.epoch_timezone, tzinfo):
            msg = f"epoch_timezone must be a tzinfo, got {self.epoch_timezone!r}"
            raise ValueError(msg)


DEFAULT_CONFIG = NavigatorConfig()
