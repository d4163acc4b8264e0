"""Path tokenizer: splits a dot-separated path into typed steps.

Grammar:
- Tokens are separated by ``.``; empty tokens are rejected.
- A token that is exactly ``[<digits>]`` is an ``IndexStep``.
- Any other token is a ``KeyStep`` matched verbatim (case-sensitive, no
  escaping, so a key containing ``.`` cannot be addressed).
- A key glued to an index suffix (``menuitem[0]``) is rejected; the index must
  be its own token (``menuitem.[0]``).

Example::

    tokenize("menu.popup.menuitem.[1].name")
    # (KeyStep("menu"), KeyStep("popup"), KeyStep("menuitem"),
    #  IndexStep(1), KeyStep("name"))
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from json_navigator.errors import PathSyntaxError

__all__ = ["IndexStep", "KeyStep", "Step", "format_path", "tokenize"]

# Whole-token index step: "[0]", "[12]"
_INDEX_TOKEN = re.compile(r"\[(\d+)\]", re.ASCII)

# Key immediately followed by an index suffix: "menuitem[0]"
_GLUED_INDEX = re.compile(r"(.+?)((?:\[\d+\])+)", re.ASCII)


@dataclass(frozen=True, slots=True)
class KeyStep:
    """Select the member named ``key`` of an object."""

    key: str

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True, slots=True)
class IndexStep:
    """Select the zero-based position ``index`` of an array."""

    index: int

    def __str__(self) -> str:
        return f"[{self.index}]"


Step: TypeAlias = KeyStep | IndexStep


def tokenize(path: str) -> tuple[Step, ...]:
    """Parse ``path`` into an ordered tuple of steps.

    Args:
        path: Dot-separated path string, e.g. ``"menu.popup.menuitem.[1]"``.

    Returns:
        A tuple of ``KeyStep``/``IndexStep`` in traversal order.

    Raises:
        PathSyntaxError: If the path is empty, contains an empty token (leading,
            trailing or doubled period), or glues an index onto a key.
    """
    if not isinstance(path, str):
        raise TypeError(f"path must be a str, got {type(path).__name__}")
    if not path:
        raise PathSyntaxError(path, "path is empty")

    steps: list[Step] = []
    for position, token in enumerate(path.split(".")):
        if not token:
            raise PathSyntaxError(path, f"empty token at position {position}")

        index_match = _INDEX_TOKEN.fullmatch(token)
        if index_match is not None:
            try:
                index = int(index_match.group(1))
            except ValueError as exc:
                raise PathSyntaxError(
                    path, f"index too large at position {position}"
                ) from exc
            steps.append(IndexStep(index))
            continue

        glued = _GLUED_INDEX.fullmatch(token)
        if glued is not None:
            key, suffix = glued.groups()
            suggestion = ".".join([key, *re.findall(r"\[\d+\]", suffix, re.ASCII)])
            raise PathSyntaxError(
                path,
                f"index must be its own token: "
                f"write {suggestion!r} instead of {token!r}",
            )

        steps.append(KeyStep(token))

    return tuple(steps)


def format_path(steps: Iterable[Step | str | int]) -> str:
    """Render steps (or raw keys and indices) back into path grammar.

    ``format_path(["menu", 1, "name"])`` returns ``"menu.[1].name"``. The
    root (no steps) renders as the empty string.
    """
    parts: list[str] = []
    for step in steps:
        if isinstance(step, KeyStep | IndexStep):
            parts.append(str(step))
        elif isinstance(step, int) and not isinstance(step, bool):
            parts.append(f"[{step}]")
        else:
            parts.append(str(step))
    return ".".join(parts)
