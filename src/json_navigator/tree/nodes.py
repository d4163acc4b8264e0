"""Node dataclass and Shape StrEnum for navigating decoded JSON trees.

A ``Node`` wraps one position of the untyped tree produced by ``json.loads``
(nested dicts, lists and scalars) and tags it with a ``Shape``. The tag is
computed once, by ``classify``, when the node is built; every other operation
tests the tag instead of inspecting the raw value's type.

Children are wrapped lazily: a node only classifies the values it hands out,
so wrapping a large document costs nothing until it is navigated.

Example::

    root = Node.from_json('{"menu": {"items": [{"value": "Open"}]}}')
    root.resolve("menu.items.[0].value").get_string_value()  # "Open"
    root.resolve("menu.items").shape                         # Shape.ARRAY
"""

from __future__ import annotations

import json
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal
from enum import StrEnum, auto
from logging import getLogger
from typing import Any, TypeAlias

from json_navigator import coercion
from json_navigator.config import DEFAULT_CONFIG, NavigatorConfig
from json_navigator.errors import (
    IndexOutOfBoundsError,
    KeyNotFoundError,
    TypeMismatchError,
)
from json_navigator.path import resolver
from json_navigator.path.tokenizer import format_path

__all__ = ["Location", "Node", "Shape", "classify"]

logger = getLogger(__name__)

Location: TypeAlias = tuple[str | int, ...]

_SCALAR_TYPES = (str, int, float, Decimal)


class Shape(StrEnum):
    """The three coarse kinds of JSON value.

    - OBJECT -> "object" : JSON object (any Mapping)
    - ARRAY  -> "array"  : JSON array (list or tuple)
    - SCALAR -> "scalar" : string, number, boolean or null
    """

    OBJECT = auto()
    ARRAY = auto()
    SCALAR = auto()


def classify(raw: Any) -> Shape:
    """Return the Shape of a raw decoded value.

    Strings and bytes are sequences in Python but never JSON arrays.

    Raises:
        TypeError: If ``raw`` is not a value a JSON decoder can produce.
    """
    if raw is None or isinstance(raw, bool):
        return Shape.SCALAR
    if isinstance(raw, Mapping):
        return Shape.OBJECT
    if isinstance(raw, list | tuple):
        return Shape.ARRAY
    if isinstance(raw, _SCALAR_TYPES):
        return Shape.SCALAR
    raise TypeError(f"Unsupported JSON value type: {type(raw)!r}")


@dataclass(frozen=True, slots=True)
class Node:
    """Immutable view of one position in a decoded JSON tree.

    Attributes:
        raw:      The wrapped value exactly as decoded (dict, list, or scalar).
        location: Keys and indices leading from the root to this node.
                  Ignored by equality: nodes wrapping equal values compare equal.
        config:   Settings inherited by every child node. Ignored by equality.
        shape:    The Shape tag, derived from ``raw`` at construction.
    """

    raw: Any
    location: Location = field(default=(), compare=False)
    config: NavigatorConfig = field(default=DEFAULT_CONFIG, compare=False, repr=False)
    shape: Shape = field(init=False)

    # equality compares raw values, which are usually dicts or lists
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", classify(self.raw))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def wrap(cls, raw: Any, config: NavigatorConfig | None = None) -> Node:
        """Wrap an already-decoded value as a root node."""
        return cls(raw, config=config or DEFAULT_CONFIG)

    @classmethod
    def from_json(
        cls, text: str | bytes, config: NavigatorConfig | None = None
    ) -> Node:
        """Decode JSON text once and wrap the result as a root node.

        Raises:
            json.JSONDecodeError: If ``text`` is not valid JSON.
        """
        config = config or DEFAULT_CONFIG
        logger.debug("decoding JSON payload of %d characters", len(text))
        if config.decimal_floats:
            raw = json.loads(text, parse_float=Decimal)
        else:
            raw = json.loads(text)
        return cls(raw, config=config)

    def _child(self, raw: Any, step: str | int) -> Node:
        return Node(raw, location=(*self.location, step), config=self.config)

    # ------------------------------------------------------------------
    # Shape introspection
    # ------------------------------------------------------------------

    @property
    def path(self) -> str:
        """This node's location in path grammar; ``""`` for the root."""
        return format_path(self.location)

    def get_shape(self) -> Shape:
        return self.shape

    def is_object(self) -> bool:
        return self.shape is Shape.OBJECT

    def is_array(self) -> bool:
        return self.shape is Shape.ARRAY

    def is_scalar(self) -> bool:
        return self.shape is Shape.SCALAR

    def _require(self, expected: Shape) -> None:
        if self.shape is not expected:
            raise TypeMismatchError(str(expected), str(self.shape), self.path)

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def as_map(self) -> dict[str, Node]:
        """Return a child node per key, in the object's iteration order.

        Raises:
            TypeMismatchError: If this node is not an object.
        """
        self._require(Shape.OBJECT)
        return {key: self._child(value, key) for key, value in self.raw.items()}

    def as_list(self) -> list[Node]:
        """Return a child node per element, in array order.

        Raises:
            TypeMismatchError: If this node is not an array.
        """
        self._require(Shape.ARRAY)
        return [self._child(item, index) for index, item in enumerate(self.raw)]

    def keys(self) -> list[str]:
        """Return the object's keys in iteration order."""
        self._require(Shape.OBJECT)
        return list(self.raw)

    def __len__(self) -> int:
        if self.shape is Shape.SCALAR:
            raise TypeMismatchError("object or array", str(self.shape), self.path)
        return len(self.raw)

    def __bool__(self) -> bool:
        # Presence check (e.g. after find()); empty containers and null stay truthy
        return True

    def child(self, step: str | int) -> Node:
        """Step once: a ``str`` selects an object key, an ``int`` an array index.

        Raises:
            TypeMismatchError:     Key on a non-object or index on a non-array.
            KeyNotFoundError:      The key is absent.
            IndexOutOfBoundsError: The index is negative or >= the length.
        """
        if isinstance(step, str):
            self._require(Shape.OBJECT)
            if step not in self.raw:
                raise KeyNotFoundError(step, self.path)
            return self._child(self.raw[step], step)

        if isinstance(step, int) and not isinstance(step, bool):
            self._require(Shape.ARRAY)
            if not 0 <= step < len(self.raw):
                raise IndexOutOfBoundsError(step, len(self.raw), self.path)
            return self._child(self.raw[step], step)

        raise TypeError(f"step must be str or int, got {type(step).__name__}")

    # ------------------------------------------------------------------
    # Path navigation
    # ------------------------------------------------------------------

    def resolve(self, path: str) -> Node:
        """Return the descendant addressed by a dot-separated ``path``."""
        return resolver.resolve(self, path)

    def find(self, path: str) -> Node | None:
        """Return the descendant addressed by ``path``, or None if absent."""
        return resolver.find(self, path)

    # ------------------------------------------------------------------
    # Raw access and coercion
    # ------------------------------------------------------------------

    def value(self) -> Any:
        """Return the wrapped value without coercion, whatever the shape."""
        return self.raw

    get_value = value

    def _scalar(self) -> Any:
        self._require(Shape.SCALAR)
        return self.raw

    def get_string_value(self) -> str | None:
        return coercion.to_string(self._scalar())

    def get_boolean_value(self) -> bool | None:
        return coercion.to_boolean(self._scalar())

    def get_integer_value(self) -> int | None:
        """Signed 32-bit integer."""
        return coercion.to_integer(self._scalar())

    def get_long_value(self) -> int | None:
        """Signed 64-bit integer."""
        return coercion.to_long(self._scalar())

    def get_double_value(self) -> float | None:
        return coercion.to_double(self._scalar())

    def get_decimal_value(self) -> Decimal | None:
        return coercion.to_decimal(self._scalar())

    def get_blob_value(self) -> bytes | None:
        """Bytes decoded from a Base64 string."""
        return coercion.to_blob(self._scalar())

    def get_identifier_value(self) -> uuid.UUID | None:
        return coercion.to_identifier(self._scalar())

    def get_date_value(self) -> date | None:
        return coercion.to_date(self._scalar(), self.config.epoch_timezone)

    def get_time_value(self) -> time | None:
        return coercion.to_time(self._scalar(), self.config.epoch_timezone)

    def get_datetime_value(self) -> datetime | None:
        return coercion.to_datetime(self._scalar(), self.config.epoch_timezone)
