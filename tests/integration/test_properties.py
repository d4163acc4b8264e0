"""Property-based tests for resolution and coercion.

Uses hypothesis to generate arbitrary JSON documents and check that:
- resolving the path of any existing location returns exactly the value a
  direct structural walk reaches
- shape probing and extraction are idempotent
- canonical integer strings round trip through get_long_value()
- null never raises for any getter
"""

from __future__ import annotations

import json
from typing import Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from json_navigator import Node, Shape
from json_navigator.coercion.scalars import INT64_MAX, INT64_MIN
from json_navigator.path.tokenizer import format_path

pytestmark = pytest.mark.property

# Keys must not contain "." and must not look like "[n]" or "k[n]" to be addressable.
_keys = st.text(
    alphabet=st.characters(exclude_characters=".[]", exclude_categories=("Cs",)),
    min_size=1,
    max_size=8,
)
_scalars = st.none() | st.booleans() | st.integers() | st.text(max_size=10) | st.floats(
    allow_nan=False, allow_infinity=False
)
_documents = st.recursive(
    _scalars,
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(_keys, children, max_size=4),
    max_leaves=20,
)


def _locations(raw: Any, prefix: tuple[str | int, ...] = ()) -> list[tuple[Any, ...]]:
    """Every (location, value) pair in ``raw``, found by a direct walk."""
    found: list[tuple[Any, ...]] = [(prefix, raw)]
    if isinstance(raw, dict):
        for key, value in raw.items():
            found.extend(_locations(value, (*prefix, key)))
    elif isinstance(raw, list):
        for index, value in enumerate(raw):
            found.extend(_locations(value, (*prefix, index)))
    return found


@given(_documents)
@settings(max_examples=75)
def test_resolve_matches_structural_walk(document: Any) -> None:
    root = Node.from_json(json.dumps(document))
    for location, expected in _locations(root.raw):
        if not location:
            continue
        node = root.resolve(format_path(location))
        assert node.value() == expected
        assert node.location == location


@given(_documents)
@settings(max_examples=50)
def test_shape_and_containers_are_idempotent(document: Any) -> None:
    node = Node.wrap(document)
    assert node.shape == node.get_shape()
    if node.shape is Shape.OBJECT:
        assert node.as_map() == node.as_map()
    elif node.shape is Shape.ARRAY:
        assert node.as_list() == node.as_list()
    else:
        assert node.get_string_value() == node.get_string_value()


@given(st.integers(min_value=INT64_MIN, max_value=INT64_MAX))
def test_integer_strings_round_trip(number: int) -> None:
    text = str(number)
    node = Node.wrap(text)
    assert Node.wrap(node.get_long_value()).get_string_value() == text


@given(st.sampled_from(
    [
        "get_blob_value",
        "get_boolean_value",
        "get_date_value",
        "get_datetime_value",
        "get_decimal_value",
        "get_double_value",
        "get_identifier_value",
        "get_integer_value",
        "get_long_value",
        "get_string_value",
        "get_time_value",
    ]
))
def test_null_never_raises(getter: str) -> None:
    assert getattr(Node.wrap(None), getter)() is None
