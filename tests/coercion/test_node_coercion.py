"""Tests for the get_*_value() methods on Node.

These exercise the coercion engine through the Node boundary: the scalar
shape requirement, null handling for every target, the node's epoch zone, and
idempotence of repeated extraction.
"""

from __future__ import annotations

import uuid
from datetime import UTC, date, datetime, time, timedelta, timezone
from decimal import Decimal

import pytest

from json_navigator import CoercionError, NavigatorConfig, Node, TypeMismatchError

GETTERS = [
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

DOCUMENT = """
{
  "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
  "name": "report",
  "count": "12",
  "ratio": 0.75,
  "enabled": "TRUE",
  "payload": "aGVsbG8=",
  "created": 0,
  "updated": "2024-03-05T10:20:30Z",
  "due": "2024-04-01",
  "alarm": "07:30:00",
  "missing": null,
  "tags": ["a", "b"]
}
"""


@pytest.fixture
def root() -> Node:
    return Node.from_json(DOCUMENT)


class TestNullForEveryGetter:
    @pytest.mark.parametrize("getter", GETTERS)
    def test_null_returns_none(self, root: Node, getter: str) -> None:
        assert getattr(root.resolve("missing"), getter)() is None


class TestShapeRequirement:
    @pytest.mark.parametrize("getter", GETTERS)
    def test_array_is_not_coercible(self, root: Node, getter: str) -> None:
        with pytest.raises(TypeMismatchError):
            getattr(root.resolve("tags"), getter)()

    @pytest.mark.parametrize("getter", GETTERS)
    def test_object_is_not_coercible(self, root: Node, getter: str) -> None:
        with pytest.raises(TypeMismatchError):
            getattr(root, getter)()


class TestTypedExtraction:
    def test_string(self, root: Node) -> None:
        assert root.resolve("name").get_string_value() == "report"

    def test_integer_from_string(self, root: Node) -> None:
        assert root.resolve("count").get_integer_value() == 12
        assert root.resolve("count").get_long_value() == 12

    def test_double(self, root: Node) -> None:
        assert root.resolve("ratio").get_double_value() == 0.75
        assert root.resolve("ratio").get_decimal_value() == Decimal("0.75")

    def test_boolean_from_string(self, root: Node) -> None:
        assert root.resolve("enabled").get_boolean_value() is True

    def test_blob(self, root: Node) -> None:
        assert root.resolve("payload").get_blob_value() == b"hello"

    def test_identifier(self, root: Node) -> None:
        assert root.resolve("id").get_identifier_value() == uuid.UUID(
            "0f8fad5b-d9cb-469f-a165-70867728950e"
        )

    def test_epoch_datetime(self, root: Node) -> None:
        assert root.resolve("created").get_datetime_value() == datetime(
            1970, 1, 1, tzinfo=UTC
        )

    def test_iso_datetime(self, root: Node) -> None:
        updated = root.resolve("updated")
        assert updated.get_datetime_value() == datetime(2024, 3, 5, 10, 20, 30, tzinfo=UTC)
        assert updated.get_date_value() == date(2024, 3, 5)
        assert updated.get_time_value() == time(10, 20, 30)

    def test_date(self, root: Node) -> None:
        assert root.resolve("due").get_date_value() == date(2024, 4, 1)

    def test_time(self, root: Node) -> None:
        assert root.resolve("alarm").get_time_value() == time(7, 30)

    def test_raw_value(self, root: Node) -> None:
        assert root.resolve("ratio").get_value() == 0.75

    def test_coercion_error_propagates(self, root: Node) -> None:
        with pytest.raises(CoercionError) as exc_info:
            root.resolve("name").get_integer_value()
        assert exc_info.value.target == "integer"
        assert exc_info.value.value == "report"

    @pytest.mark.parametrize("getter", ["get_integer_value", "get_long_value"])
    def test_very_long_numerals_raise_coercion_error(self, getter: str) -> None:
        with pytest.raises(CoercionError, match="out of range"):
            getattr(Node.wrap("9" * 5000), getter)()

    def test_huge_integer_string_value(self) -> None:
        with pytest.raises(CoercionError, match="too large to render"):
            Node.wrap(10**5000).get_string_value()


class TestEpochZone:
    def test_node_config_zone(self) -> None:
        zone = timezone(timedelta(hours=-3))
        node = Node.from_json('{"t": 0}', NavigatorConfig(epoch_timezone=zone))
        created = node.resolve("t")
        assert created.get_datetime_value().utcoffset() == timedelta(hours=-3)  # type: ignore[union-attr]
        assert created.get_date_value() == date(1969, 12, 31)
        assert created.get_time_value() == time(21, 0)


class TestIdempotence:
    @pytest.mark.parametrize(
        ("path", "getter"),
        [
            ("count", "get_integer_value"),
            ("ratio", "get_decimal_value"),
            ("updated", "get_datetime_value"),
            ("payload", "get_blob_value"),
        ],
    )
    def test_repeated_extraction_is_equal(self, root: Node, path: str, getter: str) -> None:
        node = root.resolve(path)
        assert getattr(node, getter)() == getattr(node, getter)()

    def test_decimal_floats_keep_precision(self) -> None:
        node = Node.from_json('{"price": 19.99}', NavigatorConfig(decimal_floats=True))
        price = node.resolve("price")
        assert price.get_decimal_value() == Decimal("19.99")
        assert price.get_string_value() == "19.99"
        assert price.get_double_value() == 19.99
