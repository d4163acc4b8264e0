"""Scalar coercions: string, boolean, numeric, blob and identifier targets.

Every function takes a raw JSON scalar (``str``, ``bool``, ``int``, ``float``,
``Decimal`` or ``None``) and returns the target representation.

- ``None`` always coerces to ``None``: null means "no value", never an error.
- ``bool`` is checked before ``int`` everywhere because bool subclasses int in
  Python; a boolean is never accepted as a number.
- Strings are matched against strict grammars before conversion, so Python's
  lenient parsers (``int("1_000")``, ``float("inf")``) never leak through.
"""

from __future__ import annotations

import base64
import binascii
import math
import re
import uuid
from decimal import Decimal, InvalidOperation
from typing import Any

from json_navigator.errors import CoercionError

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "to_blob",
    "to_boolean",
    "to_decimal",
    "to_double",
    "to_identifier",
    "to_integer",
    "to_long",
    "to_string",
]

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_STRING = re.compile(r"[+-]?[0-9]+")

# JSON number grammar, relaxed to allow a leading "+" and a bare ".5" / "5."
_NUMBER_STRING = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Canonical hyphenated UUID or 32 bare hex digits
_IDENTIFIER_STRING = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
    r"|[0-9a-fA-F]{32}"
)


def _positional(number: Decimal) -> str:
    text = str(number)
    if "E" in text and number.is_finite():
        return format(number, "f")
    return text


def to_string(value: Any) -> str | None:
    """Return the natural textual form of ``value``.

    Booleans render as ``"true"``/``"false"`` and integers in decimal. Floats
    and Decimals render in plain positional notation, never with an exponent:
    ``1e16`` becomes ``"10000000000000000"`` and ``0.1`` stays ``"0.1"``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError as exc:
            raise CoercionError("string", value, "integer too large to render") from exc
    if isinstance(value, float):
        text = repr(value)
        return _positional(Decimal(text)) if "e" in text else text
    if isinstance(value, Decimal):
        return _positional(value)
    raise CoercionError("string", value, "unsupported scalar type")


def to_boolean(value: Any) -> bool | None:
    """Accept a boolean, or the strings ``true``/``false`` in any case."""
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        raise CoercionError("boolean", value, "expected 'true' or 'false'")
    raise CoercionError("boolean", value)


def _to_bounded_int(value: Any, target: str, low: int, high: int) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise CoercionError(target, value, "booleans are not numbers")

    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise CoercionError(target, value, "value is not integral")
        number = int(value)
    elif isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            raise CoercionError(target, value, "value is not integral")
        number = int(value)
    elif isinstance(value, str):
        if _INTEGER_STRING.fullmatch(value) is None:
            raise CoercionError(target, value, "not an integer literal")
        # more digits than the bound can hold; int() may refuse very long text
        if len(value.lstrip("+-").lstrip("0")) > len(str(high)):
            raise CoercionError(target, value, f"out of range [{low}, {high}]")
        number = int(value)
    else:
        raise CoercionError(target, value)

    if not low <= number <= high:
        raise CoercionError(target, value, f"out of range [{low}, {high}]")
    return number


def to_integer(value: Any) -> int | None:
    """Coerce to a signed 32-bit integer.

    Integral floats and Decimals (``3.0``) are accepted; fractional values are
    rejected rather than truncated.
    """
    return _to_bounded_int(value, "integer", INT32_MIN, INT32_MAX)


def to_long(value: Any) -> int | None:
    """Coerce to a signed 64-bit integer."""
    return _to_bounded_int(value, "long", INT64_MIN, INT64_MAX)


def to_double(value: Any) -> float | None:
    """Coerce to a float.

    Numbers convert directly; strings must match the JSON number grammar.
    Conversions that overflow to infinity are rejected.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise CoercionError("double", value, "booleans are not numbers")
    if isinstance(value, float):
        return value

    if isinstance(value, int | Decimal):
        try:
            result = float(value)
        except OverflowError as exc:
            raise CoercionError("double", value, "out of range") from exc
        if math.isinf(result) and not (
            isinstance(value, Decimal) and value.is_infinite()
        ):
            raise CoercionError("double", value, "out of range")
        return result

    if isinstance(value, str):
        if _NUMBER_STRING.fullmatch(value) is None:
            raise CoercionError("double", value, "not a number literal")
        result = float(value)
        if math.isinf(result):
            raise CoercionError("double", value, "out of range")
        return result

    raise CoercionError("double", value)


def to_decimal(value: Any) -> Decimal | None:
    """Coerce to ``decimal.Decimal``.

    Floats go through their shortest ``repr`` so ``0.1`` becomes
    ``Decimal("0.1")`` rather than the exact binary expansion.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise CoercionError("decimal", value, "booleans are not numbers")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        if _NUMBER_STRING.fullmatch(value) is None:
            raise CoercionError("decimal", value, "not a number literal")
        try:
            return Decimal(value)
        except InvalidOperation as exc:
            raise CoercionError("decimal", value) from exc
    raise CoercionError("decimal", value)


def to_blob(value: Any) -> bytes | None:
    """Decode a standard Base64 string into bytes.

    Decoding is strict: characters outside the Base64 alphabet or incorrect
    padding raise ``CoercionError``.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise CoercionError("blob", value, "expected a Base64 string")
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise CoercionError("blob", value, "malformed Base64") from exc


def to_identifier(value: Any) -> uuid.UUID | None:
    """Validate the shape of an identifier string and return it as a UUID.

    Accepts the canonical hyphenated form or 32 bare hex digits. No version or
    variant checks are made: the identifier is passed through opaquely.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise CoercionError("identifier", value, "expected a string")
    if _IDENTIFIER_STRING.fullmatch(value) is None:
        raise CoercionError("identifier", value, "not a UUID-shaped identifier")
    return uuid.UUID(value)
