"""Coercion subpackage: raw JSON scalar -> typed Python value.

Re-exports the public API for the coercion module:
- to_string / to_boolean: textual and boolean targets
- to_integer / to_long / to_double / to_decimal: numeric targets
- to_blob / to_identifier: Base64 bytes and UUID-shaped identifiers
- to_date / to_time / to_datetime: ISO-8601 strings or epoch milliseconds
"""

from json_navigator.coercion.scalars import (
    to_blob,
    to_boolean,
    to_decimal,
    to_double,
    to_identifier,
    to_integer,
    to_long,
    to_string,
)
from json_navigator.coercion.temporal import (
    EPOCH,
    from_epoch_millis,
    to_date,
    to_datetime,
    to_time,
)

__all__ = [
    "EPOCH",
    "from_epoch_millis",
    "to_blob",
    "to_boolean",
    "to_date",
    "to_datetime",
    "to_decimal",
    "to_double",
    "to_identifier",
    "to_integer",
    "to_long",
    "to_string",
    "to_time",
]
