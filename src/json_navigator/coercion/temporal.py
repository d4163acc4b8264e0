"""Temporal coercions: date, time and datetime targets.

Three input kinds are accepted:

1. ISO-8601 strings, matched with strict patterns:
   - date:      ``YYYY-MM-DD``
   - time:      ``HH:MM[:SS[.fraction]][Z|+HH:MM|-HH:MM]``
   - datetime:  ``<date>(T| )<time>``
2. Integers holding epoch milliseconds, converted with epoch offset arithmetic
   and rendered in the requested zone (UTC by default).
3. ``None``, which always yields ``None``.

Date and time targets accept datetime input and keep only their own component.
Times are returned as naive wall-clock values; any offset in the input is
validated and dropped. Datetimes are always timezone-aware: naive strings are
read as UTC.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, time, timedelta, timezone, tzinfo
from typing import Any

from json_navigator.errors import CoercionError

__all__ = ["EPOCH", "from_epoch_millis", "to_date", "to_datetime", "to_time"]

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

_DATE = r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
_TIME = (
    r"(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?"
    r"(?P<offset>Z|z|[+-]\d{2}:?\d{2})?"
)

_DATE_STRING = re.compile(_DATE, re.ASCII)
_TIME_STRING = re.compile(_TIME, re.ASCII)
_DATETIME_STRING = re.compile(_DATE + r"[Tt ]" + _TIME, re.ASCII)


def from_epoch_millis(millis: int, tz: tzinfo = UTC) -> datetime:
    """Convert epoch milliseconds to an aware datetime in ``tz``.

    Raises:
        CoercionError: If the instant falls outside ``datetime``'s range.
    """
    try:
        return (EPOCH + timedelta(milliseconds=millis)).astimezone(tz)
    except (OverflowError, ValueError) as exc:
        raise CoercionError(
            "datetime", millis, "epoch milliseconds out of range"
        ) from exc


def _epoch_millis(value: Any, target: str) -> int | None:
    # bool subclasses int; it is never an epoch value
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, bool | float) or not isinstance(value, str):
        raise CoercionError(
            target, value, "expected an ISO-8601 string or epoch milliseconds"
        )
    return None


def _build_date(match: re.Match[str], target: str, raw: str) -> date:
    try:
        return date(int(match["year"]), int(match["month"]), int(match["day"]))
    except ValueError as exc:
        raise CoercionError(target, raw, str(exc)) from exc


def _build_time(match: re.Match[str], target: str, raw: str) -> time:
    fraction = match["fraction"] or ""
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    try:
        return time(
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"] or 0),
            microsecond,
        )
    except ValueError as exc:
        raise CoercionError(target, raw, str(exc)) from exc


def _build_offset(match: re.Match[str], target: str, raw: str) -> tzinfo | None:
    offset = match["offset"]
    if offset is None:
        return None
    if offset in ("Z", "z"):
        return UTC
    digits = offset[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:])
    if minutes >= 60:
        raise CoercionError(target, raw, f"invalid UTC offset {offset!r}")
    delta = timedelta(hours=hours, minutes=minutes)
    try:
        return timezone(-delta if offset[0] == "-" else delta)
    except ValueError as exc:
        raise CoercionError(target, raw, f"invalid UTC offset {offset!r}") from exc


def _parse_datetime(raw: str, target: str) -> datetime | None:
    match = _DATETIME_STRING.fullmatch(raw)
    if match is None:
        return None
    day = _build_date(match, target, raw)
    clock = _build_time(match, target, raw)
    zone = _build_offset(match, target, raw) or UTC
    return datetime.combine(day, clock, tzinfo=zone)


def to_datetime(value: Any, tz: tzinfo = UTC) -> datetime | None:
    """Coerce to an aware ``datetime``.

    Accepts an ISO datetime string (naive strings are read as UTC), a bare
    ``YYYY-MM-DD`` date (midnight UTC), or epoch milliseconds rendered in ``tz``.
    """
    if value is None:
        return None
    millis = _epoch_millis(value, "datetime")
    if millis is not None:
        return from_epoch_millis(millis, tz)

    parsed = _parse_datetime(value, "datetime")
    if parsed is not None:
        return parsed

    match = _DATE_STRING.fullmatch(value)
    if match is not None:
        day = _build_date(match, "datetime", value)
        return datetime.combine(day, time(), tzinfo=UTC)

    raise CoercionError("datetime", value, "not an ISO-8601 datetime")


def to_date(value: Any, tz: tzinfo = UTC) -> date | None:
    """Coerce to a calendar ``date``.

    Datetime strings keep the date as written; epoch milliseconds take the
    calendar date in ``tz``.
    """
    if value is None:
        return None
    millis = _epoch_millis(value, "date")
    if millis is not None:
        try:
            return from_epoch_millis(millis, tz).date()
        except CoercionError as exc:
            raise CoercionError("date", value, exc.reason) from exc

    match = _DATE_STRING.fullmatch(value)
    if match is not None:
        return _build_date(match, "date", value)

    parsed = _parse_datetime(value, "date")
    if parsed is not None:
        return parsed.date()

    raise CoercionError("date", value, "not an ISO-8601 date")


def to_time(value: Any, tz: tzinfo = UTC) -> time | None:
    """Coerce to a naive wall-clock ``time``.

    Time strings and datetime strings keep the clock reading as written (any
    offset is validated, then dropped); epoch milliseconds take the time of day
    in ``tz``.
    """
    if value is None:
        return None
    millis = _epoch_millis(value, "time")
    if millis is not None:
        try:
            return from_epoch_millis(millis, tz).time()
        except CoercionError as exc:
            raise CoercionError("time", value, exc.reason) from exc

    match = _TIME_STRING.fullmatch(value)
    if match is not None:
        _build_offset(match, "time", value)
        return _build_time(match, "time", value)

    parsed = _parse_datetime(value, "time")
    if parsed is not None:
        return parsed.time()

    raise CoercionError("time", value, "not an ISO-8601 time")
