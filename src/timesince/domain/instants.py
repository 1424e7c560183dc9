"""Instant parsing and the clock.

Every instant handled by the package is a timezone-aware UTC ``datetime``.
Naive values are taken to be UTC already.  Numeric input is an epoch
timestamp in milliseconds.
"""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, time, timedelta

from dateutil import parser as date_parser

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

DateLike = datetime | date | str | int | float

# Fields a string leaves out come from here, never from the wall clock.
_PARSE_DEFAULT = datetime(2001, 1, 1)


class InvalidDateError(ValueError):
    """The reference date cannot be resolved to a valid instant."""

    def __init__(self, value: object = None) -> None:
        super().__init__("Invalid date input")
        self.value = value


def utcnow() -> datetime:
    """Read the system clock as an aware UTC datetime."""
    return datetime.now(UTC)


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def _from_timestamp(value: int | float) -> datetime:
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidDateError(value)
    try:
        return EPOCH + timedelta(milliseconds=value)
    except OverflowError as exc:
        raise InvalidDateError(value) from exc


def _from_string(value: str) -> datetime:
    text = value.strip()
    if not text:
        raise InvalidDateError(value)
    try:
        return _as_utc(date_parser.parse(text, default=_PARSE_DEFAULT))
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(value) from exc


def parse_instant(value: DateLike) -> datetime:
    """Resolve *value* to an aware UTC datetime.

    Accepts datetimes, dates (midnight UTC), epoch milliseconds, and any
    string python-dateutil can parse (ISO-8601, RFC 2822, ``4/1/2023``,
    ``April 1, 2023`` ...).

    Raises:
        InvalidDateError: If *value* is not a valid point in time.
    """
    # bool is an int subclass but never a timestamp.
    if isinstance(value, bool):
        raise InvalidDateError(value)
    if isinstance(value, datetime):
        try:
            return _as_utc(value)
        except OverflowError as exc:
            raise InvalidDateError(value) from exc
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=UTC)
    if isinstance(value, (int, float)):
        return _from_timestamp(value)
    if isinstance(value, str):
        return _from_string(value)
    raise InvalidDateError(value)
