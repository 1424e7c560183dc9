"""Elapsed-time decomposition with fixed-length calendar approximations.

A month is 30 days and a year is 12 months (360 days).  Totals are taken
by successive integer division of the absolute millisecond magnitude;
remainders are each total modulo the size of the next coarser unit.

INVARIANT: Totals and remainders are never negative.  Direction is carried
separately in ``is_future``.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel

MS_PER_SECOND = 1000
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12

_ONE_MS = timedelta(milliseconds=1)


class ElapsedTotals(BaseModel):
    """Full magnitude of the elapsed time expressed in each unit."""

    model_config = {"frozen": True}

    milliseconds: int
    seconds: int
    minutes: int
    hours: int
    days: int
    months: int
    years: int
    is_future: bool = False

    @classmethod
    def from_magnitude(cls, magnitude_ms: int, *, is_future: bool = False) -> ElapsedTotals:
        """Derive every total from a non-negative millisecond magnitude."""
        seconds = magnitude_ms // MS_PER_SECOND
        minutes = seconds // SECONDS_PER_MINUTE
        hours = minutes // MINUTES_PER_HOUR
        days = hours // HOURS_PER_DAY
        months = days // DAYS_PER_MONTH
        return cls(
            milliseconds=magnitude_ms,
            seconds=seconds,
            minutes=minutes,
            hours=hours,
            days=days,
            months=months,
            years=months // MONTHS_PER_YEAR,
            is_future=is_future,
        )


class DurationBreakdown(BaseModel):
    """Remainder components of an elapsed duration.

    For a past reference each field is what is left after removing all
    coarser units.  For a future reference ``years`` is ``0`` and
    ``months`` is the total month count instead of a remainder; this
    mirrors long-standing behaviour that callers rely on.  Both views
    stay available through ``totals``.
    """

    model_config = {"frozen": True}

    reference_instant: datetime
    observation_instant: datetime
    years: int
    months: int
    days: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int
    is_future: bool
    totals: ElapsedTotals

    @classmethod
    def from_totals(
        cls,
        totals: ElapsedTotals,
        *,
        reference_instant: datetime,
        observation_instant: datetime,
    ) -> DurationBreakdown:
        if totals.is_future:
            years = 0
            months = totals.months
        else:
            years = totals.years
            months = totals.months % MONTHS_PER_YEAR
        return cls(
            reference_instant=reference_instant,
            observation_instant=observation_instant,
            years=years,
            months=months,
            days=totals.days % DAYS_PER_MONTH,
            hours=totals.hours % HOURS_PER_DAY,
            minutes=totals.minutes % MINUTES_PER_HOUR,
            seconds=totals.seconds % SECONDS_PER_MINUTE,
            milliseconds=totals.milliseconds % MS_PER_SECOND,
            is_future=totals.is_future,
            totals=totals,
        )


def measure(reference: datetime, observed: datetime) -> ElapsedTotals:
    """Compute unsigned totals between two aware instants.

    Sub-millisecond digits of the delta are dropped.
    """
    magnitude_ms = abs(observed - reference) // _ONE_MS
    return ElapsedTotals.from_magnitude(magnitude_ms, is_future=reference > observed)
