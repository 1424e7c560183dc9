"""timesince — elapsed time since (or until) a date.

Basic usage::

    from timesince import time_since

    time_since("2020-01-01")                          # DurationBreakdown
    time_since("2020-01-01", format="days")           # int
    time_since("2023-04-01", format="relative")       # "last year"
"""

from __future__ import annotations

__version__ = "0.1.0"

from timesince.domain.breakdown import DurationBreakdown, ElapsedTotals
from timesince.domain.formats import FormatRequest, TimeFormat, TimeUnit
from timesince.domain.instants import InvalidDateError
from timesince.i18n.relative import (
    BabelPhraseFormatter,
    EnglishPhraseFormatter,
    LocalePhraseFormatter,
    RelativePhraseFormatter,
)
from timesince.services.calculator import ElapsedTimeCalculator, time_since

__all__ = [
    "BabelPhraseFormatter",
    "DurationBreakdown",
    "ElapsedTimeCalculator",
    "ElapsedTotals",
    "EnglishPhraseFormatter",
    "FormatRequest",
    "InvalidDateError",
    "LocalePhraseFormatter",
    "RelativePhraseFormatter",
    "TimeFormat",
    "TimeUnit",
    "__version__",
    "time_since",
]
