"""Relative phrase formatting: "3 days ago", "in 2 months", "yesterday".

The calculator only needs something that turns a signed count of one unit
into a phrase.  That port has three implementations:

- :class:`EnglishPhraseFormatter`: built in, CLDR English long forms with
  the ``numeric="auto"`` idioms ("last year", "tomorrow").  No data files.
- :class:`BabelPhraseFormatter`: any CLDR locale through Babel.
- :class:`LocalePhraseFormatter`: the default; English tags go to the
  built-in formatter, everything else to Babel, and tags Babel cannot
  resolve fall back to English.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from babel import Locale, UnknownLocaleError
from babel.dates import TIMEDELTA_UNITS, format_timedelta

from timesince.domain.formats import TimeUnit

logger = logging.getLogger(__name__)

_BABEL_SECONDS_PER_UNIT: dict[str, int] = dict(TIMEDELTA_UNITS)

# (past, future) phrases for a count of exactly one.
_ENGLISH_ONE: dict[TimeUnit, tuple[str, str]] = {
    TimeUnit.YEAR: ("last year", "next year"),
    TimeUnit.MONTH: ("last month", "next month"),
    TimeUnit.DAY: ("yesterday", "tomorrow"),
}

_ENGLISH_ZERO: dict[TimeUnit, str] = {
    TimeUnit.YEAR: "this year",
    TimeUnit.MONTH: "this month",
    TimeUnit.DAY: "today",
    TimeUnit.HOUR: "this hour",
    TimeUnit.MINUTE: "this minute",
    TimeUnit.SECOND: "now",
}


@runtime_checkable
class RelativePhraseFormatter(Protocol):
    """Formats a signed count of *unit* as a phrase in *locale*.

    Negative values are in the past, positive values in the future.
    """

    def format(self, value: int, unit: TimeUnit, locale: str) -> str: ...


def primary_language(tag: str) -> str:
    """Return the lowercased language subtag of a BCP 47 or POSIX tag."""
    return tag.replace("_", "-").split("-", 1)[0].strip().lower()


class EnglishPhraseFormatter:
    """English phrases without any locale data; *locale* is ignored."""

    def format(self, value: int, unit: TimeUnit, locale: str = "en") -> str:
        unit = TimeUnit(unit)
        if value == 0:
            return _ENGLISH_ZERO[unit]
        if abs(value) == 1 and unit in _ENGLISH_ONE:
            past, future = _ENGLISH_ONE[unit]
            return future if value > 0 else past
        count = abs(value)
        noun = unit.value if count == 1 else f"{unit.value}s"
        if value > 0:
            return f"in {count} {noun}"
        return f"{count} {noun} ago"


class BabelPhraseFormatter:
    """CLDR phrases for any locale Babel ships data for.

    Always numeric: Babel exposes only the future and past patterns of
    CLDR relative-time data, not the per-offset idioms, so French gives
    "il y a 1 jour" rather than "hier".  Only English carries those
    idioms, through :class:`EnglishPhraseFormatter`.

    Raises:
        UnknownLocaleError: If Babel has no data for *locale*.
        ValueError: If *locale* is not a well-formed tag.
    """

    def __init__(self, width: str = "long") -> None:
        self.width = width

    def format(self, value: int, unit: TimeUnit, locale: str) -> str:
        unit = TimeUnit(unit)
        resolved = Locale.parse(locale.replace("-", "_"))
        # An infinite threshold pins Babel to the requested unit and count.
        return format_timedelta(
            value * _BABEL_SECONDS_PER_UNIT[unit.value],
            granularity=unit.value,
            threshold=float("inf"),
            add_direction=True,
            format=self.width,
            locale=resolved,
        )


class LocalePhraseFormatter:
    """Default formatter: built-in English, Babel for everything else."""

    def __init__(
        self,
        english: RelativePhraseFormatter | None = None,
        fallback: RelativePhraseFormatter | None = None,
    ) -> None:
        self._english = english or EnglishPhraseFormatter()
        self._babel = fallback or BabelPhraseFormatter()

    def format(self, value: int, unit: TimeUnit, locale: str) -> str:
        if primary_language(locale) == "en":
            return self._english.format(value, unit, locale)
        try:
            return self._babel.format(value, unit, locale)
        except (UnknownLocaleError, ValueError) as exc:
            logger.warning(
                "unknown_locale",
                extra={"locale": locale, "fallback": "en", "error": str(exc)},
            )
            return self._english.format(value, unit, "en")
