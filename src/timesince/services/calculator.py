"""ElapsedTimeCalculator — elapsed or remaining time since a reference date.

One calculation, three kinds of answer:

- a single unit (``"days"``, ``"hours"`` ...) → the total as an ``int``,
- ``"relative"`` → a localized phrase such as ``"3 days ago"``,
- anything else → a :class:`DurationBreakdown`.

The observation instant is read once per call (or injected via ``now``)
and every unit is derived from that single reading.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from timesince.domain.breakdown import DurationBreakdown, ElapsedTotals, measure
from timesince.domain.formats import UNIT_FORMATS, FormatRequest, TimeFormat, TimeUnit
from timesince.domain.instants import DateLike, InvalidDateError, parse_instant, utcnow
from timesince.i18n.relative import LocalePhraseFormatter, RelativePhraseFormatter
from timesince.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

NOW_PHRASE = "now"

# Coarsest first: the relative phrase uses the first non-zero total.
_RELATIVE_UNITS: tuple[tuple[TimeUnit, str], ...] = (
    (TimeUnit.YEAR, "years"),
    (TimeUnit.MONTH, "months"),
    (TimeUnit.DAY, "days"),
    (TimeUnit.HOUR, "hours"),
    (TimeUnit.MINUTE, "minutes"),
    (TimeUnit.SECOND, "seconds"),
)

Elapsed = DurationBreakdown | int | str


class ElapsedTimeCalculator:
    """Computes elapsed time and dispatches on the requested format.

    Usage::

        calc = ElapsedTimeCalculator()
        calc.compute("2020-01-01", FormatRequest(format="days"))
        calc.compute("2023-04-01", {"format": "relative", "locale": "fr"})
    """

    def __init__(self, formatter: RelativePhraseFormatter | None = None) -> None:
        self._formatter = formatter or LocalePhraseFormatter()

    def compute(
        self,
        reference: DateLike,
        request: FormatRequest | Mapping[str, Any] | None = None,
        *,
        now: DateLike | None = None,
    ) -> Elapsed:
        """Return the time between *reference* and *now* in the requested shape.

        Raises:
            InvalidDateError: If *reference* (or an injected *now*) is not
                a valid instant.
        """
        request = FormatRequest.from_options(request)
        try:
            reference_instant = parse_instant(reference)
        except InvalidDateError:
            logger.debug("invalid_reference", extra={"value": repr(reference)})
            raise
        observation_instant = utcnow() if now is None else parse_instant(now)

        totals = measure(reference_instant, observation_instant)
        logger.debug(
            "elapsed_computed",
            extra={
                "format": request.format.value,
                "locale": request.locale,
                "is_future": totals.is_future,
                "magnitude_ms": totals.milliseconds,
            },
        )

        match request.format:
            case TimeFormat.MILLISECONDS:
                return totals.milliseconds
            case TimeFormat.SECONDS:
                return totals.seconds
            case TimeFormat.MINUTES:
                return totals.minutes
            case TimeFormat.HOURS:
                return totals.hours
            case TimeFormat.DAYS:
                return totals.days
            case TimeFormat.MONTHS:
                return totals.months
            case TimeFormat.YEARS:
                return totals.years
            case TimeFormat.RELATIVE:
                return self.relative_phrase(totals, request.locale)
            case _:
                return DurationBreakdown.from_totals(
                    totals,
                    reference_instant=reference_instant,
                    observation_instant=observation_instant,
                )

    def relative_phrase(self, totals: ElapsedTotals, locale: str) -> str:
        """Phrase the largest non-zero total, or ``"now"`` if all are zero."""
        sign = 1 if totals.is_future else -1
        for unit, field in _RELATIVE_UNITS:
            count = getattr(totals, field)
            if count:
                return self._formatter.format(sign * count, unit, locale)
        return NOW_PHRASE

    # ── ServiceResult adapters (CLI) ─────────────────────────────────────

    def evaluate(
        self,
        reference: DateLike,
        request: FormatRequest | Mapping[str, Any] | None = None,
        *,
        now: DateLike | None = None,
    ) -> ServiceResult:
        """Run :meth:`compute` and wrap the outcome in a ServiceResult.

        Invalid input becomes ``ok=False`` with code ``INVALID_DATE``.
        """
        op = "time_since"
        request = FormatRequest.from_options(request)
        try:
            if now is not None:
                now = parse_instant(now)
            value = self.compute(reference, request, now=now)
        except InvalidDateError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_DATE",
                    message=f"{exc}: {exc.value!r}",
                    detail={"value": str(exc.value)},
                ),
            )

        data: dict[str, Any] = {
            "reference": str(reference),
            "format": request.format.value,
            "locale": request.locale,
        }
        if isinstance(value, DurationBreakdown):
            data["value"] = value.model_dump(mode="json")
        else:
            data["value"] = value
        return ServiceResult(ok=True, op=op, data=data)

    @staticmethod
    def list_formats() -> ServiceResult:
        """Describe every supported format tag."""
        items = []
        for fmt in TimeFormat:
            if fmt in UNIT_FORMATS:
                returns = "integer total"
            elif fmt is TimeFormat.RELATIVE:
                returns = "phrase"
            else:
                returns = "breakdown"
            items.append({"format": fmt.value, "returns": returns})
        return ServiceResult(
            ok=True,
            op="list_formats",
            data={"items": items, "default": TimeFormat.OBJECT.value},
        )


def time_since(
    date: DateLike,
    options: FormatRequest | Mapping[str, Any] | None = None,
    *,
    format: str | None = None,  # noqa: A002
    locale: str | None = None,
    now: DateLike | None = None,
    formatter: RelativePhraseFormatter | None = None,
) -> Elapsed:
    """Elapsed time since *date* (or remaining time until it).

    ``format`` and ``locale`` keywords override the same keys in *options*.

    Examples::

        time_since("2020-01-01", format="days")
        time_since("2020-01-01", {"format": "relative", "locale": "fr"})

    Raises:
        InvalidDateError: If *date* is not a valid instant.
    """
    request = FormatRequest.from_options(options, format=format, locale=locale)
    return ElapsedTimeCalculator(formatter).compute(date, request, now=now)
