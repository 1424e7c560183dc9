"""Output format tags and the per-call format request.

``TimeFormat`` is the closed set of shapes a calculation can return.
Anything outside that set silently resolves to the structured breakdown,
so callers never get an error for an unknown tag.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, field_validator

DEFAULT_LOCALE = "en"


class TimeFormat(StrEnum):
    """Shape of the value returned by a calculation."""

    OBJECT = "object"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    MONTHS = "months"
    YEARS = "years"
    RELATIVE = "relative"

    @classmethod
    def coerce(cls, value: Any) -> TimeFormat:
        """Resolve *value* to a member, falling back to ``OBJECT``.

        Matching is exact: ``"Days"`` is not ``"days"``.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.OBJECT


# Single-unit formats, each answered with the matching total.
UNIT_FORMATS: frozenset[TimeFormat] = frozenset(
    {
        TimeFormat.MILLISECONDS,
        TimeFormat.SECONDS,
        TimeFormat.MINUTES,
        TimeFormat.HOURS,
        TimeFormat.DAYS,
        TimeFormat.MONTHS,
        TimeFormat.YEARS,
    }
)


class TimeUnit(StrEnum):
    """Units a relative phrase can be expressed in, coarsest first."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


class FormatRequest(BaseModel):
    """Formatting options for a single calculation.

    Attributes:
        format: Requested output shape. Unknown tags become ``OBJECT``.
        locale: BCP 47 language tag used for relative phrases.
    """

    model_config = {"frozen": True}

    format: TimeFormat = TimeFormat.OBJECT
    locale: str = DEFAULT_LOCALE

    @field_validator("format", mode="before")
    @classmethod
    def _coerce_format(cls, value: Any) -> TimeFormat:
        if value is None:
            return TimeFormat.OBJECT
        return TimeFormat.coerce(value)

    @field_validator("locale", mode="before")
    @classmethod
    def _default_locale(cls, value: Any) -> str:
        if value is None:
            return DEFAULT_LOCALE
        text = str(value).strip()
        return text or DEFAULT_LOCALE

    @classmethod
    def from_options(
        cls,
        options: FormatRequest | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> FormatRequest:
        """Merge caller options and keyword overrides over the defaults.

        ``None`` values never override anything, so partial input keeps
        the defaults for whatever it leaves out.
        """
        if isinstance(options, FormatRequest):
            data: dict[str, Any] = options.model_dump()
        else:
            data = {k: v for k, v in (options or {}).items() if v is not None}
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(data)
