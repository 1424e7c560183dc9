"""Tests for ElapsedTimeCalculator and time_since()."""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from timesince import time_since
from timesince.domain.breakdown import DurationBreakdown
from timesince.domain.formats import FormatRequest, TimeFormat, TimeUnit
from timesince.domain.instants import InvalidDateError
from timesince.services.calculator import NOW_PHRASE, ElapsedTimeCalculator

NOW = datetime(2024, 4, 1, tzinfo=UTC)


class StubFormatter:
    def __init__(self) -> None:
        self.calls: list[tuple[int, TimeUnit, str]] = []

    def format(self, value: int, unit: TimeUnit, locale: str) -> str:
        self.calls.append((value, unit, locale))
        return f"{value} {unit.value} @{locale}"


# ── Input handling ────────────────────────────────────────────────────


class TestInputHandling:
    def test_string_input(self) -> None:
        result = time_since("2019-12-31", now=NOW)
        assert isinstance(result, DurationBreakdown)
        assert result.years == 4
        assert result.months == 3
        assert result.days < 30

    def test_datetime_input(self) -> None:
        result = time_since(datetime(2019, 12, 31, tzinfo=UTC), now=NOW)
        assert result.years == 4
        assert result.months == 3

    def test_date_input(self) -> None:
        result = time_since(date(2019, 12, 31), now=NOW)
        assert result.years == 4

    @pytest.mark.parametrize("text", ["2023-04-01T00:00:00Z", "4/1/2023", "April 1, 2023"])
    def test_string_formats(self, text: str) -> None:
        result = time_since(text, now=NOW)
        assert result.years == 1
        assert result.months == 0

    def test_timestamp_input(self) -> None:
        ms = int(datetime(2023, 4, 1, tzinfo=UTC).timestamp() * 1000)
        result = time_since(ms, now=NOW)
        assert result.years == 1
        assert result.months == 0

    def test_now_accepts_strings(self) -> None:
        assert time_since("2024-03-31T23:59:50Z", format="seconds", now="2024-04-01T00:00:00Z") == 10

    def test_live_clock_when_now_omitted(self) -> None:
        result = time_since("2000-01-01")
        assert result.years >= 24
        assert result.observation_instant.tzinfo is not None


# ── Errors ────────────────────────────────────────────────────────────


class TestErrors:
    def test_invalid_string(self) -> None:
        with pytest.raises(InvalidDateError, match="Invalid date input"):
            time_since("not-a-date", now=NOW)

    def test_nan_timestamp(self) -> None:
        with pytest.raises(InvalidDateError):
            time_since(float("nan"), now=NOW)

    def test_invalid_now(self) -> None:
        with pytest.raises(InvalidDateError):
            time_since("2024-01-01", now="whenever")

    def test_invalid_date_raised_before_formatting(self) -> None:
        stub = StubFormatter()
        with pytest.raises(InvalidDateError):
            time_since("garbage", format="relative", now=NOW, formatter=stub)
        assert stub.calls == []


# ── Single-unit formats ───────────────────────────────────────────────


class TestUnitFormats:
    @pytest.mark.parametrize(
        "reference,fmt,expected",
        [
            ("2024-03-31T23:59:59Z", "milliseconds", 1000),
            ("2024-03-31T23:59:50Z", "seconds", 10),
            ("2024-03-31T23:50:00Z", "minutes", 10),
            ("2024-03-31T22:00:00Z", "hours", 2),
            ("2024-03-30T00:00:00Z", "days", 2),
            ("2023-01-01T00:00:00Z", "months", 15),
            ("2020-01-01T00:00:00Z", "years", 4),
        ],
    )
    def test_totals(self, reference: str, fmt: str, expected: int) -> None:
        assert time_since(reference, format=fmt, now=NOW) == expected

    def test_future_totals_are_positive(self) -> None:
        days = time_since("2025-01-01T00:00:00Z", format="days", now=NOW)
        assert days == 275

    def test_options_mapping(self) -> None:
        assert time_since("2024-03-30T00:00:00Z", {"format": "days"}, now=NOW) == 2

    def test_format_request(self) -> None:
        req = FormatRequest(format=TimeFormat.HOURS)
        assert time_since("2024-03-31T22:00:00Z", req, now=NOW) == 2

    def test_keyword_overrides_options(self) -> None:
        result = time_since("2024-03-30T00:00:00Z", {"format": "hours"}, format="days", now=NOW)
        assert result == 2


# ── Object format ─────────────────────────────────────────────────────


class TestObjectFormat:
    def test_all_components_present(self) -> None:
        result = time_since("2023-12-31", now=NOW)
        assert isinstance(result, DurationBreakdown)
        for name in ("years", "months", "days", "hours", "minutes", "seconds", "milliseconds"):
            assert isinstance(getattr(result, name), int)
        assert result.years == 0
        assert result.months == 3

    def test_instants(self) -> None:
        result = time_since(datetime(2023, 12, 31, tzinfo=UTC), now=NOW)
        assert result.reference_instant == datetime(2023, 12, 31, tzinfo=UTC)
        assert result.observation_instant == NOW

    def test_explicit_object(self) -> None:
        result = time_since("2023-04-01T00:00:00Z", format="object", now=NOW)
        assert result.years == 1
        assert result.months == 0

    @pytest.mark.parametrize("fmt", ["weeks", "Days", ""])
    def test_unrecognized_format_returns_breakdown(self, fmt: str) -> None:
        result = time_since("2023-04-01T00:00:00Z", {"format": fmt}, now=NOW)
        assert isinstance(result, DurationBreakdown)

    def test_future_breakdown(self) -> None:
        result = time_since("2025-01-01T00:00:00Z", now=NOW)
        assert result.is_future is True
        assert result.years == 0
        assert result.months == 9

    def test_same_instant(self) -> None:
        now = datetime(2024, 4, 1, 12, tzinfo=UTC)
        result = time_since("2024-04-01T12:00:00Z", now=now)
        assert (result.years, result.months, result.days) == (0, 0, 0)
        assert (result.hours, result.minutes, result.seconds, result.milliseconds) == (0, 0, 0, 0)
        assert time_since("2024-04-01T12:00:00Z", format="days", now=now) == 0

    def test_very_old_date(self) -> None:
        result = time_since("1900-01-01T00:00:00Z", now=NOW)
        assert result.years > 100

    def test_leap_year(self) -> None:
        result = time_since("2024-02-29T00:00:00Z", now="2024-03-01T00:00:00Z")
        assert result.days == 1
        later = time_since("2024-02-29T00:00:00Z", now="2025-03-01T00:00:00Z")
        assert later.years == 1
        assert later.days < 10

    def test_timezones_resolve_to_same_instant(self) -> None:
        utc = time_since("2023-04-01T00:00:00Z", now=NOW)
        est = time_since("2023-03-31T20:00:00-04:00", now=NOW)
        jst = time_since("2023-04-01T09:00:00+09:00", now=NOW)
        assert utc == est == jst


# ── Relative format ───────────────────────────────────────────────────


class TestRelativeFormat:
    def test_default_locale(self) -> None:
        assert time_since("2023-04-01T00:00:00Z", format="relative", now=NOW) == "last year"

    def test_french(self) -> None:
        result = time_since("2020-01-01T00:00:00Z", format="relative", locale="fr", now=NOW)
        assert result == "il y a 4 ans"

    @pytest.mark.parametrize(
        "reference,now,expected",
        [
            ("2020-04-01T00:00:00Z", "2024-04-01T00:00:00Z", "4 years ago"),
            ("2024-01-01T00:00:00Z", "2024-04-01T00:00:00Z", "3 months ago"),
            ("2024-03-30T00:00:00Z", "2024-04-01T00:00:00Z", "2 days ago"),
            ("2024-04-01T08:00:00Z", "2024-04-01T10:00:00Z", "2 hours ago"),
            ("2024-04-01T00:15:00Z", "2024-04-01T00:30:00Z", "15 minutes ago"),
            ("2024-04-01T00:00:10Z", "2024-04-01T00:00:30Z", "20 seconds ago"),
        ],
    )
    def test_largest_unit_selected(self, reference: str, now: str, expected: str) -> None:
        assert time_since(reference, format="relative", now=now) == expected

    @pytest.mark.parametrize("tag", ["fr", "es", "de", "invalid-locale"])
    def test_locales_return_strings(self, tag: str) -> None:
        result = time_since("2023-04-01T00:00:00Z", format="relative", locale=tag, now=NOW)
        assert isinstance(result, str)
        assert result

    def test_future_phrase(self) -> None:
        assert time_since("2025-01-01T00:00:00Z", format="relative", now=NOW) == "in 9 months"

    def test_very_old_date_phrase(self) -> None:
        assert time_since("1900-01-01T00:00:00Z", format="relative", now=NOW).endswith("years ago")

    def test_now(self) -> None:
        assert time_since(NOW, format="relative", now=NOW) == NOW_PHRASE == "now"

    def test_sub_second_is_now(self) -> None:
        assert time_since("2024-03-31T23:59:59.500Z", format="relative", now=NOW) == "now"

    def test_signed_value_passed_to_formatter(self) -> None:
        stub = StubFormatter()
        calc = ElapsedTimeCalculator(stub)
        assert calc.compute("2024-03-30", {"format": "relative", "locale": "xx"}, now=NOW) == (
            "-2 day @xx"
        )
        assert calc.compute("2024-04-03", {"format": "relative"}, now=NOW) == "2 day @en"
        assert stub.calls == [(-2, TimeUnit.DAY, "xx"), (2, TimeUnit.DAY, "en")]


# ── Consistency across formats ────────────────────────────────────────


class TestConsistency:
    @pytest.mark.parametrize(
        "reference",
        ["1999-06-15T08:30:12.345Z", "2023-11-05T17:00:00Z", "2024-03-31T23:59:59.001Z"],
    )
    def test_all_formats_agree(self, reference: str) -> None:
        calc = ElapsedTimeCalculator()
        totals = {
            fmt: calc.compute(reference, {"format": fmt}, now=NOW)
            for fmt in ("milliseconds", "seconds", "minutes", "hours", "days", "months", "years")
        }
        b = calc.compute(reference, {"format": "object"}, now=NOW)

        assert totals["seconds"] == totals["milliseconds"] // 1000
        assert totals["minutes"] == totals["seconds"] // 60
        assert totals["hours"] == totals["minutes"] // 60
        assert totals["days"] == totals["hours"] // 24
        assert totals["months"] == totals["days"] // 30
        assert totals["years"] == totals["months"] // 12

        assert b.years == totals["years"]
        assert b.months == totals["months"] % 12
        assert b.days == totals["days"] % 30
        assert b.hours == totals["hours"] % 24
        assert b.minutes == totals["minutes"] % 60
        assert b.seconds == totals["seconds"] % 60
        assert b.milliseconds == totals["milliseconds"] % 1000


# ── Side effects ──────────────────────────────────────────────────────


class TestNoOutputWithoutLoggingConfigured:
    def test_computation_prints_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        time_since("2020-01-01", format="days", now=NOW)
        time_since("2020-01-01", format="relative", locale="fr", now=NOW)
        time_since("2020-01-01", now=NOW)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_rejected_input_prints_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(InvalidDateError):
            time_since("not-a-date", now=NOW)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


# ── ServiceResult adapters ────────────────────────────────────────────


class TestEvaluate:
    def test_ok_integer(self) -> None:
        result = ElapsedTimeCalculator().evaluate("2024-03-30", {"format": "days"}, now=NOW)
        assert result.ok is True
        assert result.op == "time_since"
        assert result.data["value"] == 2
        assert result.data["format"] == "days"
        assert result.data["locale"] == "en"

    def test_ok_breakdown_is_json_ready(self) -> None:
        result = ElapsedTimeCalculator().evaluate("2023-04-01T00:00:00Z", now=NOW)
        value = result.data["value"]
        assert value["years"] == 1
        assert value["observation_instant"].startswith("2024-04-01T00:00:00")
        assert result.model_dump_json()

    def test_invalid_reference(self) -> None:
        result = ElapsedTimeCalculator().evaluate("not-a-date", now=NOW)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_DATE"
        assert "not-a-date" in result.error.message

    def test_invalid_now(self) -> None:
        result = ElapsedTimeCalculator().evaluate("2024-01-01", now="sometime")
        assert result.ok is False
        assert result.error.detail["value"] == "sometime"

    def test_list_formats(self) -> None:
        result = ElapsedTimeCalculator.list_formats()
        assert result.ok is True
        names = [item["format"] for item in result.data["items"]]
        assert names == [f.value for f in TimeFormat]
        assert result.data["default"] == "object"
