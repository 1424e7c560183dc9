"""Command: elapsed (or remaining) time since a date."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timesince.commands._base import TimesinceCommand
from timesince.domain.formats import TimeFormat

if TYPE_CHECKING:
    from timesince.commands._context import AppContext


@click.command(
    cls=TimesinceCommand,
    examples="""\
  timesince since 2020-01-01
  timesince since 2020-01-01 --format days
  timesince since "April 1, 2023" --format relative --locale fr
  timesince since 2024-03-31T23:59:50Z --format seconds --now 2024-04-01T00:00:00Z
  timesince -q since 2025-01-01 --format months
  timesince --json since 2023-04-01""",
)
@click.argument("date")
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice([f.value for f in TimeFormat], case_sensitive=False),
    default=None,
    help="Output format (default from config: object).",
)
@click.option("-l", "--locale", default=None, help="Language tag for relative phrases.")
@click.option("--now", default=None, help="Pin the observation instant instead of the clock.")
@click.pass_obj
def since(app: AppContext, date: str, fmt: str | None, locale: str | None, now: str | None) -> None:
    """Show the time elapsed since DATE (or remaining until it)."""
    from timesince.domain.formats import FormatRequest
    from timesince.services.calculator import ElapsedTimeCalculator

    defaults = app.settings.defaults
    request = FormatRequest.from_options(defaults.model_dump(), format=fmt, locale=locale)
    app.emit(ElapsedTimeCalculator().evaluate(date, request, now=now))
