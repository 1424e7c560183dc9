"""Command: list the supported output formats."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timesince.commands._base import TimesinceCommand

if TYPE_CHECKING:
    from timesince.commands._context import AppContext


@click.command(
    cls=TimesinceCommand,
    examples="""\
  timesince formats
  timesince -q formats
  timesince --json formats""",
)
@click.pass_obj
def formats(app: AppContext) -> None:
    """List the output formats accepted by --format."""
    from timesince.services.calculator import ElapsedTimeCalculator

    app.emit(ElapsedTimeCalculator.list_formats())
