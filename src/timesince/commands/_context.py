"""Per-invocation state shared by every subcommand.

The root group builds one :class:`AppContext` from the resolved settings
and hands it down through ``@click.pass_obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timesince.config.logging import configure_logging
from timesince.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from timesince.config.settings import TimesinceSettings
    from timesince.services.result import ServiceResult


class AppContext:
    """Resolved settings plus the single exit point for command results."""

    def __init__(self, settings: TimesinceSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit 1 if it failed.

        Successful output goes to stdout.  Failures, and warnings outside
        JSON mode, go to stderr.
        """
        mode = self.output_settings
        rendered = format_result(result, settings=mode)
        if not result.ok:
            click.echo(rendered, err=True)
            raise SystemExit(1)

        click.echo(rendered)
        if not mode.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
