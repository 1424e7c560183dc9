"""Root CLI group for timesince with global flags and command registration."""

from __future__ import annotations

import click

from timesince import __version__
from timesince.commands import register_commands
from timesince.commands._base import TimesinceGroup
from timesince.commands._context import AppContext
from timesince.config.settings import TimesinceSettings


@click.group(
    cls=TimesinceGroup,
    invoke_without_command=True,
    examples="""\
  timesince since 2020-01-01 --format relative
  timesince --json since 2023-04-01
  timesince -c ./timesince.toml since 2019-12-31""",
)
@click.version_option(version=__version__, prog_name="timesince")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the computed value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """timesince — elapsed time since (or until) a date."""
    ctx.ensure_object(dict)
    settings = TimesinceSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
