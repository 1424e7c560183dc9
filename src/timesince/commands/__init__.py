"""Subcommand modules for timesince.

Provides register_commands() which uses deferred imports to keep
``timesince --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from timesince.commands.formats import formats
    from timesince.commands.since import since

    cli.add_command(since)
    cli.add_command(formats)
