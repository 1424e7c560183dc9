"""Click classes that carry an eager ``--examples`` flag.

``--help`` stays short; ``timesince since --examples`` prints worked
invocations and exits before any argument validation runs.
"""

from __future__ import annotations

import inspect
from typing import Any

import click


class _ExamplesMixin:
    """Adds ``--examples`` to any Click command that was given example text."""

    examples: str | None

    def _install_examples(self, examples: str | None) -> None:
        self.examples = inspect.cleandoc(examples) if examples else None
        if self.examples is None:
            return
        self.params.append(  # type: ignore[attr-defined]
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=self._print_examples,
                help="Show usage examples and exit.",
            )
        )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class TimesinceCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)


class TimesinceGroup(_ExamplesMixin, click.Group):
    """Root group; subcommands default to :class:`TimesinceCommand`."""

    command_class = TimesinceCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)
