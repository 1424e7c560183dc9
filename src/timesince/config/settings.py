"""One frozen settings object built from flags, environment and ``timesince.toml``.

Later sources lose to earlier ones:

1. command-line flags that were actually given
2. ``TIMESINCE_*`` environment variables (``__`` reaches into sections,
   e.g. ``TIMESINCE_DEFAULTS__LOCALE=fr``)
3. ``timesince.toml``, from ``--config``, ``TIMESINCE_CONFIG`` or walk-up
   discovery
4. the model defaults
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from timesince.config.discovery import find_config
from timesince.config.models import DefaultsConfig

# pydantic-settings builds sources inside __init__, so the chosen file
# travels there through a thread-local rather than a constructor argument.
_active = threading.local()


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a single TOML document."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self.toml_path = toml_path
        self._data = _read_toml(toml_path) if toml_path and toml_path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


class TimesinceSettings(BaseSettings):
    """Resolved configuration for one ``timesince`` invocation.

    Attributes:
        config_path: The TOML file that was read, or None.
        json_output: Print the full result envelope as JSON.
        quiet: Print only the computed value.
        verbose: Extra rendering detail and debug logs.
        log_json: Emit log lines as JSON.
        defaults: Format and locale used when ``since`` omits them.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TIMESINCE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_active, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> TimesinceSettings:
        """Build settings for a CLI run.

        An explicit *config_path* that does not exist means "no file";
        otherwise the file is discovered from *start*.  Flags that are
        False or None were not given on the command line and do not
        override the environment or the TOML file.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        given = {name: value for name, value in cli_flags.items() if value}
        _active.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **given)
        finally:
            _active.toml_path = None
