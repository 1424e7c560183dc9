"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ``timesince.toml`` only
contains overrides.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

from timesince.domain.formats import DEFAULT_LOCALE, TimeFormat


class DefaultsConfig(BaseModel):
    """[defaults] section — used when the CLI omits --format / --locale."""

    model_config = {"frozen": True}

    format: TimeFormat = TimeFormat.OBJECT
    locale: str = DEFAULT_LOCALE

    @field_validator("format", mode="before")
    @classmethod
    def _coerce_format(cls, value: Any) -> TimeFormat:
        return TimeFormat.coerce(value)
