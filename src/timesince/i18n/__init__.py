"""Locale-aware phrase formatting."""

from __future__ import annotations

from timesince.i18n.relative import (
    BabelPhraseFormatter,
    EnglishPhraseFormatter,
    LocalePhraseFormatter,
    RelativePhraseFormatter,
)

__all__ = [
    "BabelPhraseFormatter",
    "EnglishPhraseFormatter",
    "LocalePhraseFormatter",
    "RelativePhraseFormatter",
]
