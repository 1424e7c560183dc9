"""Service layer — the elapsed-time calculator and its result envelope."""

from __future__ import annotations

from timesince.services.calculator import ElapsedTimeCalculator, time_since

__all__ = ["ElapsedTimeCalculator", "time_since"]
