"""ServiceResult and ServiceError — the envelope the CLI renders.

The library API returns plain values; the CLI wraps each outcome in a
ServiceResult so human, quiet, and JSON output share one code path.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one CLI operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"time_since"``, ``"list_formats"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
