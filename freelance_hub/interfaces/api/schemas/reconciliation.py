"""Pydantic models describing reconciliation runs."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from .alert import AlertRead


class ReconciliationRead(BaseModel):
    """Outcome of a single reconciliation pass."""

    owner_id: str
    today: date
    outcome: str
    candidates: int
    emitted: list[AlertRead] = Field(default_factory=list)
    scanner_failures: dict[str, str] = Field(default_factory=dict)
    failed_stage: str | None = None
    error: str | None = None


class SessionStatus(BaseModel):
    owner_id: str
    active: bool
    interval_seconds: float


__all__ = ["ReconciliationRead", "SessionStatus"]
