"""Domain entities describing the outcome of a reconciliation run."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from .alert import Alert


class ReconciliationStage(str, Enum):
    """Steps a single reconciliation run walks through."""

    IDLE = "idle"
    RESOLVING_SETTINGS = "resolving_settings"
    SCANNING = "scanning"
    DEDUPING = "deduping"
    EMITTING = "emitting"


class ReconciliationOutcome(str, Enum):
    COMPLETED = "completed"
    PARTIAL = "partial"
    ABORTED = "aborted"
    SKIPPED = "skipped"


@dataclass
class ReconciliationResult:
    """Summary of one scan, dedup and emit pass for a single owner."""

    owner_id: str
    today: date
    outcome: ReconciliationOutcome = ReconciliationOutcome.COMPLETED
    emitted: list[Alert] = field(default_factory=list)
    candidates: int = 0
    scanner_failures: dict[str, str] = field(default_factory=dict)
    failed_stage: ReconciliationStage | None = None
    error: str | None = None

    @property
    def emitted_count(self) -> int:
        return len(self.emitted)


__all__ = ["ReconciliationOutcome", "ReconciliationResult", "ReconciliationStage"]
