"""Read-only snapshots of the business entities inspected for alerts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

PROJECT_STATUS_NOT_STARTED = "not_started"
PROJECT_STATUS_IN_PROGRESS = "in_progress"
PROJECT_STATUS_COMPLETED = "completed"
PROJECT_STATUS_CANCELLED = "cancelled"

TASK_STATUS_PENDING = "pending"
TASK_STATUS_COMPLETED = "completed"
TASK_STATUS_CANCELLED = "cancelled"

PAYMENT_STATUS_PENDING = "pending"
PAYMENT_STATUS_CONFIRMED = "confirmed"

CLOSED_PROJECT_STATUSES = frozenset({PROJECT_STATUS_COMPLETED, PROJECT_STATUS_CANCELLED})
CLOSED_TASK_STATUSES = frozenset({TASK_STATUS_COMPLETED, TASK_STATUS_CANCELLED})


@dataclass(frozen=True)
class ProjectSnapshot:
    """Project fields needed to evaluate deadline alerts."""

    id: str
    owner_id: str
    name: str
    deadline: date | None
    status: str

    @property
    def is_open(self) -> bool:
        return self.status not in CLOSED_PROJECT_STATUSES


@dataclass(frozen=True)
class TaskSnapshot:
    """Task fields needed to evaluate due-date alerts."""

    id: str
    owner_id: str
    title: str
    due_date: date | None
    status: str

    @property
    def is_open(self) -> bool:
        return self.status not in CLOSED_TASK_STATUSES


@dataclass(frozen=True)
class PaymentSnapshot:
    """Payment fields needed to evaluate aging alerts."""

    id: str
    owner_id: str
    amount: Decimal
    created_at: datetime
    status: str = PAYMENT_STATUS_PENDING
    project_id: str | None = None

    @property
    def is_pending(self) -> bool:
        return self.status == PAYMENT_STATUS_PENDING


__all__ = [
    "CLOSED_PROJECT_STATUSES",
    "CLOSED_TASK_STATUSES",
    "PAYMENT_STATUS_CONFIRMED",
    "PAYMENT_STATUS_PENDING",
    "PROJECT_STATUS_CANCELLED",
    "PROJECT_STATUS_COMPLETED",
    "PROJECT_STATUS_IN_PROGRESS",
    "PROJECT_STATUS_NOT_STARTED",
    "PaymentSnapshot",
    "ProjectSnapshot",
    "TASK_STATUS_CANCELLED",
    "TASK_STATUS_COMPLETED",
    "TASK_STATUS_PENDING",
    "TaskSnapshot",
]
