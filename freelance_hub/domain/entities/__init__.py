"""Domain entities exposed by the application."""

from .alert import (
    DEADLINE_OVERDUE,
    DEADLINE_URGENT,
    PAYMENT_AGING,
    TASK_OVERDUE,
    Alert,
    AlertCandidate,
    AlertKey,
    AlertKind,
    AlertType,
    EntityKind,
    deadline_warning,
    task_due_soon,
)
from .alert_settings import (
    DEFAULT_ALERT_SETTINGS,
    MAX_LEAD_DAYS,
    MIN_LEAD_DAYS,
    AlertSettings,
    normalize_lead_days,
)
from .reconciliation import (
    ReconciliationOutcome,
    ReconciliationResult,
    ReconciliationStage,
)
from .tracked_entity import (
    CLOSED_PROJECT_STATUSES,
    CLOSED_TASK_STATUSES,
    PAYMENT_STATUS_CONFIRMED,
    PAYMENT_STATUS_PENDING,
    PROJECT_STATUS_CANCELLED,
    PROJECT_STATUS_COMPLETED,
    PROJECT_STATUS_IN_PROGRESS,
    PROJECT_STATUS_NOT_STARTED,
    TASK_STATUS_COMPLETED,
    TASK_STATUS_PENDING,
    PaymentSnapshot,
    ProjectSnapshot,
    TaskSnapshot,
)

__all__ = [
    "Alert",
    "AlertCandidate",
    "AlertKey",
    "AlertKind",
    "AlertSettings",
    "AlertType",
    "CLOSED_PROJECT_STATUSES",
    "CLOSED_TASK_STATUSES",
    "DEADLINE_OVERDUE",
    "DEADLINE_URGENT",
    "DEFAULT_ALERT_SETTINGS",
    "EntityKind",
    "MAX_LEAD_DAYS",
    "MIN_LEAD_DAYS",
    "PAYMENT_AGING",
    "PAYMENT_STATUS_CONFIRMED",
    "PAYMENT_STATUS_PENDING",
    "PROJECT_STATUS_CANCELLED",
    "PROJECT_STATUS_COMPLETED",
    "PROJECT_STATUS_IN_PROGRESS",
    "PROJECT_STATUS_NOT_STARTED",
    "PaymentSnapshot",
    "ProjectSnapshot",
    "ReconciliationOutcome",
    "ReconciliationResult",
    "ReconciliationStage",
    "TASK_OVERDUE",
    "TASK_STATUS_COMPLETED",
    "TASK_STATUS_PENDING",
    "TaskSnapshot",
    "deadline_warning",
    "normalize_lead_days",
    "task_due_soon",
]
