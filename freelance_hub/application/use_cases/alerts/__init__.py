"""Use cases for the deadline and payment alert engine."""

from .dedup import filter_new_candidates
from .emit import emit_alerts
from .inbox import (
    clear_alerts,
    count_unread_alerts,
    delete_alert,
    list_alerts,
    mark_alerts_read,
    mark_all_alerts_read,
)
from .reconcile import reconcile_owner
from .resolve_settings import resolve_alert_settings
from .scanners import (
    SCANNERS,
    CandidateScanner,
    scan_payment_aging,
    scan_project_deadlines,
    scan_task_due_dates,
)
from .update_settings import update_alert_settings

__all__ = [
    "CandidateScanner",
    "SCANNERS",
    "clear_alerts",
    "count_unread_alerts",
    "delete_alert",
    "emit_alerts",
    "filter_new_candidates",
    "list_alerts",
    "mark_alerts_read",
    "mark_all_alerts_read",
    "reconcile_owner",
    "resolve_alert_settings",
    "scan_payment_aging",
    "scan_project_deadlines",
    "scan_task_due_dates",
    "update_alert_settings",
]
