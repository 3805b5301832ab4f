"""Pydantic schemas exposed by the API layer."""

from .alert import AlertMarkReadRequest, AlertRead, AlertUnreadCount, AlertUpdateCount
from .alert_settings import AlertSettingsRead, AlertSettingsUpdate
from .reconciliation import ReconciliationRead, SessionStatus

__all__ = [
    "AlertMarkReadRequest",
    "AlertRead",
    "AlertSettingsRead",
    "AlertSettingsUpdate",
    "AlertUnreadCount",
    "AlertUpdateCount",
    "ReconciliationRead",
    "SessionStatus",
]
