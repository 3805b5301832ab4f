"""Aggregate application use cases."""

from .alerts import reconcile_owner, resolve_alert_settings, update_alert_settings

__all__ = [
    "reconcile_owner",
    "resolve_alert_settings",
    "update_alert_settings",
]
