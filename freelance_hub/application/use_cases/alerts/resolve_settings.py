"""Use case for resolving the alert settings an owner is scanned with."""

from freelance_hub.domain.alert_store import AlertStore
from freelance_hub.domain.entities import DEFAULT_ALERT_SETTINGS, AlertSettings


def resolve_alert_settings(store: AlertStore, owner_id: str) -> AlertSettings:
    """Return stored settings, or the defaults without writing them back."""

    stored = store.get_settings(owner_id)
    if stored is None:
        return DEFAULT_ALERT_SETTINGS
    return stored
