"""Use case for saving an owner's alert preferences."""

from collections.abc import Iterable

from freelance_hub.domain.alert_store import AlertStore
from freelance_hub.domain.entities import AlertSettings, normalize_lead_days


def update_alert_settings(
    store: AlertStore,
    owner_id: str,
    *,
    lead_days: Iterable[int],
    payment_aging: bool,
) -> AlertSettings:
    """Validate and upsert the alert settings of ``owner_id``.

    Raises ``ValueError`` when a lead-time is out of range.
    """

    settings = AlertSettings(
        lead_days=normalize_lead_days(lead_days),
        payment_aging=bool(payment_aging),
        persisted=True,
    )
    return store.save_settings(owner_id, settings)
