"""Use case writing deduplicated candidates as alert records."""

from collections.abc import Sequence

from freelance_hub.domain.alert_store import AlertStore
from freelance_hub.domain.entities import Alert, AlertCandidate


def emit_alerts(
    store: AlertStore, owner_id: str, candidates: Sequence[AlertCandidate]
) -> list[Alert]:
    """Insert ``candidates`` in one batch; nothing is written for an empty list."""

    if not candidates:
        return []
    return store.insert_alerts(owner_id, list(candidates))
