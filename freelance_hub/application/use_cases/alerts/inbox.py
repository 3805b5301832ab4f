"""Use cases for reading and tidying an owner's alert inbox.

Deleting alerts never touches the emission ledger, so a deleted alert is not
emitted again by later reconciliations.
"""

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from freelance_hub.domain.entities import Alert, EntityKind
from freelance_hub.infrastructure.repositories import AlertRepository


def list_alerts(
    session: Session,
    owner_id: str,
    *,
    entity_kind: EntityKind | None = None,
    unread_only: bool = False,
    limit: int | None = 50,
) -> Sequence[Alert]:
    """Return the newest alerts of ``owner_id``, optionally filtered."""

    return AlertRepository(session).list_for_owner(
        owner_id, entity_kind=entity_kind, unread_only=unread_only, limit=limit
    )


def count_unread_alerts(session: Session, owner_id: str) -> int:
    return AlertRepository(session).count_unread(owner_id)


def mark_alerts_read(session: Session, owner_id: str, alert_ids: Iterable[int]) -> int:
    """Mark the given alerts as read and return how many changed."""

    return AlertRepository(session).mark_as_read(alert_ids, owner_id=owner_id)


def mark_all_alerts_read(session: Session, owner_id: str) -> int:
    return AlertRepository(session).mark_all_as_read(owner_id)


def delete_alert(session: Session, owner_id: str, alert_id: int) -> None:
    """Delete one alert or raise ``ValueError`` when it does not exist."""

    if not AlertRepository(session).delete(alert_id, owner_id=owner_id):
        raise ValueError("Alert not found")


def clear_alerts(session: Session, owner_id: str) -> int:
    return AlertRepository(session).delete_all_for_owner(owner_id)
