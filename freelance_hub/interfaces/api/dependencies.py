"""FastAPI dependency utilities."""

from fastapi import HTTPException, Path, status

from freelance_hub.domain.alert_store import AlertStore
from freelance_hub.infrastructure.alert_store import SqlAlchemyAlertStore
from freelance_hub.infrastructure.database import SessionLocal
from freelance_hub.infrastructure.scheduling import (
    ReconciliationScheduler,
    get_reconciliation_scheduler,
)


def get_owner_id(owner_id: str = Path(..., min_length=1, max_length=64)) -> str:
    """Return the owner identifier from the path, trimmed."""

    normalized = owner_id.strip()
    if not normalized:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Owner id is required",
        )
    return normalized


def get_alert_store() -> AlertStore:
    """Return the SQL-backed alert store."""

    return SqlAlchemyAlertStore(SessionLocal)


def get_scheduler() -> ReconciliationScheduler:
    """Return the process-wide reconciliation scheduler."""

    return get_reconciliation_scheduler()
