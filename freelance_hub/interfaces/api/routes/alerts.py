"""Endpoints for an owner's alert inbox and on-demand reconciliation."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from freelance_hub.application.use_cases.alerts import (
    clear_alerts as clear_alerts_uc,
    count_unread_alerts as count_unread_alerts_uc,
    delete_alert as delete_alert_uc,
    list_alerts as list_alerts_uc,
    mark_alerts_read as mark_alerts_read_uc,
    mark_all_alerts_read as mark_all_alerts_read_uc,
)
from freelance_hub.domain.entities import Alert, EntityKind, ReconciliationResult
from freelance_hub.infrastructure.database import get_db
from freelance_hub.infrastructure.scheduling import ReconciliationScheduler
from freelance_hub.interfaces.api.dependencies import get_owner_id, get_scheduler
from freelance_hub.interfaces.api.schemas import (
    AlertMarkReadRequest,
    AlertRead,
    AlertUnreadCount,
    AlertUpdateCount,
    ReconciliationRead,
)

router = APIRouter(prefix="/owners/{owner_id}/alerts", tags=["alerts"])


def _alert_to_schema(alert: Alert) -> AlertRead:
    return AlertRead(
        id=alert.id or 0,
        owner_id=alert.owner_id,
        kind=alert.kind.code,
        entity_kind=alert.entity_kind.value,
        entity_id=alert.entity_id,
        title=alert.title,
        message=alert.message,
        is_read=alert.is_read,
        created_at=alert.created_at,
        read_at=alert.read_at,
    )


def _result_to_schema(result: ReconciliationResult) -> ReconciliationRead:
    return ReconciliationRead(
        owner_id=result.owner_id,
        today=result.today,
        outcome=result.outcome.value,
        candidates=result.candidates,
        emitted=[_alert_to_schema(alert) for alert in result.emitted],
        scanner_failures=dict(result.scanner_failures),
        failed_stage=result.failed_stage.value if result.failed_stage else None,
        error=result.error,
    )


@router.get("/", response_model=list[AlertRead])
def list_alerts(
    owner_id: str = Depends(get_owner_id),
    entity_kind: EntityKind | None = Query(default=None),
    unread_only: bool = Query(default=False),
    limit: int = Query(default=50, ge=1, le=500),
    db: Session = Depends(get_db),
) -> list[AlertRead]:
    """Return the most recent alerts for the owner."""

    alerts = list_alerts_uc(
        db,
        owner_id,
        entity_kind=entity_kind,
        unread_only=unread_only,
        limit=limit,
    )
    return [_alert_to_schema(alert) for alert in alerts]


@router.get("/unread-count", response_model=AlertUnreadCount)
def unread_count(
    owner_id: str = Depends(get_owner_id),
    db: Session = Depends(get_db),
) -> AlertUnreadCount:
    return AlertUnreadCount(unread=count_unread_alerts_uc(db, owner_id))


@router.post("/read", response_model=AlertUpdateCount)
def mark_alerts_read(
    payload: AlertMarkReadRequest,
    owner_id: str = Depends(get_owner_id),
    db: Session = Depends(get_db),
) -> AlertUpdateCount:
    """Mark the given alerts as read."""

    updated = mark_alerts_read_uc(db, owner_id, payload.unique_ids())
    return AlertUpdateCount(updated=updated)


@router.post("/read-all", response_model=AlertUpdateCount)
def mark_all_alerts_read(
    owner_id: str = Depends(get_owner_id),
    db: Session = Depends(get_db),
) -> AlertUpdateCount:
    return AlertUpdateCount(updated=mark_all_alerts_read_uc(db, owner_id))


@router.delete("/{alert_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_alert(
    alert_id: int,
    owner_id: str = Depends(get_owner_id),
    db: Session = Depends(get_db),
) -> Response:
    """Delete one alert. The same alert is not emitted again afterwards."""

    try:
        delete_alert_uc(db, owner_id, alert_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
def clear_alerts(
    owner_id: str = Depends(get_owner_id),
    db: Session = Depends(get_db),
) -> Response:
    clear_alerts_uc(db, owner_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/reconcile", response_model=ReconciliationRead)
async def reconcile_alerts(
    owner_id: str = Depends(get_owner_id),
    scheduler: ReconciliationScheduler = Depends(get_scheduler),
) -> ReconciliationRead:
    """Run a reconciliation pass now and report what it emitted."""

    result = await scheduler.reconcile_now(owner_id)
    return _result_to_schema(result)
