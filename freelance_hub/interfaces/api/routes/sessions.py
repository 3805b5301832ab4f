"""Endpoints that start and stop periodic reconciliation for a session."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from freelance_hub.infrastructure.scheduling import ReconciliationScheduler
from freelance_hub.interfaces.api.dependencies import get_owner_id, get_scheduler
from freelance_hub.interfaces.api.schemas import SessionStatus

router = APIRouter(prefix="/owners/{owner_id}/session", tags=["sessions"])


def _status(scheduler: ReconciliationScheduler, owner_id: str) -> SessionStatus:
    return SessionStatus(
        owner_id=owner_id,
        active=scheduler.is_active(owner_id),
        interval_seconds=scheduler.interval_seconds,
    )


@router.get("/", response_model=SessionStatus)
def get_session(
    owner_id: str = Depends(get_owner_id),
    scheduler: ReconciliationScheduler = Depends(get_scheduler),
) -> SessionStatus:
    return _status(scheduler, owner_id)


@router.post("/", response_model=SessionStatus, status_code=status.HTTP_202_ACCEPTED)
async def start_session(
    owner_id: str = Depends(get_owner_id),
    scheduler: ReconciliationScheduler = Depends(get_scheduler),
) -> SessionStatus:
    """Reconcile now and keep reconciling periodically until the session ends."""

    scheduler.start_session(owner_id)
    return _status(scheduler, owner_id)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
async def end_session(
    owner_id: str = Depends(get_owner_id),
    scheduler: ReconciliationScheduler = Depends(get_scheduler),
) -> Response:
    await scheduler.stop_session(owner_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
