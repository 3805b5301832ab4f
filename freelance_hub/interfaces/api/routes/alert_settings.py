"""Endpoints for reading and saving alert settings."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from freelance_hub.application.use_cases.alerts import (
    resolve_alert_settings,
    update_alert_settings,
)
from freelance_hub.domain.alert_store import AlertStore, StorageUnavailable
from freelance_hub.domain.entities import AlertSettings
from freelance_hub.interfaces.api.dependencies import get_alert_store, get_owner_id
from freelance_hub.interfaces.api.schemas import AlertSettingsRead, AlertSettingsUpdate

router = APIRouter(prefix="/owners/{owner_id}/alert-settings", tags=["alert-settings"])


def _settings_to_schema(settings: AlertSettings) -> AlertSettingsRead:
    return AlertSettingsRead(
        lead_days=list(settings.lead_days),
        payment_aging=settings.payment_aging,
        persisted=settings.persisted,
    )


@router.get("/", response_model=AlertSettingsRead)
def get_alert_settings(
    owner_id: str = Depends(get_owner_id),
    store: AlertStore = Depends(get_alert_store),
) -> AlertSettingsRead:
    """Return the stored settings, or the defaults when none were saved."""

    try:
        settings = resolve_alert_settings(store, owner_id)
    except StorageUnavailable as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc
    return _settings_to_schema(settings)


@router.put("/", response_model=AlertSettingsRead)
def put_alert_settings(
    payload: AlertSettingsUpdate,
    owner_id: str = Depends(get_owner_id),
    store: AlertStore = Depends(get_alert_store),
) -> AlertSettingsRead:
    """Create or replace the owner's settings."""

    try:
        settings = update_alert_settings(
            store,
            owner_id,
            lead_days=payload.lead_days,
            payment_aging=payload.payment_aging,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except StorageUnavailable as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc
    return _settings_to_schema(settings)
