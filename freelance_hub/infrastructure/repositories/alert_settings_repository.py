"""Persistence helpers for alert settings."""

from __future__ import annotations

from sqlalchemy.orm import Session

from freelance_hub.domain.entities import AlertSettings
from freelance_hub.infrastructure.models import AlertSettingsModel


class AlertSettingsRepository:
    """Read and upsert :class:`AlertSettings` rows, one per owner."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_owner(self, owner_id: str) -> AlertSettings | None:
        model = self._get_model(owner_id)
        return self._to_entity(model) if model is not None else None

    def upsert(self, owner_id: str, settings: AlertSettings) -> AlertSettings:
        model = self._get_model(owner_id)
        if model is None:
            model = AlertSettingsModel(owner_id=owner_id)
        model.lead_days = list(settings.lead_days)
        model.payment_aging = settings.payment_aging
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(self, owner_id: str) -> AlertSettingsModel | None:
        return (
            self.session.query(AlertSettingsModel)
            .filter(AlertSettingsModel.owner_id == owner_id)
            .one_or_none()
        )

    @staticmethod
    def _to_entity(model: AlertSettingsModel) -> AlertSettings:
        return AlertSettings(
            lead_days=tuple(int(day) for day in (model.lead_days or [])),
            payment_aging=bool(model.payment_aging),
            persisted=True,
        )


__all__ = ["AlertSettingsRepository"]
