"""Persistence helpers for alert entities and the emission ledger."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from freelance_hub.domain.entities import (
    Alert,
    AlertCandidate,
    AlertKey,
    AlertKind,
    EntityKind,
)
from freelance_hub.infrastructure.models import AlertEmissionModel, AlertModel
from freelance_hub.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

logger = logging.getLogger(__name__)


class AlertRepository:
    """Provide CRUD operations for :class:`Alert` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_owner(
        self,
        owner_id: str,
        *,
        entity_kind: EntityKind | None = None,
        unread_only: bool = False,
        limit: int | None = 50,
    ) -> Sequence[Alert]:
        query = self.session.query(AlertModel)
        query = query.filter(AlertModel.owner_id == owner_id)
        if entity_kind is not None:
            query = query.filter(AlertModel.entity_kind == entity_kind.value)
        if unread_only:
            query = query.filter(AlertModel.is_read.is_(False))
        query = query.order_by(AlertModel.created_at.desc(), AlertModel.id.desc())
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, alert_id: int, *, owner_id: str) -> Alert | None:
        model = (
            self.session.query(AlertModel)
            .filter(AlertModel.id == alert_id, AlertModel.owner_id == owner_id)
            .one_or_none()
        )
        return self._to_entity(model) if model is not None else None

    def count_unread(self, owner_id: str) -> int:
        return (
            self.session.query(AlertModel)
            .filter(AlertModel.owner_id == owner_id)
            .filter(AlertModel.is_read.is_(False))
            .count()
        )

    def create_many(
        self, owner_id: str, candidates: Sequence[AlertCandidate]
    ) -> list[Alert]:
        """Insert ``candidates`` and their ledger rows in a single transaction."""

        created_at = ensure_app_naive_datetime(now_in_app_timezone())
        models: list[AlertModel] = []
        for candidate in candidates:
            model = AlertModel(
                owner_id=owner_id,
                kind=candidate.kind.code,
                entity_kind=candidate.entity_kind.value,
                entity_id=candidate.entity_id,
                title=candidate.title,
                message=candidate.message,
                is_read=False,
                created_at=created_at,
                read_at=None,
            )
            models.append(model)
            self.session.add(model)
            self.session.add(
                AlertEmissionModel(
                    owner_id=owner_id,
                    entity_kind=candidate.entity_kind.value,
                    entity_id=candidate.entity_id,
                    kind=candidate.kind.code,
                    emitted_at=created_at,
                )
            )
        self.session.commit()
        for model in models:
            self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    def list_emitted_keys(self, owner_id: str) -> set[AlertKey]:
        rows = (
            self.session.query(
                AlertEmissionModel.entity_kind,
                AlertEmissionModel.entity_id,
                AlertEmissionModel.kind,
            )
            .filter(AlertEmissionModel.owner_id == owner_id)
            .all()
        )
        keys: set[AlertKey] = set()
        for entity_kind, entity_id, kind in rows:
            try:
                key = AlertKey(EntityKind(entity_kind), entity_id, AlertKind.parse(kind))
            except ValueError:
                # Such a row can never match a candidate this code produces.
                logger.warning(
                    "Ignoring unrecognised ledger row %s/%s/%s for owner %s",
                    entity_kind,
                    entity_id,
                    kind,
                    owner_id,
                )
                continue
            keys.add(key)
        return keys

    def mark_as_read(self, alert_ids: Iterable[int], *, owner_id: str) -> int:
        ids = [alert_id for alert_id in alert_ids if alert_id is not None]
        if not ids:
            return 0
        updated = (
            self.session.query(AlertModel)
            .filter(
                AlertModel.id.in_(ids),
                AlertModel.owner_id == owner_id,
                AlertModel.is_read.is_(False),
            )
            .update(
                {
                    AlertModel.is_read: True,
                    AlertModel.read_at: ensure_app_naive_datetime(now_in_app_timezone()),
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def mark_all_as_read(self, owner_id: str) -> int:
        updated = (
            self.session.query(AlertModel)
            .filter(AlertModel.owner_id == owner_id, AlertModel.is_read.is_(False))
            .update(
                {
                    AlertModel.is_read: True,
                    AlertModel.read_at: ensure_app_naive_datetime(now_in_app_timezone()),
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def delete(self, alert_id: int, *, owner_id: str) -> bool:
        model = (
            self.session.query(AlertModel)
            .filter(AlertModel.id == alert_id, AlertModel.owner_id == owner_id)
            .one_or_none()
        )
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    def delete_all_for_owner(self, owner_id: str) -> int:
        deleted = (
            self.session.query(AlertModel)
            .filter(AlertModel.owner_id == owner_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted

    @staticmethod
    def _to_entity(model: AlertModel) -> Alert:
        return Alert(
            id=model.id,
            owner_id=model.owner_id,
            kind=AlertKind.parse(model.kind),
            entity_kind=EntityKind(model.entity_kind),
            entity_id=model.entity_id,
            title=model.title,
            message=model.message,
            is_read=bool(model.is_read),
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
        )


__all__ = ["AlertRepository"]
