"""SQLAlchemy implementation of the alert engine storage port."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from freelance_hub.domain.alert_store import (
    AlertStore,
    PartialEmitFailure,
    StorageUnavailable,
)
from freelance_hub.domain.entities import (
    Alert,
    AlertCandidate,
    AlertKey,
    AlertSettings,
    PaymentSnapshot,
    ProjectSnapshot,
    TaskSnapshot,
)
from freelance_hub.infrastructure.repositories import (
    AlertRepository,
    AlertSettingsRepository,
    PaymentRepository,
    ProjectRepository,
    TaskRepository,
)

logger = logging.getLogger(__name__)


class SqlAlchemyAlertStore(AlertStore):
    """Open one short-lived session per operation.

    Calls arrive from worker threads, so no session is ever shared between
    two operations.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as exc:
            session.rollback()
            raise StorageUnavailable(f"{operation} failed: {exc}") from exc
        finally:
            session.close()

    def get_settings(self, owner_id: str) -> AlertSettings | None:
        with self._session("get_settings") as session:
            return AlertSettingsRepository(session).get_by_owner(owner_id)

    def save_settings(self, owner_id: str, settings: AlertSettings) -> AlertSettings:
        with self._session("save_settings") as session:
            return AlertSettingsRepository(session).upsert(owner_id, settings)

    def list_open_projects(self, owner_id: str) -> Sequence[ProjectSnapshot]:
        with self._session("list_open_projects") as session:
            return ProjectRepository(session).list_open_with_deadline(owner_id)

    def list_open_tasks(self, owner_id: str) -> Sequence[TaskSnapshot]:
        with self._session("list_open_tasks") as session:
            return TaskRepository(session).list_open_with_due_date(owner_id)

    def list_pending_payments(self, owner_id: str) -> Sequence[PaymentSnapshot]:
        with self._session("list_pending_payments") as session:
            return PaymentRepository(session).list_pending(owner_id)

    def list_emitted_keys(self, owner_id: str) -> set[AlertKey]:
        with self._session("list_emitted_keys") as session:
            return AlertRepository(session).list_emitted_keys(owner_id)

    def insert_alerts(
        self, owner_id: str, candidates: Sequence[AlertCandidate]
    ) -> list[Alert]:
        if not candidates:
            return []

        session = self._session_factory()
        try:
            return AlertRepository(session).create_many(owner_id, candidates)
        except IntegrityError:
            session.rollback()
            logger.warning(
                "Alert batch for owner %s collided with the emission ledger; "
                "retrying row by row",
                owner_id,
            )
        except SQLAlchemyError as exc:
            session.rollback()
            raise StorageUnavailable(f"insert_alerts failed: {exc}") from exc
        finally:
            session.close()

        return self._insert_one_by_one(owner_id, candidates)

    def _insert_one_by_one(
        self, owner_id: str, candidates: Sequence[AlertCandidate]
    ) -> list[Alert]:
        persisted: list[Alert] = []
        for candidate in candidates:
            session = self._session_factory()
            try:
                persisted.extend(AlertRepository(session).create_many(owner_id, [candidate]))
            except IntegrityError:
                session.rollback()
                logger.info(
                    "Skipping already emitted alert %s for owner %s",
                    candidate.key,
                    owner_id,
                )
            except SQLAlchemyError as exc:
                session.rollback()
                if persisted:
                    raise PartialEmitFailure(
                        f"insert_alerts stopped after {len(persisted)} of "
                        f"{len(candidates)} alerts: {exc}",
                        persisted=persisted,
                    ) from exc
                raise StorageUnavailable(f"insert_alerts failed: {exc}") from exc
            finally:
                session.close()
        return persisted


__all__ = ["SqlAlchemyAlertStore"]
