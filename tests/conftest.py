"""Shared fixtures: an isolated SQLite database and an in-memory alert store."""

from __future__ import annotations

import os
import sys
import tempfile
from collections import defaultdict
from collections.abc import Sequence
from datetime import date
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

TEST_DB_PATH = Path(tempfile.mkdtemp(prefix="freelance-hub-tests-")) / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["APP_TIMEZONE"] = "UTC"

from freelance_hub.domain.alert_store import (  # noqa: E402
    AlertStore,
    PartialEmitFailure,
    StorageUnavailable,
)
from freelance_hub.domain.entities import (  # noqa: E402
    Alert,
    AlertCandidate,
    AlertKey,
    AlertSettings,
    PaymentSnapshot,
    ProjectSnapshot,
    TaskSnapshot,
)

TODAY = date(2026, 3, 10)


class InMemoryAlertStore(AlertStore):
    """Dict-backed store that can be told to fail specific operations."""

    def __init__(self) -> None:
        self.settings: dict[str, AlertSettings] = {}
        self.projects: dict[str, list[ProjectSnapshot]] = defaultdict(list)
        self.tasks: dict[str, list[TaskSnapshot]] = defaultdict(list)
        self.payments: dict[str, list[PaymentSnapshot]] = defaultdict(list)
        self.alerts: list[Alert] = []
        self.ledger: dict[str, set[AlertKey]] = defaultdict(set)
        self.failing: set[str] = set()
        self.emit_limit: int | None = None
        self.calls: list[tuple[str, str]] = []
        self._next_id = 1

    def _enter(self, operation: str, owner_id: str) -> None:
        self.calls.append((operation, owner_id))
        if operation in self.failing:
            raise StorageUnavailable(f"{operation} unavailable")

    def operations(self) -> list[str]:
        return [operation for operation, _ in self.calls]

    def get_settings(self, owner_id: str) -> AlertSettings | None:
        self._enter("get_settings", owner_id)
        return self.settings.get(owner_id)

    def save_settings(self, owner_id: str, settings: AlertSettings) -> AlertSettings:
        self._enter("save_settings", owner_id)
        stored = AlertSettings(
            lead_days=settings.lead_days,
            payment_aging=settings.payment_aging,
            persisted=True,
        )
        self.settings[owner_id] = stored
        return stored

    def list_open_projects(self, owner_id: str) -> Sequence[ProjectSnapshot]:
        self._enter("list_open_projects", owner_id)
        return list(self.projects[owner_id])

    def list_open_tasks(self, owner_id: str) -> Sequence[TaskSnapshot]:
        self._enter("list_open_tasks", owner_id)
        return list(self.tasks[owner_id])

    def list_pending_payments(self, owner_id: str) -> Sequence[PaymentSnapshot]:
        self._enter("list_pending_payments", owner_id)
        return list(self.payments[owner_id])

    def list_emitted_keys(self, owner_id: str) -> set[AlertKey]:
        self._enter("list_emitted_keys", owner_id)
        return set(self.ledger[owner_id])

    def insert_alerts(
        self, owner_id: str, candidates: Sequence[AlertCandidate]
    ) -> list[Alert]:
        self._enter("insert_alerts", owner_id)
        persisted: list[Alert] = []
        for candidate in candidates:
            if self.emit_limit is not None and len(persisted) >= self.emit_limit:
                raise PartialEmitFailure("store went away", persisted=persisted)
            if candidate.key in self.ledger[owner_id]:
                raise AssertionError(f"duplicate emission of {candidate.key}")
            alert = Alert(
                id=self._next_id,
                owner_id=owner_id,
                kind=candidate.kind,
                entity_kind=candidate.entity_kind,
                entity_id=candidate.entity_id,
                title=candidate.title,
                message=candidate.message,
            )
            self._next_id += 1
            self.alerts.append(alert)
            self.ledger[owner_id].add(candidate.key)
            persisted.append(alert)
        return persisted


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def memory_store() -> InMemoryAlertStore:
    return InMemoryAlertStore()


@pytest.fixture
def db_session():
    """Yield a session bound to freshly created tables."""

    from freelance_hub.infrastructure import database

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.initialize_database()
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()
        database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
