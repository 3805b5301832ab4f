"""Storage port consumed by the alert reconciliation engine.

The engine never talks to SQLAlchemy directly: it reads settings, open
entities and the emission ledger through :class:`AlertStore`, and writes new
alerts through it. Methods are synchronous; the orchestrator runs them in a
worker thread so the event loop only ever waits on them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from freelance_hub.domain.entities import (
    Alert,
    AlertCandidate,
    AlertKey,
    AlertSettings,
    PaymentSnapshot,
    ProjectSnapshot,
    TaskSnapshot,
)


class StorageUnavailable(RuntimeError):
    """A read or write against the backing store failed."""


class PartialEmitFailure(StorageUnavailable):
    """Only part of an alert batch was written before the store failed."""

    def __init__(self, message: str, *, persisted: Sequence[Alert]) -> None:
        super().__init__(message)
        self.persisted = list(persisted)


class AlertStore(ABC):
    """Abstract storage operations needed to reconcile one owner's alerts.

    Every method raises :class:`StorageUnavailable` when the store cannot be
    reached.
    """

    @abstractmethod
    def get_settings(self, owner_id: str) -> AlertSettings | None:
        """Return the stored settings for ``owner_id`` or ``None``."""

    @abstractmethod
    def save_settings(self, owner_id: str, settings: AlertSettings) -> AlertSettings:
        """Insert or replace the settings of ``owner_id``."""

    @abstractmethod
    def list_open_projects(self, owner_id: str) -> Sequence[ProjectSnapshot]:
        """Projects that are neither completed nor cancelled and have a deadline."""

    @abstractmethod
    def list_open_tasks(self, owner_id: str) -> Sequence[TaskSnapshot]:
        """Tasks that are neither completed nor cancelled and have a due date."""

    @abstractmethod
    def list_pending_payments(self, owner_id: str) -> Sequence[PaymentSnapshot]:
        """Payments still waiting for confirmation."""

    @abstractmethod
    def list_emitted_keys(self, owner_id: str) -> set[AlertKey]:
        """Every triple ever emitted for ``owner_id``, deleted alerts included."""

    @abstractmethod
    def insert_alerts(
        self, owner_id: str, candidates: Sequence[AlertCandidate]
    ) -> list[Alert]:
        """Persist ``candidates`` as alerts and record them in the ledger.

        Raises :class:`PartialEmitFailure` when some rows were written before
        the failure.
        """


__all__ = ["AlertStore", "PartialEmitFailure", "StorageUnavailable"]
