"""Per-owner reconciliation scheduling for active sessions."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import date
from functools import lru_cache

from freelance_hub.application.use_cases.alerts import reconcile_owner
from freelance_hub.config import get_settings
from freelance_hub.domain.alert_store import AlertStore
from freelance_hub.domain.entities import ReconciliationOutcome, ReconciliationResult
from freelance_hub.utils import today_in_app_timezone

logger = logging.getLogger(__name__)


class ReconciliationScheduler:
    """Run alert reconciliation on demand and periodically per owner session.

    At most one run per owner is in flight; a trigger arriving while one is
    running is dropped, since the next periodic tick covers it.
    """

    def __init__(
        self,
        store: AlertStore,
        *,
        interval_seconds: float,
        today_provider: Callable[[], date] = today_in_app_timezone,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._store = store
        self._interval = interval_seconds
        self._today = today_provider
        self._sessions: dict[str, asyncio.Task[None]] = {}
        self._in_flight: set[str] = set()

    @property
    def interval_seconds(self) -> float:
        return self._interval

    async def reconcile_now(self, owner_id: str) -> ReconciliationResult:
        """Reconcile ``owner_id`` immediately unless a run is already in flight."""

        today = self._today()
        if owner_id in self._in_flight:
            logger.debug("Reconciliation already running for owner %s, dropping trigger", owner_id)
            return ReconciliationResult(
                owner_id=owner_id, today=today, outcome=ReconciliationOutcome.SKIPPED
            )

        self._in_flight.add(owner_id)
        try:
            return await reconcile_owner(self._store, owner_id, today=today)
        finally:
            self._in_flight.discard(owner_id)

    def is_running(self, owner_id: str) -> bool:
        return owner_id in self._in_flight

    def start_session(self, owner_id: str) -> bool:
        """Start the periodic loop for ``owner_id``; ``False`` if already active."""

        if self.is_active(owner_id):
            return False
        task = asyncio.create_task(
            self._run_periodically(owner_id), name=f"alert-reconciliation:{owner_id}"
        )
        self._sessions[owner_id] = task
        task.add_done_callback(lambda finished: self._forget(owner_id, finished))
        logger.info(
            "Started alert reconciliation for owner %s every %s seconds",
            owner_id,
            self._interval,
        )
        return True

    async def stop_session(self, owner_id: str) -> bool:
        """Cancel the periodic loop for ``owner_id``; ``False`` if none was active."""

        task = self._sessions.pop(owner_id, None)
        if task is None:
            return False
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Stopped alert reconciliation for owner %s", owner_id)
        return True

    def is_active(self, owner_id: str) -> bool:
        task = self._sessions.get(owner_id)
        return task is not None and not task.done()

    def active_owners(self) -> list[str]:
        return sorted(owner_id for owner_id in self._sessions if self.is_active(owner_id))

    async def shutdown(self) -> None:
        """Stop every session loop."""

        for owner_id in list(self._sessions):
            await self.stop_session(owner_id)

    async def _run_periodically(self, owner_id: str) -> None:
        while True:
            try:
                await self.reconcile_now(owner_id)
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("Unexpected error reconciling alerts for owner %s", owner_id)
            await asyncio.sleep(self._interval)

    def _forget(self, owner_id: str, finished: asyncio.Task[None]) -> None:
        if self._sessions.get(owner_id) is finished:
            self._sessions.pop(owner_id, None)


@lru_cache
def get_reconciliation_scheduler() -> ReconciliationScheduler:
    """Return the process-wide scheduler bound to the SQL store."""

    from freelance_hub.infrastructure.alert_store import SqlAlchemyAlertStore
    from freelance_hub.infrastructure.database import SessionLocal

    settings = get_settings()
    return ReconciliationScheduler(
        SqlAlchemyAlertStore(SessionLocal),
        interval_seconds=settings.alert_reconcile_interval_seconds,
    )


__all__ = ["ReconciliationScheduler", "get_reconciliation_scheduler"]
