"""Reconciliation orchestrator: settings, scan, dedup and emit for one owner.

Every storage access is awaited through a worker thread and is the only
suspension point of a run. The emitted-keys read is issued after all scanner
reads finished and before the write, so one run can never insert the same
triple twice. Failures never propagate: they end the run early and leave
storage untouched for the next tick.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import Any, TypeVar

from anyio import to_thread

from freelance_hub.domain.alert_store import (
    AlertStore,
    PartialEmitFailure,
    StorageUnavailable,
)
from freelance_hub.domain.entities import (
    AlertCandidate,
    ReconciliationOutcome,
    ReconciliationResult,
    ReconciliationStage,
)

from .dedup import filter_new_candidates
from .emit import emit_alerts
from .resolve_settings import resolve_alert_settings
from .scanners import SCANNERS, CandidateScanner

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _io(func: Callable[..., T], *args: Any) -> T:
    return await to_thread.run_sync(func, *args)


def _abort(
    result: ReconciliationResult, stage: ReconciliationStage, exc: Exception
) -> ReconciliationResult:
    logger.warning(
        "Reconciliation for owner %s aborted while %s: %s",
        result.owner_id,
        stage.value,
        exc,
    )
    result.outcome = ReconciliationOutcome.ABORTED
    result.failed_stage = stage
    result.error = str(exc)
    return result


async def reconcile_owner(
    store: AlertStore,
    owner_id: str,
    *,
    today: date,
    scanners: tuple[CandidateScanner, ...] = SCANNERS,
) -> ReconciliationResult:
    """Run one reconciliation pass for ``owner_id`` and describe what happened."""

    result = ReconciliationResult(owner_id=owner_id, today=today)

    stage = ReconciliationStage.RESOLVING_SETTINGS
    try:
        settings = await _io(resolve_alert_settings, store, owner_id)
    except StorageUnavailable as exc:
        return _abort(result, stage, exc)

    stage = ReconciliationStage.SCANNING
    candidates: list[AlertCandidate] = []
    enabled = [scanner for scanner in scanners if scanner.enabled(settings)]
    for scanner in enabled:
        try:
            entities = await _io(scanner.load, store, owner_id)
        except StorageUnavailable as exc:
            logger.warning(
                "Partial scan failure for owner %s: scanner %s could not read its data: %s",
                owner_id,
                scanner.name,
                exc,
            )
            result.scanner_failures[scanner.name] = str(exc)
            continue
        candidates.extend(scanner.scan(entities, today, settings))

    if enabled and len(result.scanner_failures) == len(enabled):
        return _abort(result, stage, StorageUnavailable("every scanner failed"))

    result.candidates = len(candidates)
    if result.scanner_failures:
        result.outcome = ReconciliationOutcome.PARTIAL

    if candidates:
        stage = ReconciliationStage.DEDUPING
        try:
            emitted_keys = await _io(store.list_emitted_keys, owner_id)
        except StorageUnavailable as exc:
            return _abort(result, stage, exc)
        fresh = filter_new_candidates(candidates, emitted_keys)

        stage = ReconciliationStage.EMITTING
        try:
            result.emitted = await _io(emit_alerts, store, owner_id, fresh)
        except PartialEmitFailure as exc:
            logger.warning(
                "Partial emit for owner %s: %d alerts persisted before failure: %s",
                owner_id,
                len(exc.persisted),
                exc,
            )
            result.emitted = exc.persisted
            result.outcome = ReconciliationOutcome.PARTIAL
            result.failed_stage = stage
            result.error = str(exc)
        except StorageUnavailable as exc:
            return _abort(result, stage, exc)

    logger.info(
        "Reconciled alerts for owner %s on %s: %d candidates, %d emitted (%s)",
        owner_id,
        today.isoformat(),
        result.candidates,
        result.emitted_count,
        result.outcome.value,
    )
    return result


__all__ = ["reconcile_owner"]
