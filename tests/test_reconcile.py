"""Tests for the reconciliation orchestrator against an in-memory store."""

from __future__ import annotations

from datetime import datetime, time, timedelta, timezone
from decimal import Decimal

import pytest

from conftest import TODAY
from freelance_hub.application.use_cases.alerts import reconcile_owner
from freelance_hub.domain.entities import (
    DEADLINE_URGENT,
    PAYMENT_AGING,
    AlertSettings,
    PaymentSnapshot,
    ProjectSnapshot,
    ReconciliationOutcome,
    ReconciliationStage,
    TaskSnapshot,
    deadline_warning,
    task_due_soon,
)

pytestmark = pytest.mark.anyio

OWNER = "owner-1"


def _project(project_id: str, days_left: int, status: str = "in_progress") -> ProjectSnapshot:
    return ProjectSnapshot(
        id=project_id,
        owner_id=OWNER,
        name=f"Project {project_id}",
        deadline=TODAY + timedelta(days=days_left),
        status=status,
    )


def _payment(payment_id: str, days_ago: int) -> PaymentSnapshot:
    return PaymentSnapshot(
        id=payment_id,
        owner_id=OWNER,
        amount=Decimal("800"),
        created_at=datetime.combine(
            TODAY - timedelta(days=days_ago), time(9, 30), tzinfo=timezone.utc
        ),
    )


async def test_second_run_emits_nothing(memory_store):
    memory_store.projects[OWNER] = [_project("p-1", 3), _project("p-2", 1)]
    memory_store.tasks[OWNER] = [
        TaskSnapshot(id="t-1", owner_id=OWNER, title="Review", due_date=TODAY, status="pending")
    ]

    first = await reconcile_owner(memory_store, OWNER, today=TODAY)
    second = await reconcile_owner(memory_store, OWNER, today=TODAY)

    assert first.outcome is ReconciliationOutcome.COMPLETED
    assert sorted(alert.kind.code for alert in first.emitted) == [
        "deadline_urgent",
        "deadline_warning_3",
        "task_due_1",
    ]
    assert second.outcome is ReconciliationOutcome.COMPLETED
    assert second.candidates == 3
    assert second.emitted == []
    assert len(memory_store.alerts) == 3


async def test_only_new_project_alerts_on_next_run(memory_store):
    memory_store.projects[OWNER] = [_project("p-1", 1)]
    await reconcile_owner(memory_store, OWNER, today=TODAY)

    memory_store.projects[OWNER].append(_project("p-2", 7))
    result = await reconcile_owner(memory_store, OWNER, today=TODAY)

    assert [(alert.entity_id, alert.kind) for alert in result.emitted] == [
        ("p-2", deadline_warning(7))
    ]
    assert [alert.entity_id for alert in memory_store.alerts] == ["p-1", "p-2"]


async def test_lead_times_each_fire_once_over_project_lifetime(memory_store):
    memory_store.projects[OWNER] = [_project("p-1", 7)]
    kinds = []
    for offset in range(8):
        result = await reconcile_owner(
            memory_store, OWNER, today=TODAY + timedelta(days=offset)
        )
        kinds.extend(alert.kind for alert in result.emitted)

    assert kinds == [deadline_warning(7), deadline_warning(3), DEADLINE_URGENT]


async def test_due_today_scenario_emits_single_urgent_alert(memory_store):
    memory_store.projects[OWNER] = [_project("p-1", 0)]

    result = await reconcile_owner(memory_store, OWNER, today=TODAY)

    assert [alert.kind for alert in result.emitted] == [DEADLINE_URGENT]


async def test_defaults_are_used_without_being_saved(memory_store):
    memory_store.payments[OWNER] = [_payment("pay-1", 31), _payment("pay-2", 29)]

    result = await reconcile_owner(memory_store, OWNER, today=TODAY)

    assert [(alert.entity_id, alert.kind) for alert in result.emitted] == [
        ("pay-1", PAYMENT_AGING)
    ]
    assert "save_settings" not in memory_store.operations()


async def test_payment_scanner_skipped_when_disabled(memory_store):
    memory_store.settings[OWNER] = AlertSettings(
        lead_days=(1, 3, 7), payment_aging=False, persisted=True
    )
    memory_store.payments[OWNER] = [_payment("pay-1", 45)]

    result = await reconcile_owner(memory_store, OWNER, today=TODAY)

    assert result.emitted == []
    assert "list_pending_payments" not in memory_store.operations()


async def test_dedup_read_happens_after_scans_and_before_emit(memory_store):
    memory_store.projects[OWNER] = [_project("p-1", 1)]

    await reconcile_owner(memory_store, OWNER, today=TODAY)

    assert memory_store.operations() == [
        "get_settings",
        "list_open_projects",
        "list_open_tasks",
        "list_pending_payments",
        "list_emitted_keys",
        "insert_alerts",
    ]


async def test_no_candidates_skips_dedup_and_emit(memory_store):
    result = await reconcile_owner(memory_store, OWNER, today=TODAY)

    assert result.outcome is ReconciliationOutcome.COMPLETED
    assert "list_emitted_keys" not in memory_store.operations()
    assert "insert_alerts" not in memory_store.operations()


async def test_partial_scan_failure_keeps_other_candidates(memory_store):
    memory_store.projects[OWNER] = [_project("p-1", 1)]
    memory_store.tasks[OWNER] = [
        TaskSnapshot(id="t-1", owner_id=OWNER, title="Call", due_date=TODAY, status="pending")
    ]
    memory_store.failing.add("list_open_projects")

    result = await reconcile_owner(memory_store, OWNER, today=TODAY)

    assert result.outcome is ReconciliationOutcome.PARTIAL
    assert set(result.scanner_failures) == {"project_deadlines"}
    assert [alert.kind for alert in result.emitted] == [task_due_soon(1)]

    memory_store.failing.clear()
    retry = await reconcile_owner(memory_store, OWNER, today=TODAY)

    assert retry.outcome is ReconciliationOutcome.COMPLETED
    assert [alert.kind for alert in retry.emitted] == [DEADLINE_URGENT]


async def test_every_scanner_failing_aborts(memory_store):
    memory_store.failing.update(
        {"list_open_projects", "list_open_tasks", "list_pending_payments"}
    )

    result = await reconcile_owner(memory_store, OWNER, today=TODAY)

    assert result.outcome is ReconciliationOutcome.ABORTED
    assert result.failed_stage is ReconciliationStage.SCANNING
    assert len(result.scanner_failures) == 3


@pytest.mark.parametrize(
    ("operation", "stage"),
    [
        ("get_settings", ReconciliationStage.RESOLVING_SETTINGS),
        ("list_emitted_keys", ReconciliationStage.DEDUPING),
        ("insert_alerts", ReconciliationStage.EMITTING),
    ],
)
async def test_storage_outage_aborts_without_changes(memory_store, operation, stage):
    memory_store.projects[OWNER] = [_project("p-1", 1)]
    memory_store.failing.add(operation)

    result = await reconcile_owner(memory_store, OWNER, today=TODAY)

    assert result.outcome is ReconciliationOutcome.ABORTED
    assert result.failed_stage is stage
    assert result.error == f"{operation} unavailable"
    assert memory_store.alerts == []

    memory_store.failing.clear()
    retry = await reconcile_owner(memory_store, OWNER, today=TODAY)

    assert [alert.kind for alert in retry.emitted] == [DEADLINE_URGENT]


async def test_partial_emit_is_completed_by_next_run(memory_store):
    memory_store.projects[OWNER] = [_project("p-1", 1), _project("p-2", 3), _project("p-3", 7)]
    memory_store.emit_limit = 1

    partial = await reconcile_owner(memory_store, OWNER, today=TODAY)

    assert partial.outcome is ReconciliationOutcome.PARTIAL
    assert partial.failed_stage is ReconciliationStage.EMITTING
    assert partial.emitted_count == 1

    memory_store.emit_limit = None
    follow_up = await reconcile_owner(memory_store, OWNER, today=TODAY)

    assert follow_up.emitted_count == 2
    assert sorted(alert.entity_id for alert in memory_store.alerts) == ["p-1", "p-2", "p-3"]
