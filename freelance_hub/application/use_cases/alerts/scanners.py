"""Candidate scanners for deadline, due-date and payment-aging alerts.

Each scanner is a pure function of ``today``, the owner's settings and the
entities read from storage. Comparisons are done on calendar dates only;
time-of-day never matters.

A deadline that falls on ``today`` is reported with the 1-day kind
(``deadline_urgent`` / ``task_due_1``): there is no separate "due today"
kind, and dedup keeps it to a single alert whichever day it fires on.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Final

from freelance_hub.domain.alert_store import AlertStore
from freelance_hub.domain.entities import (
    DEADLINE_OVERDUE,
    DEADLINE_URGENT,
    PAYMENT_AGING,
    TASK_OVERDUE,
    AlertCandidate,
    AlertSettings,
    EntityKind,
    PaymentSnapshot,
    ProjectSnapshot,
    TaskSnapshot,
    deadline_warning,
    task_due_soon,
)
from freelance_hub.utils import as_app_date

TASK_LEAD_DAYS: Final[tuple[int, ...]] = (1, 3)
PAYMENT_AGING_DAYS: Final[int] = 30


def _days(count: int) -> str:
    return "1 day" if count == 1 else f"{count} days"


def _due_phrase(days_left: int) -> str:
    if days_left == 0:
        return "today"
    if days_left == 1:
        return "tomorrow"
    return f"in {days_left} days"


def scan_project_deadlines(
    projects: Iterable[ProjectSnapshot],
    *,
    today: date,
    settings: AlertSettings,
) -> list[AlertCandidate]:
    """Return overdue, urgent and warning candidates for open projects."""

    candidates: list[AlertCandidate] = []
    for project in projects:
        if not project.is_open or project.deadline is None:
            continue

        deadline = as_app_date(project.deadline)
        if deadline < today:
            overdue = (today - deadline).days
            candidates.append(
                AlertCandidate(
                    entity_kind=EntityKind.PROJECT,
                    entity_id=project.id,
                    kind=DEADLINE_OVERDUE,
                    title="Project overdue",
                    message=(
                        f'Project "{project.name}" is {_days(overdue)} overdue '
                        f"(deadline was {deadline:%d %b %Y})."
                    ),
                )
            )
            continue

        days_left = (deadline - today).days
        if days_left == 0 or (days_left == 1 and 1 in settings.lead_days):
            candidates.append(
                AlertCandidate(
                    entity_kind=EntityKind.PROJECT,
                    entity_id=project.id,
                    kind=DEADLINE_URGENT,
                    title="Deadline today" if days_left == 0 else "Deadline tomorrow",
                    message=f'Project "{project.name}" is due {_due_phrase(days_left)}.',
                )
            )
            continue

        if days_left in settings.lead_days:
            candidates.append(
                AlertCandidate(
                    entity_kind=EntityKind.PROJECT,
                    entity_id=project.id,
                    kind=deadline_warning(days_left),
                    title="Deadline approaching",
                    message=f'Project "{project.name}" is due {_due_phrase(days_left)}.',
                )
            )
    return candidates


def scan_task_due_dates(
    tasks: Iterable[TaskSnapshot],
    *,
    today: date,
) -> list[AlertCandidate]:
    """Return overdue and due-soon candidates for open tasks.

    Lead-times are fixed to :data:`TASK_LEAD_DAYS` and ignore user settings.
    """

    candidates: list[AlertCandidate] = []
    for task in tasks:
        if not task.is_open or task.due_date is None:
            continue

        due_date = as_app_date(task.due_date)
        if due_date < today:
            overdue = (today - due_date).days
            candidates.append(
                AlertCandidate(
                    entity_kind=EntityKind.TASK,
                    entity_id=task.id,
                    kind=TASK_OVERDUE,
                    title="Task overdue",
                    message=f'Task "{task.title}" is {_days(overdue)} overdue.',
                )
            )
            continue

        days_left = (due_date - today).days
        lead = 1 if days_left == 0 else days_left
        if lead not in TASK_LEAD_DAYS:
            continue
        candidates.append(
            AlertCandidate(
                entity_kind=EntityKind.TASK,
                entity_id=task.id,
                kind=task_due_soon(lead),
                title="Task due soon" if lead > 1 else "Task due",
                message=f'Task "{task.title}" is due {_due_phrase(days_left)}.',
            )
        )
    return candidates


def scan_payment_aging(
    payments: Iterable[PaymentSnapshot],
    *,
    today: date,
    settings: AlertSettings,
) -> list[AlertCandidate]:
    """Return candidates for payments pending more than 30 days."""

    if not settings.payment_aging:
        return []

    threshold = today - timedelta(days=PAYMENT_AGING_DAYS)
    candidates: list[AlertCandidate] = []
    for payment in payments:
        if not payment.is_pending:
            continue
        created_on = as_app_date(payment.created_at)
        if created_on >= threshold:
            continue
        pending_for = (today - created_on).days
        candidates.append(
            AlertCandidate(
                entity_kind=EntityKind.PAYMENT,
                entity_id=payment.id,
                kind=PAYMENT_AGING,
                title="Payment pending",
                message=(
                    f"A payment of {payment.amount:,.2f} has been pending "
                    f"for {_days(pending_for)}."
                ),
            )
        )
    return candidates


@dataclass(frozen=True)
class CandidateScanner:
    """Pairs a storage loader with the pure scan function that consumes it."""

    name: str
    load: Callable[[AlertStore, str], Sequence[Any]]
    scan: Callable[[Sequence[Any], date, AlertSettings], list[AlertCandidate]]
    enabled: Callable[[AlertSettings], bool] = lambda settings: True


SCANNERS: Final[tuple[CandidateScanner, ...]] = (
    CandidateScanner(
        name="project_deadlines",
        load=lambda store, owner_id: store.list_open_projects(owner_id),
        scan=lambda entities, today, settings: scan_project_deadlines(
            entities, today=today, settings=settings
        ),
    ),
    CandidateScanner(
        name="task_due_dates",
        load=lambda store, owner_id: store.list_open_tasks(owner_id),
        scan=lambda entities, today, settings: scan_task_due_dates(entities, today=today),
    ),
    CandidateScanner(
        name="payment_aging",
        load=lambda store, owner_id: store.list_pending_payments(owner_id),
        scan=lambda entities, today, settings: scan_payment_aging(
            entities, today=today, settings=settings
        ),
        enabled=lambda settings: settings.payment_aging,
    ),
)


__all__ = [
    "CandidateScanner",
    "PAYMENT_AGING_DAYS",
    "SCANNERS",
    "TASK_LEAD_DAYS",
    "scan_payment_aging",
    "scan_project_deadlines",
    "scan_task_due_dates",
]
