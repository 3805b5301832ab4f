"""Read-only queries over the entities the alert engine inspects."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy.orm import Session

from freelance_hub.domain.entities import (
    CLOSED_PROJECT_STATUSES,
    CLOSED_TASK_STATUSES,
    PAYMENT_STATUS_PENDING,
    PaymentSnapshot,
    ProjectSnapshot,
    TaskSnapshot,
)
from freelance_hub.infrastructure.models import PaymentModel, ProjectModel, TaskModel
from freelance_hub.utils import ensure_app_timezone


class ProjectRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_open_with_deadline(self, owner_id: str) -> Sequence[ProjectSnapshot]:
        query = (
            self.session.query(ProjectModel)
            .filter(ProjectModel.owner_id == owner_id)
            .filter(ProjectModel.status.notin_(sorted(CLOSED_PROJECT_STATUSES)))
            .filter(ProjectModel.deadline.is_not(None))
            .order_by(ProjectModel.deadline.asc(), ProjectModel.id.asc())
        )
        return [
            ProjectSnapshot(
                id=model.id,
                owner_id=model.owner_id,
                name=model.name,
                deadline=model.deadline,
                status=model.status,
            )
            for model in query.all()
        ]


class TaskRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_open_with_due_date(self, owner_id: str) -> Sequence[TaskSnapshot]:
        query = (
            self.session.query(TaskModel)
            .filter(TaskModel.owner_id == owner_id)
            .filter(TaskModel.status.notin_(sorted(CLOSED_TASK_STATUSES)))
            .filter(TaskModel.due_date.is_not(None))
            .order_by(TaskModel.due_date.asc(), TaskModel.id.asc())
        )
        return [
            TaskSnapshot(
                id=model.id,
                owner_id=model.owner_id,
                title=model.title,
                due_date=model.due_date,
                status=model.status,
            )
            for model in query.all()
        ]


class PaymentRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_pending(self, owner_id: str) -> Sequence[PaymentSnapshot]:
        query = (
            self.session.query(PaymentModel)
            .filter(PaymentModel.owner_id == owner_id)
            .filter(PaymentModel.status == PAYMENT_STATUS_PENDING)
            .order_by(PaymentModel.created_at.asc(), PaymentModel.id.asc())
        )
        return [
            PaymentSnapshot(
                id=model.id,
                owner_id=model.owner_id,
                amount=Decimal(str(model.amount)),
                created_at=ensure_app_timezone(model.created_at),
                status=model.status,
                project_id=model.project_id,
            )
            for model in query.all()
        ]


__all__ = ["PaymentRepository", "ProjectRepository", "TaskRepository"]
