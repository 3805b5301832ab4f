"""SQLAlchemy model for tasks."""

from uuid import uuid4

from sqlalchemy import Column, Date, DateTime, String

from freelance_hub.infrastructure.database import Base
from freelance_hub.utils import now_in_app_naive_datetime


class TaskModel(Base):
    """Database representation for tasks (only the alert-relevant columns)."""

    __tablename__ = "task"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid4()))
    owner_id = Column(String(64), nullable=False, index=True)
    project_id = Column(String(64), nullable=True)
    title = Column(String(200), nullable=False)
    due_date = Column(Date(), nullable=True)
    status = Column(String(30), nullable=False, default="pending")
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["TaskModel"]
