"""SQLAlchemy model for client projects."""

from uuid import uuid4

from sqlalchemy import Column, Date, DateTime, String

from freelance_hub.infrastructure.database import Base
from freelance_hub.utils import now_in_app_naive_datetime


class ProjectModel(Base):
    """Database representation for projects (only the alert-relevant columns)."""

    __tablename__ = "project"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid4()))
    owner_id = Column(String(64), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    deadline = Column(Date(), nullable=True)
    status = Column(String(30), nullable=False, default="not_started")
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ProjectModel"]
