"""SQLAlchemy model for project payments."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, Numeric, String

from freelance_hub.infrastructure.database import Base
from freelance_hub.utils import now_in_app_naive_datetime


class PaymentModel(Base):
    """Database representation for payments (only the alert-relevant columns)."""

    __tablename__ = "payment"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid4()))
    owner_id = Column(String(64), nullable=False, index=True)
    project_id = Column(String(64), nullable=True)
    amount = Column(Numeric(12, 2), nullable=False)
    status = Column(String(30), nullable=False, default="pending")
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["PaymentModel"]
