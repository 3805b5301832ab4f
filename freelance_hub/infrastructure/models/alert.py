"""SQLAlchemy model for persisted alerts."""

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text

from freelance_hub.infrastructure.database import Base
from freelance_hub.utils import now_in_app_naive_datetime


class AlertModel(Base):
    """Database representation for deadline and payment alerts."""

    __tablename__ = "alert"
    __table_args__ = (
        Index("ix_alert_owner_is_read", "owner_id", "is_read"),
    )

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(String(64), nullable=False, index=True)
    kind = Column(String(40), nullable=False)
    entity_kind = Column(String(20), nullable=False)
    entity_id = Column(String(64), nullable=False)
    title = Column(String(120), nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    read_at = Column(DateTime(), nullable=True)


__all__ = ["AlertModel"]
