"""SQLAlchemy model for per-owner alert settings."""

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String

from freelance_hub.infrastructure.database import Base
from freelance_hub.utils import now_in_app_naive_datetime


class AlertSettingsModel(Base):
    """Database representation for alert preferences."""

    __tablename__ = "alert_settings"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(String(64), nullable=False, unique=True, index=True)
    lead_days = Column(JSON, nullable=False, default=list)
    payment_aging = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["AlertSettingsModel"]
