"""SQLAlchemy model for the append-only alert emission ledger."""

from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint

from freelance_hub.infrastructure.database import Base
from freelance_hub.utils import now_in_app_naive_datetime


class AlertEmissionModel(Base):
    """One row per (owner, entity kind, entity id, alert kind) ever emitted.

    Rows are never deleted, not even when the user deletes the alert.
    """

    __tablename__ = "alert_emission"
    __table_args__ = (
        UniqueConstraint(
            "owner_id",
            "entity_kind",
            "entity_id",
            "kind",
            name="uq_alert_emission_triple",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(String(64), nullable=False, index=True)
    entity_kind = Column(String(20), nullable=False)
    entity_id = Column(String(64), nullable=False)
    kind = Column(String(40), nullable=False)
    emitted_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["AlertEmissionModel"]
