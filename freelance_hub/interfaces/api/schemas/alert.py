"""Pydantic models describing alert payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class AlertMarkReadRequest(BaseModel):
    """Payload used to mark a batch of alerts as read."""

    ids: list[int] = Field(..., min_length=1, description="Alert identifiers")

    def unique_ids(self) -> list[int]:
        """Return the list of identifiers without duplicates preserving order."""

        unique: list[int] = []
        seen: set[int] = set()
        for alert_id in self.ids:
            if alert_id in seen:
                continue
            seen.add(alert_id)
            unique.append(alert_id)
        return unique


class AlertRead(BaseModel):
    """Representation of an alert delivered to the client."""

    id: int
    owner_id: str
    kind: str
    entity_kind: str
    entity_id: str
    title: str
    message: str
    is_read: bool = False
    created_at: datetime
    read_at: datetime | None = None


class AlertUnreadCount(BaseModel):
    unread: int


class AlertUpdateCount(BaseModel):
    updated: int


__all__ = ["AlertMarkReadRequest", "AlertRead", "AlertUnreadCount", "AlertUpdateCount"]
