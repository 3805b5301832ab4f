"""Pydantic models describing alert settings payloads."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from freelance_hub.domain.entities import normalize_lead_days


class AlertSettingsRead(BaseModel):
    """Alert settings an owner is currently scanned with."""

    lead_days: list[int]
    payment_aging: bool
    persisted: bool = Field(
        description="False while the owner still runs on the default settings",
    )


class AlertSettingsUpdate(BaseModel):
    """Payload used to save alert settings."""

    lead_days: list[int] = Field(
        default_factory=list,
        description="Days before a project deadline at which a warning fires",
    )
    payment_aging: bool = Field(
        default=True,
        description="Alert on payments pending for more than 30 days",
    )

    @field_validator("lead_days")
    @classmethod
    def _validate_lead_days(cls, value: list[int]) -> list[int]:
        return list(normalize_lead_days(value))


__all__ = ["AlertSettingsRead", "AlertSettingsUpdate"]
