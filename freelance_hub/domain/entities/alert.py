"""Domain entities describing deadline and payment alerts."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class EntityKind(str, Enum):
    """Kind of business entity an alert can refer to."""

    PROJECT = "project"
    TASK = "task"
    PAYMENT = "payment"


class AlertType(str, Enum):
    """Closed set of alert families emitted by the reconciliation engine."""

    DEADLINE_OVERDUE = "deadline_overdue"
    DEADLINE_URGENT = "deadline_urgent"
    DEADLINE_WARNING = "deadline_warning"
    TASK_OVERDUE = "task_overdue"
    TASK_DUE_SOON = "task_due"
    PAYMENT_AGING = "payment_aging"

    @property
    def entity_kind(self) -> EntityKind:
        return _ENTITY_KIND_BY_TYPE[self]

    @property
    def takes_lead_days(self) -> bool:
        return self in _PARAMETERISED_TYPES


_ENTITY_KIND_BY_TYPE: dict[AlertType, EntityKind] = {
    AlertType.DEADLINE_OVERDUE: EntityKind.PROJECT,
    AlertType.DEADLINE_URGENT: EntityKind.PROJECT,
    AlertType.DEADLINE_WARNING: EntityKind.PROJECT,
    AlertType.TASK_OVERDUE: EntityKind.TASK,
    AlertType.TASK_DUE_SOON: EntityKind.TASK,
    AlertType.PAYMENT_AGING: EntityKind.PAYMENT,
}

_PARAMETERISED_TYPES = frozenset({AlertType.DEADLINE_WARNING, AlertType.TASK_DUE_SOON})

_CODE_PATTERN = re.compile(r"^(?P<type>[a-z_]+?)(?:_(?P<days>\d+))?$")


@dataclass(frozen=True)
class AlertKind:
    """An alert type, optionally parameterised by the lead-time it fired for.

    ``deadline_warning`` and ``task_due`` carry ``lead_days`` so that every
    configured lead-time is its own kind and fires once.
    """

    type: AlertType
    lead_days: int | None = None

    def __post_init__(self) -> None:
        if self.type.takes_lead_days:
            if self.lead_days is None or self.lead_days < 1:
                raise ValueError(f"{self.type.value} requires a positive lead_days value")
        elif self.lead_days is not None:
            raise ValueError(f"{self.type.value} does not take lead_days")

    @property
    def code(self) -> str:
        """Stable string stored in the database for this kind."""

        if self.lead_days is None:
            return self.type.value
        return f"{self.type.value}_{self.lead_days}"

    @property
    def entity_kind(self) -> EntityKind:
        return self.type.entity_kind

    @classmethod
    def parse(cls, code: str) -> "AlertKind":
        """Rebuild an :class:`AlertKind` from its stored ``code``."""

        try:
            return cls(AlertType(code))
        except ValueError:
            pass

        match = _CODE_PATTERN.match(code or "")
        if match is None or match.group("days") is None:
            raise ValueError(f"Unknown alert kind '{code}'")
        try:
            alert_type = AlertType(match.group("type"))
        except ValueError as exc:
            raise ValueError(f"Unknown alert kind '{code}'") from exc
        return cls(alert_type, int(match.group("days")))

    def __str__(self) -> str:
        return self.code


DEADLINE_OVERDUE = AlertKind(AlertType.DEADLINE_OVERDUE)
DEADLINE_URGENT = AlertKind(AlertType.DEADLINE_URGENT)
TASK_OVERDUE = AlertKind(AlertType.TASK_OVERDUE)
PAYMENT_AGING = AlertKind(AlertType.PAYMENT_AGING)


def deadline_warning(lead_days: int) -> AlertKind:
    return AlertKind(AlertType.DEADLINE_WARNING, lead_days)


def task_due_soon(lead_days: int) -> AlertKind:
    return AlertKind(AlertType.TASK_DUE_SOON, lead_days)


@dataclass(frozen=True)
class AlertKey:
    """The (entity kind, entity id, alert kind) triple emitted at most once."""

    entity_kind: EntityKind
    entity_id: str
    kind: AlertKind


@dataclass(frozen=True)
class AlertCandidate:
    """An alert a scanner believes is due, before dedup filtering."""

    entity_kind: EntityKind
    entity_id: str
    kind: AlertKind
    title: str
    message: str

    @property
    def key(self) -> AlertKey:
        return AlertKey(self.entity_kind, self.entity_id, self.kind)


@dataclass
class Alert:
    """Durable alert record delivered to an owner."""

    id: int | None
    owner_id: str
    kind: AlertKind
    entity_kind: EntityKind
    entity_id: str
    title: str
    message: str
    is_read: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None

    @property
    def key(self) -> AlertKey:
        return AlertKey(self.entity_kind, self.entity_id, self.kind)


__all__ = [
    "Alert",
    "AlertCandidate",
    "AlertKey",
    "AlertKind",
    "AlertType",
    "DEADLINE_OVERDUE",
    "DEADLINE_URGENT",
    "EntityKind",
    "PAYMENT_AGING",
    "TASK_OVERDUE",
    "deadline_warning",
    "task_due_soon",
]
