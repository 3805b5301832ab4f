"""Domain entity representing per-owner alert preferences."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

MIN_LEAD_DAYS: Final[int] = 1
MAX_LEAD_DAYS: Final[int] = 365


def normalize_lead_days(values: Iterable[int]) -> tuple[int, ...]:
    """Return ``values`` sorted ascending without duplicates.

    Raises ``ValueError`` for anything outside ``MIN_LEAD_DAYS..MAX_LEAD_DAYS``.
    """

    normalized: set[int] = set()
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Lead days must be integers, got {value!r}")
        if not MIN_LEAD_DAYS <= value <= MAX_LEAD_DAYS:
            raise ValueError(
                f"Lead days must be between {MIN_LEAD_DAYS} and {MAX_LEAD_DAYS}, got {value}"
            )
        normalized.add(value)
    return tuple(sorted(normalized))


@dataclass(frozen=True)
class AlertSettings:
    """Which lead-times trigger deadline alerts and whether payments age.

    ``persisted`` is ``False`` for the in-memory defaults handed out to owners
    that never saved their preferences.
    """

    lead_days: tuple[int, ...] = (1, 3, 7)
    payment_aging: bool = True
    persisted: bool = False


DEFAULT_ALERT_SETTINGS: Final[AlertSettings] = AlertSettings()


__all__ = [
    "AlertSettings",
    "DEFAULT_ALERT_SETTINGS",
    "MAX_LEAD_DAYS",
    "MIN_LEAD_DAYS",
    "normalize_lead_days",
]
