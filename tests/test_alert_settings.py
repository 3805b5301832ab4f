"""Tests for resolving and updating alert settings."""

from __future__ import annotations

import pytest

from freelance_hub.application.use_cases.alerts import (
    resolve_alert_settings,
    update_alert_settings,
)
from freelance_hub.domain.alert_store import StorageUnavailable
from freelance_hub.domain.entities import DEFAULT_ALERT_SETTINGS, normalize_lead_days


def test_missing_settings_resolve_to_unsaved_defaults(memory_store):
    settings = resolve_alert_settings(memory_store, "owner-1")

    assert settings == DEFAULT_ALERT_SETTINGS
    assert settings.lead_days == (1, 3, 7)
    assert settings.payment_aging is True
    assert settings.persisted is False
    assert "save_settings" not in memory_store.operations()
    assert memory_store.settings == {}


def test_stored_settings_win_over_defaults(memory_store):
    update_alert_settings(memory_store, "owner-1", lead_days=[14], payment_aging=False)

    settings = resolve_alert_settings(memory_store, "owner-1")

    assert settings.lead_days == (14,)
    assert settings.payment_aging is False
    assert settings.persisted is True


def test_update_normalises_lead_days(memory_store):
    saved = update_alert_settings(
        memory_store, "owner-1", lead_days=[7, 1, 7, 3], payment_aging=True
    )

    assert saved.lead_days == (1, 3, 7)


def test_empty_lead_days_are_allowed():
    assert normalize_lead_days([]) == ()


@pytest.mark.parametrize("lead_days", [[0], [-1], [366], [True], ["3"]])
def test_invalid_lead_days_are_rejected(memory_store, lead_days):
    with pytest.raises(ValueError):
        update_alert_settings(memory_store, "owner-1", lead_days=lead_days, payment_aging=True)

    assert memory_store.settings == {}


def test_storage_errors_propagate(memory_store):
    memory_store.failing.add("get_settings")

    with pytest.raises(StorageUnavailable):
        resolve_alert_settings(memory_store, "owner-1")
