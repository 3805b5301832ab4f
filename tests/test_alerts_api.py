"""HTTP tests for the alert inbox, settings and session endpoints."""

from __future__ import annotations

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from freelance_hub.infrastructure.models import ProjectModel, TaskModel
from freelance_hub.infrastructure.scheduling import get_reconciliation_scheduler
from freelance_hub.utils import today_in_app_timezone
from main import create_app

OWNER = "owner-1"


@pytest.fixture
def client(db_session):
    get_reconciliation_scheduler.cache_clear()
    with TestClient(create_app()) as test_client:
        yield test_client
    get_reconciliation_scheduler.cache_clear()


@pytest.fixture
def seeded(db_session):
    today = today_in_app_timezone()
    db_session.add_all(
        [
            ProjectModel(
                id="p-1",
                owner_id=OWNER,
                name="Landing page",
                deadline=today + timedelta(days=1),
                status="in_progress",
            ),
            TaskModel(id="t-1", owner_id=OWNER, title="Copy review", due_date=today + timedelta(days=3)),
        ]
    )
    db_session.commit()


def _reconcile(client: TestClient, owner_id: str = OWNER) -> dict:
    response = client.post(f"/owners/{owner_id}/alerts/reconcile")
    assert response.status_code == 200
    return response.json()


def test_reconcile_then_list(client, seeded):
    body = _reconcile(client)

    assert body["outcome"] == "completed"
    assert body["candidates"] == 2
    assert sorted(alert["kind"] for alert in body["emitted"]) == ["deadline_urgent", "task_due_3"]

    again = _reconcile(client)
    assert again["emitted"] == []

    response = client.get(f"/owners/{OWNER}/alerts/")
    assert response.status_code == 200
    assert len(response.json()) == 2

    tasks_only = client.get(f"/owners/{OWNER}/alerts/", params={"entity_kind": "task"})
    assert [alert["entity_id"] for alert in tasks_only.json()] == ["t-1"]

    assert client.get(f"/owners/{OWNER}/alerts/unread-count").json() == {"unread": 2}
    assert client.get("/owners/owner-2/alerts/").json() == []


def test_mark_read(client, seeded):
    emitted = _reconcile(client)["emitted"]
    first_id = emitted[0]["id"]

    response = client.post(f"/owners/{OWNER}/alerts/read", json={"ids": [first_id, first_id]})
    assert response.json() == {"updated": 1}

    unread = client.get(f"/owners/{OWNER}/alerts/", params={"unread_only": True}).json()
    assert [alert["id"] for alert in unread] == [emitted[1]["id"]]

    response = client.post(f"/owners/{OWNER}/alerts/read-all")
    assert response.json() == {"updated": 1}
    assert client.get(f"/owners/{OWNER}/alerts/unread-count").json() == {"unread": 0}


def test_mark_read_requires_ids(client):
    response = client.post(f"/owners/{OWNER}/alerts/read", json={"ids": []})

    assert response.status_code == 422


def test_deleted_alert_is_not_emitted_again(client, seeded):
    emitted = _reconcile(client)["emitted"]

    response = client.delete(f"/owners/{OWNER}/alerts/{emitted[0]['id']}")
    assert response.status_code == 204
    assert client.delete(f"/owners/{OWNER}/alerts/{emitted[0]['id']}").status_code == 404

    assert _reconcile(client)["emitted"] == []

    assert client.delete(f"/owners/{OWNER}/alerts/").status_code == 204
    assert client.get(f"/owners/{OWNER}/alerts/").json() == []
    assert _reconcile(client)["emitted"] == []


def test_settings_defaults_are_not_persisted(client):
    response = client.get(f"/owners/{OWNER}/alert-settings/")

    assert response.status_code == 200
    assert response.json() == {"lead_days": [1, 3, 7], "payment_aging": True, "persisted": False}
    assert client.get(f"/owners/{OWNER}/alert-settings/").json()["persisted"] is False


def test_update_settings(client):
    response = client.put(
        f"/owners/{OWNER}/alert-settings/",
        json={"lead_days": [7, 3, 7], "payment_aging": False},
    )

    assert response.status_code == 200
    assert response.json() == {"lead_days": [3, 7], "payment_aging": False, "persisted": True}
    assert client.get(f"/owners/{OWNER}/alert-settings/").json() == response.json()


@pytest.mark.parametrize("lead_days", [[0], [400], ["soon"]])
def test_invalid_settings_are_rejected(client, lead_days):
    response = client.put(
        f"/owners/{OWNER}/alert-settings/",
        json={"lead_days": lead_days, "payment_aging": True},
    )

    assert response.status_code == 422
    assert client.get(f"/owners/{OWNER}/alert-settings/").json()["persisted"] is False


def test_session_lifecycle(client):
    assert client.get(f"/owners/{OWNER}/session/").json()["active"] is False

    response = client.post(f"/owners/{OWNER}/session/")
    assert response.status_code == 202
    assert response.json()["active"] is True
    assert client.get(f"/owners/{OWNER}/session/").json()["active"] is True

    assert client.delete(f"/owners/{OWNER}/session/").status_code == 204
    assert client.get(f"/owners/{OWNER}/session/").json()["active"] is False


def test_blank_owner_id_is_rejected(client):
    response = client.get("/owners/%20/alerts/unread-count")

    assert response.status_code == 400
