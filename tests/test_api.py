from __future__ import annotations

from datetime import timedelta

import pytest

from src.hr_portal.hr_portal.main import create_app
from src.hr_portal.hr_portal.requests import service as request_service_module

JOHN = {"X-Employee-Id": "1", "X-Employee-Name": "John Employee", "X-Employee-Role": "employee"}
MIKE = {"X-Employee-Id": "3", "X-Employee-Name": "Mike Developer"}
SARAH = {"X-Employee-Id": "2", "X-Employee-Name": "Sarah Admin", "X-Employee-Role": "admin"}


@pytest.fixture
def client():
    app = create_app("config.testing")
    return app.test_client()


def _submit_leave(client, headers=JOHN, **overrides):
    body = {"type": "Annual Leave", "start_date": "2026-06-10", "end_date": "2026-06-12", "reason": "Family trip"}
    body.update(overrides)
    return client.post("/api/leaves", json=body, headers=headers)


def test_requests_without_identity_are_unauthenticated(client):
    resp = client.post("/api/attendance/punch")

    assert resp.status_code == 401
    assert resp.get_json()["error"] == "unauthenticated"


def test_unknown_role_is_unauthenticated(client):
    headers = dict(JOHN, **{"X-Employee-Role": "superuser"})

    assert client.get("/api/attendance/today", headers=headers).status_code == 401


def test_punch_in_then_out(client):
    first = client.post("/api/attendance/punch", headers=JOHN).get_json()
    assert first["status"] == "Present"
    assert first["punch_in"] is not None
    assert first["punch_out"] is None

    second = client.post("/api/attendance/punch", headers=JOHN).get_json()
    assert second["punch_out"] is not None

    today = client.get("/api/attendance/today", headers=JOHN).get_json()
    assert today == second


def test_disconnections_downgrade_after_threshold(client):
    client.post("/api/attendance/punch", headers=JOHN)
    for _ in range(2):
        body = client.post("/api/attendance/disconnections", headers=JOHN).get_json()
        assert body["status"] == "Present"

    body = client.post("/api/attendance/disconnections", headers=JOHN).get_json()
    assert body["disconnection_count"] == 3
    assert body["status"] == "Half-day"


def test_leave_lifecycle(client):
    resp = _submit_leave(client)
    assert resp.status_code == 201
    assert resp.get_json() == {"id": 1, "status": "Pending"}

    pending = client.get("/api/admin/leaves/pending", headers=SARAH).get_json()
    assert [p["id"] for p in pending] == [1]
    assert pending[0]["days"] == 3
    assert pending[0]["employee_name"] == "John Employee"

    assert client.post("/api/admin/leaves/1/approve", headers=SARAH).status_code == 200
    again = client.post("/api/admin/leaves/1/reject", headers=SARAH)
    assert again.status_code == 409
    assert again.get_json()["error"] == "invalid_state"

    mine = client.get("/api/leaves", headers=JOHN).get_json()
    assert [(m["id"], m["status"]) for m in mine] == [(1, "Approved")]
    assert client.get("/api/admin/leaves/pending", headers=SARAH).get_json() == []


def test_employee_cannot_reach_admin_routes(client):
    _submit_leave(client)

    assert client.get("/api/admin/leaves/pending", headers=JOHN).status_code == 403
    assert client.post("/api/admin/leaves/1/approve", headers=MIKE).status_code == 403
    assert client.get("/api/admin/dashboard", headers=JOHN).status_code == 403


def test_resolving_unknown_request_is_not_found(client):
    resp = client.post("/api/admin/regularizations/999/approve", headers=SARAH)

    assert resp.status_code == 404
    assert resp.get_json()["error"] == "not_found"


@pytest.mark.parametrize(
    "overrides",
    [
        {"start_date": "2026-06-12", "end_date": "2026-06-10"},
        {"type": "Holiday"},
        {"reason": ""},
    ],
)
def test_invalid_leave_is_bad_request(client, overrides):
    resp = _submit_leave(client, **overrides)

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"
    assert client.get("/api/leaves", headers=JOHN).get_json() == []


def test_regularization_window(client, monkeypatch, fixed_now):
    monkeypatch.setattr(request_service_module, "now_utc", lambda: fixed_now)
    today = fixed_now.date()
    body = {"type": "Missed Punch In", "reason": "Badge reader down"}

    future = client.post(
        "/api/regularizations",
        json=dict(body, for_date=(today + timedelta(days=1)).isoformat()),
        headers=JOHN,
    )
    assert future.status_code == 400

    too_old = client.post(
        "/api/regularizations",
        json=dict(body, for_date=(today - timedelta(days=31)).isoformat()),
        headers=JOHN,
    )
    assert too_old.status_code == 400

    ok = client.post("/api/regularizations", json=dict(body, for_date=today.isoformat()), headers=JOHN)
    assert ok.status_code == 201

    pending = client.get("/api/admin/regularizations/pending", headers=SARAH).get_json()
    assert [(p["id"], p["type"]) for p in pending] == [(1, "Missed Punch In")]

    assert client.post("/api/admin/regularizations/1/reject", headers=SARAH).status_code == 200
    mine = client.get("/api/regularizations", headers=JOHN).get_json()
    assert mine[0]["status"] == "Rejected"


def test_admin_dashboard_uses_roster_size(client):
    client.post("/api/attendance/punch", headers=JOHN)
    _submit_leave(client, headers=MIKE)

    stats = client.get("/api/admin/dashboard", headers=SARAH).get_json()

    assert stats == {
        "total_employees": 3,
        "present_today": 1,
        "pending_leaves": 1,
        "pending_regularizations": 0,
    }


def test_employee_dashboard(client):
    client.post("/api/attendance/punch", headers=JOHN)

    body = client.get("/api/dashboard/me", headers=JOHN).get_json()

    assert body["leave_balance"] == 15
    assert body["half_days_this_month"] == 0
    assert body["attendance"]["status"] == "Present"


def test_employee_dashboard_for_unknown_roster_entry(client):
    headers = {"X-Employee-Id": "77", "X-Employee-Name": "Contractor"}

    body = client.get("/api/dashboard/me", headers=headers).get_json()

    assert body["leave_balance"] == 0
    assert body["attendance"]["status"] == "Absent"
