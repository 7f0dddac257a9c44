import os
from datetime import date, timedelta

import pytest

from skilltracker.core.date_utils import format_date, week_start


def get_client():
    # Use in-memory sqlite for tests
    os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
    # Import after env is set so engine is created with sqlite
    from skilltracker.main import app  # noqa: WPS433
    from fastapi.testclient import TestClient  # noqa: WPS433
    return TestClient(app)


@pytest.fixture
def memory_client():
    """Client whose routes all share one fresh in-memory store."""
    from skilltracker.api.deps import get_store
    from skilltracker.storage.execution_store import ExecutionStore
    from skilltracker.storage.kv import MemoryKeyValueStore

    client = get_client()
    store = ExecutionStore(MemoryKeyValueStore())
    client.app.dependency_overrides[get_store] = lambda: store
    yield client, store
    client.app.dependency_overrides.clear()


def test_root_ok():
    client = get_client()
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert "message" in data


def test_create_and_list_skill():
    client = get_client()
    cr = client.post("/skills/", json={"name": "  Piano  ", "weekly_goal": 4})
    assert cr.status_code == 200, cr.text
    skill = cr.json()
    assert skill["name"] == "Piano"
    assert skill["weekly_goal"] == 4

    lr = client.get("/skills/")
    assert lr.status_code == 200
    assert any(s["id"] == skill["id"] for s in lr.json())

    gr = client.get(f"/skills/{skill['id']}")
    assert gr.status_code == 200
    assert gr.json()["name"] == "Piano"


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"name": "   ", "weekly_goal": 3}, "Skill name is required"),
        ({"weekly_goal": 3}, "Skill name is required"),
        ({"name": "Chess", "weekly_goal": 0}, "Weekly goal must be at least 1"),
        ({"name": "Chess", "weekly_goal": "lots"}, "Weekly goal must be at least 1"),
        ({"name": "Chess", "weekly_goal": 51}, "Weekly goal cannot exceed 50"),
    ],
)
def test_skill_validation_messages(memory_client, payload, message):
    client, store = memory_client
    r = client.post("/skills/", json=payload)
    assert r.status_code == 422
    assert r.json()["detail"] == message
    assert store.get_skills() == []


def test_update_skill_keeps_identity(memory_client):
    client, _ = memory_client
    skill = client.post("/skills/", json={"name": "Chess", "weekly_goal": 3}).json()

    ur = client.put(f"/skills/{skill['id']}", json={"name": "Chess puzzles", "weekly_goal": "5"})
    assert ur.status_code == 200, ur.text
    updated = ur.json()
    assert updated["id"] == skill["id"]
    assert updated["created_at"] == skill["created_at"]
    assert updated["weekly_goal"] == 5

    missing = client.put("/skills/nope", json={"name": "x", "weekly_goal": 1})
    assert missing.status_code == 404


def test_detailed_log_rejects_duplicate_day(memory_client):
    client, store = memory_client
    skill = client.post("/skills/", json={"name": "Guitar", "weekly_goal": 3}).json()
    payload = {"skill_id": skill["id"], "date": "2025-01-06", "count": 2}

    first = client.post("/logs/", json=payload)
    assert first.status_code == 200, first.text
    assert first.json()["count"] == 2

    second = client.post("/logs/", json={**payload, "count": 1})
    assert second.status_code == 409
    assert second.json()["detail"].startswith("Already logged this skill for this date")
    assert len(store.get_logs()) == 1


def test_log_input_errors(memory_client):
    client, _ = memory_client
    skill = client.post("/skills/", json={"name": "Guitar", "weekly_goal": 3}).json()

    r = client.post("/logs/", json={"count": 1})
    assert r.status_code == 422
    assert r.json()["detail"] == "Please select a skill"

    r = client.post("/logs/", json={"skill_id": "ghost", "count": 1})
    assert r.status_code == 404

    r = client.post("/logs/", json={"skill_id": skill["id"], "count": "zero"})
    assert r.status_code == 422
    assert r.json()["detail"] == "Count must be at least 1"

    r = client.post("/logs/", json={"skill_id": skill["id"], "date": "06/01/2025", "count": 1})
    assert r.status_code == 422
    assert r.json()["detail"] == "Date must be YYYY-MM-DD"


def test_quick_log_increments_todays_log(memory_client):
    client, store = memory_client
    skill = client.post("/skills/", json={"name": "Stretching", "weekly_goal": 7}).json()

    first = client.post("/logs/quick", json={"skill_id": skill["id"]})
    second = client.post("/logs/quick", json={"skill_id": skill["id"]})
    assert first.status_code == 200 and second.status_code == 200
    assert second.json()["id"] == first.json()["id"]
    assert second.json()["count"] == 2

    logs = store.get_logs()
    assert len(logs) == 1
    assert logs[0].date == format_date(date.today())


def test_update_and_delete_log(memory_client):
    client, _ = memory_client
    skill = client.post("/skills/", json={"name": "Guitar", "weekly_goal": 3}).json()
    log = client.post(
        "/logs/", json={"skill_id": skill["id"], "date": "2025-01-07", "count": 1}
    ).json()

    ur = client.put(f"/logs/{log['id']}", json={"count": 4})
    assert ur.status_code == 200
    assert ur.json()["count"] == 4

    assert client.put(f"/logs/{log['id']}", json={"count": 0}).status_code == 422
    assert client.delete(f"/logs/{log['id']}").status_code == 200
    assert client.delete(f"/logs/{log['id']}").status_code == 404


def test_list_logs_filters(memory_client):
    client, _ = memory_client
    a = client.post("/skills/", json={"name": "A", "weekly_goal": 3}).json()
    b = client.post("/skills/", json={"name": "B", "weekly_goal": 3}).json()
    for skill, day in [(a, "2025-01-05"), (a, "2025-01-06"), (b, "2025-01-06"), (a, "2025-01-13")]:
        client.post("/logs/", json={"skill_id": skill["id"], "date": day, "count": 1})

    r = client.get("/logs/", params={"start_date": "2025-01-06", "end_date": "2025-01-12"})
    assert r.status_code == 200
    assert sorted(log["date"] for log in r.json()) == ["2025-01-06", "2025-01-06"]

    r = client.get("/logs/", params={"skill_id": a["id"]})
    assert len(r.json()) == 3

    r = client.get("/logs/", params={"date": "2025-01-06", "skill_id": b["id"]})
    assert len(r.json()) == 1

    assert client.get("/logs/", params={"start_date": "soon"}).status_code == 422


def test_delete_skill_cascades_to_its_logs(memory_client):
    client, store = memory_client
    keep = client.post("/skills/", json={"name": "Keep", "weekly_goal": 3}).json()
    drop = client.post("/skills/", json={"name": "Drop", "weekly_goal": 3}).json()
    for day in ["2025-01-06", "2025-01-07"]:
        client.post("/logs/", json={"skill_id": drop["id"], "date": day, "count": 1})
    client.post("/logs/", json={"skill_id": keep["id"], "date": "2025-01-06", "count": 1})

    r = client.delete(f"/skills/{drop['id']}")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "deleted_logs": 2}

    assert [s.id for s in store.get_skills()] == [keep["id"]]
    assert [log.skill_id for log in store.get_logs()] == [keep["id"]]
    assert client.delete(f"/skills/{drop['id']}").status_code == 404


def test_weekly_report_totals(memory_client):
    client, _ = memory_client
    today = date.today()
    a = client.post("/skills/", json={"name": "Reading", "weekly_goal": 4}).json()
    b = client.post("/skills/", json={"name": "Running", "weekly_goal": 6}).json()
    client.post("/logs/", json={"skill_id": a["id"], "date": format_date(today), "count": 4})
    client.post("/logs/", json={"skill_id": b["id"], "date": format_date(today), "count": 3})
    # Last week's Sunday is outside the report
    last_sunday = week_start(today) - timedelta(days=1)
    client.post("/logs/", json={"skill_id": b["id"], "date": format_date(last_sunday), "count": 5})

    r = client.get("/reports/weekly")
    assert r.status_code == 200, r.text
    report = r.json()
    assert report["start_date"] == format_date(week_start(today))
    assert report["total_goal"] == 10
    assert report["total_completed"] == 7
    assert report["overall_progress"] == pytest.approx(70.0)

    reading, running = report["skills"]
    assert reading["skill_name"] == "Reading"
    assert reading["status"] == "complete"
    assert reading["summary"] == "4/4 (100%)"
    assert running["completed_count"] == 3
    assert running["status"] in ("on-track", "behind")
    assert len(running["daily_breakdown"]) == 7


def test_weekly_report_empty(memory_client):
    client, _ = memory_client
    report = client.get("/reports/weekly").json()
    assert report["skills"] == []
    assert report["overall_progress"] == 0
