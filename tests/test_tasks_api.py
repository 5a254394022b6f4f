import uuid

from fastapi.testclient import TestClient

from quickadd.main import app


def test_root():
    with TestClient(app) as client:
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["service"] == "quickadd"


def test_can_create_and_list_tasks():
    with TestClient(app) as client:
        # create
        payload = {"title": "Write CI and tests", "priority": 2}
        r = client.post("/tasks", json=payload)
        assert r.status_code == 200
        created = r.json()
        assert created["id"] >= 1
        assert created["title"] == payload["title"]
        assert created["priority"] == 2
        assert created["completed"] is False

        # list
        r = client.get("/tasks")
        assert r.status_code == 200
        items = r.json()
        assert isinstance(items, list)
        assert any(t["title"] == payload["title"] for t in items)


def test_update_filter_and_delete_task():
    with TestClient(app) as client:
        task_id = client.post("/tasks", json={"title": "Renew passport"}).json()["id"]

        r = client.patch(f"/tasks/{task_id}", json={"completed": True, "notes": "photos first"})
        assert r.status_code == 200
        assert r.json()["completed"] is True
        assert r.json()["notes"] == "photos first"

        done = client.get("/tasks", params={"completed": True}).json()
        assert any(t["id"] == task_id for t in done)
        open_ = client.get("/tasks", params={"completed": False}).json()
        assert all(t["id"] != task_id for t in open_)

        r = client.delete(f"/tasks/{task_id}")
        assert r.status_code == 200
        assert r.json() == {"deleted": True}
        assert client.get(f"/tasks/{task_id}").status_code == 404
        assert client.delete(f"/tasks/{task_id}").status_code == 404
        assert client.patch(f"/tasks/{task_id}", json={"title": "x"}).status_code == 404


def test_task_validation():
    with TestClient(app) as client:
        assert client.post("/tasks", json={"title": "x", "priority": 4}).status_code == 422
        assert client.post("/tasks", json={"title": "x" * 281}).status_code == 422
        r = client.post("/tasks", json={"title": "x", "list_id": 999999})
        assert r.status_code == 404


def test_lists():
    name = f"Errands {uuid.uuid4().hex[:8]}"
    with TestClient(app) as client:
        r = client.post("/lists", json={"name": name})
        assert r.status_code == 200
        created = r.json()
        assert created["name"] == name

        # names are unique regardless of case
        assert client.post("/lists", json={"name": name.upper()}).status_code == 409

        assert any(item["id"] == created["id"] for item in client.get("/lists").json())
        assert client.get(f"/lists/{created['id']}").json()["name"] == name
        assert client.get("/lists/999999").status_code == 404

        r = client.post("/tasks", json={"title": "Pick up dry cleaning", "list_id": created["id"]})
        assert r.status_code == 200
        in_list = client.get("/tasks", params={"list_id": created["id"]}).json()
        assert [t["title"] for t in in_list] == ["Pick up dry cleaning"]


def test_reschedule_moves_the_scheduled_block():
    with TestClient(app) as client:
        payload = {
            "title": "Quarterly review",
            "due_date": "2030-01-10",
            "scheduled_start": "2030-01-10T15:00:00Z",
            "scheduled_end": "2030-01-10T16:30:00Z",
        }
        task_id = client.post("/tasks", json=payload).json()["id"]

        r = client.post(
            f"/tasks/{task_id}/reschedule",
            json={"when": "specific_date", "specific_date": "January 15, 2030"},
        )
        assert r.status_code == 200
        moved = r.json()
        assert moved["due_date"] == "2030-01-15"
        assert moved["scheduled_start"].startswith("2030-01-15T15:00")
        assert moved["scheduled_end"].startswith("2030-01-15T16:30")


def test_reschedule_without_a_time():
    with TestClient(app) as client:
        task_id = client.post("/tasks", json={"title": "Call bank"}).json()["id"]
        r = client.post(f"/tasks/{task_id}/reschedule", json={"when": "tomorrow"})
        assert r.status_code == 200
        assert r.json()["due_date"] is not None
        assert r.json()["scheduled_start"] is None


def test_reschedule_errors():
    with TestClient(app) as client:
        task_id = client.post("/tasks", json={"title": "Call bank"}).json()["id"]
        assert client.post(f"/tasks/{task_id}/reschedule", json={"when": "someday"}).status_code == 400
        r = client.post(f"/tasks/{task_id}/reschedule", json={"when": "today", "timezone": "Mars/Olympus"})
        assert r.status_code == 400
        assert client.post("/tasks/999999/reschedule", json={"when": "today"}).status_code == 404
