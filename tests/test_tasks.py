"""Tests for the task CRUD endpoints."""

from __future__ import annotations

import pytest
from flask.testing import FlaskClient


def _create(client: FlaskClient, **fields):
    payload = {"title": "X"}
    payload.update(fields)
    response = client.post("/api/tasks", json=payload)
    assert response.status_code == 201
    return response.get_json()


def test_list_is_empty_initially(client: FlaskClient):
    response = client.get("/api/tasks")
    assert response.status_code == 200
    assert response.get_json() == []


def test_create_returns_incomplete_task_and_lists_it(client: FlaskClient):
    task = _create(client)

    assert task["title"] == "X"
    assert task["completed"] is False
    assert task["id"]
    assert task["_id"] == task["id"]
    assert task["description"] is None
    assert task["dueDate"] is None

    listed = client.get("/api/tasks").get_json()
    assert [t["id"] for t in listed] == [task["id"]]


def test_create_with_optional_fields(client: FlaskClient):
    task = _create(
        client,
        title="Write report",
        description="quarterly numbers",
        dueDate="2024-05-01",
    )

    assert task["description"] == "quarterly numbers"
    assert task["dueDate"] == "2024-05-01T00:00:00"


def test_create_normalizes_utc_due_date(client: FlaskClient):
    task = _create(client, dueDate="2024-05-01T10:30:00Z")
    assert task["dueDate"] == "2024-05-01T10:30:00"


def test_create_ignores_client_completed_flag(client: FlaskClient):
    task = _create(client, completed=True)
    assert task["completed"] is False


@pytest.mark.parametrize(
    "payload",
    [
        {"description": "no title"},
        {"title": ""},
        {"title": 42},
        {"title": "X", "description": 5},
        {"title": "X", "dueDate": "next tuesday"},
        {"title": "X", "dueDate": "0001-01-01T00:00:00+01:00"},
        {"title": "x" * 256},
    ],
)
def test_create_validation(client: FlaskClient, payload):
    response = client.post("/api/tasks", json=payload)

    assert response.status_code == 400
    assert response.get_json()["message"]
    assert client.get("/api/tasks").get_json() == []


def test_list_preserves_creation_order(client: FlaskClient):
    ids = [_create(client, title=f"task {n}")["id"] for n in range(3)]
    assert [t["id"] for t in client.get("/api/tasks").get_json()] == ids


def test_get_single_task(client: FlaskClient):
    task = _create(client)
    response = client.get(f"/api/tasks/{task['id']}")
    assert response.status_code == 200
    assert response.get_json()["title"] == "X"


def test_update_completed_changes_only_that_field(client: FlaskClient):
    task = _create(client, description="d", dueDate="2024-05-01")

    response = client.put(f"/api/tasks/{task['id']}", json={"completed": True})

    assert response.status_code == 200
    updated = response.get_json()
    assert updated["completed"] is True
    for key in ("id", "title", "description", "dueDate", "createdAt"):
        assert updated[key] == task[key]


def test_toggle_completed_back_and_forth(client: FlaskClient):
    task = _create(client)
    url = f"/api/tasks/{task['id']}"

    assert client.put(url, json={"completed": True}).get_json()["completed"] is True
    assert client.put(url, json={"completed": False}).get_json()["completed"] is False


def test_update_multiple_fields_and_clear_due_date(client: FlaskClient):
    task = _create(client, dueDate="2024-05-01")

    response = client.patch(
        f"/api/tasks/{task['id']}",
        json={"title": "Renamed", "description": "now described", "dueDate": None},
    )

    assert response.status_code == 200
    updated = response.get_json()
    assert updated["title"] == "Renamed"
    assert updated["description"] == "now described"
    assert updated["dueDate"] is None
    assert updated["completed"] is False


def test_update_with_empty_body_returns_task_unchanged(client: FlaskClient):
    task = _create(client)
    response = client.put(f"/api/tasks/{task['id']}", json={})
    assert response.status_code == 200
    assert response.get_json()["title"] == "X"


@pytest.mark.parametrize(
    "payload",
    [
        {"completed": "maybe"},
        {"title": ""},
        {"title": "x" * 256},
        {"dueDate": "soon"},
        {"dueDate": "0001-01-01T00:00:00+01:00"},
    ],
)
def test_update_validation(client: FlaskClient, payload):
    task = _create(client)

    response = client.put(f"/api/tasks/{task['id']}", json=payload)

    assert response.status_code == 400
    assert client.get(f"/api/tasks/{task['id']}").get_json()["title"] == "X"


def test_update_unknown_task_is_not_found(client: FlaskClient):
    response = client.put("/api/tasks/does-not-exist", json={"completed": True})

    assert response.status_code == 404
    assert response.get_json()["message"] == "Task not found"


def test_delete_twice(client: FlaskClient):
    task = _create(client)
    url = f"/api/tasks/{task['id']}"

    first = client.delete(url)
    assert first.status_code == 200
    assert first.get_json() == {"message": "Task deleted"}

    second = client.delete(url)
    assert second.status_code == 404
    assert second.get_json()["message"] == "Task not found"

    assert client.get("/api/tasks").get_json() == []


def test_deleted_task_cannot_be_updated(client: FlaskClient):
    task = _create(client)
    url = f"/api/tasks/{task['id']}"
    client.delete(url)

    assert client.put(url, json={"completed": True}).status_code == 404
    assert client.get(url).status_code == 404


def test_tasks_info_endpoint(client: FlaskClient):
    response = client.get("/api/tasks/info")
    assert response.status_code == 200
    assert "GET /api/tasks" in response.get_json()["endpoints"]


def test_tasks_are_public_by_default(client: FlaskClient):
    assert client.get("/api/tasks").status_code == 200
    assert client.post("/api/tasks", json={"title": "anon"}).status_code == 201


def test_title_at_column_limit_is_accepted(client: FlaskClient):
    task = _create(client, title="x" * 255)
    assert len(task["title"]) == 255
