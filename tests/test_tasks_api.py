from __future__ import annotations

from fastapi.testclient import TestClient


def test_root_route_ok(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["message"] == "Task Tracker API is running"


def test_health(client: TestClient) -> None:
    response = client.get("/api/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_task_shape(client: TestClient) -> None:
    response = client.post("/api/tasks", json={"title": "Buy Milk"})
    assert response.status_code == 201

    data = response.json()
    for key in ("id", "title", "completed", "priority", "createdAt", "updatedAt"):
        assert key in data
    assert data["title"] == "Buy Milk"
    assert data["completed"] is False
    assert data["priority"] == "medium"


def test_create_accepts_priority_and_created_at(client: TestClient) -> None:
    response = client.post(
        "/api/tasks",
        json={"title": "Old", "priority": "high", "createdAt": "2024-01-01T00:00:00Z"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["priority"] == "high"
    assert data["createdAt"].startswith("2024-01-01T00:00:00")


def test_create_without_title_returns_400(client: TestClient) -> None:
    for body in ({}, {"title": ""}, {"title": "   "}):
        response = client.post("/api/tasks", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Title is required"}


def test_create_with_unknown_priority_returns_400(client: TestClient) -> None:
    response = client.post("/api/tasks", json={"title": "x", "priority": "urgent"})
    assert response.status_code == 400
    assert "error" in response.json()


def test_list_sorted_newest_first(client: TestClient) -> None:
    client.post("/api/tasks", json={"title": "first", "createdAt": "2024-01-01T00:00:00Z"})
    client.post("/api/tasks", json={"title": "second", "createdAt": "2024-02-01T00:00:00Z"})

    response = client.get("/api/tasks")
    assert response.status_code == 200
    assert [t["title"] for t in response.json()] == ["second", "first"]


def test_get_task_by_id(client: TestClient) -> None:
    task_id = client.post("/api/tasks", json={"title": "Lookup"}).json()["id"]

    assert client.get(f"/api/tasks/{task_id}").json()["title"] == "Lookup"
    assert client.get("/api/tasks/missing").status_code == 404


def test_patch_updates_title_and_priority(client: TestClient) -> None:
    task_id = client.post("/api/tasks", json={"title": "Draft"}).json()["id"]

    response = client.patch(f"/api/tasks/{task_id}", json={"priority": "low"})
    assert response.status_code == 200
    assert response.json()["title"] == "Draft"
    assert response.json()["priority"] == "low"

    response = client.patch(f"/api/tasks/{task_id}", json={"title": "Final"})
    assert response.json()["title"] == "Final"
    assert response.json()["priority"] == "low"


def test_patch_unknown_task_returns_404(client: TestClient) -> None:
    response = client.patch("/api/tasks/missing", json={"title": "x"})
    assert response.status_code == 404
    assert response.json() == {"error": "Task not found"}


def test_toggle_flips_completed(client: TestClient) -> None:
    task_id = client.post("/api/tasks", json={"title": "Flip"}).json()["id"]

    assert client.patch(f"/api/tasks/{task_id}/toggle").json()["completed"] is True
    assert client.patch(f"/api/tasks/{task_id}/toggle").json()["completed"] is False


def test_toggle_unknown_task_returns_404(client: TestClient) -> None:
    assert client.patch("/api/tasks/missing/toggle").status_code == 404


def test_delete_returns_204_without_body(client: TestClient) -> None:
    task_id = client.post("/api/tasks", json={"title": "Gone"}).json()["id"]

    response = client.delete(f"/api/tasks/{task_id}")
    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/api/tasks").json() == []

    # Deleting again is still fine
    assert client.delete(f"/api/tasks/{task_id}").status_code == 204
