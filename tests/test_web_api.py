"""
Tests for the HTTP service
"""

import asyncio
import httpx
import pytest
from todo_tracker.services.memory_store import MemoryStore
from todo_tracker.web.main import create_app


def test_list_empty(client):
    """Test GET /todos on an empty store"""
    response = client.get("/todos")

    assert response.status_code == 200
    assert response.json() == []


def test_create_todo(client, memory_store):
    """Test POST /todos creates a todo"""
    response = client.post("/todos", json={"title": "buy milk"})

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["title"] == "buy milk"
    assert body["completed"] is False
    assert body["created_at"]
    assert body["completed_at"] is None
    assert memory_store.count() == 1


@pytest.mark.parametrize("payload", [
    {"title": ""},
    {"title": "   "},
    {},
    {"title": 5},
    {"title": ["buy milk"]},
])
def test_create_todo_invalid(client, memory_store, payload):
    """Test POST /todos with empty or malformed title is rejected"""
    response = client.post("/todos", json=payload)

    assert response.status_code == 400
    assert response.json()["error_code"] == "invalid_input"
    assert memory_store.count() == 0


def test_create_todo_malformed_json(client, memory_store):
    """Test POST /todos with a broken body is rejected"""
    response = client.post(
        "/todos", content=b"{title", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert memory_store.count() == 0


def test_update_todo(client):
    """Test PUT /todos/{id} sets completion"""
    client.post("/todos", json={"title": "buy milk"})

    response = client.put("/todos/1", json={"completed": True})

    assert response.status_code == 200
    assert response.json() == {"result": "updated"}
    todo = client.get("/todos").json()[0]
    assert todo["completed"] is True
    assert todo["completed_at"] is not None


def test_update_todo_not_found(client):
    """Test PUT on unknown id returns 404"""
    response = client.put("/todos/42", json={"completed": True})

    assert response.status_code == 404
    assert response.json()["error_code"] == "not_found"


@pytest.mark.parametrize("path,payload", [
    ("/todos/abc", {"completed": True}),
    ("/todos/1", {}),
    ("/todos/1", {"completed": "maybe"}),
    ("/todos/1", {"completed": "true"}),
    ("/todos/1", {"completed": "on"}),
    ("/todos/1", {"completed": 1}),
    ("/todos/1", {"completed": "1"}),
])
def test_update_todo_bad_request(client, path, payload):
    """Test PUT with bad id or body returns 400"""
    client.post("/todos", json={"title": "buy milk"})

    response = client.put(path, json=payload)

    assert response.status_code == 400
    assert client.get("/todos").json()[0]["completed"] is False


def test_delete_todo(client, memory_store):
    """Test DELETE /todos/{id} removes the todo"""
    client.post("/todos", json={"title": "buy milk"})

    response = client.delete("/todos/1")

    assert response.status_code == 200
    assert response.json() == {"result": "deleted"}
    assert memory_store.count() == 0


def test_delete_todo_not_found(client, memory_store):
    """Test DELETE on unknown id returns 404 and keeps the store"""
    client.post("/todos", json={"title": "buy milk"})

    response = client.delete("/todos/42")

    assert response.status_code == 404
    assert memory_store.count() == 1


def test_delete_todo_bad_id(client):
    """Test DELETE with non-numeric id returns 400"""
    response = client.delete("/todos/abc")

    assert response.status_code == 400


def test_ids_after_delete(client):
    """Test ids keep increasing after deletions"""
    client.post("/todos", json={"title": "a"})
    client.post("/todos", json={"title": "b"})
    client.delete("/todos/2")

    response = client.post("/todos", json={"title": "c"})

    assert response.json()["id"] == 3
    assert [t["id"] for t in client.get("/todos").json()] == [1, 3]


def test_health(client):
    """Test health check endpoint"""
    assert client.get("/health").json() == {"status": "ok"}


def test_apps_do_not_share_state():
    """Test each app works on the store it was given"""
    first, second = MemoryStore(), MemoryStore()
    first.add("only in first")

    create_app(second)

    assert second.count() == 0
    assert first.count() == 1


@pytest.mark.asyncio
async def test_concurrent_requests_get_unique_ids():
    """Test concurrent POSTs produce distinct, gap-free ids"""
    store = MemoryStore()
    transport = httpx.ASGITransport(app=create_app(store))

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        responses = await asyncio.gather(
            *(client.post("/todos", json={"title": f"todo {i}"}) for i in range(25))
        )

    assert all(r.status_code == 201 for r in responses)
    assert sorted(r.json()["id"] for r in responses) == list(range(1, 26))
    assert store.count() == 25
