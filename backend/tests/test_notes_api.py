"""
NoteKeeper Backend - Notes API Tests
=======================================

What:  The HTTP contract end to end: routes → service → SQLAlchemy store →
       in-memory SQLite. Status codes, messages, JSON shape, ordering.
"""

import pytest
from datetime import datetime
from uuid import uuid4

from app.routes.notes import get_note_store
from app.services.store_base import NoteStore


def parse_ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


async def create(client, title="A", content="B"):
    response = await client.post("/api/notes", json={"title": title, "content": content})
    assert response.status_code == 201
    return response.json()


class TestListAndCreate:

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/api/notes")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_create_round_trip(self, test_client):
        created = await create(test_client, "A", "B")

        assert set(created) == {"id", "title", "content", "createdAt", "updatedAt"}
        assert created["id"]
        assert created["title"] == "A"
        assert created["content"] == "B"
        assert created["createdAt"] == created["updatedAt"]

        listed = (await test_client.get("/api/notes")).json()
        assert listed == [created]

    @pytest.mark.asyncio
    async def test_create_trims(self, test_client):
        created = await create(test_client, "  Title  ", "\n Body \t")

        assert created["title"] == "Title"
        assert created["content"] == "Body"

    @pytest.mark.asyncio
    async def test_newest_first(self, test_client):
        first = await create(test_client, "first", "x")
        second = await create(test_client, "second", "y")

        listed = (await test_client.get("/api/notes")).json()

        assert [n["id"] for n in listed] == [second["id"], first["id"]]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"title": "", "content": "B"},
        {"title": "A", "content": "   "},
        {"title": "A"},
        {"content": "B"},
        {},
        {"title": "\ufeff", "content": "B"},
    ])
    async def test_create_rejects_missing_or_blank(self, test_client, body):
        await create(test_client, "existing", "note")

        response = await test_client.post("/api/notes", json=body)

        assert response.status_code == 400
        assert response.json()["message"] == "Title and Content are required"
        assert len((await test_client.get("/api/notes")).json()) == 1

    @pytest.mark.asyncio
    async def test_create_without_body(self, test_client):
        response = await test_client.post("/api/notes")

        assert response.status_code == 400
        assert response.json()["message"] == "Title and Content are required"

    @pytest.mark.asyncio
    async def test_create_wrong_type_is_client_error(self, test_client):
        response = await test_client.post("/api/notes", json={"title": 5, "content": ["x"]})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"


class TestGet:

    @pytest.mark.asyncio
    async def test_get_existing(self, test_client):
        created = await create(test_client)

        response = await test_client.get(f"/api/notes/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.asyncio
    async def test_get_missing(self, test_client):
        response = await test_client.get(f"/api/notes/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["message"] == "Note not found"

    @pytest.mark.asyncio
    async def test_get_malformed_id(self, test_client):
        response = await test_client.get("/api/notes/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid ID"


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_content_only(self, test_client):
        created = await create(test_client, "Title", "Old")

        response = await test_client.put(
            f"/api/notes/{created['id']}", json={"content": "  New  "}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Title"
        assert body["content"] == "New"
        assert body["createdAt"] == created["createdAt"]
        assert parse_ts(body["updatedAt"]) > parse_ts(created["updatedAt"])

    @pytest.mark.asyncio
    async def test_update_both_fields(self, test_client):
        created = await create(test_client)

        response = await test_client.put(
            f"/api/notes/{created['id']}", json={"title": "T2", "content": "C2"}
        )

        assert response.status_code == 200
        fetched = (await test_client.get(f"/api/notes/{created['id']}")).json()
        assert (fetched["title"], fetched["content"]) == ("T2", "C2")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body,message", [
        ({"title": "  "}, "Title cannot be empty"),
        ({"content": ""}, "Content cannot be empty"),
        ({"title": "Fine", "content": " "}, "Content cannot be empty"),
        ({"title": None}, "Title cannot be empty"),
    ])
    async def test_update_blank_field_changes_nothing(self, test_client, body, message):
        created = await create(test_client, "Title", "Content")

        response = await test_client.put(f"/api/notes/{created['id']}", json=body)

        assert response.status_code == 400
        assert response.json()["message"] == message
        fetched = (await test_client.get(f"/api/notes/{created['id']}")).json()
        assert fetched == created

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {},
        {"title": "x"},
        {"title": "  "},
        {"content": ""},
        {"title": 5},
        {"content": ["x"]},
        ["x"],
        "text",
    ])
    async def test_update_missing_note(self, test_client, body):
        response = await test_client.put(f"/api/notes/{uuid4()}", json=body)

        assert response.status_code == 404
        assert response.json()["message"] == "Note not found"

    @pytest.mark.asyncio
    async def test_update_malformed_id(self, test_client):
        response = await test_client.put("/api/notes/12345", json={"title": "x"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid ID"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"title": 5}, {"content": ["x"]}, ["x"], "text"])
    async def test_update_wrong_type_is_client_error(self, test_client, body):
        created = await create(test_client, "Title", "Content")

        response = await test_client.put(f"/api/notes/{created['id']}", json=body)

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body"
        assert (await test_client.get(f"/api/notes/{created['id']}")).json() == created

    @pytest.mark.asyncio
    async def test_update_byte_order_mark_title(self, test_client):
        created = await create(test_client, "Title", "Content")

        response = await test_client.put(
            f"/api/notes/{created['id']}", json={"title": "\ufeff"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Title cannot be empty"


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_twice(self, test_client):
        created = await create(test_client)

        first = await test_client.delete(f"/api/notes/{created['id']}")
        second = await test_client.delete(f"/api/notes/{created['id']}")

        assert first.status_code == 200
        assert first.json() == {"message": "Deleted successfully"}
        assert second.status_code == 404
        assert (await test_client.get("/api/notes")).json() == []

    @pytest.mark.asyncio
    async def test_delete_malformed_id(self, test_client):
        response = await test_client.delete("/api/notes/abc")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid ID"


class FailingStore(NoteStore):
    """Every call fails the way a lost database connection would."""

    async def list(self):
        raise ConnectionError("connection refused by 10.0.0.5")

    async def get(self, note_id):
        raise ConnectionError("connection refused by 10.0.0.5")

    async def create(self, title, content):
        raise ConnectionError("connection refused by 10.0.0.5")

    async def save(self, note):
        raise ConnectionError("connection refused by 10.0.0.5")

    async def delete_by_id(self, note_id):
        raise ConnectionError("connection refused by 10.0.0.5")


class TestStoreFaults:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,path,body", [
        ("GET", "/api/notes", None),
        ("POST", "/api/notes", {"title": "A", "content": "B"}),
        ("PUT", f"/api/notes/{uuid4()}", {"title": "A"}),
        ("DELETE", f"/api/notes/{uuid4()}", None),
    ])
    async def test_store_fault_is_generic_500(self, test_app, test_client, method, path, body):
        test_app.dependency_overrides[get_note_store] = lambda: FailingStore()

        response = await test_client.request(method, path, json=body)

        assert response.status_code == 500
        payload = response.json()
        assert payload["error"] == "server_error"
        assert "10.0.0.5" not in response.text
