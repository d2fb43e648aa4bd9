"""
Bookshelf — Book API Tests
============================

What:  End-to-end tests of the /books routes over HTTP.
How:   HTTPX AsyncClient + ASGITransport against the real app, backed by a
       throwaway SQLite database (see conftest.test_client).
"""

from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest

from bookshelf.exceptions import DatabaseError

BOOK = {"title": "A", "author": "B", "summary": "C", "price": 10}


class TestCreateBook:

    @pytest.mark.asyncio
    async def test_create_returns_201_with_fields_and_id(self, test_client):
        response = await test_client.post("/books", json=BOOK)

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "A"
        assert body["author"] == "B"
        assert body["summary"] == "C"
        assert body["price"] == 10
        assert body["id"]

    @pytest.mark.asyncio
    async def test_create_without_body_stores_empty_record(self, test_client):
        response = await test_client.post("/books")

        assert response.status_code == 201
        body = response.json()
        assert body["id"]
        assert body["title"] is None
        assert body["price"] is None

    @pytest.mark.asyncio
    async def test_create_accepts_partial_and_unvalidated_values(self, test_client):
        """No required fields; negative prices are stored as-is."""
        response = await test_client.post("/books", json={"author": "Anon", "price": -3})

        assert response.status_code == 201
        assert response.json()["author"] == "Anon"
        assert response.json()["price"] == -3

    @pytest.mark.asyncio
    async def test_create_drops_unknown_fields(self, test_client):
        response = await test_client.post("/books", json={"title": "X", "isbn": "123"})

        assert response.status_code == 201
        assert "isbn" not in response.json()

    @pytest.mark.asyncio
    async def test_create_stores_numbers_sent_for_text_fields(self, test_client):
        response = await test_client.post(
            "/books", json={"title": 123, "author": 4.5, "price": 10}
        )

        assert response.status_code == 201
        assert response.json()["title"] == "123"
        assert response.json()["author"] == "4.5"

    @pytest.mark.asyncio
    async def test_whole_price_is_returned_as_integer(self, test_client):
        created = await test_client.post("/books", json={"price": 10})
        listed = await test_client.get("/books")

        assert isinstance(created.json()["price"], int)
        assert isinstance(listed.json()[0]["price"], int)

    @pytest.mark.asyncio
    async def test_fractional_price_is_unchanged(self, test_client):
        response = await test_client.post("/books", json={"price": 9.99})

        assert response.json()["price"] == 9.99


class TestListBooks:

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/books")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_list_after_two_creates(self, test_client):
        first = (await test_client.post("/books", json=BOOK)).json()
        second = (await test_client.post("/books", json={"title": "Second"})).json()

        response = await test_client.get("/books")

        assert response.status_code == 200
        books = response.json()
        assert len(books) == 2
        assert {b["id"] for b in books} == {first["id"], second["id"]}

    @pytest.mark.asyncio
    async def test_list_ignores_query_parameters(self, test_client):
        await test_client.post("/books", json={"title": "One"})
        await test_client.post("/books", json={"title": "Two"})

        response = await test_client.get("/books", params={"title": "One", "limit": 1})

        assert len(response.json()) == 2


class TestUpdateBook:

    @pytest.mark.asyncio
    async def test_update_merges_present_fields(self, test_client):
        created = (await test_client.post("/books", json=BOOK)).json()

        response = await test_client.put(f"/books/{created['id']}", json={"price": 12.5})

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["price"] == 12.5
        assert body["title"] == "A"
        assert body["author"] == "B"

    @pytest.mark.asyncio
    async def test_update_is_visible_in_list(self, test_client):
        created = (await test_client.post("/books", json=BOOK)).json()
        await test_client.put(f"/books/{created['id']}", json={"title": "Renamed"})

        books = (await test_client.get("/books")).json()

        assert books[0]["title"] == "Renamed"

    @pytest.mark.asyncio
    async def test_update_explicit_null_clears_field(self, test_client):
        created = (await test_client.post("/books", json=BOOK)).json()

        response = await test_client.put(f"/books/{created['id']}", json={"summary": None})

        assert response.json()["summary"] is None
        assert response.json()["title"] == "A"

    @pytest.mark.asyncio
    async def test_update_unknown_id_returns_empty_404(self, test_client):
        response = await test_client.put(f"/books/{uuid4()}", json={"title": "X"})

        assert response.status_code == 404
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_update_malformed_id_returns_404(self, test_client):
        response = await test_client.put("/books/not-a-uuid", json={"title": "X"})

        assert response.status_code == 404
        assert response.content == b""


class TestDeleteBook:

    @pytest.mark.asyncio
    async def test_delete_existing_returns_204_and_removes(self, test_client):
        created = (await test_client.post("/books", json=BOOK)).json()
        kept = (await test_client.post("/books", json={"title": "Keep"})).json()

        response = await test_client.delete(f"/books/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        ids = [b["id"] for b in (await test_client.get("/books")).json()]
        assert ids == [kept["id"]]

    @pytest.mark.asyncio
    async def test_delete_twice_second_is_404(self, test_client):
        created = (await test_client.post("/books", json=BOOK)).json()
        await test_client.delete(f"/books/{created['id']}")

        response = await test_client.delete(f"/books/{created['id']}")

        assert response.status_code == 404
        assert response.content == b""


class TestErrorsAndHeaders:

    @pytest.mark.asyncio
    async def test_store_error_maps_to_500(self, test_client):
        with patch(
            "bookshelf.routes.books.book_service.list_books",
            new=AsyncMock(side_effect=DatabaseError()),
        ):
            response = await test_client.get("/books")

        assert response.status_code == 500
        assert response.json()["error"] == "server_error"

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/books", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_request_id_generated_when_absent(self, test_client):
        response = await test_client.get("/books")

        assert response.headers["X-Request-ID"]


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_database(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
