"""
Integration tests for the Books HTTP API.

Each test runs against a fresh application so the in-memory store starts empty.
"""

import asyncio
from datetime import datetime

import httpx
import pytest
from fastapi.testclient import TestClient

from main import create_fastapi_application
from repository import InMemoryBookRepository

BOOKS_URL = "/api/books"


async def poison(repository):
    async with repository.acquire():
        raise RuntimeError("holder crashed")


@pytest.fixture
def repository():
    return InMemoryBookRepository()


@pytest.fixture
def client(repository):
    return TestClient(create_fastapi_application(repository))


class TestSystemEndpoints:
    """Root and health endpoints."""

    def test_root_message(self, client):
        """Test the root endpoint reports the API is running."""
        response = client.get("/api/")

        assert response.status_code == 200
        assert response.json() == {"message": "Books API is running!!!"}

    def test_health(self, client):
        """Test the health endpoint reports UP."""
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "UP"}


class TestRoutingErrors:
    """Routing failures use the standard error body."""

    def test_wrong_method(self, client):
        """Test GET on the creation endpoint is 405 with message and code."""
        response = client.get(BOOKS_URL)

        assert response.status_code == 405
        assert response.json() == {"message": "Method Not Allowed", "code": "405"}
        assert "POST" in response.headers["allow"]

    def test_unknown_path(self, client):
        """Test an unknown route is 404 with message and code."""
        response = client.get("/api/authors")

        assert response.status_code == 404
        assert response.json() == {"message": "Not Found", "code": "404"}


class TestCreateBook:
    """POST /api/books scenarios."""

    def test_create_book(self, client):
        """Test a complete request creates a book."""
        response = client.post(BOOKS_URL, json={"title": "Dune", "author": "Herbert", "pages": 412})

        assert response.status_code == 201
        data = response.json()
        assert set(data.keys()) == {"id", "title", "author", "pages", "createdAt", "updatedAt"}
        assert data["title"] == "Dune"
        assert data["author"] == "Herbert"
        assert data["pages"] == 412
        assert data["id"]
        assert data["createdAt"] == data["updatedAt"]
        created_at = datetime.fromisoformat(data["createdAt"].replace("Z", "+00:00"))
        assert created_at.tzinfo is not None

    def test_duplicate_title(self, client):
        """Test the same title a second time is a conflict."""
        client.post(BOOKS_URL, json={"title": "Dune", "author": "Herbert", "pages": 412})

        response = client.post(BOOKS_URL, json={"title": "Dune", "author": "Herbert", "pages": 500})

        assert response.status_code == 422
        assert response.json() == {"message": "Book already exists", "code": "422"}

    def test_missing_fields(self, client, repository):
        """Test missing author and pages is rejected without storing."""
        response = client.post(BOOKS_URL, json={"title": "Dune"})

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid params", "code": "400"}
        assert asyncio.run(repository.count()) == 0

    def test_null_fields(self, client):
        """Test explicit nulls count as missing."""
        response = client.post(BOOKS_URL, json={"title": "Dune", "author": None, "pages": None})

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid params", "code": "400"}

    def test_empty_object(self, client):
        """Test an empty object is rejected as invalid params."""
        response = client.post(BOOKS_URL, json={})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid params"

    @pytest.mark.parametrize(
        "body",
        [
            '{"title": "Dune", "author": "Herbert", "pages": "412"}',
            '{"title": 7, "author": "Herbert", "pages": 412}',
            '["Dune", "Herbert", 412]',
            '{"title": "Dune",',
        ],
    )
    def test_undecodable_body(self, client, body):
        """Test wrong types and malformed JSON are client errors."""
        response = client.post(
            BOOKS_URL, content=body, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid request body", "code": "400"}

    def test_oversized_pages(self, client, repository):
        """Test page counts beyond 32 bits are rejected without storing."""
        response = client.post(
            BOOKS_URL, json={"title": "Dune", "author": "Herbert", "pages": 10**40}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid request body", "code": "400"}
        assert asyncio.run(repository.count()) == 0

    def test_ids_differ(self, client):
        """Test distinct books get distinct ids."""
        first = client.post(BOOKS_URL, json={"title": "Dune", "author": "Herbert", "pages": 412})
        second = client.post(BOOKS_URL, json={"title": "Emma", "author": "Austen", "pages": 474})

        assert first.status_code == 201
        assert second.status_code == 201
        assert first.json()["id"] != second.json()["id"]

    def test_poisoned_repository_returns_500(self, repository, client):
        """Test a poisoned store surfaces as a generic internal error."""
        with pytest.raises(RuntimeError):
            asyncio.run(poison(repository))

        response = client.post(BOOKS_URL, json={"title": "Dune", "author": "Herbert", "pages": 412})

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error", "code": "500"}


class TestConcurrentCreation:
    """Racing requests against one application."""

    @pytest.mark.asyncio
    async def test_same_title_race(self):
        """Test two concurrent posts with one title yield one 201 and one 422."""
        repository = InMemoryBookRepository()
        application = create_fastapi_application(repository)
        transport = httpx.ASGITransport(app=application)

        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
            responses = await asyncio.gather(
                http.post(BOOKS_URL, json={"title": "Dune", "author": "Herbert", "pages": 412}),
                http.post(BOOKS_URL, json={"title": "Dune", "author": "Someone", "pages": 500}),
            )

        assert sorted(response.status_code for response in responses) == [201, 422]
        stored = await repository.snapshot()
        assert [book.title for book in stored] == ["Dune"]
