"""
Integration tests for the /posts endpoints (FastAPI + Tortoise ORM, in-memory SQLite)
"""
import pytest
from fastapi.testclient import TestClient

from postboard.infra.config import Settings
from postboard.infra.rest_api.main import create_app

GOLDIE = {
    "fullName": "Goldie Retriever",
    "email": "goldie@email.com",
    "username": "dog.is.good",
    "dateOfBirth": "1970-01-01",
}


@pytest.fixture
def client():
    """Setup test client"""
    app = create_app(Settings(database_url="sqlite://:memory:", api_prefix="/api"))
    with TestClient(app) as client:
        yield client


@pytest.fixture
def user_id(client):
    return client.post("/api/users", json=GOLDIE).json()["id"]


@pytest.fixture
def post_id(client, user_id):
    response = client.post("/api/posts", json={
        "userId": user_id,
        "title": "Hello",
        "description": "I am definetly not a dog...",
    })
    return response.json()["id"]


def single_error(response):
    body = response.json()
    assert len(body["errors"]) == 1
    return body["errors"][0]


class TestCreatePost:
    def test_creates_post(self, client, user_id):
        response = client.post("/api/posts", json={
            "userId": user_id,
            "title": "  Hello  ",
            "description": "I am definetly not a dog...",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["userId"] == user_id
        assert data["title"] == "Hello"
        assert data["description"] == "I am definetly not a dog..."

    def test_unknown_user_is_forbidden(self, client):
        response = client.post("/api/posts", json={
            "userId": 1,
            "title": "Hello",
            "description": "I am definetly not a dog...",
        })

        assert response.status_code == 403
        error = single_error(response)
        assert error["msg"] == "User is not authorized to perform this action."
        assert error["value"] == "userId"

    def test_user_id_beyond_storage_range(self, client):
        response = client.post("/api/posts", json={
            "userId": 99999999999999999999,
            "title": "Hello",
            "description": "I am definetly not a dog...",
        })

        assert response.status_code == 400
        error = single_error(response)
        assert error["path"] == "userId"
        assert error["msg"] == "userId must be defined as part of the Post request as a non-negative integer."

    def test_missing_title(self, client):
        response = client.post("/api/posts", json={
            "userId": 1,
            "description": "I am definetly not a dog...",
        })

        assert response.status_code == 400
        assert single_error(response)["msg"] == "Missing required input: title"

    def test_null_body(self, client):
        response = client.post("/api/posts", json=None)

        assert response.status_code == 400
        assert any(
            error["msg"] == "Missing request body! Please send a JSON body with the request."
            for error in response.json()["errors"]
        )

    def test_description_too_long(self, client, user_id):
        response = client.post("/api/posts", json={
            "userId": user_id, "title": "Hello", "description": "d" * 141,
        })

        assert response.status_code == 400
        assert single_error(response)["path"] == "description"


class TestRetrievePost:
    def test_returns_post(self, client, user_id, post_id):
        response = client.get(f"/api/posts/{post_id}")

        assert response.status_code == 200
        assert response.json()["userId"] == user_id
        assert response.json()["title"] == "Hello"

    def test_missing_post_is_empty_object(self, client):
        response = client.get("/api/posts/123")

        assert response.status_code == 200
        assert response.json() == {}

    def test_id_beyond_storage_range(self, client):
        response = client.get("/api/posts/99999999999999999999")

        assert response.status_code == 400
        assert single_error(response)["msg"] == "Invalid id parameter. Must be a positive integer."

    def test_invalid_id(self, client):
        response = client.get("/api/posts/bogusId")

        assert response.status_code == 400
        assert single_error(response)["msg"] == "Invalid id parameter. Must be a positive integer."


class TestUpdatePost:
    def test_updates_post(self, client, user_id, post_id):
        response = client.put(f"/api/posts/{post_id}", json={
            "userId": user_id,
            "title": "Hello",
            "description": "I am definetly not a dog...I am a cat!",
        })

        assert response.status_code == 200
        assert response.json()["userId"] == user_id
        assert response.json()["description"] == "I am definetly not a dog...I am a cat!"

    def test_other_owner_is_not_found(self, client, user_id, post_id):
        response = client.put(f"/api/posts/{post_id}", json={
            "userId": user_id + 1,
            "title": "Hello",
            "description": "I am definetly not a dog...I am a cat!",
        })

        assert response.status_code == 404
        assert single_error(response)["msg"] == "Post does not exist."

    def test_requires_title_or_description(self, client, user_id, post_id):
        response = client.put(f"/api/posts/{post_id}", json={"userId": user_id})

        assert response.status_code == 400
        assert single_error(response)["msg"] == "At least one of the input fields must be defined."

    def test_requires_user_id(self, client, post_id):
        response = client.put(f"/api/posts/{post_id}", json={"title": "Hello"})

        assert response.status_code == 400
        assert single_error(response)["path"] == "userId"


class TestDeletePost:
    def test_deletes_post(self, client, user_id, post_id):
        response = client.delete(f"/api/posts/{post_id}")

        assert response.status_code == 200
        assert response.json()["id"] == post_id
        assert client.get(f"/api/posts/{post_id}").json() == {}
        assert client.get(f"/api/users/{user_id}").status_code == 200

    def test_not_found(self, client):
        response = client.delete("/api/posts/123")

        assert response.status_code == 404
        assert single_error(response)["msg"] == "Post does not exist."
