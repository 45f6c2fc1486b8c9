import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from people.api.main import create_app
from people.api.deps.dependencies import get_user_service
from people.core.exceptions import (
    EnrichmentError,
    InvalidInputError,
    NationalityNotFoundError,
    NotFoundError,
    StorageError,
)

ALICE = {
    "id": 1,
    "first_name": "Alice",
    "last_name": "Smith",
    "gender": "female",
    "nationality": "US",
    "age": 30,
    "emails": ["alice@example.com"],
}


@pytest.fixture
def mock_user_service():
    return AsyncMock()


@pytest.fixture
def client(mock_user_service):
    app = create_app()
    app.dependency_overrides[get_user_service] = lambda: mock_user_service
    return TestClient(app)


def test_get_user_by_last_name(client, mock_user_service):
    mock_user_service.get_user_by_last_name.return_value = ALICE

    response = client.get("/api/v1/users/Smith")

    assert response.status_code == 200
    assert response.json() == {"user": ALICE}
    mock_user_service.get_user_by_last_name.assert_awaited_once_with("Smith")


def test_get_user_not_found(client, mock_user_service):
    mock_user_service.get_user_by_last_name.side_effect = NotFoundError("User with last name 'Nobody' not found")

    response = client.get("/api/v1/users/Nobody")

    assert response.status_code == 404
    assert response.json() == {
        "error": "Not found Error",
        "message": "User with last name 'Nobody' not found",
    }


def test_list_users(client, mock_user_service):
    mock_user_service.get_all_users.return_value = [ALICE, {**ALICE, "id": 2, "emails": []}]

    response = client.get("/api/v1/users")

    assert response.status_code == 200
    data = response.json()
    assert [u["id"] for u in data["users"]] == [1, 2]
    assert data["users"][1]["emails"] == []


def test_list_users_empty(client, mock_user_service):
    mock_user_service.get_all_users.side_effect = NotFoundError("No users found")

    response = client.get("/api/v1/users")

    assert response.status_code == 404
    assert response.json()["error"] == "Not found Error"


def test_get_user_emails(client, mock_user_service):
    mock_user_service.get_user_emails.return_value = [
        {"id": 7, "user_id": 1, "email": "alice@example.com"},
    ]

    response = client.get("/api/v1/users/1/emails")

    assert response.status_code == 200
    assert response.json() == {"emails": [{"id": 7, "user_id": 1, "email": "alice@example.com"}]}
    mock_user_service.get_user_emails.assert_awaited_once_with(1)


@pytest.mark.parametrize("bad_id", ["abc", "-1", "18446744073709551616"])
def test_get_user_emails_bad_id(client, mock_user_service, bad_id):
    response = client.get(f"/api/v1/users/{bad_id}/emails")

    assert response.status_code == 400
    assert response.json()["error"] == "Bad Request"
    mock_user_service.get_user_emails.assert_not_called()


def test_get_user_friends(client, mock_user_service):
    mock_user_service.get_user_friends.return_value = [
        {"friend_id": 2, "first_name": "Bob", "last_name": "Jones"},
    ]

    response = client.get("/api/v1/users/1/friends")

    assert response.status_code == 200
    assert response.json() == {"friends": [{"friend_id": 2, "first_name": "Bob", "last_name": "Jones"}]}


def test_create_user(client, mock_user_service):
    mock_user_service.create_user.return_value = 1

    response = client.post("/api/v1/users", json={"first_name": "Alice", "last_name": "Smith"})

    assert response.status_code == 200
    assert response.json() == {"user_id": 1}
    mock_user_service.create_user.assert_awaited_once_with("Alice", "Smith")


def test_create_user_missing_first_name(client, mock_user_service):
    response = client.post("/api/v1/users", json={"last_name": "Smith"})

    assert response.status_code == 400
    assert response.json()["error"] == "Bad Request"
    mock_user_service.create_user.assert_not_called()


def test_create_user_unknown_nationality(client, mock_user_service):
    mock_user_service.create_user.side_effect = NationalityNotFoundError("Zzyzx")

    response = client.post("/api/v1/users", json={"first_name": "Zzyzx"})

    assert response.status_code == 404
    assert response.json()["error"] == "Not found Error"


def test_create_user_enrichment_failure(client, mock_user_service):
    mock_user_service.create_user.side_effect = EnrichmentError(
        "Age lookup failed", attribute="age", name="Alice"
    )

    response = client.post("/api/v1/users", json={"first_name": "Alice"})

    assert response.status_code == 500
    assert response.json() == {"error": "Server Error", "message": "Age lookup failed"}


def test_add_user_emails(client, mock_user_service):
    response = client.post("/api/v1/users/1/emails", json={"emails": ["a@example.com"]})

    assert response.status_code == 200
    assert response.json() == {"message": "Emails added successfully"}
    mock_user_service.add_user_emails.assert_awaited_once_with(1, ["a@example.com"])


def test_add_user_emails_empty(client, mock_user_service):
    mock_user_service.add_user_emails.side_effect = InvalidInputError("No emails provided", field="emails")

    response = client.post("/api/v1/users/1/emails", json={"emails": []})

    assert response.status_code == 400
    assert response.json() == {"error": "Bad Request", "message": "No emails provided"}


def test_add_user_friends(client, mock_user_service):
    response = client.post("/api/v1/users/1/friends", json={"friends_ids": [2, 3]})

    assert response.status_code == 200
    assert response.json() == {"message": "Friends added successfully"}
    mock_user_service.add_user_friends.assert_awaited_once_with(1, [2, 3])


def test_add_user_friends_storage_failure(client, mock_user_service):
    mock_user_service.add_user_friends.side_effect = StorageError(
        "Database error during add_user_friendships", operation="add_user_friendships"
    )

    response = client.post("/api/v1/users/1/friends", json={"friends_ids": [999]})

    assert response.status_code == 500
    assert response.json()["error"] == "Server Error"


def test_update_user(client, mock_user_service):
    body = {
        "first_name": "Alicia",
        "last_name": "Brown",
        "gender": "female",
        "nationality": "GB",
        "age": 41,
    }

    response = client.put("/api/v1/users/1", json=body)

    assert response.status_code == 200
    assert response.json() == {"message": "User updated successfully"}
    mock_user_service.update_user.assert_awaited_once_with(1, **body)


def test_update_user_not_found(client, mock_user_service):
    mock_user_service.update_user.side_effect = NotFoundError("Not found user with id 9")

    response = client.put("/api/v1/users/9", json={"first_name": "X"})

    assert response.status_code == 404


def test_update_user_bad_age(client, mock_user_service):
    response = client.put("/api/v1/users/1", json={"first_name": "X", "age": 300})

    assert response.status_code == 400
    mock_user_service.update_user.assert_not_called()


def test_delete_emails_route_is_not_shadowed(client, mock_user_service):
    response = client.request("DELETE", "/api/v1/users/emails", json={"ids": [1, 2]})

    assert response.status_code == 200
    assert response.json() == {"message": "Emails deleted successfully"}
    mock_user_service.delete_emails.assert_awaited_once_with([1, 2])
    mock_user_service.delete_user.assert_not_called()


def test_delete_user(client, mock_user_service):
    response = client.delete("/api/v1/users/1")

    assert response.status_code == 200
    assert response.json() == {"message": "User deleted successfully"}
    mock_user_service.delete_user.assert_awaited_once_with(1)


def test_delete_user_bad_id(client, mock_user_service):
    response = client.delete("/api/v1/users/abc")

    assert response.status_code == 400
    mock_user_service.delete_user.assert_not_called()


def test_delete_user_friends(client, mock_user_service):
    body = {"friends": [{"id_first_friend": 2, "id_second_friend": 1}]}

    response = client.request("DELETE", "/api/v1/users/1/friends", json=body)

    assert response.status_code == 200
    assert response.json() == {"message": "Friendships deleted successfully"}
    pairs = mock_user_service.delete_user_friends.await_args.args[0]
    assert list(pairs) == [(2, 1)]


def test_correlation_id_is_echoed(client, mock_user_service):
    mock_user_service.get_all_users.return_value = [ALICE]

    response = client.get("/api/v1/users", headers={"X-Correlation-ID": "req-123"})

    assert response.headers["X-Correlation-ID"] == "req-123"


def test_delete_emails_rejects_negative_id(client, mock_user_service):
    response = client.request("DELETE", "/api/v1/users/emails", json={"ids": [-1]})

    assert response.status_code == 400
    mock_user_service.delete_emails.assert_not_called()


def test_delete_emails_schema_describes_email_ids(client):
    schemas = client.get("/openapi.json").json()["components"]["schemas"]

    ids_items = schemas["DeleteEmailsRequest"]["properties"]["ids"]["items"]
    assert ids_items["description"] == "Email identifier"
