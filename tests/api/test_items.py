"""Tests for item CRUD endpoints."""

import pytest
from fastapi.testclient import TestClient

from item_service.api.config import Config
from item_service.api.server import create_app


def test_list_items(client):
    """Test listing returns the seeded items in order."""
    response = client.get("/items")

    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "name": "Item 1", "description": "First item"},
        {"id": 2, "name": "Item 2", "description": "Second item"},
    ]


def test_list_items_unseeded():
    """Test seeding can be switched off."""
    client = TestClient(create_app(Config(_env_file=None, seed_items=False)))

    response = client.get("/items")

    assert response.status_code == 200
    assert response.json() == []


def test_get_item_success(client):
    """Test fetching an existing item."""
    response = client.get("/items/2")

    assert response.status_code == 200
    assert response.json() == {"id": 2, "name": "Item 2", "description": "Second item"}


def test_get_item_not_found(client):
    """Test fetching a missing item returns 404 with an error body."""
    response = client.get("/items/999")

    assert response.status_code == 404
    assert response.json() == {"error": "Item not found"}


def test_get_item_invalid_id(client):
    """Test a non-integer id is rejected by request validation."""
    response = client.get("/items/abc")

    assert response.status_code == 422


def test_create_item(client):
    """Test creating an item assigns the next id."""
    response = client.post("/items", json={"name": "Item 3"})

    assert response.status_code == 201
    assert response.json() == {"id": 3, "name": "Item 3", "description": ""}
    assert len(client.get("/items").json()) == 3


def test_create_item_with_description(client):
    """Test the description is stored when supplied."""
    response = client.post("/items", json={"name": "Item 3", "description": "Third"})

    assert response.status_code == 201
    assert response.json()["description"] == "Third"


@pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": None}, {"description": "no name"}])
def test_create_item_requires_name(client, body):
    """Test create without a name returns 400 and adds nothing."""
    response = client.post("/items", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Name is required"}
    assert len(client.get("/items").json()) == 2


def test_create_item_without_body(client):
    """Test a request without a body is treated as an empty payload."""
    response = client.post("/items")

    assert response.status_code == 400
    assert response.json() == {"error": "Name is required"}


def test_create_item_wrong_type(client):
    """Test a body with the wrong field type is rejected by request validation."""
    response = client.post("/items", json={"name": ["not", "a", "string"]})

    assert response.status_code == 422


def test_update_item_description_only(client):
    """Test updating only the description keeps the name."""
    response = client.put("/items/2", json={"description": "Updated"})

    assert response.status_code == 200
    assert response.json() == {"id": 2, "name": "Item 2", "description": "Updated"}


def test_update_item_name_only(client):
    """Test updating only the name keeps the description."""
    response = client.put("/items/1", json={"name": "Renamed"})

    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Renamed", "description": "First item"}


def test_update_item_null_fields_ignored(client):
    """Test explicit nulls keep the current values."""
    response = client.put("/items/1", json={"name": None, "description": None})

    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Item 1", "description": "First item"}


def test_update_item_ignores_id_in_body(client):
    """Test the id in the body never changes the item id."""
    response = client.put("/items/1", json={"id": 50, "name": "Renamed"})

    assert response.status_code == 200
    assert response.json()["id"] == 1
    assert client.get("/items/50").status_code == 404


def test_update_item_not_found(client):
    """Test updating a missing item returns 404."""
    response = client.put("/items/999", json={"name": "nope"})

    assert response.status_code == 404
    assert response.json() == {"error": "Item not found"}


def test_delete_item(client):
    """Test deleting echoes the removed item."""
    response = client.delete("/items/1")

    assert response.status_code == 200
    assert response.json() == {
        "message": "Item deleted",
        "deletedItem": {"id": 1, "name": "Item 1", "description": "First item"},
    }
    assert client.get("/items/1").status_code == 404
    assert [item["id"] for item in client.get("/items").json()] == [2]


def test_delete_item_not_found(client):
    """Test deleting a missing item returns 404 and removes nothing."""
    response = client.delete("/items/999")

    assert response.status_code == 404
    assert response.json() == {"error": "Item not found"}
    assert len(client.get("/items").json()) == 2


def test_deleted_id_not_reused(client):
    """Test an id freed by deletion is not handed out again."""
    created = client.post("/items", json={"name": "Item 3"}).json()
    client.delete(f"/items/{created['id']}")

    response = client.post("/items", json={"name": "Item 4"})

    assert response.json()["id"] == 4


def test_apps_have_independent_registries(client):
    """Test each application owns its own registry."""
    client.post("/items", json={"name": "Item 3"})
    other = TestClient(create_app(Config(_env_file=None)))

    assert len(other.get("/items").json()) == 2


def test_end_to_end_scenario(client):
    """Test the create / update / delete / invalid create sequence over HTTP."""
    response = client.post("/items", json={"name": "Item 3"})
    assert response.json() == {"id": 3, "name": "Item 3", "description": ""}
    assert len(client.get("/items").json()) == 3

    response = client.put("/items/2", json={"description": "Updated"})
    assert response.json() == {"id": 2, "name": "Item 2", "description": "Updated"}

    response = client.delete("/items/1")
    assert response.json()["message"] == "Item deleted"
    assert response.json()["deletedItem"]["id"] == 1
    assert client.get("/items/1").status_code == 404

    snapshot = client.get("/items").json()
    response = client.post("/items", json={"name": ""})
    assert response.status_code == 400
    assert client.get("/items").json() == snapshot


def test_docs_available(client):
    """Test the generated API docs are served."""
    assert client.get("/api-docs").status_code == 200

    schema = client.get("/openapi.json").json()
    assert schema["info"]["title"] == "CRUD API Example"
    assert "/items" in schema["paths"]
    assert "/items/{item_id}" in schema["paths"]
