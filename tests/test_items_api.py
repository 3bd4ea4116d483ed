# tests/test_items_api.py
from fastapi.testclient import TestClient

from items_api.app.core.config import Settings
from items_api.app.main import create_app
from items_api.app.repositories.memory import InMemoryItemRepository

from .conftest import BRONZE_SWORD_ID, ITEMS_URL, POTION_ID, TRIDENT_ID


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"hello": "world"}


def test_list_seeded_items(client):
    r = client.get(ITEMS_URL)
    assert r.status_code == 200
    items = r.json()["items"]
    assert [(i["id"], i["name"], i["quality"], i["value"]) for i in items] == [
        (BRONZE_SWORD_ID, "bronze sword", "common", 10),
        (TRIDENT_ID, "Poseidon's Trident", "legendary", 1000),
        (POTION_ID, "greater health potion", "uncommon", 100),
    ]


def test_create_then_list_has_four_items(client):
    r = client.post(ITEMS_URL, json={"name": "mithril sword", "quality": "rare", "value": 100})
    assert r.status_code == 201
    body = r.json()
    assert set(body) == {"id", "name", "quality", "value"}
    assert body["id"] not in {BRONZE_SWORD_ID, TRIDENT_ID, POTION_ID}
    assert (body["name"], body["quality"], body["value"]) == ("mithril sword", "rare", 100)

    r = client.get(ITEMS_URL)
    assert len(r.json()["items"]) == 4

    r = client.get(f"{ITEMS_URL}{body['id']}")
    assert r.status_code == 200
    assert r.json() == body


def test_get_missing_item_is_404(client):
    r = client.get(f"{ITEMS_URL}missing-id")
    assert r.status_code == 404
    assert r.json() == {
        "detail": "Item not found: missing-id",
        "code": "ITEM_NOT_FOUND",
        "details": {"item_id": "missing-id"},
    }


def test_partial_update(client):
    r = client.put(f"{ITEMS_URL}{TRIDENT_ID}", json={"name": "Trident of the Deep"})
    assert r.status_code == 200
    assert r.json() == {
        "id": TRIDENT_ID,
        "name": "Trident of the Deep",
        "quality": "legendary",
        "value": 1000,
    }


def test_update_with_negative_value_keeps_value(client):
    before = client.get(f"{ITEMS_URL}{POTION_ID}").json()

    r = client.put(f"{ITEMS_URL}{POTION_ID}", json={"value": -5})
    assert r.status_code == 200
    assert r.json() == before


def test_update_with_empty_body_changes_nothing(client):
    before = client.get(f"{ITEMS_URL}{BRONZE_SWORD_ID}").json()
    r = client.put(f"{ITEMS_URL}{BRONZE_SWORD_ID}", json={})
    assert r.status_code == 200
    assert r.json() == before


def test_update_missing_item_is_404(client):
    r = client.put(f"{ITEMS_URL}missing-id", json={"value": 1})
    assert r.status_code == 404


def test_update_rejects_bad_quality(client):
    r = client.put(f"{ITEMS_URL}{BRONZE_SWORD_ID}", json={"quality": "mythic"})
    assert r.status_code == 400
    assert r.json()["code"] == "VALIDATION_ERROR"


def test_delete_then_get_is_404(client):
    r = client.delete(f"{ITEMS_URL}{BRONZE_SWORD_ID}")
    assert r.status_code == 200
    assert r.json()["name"] == "bronze sword"

    r = client.get(f"{ITEMS_URL}{BRONZE_SWORD_ID}")
    assert r.status_code == 404


def test_delete_missing_item_keeps_collection(client):
    r = client.delete(f"{ITEMS_URL}missing-id")
    assert r.status_code == 404
    assert len(client.get(ITEMS_URL).json()["items"]) == 3


def test_create_validation_errors(client):
    bad_bodies = [
        {"quality": "rare", "value": 1},
        {"name": "", "quality": "rare", "value": 1},
        {"name": "x", "quality": "mythic", "value": 1},
        {"name": "x", "quality": "rare", "value": -1},
        {"name": "x", "quality": "rare"},
        {"name": "x", "quality": "rare", "value": "lots"},
    ]
    for body in bad_bodies:
        r = client.post(ITEMS_URL, json=body)
        assert r.status_code == 400, body
        payload = r.json()
        assert payload["detail"] == "Validation error"
        assert payload["errors"]
    assert len(client.get(ITEMS_URL).json()["items"]) == 3


def test_create_rejects_non_finite_value(client):
    for raw in ('{"name": "x", "quality": "rare", "value": 1e400}',
                '{"name": "x", "quality": "rare", "value": Infinity}',
                '{"name": "x", "quality": "rare", "value": NaN}'):
        r = client.post(ITEMS_URL, content=raw, headers={"Content-Type": "application/json"})
        assert r.status_code == 400, raw
    assert len(client.get(ITEMS_URL).json()["items"]) == 3


def test_update_rejects_non_finite_value(client):
    before = client.get(f"{ITEMS_URL}{POTION_ID}").json()
    for raw in ('{"value": Infinity}', '{"value": 1e400}', '{"value": NaN}'):
        r = client.put(
            f"{ITEMS_URL}{POTION_ID}", content=raw, headers={"Content-Type": "application/json"}
        )
        assert r.status_code == 400, raw
    assert client.get(f"{ITEMS_URL}{POTION_ID}").json() == before


def test_integer_values_are_served_as_integers(client):
    values = [item["value"] for item in client.get(ITEMS_URL).json()["items"]]
    assert values == [10, 1000, 100]
    assert all(type(value) is int for value in values)

    body = client.post(ITEMS_URL, json={"name": "torch", "quality": "common", "value": 3}).json()
    assert type(body["value"]) is int

    body = client.put(f"{ITEMS_URL}{body['id']}", json={"value": 2.5}).json()
    assert body["value"] == 2.5


def test_apps_do_not_share_state(settings):
    first = TestClient(create_app(settings))
    second = TestClient(create_app(settings))

    first.delete(f"{ITEMS_URL}{BRONZE_SWORD_ID}")

    assert len(first.get(ITEMS_URL).json()["items"]) == 2
    assert len(second.get(ITEMS_URL).json()["items"]) == 3


def test_empty_collection_is_404_by_default():
    client = TestClient(create_app(Settings(log_level="WARNING", seed_sample_items=False)))
    r = client.get(ITEMS_URL)
    assert r.status_code == 404
    assert r.json() == {"detail": "No items found", "code": "ITEM_NOT_FOUND"}


def test_empty_collection_can_list_empty():
    settings = Settings(log_level="WARNING", seed_sample_items=False, empty_list_is_error=False)
    client = TestClient(create_app(settings))
    r = client.get(ITEMS_URL)
    assert r.status_code == 200
    assert r.json() == {"items": []}


def test_injected_repository_is_used():
    repository = InMemoryItemRepository(raise_on_empty=False)
    client = TestClient(create_app(Settings(log_level="WARNING"), repository=repository))

    client.post(ITEMS_URL, json={"name": "torch", "quality": "common", "value": 1})

    assert len(repository) == 1
    assert repository.list_all()[0].name == "torch"


def test_openapi_documents_item_routes(client):
    schema = client.get("/openapi.json").json()
    assert "/api/v1/items/" in schema["paths"]
    assert "/api/v1/items/{item_id}" in schema["paths"]
    assert set(schema["paths"]["/api/v1/items/{item_id}"]) == {"get", "put", "delete"}
