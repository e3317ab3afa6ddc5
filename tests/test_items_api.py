import json

import pytest
from fastapi.testclient import TestClient

from todolist.app import main


@pytest.fixture(params=["sqlite", "memory"])
def client(request, monkeypatch):
    monkeypatch.setenv("ITEMS_STORE", request.param)
    with TestClient(main.create_app()) as c:
        yield c


def test_create_and_list(client):
    r = client.post("/items", json={"name": "Buy milk"})
    assert r.status_code == 201
    created = r.json()
    assert created["name"] == "Buy milk"
    assert created["isComplete"] is False
    assert isinstance(created["id"], int)

    items = client.get("/items").json()
    assert [i["name"] for i in items] == ["Buy milk"]


def test_list_is_ordered_by_id(client):
    for name in ("a", "b", "c"):
        client.post("/items", json={"name": name})
    ids = [i["id"] for i in client.get("/items").json()]
    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_update_sets_name_and_completion(client):
    item = client.post("/items", json={"name": "Walk dog"}).json()
    r = client.put(f"/items/{item['id']}", json={"name": "Walk the dog", "isComplete": True})
    assert r.status_code == 200
    assert r.json() == {"id": item["id"], "name": "Walk the dog", "isComplete": True}

    fetched = client.get(f"/items/{item['id']}").json()
    assert fetched["isComplete"] is True
    assert fetched["name"] == "Walk the dog"


def test_delete_removes_item(client):
    item = client.post("/items", json={"name": "temp"}).json()
    r = client.delete(f"/items/{item['id']}")
    assert r.status_code == 204
    assert client.get(f"/items/{item['id']}").status_code == 404
    assert client.get("/items").json() == []


def test_missing_item_is_404(client):
    assert client.get("/items/999").status_code == 404
    assert client.put("/items/999", json={"name": "x", "isComplete": False}).status_code == 404
    assert client.delete("/items/999").status_code == 404


def test_validation_errors(client):
    assert client.post("/items", json={"name": ""}).status_code == 422
    assert client.post("/items", json={}).status_code == 422
    item = client.post("/items", json={"name": "x"}).json()
    # PUT replaces both fields
    assert client.put(f"/items/{item['id']}", json={"name": "x"}).status_code == 422


def test_request_id_is_echoed(client):
    r = client.get("/items", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"
    assert client.get("/health").json() == {"status": "ok"}


def test_cors_preflight(client):
    r = client.options(
        "/items",
        headers={"Origin": "https://todolistclient-a8qv.onrender.com", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] in ("*", "https://todolistclient-a8qv.onrender.com")


def test_events_land_in_json_log(client, tmp_path):
    client.post("/items", json={"name": "logged"})
    lines = (tmp_path / "logs" / "items.jsonl").read_text(encoding="utf-8").splitlines()
    records = [json.loads(line) for line in lines]
    events = [r.get("event") for r in records]
    assert "item.create" in events
    assert "request.end" in events
    create = next(r for r in records if r.get("event") == "item.create")
    assert create["item_name"] == "logged"
    assert create["logger"] == "todolist.items"


def test_each_app_keeps_its_own_store(monkeypatch):
    monkeypatch.setenv("ITEMS_STORE", "memory")
    first_app = main.create_app()
    second_app = main.create_app()
    with TestClient(first_app) as first, TestClient(second_app) as second:
        first.post("/items", json={"name": "only in first"})
        assert [i["name"] for i in first.get("/items").json()] == ["only in first"]
        assert second.get("/items").json() == []


def test_sqlite_tables_are_created_on_startup(monkeypatch, tmp_path):
    monkeypatch.setenv("ITEMS_STORE", "sqlite")
    with TestClient(main.create_app()) as c:
        assert c.get("/items").json() == []

    records = [json.loads(line) for line in (tmp_path / "logs" / "items.jsonl").read_text(encoding="utf-8").splitlines()]
    ready = next(r for r in records if r.get("event") == "db.ready")
    assert ready["store"] == "sqlite"
    assert ready["tables"] == ["items"]
    assert (tmp_path / "items.db").exists()
