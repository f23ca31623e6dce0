"""
Tests for the HTTP query surface
"""
import pytest
from fastapi.testclient import TestClient

from pattern_catalog.main import create_app
from pattern_catalog.patterns import build_catalog


@pytest.fixture
def client(small_catalog):
    return TestClient(create_app(small_catalog))


def test_list_all(client):
    resp = client.get("/patterns")
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 4
    assert [p["name"] for p in data["patterns"]] == ["Builder", "Composite", "Observer", "Singleton"]


def test_list_filters_combine(client):
    data = client.get("/patterns", params={"category": "creational", "q": "instance"}).json()
    assert [p["name"] for p in data["patterns"]] == ["Singleton"]

    data = client.get("/patterns", params={"tag": "tree"}).json()
    assert [p["name"] for p in data["patterns"]] == ["Composite"]


def test_unknown_category_is_422(client):
    resp = client.get("/patterns", params={"category": "Architectural"})
    assert resp.status_code == 422
    assert resp.json()["kind"] == "invalid_category"


def test_get_pattern(client):
    assert client.get("/patterns/Builder").json()["knownUses"] == ["Query builders"]
    resp = client.get("/patterns/Visitor")
    assert resp.status_code == 404
    assert resp.json()["kind"] == "not_found"


def test_add_and_duplicate(client):
    body = {"name": "Proxy", "category": "Structural", "summary": "Controls access."}
    assert client.post("/patterns", json=body).status_code == 201

    resp = client.post("/patterns", json={**body, "summary": "dup"})
    assert resp.status_code == 409
    assert resp.json()["kind"] == "duplicate_name"
    assert client.get("/patterns/Proxy").json()["summary"] == "Controls access."


def test_add_invalid_entry(client):
    resp = client.post("/patterns", json={"name": "X", "category": "Nope", "summary": ""})
    assert resp.status_code == 422
    kinds = [e["kind"] for e in resp.json()["errors"]]
    assert kinds == ["empty_field", "invalid_category"]


def test_remove_then_validate(client):
    resp = client.delete("/patterns/Builder")
    assert resp.status_code == 200
    assert resp.json() == {"removed": "Builder", "dangling_from": ["Composite"]}

    report = client.get("/validate").json()
    assert report["is_valid"] is False
    assert [(v["entry_name"], v["kind"]) for v in report["violations"]] == [
        ("Composite", "dangling_reference")
    ]


def test_amend(client):
    resp = client.post("/patterns/Observer/amend", json={"notes": ["Unsubscribe on teardown"]})
    assert resp.status_code == 200
    assert resp.json()["notes"] == ["Unsubscribe on teardown"]

    resp = client.post("/patterns/Observer/amend", json={"knownUses": [""]})
    assert resp.status_code == 422


def test_render_markdown(client):
    resp = client.get("/render", params={"category": "Behavioral"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/markdown")
    assert "## Observer" in resp.text
    assert "## Builder" not in resp.text


def test_export(client):
    data = client.get("/export").json()
    assert [p["name"] for p in data["patterns"]] == ["Builder", "Composite", "Observer", "Singleton"]


def test_default_app_serves_builtin_catalog():
    client = TestClient(create_app(build_catalog("")))
    assert client.get("/validate").json() == {"is_valid": True, "violations": []}
