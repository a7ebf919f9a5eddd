from fastapi.testclient import TestClient

from annoquery.api.main import create_app
from annoquery.common.config import settings


def test_health_endpoint():
    client = TestClient(create_app())
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_tokens_endpoint():
    client = TestClient(create_app())
    r = client.get("/query/tokens", params={"q": 'tag:"foo bar" baz'})
    assert r.status_code == 200
    assert r.json()["tokens"] == ["tag:foo bar", "baz"]


def test_flat_endpoint():
    client = TestClient(create_app())
    r = client.get("/query/flat", params={"q": "tag:x tag:y hello"})
    assert r.status_code == 200
    data = r.json()
    assert data["query"] == "tag:x tag:y hello"
    assert data["fields"] == {"tags": ["x", "y"], "any": ["hello"]}
    assert "x-request-id" in r.headers


def test_facets_endpoint_with_focus_user():
    client = TestClient(create_app())
    r = client.get("/query/facets", params={"q": "foo since:1day user:bob", "user": "alice"})
    assert r.status_code == 200
    facets = r.json()["facets"]
    assert set(facets) == {"any", "quote", "since", "tag", "text", "uri", "user"}
    assert facets["user"] == {"operator": "or", "terms": ["alice", "bob"]}
    assert facets["since"] == {"operator": "and", "terms": [86400]}
    assert facets["any"]["terms"] == ["foo"]


def test_facets_endpoint_empty_query():
    client = TestClient(create_app())
    r = client.get("/query/facets")
    assert r.status_code == 200
    assert all(f["terms"] == [] for f in r.json()["facets"].values())


def test_query_length_is_capped():
    client = TestClient(create_app())
    r = client.get("/query/flat", params={"q": "x" * (settings.max_query_length + 1)})
    assert r.status_code == 422
