import pytest
from fastapi.testclient import TestClient

from reqkit.domain.ids import ID_ALPHABET
from reqkit.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def test_health(client: TestClient):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}
    assert len(r.headers["X-Request-ID"]) == 21


def test_request_id_is_propagated(client: TestClient):
    r = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert r.headers["X-Request-ID"] == "abc123"


def test_issue_ids(client: TestClient):
    r = client.get("/ids", params={"count": 3})
    assert r.status_code == 200
    ids = r.json()["ids"]
    assert len(ids) == 3
    assert all(len(i) == 21 and set(i) <= set(ID_ALPHABET) for i in ids)


@pytest.mark.parametrize("count", [0, 101])
def test_issue_ids_out_of_range(client: TestClient, count):
    r = client.get("/ids", params={"count": count})
    assert r.status_code == 400
    assert r.json()["detail"]["error_code"] == "invalid_count"


def test_issue_ids_respects_env_limit(client: TestClient, monkeypatch):
    monkeypatch.setenv("ID_BATCH_MAX", "2")
    assert client.get("/ids", params={"count": 3}).status_code == 400
    assert client.get("/ids", params={"count": 2}).status_code == 200


def test_hash(client: TestClient):
    r = client.post("/hash", json={"text": "ab"})
    assert r.status_code == 200
    assert r.json() == {"hash": "2e9"}


def test_format_json_indented(client: TestClient):
    r = client.post("/format/json", json={"text": '{"a":1}', "indent": True})
    assert r.status_code == 200
    assert r.json() == {"formatted": '{\n  "a": 1\n}', "changed": True}


def test_format_json_compact_unchanged(client: TestClient):
    r = client.post("/format/json", json={"text": '{"a":1}', "indent": False})
    assert r.json() == {"formatted": '{"a":1}', "changed": False}


def test_format_json_invalid(client: TestClient):
    r = client.post("/format/json", json={"text": "{nope"})
    assert r.status_code == 422
    assert r.json()["detail"]["error_code"] == "invalid_json"


def test_format_xml_with_options(client: TestClient):
    r = client.post(
        "/format/xml",
        json={"text": "<a><b>1</b></a>", "options": {"indentation": "  "}},
    )
    assert r.status_code == 200
    assert r.json() == {"formatted": "<a>\n  <b>1</b>\n</a>", "changed": True}


def test_format_xml_invalid(client: TestClient):
    r = client.post("/format/xml", json={"text": "<a>"})
    assert r.status_code == 422
    assert r.json()["detail"]["error_code"] == "invalid_xml"


def test_format_codemirror(client: TestClient):
    r = client.post("/format/codemirror", json={"value": {"a": 1}})
    assert r.status_code == 200
    assert r.json() == {"formatted": "a: 1"}


def test_content_type(client: TestClient):
    r = client.post(
        "/content-type",
        json={"headers": [["Accept", "*/*"], ["Content-Type", "application/hal+json"]]},
    )
    assert r.status_code == 200
    assert r.json() == {"content_type": "application/ld+json"}


def test_content_type_missing(client: TestClient):
    r = client.post("/content-type", json={"headers": []})
    assert r.json() == {"content_type": ""}


def test_format_errors_keep_request_id(client: TestClient):
    r = client.post("/format/json", json={"text": "[1,"}, headers={"X-Request-ID": "req-9"})
    assert r.status_code == 422
    assert r.headers["X-Request-ID"] == "req-9"
    detail = r.json()["detail"]
    assert detail["error_code"] == "invalid_json"
    assert detail["error_message"]


def test_format_codemirror_quotes_strings(client: TestClient):
    r = client.post("/format/codemirror", json={"value": {"name": "Ada", "x-id": 1}})
    assert r.json() == {"formatted": 'name: "Ada", "x-id": 1'}
