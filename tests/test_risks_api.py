import logging
import uuid

import pytest
from fastapi.testclient import TestClient

from risk_registry_api.app.core.store import RiskStore
from risk_registry_api.app.main import create_app

VALID = {"state": "open", "title": "T", "description": "D"}


def create(client: TestClient, payload: dict):
    return client.post("/v1/risks", json=payload)


def test_list_empty_returns_array(client: TestClient) -> None:
    response = client.get("/v1/risks")
    assert response.status_code == 200
    assert response.json() == []


def test_create_returns_created_risk(client: TestClient) -> None:
    response = create(client, VALID)

    assert response.status_code == 201
    assert response.headers["content-type"].startswith("application/json")
    body = response.json()
    assert set(body) == {"id", "state", "title", "description"}
    assert body["id"]
    assert {k: body[k] for k in VALID} == VALID


def test_round_trip(client: TestClient) -> None:
    created = create(client, VALID).json()

    response = client.get(f"/v1/risks/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


def test_ids_are_distinct(client: TestClient) -> None:
    ids = [create(client, VALID).json()["id"] for _ in range(10)]
    assert all(ids)
    assert len(set(ids)) == 10


def test_server_id_overrides_client_id(client: TestClient, store: RiskStore) -> None:
    body = create(client, {**VALID, "id": "mine"}).json()

    assert body["id"] != "mine"
    assert store.get_by_id("mine") == (None, False)
    assert client.get("/v1/risks/mine").status_code == 404


def test_list_contains_created_risks(client: TestClient) -> None:
    first = create(client, VALID).json()
    second = create(client, {**VALID, "state": "investigating"}).json()

    response = client.get("/v1/risks")
    assert response.status_code == 200
    listed = response.json()
    assert len(listed) == 2
    assert sorted(listed, key=lambda r: r["id"]) == sorted([first, second], key=lambda r: r["id"])


@pytest.mark.parametrize("state", ["pending", "Open", ""])
def test_invalid_state_is_rejected_and_not_stored(client: TestClient, state: str) -> None:
    response = create(client, {**VALID, "state": state})

    assert response.status_code == 400
    assert "state" in response.json()["error"]
    assert client.get("/v1/risks").json() == []


def test_missing_state_is_rejected(client: TestClient) -> None:
    response = create(client, {"title": "T", "description": "D"})
    assert response.status_code == 400
    assert response.json() == {"error": "validation failed: state is required"}


@pytest.mark.parametrize(
    "payload",
    [
        {"state": "open", "description": "D"},
        {"state": "open", "title": "", "description": "D"},
        {"state": "open", "title": "T"},
        {"state": "open", "title": "T", "description": ""},
    ],
)
def test_missing_title_or_description_is_rejected(client: TestClient, payload: dict) -> None:
    response = create(client, payload)
    assert response.status_code == 400
    assert set(response.json()) == {"error"}
    assert client.get("/v1/risks").json() == []


def test_validation_error_names_every_field(client: TestClient) -> None:
    response = create(client, {"state": "nope"})
    message = response.json()["error"]
    assert response.status_code == 400
    assert "state must be one of open, closed, accepted, investigating" in message
    assert "title is required" in message
    assert "description is required" in message


@pytest.mark.parametrize(
    "content",
    [
        b"{not json",
        b"[]",
        b'{"state": 5, "title": "T", "description": "D"}',
        pytest.param(b"[" * 100000 + b"]" * 100000, id="deeply-nested-array"),
    ],
)
def test_malformed_body_is_rejected(client: TestClient, content: bytes) -> None:
    response = client.post(
        "/v1/risks", content=content, headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "invalid JSON payload"}


@pytest.mark.parametrize(
    "content_type",
    [
        "text/plain",
        "application/xml",
        "application/jsonx",
        "application/json; charset=utf-8",
        "application/json;foo",
        "APPLICATION/JSON",
    ],
)
def test_wrong_content_type_is_rejected(client: TestClient, content_type: str) -> None:
    response = client.post(
        "/v1/risks",
        content=b'{"state": "open", "title": "T", "description": "D"}',
        headers={"Content-Type": content_type},
    )
    assert response.status_code == 415
    assert response.json() == {"error": "invalid content-type, expected application/json"}
    assert client.get("/v1/risks").json() == []


def test_missing_content_type_is_rejected(client: TestClient) -> None:
    response = client.post("/v1/risks", content=b"{}")
    assert response.status_code == 415


def test_unknown_id_is_not_found(client: TestClient) -> None:
    response = client.get(f"/v1/risks/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json() == {"error": "risk not found"}


def test_unknown_route_uses_error_shape(client: TestClient) -> None:
    response = client.get("/v2/risks")
    assert response.status_code == 404
    assert set(response.json()) == {"error"}


def test_unsupported_method_uses_error_shape(client: TestClient) -> None:
    response = client.delete("/v1/risks")
    assert response.status_code == 405
    assert set(response.json()) == {"error"}


def test_fresh_app_gets_fresh_store(client: TestClient) -> None:
    create(client, VALID)
    with TestClient(create_app()) as other:
        assert other.get("/v1/risks").json() == []


def test_errors_are_logged_with_status_code(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO)
    client.get("/v1/risks/missing")

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert [r.getMessage() for r in errors] == ["risk not found"]
    assert errors[0].status_code == 404


def test_requests_are_logged(client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)
    client.get("/v1/risks")

    handled = [r for r in caplog.records if r.getMessage() == "Request handled"]
    assert len(handled) == 1
    assert handled[0].method == "GET"
    assert handled[0].path == "/v1/risks"
    assert handled[0].status_code == 200
    assert handled[0].duration_ms >= 0


def test_unhandled_error_is_logged_with_status_code(caplog: pytest.LogCaptureFixture) -> None:
    app = create_app()

    def explode() -> None:
        raise RuntimeError("boom")

    app.add_api_route("/v1/explode", explode)
    caplog.set_level(logging.INFO)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/v1/explode")

    assert response.status_code == 500
    assert response.json() == {"error": "internal server error"}
    errors = [r for r in caplog.records if r.getMessage() == "Unhandled error while serving request"]
    assert len(errors) == 1
    assert errors[0].status_code == 500
    assert errors[0].path == "/v1/explode"
