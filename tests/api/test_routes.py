"""Tests for the HTTP routes."""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from gsdx.api import create_app
from gsdx.api.routes import http_status
from gsdx.config.settings import GsdxSettings
from gsdx.services import ServiceError, ServiceResult


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> GsdxSettings:
    monkeypatch.delenv("GSDX_CONFIG", raising=False)
    return GsdxSettings.from_cli(root=tmp_path)


@pytest.fixture
def client(settings: GsdxSettings, db_engine: Engine) -> Iterator[TestClient]:
    with TestClient(create_app(settings, engine=db_engine)) as c:
        yield c


def _create_story(client: TestClient, name: str = "Backlog") -> dict[str, Any]:
    resp = client.post("/v1/stories", json={"name": name})
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]["story"]


def _create_task(client: TestClient, story_id: str, **body: Any) -> dict[str, Any]:
    body.setdefault("name", "T")
    resp = client.post(f"/v1/stories/{story_id}/tasks", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]["task"]


class TestStoryRoutes:
    def test_create(self, client: TestClient) -> None:
        resp = client.post("/v1/stories", json={"name": "  Backlog "})
        assert resp.status_code == 201
        body = resp.json()
        assert body["ok"] is True
        assert body["op"] == "create_story"
        assert body["data"]["story"]["name"] == "Backlog"

    def test_create_empty_name_is_400(self, client: TestClient) -> None:
        resp = client.post("/v1/stories", json={"name": ""})
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "INVALID_ARGUMENT"

    def test_missing_body_field_is_400(self, client: TestClient) -> None:
        resp = client.post("/v1/stories", json={})
        assert resp.status_code == 400
        body = resp.json()
        assert body["ok"] is False
        assert body["error"]["code"] == "INVALID_ARGUMENT"

    def test_list_with_cursor(self, client: TestClient) -> None:
        a, b, c = (_create_story(client, n) for n in "ABC")
        resp = client.get("/v1/stories", params={"cursor": 1, "limit": 2})
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert [s["story_id"] for s in data["stories"]] == [a["story_id"], b["story_id"]]

        rest = client.get("/v1/stories", params={"cursor": data["next_cursor"], "limit": 2})
        assert [s["story_id"] for s in rest.json()["data"]["stories"]] == [c["story_id"]]

    def test_update(self, client: TestClient) -> None:
        story = _create_story(client)
        resp = client.patch(f"/v1/stories/{story['story_id']}", json={"name": "Sprint"})
        assert resp.status_code == 200
        assert resp.json()["data"]["story"]["name"] == "Sprint"

    def test_update_unknown_is_404(self, client: TestClient) -> None:
        resp = client.patch(f"/v1/stories/{uuid.uuid4()}", json={"name": "x"})
        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "NOT_FOUND"

    def test_malformed_id_is_400(self, client: TestClient) -> None:
        resp = client.delete("/v1/stories/not-a-uuid")
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "INVALID_ARGUMENT"

    def test_delete_cascades(self, client: TestClient) -> None:
        story = _create_story(client)
        task = _create_task(client, story["story_id"])
        assert client.delete(f"/v1/stories/{story['story_id']}").status_code == 200
        assert client.get(f"/v1/stories/{story['story_id']}/tasks").status_code == 404
        assert client.delete(f"/v1/tasks/{task['task_id']}").status_code == 404


class TestTaskRoutes:
    def test_create_and_list(self, client: TestClient) -> None:
        story = _create_story(client)
        task = _create_task(client, story["story_id"], name="Write", status="complete")
        assert task["status"] == "complete"
        resp = client.get(f"/v1/stories/{story['story_id']}/tasks")
        assert resp.status_code == 200
        assert resp.json()["data"]["tasks"] == [task]

    def test_create_for_unknown_story_is_400(self, client: TestClient) -> None:
        resp = client.post(f"/v1/stories/{uuid.uuid4()}/tasks", json={"name": "T"})
        assert resp.status_code == 400

    def test_patch_status_only(self, client: TestClient) -> None:
        story = _create_story(client)
        task = _create_task(client, story["story_id"], name="T")
        resp = client.patch(f"/v1/tasks/{task['task_id']}", json={"status": "complete"})
        assert resp.status_code == 200
        patched = resp.json()["data"]["task"]
        assert patched["name"] == "T"
        assert patched["status"] == "complete"

    def test_delete(self, client: TestClient) -> None:
        story = _create_story(client)
        task = _create_task(client, story["story_id"])
        resp = client.delete(f"/v1/tasks/{task['task_id']}")
        assert resp.status_code == 200
        assert resp.json()["data"] == {"task_id": task["task_id"]}


class TestHealthAndMiddleware:
    def test_health_serving(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "SERVING"}

    def test_request_id_generated(self, client: TestClient) -> None:
        resp = client.get("/health")
        uuid.UUID(resp.headers["X-Request-ID"])

    def test_request_id_echoed(self, client: TestClient) -> None:
        resp = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert resp.headers["X-Request-ID"] == "abc-123"


class TestLifespan:
    def test_owns_engine_from_settings(self, settings: GsdxSettings, tmp_path: Path) -> None:
        app = create_app(settings)
        with TestClient(app) as c:
            story = _create_story(c)
            assert story["name"] == "Backlog"
            assert app.state.health.running
        assert (tmp_path / "gsdx.db").exists()
        assert app.state.engine is None


class TestHttpStatus:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("INVALID_ARGUMENT", 400),
            ("NOT_FOUND", 404),
            ("INTERNAL", 500),
            ("SOMETHING_NEW", 500),
        ],
    )
    def test_error_codes(self, code: str, expected: int) -> None:
        result = ServiceResult(ok=False, op="x", error=ServiceError(code=code, message="m"))
        assert http_status(result) == expected

    def test_failure_without_error_is_500(self) -> None:
        assert http_status(ServiceResult(ok=False, op="x")) == 500

    def test_success_uses_given_status(self) -> None:
        assert http_status(ServiceResult(ok=True, op="x"), success=201) == 201
