from __future__ import annotations

import logging

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from noteguard import config
from noteguard.middleware import auth
from noteguard.middleware.auth import require_permission

NOTES = {"1": {"owner_id": 10}, "2": {"owner_id": "20"}}


def role_from_header(request: Request):
    return request.headers.get("X-Role")


async def note_context(request: Request) -> dict:
    note = NOTES.get(request.path_params["note_id"], {})
    return {
        "userId": request.headers.get("X-User"),
        "ownerId": note.get("owner_id"),
        "isAdmin": request.headers.get("X-Admin") == "1",
    }


@pytest.fixture()
def client() -> TestClient:
    app = FastAPI()

    @app.get(
        "/notes/export",
        dependencies=[Depends(require_permission("ExportNote", role_getter=role_from_header))],
    )
    async def export_notes() -> dict:
        return {"ok": True}

    @app.post(
        "/notes/{note_id}",
        dependencies=[
            Depends(require_permission("UpdateNote", role_getter=role_from_header, context_getter=note_context))
        ],
    )
    async def update_note(note_id: str) -> dict:
        return {"updated": note_id}

    @app.delete(
        "/notes/{note_id}",
        dependencies=[
            Depends(
                require_permission(
                    "DeleteNote",
                    role_getter=role_from_header,
                    context_getter=lambda request: {"user_id": request.headers.get("X-User"), "owner_id": 1},
                )
            )
        ],
    )
    async def delete_note(note_id: str) -> dict:
        return {"deleted": note_id}

    return TestClient(app)


@pytest.mark.integration
def test_static_permission_by_role(client: TestClient) -> None:
    assert client.get("/notes/export", headers={"X-Role": "employee"}).status_code == 200
    assert client.get("/notes/export", headers={"X-Role": "0"}).status_code == 403
    assert client.get("/notes/export").status_code == 403


@pytest.mark.integration
def test_dynamic_permission_uses_async_context(client: TestClient) -> None:
    owner = client.post("/notes/2", headers={"X-Role": "baseline", "X-User": "20"})
    other = client.post("/notes/2", headers={"X-Role": "baseline", "X-User": "21"})
    admin = client.post("/notes/1", headers={"X-Role": "baseline", "X-User": "21", "X-Admin": "1"})

    assert owner.status_code == 200
    assert owner.json() == {"updated": "2"}
    assert other.status_code == 403
    assert admin.status_code == 200


@pytest.mark.integration
def test_sync_context_getter(client: TestClient) -> None:
    assert client.delete("/notes/1", headers={"X-Role": "employee", "X-User": "1"}).status_code == 403
    assert client.delete("/notes/1", headers={"X-Role": "admin", "X-User": "1"}).status_code == 200


@pytest.mark.integration
def test_denial_returns_message_and_logs(client: TestClient, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger=auth.__name__):
        response = client.post("/notes/1", headers={"X-Role": "employee", "X-User": "99"})

    assert response.status_code == 403
    assert response.json() == {"detail": config.PERMISSION_DENY_MESSAGE}
    assert any("action=UpdateNote" in record.getMessage() for record in caplog.records)


@pytest.mark.integration
def test_denial_logging_can_be_disabled(client: TestClient, caplog, monkeypatch) -> None:
    monkeypatch.setattr(config, "PERMISSION_LOG_DENIALS", False)

    with caplog.at_level(logging.WARNING, logger=auth.__name__):
        response = client.get("/notes/export", headers={"X-Role": "baseline"})

    assert response.status_code == 403
    assert not [record for record in caplog.records if record.name == auth.__name__]
