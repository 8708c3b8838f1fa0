"""Notifications API with NotificationService backed by a mocked repository."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from pinkbeam.api.v1.dependencies import get_notification_service
from pinkbeam.application.dtos.notification import NotificationFilter, NotificationResult
from pinkbeam.application.use_cases.notifications import NotificationService
from pinkbeam.domain.enums import NotificationType

USER = {"X-User-ID": "user-1"}


def _notification(id: str) -> NotificationResult:
    return NotificationResult(
        id=id,
        user_id="user-1",
        type=NotificationType.PROJECT_UPDATE,
        title="Milestone reached",
        message="Design phase complete",
        data={"project_id": "p1"},
        created_at=datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def repo(app) -> AsyncMock:
    mock = AsyncMock()
    app.dependency_overrides[get_notification_service] = lambda: NotificationService(mock)
    return mock


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/api/v1/notifications"),
        ("GET", "/api/v1/notifications/unread-count"),
        ("PATCH", "/api/v1/notifications/n1/read"),
        ("DELETE", "/api/v1/notifications/n1"),
    ],
)
async def test_missing_user_is_401(client: AsyncClient, repo, method, path) -> None:
    response = await client.request(method, path)
    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Unauthorized"}


async def test_list_notifications(client: AsyncClient, repo) -> None:
    repo.list_page.return_value = [_notification("n1"), _notification("n2")]
    repo.count_for_user.return_value = 3
    repo.count_unread.return_value = 2
    response = await client.get(
        "/api/v1/notifications", params={"limit": 2, "offset": 0}, headers=USER
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert [n["id"] for n in body["data"]] == ["n1", "n2"]
    assert body["data"][0]["type"] == "PROJECT_UPDATE"
    assert body["data"][0]["data"] == {"project_id": "p1"}
    assert body["meta"] == {
        "total": 3,
        "unread": 2,
        "limit": 2,
        "offset": 0,
        "has_more": True,
    }


async def test_list_filters_and_ignores_unknown_type(client: AsyncClient, repo) -> None:
    repo.list_page.return_value = []
    repo.count_for_user.return_value = 0
    repo.count_unread.return_value = 0
    await client.get(
        "/api/v1/notifications",
        params={"unread": "true", "type": "QUOTE_STATUS"},
        headers=USER,
    )
    await client.get("/api/v1/notifications", params={"type": "BOGUS"}, headers=USER)
    filters = [c.args[0] for c in repo.list_page.await_args_list]
    assert filters == [
        NotificationFilter("user-1", unread_only=True, type=NotificationType.QUOTE_STATUS),
        NotificationFilter("user-1"),
    ]


async def test_list_store_failure_is_500(client: AsyncClient, repo) -> None:
    repo.list_page.side_effect = RuntimeError("db down")
    response = await client.get("/api/v1/notifications", headers=USER)
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to fetch notifications"}


async def test_mark_all_read(client: AsyncClient, repo) -> None:
    repo.mark_all_read.return_value = 0
    response = await client.patch(
        "/api/v1/notifications", json={"action": "markAllRead"}, headers=USER
    )
    assert response.status_code == 200
    assert response.json()["success"] is True
    assert repo.mark_all_read.await_args.args[0] == "user-1"


@pytest.mark.parametrize("body", [{"action": "deleteAll"}, {}])
async def test_unknown_bulk_action_is_400(client: AsyncClient, repo, body) -> None:
    response = await client.patch("/api/v1/notifications", json=body, headers=USER)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid action"}
    repo.mark_all_read.assert_not_awaited()


async def test_unread_count(client: AsyncClient, repo) -> None:
    repo.count_unread.return_value = 4
    response = await client.get("/api/v1/notifications/unread-count", headers=USER)
    assert response.json() == {"success": True, "count": 4}


@pytest.mark.parametrize(
    ("method", "path"),
    [("PATCH", "/api/v1/notifications/n1/read"), ("PATCH", "/api/v1/notifications/n1/unread")],
)
async def test_read_state_changes(client: AsyncClient, repo, method, path) -> None:
    repo.set_read_state.return_value = 1
    response = await client.request(method, path, headers=USER)
    assert response.status_code == 200
    assert repo.set_read_state.await_args.args == ("n1", "user-1")


async def test_foreign_notification_is_404(client: AsyncClient, repo) -> None:
    repo.set_read_state.return_value = 0
    response = await client.patch("/api/v1/notifications/n9/read", headers=USER)
    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "error": "Notification not found or access denied",
    }


async def test_delete(client: AsyncClient, repo) -> None:
    repo.delete.return_value = 1
    response = await client.delete("/api/v1/notifications/n1", headers=USER)
    assert response.status_code == 200
    repo.delete.assert_awaited_once_with("n1", "user-1")


async def test_delete_missing_is_404(client: AsyncClient, repo) -> None:
    repo.delete.return_value = 0
    response = await client.delete("/api/v1/notifications/n1", headers=USER)
    assert response.status_code == 404
