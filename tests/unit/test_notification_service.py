"""NotificationService unit tests with a mocked notification repository."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from pinkbeam.application.dtos.notification import NotificationFilter, NotificationResult
from pinkbeam.application.use_cases.notifications import (
    NOT_FOUND_ERROR,
    NotificationService,
)
from pinkbeam.domain.enums import NotificationType


def _notification(id: str = "n1", is_read: bool = False) -> NotificationResult:
    return NotificationResult(
        id=id,
        user_id="u1",
        type=NotificationType.TICKET_REPLY,
        title="New reply",
        message="Support replied to your ticket",
        data={"ticket_id": "t1"},
        is_read=is_read,
        created_at=datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def service(repo: AsyncMock) -> NotificationService:
    return NotificationService(repo)


async def test_create_notification_coerces_type_and_defaults_data(service, repo) -> None:
    repo.create.return_value = _notification()
    result = await service.create_notification("u1", "TICKET_REPLY", "New reply", "msg")
    assert result.success is True
    assert result.data == _notification()
    repo.create.assert_awaited_once_with(
        user_id="u1",
        type=NotificationType.TICKET_REPLY,
        title="New reply",
        message="msg",
        data={},
    )


async def test_create_notification_unknown_type_fails(service, repo) -> None:
    result = await service.create_notification("u1", "NOT_A_TYPE", "t", "m")
    assert result.success is False
    assert result.error == "Failed to create notification"
    repo.create.assert_not_awaited()


async def test_create_notification_store_error(service, repo) -> None:
    repo.create.side_effect = RuntimeError("db down")
    result = await service.create_notification("u1", NotificationType.SYSTEM, "t", "m")
    assert result == result.fail("Failed to create notification")


async def test_get_notifications_meta(service, repo) -> None:
    repo.list_page.return_value = [_notification("n1"), _notification("n2")]
    repo.count_for_user.return_value = 5
    repo.count_unread.return_value = 3
    result = await service.get_notifications("u1", limit=2, offset=0)
    assert result.success is True
    assert [n.id for n in result.data] == ["n1", "n2"]
    assert result.meta == {
        "total": 5,
        "unread": 3,
        "limit": 2,
        "offset": 0,
        "has_more": True,
    }
    repo.list_page.assert_awaited_once_with(NotificationFilter(user_id="u1"), 2, 0)


async def test_get_notifications_last_page_has_no_more(service, repo) -> None:
    repo.list_page.return_value = [_notification("n5")]
    repo.count_for_user.return_value = 5
    repo.count_unread.return_value = 0
    result = await service.get_notifications("u1", limit=2, offset=4)
    assert result.meta["has_more"] is False


async def test_get_notifications_passes_filters(service, repo) -> None:
    repo.list_page.return_value = []
    repo.count_for_user.return_value = 0
    repo.count_unread.return_value = 0
    await service.get_notifications(
        "u1", unread_only=True, type=NotificationType.QUOTE_STATUS
    )
    repo.list_page.assert_awaited_once_with(
        NotificationFilter(
            user_id="u1", unread_only=True, type=NotificationType.QUOTE_STATUS
        ),
        20,
        0,
    )


async def test_get_notifications_store_error(service, repo) -> None:
    repo.list_page.side_effect = RuntimeError("db down")
    result = await service.get_notifications("u1")
    assert result.success is False
    assert result.error == "Failed to fetch notifications"


async def test_mark_as_read_sets_read_at(service, repo) -> None:
    repo.set_read_state.return_value = 1
    result = await service.mark_as_read("n1", "u1")
    assert result.success is True
    args = repo.set_read_state.await_args
    assert args.args == ("n1", "u1")
    assert args.kwargs["is_read"] is True
    assert args.kwargs["read_at"].tzinfo is not None


async def test_mark_as_unread_clears_read_at(service, repo) -> None:
    repo.set_read_state.return_value = 1
    result = await service.mark_as_unread("n1", "u1")
    assert result.success is True
    repo.set_read_state.assert_awaited_once_with(
        "n1", "u1", is_read=False, read_at=None
    )


@pytest.mark.parametrize("method", ["mark_as_read", "mark_as_unread", "delete_notification"])
async def test_foreign_or_missing_notification_is_not_found(service, repo, method) -> None:
    repo.set_read_state.return_value = 0
    repo.delete.return_value = 0
    result = await getattr(service, method)("n1", "someone-else")
    assert result.success is False
    assert result.error == NOT_FOUND_ERROR


@pytest.mark.parametrize(
    ("method", "message"),
    [
        ("mark_as_read", "Failed to mark notification as read"),
        ("mark_as_unread", "Failed to mark notification as unread"),
        ("delete_notification", "Failed to delete notification"),
    ],
)
async def test_store_errors_become_failures(service, repo, method, message) -> None:
    repo.set_read_state.side_effect = RuntimeError("db down")
    repo.delete.side_effect = RuntimeError("db down")
    result = await getattr(service, method)("n1", "u1")
    assert result.success is False
    assert result.error == message


async def test_mark_all_as_read_with_nothing_unread_succeeds(service, repo) -> None:
    repo.mark_all_read.return_value = 0
    result = await service.mark_all_as_read("u1")
    assert result.success is True
    assert result.count == 0


async def test_mark_all_as_read_store_error(service, repo) -> None:
    repo.mark_all_read.side_effect = RuntimeError("db down")
    result = await service.mark_all_as_read("u1")
    assert result.error == "Failed to mark all notifications as read"


async def test_get_unread_count(service, repo) -> None:
    repo.count_unread.return_value = 7
    result = await service.get_unread_count("u1")
    assert result.to_dict() == {"success": True, "count": 7}


async def test_get_unread_count_store_error(service, repo) -> None:
    repo.count_unread.side_effect = RuntimeError("db down")
    result = await service.get_unread_count("u1")
    assert result.to_dict() == {"success": False, "error": "Failed to get unread count"}


async def test_delete_notification(service, repo) -> None:
    repo.delete.return_value = 1
    result = await service.delete_notification("n1", "u1")
    assert result.success is True
    repo.delete.assert_awaited_once_with("n1", "u1")
