"""DTO behaviour: empty emails, recipients, result serialisation."""

from datetime import datetime, timezone

from pinkbeam.application.dtos import (
    EMPTY_EMAIL,
    EmailMessage,
    GlobalSearchResults,
    NotificationResult,
    OperationResult,
    RenderedEmail,
)
from pinkbeam.domain.enums import NotificationType


def test_rendered_email_truthiness() -> None:
    assert not EMPTY_EMAIL
    assert EMPTY_EMAIL.is_empty
    assert RenderedEmail("Subject", "<p>x</p>")
    assert RenderedEmail("Subject", "")
    assert not RenderedEmail("", "<p>x</p>")
    assert RenderedEmail("", "<p>x</p>").is_empty


def test_email_message_recipients() -> None:
    assert EmailMessage("a@example.com", "s", "h").recipients == ["a@example.com"]
    assert EmailMessage(["a@x.io", "b@x.io"], "s", "h").recipients == ["a@x.io", "b@x.io"]


def test_global_search_results_groups_keys() -> None:
    assert list(GlobalSearchResults().groups()) == ["projects", "clients", "tickets", "blog"]


def test_operation_result_ok_omits_unset_fields() -> None:
    assert OperationResult.ok().to_dict() == {"success": True}
    assert OperationResult.ok(count=0).to_dict() == {"success": True, "count": 0}


def test_operation_result_fail() -> None:
    assert OperationResult.fail("nope").to_dict() == {"success": False, "error": "nope"}


def test_operation_result_serialises_dataclass_data() -> None:
    created = datetime(2025, 1, 15, tzinfo=timezone.utc)
    notification = NotificationResult(
        id="n1",
        user_id="u1",
        type=NotificationType.SYSTEM,
        title="Maintenance",
        message="Tonight",
        created_at=created,
    )
    out = OperationResult.ok([notification], meta={"total": 1}).to_dict()
    assert out["meta"] == {"total": 1}
    assert out["data"][0]["id"] == "n1"
    assert out["data"][0]["data"] == {}
    assert out["data"][0]["created_at"] == created
