"""DTOs for in-app notifications and service operation outcomes."""

from dataclasses import asdict, dataclass, field, is_dataclass
from datetime import datetime
from typing import Any

from pinkbeam.domain.enums import NotificationType


@dataclass(frozen=True)
class NotificationResult:
    """Notification read-model."""

    id: str
    user_id: str
    type: NotificationType
    title: str
    message: str
    data: dict[str, Any] = field(default_factory=dict)
    is_read: bool = False
    read_at: datetime | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class NotificationFilter:
    """Listing filter: user scope is mandatory, the rest narrow the page."""

    user_id: str
    unread_only: bool = False
    type: NotificationType | None = None


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a notification operation. Failures carry a fixed error message."""

    success: bool
    data: Any = None
    error: str | None = None
    meta: dict[str, Any] | None = None
    count: int | None = None

    @classmethod
    def ok(cls, data: Any = None, **extra: Any) -> "OperationResult":
        return cls(success=True, data=data, **extra)

    @classmethod
    def fail(cls, error: str) -> "OperationResult":
        return cls(success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"success": self.success}
        if self.data is not None:
            out["data"] = _plain(self.data)
        for key in ("error", "meta", "count"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        return out


def _plain(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value
