"""Request ID middleware (raw ASGI).

Forwards a safe client-supplied request id or generates one, exposes it to
handlers via scope state and a context variable, and echoes it on the response.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Callable

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    """Request id of the request being handled, if any."""
    return _request_id.get()


def _header_value(scope: dict, name: bytes) -> str | None:
    for key, value in scope.get("headers", []):
        if key.lower() == name:
            return value.decode("latin-1")
    return None


def resolve_request_id(raw: str | None) -> str:
    """Keep raw when it is a short token of [A-Za-z0-9_-]; else a fresh uuid4 hex."""
    if raw and REQUEST_ID_ALLOWED_PATTERN.match(raw.strip()):
        return raw.strip()
    return uuid.uuid4().hex


class RequestIDMiddleware:
    """Attach a request id to every HTTP request and response."""

    def __init__(self, app: Callable, header_name: str = "X-Request-ID") -> None:
        self.app = app
        self.header_name = header_name
        self._header_key = header_name.lower().encode()

    async def __call__(self, scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        request_id = resolve_request_id(_header_value(scope, self._header_key))
        scope.setdefault("state", {})["request_id"] = request_id
        token = _request_id.set(request_id)

        async def send_with_request_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (self.header_name.encode(), request_id.encode()),
                ]
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            _request_id.reset(token)
