from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import httpx

from estate_portal.domain.users import Session, User

BASE_URL = "http://api.test"
NOW = datetime(2025, 1, 15, 12, 0, tzinfo=UTC)


def iso(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


def auth_body(
    access: str = "access-1",
    refresh: str = "refresh-1",
    *,
    now: datetime = NOW,
    access_ttl: timedelta = timedelta(hours=1),
    refresh_ttl: timedelta = timedelta(days=7),
    email: str = "agent@example.com",
) -> dict[str, Any]:
    return {
        "user": {"id": "u1", "email": email, "name": "Agent", "role": "admin"},
        "tokens": {
            "access": {"token": access, "expires": iso(now + access_ttl)},
            "refresh": {"token": refresh, "expires": iso(now + refresh_ttl)},
        },
    }


def make_session(
    *,
    access_delta: timedelta | None = timedelta(hours=1),
    refresh_delta: timedelta | None = timedelta(days=7),
    access: str = "access-0",
    refresh: str = "refresh-0",
) -> Session:
    return Session(
        access_token=access,
        refresh_token=refresh,
        access_expires=NOW + access_delta if access_delta is not None else None,
        refresh_expires=NOW + refresh_delta if refresh_delta is not None else None,
        user=User(id="u1", email="agent@example.com", name="Agent"),
    )


class ApiRecorder:
    """Mock remote API: records requests and answers through ``handler``."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response] | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.handler = handler or (lambda request: httpx.Response(200, json={}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self.handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def paths(self) -> list[tuple[str, str]]:
        return [(r.method, r.url.path) for r in self.requests]


