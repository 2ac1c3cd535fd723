# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any


def parse_expiry(raw: Any) -> datetime | None:
    """Parse an ISO-8601 expiry into an aware datetime, or ``None`` if unusable."""

    if isinstance(raw, datetime):
        value = raw
    elif isinstance(raw, str) and raw.strip():
        try:
            value = datetime.fromisoformat(raw.strip())
        except ValueError:
            return None
    else:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value


def format_expiry(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


@dataclass(slots=True, frozen=True)
class User:

    id: str
    email: str
    name: str | None = None
    role: str | None = None
    is_email_verified: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> User:
        return cls(
            id=str(payload.get("id", "")),
            email=str(payload.get("email", "")),
            name=payload.get("name"),
            role=payload.get("role"),
            is_email_verified=payload.get("isEmailVerified"),
            created_at=payload.get("createdAt"),
            updated_at=payload.get("updatedAt"),
        )

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"id": self.id, "email": self.email}
        optional = {
            "name": self.name,
            "role": self.role,
            "isEmailVerified": self.is_email_verified,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        return payload


@dataclass(slots=True, frozen=True)
class Session:
    """Tokens, their expiries and the user they were issued for."""

    access_token: str | None
    refresh_token: str | None
    access_expires: datetime | None
    refresh_expires: datetime | None
    user: User | None = None

    def is_access_valid(self, now: datetime) -> bool:
        return _token_valid(self.access_token, self.access_expires, now)

    def is_refresh_valid(self, now: datetime) -> bool:
        return _token_valid(self.refresh_token, self.refresh_expires, now)


def _token_valid(token: str | None, expires: datetime | None, now: datetime) -> bool:
    if not token or expires is None:
        return False
    return expires > now
