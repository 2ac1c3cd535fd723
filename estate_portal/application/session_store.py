# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Client-held session state backed by persistent storage."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from threading import Lock

from estate_portal.domain.users import (
    Clock,
    Session,
    SessionStorage,
    User,
    format_expiry,
    parse_expiry,
)
from estate_portal.shared.logging import logger

ACCESS_TOKEN_KEY = "accessToken"
REFRESH_TOKEN_KEY = "refreshToken"
ACCESS_EXPIRES_KEY = "accessTokenExpires"
REFRESH_EXPIRES_KEY = "refreshTokenExpires"
USER_EMAIL_KEY = "userEmail"
USER_DATA_KEY = "userData"

SESSION_KEYS: tuple[str, ...] = (
    ACCESS_TOKEN_KEY,
    REFRESH_TOKEN_KEY,
    ACCESS_EXPIRES_KEY,
    REFRESH_EXPIRES_KEY,
    USER_EMAIL_KEY,
    USER_DATA_KEY,
)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SessionStore:
    """Tracks whether the client holds a usable credential.

    The store is an explicit object handed to whatever issues requests.
    ``init()`` loads persisted fields, ``clear_session()`` (or ``teardown()``)
    removes them. Queries never touch the network.
    """

    def __init__(self, storage: SessionStorage, *, clock: Clock | None = None) -> None:
        self._storage = storage
        self._clock = clock or _utcnow
        self._lock = Lock()
        self._session: Session | None = None

    def init(self) -> SessionStore:
        access_token = self._storage.get(ACCESS_TOKEN_KEY)
        refresh_token = self._storage.get(REFRESH_TOKEN_KEY)
        if not access_token and not refresh_token:
            self._session = None
            return self

        self._session = Session(
            access_token=access_token,
            refresh_token=refresh_token,
            access_expires=parse_expiry(self._storage.get(ACCESS_EXPIRES_KEY)),
            refresh_expires=parse_expiry(self._storage.get(REFRESH_EXPIRES_KEY)),
            user=self._load_user(),
        )
        logger.debug(
            f"session: loaded persisted session user={self.user_email} "
            f"authenticated={self.is_authenticated()}"
        )
        return self

    def _load_user(self) -> User | None:
        raw = self._storage.get(USER_DATA_KEY)
        if not raw:
            return None
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("session: persisted user data is not valid JSON, ignoring")
            return None
        if not isinstance(payload, dict):
            return None
        return User.from_payload(payload)

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def access_token(self) -> str | None:
        return self._session.access_token if self._session else None

    @property
    def refresh_token(self) -> str | None:
        return self._session.refresh_token if self._session else None

    @property
    def user(self) -> User | None:
        return self._session.user if self._session else None

    @property
    def user_email(self) -> str | None:
        return self._storage.get(USER_EMAIL_KEY)

    def now(self) -> datetime:
        return self._clock()

    def is_authenticated(self) -> bool:
        session = self._session
        return session is not None and session.is_access_valid(self._clock())

    def is_refresh_token_valid(self) -> bool:
        session = self._session
        return session is not None and session.is_refresh_valid(self._clock())

    def set_session(self, session: Session) -> None:
        values: dict[str, str] = {}
        if session.access_token:
            values[ACCESS_TOKEN_KEY] = session.access_token
        if session.refresh_token:
            values[REFRESH_TOKEN_KEY] = session.refresh_token
        access_expires = format_expiry(session.access_expires)
        if access_expires:
            values[ACCESS_EXPIRES_KEY] = access_expires
        refresh_expires = format_expiry(session.refresh_expires)
        if refresh_expires:
            values[REFRESH_EXPIRES_KEY] = refresh_expires
        if session.user is not None:
            values[USER_EMAIL_KEY] = session.user.email
            values[USER_DATA_KEY] = json.dumps(session.user.to_payload())

        with self._lock:
            missing = tuple(key for key in SESSION_KEYS if key not in values)
            self._storage.set_many(values, remove=missing)
            self._session = session
        logger.info(f"session: stored session for user={values.get(USER_EMAIL_KEY)}")

    def clear_session(self) -> None:
        with self._lock:
            self._storage.remove_many(SESSION_KEYS)
            had_session = self._session is not None
            self._session = None
        if had_session:
            logger.info("session: cleared")

    teardown = clear_session


__all__ = ["SESSION_KEYS", "SessionStore"]
