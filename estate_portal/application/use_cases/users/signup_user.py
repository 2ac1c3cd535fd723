# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from estate_portal.application.session_store import SessionStore
from estate_portal.domain.users import User
from estate_portal.infrastructure.api.auth_client import AuthApiClient
from estate_portal.infrastructure.api.schemas import SignupCredentials
from estate_portal.shared.logging import logger


class SignupUserUseCase:
    """Creates the account and keeps the session the server hands back."""

    def __init__(self, *, auth_api: AuthApiClient, sessions: SessionStore) -> None:
        self._auth_api = auth_api
        self._sessions = sessions

    async def execute(self, credentials: SignupCredentials) -> User:
        payload = await self._auth_api.signup(credentials)
        self._sessions.set_session(payload.to_session())
        logger.info(f"auth: signup ok user={credentials.email}")
        return payload.user.to_entity()
