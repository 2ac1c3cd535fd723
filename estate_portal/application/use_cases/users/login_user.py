# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from estate_portal.application.session_store import SessionStore
from estate_portal.domain.users import User
from estate_portal.infrastructure.api.auth_client import AuthApiClient
from estate_portal.infrastructure.api.schemas import LoginCredentials
from estate_portal.shared.logging import logger


class LoginUserUseCase:
    def __init__(self, *, auth_api: AuthApiClient, sessions: SessionStore) -> None:
        self._auth_api = auth_api
        self._sessions = sessions

    async def execute(self, credentials: LoginCredentials) -> User:
        payload = await self._auth_api.login(credentials)
        session = payload.to_session()
        self._sessions.set_session(session)
        logger.info(f"auth: login ok user={credentials.email}")
        return payload.user.to_entity()
