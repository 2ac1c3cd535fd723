"""Use-case for ending the stored session."""

from __future__ import annotations

from estate_portal.infrastructure.api.auth_client import AuthApiClient


class LogoutUserUseCase:
    def __init__(self, *, auth_api: AuthApiClient) -> None:
        self._auth_api = auth_api

    async def execute(self) -> None:
        await self._auth_api.logout()
