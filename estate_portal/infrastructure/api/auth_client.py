# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Calls against the ``/auth`` resource group."""

from __future__ import annotations

import httpx
from pydantic import ValidationError as PydanticValidationError

from estate_portal.application.session_store import SessionStore
from estate_portal.shared.errors import AppError, AuthError, ServerError
from estate_portal.shared.logging import logger

from .errors import server_message
from .schemas import AuthPayload, LoginCredentials, SignupCredentials
from .transport import ApiEndpoint


def _parse_payload(response: httpx.Response) -> AuthPayload:
    try:
        return AuthPayload.model_validate(response.json())
    except (ValueError, PydanticValidationError) as exc:
        raise ServerError(
            "invalid_response",
            message="Unexpected response from the authentication service.",
            upstream_status=response.status_code,
        ) from exc


class AuthApiClient:
    """Login, signup, logout and token refresh. Never retries."""

    def __init__(self, endpoint: ApiEndpoint, session_store: SessionStore) -> None:
        self._endpoint = endpoint
        self._store = session_store

    async def login(self, credentials: LoginCredentials) -> AuthPayload:
        response = await self._endpoint.send(
            "POST",
            "/auth/login",
            json={"email": credentials.email, "password": credentials.password},
        )
        if not response.is_success:
            raise AuthError(
                "login_failed",
                message=server_message(response) or "Login failed",
            )
        return _parse_payload(response)

    async def signup(self, credentials: SignupCredentials) -> AuthPayload:
        response = await self._endpoint.send("POST", "/auth/signup", json=credentials.to_wire())
        if not response.is_success:
            raise AuthError(
                "signup_failed",
                message=server_message(response) or "Signup failed",
            )
        return _parse_payload(response)

    async def refresh(self) -> AuthPayload:
        refresh_token = self._store.refresh_token
        if not refresh_token:
            raise AuthError("refresh_unavailable", message="No refresh token available")

        response = await self._endpoint.send(
            "POST",
            "/auth/refreshTokens",
            json={"refreshToken": refresh_token},
        )
        if not response.is_success:
            raise AuthError(
                "refresh_failed",
                message=server_message(response) or "Token refresh failed",
            )
        return _parse_payload(response)

    async def logout(self) -> None:
        token = self._store.access_token
        try:
            if token:
                response = await self._endpoint.send(
                    "POST",
                    "/auth/logout",
                    headers={"Authorization": f"Bearer {token}"},
                )
                if not response.is_success:
                    logger.warning(f"auth: remote logout returned {response.status_code}")
        except AppError as exc:
            logger.warning(f"auth: remote logout failed: {exc.code}")
        finally:
            self._store.clear_session()


__all__ = ["AuthApiClient"]
