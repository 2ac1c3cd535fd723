# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request wrapper that attaches the bearer token and recovers from one 401."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from estate_portal.application.session_store import SessionStore
from estate_portal.shared.errors import AppError, AuthenticationRequiredError
from estate_portal.shared.logging import logger

from .auth_client import AuthApiClient
from .transport import ApiEndpoint

MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


class AuthenticatedClient:
    """Issues API requests on behalf of the stored session.

    Mutating requests require a valid access token up front. A 401 on a
    mutating request triggers at most one refresh and at most one retry.
    Concurrent requests that hit 401 at the same time refresh independently.
    """

    def __init__(
        self,
        endpoint: ApiEndpoint,
        session_store: SessionStore,
        auth_api: AuthApiClient,
    ) -> None:
        self._endpoint = endpoint
        self._store = session_store
        self._auth_api = auth_api

    @property
    def endpoint(self) -> ApiEndpoint:
        return self._endpoint

    @property
    def session_store(self) -> SessionStore:
        return self._store

    def _headers(self, public: bool) -> dict[str, str]:
        token = None if public else self._store.access_token
        return {"Authorization": f"Bearer {token}"} if token else {}

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Any = None,
        public: bool = False,
    ) -> httpx.Response:
        method = method.upper()
        mutating = method in MUTATING_METHODS

        if mutating and not public and not self._store.is_authenticated():
            logger.info(f"api: {method} {path} rejected, no valid session")
            raise AuthenticationRequiredError()

        async def send() -> httpx.Response:
            return await self._endpoint.send(
                method,
                path,
                headers=self._headers(public),
                params=params,
                json=json,
                data=data,
                files=files,
            )

        response = await send()
        if response.status_code != 401 or public or not mutating:
            return response

        if not self._store.is_refresh_token_valid():
            logger.info(f"api: {method} {path} got 401 and refresh token is unusable")
            self._store.clear_session()
            return response

        try:
            payload = await self._auth_api.refresh()
        except AppError as exc:
            logger.warning(f"api: token refresh failed ({exc.code}), clearing session")
            self._store.clear_session()
            return response

        self._store.set_session(payload.to_session())
        logger.info(f"api: token refreshed, retrying {method} {path}")
        return await send()


__all__ = ["AuthenticatedClient", "MUTATING_METHODS"]
