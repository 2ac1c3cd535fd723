# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from estate_portal.shared.config import AppConfig
from estate_portal.shared.errors import NetworkError
from estate_portal.shared.logging import logger


@dataclass(slots=True, frozen=True)
class ApiEndpoint:
    """Where the remote API lives and how to reach it.

    A fresh ``httpx.AsyncClient`` is opened for every call so nothing is
    shared between event loops. ``transport`` is only set by tests.
    """

    base_url: str
    timeout: float = 15.0
    transport: httpx.AsyncBaseTransport | None = None

    @classmethod
    def from_config(cls, config: AppConfig) -> ApiEndpoint:
        return cls(base_url=config.api.base_url, timeout=config.api.timeout)

    def url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    async def send(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Any = None,
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            ) as http:
                response = await http.request(
                    method,
                    path,
                    headers=headers,
                    params=params,
                    json=json,
                    data=data,
                    files=files,
                )
        except httpx.TransportError as exc:
            logger.warning(f"api: {method} {path} transport failure: {exc!r}")
            raise NetworkError(url=self.url(path), reason=str(exc) or type(exc).__name__) from exc

        logger.debug(f"api: {method} {path} -> {response.status_code}")
        return response


__all__ = ["ApiEndpoint"]
