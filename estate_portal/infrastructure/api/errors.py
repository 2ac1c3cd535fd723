# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Translation of remote API responses into application errors."""

from __future__ import annotations

from http import HTTPStatus

import httpx

from estate_portal.shared.errors import (
    AuthError,
    NotFoundError,
    PermissionDeniedError,
    ServerError,
    ValidationError,
)

_VALIDATION_STATUSES = frozenset(
    {HTTPStatus.BAD_REQUEST, HTTPStatus.CONFLICT}
)


def server_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return None


def raise_for_api_error(response: httpx.Response) -> None:
    if response.is_success:
        return

    status = response.status_code

    # Fixed user-facing messages; the server's text is not shown for these.
    if status == HTTPStatus.UNAUTHORIZED:
        raise AuthError()
    if status == HTTPStatus.FORBIDDEN:
        raise PermissionDeniedError()
    if status == HTTPStatus.NOT_FOUND:
        raise NotFoundError()
    if status == HTTPStatus.INTERNAL_SERVER_ERROR:
        raise ServerError(upstream_status=status)

    message = server_message(response)
    if status == HTTPStatus.UNPROCESSABLE_ENTITY:
        raise ValidationError(
            message=message or "Validation error occurred.",
            context={"upstream_status": status},
        )
    if status in _VALIDATION_STATUSES:
        raise ValidationError(
            message=message or f"Request failed: {response.reason_phrase}",
            context={"upstream_status": status},
        )
    raise ServerError(
        message=message or f"Request failed: {response.reason_phrase}",
        upstream_status=status,
    )


__all__ = ["raise_for_api_error", "server_message"]
