# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from http import HTTPStatus
from typing import Any, ClassVar


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    AUTH = "auth"
    NOT_FOUND = "not_found"
    SERVER = "server"
    NETWORK = "network"


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str | None = None
    context: Mapping[str, Any] | None = None

    kind: ClassVar[ErrorKind] = ErrorKind.SERVER

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code, "kind": str(self.kind)}
        if self.message:
            payload["message"] = self.message
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class ValidationError(AppError):
    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        code: str = "validation_error",
        *,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            message=message or "Validation error occurred.",
            context=context,
        )


class AuthError(AppError):
    kind = ErrorKind.AUTH

    def __init__(
        self,
        code: str = "authentication_failed",
        *,
        message: str | None = None,
        status: HTTPStatus = HTTPStatus.UNAUTHORIZED,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=status,
            message=message or "Authentication failed. Please log in again.",
            context=context,
        )


class AuthenticationRequiredError(AuthError):
    def __init__(self, *, message: str | None = None, redirect_to: str | None = None) -> None:
        context = {"redirect": redirect_to} if redirect_to else None
        super().__init__(
            code="authentication_required",
            message=message or "Authentication required. Please log in.",
            context=context,
        )


class PermissionDeniedError(AuthError):
    def __init__(self) -> None:
        super().__init__(
            code="permission_denied",
            message="You do not have permission to perform this action.",
            status=HTTPStatus.FORBIDDEN,
        )


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        code: str = "not_found",
        *,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.NOT_FOUND,
            message=message or "Resource not found.",
            context=context,
        )


class ServerError(AppError):
    kind = ErrorKind.SERVER

    def __init__(
        self,
        code: str = "server_error",
        *,
        message: str | None = None,
        upstream_status: int | None = None,
    ) -> None:
        context = {"upstream_status": upstream_status} if upstream_status else None
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_GATEWAY,
            message=message or "Server error occurred. Please try again later.",
            context=context,
        )


class NetworkError(AppError):
    kind = ErrorKind.NETWORK

    def __init__(self, *, url: str | None = None, reason: str | None = None) -> None:
        context: dict[str, Any] = {}
        if url:
            context["url"] = url
        if reason:
            context["reason"] = reason
        super().__init__(
            code="network_error",
            status=HTTPStatus.SERVICE_UNAVAILABLE,
            message="Network error. Please check your connection and try again.",
            context=context or None,
        )
