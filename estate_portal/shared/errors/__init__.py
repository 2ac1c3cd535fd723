from .base import (
    AppError,
    AuthenticationRequiredError,
    AuthError,
    ErrorKind,
    NetworkError,
    NotFoundError,
    PermissionDeniedError,
    ServerError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthError",
    "AuthenticationRequiredError",
    "ErrorKind",
    "NetworkError",
    "NotFoundError",
    "PermissionDeniedError",
    "ServerError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
