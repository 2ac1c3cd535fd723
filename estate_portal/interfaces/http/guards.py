# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps

from flask import g, redirect, request

from .context import current_scope
from estate_portal.shared.errors import AuthenticationRequiredError
from estate_portal.shared.logging import logger

LOGIN_PATH = "/auth"
GUEST_REDIRECT_PATH = "/dashboard/properties"


def auth_required(f):
    @wraps(f)
    def inner(*a, **kw):
        sessions = current_scope().session_store
        if not sessions.is_authenticated():
            logger.warning(
                f"Unauthenticated access to {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise AuthenticationRequiredError(
                message="Please log in to access this page",
                redirect_to=LOGIN_PATH,
            )
        g.user_email = sessions.user_email
        return f(*a, **kw)

    return inner


def guest_only(f):
    @wraps(f)
    def inner(*a, **kw):
        if current_scope().session_store.is_authenticated():
            return redirect(GUEST_REDIRECT_PATH)
        return f(*a, **kw)

    return inner


__all__ = ["GUEST_REDIRECT_PATH", "LOGIN_PATH", "auth_required", "guest_only"]
