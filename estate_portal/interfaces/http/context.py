# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from typing import TYPE_CHECKING

from flask import Flask, current_app, g, session

if TYPE_CHECKING:
    from estate_portal.container import Container, SessionScope

CONTAINER_EXTENSION = "estate_portal.container"
SESSION_ID_KEY = "sid"


def install_container(app: Flask, container: Container) -> None:
    app.extensions[CONTAINER_EXTENSION] = container


def current_container() -> Container:
    return current_app.extensions[CONTAINER_EXTENSION]


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


def current_scope() -> SessionScope:
    """The calling client's session scope, built once per request.

    The session id travels in Flask's signed session cookie. Callers without
    one get a fresh, empty scope that is only remembered after ``bind_scope``.
    """
    scope = g.get("session_scope")
    if scope is None:
        session_id = session.get(SESSION_ID_KEY) or new_session_id()
        scope = current_container().scope(session_id)
        g.session_scope = scope
    return scope


def bind_scope(scope: SessionScope) -> None:
    session[SESSION_ID_KEY] = scope.session_id
    session.permanent = True


def forget_scope() -> None:
    session.pop(SESSION_ID_KEY, None)


__all__ = [
    "CONTAINER_EXTENSION",
    "SESSION_ID_KEY",
    "bind_scope",
    "current_container",
    "current_scope",
    "forget_scope",
    "install_container",
    "new_session_id",
]
