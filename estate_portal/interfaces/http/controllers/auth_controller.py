# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from estate_portal.domain.users import User
from estate_portal.interfaces.http.context import bind_scope, current_scope, forget_scope
from estate_portal.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    SignupRequestDTO,
    UserDTO,
)
from estate_portal.interfaces.http.guards import auth_required, guest_only
from estate_portal.shared.errors.validation import raise_validation_error
from estate_portal.shared.logging import logger
from estate_portal.utils.asyncio_utils import run_async


def _user_dto(user: User | None) -> UserDTO | None:
    if user is None:
        return None
    return UserDTO(id=user.id, email=user.email, name=user.name, role=user.role)


class AuthController:
    """Login state is per caller: each one holds its own session id cookie."""

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        scope = current_scope()
        user = run_async(scope.login_user_use_case.execute(dto.to_credentials()))
        bind_scope(scope)

        payload = AuthSuccessDTO(user=_user_dto(user)).model_dump(exclude_none=True)
        logger.info(f"auth.login: ok email={dto.email} sid={scope.session_id[:8]}…")
        return jsonify(payload), 200

    @guest_only
    def signup(self) -> tuple[Response, int]:
        try:
            dto = SignupRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        scope = current_scope()
        user = run_async(scope.signup_user_use_case.execute(dto.to_credentials()))
        bind_scope(scope)

        payload = AuthSuccessDTO(user=_user_dto(user)).model_dump(exclude_none=True)
        logger.info(f"auth.signup: ok email={dto.email} sid={scope.session_id[:8]}…")
        return jsonify(payload), 201

    def logout(self) -> tuple[Response, int]:
        run_async(current_scope().logout_user_use_case.execute())
        forget_scope()
        logger.info("auth.logout: ok")
        return jsonify(AuthSuccessDTO().model_dump(exclude_none=True)), 200

    @auth_required
    def me(self) -> tuple[Response, int]:
        sessions = current_scope().session_store
        session = sessions.session
        expires = session.access_expires if session else None
        user = _user_dto(sessions.user)
        return jsonify(
            {
                "authenticated": True,
                "email": sessions.user_email,
                "user": user.model_dump(exclude_none=True) if user else None,
                "accessExpires": expires.isoformat() if expires else None,
            }
        ), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp
