# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, Field

from estate_portal.domain.users import Session, User, parse_expiry

from .common import ApiModel


class UserSchema(ApiModel):
    id: str
    email: str
    name: str | None = None
    role: str | None = None
    is_email_verified: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None

    def to_entity(self) -> User:
        return User(
            id=self.id,
            email=self.email,
            name=self.name,
            role=self.role,
            is_email_verified=self.is_email_verified,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class TokenInfo(ApiModel):
    token: str
    expires: str


class Tokens(ApiModel):
    access: TokenInfo
    refresh: TokenInfo


class AuthPayload(ApiModel):
    user: UserSchema
    tokens: Tokens
    message: str | None = None

    def to_session(self) -> Session:
        return Session(
            access_token=self.tokens.access.token,
            refresh_token=self.tokens.refresh.token,
            access_expires=parse_expiry(self.tokens.access.expires),
            refresh_expires=parse_expiry(self.tokens.refresh.expires),
            user=self.user.to_entity(),
        )


class LoginCredentials(BaseModel):
    email: str
    password: str = Field(repr=False)


class SignupCredentials(LoginCredentials):
    confirm_password: str = Field(repr=False)

    def to_wire(self) -> dict[str, str]:
        return {"email": self.email, "password": self.password}


__all__ = [
    "AuthPayload",
    "LoginCredentials",
    "SignupCredentials",
    "TokenInfo",
    "Tokens",
    "UserSchema",
]
