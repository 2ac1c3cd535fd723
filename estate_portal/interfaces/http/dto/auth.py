# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

from pydantic import BaseModel, Field, model_validator
from pydantic_core import PydanticCustomError

from estate_portal.infrastructure.api.schemas import LoginCredentials, SignupCredentials
from estate_portal.shared.errors.validation_types import ValidationErrorType

from .common import FormDTO, missing

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


class LoginRequestDTO(FormDTO):
    email: str | None = None
    password: str | None = Field(None, repr=False)

    @model_validator(mode="after")
    def _check_credentials(self) -> LoginRequestDTO:
        if not self.email or not self.password:
            raise missing("email" if not self.email else "password", "Please fill in all fields")
        if not EMAIL_PATTERN.match(self.email):
            raise PydanticCustomError(
                ValidationErrorType.EMAIL_INVALID,
                "Please enter a valid email address",
                {"field": "email"},
            )
        return self

    def to_credentials(self) -> LoginCredentials:
        return LoginCredentials(email=self.email or "", password=self.password or "")


class SignupRequestDTO(LoginRequestDTO):
    confirm_password: str | None = Field(None, repr=False)

    @model_validator(mode="after")
    def _check_confirmation(self) -> SignupRequestDTO:
        if not self.confirm_password:
            raise missing("confirmPassword", "Please confirm your password")
        if self.password != self.confirm_password:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_MISMATCH,
                "Passwords do not match",
                {"field": "confirmPassword"},
            )
        if len(self.password or "") < MIN_PASSWORD_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_SHORT,
                "Password must be at least 6 characters long",
                {"field": "password", "min_length": MIN_PASSWORD_LENGTH},
            )
        return self

    def to_credentials(self) -> SignupCredentials:
        return SignupCredentials(
            email=self.email or "",
            password=self.password or "",
            confirm_password=self.confirm_password or "",
        )


class UserDTO(BaseModel):
    id: str
    email: str
    name: str | None = None
    role: str | None = None


class AuthSuccessDTO(BaseModel):
    ok: bool = True
    user: UserDTO | None = None


__all__ = [
    "AuthSuccessDTO",
    "EMAIL_PATTERN",
    "LoginRequestDTO",
    "SignupRequestDTO",
    "UserDTO",
]
