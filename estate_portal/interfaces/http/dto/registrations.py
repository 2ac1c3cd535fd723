# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from pydantic import model_validator

from estate_portal.domain.enums import ProfileType
from estate_portal.infrastructure.api.schemas import RegistrationCreate

from .common import FormDTO, missing


class RegistrationFormDTO(FormDTO):
    """Registration of interest, optionally tied to a property."""

    full_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    profile_type: ProfileType | None = None
    property_id: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _blank_profile_type(cls, data: Any) -> Any:
        if isinstance(data, dict):
            for key in ("profileType", "profile_type"):
                if data.get(key) == "":
                    data[key] = None
        return data

    @model_validator(mode="after")
    def _check_registration(self) -> RegistrationFormDTO:
        if self.profile_type is None:
            raise missing("profileType", "Please select a profile type")
        if not (self.full_name or "").strip():
            raise missing("fullName", "Full name is required")
        if not (self.email or "").strip():
            raise missing("email", "Email is required")
        if not (self.phone_number or "").strip():
            raise missing("phoneNumber", "Phone number is required")
        return self

    def to_request(self) -> RegistrationCreate:
        return RegistrationCreate(
            full_name=(self.full_name or "").strip(),
            email=(self.email or "").strip(),
            phone_number=(self.phone_number or "").strip(),
            profile_type=self.profile_type,
            property_id=self.property_id or None,
        )


__all__ = ["RegistrationFormDTO"]
