# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import Field

from estate_portal.domain.enums import ProfileType

from .common import ApiModel


class PropertySummary(ApiModel):
    id: str
    name: str | None = None
    status: str | None = None
    price: int | float | None = None
    images: list[str] = Field(default_factory=list)


class Registration(ApiModel):
    id: str
    full_name: str
    email: str
    phone_number: str
    profile_type: ProfileType
    property_id: PropertySummary | str | None = None
    availability_time: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class RegistrationFilter(ApiModel):
    full_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    profile_type: ProfileType | None = None


class RegistrationCreate(ApiModel):
    full_name: str
    email: str
    phone_number: str
    profile_type: ProfileType
    property_id: str | None = None


__all__ = [
    "PropertySummary",
    "Registration",
    "RegistrationCreate",
    "RegistrationFilter",
]
