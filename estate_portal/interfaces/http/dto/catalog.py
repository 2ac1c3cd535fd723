# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Forms for the simple dashboard collections."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from estate_portal.domain.enums import CallDirection, JobType
from estate_portal.infrastructure.api.schemas import (
    CallCreate,
    CategoryCreate,
    ContactMessage,
    JobCreate,
    PropertyTypeCreate,
)

from .common import FormDTO, blank_to_none, missing


def _required(value: Any, field: str, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise missing(field, message)
    return value.strip()


class JobFormDTO(FormDTO):
    name: Any = None
    description: str | None = None
    type: JobType = JobType.FULL_TIME
    location: Any = None
    creation_date: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value: Any) -> str:
        return _required(value, "name", "Job name is required")

    @field_validator("location", mode="before")
    @classmethod
    def _location(cls, value: Any) -> str:
        return _required(value, "location", "Location is required")

    @field_validator("description", "creation_date", mode="before")
    @classmethod
    def _optional(cls, value: Any) -> Any:
        return blank_to_none(value)

    def to_request(self) -> JobCreate:
        return JobCreate(
            name=self.name,
            description=self.description,
            type=self.type,
            location=self.location,
            creation_date=self.creation_date,
        )


class PropertyTypeFormDTO(FormDTO):
    name: Any = None
    description: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value: Any) -> str:
        return _required(value, "name", "Property type name is required")

    @field_validator("description", mode="before")
    @classmethod
    def _optional(cls, value: Any) -> Any:
        return blank_to_none(value)

    def to_request(self) -> PropertyTypeCreate:
        return PropertyTypeCreate(name=self.name, description=self.description)


class CategoryFormDTO(FormDTO):
    name: Any = None
    description: str | None = None
    property_types: list[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value: Any) -> str:
        return _required(value, "name", "Category name is required")

    @field_validator("description", mode="before")
    @classmethod
    def _optional(cls, value: Any) -> Any:
        return blank_to_none(value)

    def to_request(self) -> CategoryCreate:
        return CategoryCreate(
            name=self.name,
            description=self.description,
            property_types=self.property_types,
        )


class CallFormDTO(FormDTO):
    phone_number: Any = None
    direction: CallDirection | None = None
    discussion_resume: str | None = None
    visite_date: str | None = None

    @field_validator("phone_number", mode="before")
    @classmethod
    def _phone(cls, value: Any) -> str:
        return _required(value, "phoneNumber", "Phone number is required")

    @field_validator("direction", mode="before")
    @classmethod
    def _direction(cls, value: Any) -> Any:
        value = blank_to_none(value)
        if value is None:
            raise missing("direction", "Direction is required")
        return value.upper() if isinstance(value, str) else value

    @field_validator("discussion_resume", "visite_date", mode="before")
    @classmethod
    def _optional(cls, value: Any) -> Any:
        return blank_to_none(value)

    def to_request(self) -> CallCreate:
        return CallCreate(
            phone_number=self.phone_number,
            direction=self.direction,
            discussion_resume=self.discussion_resume,
            visite_date=self.visite_date,
        )


class ContactFormDTO(FormDTO):
    name: Any = None
    email: Any = None
    phone_number: str | None = None
    message: Any = None

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value: Any) -> str:
        return _required(value, "name", "Name is required")

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value: Any) -> str:
        return _required(value, "email", "Email is required")

    @field_validator("message", mode="before")
    @classmethod
    def _message(cls, value: Any) -> str:
        return _required(value, "message", "Message is required")

    @field_validator("phone_number", mode="before")
    @classmethod
    def _optional(cls, value: Any) -> Any:
        return blank_to_none(value)

    def to_request(self) -> ContactMessage:
        return ContactMessage(
            name=self.name,
            email=self.email,
            phone_number=self.phone_number,
            message=self.message,
        )


__all__ = [
    "CallFormDTO",
    "CategoryFormDTO",
    "ContactFormDTO",
    "JobFormDTO",
    "PropertyTypeFormDTO",
]
