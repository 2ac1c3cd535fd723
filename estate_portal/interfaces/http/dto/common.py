# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from estate_portal.shared.errors.validation import raise_validation_error
from estate_portal.shared.errors.validation_types import ValidationErrorType

DTO = TypeVar("DTO", bound=BaseModel)


class FormDTO(BaseModel):
    """Form payload as posted by the web UI, camelCase or snake_case keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        extra="ignore",
        validate_default=True,
    )


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def missing(field: str, message: str) -> PydanticCustomError:
    return PydanticCustomError(ValidationErrorType.MISSING, message, {"field": field})


def validate_form(model: type[DTO], data: Mapping[str, Any] | None) -> DTO:
    try:
        return model.model_validate(dict(data or {}))
    except PydanticValidationError as exc:
        raise_validation_error(exc)


__all__ = ["DTO", "FormDTO", "blank_to_none", "missing", "validate_form"]
