# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Reading list filters and options from incoming query strings."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from werkzeug.datastructures import MultiDict

from estate_portal.infrastructure.api.schemas import ListOptions
from estate_portal.shared.errors import ValidationError
from estate_portal.shared.errors.validation import raise_validation_error

_OPTION_KEYS = ("page", "limit", "sortBy", "order")


def _json_param(args: MultiDict[str, str], name: str) -> dict[str, Any]:
    raw = args.get(name)
    if not raw:
        return {}
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError(
            "invalid_query",
            message=f"Query parameter '{name}' must be a JSON object",
            context={"field": name},
        ) from exc
    if not isinstance(value, dict):
        raise ValidationError(
            "invalid_query",
            message=f"Query parameter '{name}' must be a JSON object",
            context={"field": name},
        )
    return value


def parse_options(
    args: MultiDict[str, str], defaults: dict[str, Any] | None = None
) -> ListOptions:
    """``options`` JSON, or loose ``page``/``limit``/``sortBy``/``order`` params."""

    data: dict[str, Any] = dict(defaults or {})
    data.update({key: args[key] for key in _OPTION_KEYS if args.get(key)})
    data.update(_json_param(args, "options"))
    try:
        return ListOptions.model_validate(data)
    except PydanticValidationError as exc:
        raise_validation_error(exc)


def parse_filter(args: MultiDict[str, str], model: type[BaseModel]) -> BaseModel:
    try:
        return model.model_validate(_json_param(args, "filter"))
    except PydanticValidationError as exc:
        raise_validation_error(exc)


__all__ = ["parse_filter", "parse_options"]
