# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Encoding of list queries as ``filter``/``options`` JSON query parameters."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

FilterLike = BaseModel | Mapping[str, Any] | None


def _as_wire(value: FilterLike) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True, mode="json")
    return dict(value)


def dumps_compact(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def encode_list_query(filter: FilterLike = None, options: FilterLike = None) -> dict[str, str]:
    """Both parameters are always present, empty ones as ``{}``."""

    return {
        "filter": dumps_compact(_as_wire(filter)),
        "options": dumps_compact(_as_wire(options)),
    }


def decode_list_query(params: Mapping[str, str]) -> tuple[dict[str, Any], dict[str, Any]]:
    return json.loads(params.get("filter") or "{}"), json.loads(params.get("options") or "{}")


__all__ = ["FilterLike", "decode_list_query", "dumps_compact", "encode_list_query"]
