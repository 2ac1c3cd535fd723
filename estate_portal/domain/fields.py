# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Tagged representation for API fields that may arrive as text or as an object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class Known:
    value: str

    def text(self, default: str = "") -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class Malformed:
    raw: Any

    def text(self, default: str = "") -> str:
        return default


TextField = Known | Malformed


def parse_text_field(raw: Any) -> TextField | None:
    if raw is None:
        return None
    if isinstance(raw, Known | Malformed):
        return raw
    if isinstance(raw, str):
        return Known(raw)
    return Malformed(raw)


def text_or_default(field: TextField | None, default: str = "") -> str:
    if field is None:
        return default
    return field.text(default)


def dump_text_field(field: TextField | None) -> Any:
    if isinstance(field, Known):
        return field.value
    if isinstance(field, Malformed):
        return field.raw
    return None


__all__ = [
    "Known",
    "Malformed",
    "TextField",
    "dump_text_field",
    "parse_text_field",
    "text_or_default",
]
