# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator
from pydantic.alias_generators import to_camel

from estate_portal.domain.enums import SortOrder
from estate_portal.domain.fields import TextField, dump_text_field, parse_text_field

T = TypeVar("T")

Number = int | float

FlexibleText = Annotated[
    TextField | None,
    PlainValidator(parse_text_field),
    PlainSerializer(dump_text_field),
]


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ListOptions(ApiModel):
    page: int | None = Field(None, ge=1)
    limit: int | None = Field(None, ge=1)
    sort_by: str | None = None
    order: SortOrder | None = None


class Page(ApiModel, Generic[T]):
    results: list[T] = Field(default_factory=list)
    page: int = 1
    limit: int = 0
    total_pages: int = 1
    total_results: int = 0

    @classmethod
    def single(cls, results: list[T]) -> Page[T]:
        return cls(
            results=results,
            page=1,
            limit=len(results),
            total_pages=1,
            total_results=len(results),
        )


class MessageResponse(ApiModel):
    message: str | None = None


__all__ = ["ApiModel", "FlexibleText", "ListOptions", "MessageResponse", "Number", "Page"]
