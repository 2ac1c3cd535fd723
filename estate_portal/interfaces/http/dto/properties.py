# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Property form and public property search."""

from __future__ import annotations

import re
from datetime import UTC, date, datetime
from typing import Any, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from estate_portal.domain.enums import PropertyStatus
from estate_portal.infrastructure.api.schemas import Number, PropertyFilter, PropertyWrite
from estate_portal.shared.errors.validation_types import ValidationErrorType

from .common import FormDTO, blank_to_none, missing

STATUS_ALL = "all"
ANY = "any"
STUDIO = "Studio"
BEDS_OPEN_ENDED = "8+"
BATHS_OPEN_ENDED = "6+"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def leading_int(raw: Any) -> int | None:
    """Integer prefix of ``raw`` (``"120k"`` -> 120), ``None`` when there is none."""

    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw)
    if not isinstance(raw, str):
        return None
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def _as_date(raw: Any) -> date | None:
    raw = blank_to_none(raw)
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str):
        try:
            return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
        except ValueError:
            return date.fromisoformat(raw[:10])
    raise ValueError("Invalid date")


def _iso_timestamp(value: date | datetime) -> str:
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=UTC)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class PropertyFormDTO(FormDTO):
    name: str | None = None
    description: str | None = None
    status: PropertyStatus | None = None
    price: Number | None = None
    price_from: Number | None = None
    price_to: Number | None = None
    size_area: str | None = None
    size: str | None = None
    size_from: str | None = None
    size_to: str | None = None
    location_iframe: str | None = None
    handover_by: str | None = None
    payment_plan: str | None = None
    completion_date: datetime | date | None = None
    property_types: list[str] = Field(default_factory=list)
    beds: int | None = None
    baths: int | None = None
    replace_images: bool = True

    @field_validator(
        "name",
        "description",
        "status",
        "price",
        "price_from",
        "price_to",
        "size_area",
        "size",
        "size_from",
        "size_to",
        "location_iframe",
        "handover_by",
        "payment_plan",
        "completion_date",
        "beds",
        "baths",
        mode="before",
    )
    @classmethod
    def _blank(cls, value: Any) -> Any:
        return blank_to_none(value)

    @model_validator(mode="after")
    def _check_property(self) -> PropertyFormDTO:
        if not self.name or self.status is None:
            raise missing("name" if not self.name else "status", "Please fill in all required fields")
        if self.status == PropertyStatus.OFF_PLAN:
            if (
                self.price_from is None
                or self.price_to is None
                or not self.size_from
                or not self.size_to
            ):
                raise PydanticCustomError(
                    ValidationErrorType.RANGE_REQUIRED,
                    "For OFF_PLAN properties, please fill in price range and size range",
                    {"field": "priceFrom"},
                )
        elif self.price is None:
            raise missing("price", "Please fill in the price")
        return self

    def to_request(self) -> PropertyWrite:
        price = self.price_from if self.status == PropertyStatus.OFF_PLAN else self.price
        return PropertyWrite(
            name=self.name,
            description=self.description,
            status=self.status,
            price=price,
            price_from=self.price_from,
            price_to=self.price_to,
            size_area=self.size_area,
            size=self.size,
            size_from=self.size_from,
            size_to=self.size_to,
            location_iframe=self.location_iframe,
            handover_by=self.handover_by,
            payment_plan=self.payment_plan,
            completion_date=_iso_timestamp(self.completion_date) if self.completion_date else None,
            property_types=self.property_types or None,
            beds=self.beds,
            baths=self.baths,
        )


class PropertySearchDTO(FormDTO):
    """Search box state on the public listings page."""

    status: PropertyStatus | Literal["all"] = STATUS_ALL
    search_term: str | None = None
    property_types: list[str] = Field(default_factory=list)
    beds: str | None = None
    baths: str | None = None
    min_price: str | None = None
    max_price: str | None = None
    completion_date_from: date | None = None
    completion_date_to: date | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, value: Any) -> Any:
        return blank_to_none(value) or STATUS_ALL

    @field_validator("property_types", mode="before")
    @classmethod
    def _split_types(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item for item in value.split(",") if item]
        return value or []

    @field_validator("beds", "baths", "min_price", "max_price", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("completion_date_from", "completion_date_to", mode="before")
    @classmethod
    def _date(cls, value: Any) -> Any:
        return _as_date(value)

    def to_filter(self) -> PropertyFilter:
        filters: dict[str, Any] = {}

        if self.status and self.status != STATUS_ALL:
            filters["status"] = self.status
        if self.search_term:
            filters["name"] = self.search_term
        if self.property_types:
            filters["property_types"] = list(self.property_types)

        if self.status == PropertyStatus.OFF_PLAN:
            if self.completion_date_from:
                filters["completion_date_from"] = self.completion_date_from.strftime("%Y-%m-%d")
            if self.completion_date_to:
                filters["completion_date_to"] = self.completion_date_to.strftime("%Y-%m-%d")
        else:
            if self.beds and self.beds != ANY:
                if self.beds == BEDS_OPEN_ENDED:
                    filters["beds_gt"] = 8
                elif self.beds == STUDIO:
                    filters["beds"] = 0
                elif (beds := leading_int(self.beds)) is not None:
                    filters["beds"] = beds
            if self.baths and self.baths != ANY:
                if self.baths == BATHS_OPEN_ENDED:
                    filters["baths_gt"] = 6
                elif (baths := leading_int(self.baths)) is not None:
                    filters["baths"] = baths

        if self.min_price and (low := leading_int(self.min_price)) is not None:
            filters["min_price"] = max(0, low)
        if self.max_price and (high := leading_int(self.max_price)) is not None:
            filters["max_price"] = max(0, high)

        return PropertyFilter.model_validate(filters)


__all__ = [
    "PropertyFormDTO",
    "PropertySearchDTO",
    "leading_int",
]
