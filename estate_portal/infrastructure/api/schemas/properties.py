# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import Field

from estate_portal.domain.enums import PropertyStatus

from .common import ApiModel, FlexibleText, Number
from .property_types import PropertyType


class Property(ApiModel):
    id: str
    name: str
    description: str | None = None
    images: list[str] = Field(default_factory=list)
    status: PropertyStatus | None = None
    price: Number | None = None
    price_from: Number | None = None
    price_to: Number | None = None
    size_area: FlexibleText = None
    size: FlexibleText = None
    size_from: str | None = None
    size_to: str | None = None
    location_iframe: FlexibleText = None
    handover_by: FlexibleText = None
    payment_plan: str | None = None
    completion_date: str | None = None
    property_types: list[str | PropertyType] = Field(default_factory=list)
    beds: int | None = None
    baths: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


class PropertyFilter(ApiModel):
    name: str | None = None
    status: PropertyStatus | None = None
    beds: int | None = None
    beds_gt: int | None = None
    baths: int | None = None
    baths_gt: int | None = None
    min_price: Number | None = None
    max_price: Number | None = None
    min_size_area: Number | None = None
    max_size_area: Number | None = None
    property_types: list[str] | None = None
    completion_date_from: str | None = None
    completion_date_to: str | None = None


class PropertyWrite(ApiModel):
    """Fields submitted as multipart form values on create and update."""

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
    completion_date: str | None = None
    property_types: list[str] | None = None
    beds: int | None = None
    baths: int | None = None


__all__ = ["Property", "PropertyFilter", "PropertyWrite"]
