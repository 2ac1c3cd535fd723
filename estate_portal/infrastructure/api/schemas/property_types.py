# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import Field

from .common import ApiModel


class PropertyType(ApiModel):
    id: str
    name: str
    description: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class PropertyTypeFilter(ApiModel):
    name: str | None = None


class PropertyTypeCreate(ApiModel):
    name: str
    description: str | None = None


class Category(ApiModel):
    id: str
    name: str
    description: str | None = None
    property_types: list[str | PropertyType] = Field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None


class CategoryFilter(ApiModel):
    name: str | None = None
    property_types: list[str] | None = None


class CategoryCreate(ApiModel):
    name: str
    description: str | None = None
    property_types: list[str] | None = None


__all__ = [
    "Category",
    "CategoryCreate",
    "CategoryFilter",
    "PropertyType",
    "PropertyTypeCreate",
    "PropertyTypeFilter",
]
