# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from estate_portal.infrastructure.api.schemas import Call, Category, Job, PropertyType

from .base import ResourceService


class PropertyTypeService(ResourceService[PropertyType]):
    path = "/property-types"
    model = PropertyType


class CategoryService(ResourceService[Category]):
    path = "/categories"
    model = Category


class JobService(ResourceService[Job]):
    path = "/jobs"
    model = Job


class CallService(ResourceService[Call]):
    path = "/calls"
    model = Call


__all__ = ["CallService", "CategoryService", "JobService", "PropertyTypeService"]
