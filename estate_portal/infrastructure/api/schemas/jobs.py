# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from estate_portal.domain.enums import JobType

from .common import ApiModel


class Job(ApiModel):
    id: str
    name: str
    description: str | None = None
    type: JobType
    location: str
    creation_date: str | None = None


class JobFilter(ApiModel):
    name: str | None = None
    type: JobType | None = None
    location: str | None = None
    creation_date_from: str | None = None
    creation_date_to: str | None = None


class JobCreate(ApiModel):
    name: str
    description: str | None = None
    type: JobType
    location: str
    creation_date: str | None = None


__all__ = ["Job", "JobCreate", "JobFilter"]
