# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from estate_portal.domain.enums import CallDirection

from .common import ApiModel


class Call(ApiModel):
    id: str
    phone_number: str
    direction: CallDirection
    discussion_resume: str | None = None
    visite_date: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class CallFilter(ApiModel):
    phone_number: str | None = None
    direction: CallDirection | None = None
    visite_date: str | None = None


class CallCreate(ApiModel):
    phone_number: str
    direction: CallDirection
    discussion_resume: str | None = None
    visite_date: str | None = None


__all__ = ["Call", "CallCreate", "CallFilter"]
