# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from .common import ApiModel


class ContactMessage(ApiModel):
    name: str
    email: str
    phone_number: str | None = None
    message: str


__all__ = ["ContactMessage"]
