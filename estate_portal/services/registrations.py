# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from estate_portal.infrastructure.api.schemas import ContactMessage, MessageResponse, Registration

from .base import ResourceService


class RegistrationService(ResourceService[Registration]):
    path = "/register"
    model = Registration
    public_create = True


class ContactService(ResourceService[MessageResponse]):
    path = "/contact"
    model = MessageResponse
    public_create = True

    async def send(self, message: ContactMessage) -> MessageResponse:
        response = await self.client.request(
            "POST", self.path, json=message.to_wire(), public=True
        )
        if response.is_success and not response.content:
            return MessageResponse()
        return self.parse_item(response)


__all__ = ["ContactService", "RegistrationService"]
