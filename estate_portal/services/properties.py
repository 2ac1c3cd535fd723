# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from estate_portal.domain.uploads import UploadedFile
from estate_portal.infrastructure.api.schemas import Property, PropertyWrite

from .base import ResourceService, file_parts, to_form_fields, to_wire

IMAGES_FIELD = "images"
PROPERTY_TYPES_FIELD = "propertyTypes[]"


def property_form_data(
    payload: PropertyWrite,
    *,
    has_images: bool = False,
    replace_images: bool | None = None,
) -> dict[str, str | list[str]]:
    """Form fields for a property submission.

    Property types go out as repeated ``propertyTypes[]`` values, booleans as
    ``"true"``/``"false"``. ``replaceImages`` is only sent with new images.
    """

    wire = to_wire(payload)
    property_types = wire.pop("propertyTypes", None)
    fields = to_form_fields(wire)
    if property_types:
        fields[PROPERTY_TYPES_FIELD] = [str(item) for item in property_types]
    if has_images and replace_images is not None:
        fields["replaceImages"] = "true" if replace_images else "false"
    return fields


class PropertyService(ResourceService[Property]):
    """Properties are sent as multipart forms when images accompany them."""

    path = "/properties"
    model = Property
    envelope_key = "property"

    def image_url(self, image_path: str) -> str:
        return self.client.endpoint.url(f"/file/preview/property/{image_path}")

    async def _submit(
        self,
        method: str,
        path: str,
        payload: PropertyWrite,
        images: Sequence[UploadedFile],
        replace_images: bool | None,
    ) -> Property:
        if images:
            response = await self.client.request(
                method,
                path,
                data=property_form_data(
                    payload, has_images=True, replace_images=replace_images
                ),
                files=file_parts(IMAGES_FIELD, images),
            )
        else:
            response = await self.client.request(method, path, json=to_wire(payload))
        return self.parse_item(response)

    async def create(  # type: ignore[override]
        self,
        payload: PropertyWrite,
        *,
        images: Sequence[UploadedFile] = (),
    ) -> Property:
        return await self._submit("POST", self.path, payload, images, None)

    async def update(  # type: ignore[override]
        self,
        property_id: str,
        payload: PropertyWrite,
        *,
        images: Sequence[UploadedFile] = (),
        replace_images: bool = True,
    ) -> Property:
        return await self._submit(
            "PATCH", self.item_path(property_id), payload, images, replace_images
        )


__all__ = ["IMAGES_FIELD", "PropertyService", "property_form_data"]
