# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Shared CRUD template for the remote API collections."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, Generic, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from estate_portal.domain.uploads import UploadedFile
from estate_portal.infrastructure.api import AuthenticatedClient, encode_list_query, raise_for_api_error
from estate_portal.infrastructure.api.query import FilterLike
from estate_portal.infrastructure.api.schemas import Page
from estate_portal.shared.errors import ServerError
from estate_portal.shared.logging import logger

ModelT = TypeVar("ModelT", bound=BaseModel)

Payload = BaseModel | Mapping[str, Any]
Files = list[tuple[str, tuple[str, bytes, str]]]


def to_wire(payload: Payload) -> dict[str, Any]:
    if isinstance(payload, BaseModel):
        return payload.model_dump(by_alias=True, exclude_none=True, mode="json")
    return {key: value for key, value in payload.items() if value is not None}


def to_form_value(value: Any) -> str | list[str]:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list | tuple):
        return [str(to_form_value(item)) for item in value]
    return str(value)


def to_form_fields(wire: Mapping[str, Any]) -> dict[str, str | list[str]]:
    return {key: to_form_value(value) for key, value in wire.items()}


def file_parts(field: str, uploads: Iterable[UploadedFile]) -> Files:
    return [(field, upload.as_multipart()) for upload in uploads]


class ResourceService(Generic[ModelT]):
    """One REST collection reached through the authenticated client.

    Subclasses set ``path`` and ``model``. ``envelope_key`` unwraps single
    item responses shaped like ``{"property": {...}}``.
    """

    path: ClassVar[str]
    model: ClassVar[type[BaseModel]]
    envelope_key: ClassVar[str | None] = None
    public_create: ClassVar[bool] = False

    def __init__(self, client: AuthenticatedClient) -> None:
        self._client = client

    @property
    def client(self) -> AuthenticatedClient:
        return self._client

    def item_path(self, item_id: str) -> str:
        return f"{self.path}/{item_id}"

    # --- response parsing ---------------------------------------------------

    def _json(self, response: httpx.Response) -> Any:
        raise_for_api_error(response)
        try:
            return response.json()
        except ValueError as exc:
            raise ServerError(
                "invalid_response",
                message="The server returned a response that is not JSON.",
                upstream_status=response.status_code,
            ) from exc

    def _invalid(self, exc: PydanticValidationError, status: int) -> ServerError:
        logger.warning(
            f"api: {self.path} response did not match {self.model.__name__}: "
            f"{exc.error_count()} error(s)"
        )
        return ServerError(
            "invalid_response",
            message="The server returned data in an unexpected shape.",
            upstream_status=status,
        )

    def parse_item(self, response: httpx.Response) -> ModelT:
        body = self._json(response)
        if self.envelope_key and isinstance(body, dict) and isinstance(body.get(self.envelope_key), dict):
            body = body[self.envelope_key]
        try:
            return self.model.model_validate(body)  # type: ignore[return-value]
        except PydanticValidationError as exc:
            raise self._invalid(exc, response.status_code) from exc

    def parse_page(self, response: httpx.Response) -> Page[ModelT]:
        body = self._json(response)
        try:
            if isinstance(body, list):
                return Page[self.model].single(  # type: ignore[name-defined]
                    [self.model.model_validate(item) for item in body]
                )
            if isinstance(body, dict) and "results" in body and "page" not in body:
                return Page[self.model].single(  # type: ignore[name-defined]
                    [self.model.model_validate(item) for item in body["results"] or []]
                )
            return Page[self.model].model_validate(body)  # type: ignore[name-defined]
        except PydanticValidationError as exc:
            raise self._invalid(exc, response.status_code) from exc

    # --- operations ---------------------------------------------------------

    async def list(self, filter: FilterLike = None, options: FilterLike = None) -> Page[ModelT]:
        response = await self._client.request(
            "GET", self.path, params=encode_list_query(filter, options)
        )
        return self.parse_page(response)

    async def get(self, item_id: str) -> ModelT:
        response = await self._client.request("GET", self.item_path(item_id))
        return self.parse_item(response)

    async def _write(
        self,
        method: str,
        path: str,
        payload: Payload,
        *,
        files: Files | None = None,
        public: bool = False,
    ) -> httpx.Response:
        wire = to_wire(payload)
        if files:
            return await self._client.request(
                method, path, data=to_form_fields(wire), files=files, public=public
            )
        return await self._client.request(method, path, json=wire, public=public)

    async def create(self, payload: Payload, *, files: Files | None = None) -> ModelT:
        response = await self._write(
            "POST", self.path, payload, files=files, public=self.public_create
        )
        return self.parse_item(response)

    async def update(self, item_id: str, payload: Payload, *, files: Files | None = None) -> ModelT:
        response = await self._write("PATCH", self.item_path(item_id), payload, files=files)
        return self.parse_item(response)

    async def delete(self, item_id: str) -> None:
        response = await self._client.request("DELETE", self.item_path(item_id))
        raise_for_api_error(response)


__all__ = [
    "Files",
    "ModelT",
    "Payload",
    "ResourceService",
    "file_parts",
    "to_form_fields",
    "to_form_value",
    "to_wire",
]
