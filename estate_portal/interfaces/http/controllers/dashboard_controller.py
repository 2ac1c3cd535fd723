# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Authenticated CRUD endpoints for the back-office collections."""

from __future__ import annotations

import io
import posixpath
from collections.abc import Callable, Coroutine
from time import perf_counter
from typing import TYPE_CHECKING, Any

from flask import Blueprint, Response, jsonify, request, send_file
from pydantic import BaseModel

from estate_portal.domain.uploads import UploadedFile
from estate_portal.interfaces.http.context import current_scope
from estate_portal.interfaces.http.dto.common import validate_form
from estate_portal.interfaces.http.dto.properties import PropertyFormDTO
from estate_portal.interfaces.http.guards import auth_required
from estate_portal.interfaces.http.query import parse_filter, parse_options
from estate_portal.interfaces.http.views import (
    application_view,
    dump,
    page_payload,
    property_view,
    uploaded_file,
)
from estate_portal.services import ApplicationService, PropertyService, ResourceService
from estate_portal.shared.errors import ValidationError
from estate_portal.shared.logging import logger
from estate_portal.utils.asyncio_utils import run_async

if TYPE_CHECKING:
    from estate_portal.container import SessionScope

ServiceResolver = Callable[["SessionScope"], Any]


class ResourceController:
    """List/get/create/update/delete for one collection under ``/api/dashboard``."""

    def __init__(
        self,
        name: str,
        *,
        service: ServiceResolver,
        filter_model: type[BaseModel],
        form: type[BaseModel] | None = None,
        creatable: bool = True,
        editable: bool = True,
    ) -> None:
        self._name = name
        self._resolve_service = service
        self._filter_model = filter_model
        self._form = form
        self._creatable = creatable and form is not None
        self._editable = editable and form is not None

    @property
    def name(self) -> str:
        return self._name

    @property
    def service(self) -> ResourceService[Any]:
        return self._resolve_service(current_scope())

    def view(self, item: Any) -> dict[str, Any]:
        return dump(item)

    def read_form(self) -> BaseModel:
        assert self._form is not None
        return validate_form(self._form, request.get_json(silent=True))

    def _create(self, form: Any) -> Coroutine[Any, Any, Any]:
        return self.service.create(form.to_request())

    def _update(self, item_id: str, form: Any) -> Coroutine[Any, Any, Any]:
        return self.service.update(item_id, form.to_request())

    @auth_required
    def list_items(self) -> Response:
        t0 = perf_counter()
        filter_ = parse_filter(request.args, self._filter_model)
        options = parse_options(request.args)
        page = run_async(self.service.list(filter_, options))
        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"dashboard.{self._name}.list: ok (n={len(page.results)}, "
            f"page={page.page}/{page.total_pages}, dt_ms={dt:.0f})"
        )
        return jsonify(page_payload(page, [self.view(item) for item in page.results]))

    @auth_required
    def get_item(self, item_id: str) -> Response:
        item = run_async(self.service.get(item_id))
        return jsonify(self.view(item))

    @auth_required
    def create_item(self) -> tuple[Response, int]:
        form = self.read_form()
        item = run_async(self._create(form))
        logger.info(f"dashboard.{self._name}.create: ok id={getattr(item, 'id', None)}")
        return jsonify(self.view(item)), 201

    @auth_required
    def update_item(self, item_id: str) -> Response:
        form = self.read_form()
        item = run_async(self._update(item_id, form))
        logger.info(f"dashboard.{self._name}.update: ok id={item_id}")
        return jsonify(self.view(item))

    @auth_required
    def delete_item(self, item_id: str) -> Response:
        run_async(self.service.delete(item_id))
        logger.info(f"dashboard.{self._name}.delete: ok id={item_id}")
        return jsonify({"ok": True})

    def extend_blueprint(self, bp: Blueprint) -> None:
        return None

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint(
            f"dashboard_{self._name.replace('-', '_')}",
            __name__,
            url_prefix=f"/api/dashboard/{self._name}",
        )
        bp.add_url_rule("", view_func=self.list_items, methods=["GET"])
        bp.add_url_rule("/<item_id>", view_func=self.get_item, methods=["GET"])
        if self._creatable:
            bp.add_url_rule("", view_func=self.create_item, methods=["POST"])
        if self._editable:
            bp.add_url_rule("/<item_id>", view_func=self.update_item, methods=["PATCH"])
        bp.add_url_rule("/<item_id>", view_func=self.delete_item, methods=["DELETE"])
        self.extend_blueprint(bp)
        return bp


class PropertiesController(ResourceController):
    """Properties accept multipart forms so images can travel with them."""

    def __init__(self, *, service: ServiceResolver, filter_model: type[BaseModel], max_images: int) -> None:
        super().__init__("properties", service=service, filter_model=filter_model, form=PropertyFormDTO)
        self._max_images = max_images

    @property
    def properties(self) -> PropertyService:
        return self._resolve_service(current_scope())

    def view(self, item: Any) -> dict[str, Any]:
        return property_view(item, self.properties.image_url)

    def read_form(self) -> BaseModel:
        if request.is_json:
            return validate_form(PropertyFormDTO, request.get_json(silent=True))
        data: dict[str, Any] = request.form.to_dict()
        property_types = request.form.getlist("propertyTypes[]") or request.form.getlist("propertyTypes")
        data.pop("propertyTypes[]", None)
        data["propertyTypes"] = property_types
        return validate_form(PropertyFormDTO, data)

    def _images(self) -> list[UploadedFile]:
        files = [f for f in request.files.getlist("images") if f and f.filename]
        if len(files) > self._max_images:
            raise ValidationError(
                "too_many_images",
                message=f"You can upload at most {self._max_images} images",
                context={"field": "images", "max": self._max_images},
            )
        return [uploaded_file(f) for f in files]

    def _create(self, form: Any) -> Coroutine[Any, Any, Any]:
        return self.properties.create(form.to_request(), images=self._images())

    def _update(self, item_id: str, form: Any) -> Coroutine[Any, Any, Any]:
        return self.properties.update(
            item_id,
            form.to_request(),
            images=self._images(),
            replace_images=form.replace_images,
        )


class ApplicationsController(ResourceController):
    """Applications are read and deleted here; they are created publicly."""

    def __init__(self, *, service: ServiceResolver, filter_model: type[BaseModel]) -> None:
        super().__init__(
            "applications",
            service=service,
            filter_model=filter_model,
            creatable=False,
            editable=False,
        )

    @property
    def applications(self) -> ApplicationService:
        return self._resolve_service(current_scope())

    def view(self, item: Any) -> dict[str, Any]:
        return application_view(item, self.applications.cv_download_url)

    @auth_required
    def download_cv(self, cv_path: str) -> Response:
        content = run_async(self.applications.fetch_cv(cv_path))
        logger.info(f"dashboard.applications.cv: ok bytes={len(content)}")
        return send_file(
            io.BytesIO(content),
            mimetype="application/pdf",
            as_attachment=True,
            download_name=posixpath.basename(cv_path) or "cv.pdf",
        )

    def extend_blueprint(self, bp: Blueprint) -> None:
        bp.add_url_rule("/cv/<path:cv_path>", view_func=self.download_cv, methods=["GET"])


__all__ = ["ApplicationsController", "PropertiesController", "ResourceController"]
