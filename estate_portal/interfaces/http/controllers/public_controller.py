# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Anonymous endpoints behind the public site."""

from __future__ import annotations

from time import perf_counter
from typing import Any

from flask import Blueprint, Response, jsonify, request

from estate_portal.infrastructure.api.schemas import ListOptions
from estate_portal.interfaces.http.context import current_scope
from estate_portal.interfaces.http.dto.applications import ApplicationDraft
from estate_portal.interfaces.http.dto.catalog import ContactFormDTO
from estate_portal.interfaces.http.dto.common import validate_form
from estate_portal.interfaces.http.dto.properties import PropertySearchDTO
from estate_portal.interfaces.http.dto.registrations import RegistrationFormDTO
from estate_portal.interfaces.http.query import parse_options
from estate_portal.interfaces.http.views import dump, page_payload, property_view, uploaded_file
from estate_portal.shared.logging import logger
from estate_portal.utils.asyncio_utils import run_async

CAREERS_PAGE_SIZE = 9
PROPERTIES_PAGE_SIZE = 12
CATEGORIES_LIMIT = 100


def _search_args() -> dict[str, Any]:
    data: dict[str, Any] = {
        key: value
        for key, value in request.args.items()
        if key not in {"propertyTypes", "page", "limit", "sortBy", "order", "options"}
    }
    data["propertyTypes"] = request.args.getlist("propertyTypes")
    return data


class PublicController:
    """Anonymous routes; each request uses the calling client's session scope."""

    def __init__(self, *, cv_max_bytes: int) -> None:
        self._cv_max_bytes = cv_max_bytes

    def search_properties(self) -> Response:
        t0 = perf_counter()
        search = validate_form(PropertySearchDTO, _search_args())
        options = parse_options(request.args, {"limit": PROPERTIES_PAGE_SIZE})
        properties = current_scope().properties
        page = run_async(properties.list(search.to_filter(), options))
        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"public.properties.search: ok (n={len(page.results)}, "
            f"total={page.total_results}, dt_ms={dt:.0f})"
        )
        items = [property_view(item, properties.image_url) for item in page.results]
        return jsonify(page_payload(page, items))

    def get_property(self, property_id: str) -> Response:
        properties = current_scope().properties
        item = run_async(properties.get(property_id))
        return jsonify(property_view(item, properties.image_url))

    def list_categories(self) -> Response:
        page = run_async(current_scope().categories.list({}, ListOptions(limit=CATEGORIES_LIMIT)))
        return jsonify({"results": [dump(item) for item in page.results]})

    def careers(self) -> Response:
        options = parse_options(
            request.args,
            {"limit": CAREERS_PAGE_SIZE, "sortBy": "creationDate", "order": "desc"},
        )
        page = run_async(current_scope().jobs.list({}, options))
        return jsonify(page_payload(page))

    def apply(self, job_id: str) -> tuple[Response, int]:
        draft = ApplicationDraft(job_id=job_id, cv_max_bytes=self._cv_max_bytes)
        cv = request.files.get("cv")
        if cv is not None and cv.filename:
            draft.attach_cv(uploaded_file(cv))

        form = draft.complete(request.form.to_dict())
        application = run_async(current_scope().applications.create(form.to_request(), cv=form.cv))
        logger.info(f"public.apply: ok job={job_id} application={application.id}")
        return jsonify(dump(application)), 201

    def register(self) -> tuple[Response, int]:
        form = validate_form(RegistrationFormDTO, request.get_json(silent=True))
        registration = run_async(current_scope().registrations.create(form.to_request()))
        logger.info(f"public.register: ok profile={form.profile_type}")
        return jsonify(dump(registration)), 201

    def contact(self) -> tuple[Response, int]:
        form = validate_form(ContactFormDTO, request.get_json(silent=True))
        result = run_async(current_scope().contact.send(form.to_request()))
        logger.info("public.contact: ok")
        return jsonify({"ok": True, "message": result.message}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("public", __name__, url_prefix="/api/public")
        bp.add_url_rule("/properties", view_func=self.search_properties, methods=["GET"])
        bp.add_url_rule("/properties/<property_id>", view_func=self.get_property, methods=["GET"])
        bp.add_url_rule("/categories", view_func=self.list_categories, methods=["GET"])
        bp.add_url_rule("/careers", view_func=self.careers, methods=["GET"])
        bp.add_url_rule("/careers/<job_id>/apply", view_func=self.apply, methods=["POST"])
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/contact", view_func=self.contact, methods=["POST"])
        return bp
