# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""JSON shapes returned by the web layer."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from werkzeug.datastructures import FileStorage

from estate_portal.domain.fields import text_or_default
from estate_portal.domain.uploads import UploadedFile
from estate_portal.infrastructure.api.schemas import Application, Page, Property

from .pagination import build_pagination


def dump(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(by_alias=True, exclude_none=True, mode="json")


def page_payload(page: Page[Any], items: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    controls = build_pagination(page.page, page.total_pages, page.total_results, page.limit)
    return {
        "results": items if items is not None else [dump(item) for item in page.results],
        "page": page.page,
        "limit": page.limit,
        "totalPages": page.total_pages,
        "totalResults": page.total_results,
        "pagination": controls.to_dict() if controls else None,
    }


def property_view(item: Property, image_url) -> dict[str, Any]:
    """Property with preview URLs and display text for loosely typed fields."""

    data = dump(item)
    data["imageUrls"] = [image_url(path) for path in item.images]
    data["display"] = {
        "sizeArea": text_or_default(item.size_area, "N/A"),
        "size": text_or_default(item.size, "N/A"),
        "handoverBy": text_or_default(item.handover_by, "N/A"),
        "locationIframe": text_or_default(item.location_iframe),
    }
    return data


def application_view(item: Application, cv_download_url) -> dict[str, Any]:
    data = dump(item)
    data["jobName"] = item.job_name
    if item.uploaded_cv_path:
        data["cvDownloadUrl"] = cv_download_url(item.uploaded_cv_path)
    return data


def uploaded_file(storage: FileStorage) -> UploadedFile:
    return UploadedFile(
        filename=storage.filename or "upload",
        content_type=storage.mimetype or "application/octet-stream",
        content=storage.read(),
    )


__all__ = [
    "application_view",
    "dump",
    "page_payload",
    "property_view",
    "uploaded_file",
]
