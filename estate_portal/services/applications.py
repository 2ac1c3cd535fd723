# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pathlib import Path

from estate_portal.domain.uploads import UploadedFile
from estate_portal.infrastructure.api import raise_for_api_error
from estate_portal.infrastructure.api.schemas import Application, ApplicationCreate
from estate_portal.shared.logging import logger
from estate_portal.utils.fs import save_atomic

from .base import ResourceService, to_form_fields, to_wire

CV_FIELD = "cv"


class ApplicationService(ResourceService[Application]):
    path = "/applications"
    model = Application
    public_create = True

    async def create(  # type: ignore[override]
        self, application: ApplicationCreate, *, cv: UploadedFile
    ) -> Application:
        """Anonymous job application with a single CV attachment."""

        response = await self.client.request(
            "POST",
            self.path,
            data=to_form_fields(to_wire(application)),
            files=[(CV_FIELD, cv.as_multipart())],
            public=True,
        )
        return self.parse_item(response)

    def cv_download_url(self, cv_path: str) -> str:
        return self.client.endpoint.url(f"/file/download/{cv_path}")

    async def fetch_cv(self, cv_path: str) -> bytes:
        response = await self.client.request("GET", f"/file/download/{cv_path}")
        raise_for_api_error(response)
        return response.content

    async def download_cv(self, cv_path: str, destination: str | Path) -> Path:
        content = await self.fetch_cv(cv_path)
        target = Path(destination)
        save_atomic(target, content)
        logger.info(f"applications: saved cv {cv_path} ({len(content)} bytes) to {target}")
        return target


__all__ = ["ApplicationService"]
