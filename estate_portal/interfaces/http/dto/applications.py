# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Job application form and CV checks."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ConfigDict, field_validator, model_validator
from pydantic_core import PydanticCustomError

from estate_portal.domain.uploads import UploadedFile
from estate_portal.infrastructure.api.schemas import ApplicationCreate
from estate_portal.shared.errors import ValidationError
from estate_portal.shared.errors.validation_types import ValidationErrorType

from .common import FormDTO, blank_to_none, missing, validate_form

CV_CONTENT_TYPE = "application/pdf"
CV_MAX_BYTES = 5 * 1024 * 1024
LINKEDIN_PATTERN = re.compile(r"^https?://(www\.)?linkedin\.com/")


def validate_cv(upload: UploadedFile, *, max_bytes: int = CV_MAX_BYTES) -> UploadedFile:
    if upload.content_type != CV_CONTENT_TYPE:
        raise ValidationError(
            "cv_invalid",
            message="Only PDF files are allowed for CV upload",
            context={"field": "cv", "type": str(ValidationErrorType.FILE_TYPE_INVALID)},
        )
    if upload.size > max_bytes:
        raise ValidationError(
            "cv_invalid",
            message="CV file size must be less than 5MB",
            context={
                "field": "cv",
                "type": str(ValidationErrorType.FILE_TOO_LARGE),
                "max_bytes": max_bytes,
            },
        )
    return upload


def _parse_years(raw: Any) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int | float):
        return int(raw)
    try:
        return int(float(str(raw).strip()))
    except ValueError:
        return None


class JobApplicationDTO(FormDTO):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    job_id: str | None = None
    full_name: str | None = None
    email_address: str | None = None
    years_of_experience: Any = None
    cv: UploadedFile | None = None
    linkedin_link: str | None = None
    cover_letter_text: str | None = None

    @field_validator("linkedin_link", "cover_letter_text", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> Any:
        return blank_to_none(value)

    @model_validator(mode="after")
    def _check_application(self) -> JobApplicationDTO:
        if not self.job_id:
            raise missing("jobId", "No job selected")
        if not (self.full_name or "").strip():
            raise missing("fullName", "Full name is required")
        if not (self.email_address or "").strip():
            raise missing("emailAddress", "Email address is required")
        years = _parse_years(self.years_of_experience)
        if years is None or years < 0:
            raise PydanticCustomError(
                ValidationErrorType.NUMBER_NEGATIVE,
                "Years of experience is required and must be 0 or greater",
                {"field": "yearsOfExperience"},
            )
        if self.cv is None:
            raise missing("cv", "CV upload is required")
        if self.linkedin_link and not LINKEDIN_PATTERN.match(self.linkedin_link):
            raise PydanticCustomError(
                ValidationErrorType.URL_INVALID,
                "Please provide a valid LinkedIn URL",
                {"field": "linkedinLink"},
            )

        self.full_name = (self.full_name or "").strip()
        self.email_address = (self.email_address or "").strip().lower()
        self.years_of_experience = years
        return self

    def to_request(self) -> ApplicationCreate:
        return ApplicationCreate(
            full_name=self.full_name or "",
            email_address=self.email_address or "",
            job_id=self.job_id or "",
            years_of_experience=self.years_of_experience,
            linkedin_link=self.linkedin_link,
            cover_letter_text=self.cover_letter_text,
        )


@dataclass(slots=True)
class ApplicationDraft:
    """A job application being filled in; holds the CV until submission."""

    job_id: str | None = None
    cv: UploadedFile | None = None
    cv_max_bytes: int = CV_MAX_BYTES

    def attach_cv(self, upload: UploadedFile) -> UploadedFile:
        validate_cv(upload, max_bytes=self.cv_max_bytes)
        self.cv = upload
        return upload

    def complete(self, form: Mapping[str, Any]) -> JobApplicationDTO:
        data = dict(form)
        data["jobId"] = self.job_id or data.get("jobId") or data.get("job_id")
        data.pop("job_id", None)
        data["cv"] = self.cv
        return validate_form(JobApplicationDTO, data)


__all__ = [
    "ApplicationDraft",
    "CV_CONTENT_TYPE",
    "CV_MAX_BYTES",
    "JobApplicationDTO",
    "LINKEDIN_PATTERN",
    "validate_cv",
]
