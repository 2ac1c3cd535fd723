# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from .common import ApiModel


class JobSummary(ApiModel):
    id: str
    name: str | None = None
    type: str | None = None
    location: str | None = None


class Application(ApiModel):
    id: str
    full_name: str
    email_address: str
    job_id: JobSummary | str | None = None
    years_of_experience: int | None = None
    linkedin_link: str | None = None
    cover_letter_text: str | None = None
    uploaded_cv_path: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def job_name(self) -> str | None:
        if isinstance(self.job_id, JobSummary):
            return self.job_id.name
        return None


class ApplicationFilter(ApiModel):
    full_name: str | None = None
    email_address: str | None = None
    job_id: str | None = None
    years_of_experience_min: int | None = None
    years_of_experience_max: int | None = None
    has_linkedin: bool | None = None
    has_cover_letter: bool | None = None


class ApplicationCreate(ApiModel):
    full_name: str
    email_address: str
    job_id: str
    years_of_experience: int
    linkedin_link: str | None = None
    cover_letter_text: str | None = None


__all__ = ["Application", "ApplicationCreate", "ApplicationFilter", "JobSummary"]
