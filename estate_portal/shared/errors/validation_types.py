# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum


class ValidationErrorType(StrEnum):
    MISSING = "missing"
    EMAIL_INVALID = "email_invalid"
    URL_INVALID = "url_invalid"
    NUMBER_NEGATIVE = "number_negative"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_MISMATCH = "password_mismatch"
    FILE_TYPE_INVALID = "file_type_invalid"
    FILE_TOO_LARGE = "file_too_large"
    RANGE_REQUIRED = "range_required"


__all__ = ["ValidationErrorType"]
