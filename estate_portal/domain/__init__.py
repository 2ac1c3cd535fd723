# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .enums import CallDirection, JobType, ProfileType, PropertyStatus, SortOrder
from .fields import Known, Malformed, TextField, parse_text_field, text_or_default
from .uploads import UploadedFile

__all__ = [
    "CallDirection",
    "JobType",
    "Known",
    "Malformed",
    "ProfileType",
    "PropertyStatus",
    "SortOrder",
    "TextField",
    "UploadedFile",
    "parse_text_field",
    "text_or_default",
]
