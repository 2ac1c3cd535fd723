# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .applications import ApplicationService
from .base import ResourceService
from .catalog import CallService, CategoryService, JobService, PropertyTypeService
from .properties import PropertyService
from .registrations import ContactService, RegistrationService

__all__ = [
    "ApplicationService",
    "CallService",
    "CategoryService",
    "ContactService",
    "JobService",
    "PropertyService",
    "PropertyTypeService",
    "RegistrationService",
    "ResourceService",
]
