# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .applications import Application, ApplicationCreate, ApplicationFilter, JobSummary
from .auth import AuthPayload, LoginCredentials, SignupCredentials, TokenInfo, Tokens, UserSchema
from .calls import Call, CallCreate, CallFilter
from .common import ApiModel, FlexibleText, ListOptions, MessageResponse, Number, Page
from .contact import ContactMessage
from .jobs import Job, JobCreate, JobFilter
from .properties import Property, PropertyFilter, PropertyWrite
from .property_types import (
    Category,
    CategoryCreate,
    CategoryFilter,
    PropertyType,
    PropertyTypeCreate,
    PropertyTypeFilter,
)
from .registrations import (
    PropertySummary,
    Registration,
    RegistrationCreate,
    RegistrationFilter,
)

__all__ = [
    "ApiModel",
    "Application",
    "ApplicationCreate",
    "ApplicationFilter",
    "AuthPayload",
    "Call",
    "CallCreate",
    "CallFilter",
    "Category",
    "CategoryCreate",
    "CategoryFilter",
    "ContactMessage",
    "FlexibleText",
    "Job",
    "JobCreate",
    "JobFilter",
    "JobSummary",
    "ListOptions",
    "LoginCredentials",
    "MessageResponse",
    "Number",
    "Page",
    "Property",
    "PropertyFilter",
    "PropertySummary",
    "PropertyType",
    "PropertyTypeCreate",
    "PropertyTypeFilter",
    "PropertyWrite",
    "Registration",
    "RegistrationCreate",
    "RegistrationFilter",
    "SignupCredentials",
    "TokenInfo",
    "Tokens",
    "UserSchema",
]
