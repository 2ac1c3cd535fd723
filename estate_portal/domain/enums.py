# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum


class PropertyStatus(StrEnum):
    READY_TO_MOVE = "ready to move"
    OFF_PLAN = "off plan"
    FOR_RENT = "for rent"


class JobType(StrEnum):
    FULL_TIME = "full time"
    PART_TIME = "part time"


class CallDirection(StrEnum):
    INBOUND = "INBOUND"
    OUTBOUND = "OUTBOUND"


class ProfileType(StrEnum):
    FIRST_TIME_BUYER = "First-Time Buyer"
    BROKER_AGENT = "Broker/Agent"
    INVESTOR = "Investor"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"
