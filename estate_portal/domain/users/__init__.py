# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Session, User, format_expiry, parse_expiry
from .repositories import Clock, SessionStorage

__all__ = ["Clock", "Session", "SessionStorage", "User", "format_expiry", "parse_expiry"]
