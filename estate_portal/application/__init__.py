# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session_store import SESSION_KEYS, SessionStore

__all__ = ["SESSION_KEYS", "SessionStore"]
