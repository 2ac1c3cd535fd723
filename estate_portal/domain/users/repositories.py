# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Protocol

Clock = Callable[[], datetime]


class SessionStorage(Protocol):
    """Persistent string key/value storage for session fields."""

    def get(self, key: str) -> str | None: ...

    def set_many(self, values: Mapping[str, str], *, remove: tuple[str, ...] = ()) -> None: ...

    def remove_many(self, keys: tuple[str, ...]) -> None: ...
