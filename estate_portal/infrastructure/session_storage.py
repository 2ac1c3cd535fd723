# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Persistent storage backends for session fields."""

from __future__ import annotations

import json
from collections.abc import Mapping
from http import HTTPStatus
from pathlib import Path
from threading import Lock

from estate_portal.domain.users import SessionStorage
from estate_portal.shared.config import load_config
from estate_portal.shared.errors import AppError
from estate_portal.shared.logging import logger
from estate_portal.utils.fs import read_json_dict, write_json_atomic


class SessionStorageError(AppError):
    def __init__(self, path: Path) -> None:
        super().__init__(
            code="session_storage_unavailable",
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message="Session storage could not be written.",
            context={"path": str(path)},
        )


class InMemorySessionStorage:
    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set_many(self, values: Mapping[str, str], *, remove: tuple[str, ...] = ()) -> None:
        for key in remove:
            self._values.pop(key, None)
        self._values.update(values)

    def remove_many(self, keys: tuple[str, ...]) -> None:
        for key in keys:
            self._values.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        return dict(self._values)


class FileSessionStorage:
    """JSON file backed storage; every write replaces the file atomically."""

    def __init__(self, path: str | Path | None = None) -> None:
        if path is None:
            path = load_config().session.file
        self._path = Path(path)
        self._lock = Lock()
        self._values = self._load()
        logger.debug(f"FileSessionStorage: initialized path={self._path} keys={len(self._values)}")

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        try:
            loaded = read_json_dict(self._path)
        except (OSError, json.JSONDecodeError):
            logger.warning(f"FileSessionStorage: unreadable file ignored path={self._path}")
            return {}
        return {str(key): str(value) for key, value in loaded.items() if value is not None}

    def _flush(self) -> None:
        try:
            write_json_atomic(self._path, self._values)
        except OSError as exc:
            logger.exception(f"FileSessionStorage: write failed path={self._path}")
            raise SessionStorageError(self._path) from exc

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._values.get(key)

    def set_many(self, values: Mapping[str, str], *, remove: tuple[str, ...] = ()) -> None:
        with self._lock:
            for key in remove:
                self._values.pop(key, None)
            self._values.update(values)
            self._flush()

    def remove_many(self, keys: tuple[str, ...]) -> None:
        with self._lock:
            removed = [key for key in keys if self._values.pop(key, None) is not None]
            if removed or self._path.exists():
                self._flush()
            logger.debug(f"FileSessionStorage: removed keys={removed}")


class NamespacedSessionStorage:
    """View of a shared backend holding one caller's keys as ``<namespace>:<key>``."""

    def __init__(self, backend: SessionStorage, namespace: str) -> None:
        if not namespace:
            raise ValueError("namespace must not be empty")
        self._backend = backend
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def get(self, key: str) -> str | None:
        return self._backend.get(self._key(key))

    def set_many(self, values: Mapping[str, str], *, remove: tuple[str, ...] = ()) -> None:
        self._backend.set_many(
            {self._key(key): value for key, value in values.items()},
            remove=tuple(self._key(key) for key in remove),
        )

    def remove_many(self, keys: tuple[str, ...]) -> None:
        self._backend.remove_many(tuple(self._key(key) for key in keys))


__all__ = [
    "FileSessionStorage",
    "InMemorySessionStorage",
    "NamespacedSessionStorage",
    "SessionStorageError",
]
