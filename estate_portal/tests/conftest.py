from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import pytest

from estate_portal.application.session_store import SessionStore
from estate_portal.infrastructure.api import ApiEndpoint, AuthApiClient, AuthenticatedClient
from estate_portal.infrastructure.session_storage import InMemorySessionStorage

from .support import BASE_URL, NOW, ApiRecorder


@pytest.fixture()
def clock() -> Callable[[], datetime]:
    return lambda: NOW


@pytest.fixture()
def storage() -> InMemorySessionStorage:
    return InMemorySessionStorage()


@pytest.fixture()
def store(storage: InMemorySessionStorage, clock: Callable[[], datetime]) -> SessionStore:
    return SessionStore(storage, clock=clock).init()


@pytest.fixture()
def recorder() -> ApiRecorder:
    return ApiRecorder()


@pytest.fixture()
def endpoint(recorder: ApiRecorder) -> ApiEndpoint:
    return ApiEndpoint(base_url=BASE_URL, timeout=5.0, transport=recorder.transport)


@pytest.fixture()
def auth_api(endpoint: ApiEndpoint, store: SessionStore) -> AuthApiClient:
    return AuthApiClient(endpoint, store)


@pytest.fixture()
def api_client(endpoint: ApiEndpoint, store: SessionStore, auth_api: AuthApiClient) -> AuthenticatedClient:
    return AuthenticatedClient(endpoint, store, auth_api)
