from __future__ import annotations

import json
from datetime import timedelta
from pathlib import Path

import pytest

from estate_portal.application.session_store import (
    ACCESS_EXPIRES_KEY,
    ACCESS_TOKEN_KEY,
    REFRESH_TOKEN_KEY,
    SESSION_KEYS,
    USER_DATA_KEY,
    USER_EMAIL_KEY,
    SessionStore,
)
from estate_portal.domain.users import Session, User
from estate_portal.infrastructure.session_storage import (
    FileSessionStorage,
    InMemorySessionStorage,
    NamespacedSessionStorage,
)

from .support import NOW, iso, make_session


def test_expiry_comparison(store: SessionStore) -> None:
    store.set_session(make_session(access_delta=-timedelta(seconds=1)))
    assert store.is_authenticated() is False

    store.set_session(make_session(access_delta=timedelta(minutes=5)))
    assert store.is_authenticated() is True

    store.set_session(make_session(access_delta=None))
    assert store.is_authenticated() is False


def test_expiry_equal_to_now_is_not_valid(store: SessionStore) -> None:
    store.set_session(make_session(access_delta=timedelta(0), refresh_delta=timedelta(0)))
    assert store.is_authenticated() is False
    assert store.is_refresh_token_valid() is False


def test_refresh_validity_is_independent_of_access(store: SessionStore) -> None:
    store.set_session(
        make_session(access_delta=-timedelta(hours=1), refresh_delta=timedelta(days=1))
    )
    assert store.is_authenticated() is False
    assert store.is_refresh_token_valid() is True


def test_missing_token_is_never_valid(store: SessionStore) -> None:
    store.set_session(
        Session(
            access_token=None,
            refresh_token=None,
            access_expires=NOW + timedelta(hours=1),
            refresh_expires=NOW + timedelta(days=1),
        )
    )
    assert store.is_authenticated() is False
    assert store.is_refresh_token_valid() is False


def test_set_session_persists_all_fields(
    store: SessionStore, storage: InMemorySessionStorage
) -> None:
    store.set_session(make_session())

    data = storage.snapshot()
    assert data[ACCESS_TOKEN_KEY] == "access-0"
    assert data[REFRESH_TOKEN_KEY] == "refresh-0"
    assert data[ACCESS_EXPIRES_KEY] == iso(NOW + timedelta(hours=1))
    assert data[USER_EMAIL_KEY] == "agent@example.com"
    assert json.loads(data[USER_DATA_KEY])["email"] == "agent@example.com"
    assert store.user_email == "agent@example.com"
    assert store.access_token == "access-0"


def test_set_session_overwrites_stale_fields(
    store: SessionStore, storage: InMemorySessionStorage
) -> None:
    store.set_session(make_session())
    store.set_session(
        Session(
            access_token="access-2",
            refresh_token=None,
            access_expires=NOW + timedelta(hours=1),
            refresh_expires=None,
        )
    )

    data = storage.snapshot()
    assert data[ACCESS_TOKEN_KEY] == "access-2"
    assert REFRESH_TOKEN_KEY not in data
    assert USER_EMAIL_KEY not in data
    assert store.user is None


def test_clear_session_is_idempotent(store: SessionStore, storage: InMemorySessionStorage) -> None:
    store.set_session(make_session())

    store.clear_session()
    store.clear_session()

    assert storage.snapshot() == {}
    assert store.session is None
    assert store.is_authenticated() is False


def test_init_restores_persisted_session(storage: InMemorySessionStorage, clock) -> None:
    SessionStore(storage, clock=clock).init().set_session(make_session())

    restored = SessionStore(storage, clock=clock).init()

    assert restored.is_authenticated() is True
    assert restored.user == User(id="u1", email="agent@example.com", name="Agent")


def test_init_ignores_corrupt_user_data(clock) -> None:
    storage = InMemorySessionStorage(
        {
            ACCESS_TOKEN_KEY: "tok",
            ACCESS_EXPIRES_KEY: iso(NOW + timedelta(hours=1)),
            USER_DATA_KEY: "{not json",
        }
    )

    store = SessionStore(storage, clock=clock).init()

    assert store.is_authenticated() is True
    assert store.user is None


def test_teardown_clears(store: SessionStore) -> None:
    store.set_session(make_session())
    store.teardown()
    assert store.session is None


def test_file_storage_round_trip(tmp_path: Path, clock) -> None:
    path = tmp_path / "nested" / "session.json"
    SessionStore(FileSessionStorage(path), clock=clock).init().set_session(make_session())

    on_disk = json.loads(path.read_text(encoding="utf-8"))
    assert set(on_disk) == set(SESSION_KEYS)

    restored = SessionStore(FileSessionStorage(path), clock=clock).init()
    assert restored.access_token == "access-0"

    restored.clear_session()
    assert json.loads(path.read_text(encoding="utf-8")) == {}


def test_file_storage_tolerates_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_text("{broken", encoding="utf-8")

    storage = FileSessionStorage(path)

    assert storage.get(ACCESS_TOKEN_KEY) is None


@pytest.mark.parametrize("raw", ["", "not a date", None])
def test_unusable_expiry_means_unauthenticated(raw, clock) -> None:
    values = {ACCESS_TOKEN_KEY: "tok"}
    if raw is not None:
        values[ACCESS_EXPIRES_KEY] = raw
    store = SessionStore(InMemorySessionStorage(values), clock=clock).init()
    assert store.is_authenticated() is False


def test_namespaced_sessions_share_a_backend_without_mixing(
    storage: InMemorySessionStorage, clock
) -> None:
    first = SessionStore(NamespacedSessionStorage(storage, "sid-a"), clock=clock).init()
    second = SessionStore(NamespacedSessionStorage(storage, "sid-b"), clock=clock).init()

    first.set_session(make_session(access="access-a"))

    assert second.is_authenticated() is False
    assert storage.get("sid-a:accessToken") == "access-a"
    assert storage.get(ACCESS_TOKEN_KEY) is None

    second.set_session(make_session(access="access-b"))
    second.clear_session()

    reloaded = SessionStore(NamespacedSessionStorage(storage, "sid-a"), clock=clock).init()
    assert reloaded.access_token == "access-a"
    assert all(key.startswith("sid-a:") for key in storage.snapshot())


def test_namespace_is_required(storage: InMemorySessionStorage) -> None:
    with pytest.raises(ValueError):
        NamespacedSessionStorage(storage, "")
