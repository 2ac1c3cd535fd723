from __future__ import annotations

import json

import httpx
import pytest

from estate_portal.application.session_store import SessionStore
from estate_portal.application.use_cases.users import (
    LoginUserUseCase,
    LogoutUserUseCase,
    SignupUserUseCase,
)
from estate_portal.infrastructure.api import AuthApiClient
from estate_portal.infrastructure.api.schemas import LoginCredentials, SignupCredentials
from estate_portal.shared.errors import AuthError, ServerError

from .support import NOW, ApiRecorder, auth_body, make_session


@pytest.mark.asyncio
async def test_login_stores_session(
    auth_api: AuthApiClient, store: SessionStore, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(200, json=auth_body("a-1", "r-1"))
    use_case = LoginUserUseCase(auth_api=auth_api, sessions=store)

    user = await use_case.execute(LoginCredentials(email="agent@example.com", password="secret"))

    assert user.email == "agent@example.com"
    assert user.role == "admin"
    assert store.is_authenticated() is True
    assert store.access_token == "a-1"
    assert store.refresh_token == "r-1"
    assert store.user_email == "agent@example.com"

    sent = json.loads(recorder.requests[0].content)
    assert sent == {"email": "agent@example.com", "password": "secret"}
    assert recorder.paths() == [("POST", "/auth/login")]


@pytest.mark.asyncio
async def test_login_failure_uses_server_message(
    auth_api: AuthApiClient, store: SessionStore, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(
        401, json={"message": "Incorrect email or password"}
    )

    with pytest.raises(AuthError) as err:
        await auth_api.login(LoginCredentials(email="a@b.co", password="x"))

    assert err.value.code == "login_failed"
    assert err.value.message == "Incorrect email or password"
    assert store.session is None


@pytest.mark.asyncio
async def test_login_failure_without_message(
    auth_api: AuthApiClient, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(500, text="boom")

    with pytest.raises(AuthError) as err:
        await auth_api.login(LoginCredentials(email="a@b.co", password="x"))

    assert err.value.message == "Login failed"


@pytest.mark.asyncio
async def test_login_malformed_payload(auth_api: AuthApiClient, recorder: ApiRecorder) -> None:
    recorder.handler = lambda request: httpx.Response(200, json={"user": {"id": "u1"}})

    with pytest.raises(ServerError) as err:
        await auth_api.login(LoginCredentials(email="a@b.co", password="x"))

    assert err.value.code == "invalid_response"


@pytest.mark.asyncio
async def test_signup_sends_only_email_and_password(
    auth_api: AuthApiClient, store: SessionStore, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(201, json=auth_body(email="new@example.com"))
    use_case = SignupUserUseCase(auth_api=auth_api, sessions=store)

    user = await use_case.execute(
        SignupCredentials(email="new@example.com", password="password1", confirm_password="password1")
    )

    assert user.email == "new@example.com"
    assert json.loads(recorder.requests[0].content) == {
        "email": "new@example.com",
        "password": "password1",
    }
    assert store.is_authenticated() is True


@pytest.mark.asyncio
async def test_signup_failure(auth_api: AuthApiClient, recorder: ApiRecorder) -> None:
    recorder.handler = lambda request: httpx.Response(400, json={"message": "Email already taken"})

    with pytest.raises(AuthError) as err:
        await auth_api.signup(
            SignupCredentials(email="a@b.co", password="password1", confirm_password="password1")
        )

    assert err.value.code == "signup_failed"
    assert err.value.message == "Email already taken"


@pytest.mark.asyncio
async def test_refresh_without_token(auth_api: AuthApiClient, recorder: ApiRecorder) -> None:
    with pytest.raises(AuthError) as err:
        await auth_api.refresh()

    assert err.value.message == "No refresh token available"
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_refresh_sends_refresh_token(
    auth_api: AuthApiClient, store: SessionStore, recorder: ApiRecorder
) -> None:
    store.set_session(make_session(refresh="refresh-xyz"))
    recorder.handler = lambda request: httpx.Response(200, json=auth_body("a-2", "r-2", now=NOW))

    payload = await auth_api.refresh()

    assert json.loads(recorder.requests[0].content) == {"refreshToken": "refresh-xyz"}
    assert payload.to_session().access_token == "a-2"


@pytest.mark.asyncio
async def test_refresh_failure_message(
    auth_api: AuthApiClient, store: SessionStore, recorder: ApiRecorder
) -> None:
    store.set_session(make_session())
    recorder.handler = lambda request: httpx.Response(401)

    with pytest.raises(AuthError) as err:
        await auth_api.refresh()

    assert err.value.message == "Token refresh failed"


@pytest.mark.asyncio
async def test_logout_is_best_effort(
    auth_api: AuthApiClient, store: SessionStore, recorder: ApiRecorder
) -> None:
    store.set_session(make_session())

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("down", request=request)

    recorder.handler = handler

    await LogoutUserUseCase(auth_api=auth_api).execute()

    assert recorder.requests[0].headers["Authorization"] == "Bearer access-0"
    assert store.session is None
    assert store.user_email is None


@pytest.mark.asyncio
async def test_logout_without_session_skips_network(
    auth_api: AuthApiClient, store: SessionStore, recorder: ApiRecorder
) -> None:
    await auth_api.logout()

    assert recorder.requests == []
    assert store.session is None
