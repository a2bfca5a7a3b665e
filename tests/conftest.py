"""
Pytest configuration and fixtures for the Twitch OAuth tests.
"""

from collections.abc import AsyncGenerator
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from starlette.middleware.sessions import SessionMiddleware

from tests.mock_provider import MockProvider
from twitch_oauth import OAuthPathOptions, setup_twitch_oauth_path

CLIENT_ID = "thisisaclientid"
CLIENT_SECRET = "thisisaclientsecret"
BASE_URL = "http://testserver"
REDIRECT_URI = f"{BASE_URL}/auth"
TOKEN_URL = "http://provider/token"
AUTHORIZE_URL = "http://provider/authorize"

ACCESS_TOKEN_REPLY = {
    "access_token": "AT1",
    "refresh_token": "RT1",
    "expires_in": 3600,
    "scope": ["x"],
    "token_type": "bearer",
}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served"""

    def __init__(self, handler: Callable[[httpx.Request], Any]):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def json_reply(body: Any, status_code: int = 200) -> RecordingTransport:
    """Transport answering every request with the same JSON body"""
    return RecordingTransport(lambda request: httpx.Response(status_code, json=body))


class CallbackRecorder:
    """Continuation and error handler that remember their invocations"""

    def __init__(self):
        self.tokens: List[Any] = []
        self.errors: List[Exception] = []

    def callback(self, request, token_info):
        self.tokens.append(token_info)
        return None

    def error_handler(self, request, error):
        self.errors.append(error)
        return f"handled: {type(error).__name__}"


def build_host_app(
    transport: Optional[httpx.AsyncBaseTransport] = None,
    with_sessions: bool = True,
    **overrides: Any,
) -> FastAPI:
    """Minimal host application with the OAuth path mounted on /auth"""
    recorder = overrides.pop("recorder", None) or CallbackRecorder()
    kwargs: Dict[str, Any] = dict(
        redirect_uri=REDIRECT_URI,
        client_id=CLIENT_ID,
        client_secret=CLIENT_SECRET,
        callback=recorder.callback,
        error_handler=recorder.error_handler,
        scopes=("user:read:email", "channel:read:subscriptions"),
        token_url=TOKEN_URL,
        authorize_url=AUTHORIZE_URL,
        transport=transport,
    )
    kwargs.update(overrides)

    app = FastAPI()
    if with_sessions:
        app.add_middleware(SessionMiddleware, secret_key="aioghuihdg89hf783hjhrbhc89")
    setup_twitch_oauth_path(app, OAuthPathOptions(**kwargs))
    app.state.recorder = recorder
    return app


def client_for(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL)


async def start_flow(client: AsyncClient) -> str:
    """Hit the OAuth path without a code and return the state it issued"""
    response = await client.get("/auth")
    assert response.status_code == 307
    location = httpx.URL(response.headers["location"])
    return location.params["state"]


@pytest.fixture
def recorder() -> CallbackRecorder:
    return CallbackRecorder()


@pytest.fixture
def provider() -> MockProvider:
    return MockProvider(CLIENT_ID, CLIENT_SECRET)


@pytest.fixture
def provider_transport(provider: MockProvider) -> ASGITransport:
    return ASGITransport(app=provider.app)


@pytest_asyncio.fixture
async def example_client(provider_transport) -> AsyncGenerator[AsyncClient, None]:
    """Client for the example server wired to the mock provider"""
    from server.app import create_app

    app = create_app(
        client_id=CLIENT_ID,
        client_secret=CLIENT_SECRET,
        redirect_uri=REDIRECT_URI,
        scopes=["user:read:email"],
        force_verify=False,
        token_url=TOKEN_URL,
        authorize_url=AUTHORIZE_URL,
        session_secret="test-session-secret",
        transport=provider_transport,
    )
    async with client_for(app) as client:
        yield client
