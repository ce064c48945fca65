"""
Fixtures for integration tests.

Provides:
- A scripted mock gateway served through httpx.MockTransport
- Settings and a MonnifyClient wired to the mock gateway
- A controllable monotonic clock for token expiry
"""

import asyncio
import inspect
import json
from typing import Any, AsyncGenerator, Awaitable, Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest
import pytest_asyncio

from monnify_gateway.client import MonnifyClient
from monnify_gateway.core.config import Settings


API_PREFIX = "/api/v1/"
BASE_URL = "https://sandbox.test"

Handler = Callable[[httpx.Request], Union[httpx.Response, Awaitable[httpx.Response]]]


def envelope(
    body: Any = None,
    message: Optional[str] = "success",
    successful: Optional[bool] = None,
    code: str = "0",
) -> Dict[str, Any]:
    """Build a gateway response envelope."""
    payload: Dict[str, Any] = {
        "responseMessage": message,
        "responseCode": code,
    }
    if body is not None:
        payload["responseBody"] = body
    if successful is not None:
        payload["requestSuccessful"] = successful
    return payload


# =============================================================================
# Mock Gateway
# =============================================================================

class MockGateway:
    """
    In-process stand-in for the gateway.

    Routes are keyed by (method, path relative to /api/v1/). Login calls
    are served separately and counted, issuing token-1, token-2, ...
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Union[httpx.Response, Handler]] = {}
        self.requests: List[httpx.Request] = []
        self.login_requests: List[httpx.Request] = []
        self.login_delay = 0.0
        self.login_expires_in: Optional[int] = 3600
        self.login_failure: Optional[httpx.Response] = None

    @property
    def login_calls(self) -> int:
        return len(self.login_requests)

    def route(
        self,
        method: str,
        path: str,
        payload: Any = None,
        status_code: int = 200,
        handler: Optional[Handler] = None,
    ) -> None:
        if handler is not None:
            self.routes[(method, path)] = handler
        else:
            self.routes[(method, path)] = httpx.Response(status_code, json=payload)

    def fail_login(self, status_code: int = 401, message: str = "Invalid credentials") -> None:
        self.login_failure = httpx.Response(
            status_code,
            json=envelope(message=message, successful=False, code="99"),
        )

    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request().content)

    async def handle(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        assert path.startswith(API_PREFIX), path
        path = path[len(API_PREFIX):]

        if request.method == "POST" and path == "auth/login":
            return await self._login(request)

        self.requests.append(request)

        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(
                404,
                json=envelope(message=f"No route for {path}", successful=False, code="404"),
            )
        if isinstance(route, httpx.Response):
            return httpx.Response(route.status_code, content=route.content, headers=route.headers)
        response = route(request)
        if inspect.isawaitable(response):
            response = await response
        return response

    async def _login(self, request: httpx.Request) -> httpx.Response:
        self.login_requests.append(request)
        number = len(self.login_requests)
        if self.login_delay:
            await asyncio.sleep(self.login_delay)

        if self.login_failure is not None:
            failure = self.login_failure
            return httpx.Response(failure.status_code, content=failure.content, headers=failure.headers)

        body: Dict[str, Any] = {"accessToken": f"token-{number}"}
        if self.login_expires_in is not None:
            body["expiresIn"] = self.login_expires_in
        return httpx.Response(200, json=envelope(body=body, successful=True))


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# =============================================================================
# Fixtures
# =============================================================================

def make_settings(**overrides: Any) -> Settings:
    values: Dict[str, Any] = {
        "api_key": "MK_TEST_KEY",
        "client_secret": "SECRET123",
        "contract_code": "1234567890",
        "wallet_id": "WALLET-1",
        "base_url": BASE_URL,
        "timeout": 5.0,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    """Settings for a sandbox client with token caching enabled."""
    return make_settings()


@pytest.fixture
def gateway() -> MockGateway:
    """Create a fresh mock gateway."""
    return MockGateway()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest_asyncio.fixture
async def client(
    settings: Settings,
    gateway: MockGateway,
    clock: FakeClock,
) -> AsyncGenerator[MonnifyClient, None]:
    """Create a MonnifyClient that talks to the mock gateway."""
    async with MonnifyClient(
        settings,
        transport=httpx.MockTransport(gateway.handle),
        clock=clock,
    ) as monnify:
        yield monnify


@pytest_asyncio.fixture
async def uncached_client(
    gateway: MockGateway,
    clock: FakeClock,
) -> AsyncGenerator[MonnifyClient, None]:
    """Create a MonnifyClient that logs in for every Bearer-scoped call."""
    async with MonnifyClient(
        make_settings(token_cache_enabled=False),
        transport=httpx.MockTransport(gateway.handle),
        clock=clock,
    ) as monnify:
        yield monnify


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Build sandbox settings with selected fields overridden."""
    return make_settings
