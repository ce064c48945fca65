"""HTTP implementation of CredentialAuthority."""

import asyncio
import base64
import time
from dataclasses import dataclass
from typing import Callable

import httpx
import structlog

from monnify_gateway.core.metrics import (
    record_login_failure,
    record_login_success,
    record_token_lookup,
    track_login_latency,
)
from monnify_gateway.domain.entities import BearerToken, Credentials
from monnify_gateway.domain.exceptions import (
    AuthenticationError,
    GatewayError,
    TransportError,
)
from monnify_gateway.domain.interfaces import CredentialAuthority

from .exchange import build_url, exchange

logger = structlog.get_logger(__name__)

LOGIN_PATH = "auth/login"


def encode_basic_auth(api_key: str, client_secret: str) -> str:
    """Return ``Basic base64(api_key:client_secret)``."""
    raw = f"{api_key}:{client_secret}".encode("utf-8")
    return f"Basic {base64.b64encode(raw).decode('ascii')}"


@dataclass(frozen=True)
class TokenCachePolicy:
    """
    How bearer tokens are reused.

    Attributes:
        enabled: When False every Bearer-scoped call logs in afresh
        leeway: Seconds before declared expiry at which a token is
            no longer served
    """

    enabled: bool = True
    leeway: float = 30.0


class HttpCredentialAuthority(CredentialAuthority):
    """
    Credential authority backed by the gateway's login endpoint.

    With caching enabled, a token is reused until its declared validity
    window (minus leeway) runs out, and concurrent misses share a single
    in-flight login. A failed login is delivered to every waiter and is
    not remembered; the next call logs in again.
    """

    def __init__(
        self,
        credentials: Credentials,
        http_client: httpx.AsyncClient,
        api_base_url: str,
        *,
        timeout: float | None = None,
        policy: TokenCachePolicy | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._credentials = credentials
        self._http_client = http_client
        self._api_base_url = api_base_url
        self._timeout = timeout
        self._policy = policy or TokenCachePolicy()
        self._clock = clock
        self._basic = encode_basic_auth(credentials.api_key, credentials.client_secret)

        self._token: BearerToken | None = None
        self._inflight: asyncio.Task[BearerToken] | None = None

    @property
    def policy(self) -> TokenCachePolicy:
        return self._policy

    def basic_auth(self) -> str:
        return self._basic

    async def login(self) -> BearerToken:
        """
        Exchange the Basic credential for a bearer token.

        Raises:
            AuthenticationError: If the call fails, the envelope reports
                failure, or the reply carries no access token
        """
        url = build_url(self._api_base_url, LOGIN_PATH)

        try:
            with track_login_latency():
                response = await exchange(
                    self._http_client,
                    "POST",
                    url,
                    authorization=self._basic,
                    body={},
                    timeout=self._timeout,
                )
        except GatewayError as e:
            record_login_failure()
            logger.warning(
                "login_failed",
                reason="gateway",
                status_code=e.status_code,
                response_code=e.response_code,
            )
            raise AuthenticationError(e.message, status_code=e.status_code) from e
        except TransportError as e:
            record_login_failure()
            logger.warning("login_failed", reason="transport", error=e.message)
            raise AuthenticationError(e.message, status_code=e.status_code) from e

        body = response.envelope.response_body
        access_token = body.get("accessToken") if isinstance(body, dict) else None
        if not access_token:
            record_login_failure()
            logger.warning("login_failed", reason="missing_token")
            raise AuthenticationError(
                response.envelope.response_message
                or "Login response did not include an access token",
                status_code=response.status_code,
            )

        expires_in = body.get("expiresIn")
        token = BearerToken(
            value=str(access_token),
            obtained_at=self._clock(),
            expires_in=float(expires_in) if expires_in is not None else None,
        )

        record_login_success()
        logger.info("login_succeeded", expires_in=token.expires_in)
        return token

    async def bearer_token(self) -> BearerToken:
        """Return a token that is valid now, logging in when needed."""
        if not self._policy.enabled:
            record_token_lookup("disabled")
            return await self.login()

        token = self._token
        if token is not None and token.is_valid(self._clock(), self._policy.leeway):
            record_token_lookup("hit")
            return token

        if self._inflight is None:
            record_token_lookup("miss")
            self._token = None
            self._inflight = asyncio.ensure_future(self._refresh())
            self._inflight.add_done_callback(_consume_exception)
        else:
            record_token_lookup("coalesced")
            logger.debug("login_coalesced")

        # Shielded so that one cancelled caller does not abort the shared login
        return await asyncio.shield(self._inflight)

    async def bearer_auth(self) -> str:
        token = await self.bearer_token()
        return token.header

    def invalidate(self) -> None:
        self._token = None

    async def _refresh(self) -> BearerToken:
        try:
            token = await self.login()
            if token.expires_in is not None:
                self._token = token
            return token
        finally:
            self._inflight = None


def _consume_exception(task: asyncio.Task) -> None:
    # Retrieve the outcome even when every waiter was cancelled
    if not task.cancelled():
        task.exception()
