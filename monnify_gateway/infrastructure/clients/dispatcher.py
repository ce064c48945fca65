"""HTTP implementation of RequestDispatcher."""

from typing import Any

import httpx
import structlog

from monnify_gateway.core.metrics import record_request, track_request_latency
from monnify_gateway.domain.entities import AuthMode, RequestEnvelope
from monnify_gateway.domain.exceptions import (
    AuthenticationError,
    GatewayError,
    TransportError,
)
from monnify_gateway.domain.interfaces import CredentialAuthority, RequestDispatcher
from monnify_gateway.service.signing import encode_query

from .exchange import build_url, exchange

logger = structlog.get_logger(__name__)


class HttpRequestDispatcher(RequestDispatcher):
    """
    Dispatches request envelopes to the gateway over HTTP.

    Each send makes exactly one gateway call (plus a login when Bearer
    auth needs a token) and never retries: a failure is terminal for
    that call and retry policy belongs to the caller.
    """

    def __init__(
        self,
        authority: CredentialAuthority,
        http_client: httpx.AsyncClient,
        api_base_url: str,
        timeout: float | None = None,
    ):
        self._authority = authority
        self._http_client = http_client
        self._api_base_url = api_base_url
        self._timeout = timeout

    async def send(self, envelope: RequestEnvelope) -> Any:
        method = envelope.method.value
        auth_mode = envelope.auth_mode.value

        log = logger.bind(
            method=method,
            path=envelope.path,
            auth_mode=auth_mode,
        )

        try:
            authorization = await self._resolve_auth(envelope.auth_mode)
        except AuthenticationError:
            record_request(method, auth_mode, "authentication_error")
            log.warning("gateway_request_unauthenticated")
            raise

        url = build_url(
            self._api_base_url,
            envelope.path,
            encode_query(envelope.query),
        )

        log.debug("gateway_request_started")

        try:
            with track_request_latency(method):
                response = await exchange(
                    self._http_client,
                    method,
                    url,
                    authorization=authorization,
                    body=envelope.body,
                    timeout=self._timeout,
                )
        except GatewayError as e:
            if e.status_code == 401 and envelope.auth_mode == AuthMode.BEARER:
                # Revoked token; the next Bearer call logs in again
                self._authority.invalidate()
                log.info("bearer_token_invalidated")
            record_request(method, auth_mode, "gateway_error")
            log.warning(
                "gateway_request_failed",
                error_type="gateway",
                status_code=e.status_code,
                response_code=e.response_code,
                message=e.message,
            )
            raise
        except TransportError as e:
            record_request(method, auth_mode, "transport_error")
            log.warning(
                "gateway_request_failed",
                error_type=e.code.lower(),
                status_code=e.status_code,
                error=e.message,
            )
            raise

        record_request(method, auth_mode, "succeeded")
        log.info("gateway_request_succeeded", status_code=response.status_code)

        return response.envelope.result

    async def _resolve_auth(self, auth_mode: AuthMode) -> str:
        if auth_mode == AuthMode.BEARER:
            return await self._authority.bearer_auth()
        return self._authority.basic_auth()
