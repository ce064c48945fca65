"""
Integration tests for resilience and error handling.

These tests verify:
1. Network failures and timeouts surface as TransportError
2. Unreadable responses surface as TransportError
3. No call is ever retried
4. Cancelling an operation aborts its in-flight call only
"""

import asyncio

import httpx
import pytest

from monnify_gateway.client import MonnifyClient
from monnify_gateway.domain.entities import HttpMethod, RequestEnvelope
from monnify_gateway.domain.exceptions import (
    GatewayError,
    MonnifyException,
    TransportError,
    TransportTimeoutError,
)

from tests.integration.conftest import MockGateway, envelope


def get(path: str) -> RequestEnvelope:
    return RequestEnvelope(method=HttpMethod.GET, path=path)


# =============================================================================
# Transport Failure Tests
# =============================================================================

class TestTransportFailure:
    """Tests for failures below the envelope."""

    @pytest.mark.asyncio
    async def test_connection_error_raises_transport_error(
        self, client: MonnifyClient, gateway: MockGateway
    ):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        gateway.route("GET", "things", handler=refuse)

        with pytest.raises(TransportError) as exc_info:
            await client.dispatcher.send(get("things"))

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        assert exc_info.value.code == "TRANSPORT_ERROR"

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_timeout(
        self, client: MonnifyClient, gateway: MockGateway
    ):
        def time_out(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("read timed out", request=request)

        gateway.route("GET", "things", handler=time_out)

        with pytest.raises(TransportTimeoutError) as exc_info:
            await client.dispatcher.send(get("things"))

        assert isinstance(exc_info.value, TransportError)
        assert exc_info.value.code == "TRANSPORT_TIMEOUT"
        assert exc_info.value.timeout == 5.0

    @pytest.mark.asyncio
    async def test_error_status_without_body_raises_transport_error(
        self, client: MonnifyClient, gateway: MockGateway
    ):
        gateway.route(
            "GET",
            "things",
            handler=lambda request: httpx.Response(502, text="<html>Bad Gateway</html>"),
        )

        with pytest.raises(TransportError) as exc_info:
            await client.dispatcher.send(get("things"))

        assert exc_info.value.status_code == 502
        assert not isinstance(exc_info.value, GatewayError)

    @pytest.mark.asyncio
    async def test_unparseable_success_raises_transport_error(
        self, client: MonnifyClient, gateway: MockGateway
    ):
        gateway.route(
            "GET",
            "things",
            handler=lambda request: httpx.Response(200, text="not json"),
        )

        with pytest.raises(TransportError):
            await client.dispatcher.send(get("things"))

    @pytest.mark.asyncio
    async def test_non_object_json_raises_transport_error(
        self, client: MonnifyClient, gateway: MockGateway
    ):
        gateway.route("GET", "things", [1, 2, 3])

        with pytest.raises(TransportError):
            await client.dispatcher.send(get("things"))

    @pytest.mark.asyncio
    async def test_empty_body_raises_transport_error(
        self, client: MonnifyClient, gateway: MockGateway
    ):
        gateway.route("GET", "things", handler=lambda request: httpx.Response(204))

        with pytest.raises(TransportError):
            await client.dispatcher.send(get("things"))

    @pytest.mark.asyncio
    async def test_every_failure_is_a_monnify_exception(
        self, client: MonnifyClient, gateway: MockGateway
    ):
        gateway.route("GET", "things", handler=lambda request: httpx.Response(500))

        with pytest.raises(MonnifyException):
            await client.dispatcher.send(get("things"))


# =============================================================================
# Retry Policy Tests
# =============================================================================

class TestNoRetries:
    """A single failure is terminal for the call."""

    @pytest.mark.asyncio
    async def test_transport_failure_is_not_retried(
        self, client: MonnifyClient, gateway: MockGateway
    ):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection reset", request=request)

        gateway.route("GET", "things", handler=refuse)

        with pytest.raises(TransportError):
            await client.dispatcher.send(get("things"))

        assert len(gateway.requests) == 1

    @pytest.mark.asyncio
    async def test_failed_disbursement_is_not_retried(
        self, client: MonnifyClient, gateway: MockGateway
    ):
        gateway.route(
            "POST",
            "disbursements/single",
            envelope(message="Insufficient balance", successful=False),
        )

        with pytest.raises(GatewayError):
            await client.disburse(
                reference="ref-1",
                amount=1000,
                bank_code="058",
                account_number="0123456789",
            )

        assert len(gateway.requests) == 1


# =============================================================================
# Cancellation Tests
# =============================================================================

class TestCancellation:
    """Cancelling one operation leaves concurrent ones untouched."""

    @pytest.mark.asyncio
    async def test_cancel_aborts_only_that_call(
        self, client: MonnifyClient, gateway: MockGateway
    ):
        release = asyncio.Event()

        async def slow(request: httpx.Request) -> httpx.Response:
            await release.wait()
            return httpx.Response(200, json=envelope(body={"path": "slow"}))

        gateway.route("GET", "slow", handler=slow)
        gateway.route("GET", "fast", envelope(body={"path": "fast"}))

        slow_task = asyncio.ensure_future(client.dispatcher.send(get("slow")))
        await asyncio.sleep(0.01)

        slow_task.cancel()
        result = await client.dispatcher.send(get("fast"))

        with pytest.raises(asyncio.CancelledError):
            await slow_task
        assert result == {"path": "fast"}
