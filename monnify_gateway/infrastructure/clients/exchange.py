"""Single HTTP exchange with the gateway and envelope unwrapping."""

from dataclasses import dataclass
from typing import Any

import httpx

from monnify_gateway.domain.entities import ResponseEnvelope
from monnify_gateway.domain.exceptions import (
    GatewayError,
    TransportError,
    TransportTimeoutError,
)

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class GatewayResponse:
    """A successfully unwrapped gateway reply."""

    status_code: int
    envelope: ResponseEnvelope


def _parse_json(response: httpx.Response) -> dict[str, Any] | None:
    """Return the response body as a JSON object, or None if it is not one."""
    if not response.content:
        return None
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    return data


async def exchange(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    authorization: str,
    body: Any = None,
    timeout: float | None = None,
) -> GatewayResponse:
    """
    Perform one HTTP call and unwrap the response envelope.

    Args:
        client: Shared async HTTP client
        method: HTTP method
        url: Absolute URL including any query string
        authorization: Authorization header value
        body: JSON-serializable body, or None to send none
        timeout: Per-request timeout in seconds

    Returns:
        The status code and parsed envelope of a successful reply

    Raises:
        TransportTimeoutError: If the call timed out
        TransportError: On network failure or an unreadable reply
        GatewayError: If the status is non-2xx with a readable envelope,
            or the envelope reports requestSuccessful false
    """
    headers: dict[str, str] = {
        "Authorization": authorization,
        "Accept": JSON_CONTENT_TYPE,
    }
    request_kwargs: dict[str, Any] = {"headers": headers}
    if body is not None:
        headers["Content-Type"] = JSON_CONTENT_TYPE
        request_kwargs["json"] = body
    if timeout is not None:
        request_kwargs["timeout"] = timeout

    try:
        response = await client.request(method, url, **request_kwargs)
    except httpx.TimeoutException as e:
        raise TransportTimeoutError(timeout) from e
    except httpx.HTTPError as e:
        raise TransportError(f"Gateway request failed: {e}") from e

    payload = _parse_json(response)

    if payload is None:
        raise TransportError(
            message=(
                f"Unreadable gateway response ({response.status_code}): "
                f"{response.text[:200]}"
            ),
            status_code=response.status_code,
        )

    envelope = ResponseEnvelope.from_payload(payload)

    if response.is_error or not envelope.request_successful:
        raise _gateway_error(envelope, response.status_code)

    return GatewayResponse(status_code=response.status_code, envelope=envelope)


def _gateway_error(envelope: ResponseEnvelope, status_code: int) -> GatewayError:
    body = envelope.result
    message = envelope.response_message or f"Gateway request failed ({status_code})"
    return GatewayError(
        message=message,
        body=body,
        status_code=status_code,
        response_code=envelope.response_code,
    )


def build_url(api_base_url: str, path: str, query: str = "") -> str:
    """Join the versioned API root, a relative path and an encoded query."""
    url = f"{api_base_url.rstrip('/')}/{path.lstrip('/')}"
    if query:
        url = f"{url}?{query}"
    return url
