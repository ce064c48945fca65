"""Request and response envelopes exchanged with the gateway."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class AuthMode(str, Enum):
    """Authentication material a request is sent with."""

    BASIC = "basic"  # Static client credential
    BEARER = "bearer"  # Token from auth/login


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RequestEnvelope:
    """
    A single gateway call.

    Attributes:
        method: HTTP method
        path: Path relative to the versioned API root, e.g. "sub-accounts"
        query: Sparse query parameters; absent values are dropped on encoding
        body: JSON-serializable body, or None for no body
        auth_mode: Which auth material to attach
    """

    method: HttpMethod
    path: str
    query: Mapping[str, Any] | None = None
    body: Any = None
    auth_mode: AuthMode = AuthMode.BASIC


def is_present(value: Any) -> bool:
    """
    Check that a value is present and non-empty.

    None, empty strings and empty containers are absent. Zero and False
    are present values.
    """
    if value is None:
        return False
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) > 0
    return True


@dataclass(frozen=True)
class ResponseEnvelope:
    """
    The gateway's uniform response wrapper.

    Only the disbursement endpoints populate requestSuccessful, so an
    absent flag is read as success.
    """

    request_successful: bool = True
    response_body: Any = None
    response_message: str | None = None
    response_code: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ResponseEnvelope":
        successful = payload.get("requestSuccessful")
        response_code = payload.get("responseCode")
        return cls(
            request_successful=successful is not False,
            response_body=payload.get("responseBody"),
            response_message=payload.get("responseMessage"),
            response_code=str(response_code) if response_code is not None else None,
        )

    @property
    def result(self) -> Any:
        """responseBody when present and non-empty, else responseMessage."""
        if is_present(self.response_body):
            return self.response_body
        return self.response_message
