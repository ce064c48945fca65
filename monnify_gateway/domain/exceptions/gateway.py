"""Exceptions for failures reported by the gateway itself."""

from typing import Any

from .base import MonnifyException


class GatewayError(MonnifyException):
    """
    Raised when the response envelope reports a business failure.

    Attributes:
        body: The envelope's responseBody if present, else its
            responseMessage, exactly as returned by the gateway
        status_code: HTTP status of the response
        response_code: The envelope's responseCode, when present
    """

    def __init__(
        self,
        message: str,
        body: Any = None,
        status_code: int | None = None,
        response_code: str | None = None,
    ):
        super().__init__(
            message=message,
            code="GATEWAY_ERROR",
        )
        self.body = body
        self.status_code = status_code
        self.response_code = response_code


class InvalidRequestError(MonnifyException):
    """Raised when an operation's input fails validation before any I/O."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_REQUEST",
        )
