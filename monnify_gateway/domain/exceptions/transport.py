"""Transport-level exceptions."""

from .base import MonnifyException


class TransportError(MonnifyException):
    """Raised when the gateway cannot be reached or its reply cannot be read."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="TRANSPORT_ERROR",
        )
        self.status_code = status_code


class TransportTimeoutError(TransportError):
    """Raised when a gateway call exceeds the configured timeout."""

    def __init__(self, timeout: float | None = None):
        message = "Gateway request timed out"
        if timeout is not None:
            message = f"{message} after {timeout}s"
        super().__init__(message=message)
        self.code = "TRANSPORT_TIMEOUT"
        self.timeout = timeout
