"""Authentication exceptions."""

from .base import MonnifyException


class AuthenticationError(MonnifyException):
    """Raised when the login call fails or yields no usable token."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="AUTHENTICATION_FAILED",
        )
        self.status_code = status_code
